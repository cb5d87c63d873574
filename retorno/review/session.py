"""Operator session: dispatches triage actions and reports side effects."""
from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Union

from retorno.core.models import CustomerRecord, Status
from retorno.export.sinks import export_roster
from retorno.ingestion.codec import SHEET_NAME
from retorno.ingestion.loader import load_roster
from retorno.review.cursor import JsonCursorStore
from retorno.review.navigator import Navigator
from retorno.review.queues import partition, pending_list, untouched_queue
from retorno.review.store import RecordStore
from retorno.review.workflow import OpenLink, SaveCursor, contact, record_outcome

logger = logging.getLogger(__name__)

Effect = Union[OpenLink, SaveCursor]


class Phase(str, Enum):
    LOADING = "loading"
    READY = "ready"


class TriageSession:
    """Holds the roster, the cursor and the pending-list selection.

    Each action runs to completion and returns the side effects the caller
    should carry out (open a link, persist the cursor). Actions are ignored
    until the roster has been loaded.
    """

    def __init__(self, greeting: str | None = None, sheet_name: str = SHEET_NAME) -> None:
        self.store = RecordStore()
        self.navigator = Navigator(self.untouched_queue)
        self.phase = Phase.LOADING
        self.alerts: List[str] = []
        self.selected_id: Optional[int] = None
        self.greeting = greeting
        self.sheet_name = sheet_name

    @property
    def ready(self) -> bool:
        return self.phase is Phase.READY

    def load(self, rows: Iterable[Dict[str, Any]], alerts: Sequence[str] = (), cursor: int | None = None) -> None:
        self.store.load(rows)
        self.alerts = list(alerts)
        self.selected_id = None
        self.phase = Phase.READY
        self.navigator.restore(cursor or 0)

    def load_workbook(self, source: Path | bytes, cursor: int | None = None) -> None:
        """Decode a workbook and load it; failures leave an empty roster plus alerts."""

        rows, alerts = load_roster(source, sheet_name=self.sheet_name)
        self.load(rows, alerts=alerts, cursor=cursor)

    def _guard(self, action: str) -> bool:
        if not self.ready:
            logger.warning("Ignoring %s while the roster is still loading", action)
            return False
        return True

    def untouched_queue(self) -> List[CustomerRecord]:
        return untouched_queue(self.store)

    def pending_list(self, search: str = "") -> List[CustomerRecord]:
        return pending_list(self.store, search)

    def counts(self) -> Dict[Status, int]:
        return {status: len(records) for status, records in partition(self.store).items()}

    def current(self) -> Optional[CustomerRecord]:
        return self.navigator.current()

    def next(self) -> List[Effect]:
        if not self._guard("next") or not self.navigator.next():
            return []
        return [SaveCursor(self.navigator.position)]

    def prev(self) -> List[Effect]:
        if not self._guard("prev") or not self.navigator.prev():
            return []
        return [SaveCursor(self.navigator.position)]

    def contact(self, record_id: int) -> List[Effect]:
        """Move an untouched customer to pending and request the WhatsApp link."""

        if not self._guard("contact"):
            return []
        record = self.store.get(record_id)
        if record is None:
            logger.error("Cannot contact record %s: not in the roster", record_id)
            return []
        if record.status is not Status.UNTOUCHED:
            logger.warning("Record %s was already contacted; contact ignored", record_id)
            return []

        updated, link = contact(record, template=self.greeting)
        self.store.replace(record_id, updated)
        logger.info("Contacted record %s (%s)", record_id, record.display_name)
        return [link, SaveCursor(self.navigator.position)]

    def contact_current(self) -> List[Effect]:
        record = self.current() if self.ready else None
        if record is None:
            return []
        return self.contact(record.record_id)

    @property
    def selected(self) -> Optional[CustomerRecord]:
        if self.selected_id is None:
            return None
        return self.store.get(self.selected_id)

    def select(self, record_id: int) -> bool:
        """Pick a pending customer for the next outcome."""

        if not self._guard("select"):
            return False
        record = self.store.get(record_id)
        if record is None or record.status is not Status.PENDING:
            logger.warning("Record %s is not pending; selection ignored", record_id)
            return False
        self.selected_id = record_id
        return True

    def clear_selection(self) -> None:
        self.selected_id = None

    def record_outcome(self, purchased: bool, reason: str | None = None) -> bool:
        """Close the selected customer; a no-op when nothing is selected."""

        if not self._guard("record_outcome") or self.selected_id is None:
            return False

        record = self.selected
        self.selected_id = None
        if record is None or record.status is not Status.PENDING:
            logger.warning("Selected record is no longer pending; outcome discarded")
            return False

        updated = record_outcome(record, purchased, reason)
        stored = self.store.replace(record.record_id, updated)
        if stored:
            logger.info("Recorded outcome %s for record %s", updated.status.name, record.record_id)
        return stored

    def export(self) -> bytes:
        return export_roster(self.store.all(), sheet_name=self.sheet_name)


def run_effects(
    effects: Iterable[Effect],
    open_link: Callable[[str], Any] | None = None,
    cursor_store: JsonCursorStore | None = None,
) -> None:
    """Carry out effects after a transition; failures are logged, never raised."""

    for effect in effects:
        if isinstance(effect, OpenLink):
            if open_link is None:
                continue
            try:
                open_link(effect.url)
            except Exception as exc:  # the transition already happened; report only
                logger.warning("Could not open %s: %s", effect.url, exc)
        elif isinstance(effect, SaveCursor):
            if cursor_store is None:
                continue
            try:
                cursor_store.write(effect.position)
            except OSError as exc:
                logger.warning("Could not persist cursor position %d: %s", effect.position, exc)
