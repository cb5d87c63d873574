"""In-memory roster keyed by synthetic record ids."""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from retorno.core.models import CustomerRecord
from retorno.ingestion.loader import records_from_rows

logger = logging.getLogger(__name__)


class RecordStore:
    """Ordered roster for one operator session.

    Records are addressed by ``record_id`` rather than by object identity, so
    two structurally identical rows never shadow each other.
    """

    def __init__(self) -> None:
        self._order: List[int] = []
        self._records: Dict[int, CustomerRecord] = {}

    def load(self, rows: Iterable[Dict[str, Any]]) -> None:
        """Replace the whole roster with freshly normalized rows."""

        records = records_from_rows(rows)
        self._order = [record.record_id for record in records]
        self._records = {record.record_id: record for record in records}
        logger.info("Record store loaded with %d records", len(records))

    def get(self, record_id: int) -> Optional[CustomerRecord]:
        return self._records.get(record_id)

    def replace(self, record_id: int, new_record: CustomerRecord) -> bool:
        """Swap the record stored under ``record_id``.

        Returns ``False`` without touching the roster when the id is unknown;
        that only happens on an inconsistent caller and is logged as an error.
        """

        if record_id not in self._records:
            logger.error("Inconsistent store update: record %s is not in the roster", record_id)
            return False
        if new_record.record_id != record_id:
            logger.error(
                "Inconsistent store update: record %s cannot be replaced by record %s",
                record_id,
                new_record.record_id,
            )
            return False
        self._records[record_id] = new_record
        return True

    def all(self) -> Tuple[CustomerRecord, ...]:
        """Read-only snapshot in load order."""

        return tuple(self._records[record_id] for record_id in self._order)

    def __iter__(self) -> Iterator[CustomerRecord]:
        return iter(self.all())

    def __len__(self) -> int:
        return len(self._order)
