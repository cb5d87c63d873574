"""Read-only views over the roster, recomputed on every call."""
from __future__ import annotations

from typing import Dict, Iterable, List

from retorno.core.models import CustomerRecord, Status


def untouched_queue(records: Iterable[CustomerRecord]) -> List[CustomerRecord]:
    """Customers still waiting for a first contact, in load order."""

    return [record for record in records if record.status is Status.UNTOUCHED]


def matches_search(record: CustomerRecord, search: str) -> bool:
    term = (search or "").strip().lower()
    if not term:
        return True
    return term in record.display_name.lower() or term in record.code.lower()


def pending_list(records: Iterable[CustomerRecord], search: str = "") -> List[CustomerRecord]:
    """Contacted customers awaiting an outcome, optionally filtered by name or code."""

    return [
        record
        for record in records
        if record.status is Status.PENDING and matches_search(record, search)
    ]


def partition(records: Iterable[CustomerRecord]) -> Dict[Status, List[CustomerRecord]]:
    """Group the roster by status; every status key is present."""

    groups: Dict[Status, List[CustomerRecord]] = {status: [] for status in Status}
    for record in records:
        groups[record.status].append(record)
    return groups
