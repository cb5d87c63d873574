"""Triage workflow: store, queues, navigation and lifecycle transitions."""
from retorno.review.cursor import JsonCursorStore
from retorno.review.navigator import Navigator
from retorno.review.queues import partition, pending_list, untouched_queue
from retorno.review.session import Phase, TriageSession, run_effects
from retorno.review.store import RecordStore
from retorno.review.workflow import InvalidTransition, OpenLink, SaveCursor, contact, record_outcome

__all__ = [
    "InvalidTransition",
    "JsonCursorStore",
    "Navigator",
    "OpenLink",
    "Phase",
    "RecordStore",
    "SaveCursor",
    "TriageSession",
    "contact",
    "partition",
    "pending_list",
    "record_outcome",
    "run_effects",
    "untouched_queue",
]
