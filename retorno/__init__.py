"""Triage tool for re-contacting customers who stopped buying."""
from retorno.core import CustomerRecord, Status, configure_logging
from retorno.export import export_roster, write_excel
from retorno.ingestion import DecodeFailure, MissingSheet, decode, encode, load_roster
from retorno.review import (
    InvalidTransition,
    Navigator,
    RecordStore,
    TriageSession,
    contact,
    pending_list,
    record_outcome,
    run_effects,
    untouched_queue,
)

__all__ = [
    "CustomerRecord",
    "DecodeFailure",
    "InvalidTransition",
    "MissingSheet",
    "Navigator",
    "RecordStore",
    "Status",
    "TriageSession",
    "configure_logging",
    "contact",
    "decode",
    "encode",
    "export_roster",
    "load_roster",
    "pending_list",
    "record_outcome",
    "run_effects",
    "untouched_queue",
    "write_excel",
]
