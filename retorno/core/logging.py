"""Log setup for the roster CLI and the triage dashboard."""
from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Send ``retorno.*`` records to stderr at ``level`` or ``$LOG_LEVEL`` (INFO).

    openpyxl reports odd workbooks (unknown extensions, broken styles) through
    ``warnings``; those are routed into the same stream so an operator sees
    them next to the roster load alerts.
    """

    resolved_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(level=resolved_level, format=LOG_FORMAT)
    logging.captureWarnings(True)
