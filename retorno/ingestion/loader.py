"""Load the roster workbook and normalize its rows into customer records."""
from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path
from typing import Any, Dict, Iterable, List

from retorno.core.models import (
    CODE_COLUMNS,
    CONTACTED_COLUMN,
    DEFAULT_DISPLAY_NAME,
    NAME_COLUMNS,
    PHONE_COLUMN,
    PRODUCTS_COLUMN,
    REASON_COLUMN,
    RESULT_COLUMN,
    CustomerRecord,
    Status,
    first_present,
)
from retorno.ingestion.codec import SHEET_NAME, DecodeFailure, MissingSheet, decode
from retorno.ingestion.common import parse_flag, parse_status, stringify

logger = logging.getLogger(__name__)


def record_from_row(record_id: int, row: Dict[str, Any]) -> CustomerRecord:
    """Build a record from one decoded row, applying the load-time defaults."""

    status = parse_status(row.get(RESULT_COLUMN))
    if status is None:
        logger.warning(
            "Row %d has unknown %s label %r; treating it as untouched",
            record_id,
            RESULT_COLUMN,
            row.get(RESULT_COLUMN),
        )
        status = Status.UNTOUCHED

    ever_contacted = parse_flag(row.get(CONTACTED_COLUMN))
    if status is Status.PENDING:
        ever_contacted = True

    reason = stringify(row.get(REASON_COLUMN)) if status is Status.NOT_PURCHASED else ""
    name = first_present(row, NAME_COLUMNS)

    return CustomerRecord(
        record_id=record_id,
        code=stringify(first_present(row, CODE_COLUMNS)),
        display_name=stringify(name) if name is not None else DEFAULT_DISPLAY_NAME,
        phone=stringify(row.get(PHONE_COLUMN)),
        products=stringify(row.get(PRODUCTS_COLUMN)),
        status=status,
        reason=reason,
        ever_contacted=ever_contacted,
        fields=dict(row),
    )


def records_from_rows(rows: Iterable[Dict[str, Any]]) -> List[CustomerRecord]:
    """Normalize decoded rows; ids follow load order."""

    records = [record_from_row(index, row) for index, row in enumerate(rows)]

    codes = Counter(record.code for record in records if record.code)
    duplicates = sorted(code for code, count in codes.items() if count > 1)
    if duplicates:
        # Each row stays independently triage-able; this is informational.
        logger.warning("Roster has %d duplicated customer codes: %s", len(duplicates), ", ".join(duplicates))
    return records


def load_roster(source: Path | bytes, sheet_name: str = SHEET_NAME) -> tuple[List[Dict[str, Any]], List[str]]:
    """Decode the roster workbook into rows plus user-facing alerts.

    Missing sheets, unreadable files and absent paths all collapse to an empty
    roster with an alert; nothing is retried.
    """

    alerts: List[str] = []
    label = str(source) if isinstance(source, Path) else "uploaded workbook"
    logger.info("Loading roster from %s (sheet %s)", label, sheet_name)

    try:
        blob = source.read_bytes() if isinstance(source, Path) else source
        rows = decode(blob, sheet_name=sheet_name)
    except MissingSheet as exc:
        logger.warning("Roster sheet missing in %s: %s", label, exc)
        alerts.append(f'No se encontró la hoja "{sheet_name}"')
        return [], alerts
    except (DecodeFailure, OSError) as exc:
        logger.error("Failed to read roster %s: %s", label, exc)
        alerts.append(f"No se pudo leer el archivo Excel ({label})")
        return [], alerts

    if not rows:
        alerts.append(f'No se encontraron datos en la hoja "{sheet_name}"')
    logger.info("Loaded %d roster rows", len(rows))
    return rows, alerts
