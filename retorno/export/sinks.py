"""Export the triaged roster back to a workbook."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable

from retorno.core.models import CustomerRecord
from retorno.ingestion.codec import SHEET_NAME, encode


def ensure_output_dir(output_path: Path) -> None:
    """Create parent folders for sink outputs when missing."""

    output_path.parent.mkdir(parents=True, exist_ok=True)


def export_roster(records: Iterable[CustomerRecord], sheet_name: str = SHEET_NAME) -> bytes:
    """Encode every record, whatever its status, into ``.xlsx`` bytes."""

    return encode((record.to_row() for record in records), sheet_name=sheet_name)


def write_excel(records: Iterable[CustomerRecord], output_path: Path, sheet_name: str = SHEET_NAME) -> Path:
    """Write the full roster workbook to disk."""

    ensure_output_dir(output_path)
    output_path.write_bytes(export_roster(records, sheet_name=sheet_name))
    return output_path
