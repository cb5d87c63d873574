"""Workbook codec: a named sheet to row dictionaries and back, via openpyxl."""
from __future__ import annotations

import io
import logging
from typing import Any, Dict, Iterable, List

from openpyxl import Workbook, load_workbook

from retorno.ingestion.common import strip_illegal

logger = logging.getLogger(__name__)

SHEET_NAME = "retorno"


class CodecError(Exception):
    """Base class for workbook decoding problems."""


class MissingSheet(CodecError):
    """The workbook is readable but lacks the expected sheet."""

    def __init__(self, sheet_name: str, available: Iterable[str] = ()) -> None:
        self.sheet_name = sheet_name
        self.available = list(available)
        super().__init__(f'Sheet "{sheet_name}" not found (available: {", ".join(self.available) or "none"})')


class DecodeFailure(CodecError):
    """The blob could not be opened as a workbook."""


def decode(blob: bytes, sheet_name: str = SHEET_NAME) -> List[Dict[str, Any]]:
    """Read ``sheet_name`` into a list of dicts keyed by the header row.

    Empty cells are omitted from each dict and fully empty rows are skipped,
    so a row only carries the columns that actually hold a value.
    """

    try:
        workbook = load_workbook(io.BytesIO(blob), read_only=True, data_only=True)
    except Exception as exc:  # openpyxl surfaces corrupt archives through many error types
        raise DecodeFailure(f"Could not read workbook: {exc}") from exc

    try:
        if sheet_name not in workbook.sheetnames:
            raise MissingSheet(sheet_name, workbook.sheetnames)

        lines = workbook[sheet_name].iter_rows(values_only=True)
        header = next(lines, None)
        if not header:
            return []
        columns = [(index, str(name)) for index, name in enumerate(header) if name is not None]
        names = [name for _, name in columns]
        repeated = sorted({name for name in names if names.count(name) > 1})
        if repeated:
            logger.warning(
                "Sheet %s repeats header(s) %s; only the last column of each is kept",
                sheet_name,
                ", ".join(repeated),
            )

        rows: List[Dict[str, Any]] = []
        for values in lines:
            row = {
                name: values[index]
                for index, name in columns
                if index < len(values) and values[index] is not None
            }
            if row:
                rows.append(row)
        return rows
    finally:
        workbook.close()


def _collect_headers(rows: List[Dict[str, Any]]) -> List[str]:
    headers: List[str] = []
    seen = set()
    for row in rows:
        for key in row:
            if key not in seen:
                seen.add(key)
                headers.append(key)
    return headers


def _cell_value(value: Any) -> Any:
    if isinstance(value, str):
        return strip_illegal(value)
    return value


def _append(sheet, values: List[Any]) -> None:
    """Append a row of literal values.

    Control characters Excel cannot store are dropped, and text starting with
    ``=`` stays text instead of becoming a formula.
    """

    sheet.append([_cell_value(value) for value in values])
    for cell in sheet[sheet.max_row]:
        if cell.data_type == "f":
            cell.data_type = "s"


def encode(rows: Iterable[Dict[str, Any]], sheet_name: str = SHEET_NAME) -> bytes:
    """Write rows into a single-sheet workbook and return the ``.xlsx`` bytes."""

    rows = list(rows)
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = sheet_name
    headers = _collect_headers(rows)
    if headers:
        _append(sheet, headers)
    for row in rows:
        _append(sheet, [row.get(header) for header in headers])

    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()
