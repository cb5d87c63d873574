"""Shared helpers for turning raw spreadsheet cells into roster values."""
from __future__ import annotations

import re
from typing import Any

from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE

from retorno.core.models import Status

_STATUS_BY_LABEL = {
    "pendiente": Status.PENDING,
    "compró": Status.PURCHASED,
    "compro": Status.PURCHASED,
    "no compró": Status.NOT_PURCHASED,
    "no compro": Status.NOT_PURCHASED,
}

_TRUTHY = {"sí", "si", "yes", "true", "1", "x"}


def strip_illegal(text: str) -> str:
    """Drop control characters that cannot be stored in a worksheet cell."""

    return ILLEGAL_CHARACTERS_RE.sub("", text)


def stringify(value: Any) -> str:
    """Best-effort text for identifiers and phone numbers read from Excel.

    Numeric cells come back as ``int`` or ``float``; integral floats lose
    their trailing ``.0`` so ``5491122334455.0`` becomes ``"5491122334455"``.
    """

    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def parse_status(raw: Any) -> Status | None:
    """Map a ``Resultado`` label to a status.

    Empty values mean the customer was never triaged. Returns ``None`` for
    labels that are not recognised so the caller can decide how to report it.
    """

    text = stringify(raw)
    if not text:
        return Status.UNTOUCHED
    # Earlier exports decorated labels with emoji ("Compró ✅").
    normalized = re.sub(r"[^\w\s]+$", "", text).strip().casefold()
    normalized = " ".join(normalized.split())
    return _STATUS_BY_LABEL.get(normalized)


def parse_flag(raw: Any) -> bool:
    """Interpret an ``Aparecio`` cell; missing values read as ``"No"``."""

    if isinstance(raw, bool):
        return raw
    if isinstance(raw, (int, float)):
        return raw == 1
    return stringify(raw).casefold() in _TRUTHY
