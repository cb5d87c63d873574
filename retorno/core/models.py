"""Data models for customers in the re-contact roster."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

RESULT_COLUMN = "Resultado"
REASON_COLUMN = "Motivo"
CONTACTED_COLUMN = "Aparecio"

CODE_COLUMNS = ("Codigo", "Codigo Cliente")
NAME_COLUMNS = ("Cliente", "Nombre")
PHONE_COLUMN = "Telefono"
PRODUCTS_COLUMN = "Productos"

DEFAULT_DISPLAY_NAME = "Cliente"
YES_LABEL = "Sí"
NO_LABEL = "No"


class Status(str, Enum):
    """Triage status of a customer; the value is the exported ``Resultado`` label."""

    UNTOUCHED = ""
    PENDING = "Pendiente"
    PURCHASED = "Compró"
    NOT_PURCHASED = "No compró"

    @property
    def label(self) -> str:
        return self.value


@dataclass
class CustomerRecord:
    """One roster row plus the triage state layered on top of it."""

    record_id: int
    code: str = ""
    display_name: str = DEFAULT_DISPLAY_NAME
    phone: str = ""
    products: str = ""
    status: Status = Status.UNTOUCHED
    reason: str = ""
    ever_contacted: bool = False
    fields: Dict[str, Any] = field(default_factory=dict)

    def to_row(self) -> Dict[str, Any]:
        """Return the spreadsheet row: passthrough columns plus updated triage columns."""

        row = dict(self.fields)
        row[RESULT_COLUMN] = self.status.label
        row[REASON_COLUMN] = self.reason if self.status is Status.NOT_PURCHASED else ""
        row[CONTACTED_COLUMN] = YES_LABEL if self.ever_contacted else NO_LABEL
        return row


def first_present(row: Dict[str, Any], columns: tuple[str, ...]) -> Optional[Any]:
    """Return the first non-empty value among ``columns``."""

    for column in columns:
        value = row.get(column)
        if value is None:
            continue
        if isinstance(value, str) and not value.strip():
            continue
        return value
    return None
