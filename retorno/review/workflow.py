"""Lifecycle transitions applied while triaging customers."""
from __future__ import annotations

from dataclasses import dataclass, replace

from retorno.core.config import greeting_template
from retorno.core.models import CustomerRecord, Status
from retorno.ingestion.common import strip_illegal
from retorno.review.messaging import greeting_for, whatsapp_link


class InvalidTransition(ValueError):
    """Raised when an action does not apply to the record's current status."""

    def __init__(self, action: str, record: CustomerRecord) -> None:
        self.action = action
        self.record_id = record.record_id
        self.status = record.status
        super().__init__(f"Cannot {action} record {record.record_id} while status is {record.status.name}")


@dataclass(frozen=True)
class OpenLink:
    """Request to open a URL in a new browsing context."""

    url: str


@dataclass(frozen=True)
class SaveCursor:
    """Request to persist the navigator position."""

    position: int


def contact(record: CustomerRecord, template: str | None = None) -> tuple[CustomerRecord, OpenLink]:
    """Mark an untouched customer as contacted and build the WhatsApp request.

    The returned record is ``PENDING`` whether or not the link is ever opened.
    """

    if record.status is not Status.UNTOUCHED:
        raise InvalidTransition("contact", record)

    message = greeting_for(record.display_name, template or greeting_template())
    updated = replace(record, status=Status.PENDING, ever_contacted=True, reason="")
    return updated, OpenLink(whatsapp_link(record.phone, message))


def record_outcome(record: CustomerRecord, purchased: bool, reason: str | None = None) -> CustomerRecord:
    """Close a pending customer as purchased or not purchased."""

    if record.status is not Status.PENDING:
        raise InvalidTransition("record an outcome for", record)

    if purchased:
        return replace(record, status=Status.PURCHASED, reason="", ever_contacted=True)
    return replace(
        record,
        status=Status.NOT_PURCHASED,
        reason=strip_illegal(reason or "").strip(),
        ever_contacted=True,
    )
