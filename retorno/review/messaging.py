"""Outbound WhatsApp deep links."""
from __future__ import annotations

import re
from urllib.parse import quote

WHATSAPP_BASE_URL = "https://wa.me/"


def greeting_for(name: str, template: str) -> str:
    return template.replace("{name}", name)


def whatsapp_link(phone: str, message: str) -> str:
    """Build ``https://wa.me/<digits>?text=<message>`` for a customer.

    wa.me only accepts digits, so separators and the leading ``+`` are dropped.
    """

    digits = re.sub(r"\D", "", phone or "")
    return f"{WHATSAPP_BASE_URL}{digits}?text={quote(message, safe='')}"
