"""Core building blocks for the retorno package."""
from retorno.core.logging import configure_logging
from retorno.core.models import CustomerRecord, Status

__all__ = [
    "configure_logging",
    "CustomerRecord",
    "Status",
]
