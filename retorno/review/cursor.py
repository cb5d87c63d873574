"""Best-effort persistence of the last viewed queue position."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

CURSOR_KEY = "retorno.current_index"


class JsonCursorStore:
    """Tiny key-value file holding the navigator position between runs."""

    def __init__(self, path: Path, key: str = CURSOR_KEY) -> None:
        self.path = path
        self.key = key

    def read(self) -> Optional[int]:
        """Return the stored position, or ``None`` when nothing usable is saved."""

        if not self.path.exists():
            return None
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable cursor file %s: %s", self.path, exc)
            return None

        value = payload.get(self.key) if isinstance(payload, dict) else None
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            return None
        return value

    def write(self, position: int) -> None:
        payload = {}
        if self.path.exists():
            try:
                existing = json.loads(self.path.read_text(encoding="utf-8"))
                if isinstance(existing, dict):
                    payload = existing
            except (OSError, ValueError):
                logger.debug("Overwriting unreadable cursor file %s", self.path)
        payload[self.key] = int(position)

        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(payload), encoding="utf-8")
