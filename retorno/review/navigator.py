"""Cursor over the untouched queue."""
from __future__ import annotations

from typing import Callable, List, Optional

from retorno.core.models import CustomerRecord

QueueProvider = Callable[[], List[CustomerRecord]]


class Navigator:
    """Walks the untouched queue one customer at a time.

    The queue shrinks whenever a customer is contacted, so the position is
    re-clamped against the live queue length on every access.
    """

    def __init__(self, queue: QueueProvider, position: int = 0) -> None:
        self._queue = queue
        self._position = max(0, int(position))

    def _last_index(self) -> int:
        return max(0, len(self._queue()) - 1)

    @property
    def position(self) -> int:
        self._position = min(max(self._position, 0), self._last_index())
        return self._position

    def current(self) -> Optional[CustomerRecord]:
        """The customer under the cursor, or ``None`` once the queue is exhausted."""

        queue = self._queue()
        if not queue:
            return None
        return queue[self.position]

    def next(self) -> bool:
        """Advance one step; returns whether the cursor moved."""

        start = self.position
        self._position = min(start + 1, self._last_index())
        return self._position != start

    def prev(self) -> bool:
        start = self.position
        self._position = max(start - 1, 0)
        return self._position != start

    def restore(self, position: int) -> None:
        self._position = min(max(int(position), 0), self._last_index())
