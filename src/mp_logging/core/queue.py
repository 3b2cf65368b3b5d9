"""Core – DeliveryQueue used while deferred delivery is on."""
from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from mp_logging.core.entry import LogEntry

if TYPE_CHECKING:
    from mp_logging.core.logger import Logger


class DeliveryQueue:
    """Append-only buffer of ``(logger, entry)`` pairs, drained in arrival order.

    :meth:`drain` swaps the buffer out under the lock, so an append racing a
    drain lands either in the returned batch or in the next one, never both.
    """

    def __init__(self) -> None:
        self._items: list[tuple[Logger, LogEntry]] = []
        self._lock = threading.Lock()

    def append(self, logger: Logger, entry: LogEntry) -> None:
        with self._lock:
            self._items.append((logger, entry))

    def drain(self) -> list[tuple[Logger, LogEntry]]:
        """Return everything queued so far and leave the queue empty."""
        with self._lock:
            batch, self._items = self._items, []
        return batch

    def requeue(self, items: list[tuple[Logger, LogEntry]]) -> None:
        """Put *items* back ahead of anything queued since."""
        if not items:
            return
        with self._lock:
            self._items[:0] = items

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __bool__(self) -> bool:
        return len(self) > 0

    def __repr__(self) -> str:
        return f"DeliveryQueue(pending={len(self)})"


__all__ = ["DeliveryQueue"]
