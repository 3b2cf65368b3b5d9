"""Core – ObserverRegistry, the multicast fan-out behind every logger.

Subscribers are kept in registration order, once per distinct object. A
broadcast takes a snapshot of the subscribers under the registry lock and
delivers outside it, so a callback may add or remove subscribers (including
itself) without deadlocking or disturbing the delivery in progress; changes
apply from the next broadcast on.
"""
from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any, Callable, Iterator, Protocol, Union, runtime_checkable

from mp_logging.core.entry import LogEntry
from mp_logging.observability import get_logger

if TYPE_CHECKING:
    from mp_logging.core.logger import Logger

_log = get_logger(__name__)


@runtime_checkable
class LogObserver(Protocol):
    """Port: receives every entry dispatched to the registry it is added to."""

    def on_log_event(self, logger: Logger, entry: LogEntry) -> None: ...


Subscriber = Union[LogObserver, Callable[["Logger", LogEntry], Any]]


class ObserverRegistry:
    """Ordered set of subscribers with isolated, re-entrant-safe broadcast.

    A subscriber is either a :class:`LogObserver` or a plain callable taking
    ``(logger, entry)``. Identity decides uniqueness: two equal-but-distinct
    objects are two subscribers.
    """

    def __init__(self) -> None:
        # id -> subscriber; the strong reference keeps the id from being reused
        self._subscribers: dict[int, Subscriber] = {}
        self._lock = threading.Lock()

    def add(self, subscriber: Subscriber) -> None:
        """Register *subscriber*; a second add of the same object is a no-op."""
        with self._lock:
            self._subscribers.setdefault(id(subscriber), subscriber)

    def remove(self, subscriber: Subscriber) -> None:
        """Deregister *subscriber*; unknown subscribers are ignored."""
        with self._lock:
            self._subscribers.pop(id(subscriber), None)

    def clear(self) -> None:
        with self._lock:
            self._subscribers.clear()

    def snapshot(self) -> list[Subscriber]:
        with self._lock:
            return list(self._subscribers.values())

    def broadcast(self, logger: Logger, entry: LogEntry) -> int:
        """Deliver *entry* to every subscriber, in registration order.

        A subscriber raising :class:`Exception` is skipped over; the failure is
        recorded on the diagnostics logger and delivery continues.

        Returns
        -------
        int
            Number of subscribers that accepted the entry without raising.
        """
        delivered = 0
        for subscriber in self.snapshot():
            try:
                _deliver(subscriber, logger, entry)
            except Exception:  # noqa: BLE001 – one subscriber must not starve the rest
                _log.warning(
                    "observer_failed",
                    observer=repr(subscriber),
                    category=entry.category,
                    severity=entry.severity.label,
                    exc_info=True,
                )
            else:
                delivered += 1
        return delivered

    def __len__(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def __contains__(self, subscriber: object) -> bool:
        with self._lock:
            return self._subscribers.get(id(subscriber)) is subscriber

    def __iter__(self) -> Iterator[Subscriber]:
        return iter(self.snapshot())

    def __repr__(self) -> str:
        return f"ObserverRegistry(subscribers={len(self)})"


def _deliver(subscriber: Subscriber, logger: Logger, entry: LogEntry) -> None:
    on_log_event = getattr(subscriber, "on_log_event", None)
    if on_log_event is not None:
        on_log_event(logger, entry)
    else:
        subscriber(logger, entry)  # type: ignore[operator]


__all__ = ["LogObserver", "ObserverRegistry", "Subscriber"]
