"""Core – LoggingState, the process-wide side of the facade.

One :class:`LoggingState` holds everything "whoever last set it wins":
console switch and threshold, the active formatter, the process-wide
:class:`~mp_logging.core.registry.ObserverRegistry`, and the deferred
delivery flag with its :class:`~mp_logging.core.queue.DeliveryQueue`.

:func:`get_state` returns the process-wide instance. Tests build their own
``LoggingState`` and hand it to the loggers under test.

Deferred delivery
-----------------
While ``deferred_delivery`` is on, process-wide dispatch appends to the queue
instead of broadcasting. Switching it off flips the flag and drains the queue
in one step under the state lock, then delivers a ``debug`` "Flushing queued
log entries" entry from the default logger followed by each drained entry with
its originating logger as sender. Instance-scoped observers are never
deferred.

Observers always run outside the lock, so a slow observer only holds up the
thread that is delivering to it. The thread running a flush owns it until the
batch is out: live entries from other threads that arrive meanwhile are
parked and delivered by the owner right after the batch, and a second
switch-off racing the flush hands its own batch to the owner the same way.
Entries logged by the owner itself (from inside an observer) are delivered
immediately. An entry appended after the switch-off waits for the next flush.
"""
from __future__ import annotations

import sys
import threading
from typing import IO, TYPE_CHECKING

from mp_logging.core.entry import LogEntry, SourceLocation
from mp_logging.core.formatters import Formatter, default_formatter
from mp_logging.core.levels import Severity
from mp_logging.core.queue import DeliveryQueue
from mp_logging.core.registry import ObserverRegistry, Subscriber
from mp_logging.kernel.clock import Clock, SystemClock
from mp_logging.observability import get_logger

if TYPE_CHECKING:
    from mp_logging.core.logger import Logger

_log = get_logger(__name__)

FLUSH_MESSAGE = "Flushing queued log entries"
DEFAULT_LOGGER_CATEGORY = "default"


class LoggingState:
    """Process-wide logging configuration and dispatch.

    Parameters
    ----------
    console_logging_enabled:
        Master switch for the console sink.
    console_threshold:
        Entries below this severity are not printed (observers still get them).
    formatter:
        Renders an entry as one console line.
    stream:
        Console destination; ``None`` means whatever ``sys.stdout`` is at
        write time.
    clock:
        Timestamp source for new entries.
    """

    def __init__(
        self,
        *,
        console_logging_enabled: bool = True,
        console_threshold: Severity = Severity.INFO,
        formatter: Formatter = default_formatter,
        stream: IO[str] | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.console_logging_enabled = console_logging_enabled
        self.console_threshold = console_threshold
        self.formatter = formatter
        self.stream = stream
        self.clock: Clock = clock or SystemClock()
        self.observers = ObserverRegistry()
        self.queue = DeliveryQueue()
        self._deferred = False
        self._dispatch_lock = threading.Lock()
        self._console_lock = threading.Lock()
        self._default_logger: Logger | None = None
        # thread id of the flush in progress, and what it still has to deliver
        self._flush_owner: int | None = None
        self._backlog: list[tuple[Logger, LogEntry]] = []

    # ------------------------------------------------------------------
    # Process-wide observers
    # ------------------------------------------------------------------

    def add_observer(self, subscriber: Subscriber) -> None:
        self.observers.add(subscriber)

    def remove_observer(self, subscriber: Subscriber) -> None:
        self.observers.remove(subscriber)

    # ------------------------------------------------------------------
    # Deferred delivery
    # ------------------------------------------------------------------

    @property
    def deferred_delivery(self) -> bool:
        return self._deferred

    @deferred_delivery.setter
    def deferred_delivery(self, value: bool) -> None:
        value = bool(value)
        default = self.default_logger
        with self._dispatch_lock:
            was_deferred, self._deferred = self._deferred, value
            if not was_deferred or value or not self.queue:
                return
            notice = LogEntry(
                category=default.category,
                timestamp=self.clock.now(),
                severity=Severity.DEBUG,
                message=FLUSH_MESSAGE,
                source=SourceLocation.capture(2),
            )
            batch = [(default, notice), *self.queue.drain()]
            owns_flush = self._flush_owner is None
            if owns_flush:
                self._flush_owner = threading.get_ident()
            else:
                self._backlog.extend(batch)
        self.write_console(notice)
        default.observers.broadcast(default, notice)
        if owns_flush:
            self._run_flush(batch)

    @property
    def pending(self) -> int:
        """Entries waiting for the next flush."""
        return len(self.queue)

    def _run_flush(self, batch: list[tuple[Logger, LogEntry]]) -> None:
        try:
            while batch:
                for logger, entry in batch:
                    self.observers.broadcast(logger, entry)
                with self._dispatch_lock:
                    batch, self._backlog = self._backlog, []
                    if not batch:
                        self._flush_owner = None
        finally:
            if self._flush_owner == threading.get_ident():
                # interrupted mid-flush: give up ownership, keep parked entries
                with self._dispatch_lock:
                    self._flush_owner = None
                    leftover, self._backlog = self._backlog, []
                    self.queue.requeue(leftover)

    # ------------------------------------------------------------------
    # Default logger
    # ------------------------------------------------------------------

    @property
    def default_logger(self) -> Logger:
        """The ``"default"`` logger bound to this state, created on first use."""
        if self._default_logger is None:
            from mp_logging.core.logger import Logger

            with self._dispatch_lock:
                if self._default_logger is None:
                    self._default_logger = Logger(DEFAULT_LOGGER_CATEGORY, state=self)
        return self._default_logger

    # ------------------------------------------------------------------
    # Dispatch steps (called by Logger)
    # ------------------------------------------------------------------

    def write_console(self, entry: LogEntry) -> bool:
        """Print *entry* if the console is on and it meets the threshold.

        A formatter or stream failure is logged to the diagnostics logger and
        reported as ``False``; it never propagates.
        """
        if not self.console_logging_enabled or entry.severity < self.console_threshold:
            return False
        try:
            line = self.formatter(entry)
            stream = self.stream if self.stream is not None else sys.stdout
            with self._console_lock:
                stream.write(line + "\n")
                stream.flush()
        except Exception:  # noqa: BLE001 – console output is best-effort
            _log.warning(
                "console_write_failed",
                category=entry.category,
                severity=entry.severity.label,
                exc_info=True,
            )
            return False
        return True

    def dispatch(self, logger: Logger, entry: LogEntry) -> None:
        """Broadcast to process-wide observers now, or queue while deferred.

        While another thread is flushing, the entry is parked for that thread
        to deliver after its batch and this call returns at once.
        """
        with self._dispatch_lock:
            if self._deferred:
                self.queue.append(logger, entry)
                return
            owner = self._flush_owner
            if owner is not None and (owner != threading.get_ident() or self._backlog):
                self._backlog.append((logger, entry))
                return
        self.observers.broadcast(logger, entry)

    def __repr__(self) -> str:
        return (
            f"LoggingState(console={self.console_logging_enabled}, "
            f"threshold={self.console_threshold.label}, "
            f"deferred={self._deferred}, observers={len(self.observers)})"
        )


_state = LoggingState()
_state_lock = threading.Lock()


def get_state() -> LoggingState:
    """Return the process-wide :class:`LoggingState`."""
    return _state


def set_state(state: LoggingState) -> LoggingState:
    """Install *state* as the process-wide state and return the previous one.

    Loggers created without an explicit state follow the swap.
    """
    global _state
    with _state_lock:
        previous, _state = _state, state
    return previous


def default_logger() -> Logger:
    """Shorthand for ``get_state().default_logger``."""
    return get_state().default_logger


__all__ = [
    "DEFAULT_LOGGER_CATEGORY",
    "FLUSH_MESSAGE",
    "LoggingState",
    "default_logger",
    "get_state",
    "set_state",
]
