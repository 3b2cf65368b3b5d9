"""Core – Logger, the facade call sites talk to.

Usage::

    from mp_logging.core import Logger

    log = Logger("payments")
    log.info("charge accepted")
    log.error("charge failed", error=exc, subject=gateway)

Each call builds one :class:`~mp_logging.core.entry.LogEntry` and, in order:

1. prints it if console output is on and it meets the console threshold;
2. broadcasts it to this logger's own observers;
3. hands it to the process-wide state, which broadcasts it now or queues it
   while deferred delivery is on.

A failing formatter, stream or observer is isolated to its own step; a log
call never raises.
"""
from __future__ import annotations

from typing import Any

from mp_logging.core.entry import LogEntry, SourceLocation
from mp_logging.core.levels import Severity
from mp_logging.core.registry import ObserverRegistry, Subscriber
from mp_logging.core.state import LoggingState, get_state


class Logger:
    """A logging channel: a category plus its own observer registry.

    Parameters
    ----------
    category:
        Default category stamped on entries from this logger.
    state:
        Process-wide state to dispatch through. When omitted the logger
        follows :func:`~mp_logging.core.state.get_state` at each call.
    """

    def __init__(self, category: str, *, state: LoggingState | None = None) -> None:
        self._category = category
        self._state = state
        self.observers = ObserverRegistry()

    @property
    def category(self) -> str:
        return self._category

    @property
    def state(self) -> LoggingState:
        return self._state if self._state is not None else get_state()

    def add_observer(self, subscriber: Subscriber) -> None:
        self.observers.add(subscriber)

    def remove_observer(self, subscriber: Subscriber) -> None:
        self.observers.remove(subscriber)

    def resolve_category(self, category: str | None = None, subject: Any = None) -> str:
        """Explicit *category*, else the type name of *subject*, else our own."""
        if category is not None:
            return category
        if subject is not None:
            return type(subject).__name__
        return self._category

    def log(
        self,
        severity: Severity,
        message: str,
        *,
        error: BaseException | None = None,
        category: str | None = None,
        subject: Any = None,
        source: SourceLocation | None = None,
        stacklevel: int = 1,
    ) -> None:
        """Log *message* at *severity*.

        Parameters
        ----------
        error:
            Exception attached to the entry.
        category:
            Overrides the category for this entry.
        subject:
            Object the entry is about; its type name becomes the category
            unless *category* is given.
        source:
            Call-site metadata. Captured from the caller's frame when omitted.
        stacklevel:
            How many frames above the caller to attribute the entry to; wrappers
            around the logger pass ``2`` or more.
        """
        self._log(severity, message, error, category, subject, source, stacklevel)

    def _log(
        self,
        severity: Severity,
        message: str,
        error: BaseException | None,
        category: str | None,
        subject: Any,
        source: SourceLocation | None,
        stacklevel: int,
    ) -> None:
        state = self.state
        if source is None:
            # frames: capture <- _log <- public method <- caller
            source = SourceLocation.capture(stacklevel + 2)
        entry = LogEntry(
            category=self.resolve_category(category, subject),
            timestamp=state.clock.now(),
            severity=severity,
            message=message,
            source=source,
            error=error,
        )
        state.write_console(entry)
        self.observers.broadcast(self, entry)
        state.dispatch(self, entry)

    # ------------------------------------------------------------------
    # Severity wrappers
    # ------------------------------------------------------------------

    def trace(
        self,
        message: str,
        *,
        error: BaseException | None = None,
        category: str | None = None,
        subject: Any = None,
        source: SourceLocation | None = None,
        stacklevel: int = 1,
    ) -> None:
        self._log(Severity.TRACE, message, error, category, subject, source, stacklevel)

    def debug(
        self,
        message: str,
        *,
        error: BaseException | None = None,
        category: str | None = None,
        subject: Any = None,
        source: SourceLocation | None = None,
        stacklevel: int = 1,
    ) -> None:
        self._log(Severity.DEBUG, message, error, category, subject, source, stacklevel)

    def verbose(
        self,
        message: str,
        *,
        error: BaseException | None = None,
        category: str | None = None,
        subject: Any = None,
        source: SourceLocation | None = None,
        stacklevel: int = 1,
    ) -> None:
        self._log(Severity.VERBOSE, message, error, category, subject, source, stacklevel)

    def info(
        self,
        message: str,
        *,
        error: BaseException | None = None,
        category: str | None = None,
        subject: Any = None,
        source: SourceLocation | None = None,
        stacklevel: int = 1,
    ) -> None:
        self._log(Severity.INFO, message, error, category, subject, source, stacklevel)

    def status(
        self,
        message: str,
        *,
        error: BaseException | None = None,
        category: str | None = None,
        subject: Any = None,
        source: SourceLocation | None = None,
        stacklevel: int = 1,
    ) -> None:
        self._log(Severity.STATUS, message, error, category, subject, source, stacklevel)

    def warning(
        self,
        message: str,
        *,
        error: BaseException | None = None,
        category: str | None = None,
        subject: Any = None,
        source: SourceLocation | None = None,
        stacklevel: int = 1,
    ) -> None:
        self._log(Severity.WARNING, message, error, category, subject, source, stacklevel)

    # common alias
    warn = warning

    def error(
        self,
        message: str,
        *,
        error: BaseException | None = None,
        category: str | None = None,
        subject: Any = None,
        source: SourceLocation | None = None,
        stacklevel: int = 1,
    ) -> None:
        self._log(Severity.ERROR, message, error, category, subject, source, stacklevel)

    def critical(
        self,
        message: str,
        *,
        error: BaseException | None = None,
        category: str | None = None,
        subject: Any = None,
        source: SourceLocation | None = None,
        stacklevel: int = 1,
    ) -> None:
        self._log(Severity.CRITICAL, message, error, category, subject, source, stacklevel)

    def code(
        self,
        message: str,
        *,
        error: BaseException | None = None,
        category: str | None = None,
        subject: Any = None,
        source: SourceLocation | None = None,
        stacklevel: int = 1,
    ) -> None:
        """Log a programming error: something that should never happen."""
        self._log(Severity.CODE, message, error, category, subject, source, stacklevel)

    def __repr__(self) -> str:
        return f"Logger(category={self._category!r}, observers={len(self.observers)})"


__all__ = ["Logger"]
