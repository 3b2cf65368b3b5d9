"""Adapters – forward entries to stdlib :mod:`logging`.

Useful when the host already routes stdlib logging somewhere (files, syslog,
a log shipper) and wants facade entries to follow the same path::

    get_state().add_observer(StdlibLoggingObserver())
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mp_logging.core.entry import LogEntry
from mp_logging.core.levels import Severity

if TYPE_CHECKING:
    from mp_logging.core.logger import Logger

#: Severity -> stdlib level. TRACE, VERBOSE and STATUS sit between the stdlib
#: levels; CODE shares CRITICAL.
STDLIB_LEVELS: dict[Severity, int] = {
    Severity.TRACE: 5,
    Severity.DEBUG: logging.DEBUG,
    Severity.VERBOSE: 15,
    Severity.INFO: logging.INFO,
    Severity.STATUS: 25,
    Severity.WARNING: logging.WARNING,
    Severity.ERROR: logging.ERROR,
    Severity.CRITICAL: logging.CRITICAL,
    Severity.CODE: logging.CRITICAL,
}


class StdlibLoggingObserver:
    """Re-emit each entry as a :class:`logging.LogRecord`.

    Parameters
    ----------
    logger:
        Target stdlib logger. When omitted, each entry goes to
        ``logging.getLogger(entry.category)``.

    The record keeps the entry's timestamp and source location; ``category``,
    ``severity`` and ``column`` are attached as record attributes, and an
    attached error becomes ``exc_info``.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger

    def on_log_event(self, logger: Logger, entry: LogEntry) -> None:
        target = self._logger if self._logger is not None else logging.getLogger(entry.category)
        level = STDLIB_LEVELS[entry.severity]
        if not target.isEnabledFor(level):
            return
        exc_info = None
        if entry.error is not None:
            exc_info = (type(entry.error), entry.error, entry.error.__traceback__)
        record = target.makeRecord(
            target.name,
            level,
            entry.file,
            entry.line,
            entry.message,
            (),
            exc_info,
            func=entry.function,
            extra={
                "category": entry.category,
                "severity": entry.severity.label,
                "column": entry.column,
            },
        )
        created = entry.timestamp.timestamp()
        record.created = created
        record.msecs = (created - int(created)) * 1000
        target.handle(record)

    def __repr__(self) -> str:
        name = self._logger.name if self._logger is not None else "<per-category>"
        return f"StdlibLoggingObserver({name})"


__all__ = ["STDLIB_LEVELS", "StdlibLoggingObserver"]
