"""Adapters – forward entries to a structlog logger."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from mp_logging.core.entry import LogEntry
from mp_logging.core.levels import Severity

if TYPE_CHECKING:
    from mp_logging.core.logger import Logger

_METHODS: dict[Severity, str] = {
    Severity.TRACE: "debug",
    Severity.DEBUG: "debug",
    Severity.VERBOSE: "debug",
    Severity.INFO: "info",
    Severity.STATUS: "info",
    Severity.WARNING: "warning",
    Severity.ERROR: "error",
    Severity.CRITICAL: "critical",
    Severity.CODE: "critical",
}


class StructlogObserver:
    """Emit each entry as a structlog event whose name is the entry message.

    Bound keys: ``category``, ``severity``, ``source_logger``, ``file``,
    ``function``, ``line`` and ``timestamp`` (ISO 8601); an attached error is
    passed as ``exc_info``.

    Parameters
    ----------
    logger:
        Any structlog bound logger. Defaults to ``structlog.get_logger()``,
        so the host's structlog configuration applies.
    """

    def __init__(self, logger: Any = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger()

    def on_log_event(self, logger: Logger, entry: LogEntry) -> None:
        fields: dict[str, Any] = {
            "category": entry.category,
            "severity": entry.severity.label,
            "source_logger": logger.category,
            "file": entry.file,
            "function": entry.function,
            "line": entry.line,
            "timestamp": entry.timestamp.isoformat(),
        }
        if entry.error is not None:
            fields["exc_info"] = entry.error
        getattr(self._logger, _METHODS[entry.severity])(entry.message, **fields)


__all__ = ["StructlogObserver"]
