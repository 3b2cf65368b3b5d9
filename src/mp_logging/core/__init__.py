"""Core – severities, entries, formatters, observer fan-out and the Logger facade."""
from mp_logging.core.entry import LogEntry, SourceLocation
from mp_logging.core.formatters import (
    FORMATTERS,
    Formatter,
    compact_formatter,
    default_formatter,
    get_formatter,
    verbose_formatter,
)
from mp_logging.core.levels import Severity
from mp_logging.core.logger import Logger
from mp_logging.core.queue import DeliveryQueue
from mp_logging.core.registry import LogObserver, ObserverRegistry, Subscriber
from mp_logging.core.state import LoggingState, default_logger, get_state, set_state

__all__ = [
    "FORMATTERS",
    "DeliveryQueue",
    "Formatter",
    "LogEntry",
    "LogObserver",
    "Logger",
    "LoggingState",
    "ObserverRegistry",
    "Severity",
    "SourceLocation",
    "Subscriber",
    "compact_formatter",
    "default_formatter",
    "default_logger",
    "get_formatter",
    "get_state",
    "set_state",
    "verbose_formatter",
]
