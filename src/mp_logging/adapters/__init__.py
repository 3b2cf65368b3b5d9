"""Adapters – observers that feed facade entries into other logging stacks."""
from mp_logging.adapters.stdlib import STDLIB_LEVELS, StdlibLoggingObserver
from mp_logging.adapters.structlog_bridge import StructlogObserver

__all__ = ["STDLIB_LEVELS", "StdlibLoggingObserver", "StructlogObserver"]
