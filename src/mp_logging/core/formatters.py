"""Core – console formatters.

A formatter is any ``Callable[[LogEntry], str]``. Three presets are provided
and registered by name in :data:`FORMATTERS`; the active one lives on
:class:`~mp_logging.core.state.LoggingState`.

Example output::

    2026-01-01 12:00:00 | payments        | ⚠️ warning  | card declined
    00:00 🔥  disk full [OSError: no space left on device]
"""
from __future__ import annotations

from datetime import UTC, datetime
from typing import Callable

from mp_logging.core.entry import LogEntry

Formatter = Callable[[LogEntry], str]

DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
COMPACT_DATE_FORMAT = "%M:%S"

CATEGORY_WIDTH = 15
LEVEL_WIDTH = 11
ICON_WIDTH = 2


def pad(text: str, width: int) -> str:
    """Truncate or right-pad *text* with spaces to exactly *width* characters.

    Width is counted in code points, so an icon such as 💬 or 🔥 takes one
    column here where a UTF-16 count would give it two, and the compact line
    gets one more space after it (``"00:00 💬  compact"``).
    """
    return text[:width].ljust(width)


def format_timestamp(timestamp: datetime, fmt: str = DEFAULT_DATE_FORMAT) -> str:
    """Render *timestamp* in UTC (naive datetimes are taken as UTC)."""
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=UTC)
    return timestamp.astimezone(UTC).strftime(fmt)


def describe_error(error: BaseException) -> str:
    message = str(error)
    name = type(error).__name__
    return f"{name}: {message}" if message else name


def default_formatter(entry: LogEntry) -> str:
    error = f" [{describe_error(entry.error)}]" if entry.error is not None else ""
    return (
        f"{format_timestamp(entry.timestamp)} | {pad(entry.category, CATEGORY_WIDTH)} | "
        f"{pad(entry.severity.text, LEVEL_WIDTH)} | {entry.message}{error}"
    )


def compact_formatter(entry: LogEntry) -> str:
    error = f" [{describe_error(entry.error)}]" if entry.error is not None else ""
    return (
        f"{format_timestamp(entry.timestamp, COMPACT_DATE_FORMAT)} "
        f"{pad(entry.severity.icon, ICON_WIDTH)} {entry.message}{error}"
    )


def verbose_formatter(entry: LogEntry) -> str:
    # error detail goes inline with the call site rather than in its own brackets
    error = f" {describe_error(entry.error)}" if entry.error is not None else ""
    return (
        f"{format_timestamp(entry.timestamp)} | {pad(entry.category, CATEGORY_WIDTH)} | "
        f"{pad(entry.severity.text, LEVEL_WIDTH)} | {entry.message} "
        f"[{entry.function} line {entry.line}{error}]"
    )


FORMATTERS: dict[str, Formatter] = {
    "default": default_formatter,
    "compact": compact_formatter,
    "verbose": verbose_formatter,
}


def get_formatter(name: str) -> Formatter | None:
    """Look up a preset formatter by name."""
    return FORMATTERS.get(name)


__all__ = [
    "COMPACT_DATE_FORMAT",
    "DEFAULT_DATE_FORMAT",
    "FORMATTERS",
    "Formatter",
    "compact_formatter",
    "default_formatter",
    "describe_error",
    "format_timestamp",
    "get_formatter",
    "pad",
    "verbose_formatter",
]
