"""Kernel clock – the time source used to stamp log entries."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    """Port: where a :class:`~mp_logging.core.entry.LogEntry` gets its timestamp."""

    def now(self) -> datetime: ...


class SystemClock:
    """Wall clock, always timezone-aware UTC."""

    def now(self) -> datetime:
        return datetime.now(UTC)

    def __repr__(self) -> str:
        return "SystemClock()"


class FrozenClock:
    """Test clock pinned to a fixed point in time.

    Every entry logged against a state using this clock carries the same
    timestamp until :meth:`advance` moves it forward.
    """

    def __init__(self, fixed: datetime) -> None:
        if fixed.tzinfo is None:
            fixed = fixed.replace(tzinfo=UTC)
        self._fixed = fixed

    def now(self) -> datetime:
        return self._fixed

    def advance(self, **kwargs: int | float) -> None:
        """Advance the frozen time by the given ``timedelta`` kwargs."""
        self._fixed += timedelta(**kwargs)

    def __repr__(self) -> str:
        return f"FrozenClock({self._fixed.isoformat()})"


__all__ = ["Clock", "FrozenClock", "SystemClock"]
