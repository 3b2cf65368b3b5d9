"""Unit tests for kernel clocks."""
from __future__ import annotations

from datetime import UTC, datetime

from mp_logging.kernel import FrozenClock, SystemClock


class TestSystemClock:
    def test_now_is_utc_aware(self) -> None:
        now = SystemClock().now()
        assert now.tzinfo is not None
        assert now.utcoffset().total_seconds() == 0  # type: ignore[union-attr]


class TestFrozenClock:
    def test_fixed(self) -> None:
        fixed = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)
        clock = FrozenClock(fixed)
        assert clock.now() == fixed
        assert clock.now() == fixed

    def test_naive_is_taken_as_utc(self) -> None:
        clock = FrozenClock(datetime(2026, 1, 1, 12, 0))
        assert clock.now().tzinfo is UTC

    def test_advance(self) -> None:
        clock = FrozenClock(datetime(2026, 1, 1, 12, 0, tzinfo=UTC))
        clock.advance(minutes=2, seconds=3)
        assert clock.now() == datetime(2026, 1, 1, 12, 2, 3, tzinfo=UTC)
