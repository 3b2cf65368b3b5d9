"""Unit tests for mp_logging.testing helpers."""
from __future__ import annotations

import io
from datetime import UTC, datetime

from mp_logging.core import Logger, LoggingState
from mp_logging.kernel import FrozenClock
from mp_logging.testing import FakeClock, RecordingObserver, isolated_state


class TestFakeClock:
    def test_pinned(self) -> None:
        clock = FakeClock()
        assert isinstance(clock, FrozenClock)
        assert clock.now() == datetime(2026, 1, 1, 12, 0, tzinfo=UTC)


class TestIsolatedState:
    def test_stream_and_clock(self) -> None:
        state = isolated_state()
        assert isinstance(state.stream, io.StringIO)
        assert state.clock.now() == FakeClock().now()

    def test_overrides(self) -> None:
        state = isolated_state(console_logging_enabled=False)
        assert state.console_logging_enabled is False

    def test_states_are_independent(self) -> None:
        first, second = isolated_state(), isolated_state()
        first.add_observer(RecordingObserver())
        assert len(second.observers) == 0


class TestRecordingObserver:
    def test_records_and_clears(self) -> None:
        state = isolated_state()
        recorder = RecordingObserver()
        state.add_observer(recorder)
        logger = Logger("rec", state=state)
        logger.info("one")
        logger.info("two")
        assert recorder.messages == ["one", "two"]
        assert [s for s, _ in recorder.deliveries] == [logger, logger]
        recorder.clear()
        assert len(recorder) == 0


class TestFixtures:
    def test_fixture_wiring(
        self, logger: Logger, logging_state: LoggingState, recorder: RecordingObserver, fake_clock
    ) -> None:
        assert logger.state is logging_state
        assert recorder in logging_state.observers
        assert logging_state.clock is fake_clock
