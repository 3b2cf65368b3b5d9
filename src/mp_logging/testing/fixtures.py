"""Testing fixtures – pytest plugin.

Enable with ``pytest_plugins = ["mp_logging.testing.fixtures"]`` in a
``conftest.py``.
"""
from __future__ import annotations

import pytest

from mp_logging.core.logger import Logger
from mp_logging.core.state import LoggingState
from mp_logging.kernel.clock import FrozenClock
from mp_logging.testing.fakes import FakeClock, RecordingObserver, isolated_state


@pytest.fixture
def fake_clock() -> FrozenClock:
    """A FrozenClock pinned to 2026-01-01 12:00 UTC."""
    return FakeClock()


@pytest.fixture
def logging_state(fake_clock: FrozenClock) -> LoggingState:
    """An isolated LoggingState printing to ``state.stream`` (a StringIO)."""
    return isolated_state(clock=fake_clock)


@pytest.fixture
def recorder(logging_state: LoggingState) -> RecordingObserver:
    """A RecordingObserver already registered process-wide on ``logging_state``."""
    observer = RecordingObserver()
    logging_state.add_observer(observer)
    return observer


@pytest.fixture
def logger(logging_state: LoggingState) -> Logger:
    """A Logger with category ``"test"`` bound to ``logging_state``."""
    return Logger("test", state=logging_state)


__all__ = ["fake_clock", "logger", "logging_state", "recorder"]
