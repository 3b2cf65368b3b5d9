"""Testing – fakes for code that logs through mp_logging.

Pytest fixtures live in :mod:`mp_logging.testing.fixtures` (requires pytest).
"""
from mp_logging.testing.fakes import FakeClock, RecordingObserver, isolated_state

__all__ = ["FakeClock", "RecordingObserver", "isolated_state"]
