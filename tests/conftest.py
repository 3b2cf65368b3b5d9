"""Shared fixtures: ``fake_clock``, ``logging_state``, ``recorder``, ``logger``."""
from mp_logging.testing.fixtures import fake_clock, logger, logging_state, recorder  # noqa: F401
