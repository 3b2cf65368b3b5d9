"""Kernel – error root and clock port shared by every layer."""
from mp_logging.kernel.clock import Clock, FrozenClock, SystemClock
from mp_logging.kernel.errors import BaseError

__all__ = ["BaseError", "Clock", "FrozenClock", "SystemClock"]
