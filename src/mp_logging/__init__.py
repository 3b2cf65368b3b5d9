"""
mp_logging – structured logging facade with pluggable observers.

Import path convention::

    from mp_logging.core import Logger, Severity, get_state
    from mp_logging.config import LoggingSettings, EnvSettingsLoader, configure
    from mp_logging.adapters import StdlibLoggingObserver, StructlogObserver
    from mp_logging.testing import RecordingObserver, isolated_state
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
