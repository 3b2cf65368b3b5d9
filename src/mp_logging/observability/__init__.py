"""Observability – structlog diagnostics for mp_logging internals."""
from mp_logging.observability.diagnostics import (
    ROOT_LOGGER_NAME,
    configure_diagnostics,
    get_logger,
)

__all__ = ["ROOT_LOGGER_NAME", "configure_diagnostics", "get_logger"]
