"""Observability – the library's own diagnostics.

mp_logging reports its internal faults (a subscriber that raised, a console
stream that broke) through structlog, wrapped around stdlib loggers in the
``mp_logging`` namespace. Nothing here writes to the console sink: until the
host calls :func:`configure_diagnostics` (or configures stdlib logging), only
warnings and above reach stdlib's last-resort handler on stderr.
"""
from __future__ import annotations

import logging
from typing import IO, Any

import structlog

ROOT_LOGGER_NAME = "mp_logging"

_PROCESSORS: list[Any] = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
]

_installed_handler: logging.Handler | None = None


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger bound to the stdlib logger *name*.

    Parameters
    ----------
    name:
        Logger name, typically ``__name__``; defaults to ``"mp_logging"``.
    **initial_values:
        Key-value pairs bound on the returned logger.
    """
    return structlog.wrap_logger(
        logging.getLogger(name or ROOT_LOGGER_NAME),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        **initial_values,
    )


def configure_diagnostics(
    level: int = logging.WARNING,
    *,
    json: bool = False,
    stream: IO[str] | None = None,
) -> logging.Handler:
    """Attach a handler rendering mp_logging diagnostics.

    Calling again replaces the handler installed by the previous call.

    Parameters
    ----------
    level:
        Minimum stdlib level for the ``mp_logging`` logger.
    json:
        Render JSON lines instead of key=value console lines.
    stream:
        Destination; defaults to stderr.
    """
    global _installed_handler

    renderer: Any = (
        structlog.processors.JSONRenderer()
        if json
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    handler = logging.StreamHandler(stream)
    handler.setFormatter(formatter)

    root = logging.getLogger(ROOT_LOGGER_NAME)
    if _installed_handler is not None:
        root.removeHandler(_installed_handler)
    root.addHandler(handler)
    root.setLevel(level)
    _installed_handler = handler
    return handler


__all__ = ["ROOT_LOGGER_NAME", "configure_diagnostics", "get_logger"]
