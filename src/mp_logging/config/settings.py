"""Config settings – 12-factor configuration for the logging facade.

The core never reads the environment. This module is the collaborator that
does: :class:`EnvSettingsLoader` turns ``MP_LOGGING_*`` variables into a
:class:`LoggingSettings`, and :func:`configure` applies one to a
:class:`~mp_logging.core.state.LoggingState`.

Example::

    # MP_LOGGING_CONSOLE_LEVEL=debug MP_LOGGING_FORMATTER=compact
    configure(EnvSettingsLoader().load(LoggingSettings))
"""
from __future__ import annotations

import abc
import dataclasses
import os
import typing
from typing import Any, ClassVar, TypeVar

from mp_logging.config.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from mp_logging.core.formatters import FORMATTERS
from mp_logging.core.levels import Severity
from mp_logging.core.state import LoggingState, get_state
from mp_logging.observability import get_logger

_log = get_logger(__name__)

T = TypeVar("T", bound="Settings")

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off", ""})


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class LoggingSettings(Settings):
    """Process-wide logging options, read from ``MP_LOGGING_*``."""

    _prefix: ClassVar[str] = "MP_LOGGING"

    console_enabled: bool = True
    console_level: Severity = Severity.INFO
    formatter: str = "default"
    deferred: bool = False

    def _validate(self) -> None:
        if not isinstance(self.console_level, Severity):
            parsed = Severity.parse(str(self.console_level))
            if parsed is None:
                raise InvalidSettingValueError(
                    "console_level", self.console_level, "unknown severity"
                )
            self.console_level = parsed
        if self.formatter not in FORMATTERS:
            raise InvalidSettingValueError(
                "formatter",
                self.formatter,
                f"expected one of {sorted(FORMATTERS)}",
            )


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from OS environment variables.

    Each field ``name`` is read from ``<PREFIX>_<NAME>``; absent variables keep
    the field default. Severity names are matched case-insensitively after
    trimming.
    """

    def __init__(self, environ: typing.Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = self._environ if self._environ is not None else os.environ
        prefix = getattr(settings_class, "_prefix", "").upper()
        hints = typing.get_type_hints(settings_class)
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = f"{prefix}_{field.name}".upper().lstrip("_")
            raw = environ.get(env_key)

            if raw is None:
                if (
                    field.default is dataclasses.MISSING
                    and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
                ):
                    raise MissingRequiredSettingError(env_key)
                continue

            kwargs[field.name] = self._coerce(env_key, raw, hints.get(field.name, str))

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load settings: {exc}", cause=exc) from exc

    def _coerce(self, env_key: str, value: str, type_hint: Any) -> Any:
        if type_hint is bool:
            lowered = value.strip().lower()
            if lowered in _TRUTHY:
                return True
            if lowered in _FALSY:
                return False
            raise InvalidSettingValueError(env_key, value, "expected a boolean")
        if type_hint is Severity:
            severity = Severity.parse(value.strip().lower())
            if severity is None:
                raise InvalidSettingValueError(env_key, value, "unknown severity")
            return severity
        if type_hint is int:
            try:
                return int(value)
            except ValueError as exc:
                raise InvalidSettingValueError(env_key, value, "expected an integer") from exc
        return value.strip()


def configure(settings: LoggingSettings, state: LoggingState | None = None) -> LoggingState:
    """Apply *settings* to *state* (default: the process-wide state).

    Turning ``deferred`` off here flushes the queue like any other toggle.
    """
    state = state if state is not None else get_state()
    # fields may have been reassigned since __post_init__
    settings._validate()  # noqa: SLF001
    formatter = FORMATTERS[settings.formatter]

    state.console_logging_enabled = settings.console_enabled
    state.console_threshold = settings.console_level
    state.formatter = formatter
    state.deferred_delivery = settings.deferred

    _log.info(
        "logging_configured",
        console_enabled=settings.console_enabled,
        console_level=settings.console_level.label,
        formatter=settings.formatter,
        deferred=settings.deferred,
    )
    return state


__all__ = [
    "EnvSettingsLoader",
    "LoggingSettings",
    "Settings",
    "SettingsLoader",
    "configure",
]
