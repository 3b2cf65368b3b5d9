"""Config – environment-driven settings for the logging facade."""
from mp_logging.config.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from mp_logging.config.settings import (
    EnvSettingsLoader,
    LoggingSettings,
    Settings,
    SettingsLoader,
    configure,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "LoggingSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "configure",
]
