"""Environment-driven settings for common-lib."""

from .base_settings import BaseSettings, EnvParser, SettingsError
from .logging_settings import DEFAULT_LOG_FORMAT, LoggingSettings

__all__ = [
    "BaseSettings",
    "EnvParser",
    "SettingsError",
    "LoggingSettings",
    "DEFAULT_LOG_FORMAT",
]
