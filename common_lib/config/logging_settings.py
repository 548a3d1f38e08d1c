"""Logging configuration settings.

Controls how ``common_lib.tracing.logger.setup_logging`` configures the
package logger. Values come from ``COMMON_LIB_*`` variables first, then the
generic ``LOG_*`` ones most services already export.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from .base_settings import BaseSettings, EnvParser, SettingsError

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
VALID_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


@dataclass(frozen=True)
class LoggingSettings(BaseSettings):
    """Logging settings for the ``common_lib`` logger hierarchy."""

    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT
    log_file: Optional[str] = None
    propagate: bool = True

    def __post_init__(self):
        level = str(self.level).strip().upper()
        if level == "WARN":
            level = "WARNING"
        if level not in VALID_LOG_LEVELS:
            raise SettingsError(
                f"Unknown log level '{self.level}'. Expected one of: {', '.join(VALID_LOG_LEVELS)}",
                env_name="LOG_LEVEL",
                value=str(self.level),
            )
        object.__setattr__(self, "level", level)

    @property
    def level_number(self) -> int:
        """Numeric ``logging`` level for ``level``."""
        return logging.getLevelName(self.level)

    @classmethod
    def from_env(
        cls,
        load_dotenv: bool = True,
        dotenv_paths: Optional[List[Union[str, Path]]] = None,
        **overrides
    ) -> "LoggingSettings":
        """Create logging settings from environment variables."""
        cls._load_dotenv_if_requested(load_dotenv, dotenv_paths)

        settings_dict = {
            "level": EnvParser.get_env("COMMON_LIB_LOG_LEVEL", "LOG_LEVEL", default="INFO"),
            "format": EnvParser.get_env("COMMON_LIB_LOG_FORMAT", "LOG_FORMAT", default=DEFAULT_LOG_FORMAT),
            "log_file": EnvParser.get_env("COMMON_LIB_LOG_FILE", "LOG_FILE"),
            "propagate": EnvParser.get_env("COMMON_LIB_LOG_PROPAGATE", default=True, env_type=bool),
        }

        # Apply overrides
        settings_dict.update(overrides)

        return cls(**settings_dict)
