"""Base settings helpers shared by every settings class.

Settings are frozen dataclasses populated from environment variables. The
helpers here take care of the boring parts: optional ``.env`` loading,
looking up the first defined variable among several aliases and converting
raw strings into typed values.
"""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

from dotenv import load_dotenv as _load_dotenv

from ..exceptions import ConfigurationError


class SettingsError(ConfigurationError):
    """Raised when an environment value cannot be parsed into a setting."""

    def __init__(self, message: str, env_name: Optional[str] = None, value: Optional[str] = None):
        super().__init__(
            message,
            error_type="INVALID_ENV_VALUE",
            details={"env_name": env_name, "value": value},
        )
        self.env_name = env_name
        self.value = value


_TRUE_VALUES = {"1", "true", "yes", "on", "y"}
_FALSE_VALUES = {"0", "false", "no", "off", "n", ""}


class EnvParser:
    """Typed access to environment variables."""

    @staticmethod
    def _strip_inline_comment(value: str) -> str:
        # "3600 # comment" -> "3600"
        return value.split("#")[0].strip()

    @staticmethod
    def parse_bool(value: str) -> bool:
        """Parse a boolean the way shell users write them."""
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        raise ValueError(f"Cannot interpret '{value}' as a boolean")

    @staticmethod
    def parse_list(value: str, separator: str = ",") -> List[str]:
        """Split a CSV style value, dropping empty items."""
        return [item.strip() for item in value.split(separator) if item.strip()]

    @classmethod
    def convert(cls, value: str, env_type: Callable[..., Any] = str, env_name: Optional[str] = None) -> Any:
        """Convert a raw environment string to ``env_type``.

        Inline ``#`` comments are stripped for typed values only; strings are
        returned verbatim since ``#`` is legitimate inside paths and formats.

        Raises:
            SettingsError: If the value cannot be converted
        """
        if env_type is str:
            return value
        clean_value = cls._strip_inline_comment(value)
        try:
            if env_type is bool:
                return cls.parse_bool(clean_value)
            if env_type is list:
                return cls.parse_list(clean_value)
            return env_type(clean_value)
        except (TypeError, ValueError) as e:
            type_name = getattr(env_type, "__name__", str(env_type))
            raise SettingsError(
                f"Invalid value for {env_name or 'setting'}: '{value}' is not a valid {type_name}",
                env_name=env_name,
                value=value,
            ) from e

    @classmethod
    def get_env(
        cls,
        *names: str,
        default: Any = None,
        env_type: Callable[..., Any] = str,
    ) -> Any:
        """Return the first defined environment variable among ``names``.

        Args:
            *names: Variable names in priority order
            default: Value returned when none of the variables is set
            env_type: Target type (``str``, ``int``, ``float``, ``bool``, ``list``)

        Returns:
            The converted value, or ``default`` when nothing is set
        """
        for name in names:
            value = os.getenv(name)
            if value is None:
                continue
            return cls.convert(value, env_type=env_type, env_name=name)
        return default


@dataclass(frozen=True)
class BaseSettings:
    """Base class for frozen, environment-driven settings."""

    @staticmethod
    def _load_dotenv_if_requested(
        load_dotenv: bool,
        dotenv_paths: Optional[List[Union[str, Path]]] = None,
    ) -> None:
        """Load ``.env`` files without overriding already exported variables."""
        if not load_dotenv:
            return

        if dotenv_paths:
            for path in dotenv_paths:
                path = Path(path)
                if path.is_dir():
                    path = path / ".env"
                if path.exists():
                    _load_dotenv(path, override=False)
        else:
            _load_dotenv(override=False)

    def as_dict(self) -> Dict[str, Any]:
        """Return the settings as a plain dictionary."""
        return asdict(self)
