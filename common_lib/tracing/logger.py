"""Logging helpers for common-lib.

Every module in the package grabs its logger the same way::

    from common_lib import get_module_logger

    logger = get_module_logger()

Loggers live under the ``common_lib`` hierarchy. The library never touches
the root logger; applications either configure logging themselves or call
``setup_logging`` to attach a handler to the package logger.
"""

from __future__ import annotations

import inspect
import logging
from typing import Optional

from common_lib.config.logging_settings import LoggingSettings

PACKAGE_LOGGER_NAME = "common_lib"

_configured_settings: Optional[LoggingSettings] = None
_handlers: list = []

logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())


def get_module_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger named after the calling module.

    Args:
        name: Explicit logger name. When omitted the caller's ``__name__`` is
            used, so ``logger = get_module_logger()`` at module level yields
            e.g. ``common_lib.scoping.scope``.
    """
    if name is None:
        frame = inspect.currentframe()
        caller = frame.f_back if frame is not None else None
        name = caller.f_globals.get("__name__", PACKAGE_LOGGER_NAME) if caller else PACKAGE_LOGGER_NAME
        del frame, caller
    return logging.getLogger(name)


def setup_logging(settings: Optional[LoggingSettings] = None, force: bool = False) -> logging.Logger:
    """Configure the ``common_lib`` logger.

    Calling this more than once with the same settings is a no-op. Passing
    different settings (or ``force=True``) replaces the handlers installed by
    the previous call.

    Args:
        settings: Logging settings, defaults to ``LoggingSettings.from_env()``
        force: Reconfigure even if already configured with equal settings

    Returns:
        The package logger
    """
    global _configured_settings

    if settings is None:
        settings = LoggingSettings.from_env()

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if _configured_settings == settings and not force:
        return package_logger

    for handler in _handlers:
        package_logger.removeHandler(handler)
        handler.close()
    _handlers.clear()

    formatter = logging.Formatter(settings.format)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    _handlers.append(stream_handler)

    if settings.log_file:
        file_handler = logging.FileHandler(settings.log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        _handlers.append(file_handler)

    for handler in _handlers:
        package_logger.addHandler(handler)

    package_logger.setLevel(settings.level_number)
    package_logger.propagate = settings.propagate
    _configured_settings = settings

    package_logger.debug(
        f"Logging configured (level={settings.level}, file={settings.log_file or 'none'})"
    )
    return package_logger


def flush_logging() -> None:
    """Flush every handler attached to the package logger."""
    for handler in logging.getLogger(PACKAGE_LOGGER_NAME).handlers:
        try:
            handler.flush()
        except (OSError, ValueError):
            # Handler stream already closed
            continue
