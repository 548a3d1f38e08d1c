"""Logging setup for common-lib."""

from .logger import PACKAGE_LOGGER_NAME, flush_logging, get_module_logger, setup_logging

__all__ = [
    "PACKAGE_LOGGER_NAME",
    "flush_logging",
    "get_module_logger",
    "setup_logging",
]
