"""Tests for the logging helpers."""

import logging

import pytest

from common_lib import get_module_logger, setup_logging
from common_lib.config import LoggingSettings
from common_lib.tracing import PACKAGE_LOGGER_NAME, flush_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    original_handlers = list(logger.handlers)
    original_level = logger.level
    original_propagate = logger.propagate
    yield logger
    setup_logging(LoggingSettings(level="WARNING"), force=True)
    for handler in list(logger.handlers):
        if handler not in original_handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(original_level)
    logger.propagate = original_propagate


def test_get_module_logger_uses_caller_module():
    assert get_module_logger().name == __name__


def test_get_module_logger_explicit_name():
    assert get_module_logger("common_lib.custom").name == "common_lib.custom"


def test_library_modules_log_under_package():
    from common_lib.scoping import scope

    assert scope.logger.name == "common_lib.scoping.scope"
    assert scope.logger.name.startswith(PACKAGE_LOGGER_NAME)


def test_setup_logging_sets_level_and_file(package_logger, tmp_path):
    log_file = tmp_path / "common_lib.log"
    settings = LoggingSettings(level="DEBUG", log_file=str(log_file), propagate=False)

    logger = setup_logging(settings)
    get_module_logger("common_lib.test").debug("hello from test")
    flush_logging()

    assert logger is package_logger
    assert package_logger.level == logging.DEBUG
    assert package_logger.propagate is False
    assert "hello from test" in log_file.read_text()


def test_setup_logging_is_idempotent(package_logger):
    settings = LoggingSettings(level="INFO")
    setup_logging(settings, force=True)
    handler_count = len(package_logger.handlers)

    setup_logging(settings)
    setup_logging(LoggingSettings(level="INFO"))

    assert len(package_logger.handlers) == handler_count


def test_setup_logging_replaces_own_handlers(package_logger, tmp_path):
    setup_logging(LoggingSettings(level="INFO"), force=True)
    handler_count = len(package_logger.handlers)

    setup_logging(LoggingSettings(level="ERROR", log_file=str(tmp_path / "x.log")))

    assert len(package_logger.handlers) == handler_count + 1
    assert package_logger.level == logging.ERROR


def test_scope_logs_failed_acquire(caplog):
    from common_lib.scoping import Scope

    with caplog.at_level(logging.DEBUG, logger="common_lib.scoping.scope"):
        Scope("db", lambda r: False, lambda r: None).run(lambda r: None)

    assert "Could not acquire scope resource 'db'" in caplog.text
