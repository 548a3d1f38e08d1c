"""
Core exceptions for common-lib.

This module defines the exceptions raised by the library itself. Errors
raised by user supplied callbacks (range step functions, scope blocks,
optional suppliers) are never wrapped and propagate unchanged.
"""


class CommonLibError(Exception):
    """Base exception for all common-lib errors."""
    pass


class ConfigurationError(CommonLibError):
    """Exception raised when there's a configuration problem.

    This error indicates a setup/configuration issue, such as an environment
    variable that cannot be converted to the expected type or a log level
    name that does not exist.

    Attributes:
        message: Human-readable error message
        error_type: Category of error (e.g., "INVALID_ENV_VALUE")
        details: Optional dict with additional context
    """

    def __init__(
        self,
        message: str,
        error_type: str = None,
        details: dict = None
    ):
        super().__init__(message)
        self.error_type = error_type or "CONFIGURATION_ERROR"
        self.details = details or {}


class InvalidMonthDayError(CommonLibError, ValueError):
    """Raised when a month/day pair does not name a real calendar day.

    Subclasses ``ValueError`` so it behaves like the ``date`` constructor's
    own error for callers that only catch the builtin.
    """

    def __init__(self, message: str, month: int = None, day: int = None):
        super().__init__(message)
        self.month = month
        self.day = day


class BuildStateError(CommonLibError, RuntimeError):
    """Raised by ``ValidationBuilder.check_for_errors`` when errors were recorded.

    Attributes:
        errors: The individual error messages that were accumulated
    """

    def __init__(self, message: str, errors: list = None):
        super().__init__(message)
        self.errors = list(errors or [])
