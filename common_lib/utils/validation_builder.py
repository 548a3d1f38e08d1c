"""Base class for builders that validate their state before building.

Subclasses collect every problem with the current state, then raise once::

    class ConnectionBuilder(ValidationBuilder):
        def build(self) -> Connection:
            errors = self.valid_build_state()
            if self.host is None:
                errors.add("host is required")
            if self.port is None:
                errors.add("port is required")
            self.check_for_errors(errors)
            return Connection(self.host, self.port)

which raises ``BuildStateError("Internal Error: host is required port is required")``
when both are missing.
"""

from typing import List

from common_lib import get_module_logger
from common_lib.exceptions import BuildStateError

logger = get_module_logger()


class ValidationErrors:
    """Accumulates error messages for a single build attempt."""

    def __init__(self, prefix: str):
        self._prefix = prefix
        self._errors: List[str] = []

    def add(self, message: str) -> "ValidationErrors":
        self._errors.append(message)
        return self

    @property
    def errors(self) -> List[str]:
        return list(self._errors)

    def __bool__(self) -> bool:
        return bool(self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    def __str__(self) -> str:
        return " ".join([self._prefix, *self._errors])


class ValidationBuilder:
    """Base class providing ``valid_build_state`` / ``check_for_errors``."""

    ERROR_PREFIX = "Internal Error:"

    def valid_build_state(self) -> ValidationErrors:
        """Return a fresh, empty error accumulator."""
        return ValidationErrors(self.ERROR_PREFIX)

    def check_for_errors(self, errors: ValidationErrors) -> None:
        """Raise if any error was added to ``errors``.

        Raises:
            BuildStateError: With every accumulated message after the prefix
        """
        if errors:
            message = str(errors)
            logger.debug(f"{type(self).__name__} build rejected: {message}")
            raise BuildStateError(message, errors=errors.errors)
