"""common-lib: small general-purpose helpers.

- ``common_lib.ranges``: ``OrderedRange``, ``CalendarDayRange``, ``MonthDay``
- ``common_lib.scoping``: ``Scope``, ``ScopeTwr``, ``run_scoped``
- ``common_lib.utils``: ``first_of``, collection constructors, ``ValidationBuilder``
- ``common_lib.config`` / ``common_lib.tracing``: settings and logging setup
"""

__version__ = "1.0.0"

# Logging must be importable before the submodules that use it.
from .tracing.logger import flush_logging, get_module_logger, setup_logging
from .exceptions import (
    BuildStateError,
    CommonLibError,
    ConfigurationError,
    InvalidMonthDayError,
)
from .ranges import CalendarDayRange, MonthDay, OrderedRange
from .scoping import Scope, ScopeTwr, run_scoped
from .utils import ValidationBuilder, array_of, first_of, map_of, set_of

__all__ = [
    "__version__",
    "get_module_logger",
    "setup_logging",
    "flush_logging",
    "CommonLibError",
    "ConfigurationError",
    "InvalidMonthDayError",
    "BuildStateError",
    "OrderedRange",
    "CalendarDayRange",
    "MonthDay",
    "Scope",
    "ScopeTwr",
    "run_scoped",
    "first_of",
    "array_of",
    "set_of",
    "map_of",
    "ValidationBuilder",
]
