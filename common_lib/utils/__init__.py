"""common_lib.utils - Utility functions and classes.

This package provides the small helpers of the common_lib library:
- first_of: Lazy chain of fallback suppliers
- array_of / set_of / map_of: Collection constructors
- ValidationBuilder: Error accumulation for builders
- Datetime step functions for range iteration

Convenience imports for the `common_lib.utils` package::

    from common_lib.utils import first_of
    from common_lib.utils import array_of, set_of, map_of
    from common_lib.utils import ValidationBuilder
    from common_lib.utils import step_days, step_months
"""

from .collection_utils import array_of, map_of, set_of
from .datetime_utils import add_months, step_by, step_days, step_months
from .optional_helpers import first_of
from .validation_builder import ValidationBuilder, ValidationErrors

__all__ = [
    "array_of",
    "set_of",
    "map_of",
    "first_of",
    "ValidationBuilder",
    "ValidationErrors",
    "add_months",
    "step_by",
    "step_days",
    "step_months",
]
