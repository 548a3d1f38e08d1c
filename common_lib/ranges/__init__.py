"""common_lib.ranges - Inclusive range value types.

Exports::

    from common_lib.ranges import OrderedRange
    from common_lib.ranges import CalendarDayRange, MonthDay
    from common_lib.ranges import OrderedRangeSchema, CalendarDayRangeSchema
"""

from .calendar_day_range import CalendarDayRange
from .month_day import MAX_MONTH_DAY, MIN_MONTH_DAY, MonthDay
from .ordered_range import OrderedRange
from .schemas import CalendarDayRangeSchema, OrderedRangeSchema

__all__ = [
    "CalendarDayRange",
    "CalendarDayRangeSchema",
    "MAX_MONTH_DAY",
    "MIN_MONTH_DAY",
    "MonthDay",
    "OrderedRange",
    "OrderedRangeSchema",
]
