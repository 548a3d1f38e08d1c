"""Datetime helpers, mostly step functions for ``OrderedRange`` iteration.

Usage::

    from common_lib.ranges import OrderedRange
    from common_lib.utils import step_days, step_months

    for day in OrderedRange(start, end).iterate_ascending(step_days(1)):
        ...
    for month_start in OrderedRange(start, end).iterate_descending(step_months(-1)):
        ...
"""

import calendar
from datetime import date, datetime, timedelta
from typing import Callable, TypeVar

D = TypeVar("D", date, datetime)


def step_by(delta: timedelta) -> Callable[[D], D]:
    """Step function adding a fixed ``timedelta``. Use a negative delta to go backwards."""
    if not delta:
        raise ValueError("Step delta must not be zero")

    def step(value: D) -> D:
        return value + delta

    return step


def step_days(days: int = 1) -> Callable[[D], D]:
    return step_by(timedelta(days=days))


def add_months(value: D, months: int) -> D:
    """Shift ``value`` by whole calendar months, clamping the day to the month's end.

    Jan 31 + 1 month is Feb 28 (or 29).
    """
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def step_months(months: int = 1) -> Callable[[D], D]:
    """Step function moving by calendar months."""
    if months == 0:
        raise ValueError("Step months must not be zero")

    def step(value: D) -> D:
        return add_months(value, months)

    return step
