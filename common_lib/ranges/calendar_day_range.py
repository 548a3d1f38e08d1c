"""Range of calendar days that may wrap over the end of the year.

A ``CalendarDayRange`` from Nov 1 to Feb 1 covers November, December,
January and the first of February; the range "rolls over" Dec 31. When
``from_`` is not after ``to`` it is a plain range within the year.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Union

from .month_day import MAX_MONTH_DAY, MIN_MONTH_DAY, MonthDay


@dataclass(frozen=True)
class CalendarDayRange:
    """Inclusive range of ``MonthDay`` values, stored exactly as given."""

    from_: MonthDay
    to: MonthDay

    @property
    def wraps(self) -> bool:
        """True if the range spans the end of the year."""
        return self.from_ > self.to

    def contains(self, day: Union[MonthDay, date]) -> bool:
        """Test if ``day`` falls within the range, inclusive of both ends.

        Accepts a ``MonthDay`` or anything with ``month``/``day`` attributes
        such as ``date`` and ``datetime``.
        """
        if not isinstance(day, MonthDay):
            day = MonthDay.from_date(day)

        if not self.wraps:
            return self.from_ <= day <= self.to

        return (self.from_ <= day <= MAX_MONTH_DAY) or (MIN_MONTH_DAY <= day <= self.to)

    def __contains__(self, day: Any) -> bool:
        return self.contains(day)

    def overlaps(self, other: "CalendarDayRange") -> bool:
        """Test if either end of ``other`` falls within this range.

        Only the endpoints of ``other`` are checked, same as
        ``OrderedRange.overlaps``.
        """
        return self.contains(other.from_) or self.contains(other.to)

    def __str__(self) -> str:
        return f"CalendarDayRange{{from={self.from_}, to={self.to}}}"
