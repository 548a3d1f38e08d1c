"""Year-less calendar day value type.

``MonthDay`` is a month and day-of-month with no year, e.g. the 25th of
December. It orders by month first, then day, which is the calendar order
within any single year.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Union

from ..exceptions import InvalidMonthDayError

# Leap year lengths so that Feb 29 is a valid month-day.
MAX_DAYS_IN_MONTH = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

_MONTH_DAY_PATTERN = re.compile(r"^(?:--)?(\d{1,2})-(\d{1,2})$")


@dataclass(frozen=True, order=True)
class MonthDay:
    """A calendar day without a year.

    Example:
        >>> MonthDay.of(12, 25)
        MonthDay(month=12, day=25)
        >>> str(MonthDay.of(3, 1))
        '--03-01'
        >>> MonthDay.of(1, 31) < MonthDay.of(2, 1)
        True
    """

    month: int
    day: int

    def __post_init__(self):
        if isinstance(self.month, bool) or not isinstance(self.month, int):
            raise InvalidMonthDayError(f"Month must be an int, got {self.month!r}", self.month, self.day)
        if isinstance(self.day, bool) or not isinstance(self.day, int):
            raise InvalidMonthDayError(f"Day must be an int, got {self.day!r}", self.month, self.day)
        if not 1 <= self.month <= 12:
            raise InvalidMonthDayError(f"Invalid month {self.month}, must be 1-12", self.month, self.day)
        max_day = MAX_DAYS_IN_MONTH[self.month - 1]
        if not 1 <= self.day <= max_day:
            raise InvalidMonthDayError(
                f"Invalid day {self.day} for month {self.month}, must be 1-{max_day}",
                self.month,
                self.day,
            )

    @classmethod
    def of(cls, month: int, day: int) -> "MonthDay":
        return cls(month, day)

    @classmethod
    def from_date(cls, value: Union[date, datetime]) -> "MonthDay":
        """Take the month and day of a ``date`` or ``datetime``."""
        return cls(value.month, value.day)

    @classmethod
    def today(cls) -> "MonthDay":
        return cls.from_date(date.today())

    @classmethod
    def parse(cls, text: str) -> "MonthDay":
        """Parse ``--MM-DD`` (ISO-8601) or ``MM-DD``.

        Raises:
            InvalidMonthDayError: If the text is malformed or names no real day
        """
        match = _MONTH_DAY_PATTERN.match(text.strip()) if isinstance(text, str) else None
        if match is None:
            raise InvalidMonthDayError(f"Cannot parse '{text}' as a month-day, expected --MM-DD")
        return cls(int(match.group(1)), int(match.group(2)))

    def at_year(self, year: int) -> date:
        """Combine with a year. Feb 29 becomes Feb 28 on non-leap years."""
        try:
            return date(year, self.month, self.day)
        except ValueError:
            return date(year, self.month, self.day - 1)

    def __str__(self) -> str:
        return f"--{self.month:02d}-{self.day:02d}"


MIN_MONTH_DAY = MonthDay(1, 1)
MAX_MONTH_DAY = MonthDay(12, 31)
