"""Pydantic schemas for loading ranges from configuration and JSON payloads.

Payloads use the natural ``from``/``to`` keys::

    {"from": "--11-01", "to": "--02-01"}
    {"from": "2024-01-01T00:00:00Z", "to": "2024-01-31T23:59:59Z"}
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

from ..exceptions import InvalidMonthDayError
from .calendar_day_range import CalendarDayRange
from .month_day import MonthDay
from .ordered_range import OrderedRange


class OrderedRangeSchema(BaseModel):
    """Schema for a date or datetime ``OrderedRange``.

    Bounds may arrive in either order; ``to_range`` normalizes them.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    from_: Union[datetime, date] = Field(..., alias="from", description="Start of the range (inclusive)")
    to: Union[datetime, date] = Field(..., description="End of the range (inclusive)")

    @model_validator(mode="after")
    def validate_same_kind(self) -> "OrderedRangeSchema":
        """Dates and datetimes, or naive and aware datetimes, do not compare with each other."""
        if isinstance(self.from_, datetime) != isinstance(self.to, datetime):
            raise ValueError("'from' and 'to' must both be dates or both be datetimes")
        if isinstance(self.from_, datetime) and (self.from_.tzinfo is None) != (self.to.tzinfo is None):
            raise ValueError("'from' and 'to' must both be timezone-aware or both be naive")
        return self

    def to_range(self) -> OrderedRange:
        return OrderedRange(self.from_, self.to)

    @classmethod
    def from_range(cls, value: OrderedRange) -> "OrderedRangeSchema":
        return cls(from_=value.from_, to=value.to)


class CalendarDayRangeSchema(BaseModel):
    """Schema for a ``CalendarDayRange`` given as ``--MM-DD`` strings.

    Values are held as ``MonthDay`` and serialized back to ``--MM-DD``.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    from_: MonthDay = Field(..., alias="from", description="First day of the range, --MM-DD or MM-DD")
    to: MonthDay = Field(..., description="Last day of the range, --MM-DD or MM-DD")

    @field_validator("from_", "to", mode="before")
    @classmethod
    def parse_month_day(cls, value):
        """Accept ``MonthDay`` instances or ``--MM-DD`` / ``MM-DD`` strings."""
        if isinstance(value, MonthDay):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Expected a --MM-DD string, got {type(value).__name__}")
        try:
            return MonthDay.parse(value)
        except InvalidMonthDayError as e:
            raise ValueError(str(e)) from e

    @field_serializer("from_", "to")
    def serialize_month_day(self, value: MonthDay) -> str:
        return str(value)

    def to_range(self) -> CalendarDayRange:
        return CalendarDayRange(self.from_, self.to)

    @classmethod
    def from_range(cls, value: CalendarDayRange) -> "CalendarDayRangeSchema":
        return cls(from_=value.from_, to=value.to)
