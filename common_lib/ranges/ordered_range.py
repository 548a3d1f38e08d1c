"""Closed range over any totally ordered value.

``OrderedRange`` is usually used with ``date`` or ``datetime`` values, such as
2017-01-20T13:00Z to 2017-12-01T09:00Z, but works with anything that supports
``<``, ``<=``, ``>`` and ``>=`` (ints, decimals, strings...).

Both bounds are inclusive in every comparison operation.

Example:
    >>> from datetime import date, timedelta
    >>> week = OrderedRange(date(2024, 1, 7), date(2024, 1, 1))
    >>> week.from_
    datetime.date(2024, 1, 1)
    >>> date(2024, 1, 3) in week
    True
    >>> [d.day for d in week.iterate_ascending(lambda d: d + timedelta(days=2))]
    [1, 3, 5, 7]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, TypeVar, Union

T = TypeVar("T")

Step = Callable[[T], T]


@dataclass(frozen=True)
class OrderedRange(Generic[T]):
    """A range of ordered values, inclusive of both ends.

    If ``from_`` is not less than ``to`` the two are swapped during
    construction, so ``from_`` is always the lower bound afterwards.

    Attributes:
        from_: The start of the range (``from`` is a Python keyword)
        to: The end of the range
    """

    from_: T
    to: T

    def __post_init__(self):
        if not self.from_ < self.to:
            lower, upper = self.to, self.from_
            object.__setattr__(self, "from_", lower)
            object.__setattr__(self, "to", upper)

    def is_before(self, other: Union[T, "OrderedRange[T]"]) -> bool:
        """Test if this range is completely before a value or another range.

        For a range, this range's ``to`` must be strictly before the other's
        ``from_``; ranges that touch are not before each other.
        """
        if isinstance(other, OrderedRange):
            return self.to < other.from_
        return self.to < other

    def is_after(self, other: Union[T, "OrderedRange[T]"]) -> bool:
        """Test if this range is completely after a value or another range.

        For a range, this range's ``from_`` must be strictly after the other's
        ``to``.
        """
        if isinstance(other, OrderedRange):
            return self.from_ > other.to
        return self.from_ > other

    def contains(self, value: T) -> bool:
        """Test if ``value`` falls within the range (inclusive of from and to)."""
        return not self.is_before(value) and not self.is_after(value)

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def begins_before(self, other: "OrderedRange[T]") -> bool:
        """Test if this range's ``from_`` is before the other's ``from_``."""
        return self.from_ < other.from_

    def ends_after(self, other: "OrderedRange[T]") -> bool:
        """Test if this range's ``to`` is after the other's ``to``."""
        return self.to > other.to

    def overlaps(self, other: "OrderedRange[T]") -> bool:
        """Test if either end of ``other`` falls within this range.

        Note this only checks the endpoints of ``other``: a range that sits
        strictly inside ``other`` does not overlap it, even though ``other``
        overlaps the inner range.
        """
        # TODO: decide with callers whether to switch to symmetric interval overlap.
        return self.contains(other.from_) or self.contains(other.to)

    def iterate_ascending(self, step: Step) -> Iterator[T]:
        """Iterate from ``from_`` up to ``to`` using ``step``.

        ``step`` takes the current value and returns the next one. Iteration
        stops once the value returned by ``step`` is greater than ``to``. A
        step that never gets past ``to`` gives an endless iterator.

        Every call returns a new, independent iterator.
        """
        return self._iterate(self.from_, step, lambda current: current <= self.to)

    def iterate_descending(self, step: Step) -> Iterator[T]:
        """Iterate from ``to`` down to ``from_`` using ``step``.

        Iteration stops once the value returned by ``step`` is less than
        ``from_``.
        """
        return self._iterate(self.to, step, lambda current: current >= self.from_)

    @staticmethod
    def _iterate(start: T, step: Step, has_next: Callable[[T], bool]) -> Iterator[T]:
        current = start
        while has_next(current):
            yield current
            current = step(current)

    def __str__(self) -> str:
        return f"OrderedRange{{from={self.from_}, to={self.to}}}"
