"""Tests for the MonthDay value type."""

from datetime import date, datetime

import pytest

from common_lib.exceptions import CommonLibError, InvalidMonthDayError
from common_lib.ranges import MonthDay


class TestMonthDayConstruction:
    """Validation of month and day values."""

    def test_valid_values(self):
        value = MonthDay.of(2, 29)
        assert value.month == 2
        assert value.day == 29

    @pytest.mark.parametrize("month,day", [(0, 1), (13, 1), (1, 0), (1, 32), (4, 31), (2, 30)])
    def test_invalid_values_raise(self, month, day):
        with pytest.raises(InvalidMonthDayError) as exc_info:
            MonthDay(month, day)
        assert exc_info.value.month == month
        assert exc_info.value.day == day

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            MonthDay(13, 1)
        assert issubclass(InvalidMonthDayError, CommonLibError)

    def test_non_int_rejected(self):
        with pytest.raises(InvalidMonthDayError):
            MonthDay("1", 1)
        with pytest.raises(InvalidMonthDayError):
            MonthDay(1, True)

    def test_from_date(self):
        assert MonthDay.from_date(date(2021, 7, 4)) == MonthDay(7, 4)
        assert MonthDay.from_date(datetime(2021, 12, 31, 23, 59)) == MonthDay(12, 31)

    def test_today(self):
        today = date.today()
        assert MonthDay.today() == MonthDay(today.month, today.day)


class TestMonthDayOrdering:
    """Ordering is by month, then day."""

    def test_orders_by_month_then_day(self):
        assert MonthDay(1, 31) < MonthDay(2, 1)
        assert MonthDay(3, 1) > MonthDay(2, 29)
        assert MonthDay(6, 10) < MonthDay(6, 11)
        assert MonthDay(6, 10) <= MonthDay(6, 10)

    def test_sorting(self):
        values = [MonthDay(12, 1), MonthDay(1, 31), MonthDay(1, 2), MonthDay(7, 4)]
        assert sorted(values) == [MonthDay(1, 2), MonthDay(1, 31), MonthDay(7, 4), MonthDay(12, 1)]

    def test_hashable(self):
        assert len({MonthDay(1, 1), MonthDay.of(1, 1), MonthDay(1, 2)}) == 2


class TestMonthDayText:
    """Canonical --MM-DD text form."""

    def test_str(self):
        assert str(MonthDay(3, 1)) == "--03-01"
        assert str(MonthDay(12, 25)) == "--12-25"

    @pytest.mark.parametrize("text", ["--12-25", "12-25", " --12-25 "])
    def test_parse(self, text):
        assert MonthDay.parse(text) == MonthDay(12, 25)

    @pytest.mark.parametrize("text", ["", "12/25", "--1225", "2024-12-25", "--13-01", "--02-30"])
    def test_parse_invalid(self, text):
        with pytest.raises(InvalidMonthDayError):
            MonthDay.parse(text)

    def test_parse_round_trip_of_str(self):
        value = MonthDay(9, 9)
        assert MonthDay.parse(str(value)) == value


class TestAtYear:
    def test_at_year(self):
        assert MonthDay(7, 4).at_year(2021) == date(2021, 7, 4)

    def test_leap_day_on_non_leap_year(self):
        assert MonthDay(2, 29).at_year(2024) == date(2024, 2, 29)
        assert MonthDay(2, 29).at_year(2023) == date(2023, 2, 28)
