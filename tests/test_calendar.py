"""Tests for the internal calendar helpers."""

from __future__ import annotations

import datetime

import pytest

from matteroftime._internal.calendar import (
    compose,
    day_of_week,
    from_epoch_millis,
    is_last_day_of_month,
    is_leap_year,
    last_day_of_month,
    to_epoch_millis,
)
from matteroftime.errors import ArgumentRangeError, DateOverflowError
from matteroftime.units import Month

COMMON_YEAR = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class TestLeapYear:
    """Tests for the simplified leap year rule."""

    def test_divisible_by_four(self) -> None:
        assert is_leap_year(2016)
        assert is_leap_year(2020)

    def test_not_divisible_by_four(self) -> None:
        assert not is_leap_year(2017)
        assert not is_leap_year(2018)

    def test_no_century_exception(self) -> None:
        """1900 and 2100 count as leap years under the simplified rule."""
        assert is_leap_year(1900)
        assert is_leap_year(2100)
        assert is_leap_year(2000)


class TestLastDayOfMonth:
    """Tests for last_day_of_month()."""

    def test_common_year_table(self) -> None:
        """Every month of 2018 matches the fixed table."""
        assert tuple(last_day_of_month(m, 2018) for m in range(12)) == COMMON_YEAR

    def test_leap_february(self) -> None:
        assert last_day_of_month(1, 2016) == 29

    def test_common_february(self) -> None:
        assert last_day_of_month(1, 2017) == 28

    def test_february_2100_follows_simplified_rule(self) -> None:
        assert last_day_of_month(1, 2100) == 29

    def test_accepts_month_enum(self) -> None:
        assert last_day_of_month(Month.NOVEMBER, 2018) == 30

    def test_range_and_february_rule_over_many_years(self) -> None:
        """Results stay in 28-31 and February is 29 exactly in leap years."""
        for year in range(1980, 2041):
            for month in range(12):
                last = last_day_of_month(month, year)
                assert last in (28, 29, 30, 31)
                if month == 1:
                    assert (last == 29) == (year % 4 == 0)
                else:
                    assert last == COMMON_YEAR[month]

    def test_month_out_of_range(self) -> None:
        with pytest.raises(ArgumentRangeError, match="month must be between 0 and 11"):
            last_day_of_month(12, 2018)
        with pytest.raises(ArgumentRangeError):
            last_day_of_month(-1, 2018)


class TestIsLastDayOfMonth:
    """Tests for is_last_day_of_month()."""

    def test_last_days(self) -> None:
        assert is_last_day_of_month(2018, 9, 31)
        assert is_last_day_of_month(2018, 10, 30)
        assert is_last_day_of_month(2016, 1, 29)
        assert is_last_day_of_month(2017, 1, 28)

    def test_not_last_days(self) -> None:
        assert not is_last_day_of_month(2018, 9, 30)
        assert not is_last_day_of_month(2016, 1, 28)


class TestCompose:
    """Tests for component normalization."""

    def test_plain_components(self) -> None:
        assert compose(2018, 9, 12, 14, 30, 15, 250) == datetime.datetime(
            2018, 10, 12, 14, 30, 15, 250_000
        )

    def test_day_overflow_rolls_into_next_month(self) -> None:
        assert compose(2018, 1, 31) == datetime.datetime(2018, 3, 3)

    def test_day_zero_is_last_of_previous_month(self) -> None:
        assert compose(2018, 2, 0) == datetime.datetime(2018, 2, 28)

    def test_month_overflow_carries_into_year(self) -> None:
        assert compose(2018, 12, 1) == datetime.datetime(2019, 1, 1)
        assert compose(2018, 25, 1) == datetime.datetime(2020, 2, 1)

    def test_negative_month_borrows_from_year(self) -> None:
        assert compose(2018, -1, 1) == datetime.datetime(2017, 12, 1)
        assert compose(2018, -13, 1) == datetime.datetime(2016, 12, 1)

    def test_time_overflow(self) -> None:
        assert compose(2018, 9, 13, 24) == datetime.datetime(2018, 10, 14)
        assert compose(2018, 9, 13, 0, 0, 0, 1500) == datetime.datetime(
            2018, 10, 13, 0, 0, 1, 500_000
        )

    def test_out_of_range_year(self) -> None:
        with pytest.raises(DateOverflowError):
            compose(10000, 0, 1)
        with pytest.raises(DateOverflowError):
            compose(0, 11, 31)

    def test_out_of_range_offset(self) -> None:
        with pytest.raises(DateOverflowError):
            compose(9999, 11, 32)


class TestEpochConversion:
    """Tests for epoch millisecond conversion."""

    def test_epoch_is_zero(self) -> None:
        assert to_epoch_millis(datetime.datetime(1970, 1, 1)) == 0
        assert from_epoch_millis(0) == datetime.datetime(1970, 1, 1)

    def test_one_day(self) -> None:
        assert to_epoch_millis(datetime.datetime(1970, 1, 2)) == 86_400_000

    def test_before_epoch(self) -> None:
        assert to_epoch_millis(datetime.datetime(1969, 12, 31, 23, 59, 59, 999_000)) == -1
        assert from_epoch_millis(-1) == datetime.datetime(1969, 12, 31, 23, 59, 59, 999_000)

    def test_out_of_range(self) -> None:
        with pytest.raises(DateOverflowError):
            from_epoch_millis(400_000 * 365 * 86_400_000)


class TestDayOfWeek:
    """Tests for the Sunday-first day of week."""

    def test_known_days(self) -> None:
        assert day_of_week(datetime.datetime(1970, 1, 1)) == 4  # Thursday
        assert day_of_week(datetime.datetime(2018, 10, 12)) == 5  # Friday
        assert day_of_week(datetime.datetime(2018, 10, 14)) == 0  # Sunday
        assert day_of_week(datetime.datetime(2018, 10, 13)) == 6  # Saturday
