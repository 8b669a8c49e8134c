"""Tests for calendar-aware month and year arithmetic."""

from __future__ import annotations

import logging

import pytest

from matteroftime import DateValue, add_months, add_years, set_year
from matteroftime.errors import DateOverflowError


class TestAddMonths:
    """Tests for add_months()."""

    def test_mid_month(self) -> None:
        assert add_months(DateValue(2018, 9, 15), 1) == DateValue(2018, 10, 15)

    def test_end_of_month_forward(self) -> None:
        """Oct 31 + 1 month is Nov 30."""
        assert add_months(DateValue(2018, 9, 31), 1) == DateValue(2018, 10, 30)

    def test_end_of_month_backward(self) -> None:
        """Nov 30 - 1 month is Oct 31."""
        assert add_months(DateValue(2018, 10, 30), -1) == DateValue(2018, 9, 31)

    def test_end_of_month_into_february(self) -> None:
        assert add_months(DateValue(2018, 11, 31), 2) == DateValue(2019, 1, 28)
        assert add_months(DateValue(2020, 0, 31), 1) == DateValue(2020, 1, 29)

    def test_end_of_month_across_years_backward(self) -> None:
        assert add_months(DateValue(2018, 0, 31), -1) == DateValue(2017, 11, 31)
        assert add_months(DateValue(2018, 0, 31), -13) == DateValue(2016, 11, 31)

    def test_vanilla_from_end_of_month(self) -> None:
        """Vanilla month steps use plain rollover."""
        assert add_months(DateValue(2018, 1, 28), 1, vanilla=True) == DateValue(2018, 2, 28)
        assert add_months(DateValue(2018, 2, 31), -1, vanilla=True) == DateValue(2018, 2, 3)

    def test_not_last_day_rolls_over(self) -> None:
        """Only the last day of a month gets end-of-month handling."""
        assert add_months(DateValue(2018, 0, 30), 1) == DateValue(2018, 2, 2)

    def test_time_of_day_preserved(self) -> None:
        result = add_months(DateValue(2018, 9, 31, 23, 59, 59, 999), 1)
        assert result == DateValue(2018, 10, 30, 23, 59, 59, 999)

    def test_zero_months(self) -> None:
        assert add_months(DateValue(2018, 9, 31), 0) == DateValue(2018, 9, 31)

    def test_receiver_untouched(self) -> None:
        d = DateValue(2018, 9, 31)
        add_months(d, 1)
        assert d == DateValue(2018, 9, 31)

    def test_method_form(self) -> None:
        assert DateValue(2018, 9, 31).add_months(1) == DateValue(2018, 10, 30)
        assert DateValue(2018, 0, 31).add_months(1, vanilla=True) == DateValue(2018, 2, 3)

    def test_rejects_non_integer_count(self) -> None:
        d = DateValue(2018, 9, 15)
        with pytest.raises(TypeError):
            add_months(d, 1.5)
        with pytest.raises(TypeError):
            add_months(d, True)

    def test_overflow(self) -> None:
        with pytest.raises(DateOverflowError):
            add_months(DateValue(9999, 11, 15), 1)

    @pytest.mark.parametrize(
        "start",
        [
            DateValue(2018, 0, 31),
            DateValue(2018, 1, 28),
            DateValue(2016, 1, 29),
            DateValue(2019, 3, 30, 12, 30),
        ],
    )
    def test_end_of_month_lands_on_end_of_month(self, start: DateValue) -> None:
        """Any last day moved by n months is the last day of the target month."""
        for n in range(-36, 37):
            result = add_months(start, n)
            assert result.is_last_day_of_month(), (start, n)
            assert result.month == (start.month + n) % 12
            assert result.year == start.year + (start.month + n) // 12
            assert (result.hour, result.minute) == (start.hour, start.minute)

    def test_mid_month_round_trip(self) -> None:
        """Days up to 28 survive a step there and back."""
        start = DateValue(2018, 5, 15, 8, 45)
        for n in range(-36, 37):
            assert add_months(add_months(start, n), -n) == start

    def test_logs_end_of_month(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="matteroftime.arithmetic.calendar_ops"):
            add_months(DateValue(2018, 9, 31), 1)
        assert "end of month kept" in caplog.text


class TestAddYears:
    """Tests for add_years()."""

    def test_plain_year(self) -> None:
        assert add_years(DateValue(2018, 2, 15), 2) == DateValue(2020, 2, 15)

    def test_leap_day_forward(self) -> None:
        """Feb 29, 2016 + 1 year is Feb 28, 2017."""
        assert add_years(DateValue(2016, 1, 29), 1) == DateValue(2017, 1, 28)

    def test_leap_day_to_leap_year(self) -> None:
        assert add_years(DateValue(2016, 1, 29), 4) == DateValue(2020, 1, 29)

    def test_end_of_february_backward(self) -> None:
        """Feb 28, 2017 - 1 year is Feb 29, 2016."""
        assert add_years(DateValue(2017, 1, 28), -1) == DateValue(2016, 1, 29)

    def test_vanilla(self) -> None:
        assert add_years(DateValue(2016, 1, 29), 1, vanilla=True) == DateValue(2017, 2, 1)
        assert add_years(DateValue(2017, 1, 28), -1, vanilla=True) == DateValue(2016, 1, 28)

    def test_only_february_is_special(self) -> None:
        assert add_years(DateValue(2018, 9, 31), 1) == DateValue(2019, 9, 31)

    def test_time_of_day_preserved(self) -> None:
        result = add_years(DateValue(2016, 1, 29, 6, 15), 1)
        assert result == DateValue(2017, 1, 28, 6, 15)

    def test_simplified_leap_rule_meets_calendar(self) -> None:
        """2100 counts as leap for the policy but not for the calendar."""
        assert add_years(DateValue(2096, 1, 29), 4) == DateValue(2100, 2, 1)

    def test_rejects_non_integer_count(self) -> None:
        with pytest.raises(TypeError):
            add_years(DateValue(2018, 0, 1), 0.5)

    def test_receiver_untouched(self) -> None:
        d = DateValue(2016, 1, 29)
        add_years(d, 1)
        assert d == DateValue(2016, 1, 29)


class TestSetYear:
    """Tests for set_year() and DateValue.in_year()."""

    def test_set_year(self) -> None:
        assert set_year(DateValue(2016, 1, 29), 2019) == DateValue(2019, 1, 28)

    def test_in_year(self) -> None:
        assert DateValue(2018, 9, 12).in_year(2020) == DateValue(2020, 9, 12)
        assert DateValue(2017, 1, 28).in_year(2016) == DateValue(2016, 1, 29)

    def test_rejects_non_integer_year(self) -> None:
        with pytest.raises(TypeError):
            set_year(DateValue(2018, 0, 1), "2019")
