"""Weekday resolution relative to a date or within a month.

This module provides the primitives behind ``date.next.monday()`` and
``first.sunday.of.june()``. All weekdays are zero-based with Sunday = 0,
and weeks start on Sunday.

Functions taking a reference date never modify it and keep its time of
day. Month lookups return midnight.
"""

from __future__ import annotations

import logging

from matteroftime._internal.constants import DAYS_PER_WEEK
from matteroftime._internal.validation import (
    validate_nth,
    validate_range,
    validate_weekday,
)
from matteroftime.core.value import DateValue

logger = logging.getLogger(__name__)


def _shift_to_weekday(ref: DateValue, day: int, weeks: int) -> DateValue:
    validate_weekday(day)
    result = ref.copy()
    result.day = ref.day + weeks * DAYS_PER_WEEK + day - ref.day_of_week
    return result


def current_weekday(ref: DateValue, day: int) -> DateValue:
    """Return the given weekday of the week containing ``ref``.

    Args:
        ref: The reference date.
        day: Target weekday (0=Sunday, 6=Saturday).

    Returns:
        The date in the same Sunday-to-Saturday week, which may lie in
        the previous or next month.

    Raises:
        ArgumentRangeError: If day is outside 0-6.

    Examples:
        >>> ref = DateValue(2018, 9, 12)  # Friday
        >>> current_weekday(ref, 1)
        DateValue(2018, 9, 8, 0, 0, 0, 0)
    """
    return _shift_to_weekday(ref, day, 0)


def next_week_weekday(ref: DateValue, day: int) -> DateValue:
    """Return the given weekday of the week after ``ref``'s week.

    Examples:
        >>> next_week_weekday(DateValue(2018, 9, 12), 3)
        DateValue(2018, 9, 17, 0, 0, 0, 0)
    """
    return _shift_to_weekday(ref, day, 1)


def last_week_weekday(ref: DateValue, day: int) -> DateValue:
    """Return the given weekday of the week before ``ref``'s week.

    Examples:
        >>> last_week_weekday(DateValue(2018, 9, 12), 5)
        DateValue(2018, 9, 5, 0, 0, 0, 0)
    """
    return _shift_to_weekday(ref, day, -1)


def upcoming_weekday(ref: DateValue, day: int) -> DateValue:
    """Return the next occurrence of a weekday strictly after ``ref``'s day.

    The result is always 1 to 7 days ahead. When ``ref`` already falls on
    the requested weekday, the answer is a week later, never today.

    Examples:
        >>> ref = DateValue(2018, 9, 12)  # Friday
        >>> upcoming_weekday(ref, 6)  # Saturday, this week
        DateValue(2018, 9, 13, 0, 0, 0, 0)
        >>> upcoming_weekday(ref, 2)  # Tuesday, next week
        DateValue(2018, 9, 16, 0, 0, 0, 0)
        >>> upcoming_weekday(ref, 5)  # Friday, a week away
        DateValue(2018, 9, 19, 0, 0, 0, 0)
    """
    validate_weekday(day)
    if ref.day_of_week >= day:
        return next_week_weekday(ref, day)
    return current_weekday(ref, day)


def _resolve_month(month: int | None, year: int | None) -> tuple[int, int]:
    if month is None or year is None:
        today = DateValue.now()
        if month is None:
            month = today.month
        if year is None:
            year = today.year
    return month, year


@validate_range(day=(0, 6), month=(0, 11))
def nth_weekday_of_month(
    day: int,
    nth: int,
    month: int | None = None,
    year: int | None = None,
) -> DateValue | None:
    """Return the nth occurrence of a weekday in a month.

    Unlike naive day arithmetic, a missing occurrence does not roll over
    into the following month.

    Args:
        day: Target weekday (0=Sunday, 6=Saturday).
        nth: Which occurrence, 1-5.
        month: Zero-based month; defaults to the current month.
        year: The year; defaults to the current year.

    Returns:
        Midnight of the requested date, or None if the month has fewer
        than ``nth`` occurrences of the weekday.

    Raises:
        ArgumentRangeError: If day, nth or month is out of range.

    Examples:
        >>> nth_weekday_of_month(0, 1, 5, 2018)  # First Sunday of June 2018
        DateValue(2018, 5, 3, 0, 0, 0, 0)
        >>> nth_weekday_of_month(5, 5, 1, 2021) is None  # No 5th Friday
        True
    """
    validate_nth(nth)
    month, year = _resolve_month(month, year)

    cursor = DateValue(year, month, 1)
    found = 1 if cursor.day_of_week == day else 0
    while found < nth:
        cursor.day += 1
        if cursor.day_of_week == day:
            found += 1

    if cursor.month != month:
        logger.debug(
            "no occurrence %d of weekday %d in %04d-%02d", nth, day, year, month + 1
        )
        return None
    return cursor


@validate_range(day=(0, 6), month=(0, 11))
def last_weekday_of_month(
    day: int,
    month: int | None = None,
    year: int | None = None,
) -> DateValue:
    """Return the last occurrence of a weekday in a month.

    Every month holds at least four of each weekday, so this always
    succeeds.

    Args:
        day: Target weekday (0=Sunday, 6=Saturday).
        month: Zero-based month; defaults to the current month.
        year: The year; defaults to the current year.

    Returns:
        Midnight of the requested date.

    Raises:
        ArgumentRangeError: If day or month is out of range.

    Examples:
        >>> last_weekday_of_month(0, 9, 2018)  # Last Sunday of October 2018
        DateValue(2018, 9, 28, 0, 0, 0, 0)
    """
    month, year = _resolve_month(month, year)

    # First of the following month, then step back
    cursor = DateValue(year, month + 1, 1)
    while True:
        cursor.day -= 1
        if cursor.day_of_week == day:
            return cursor


__all__ = [
    "current_weekday",
    "next_week_weekday",
    "last_week_weekday",
    "upcoming_weekday",
    "nth_weekday_of_month",
    "last_weekday_of_month",
]
