"""Calendar utilities for matteroftime.

This module provides internal functions for calendar calculations:
the simplified leap year rule, month lengths, component normalization
and conversion between wall-clock components and epoch milliseconds.

Two calendars meet here. Month lengths for calendar arithmetic follow the
simplified rule (every fourth year is a leap year, no century exception),
while the wrapped ``datetime`` primitive follows the proleptic Gregorian
calendar. Components are always interpreted as UTC wall-clock time.

This module is not part of the public API.
"""

from __future__ import annotations

import datetime as _datetime

from matteroftime._internal.constants import FEBRUARY, LONG_MONTHS, MAX_YEAR, MIN_YEAR
from matteroftime._internal.validation import validate_month
from matteroftime.errors import DateOverflowError

# 1970-01-01T00:00:00, naive, read as UTC
_EPOCH = _datetime.datetime(1970, 1, 1)
_ONE_MILLI = _datetime.timedelta(milliseconds=1)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year under the simplified rule.

    Every year divisible by 4 is a leap year. There is no exception for
    centuries, so 1900 and 2100 count as leap years here.

    Examples:
        >>> is_leap_year(2016)
        True
        >>> is_leap_year(2100)
        True
        >>> is_leap_year(2017)
        False
    """
    return year % 4 == 0


def last_day_of_month(month: int, year: int) -> int:
    """Return the last valid day of a zero-based month.

    Args:
        month: The month (0-11, 0 = January).
        year: The year, only consulted for February.

    Returns:
        28, 29, 30 or 31.

    Raises:
        ArgumentRangeError: If month is not in 0-11.

    Examples:
        >>> last_day_of_month(1, 2016)
        29
        >>> last_day_of_month(10, 2018)
        30
    """
    validate_month(month)

    if month == FEBRUARY:
        return 29 if is_leap_year(year) else 28
    if month in LONG_MONTHS:
        return 31
    return 30


def is_last_day_of_month(year: int, month: int, day: int) -> bool:
    """Return True if ``day`` is the last day of ``month`` in ``year``."""
    return day == last_day_of_month(month, year)


def compose(
    year: int,
    month: int,
    day: int = 1,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> _datetime.datetime:
    """Build a datetime from components, rolling over out-of-range values.

    Month overflow carries into the year using floor division. Day, hour,
    minute, second and millisecond are added as offsets to the first of the
    month, so day 0 is the last day of the previous month and hour 24 is
    midnight of the next day.

    Args:
        year: The year.
        month: The zero-based month, any integer.
        day: The day of the month, any integer.
        hour: The hour, any integer.
        minute: The minute, any integer.
        second: The second, any integer.
        millisecond: The millisecond, any integer.

    Returns:
        A naive datetime holding the normalized UTC wall-clock time.

    Raises:
        DateOverflowError: If the result is outside years 1-9999.

    Examples:
        >>> compose(2018, 1, 31)
        datetime.datetime(2018, 3, 3, 0, 0)
        >>> compose(2018, 12, 0)
        datetime.datetime(2018, 12, 31, 0, 0)
    """
    carry, month = divmod(month, 12)
    try:
        first = _datetime.datetime(year + carry, month + 1, 1)
        return first + _datetime.timedelta(
            days=day - 1,
            hours=hour,
            minutes=minute,
            seconds=second,
            milliseconds=millisecond,
        )
    except (ValueError, OverflowError) as exc:
        raise DateOverflowError(
            f"date outside years {MIN_YEAR}-{MAX_YEAR}: "
            f"year={year + carry}, month={month}, day={day}"
        ) from exc


def to_epoch_millis(dt: _datetime.datetime) -> int:
    """Convert a naive UTC datetime to milliseconds since the epoch."""
    return (dt - _EPOCH) // _ONE_MILLI


def from_epoch_millis(millis: int) -> _datetime.datetime:
    """Convert milliseconds since the epoch to a naive UTC datetime.

    Raises:
        DateOverflowError: If the result is outside years 1-9999.
    """
    try:
        return _EPOCH + _datetime.timedelta(milliseconds=millis)
    except OverflowError as exc:
        raise DateOverflowError(
            f"epoch value {millis} is outside years {MIN_YEAR}-{MAX_YEAR}"
        ) from exc


def day_of_week(dt: _datetime.datetime) -> int:
    """Return the day of the week with Sunday as 0 and Saturday as 6."""
    return (dt.weekday() + 1) % 7


__all__ = [
    "is_leap_year",
    "last_day_of_month",
    "is_last_day_of_month",
    "compose",
    "to_epoch_millis",
    "from_epoch_millis",
    "day_of_week",
]
