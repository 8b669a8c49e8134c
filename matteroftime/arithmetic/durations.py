"""Semantic duration constructors.

Each constructor returns a DateValue whose epoch value is the requested
span in milliseconds. Such a value is meant to be used as an offset:
``hours(3).offset_from(start)`` is three hours after ``start``.

Months are a flat 30 days and years a flat 365 days. Use ``add_months``
and ``add_years`` for calendar-aware steps.
"""

from __future__ import annotations

import datetime as _datetime
from typing import Union

from matteroftime._internal.decorators import deprecated
from matteroftime.core.value import DateValue
from matteroftime.units.timeunit import TimeUnit

Number = Union[int, float]


def span(value: Number, unit: TimeUnit) -> DateValue:
    """Return ``value`` units as a millisecond offset.

    Fractional results are truncated toward zero.

    Raises:
        TypeError: If value is not a number.

    Examples:
        >>> span(1.5, TimeUnit.SECOND).epoch_millis
        1500
        >>> span(-2, TimeUnit.DAY).epoch_millis
        -172800000
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"value must be a number, got {type(value).__name__}")
    return DateValue.from_millis(int(value * unit.to_millis()))


def milliseconds(value: Number) -> DateValue:
    return span(value, TimeUnit.MILLISECOND)


def seconds(value: Number) -> DateValue:
    return span(value, TimeUnit.SECOND)


def minutes(value: Number) -> DateValue:
    return span(value, TimeUnit.MINUTE)


def hours(value: Number) -> DateValue:
    return span(value, TimeUnit.HOUR)


def days(value: Number) -> DateValue:
    return span(value, TimeUnit.DAY)


def weeks(value: Number) -> DateValue:
    """Return ``value`` weeks of 7 days."""
    return span(value, TimeUnit.WEEK)


def fortnights(value: Number) -> DateValue:
    """Return ``value`` fortnights, the same as ``weeks(2 * value)``."""
    return span(value, TimeUnit.FORTNIGHT)


@deprecated("use fortnights() instead")
def fortnites(value: Number) -> DateValue:
    return fortnights(value)


def months(value: Number) -> DateValue:
    """Return ``value`` months of 30 days.

    For a month step that respects month lengths, use ``add_months``.
    """
    return span(value, TimeUnit.MONTH)


def trimester(value: Number) -> DateValue:
    """Return ``value`` trimesters, the same as ``months(4 * value)``."""
    return span(value, TimeUnit.TRIMESTER)


def semester(value: Number) -> DateValue:
    """Return ``value`` semesters, the same as ``months(6 * value)``."""
    return span(value, TimeUnit.SEMESTER)


def years(value: Number) -> DateValue:
    """Return ``value`` years of 365 days.

    For a year step that respects leap years, use ``add_years``.
    """
    return span(value, TimeUnit.YEAR)


def decades(value: Number) -> DateValue:
    return span(value, TimeUnit.DECADE)


def centuries(value: Number) -> DateValue:
    return span(value, TimeUnit.CENTURY)


def millenia(value: Number) -> DateValue:
    return span(value, TimeUnit.MILLENNIUM)


def offset_from(
    delta: DateValue,
    base: DateValue | _datetime.datetime | int,
) -> DateValue:
    """Return ``base`` shifted by the epoch value of ``delta``.

    Args:
        delta: An offset, usually built by one of the constructors above.
        base: The starting point: a DateValue, a datetime or epoch millis.

    Returns:
        A new DateValue at ``base + delta`` milliseconds.

    Examples:
        >>> offset_from(days(1), DateValue(2018, 9, 15))
        DateValue(2018, 9, 16, 0, 0, 0, 0)
    """
    if not isinstance(base, DateValue):
        base = DateValue(base)
    return DateValue.from_millis(base.epoch_millis + delta.epoch_millis)


__all__ = [
    "span",
    "milliseconds",
    "seconds",
    "minutes",
    "hours",
    "days",
    "weeks",
    "fortnights",
    "fortnites",
    "months",
    "trimester",
    "semester",
    "years",
    "decades",
    "centuries",
    "millenia",
    "offset_from",
]
