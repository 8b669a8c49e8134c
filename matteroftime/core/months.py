"""Named constructors: now, tomorrow, yesterday and january .. december.

The month constructors return midnight (UTC) on a day of that month in
the current or given year. A day past the end of the month is clamped to
the month's last day, so ``february(30, 2018)`` is February 28, 2018.
"""

from __future__ import annotations

from typing import Callable

from matteroftime._internal.calendar import last_day_of_month
from matteroftime._internal.constants import MONTH_NAMES
from matteroftime._internal.validation import require_integer, validate_range
from matteroftime.core.value import DateValue
from matteroftime.errors import ArgumentRangeError


def now() -> DateValue:
    """Return the current instant."""
    return DateValue.now()


def tomorrow() -> DateValue:
    """Return the instant exactly one day from now."""
    return DateValue.now().tomorrow()


def yesterday() -> DateValue:
    """Return the instant exactly one day ago."""
    return DateValue.now().yesterday()


@validate_range(month=(0, 11))
def on_month(month: int, day: int = 1, year: int | None = None) -> DateValue:
    """Return midnight on ``day`` of a zero-based ``month``.

    Args:
        month: The month (0-11, 0 = January).
        day: Day of the month; values past the month's end are clamped.
        year: The year; defaults to the current year.

    Returns:
        A new DateValue at 00:00:00.000.

    Raises:
        ArgumentRangeError: If month is outside 0-11 or day is below 1.

    Examples:
        >>> on_month(9, 12, 2018)
        DateValue(2018, 9, 12, 0, 0, 0, 0)
        >>> on_month(1, 31, 2016)
        DateValue(2016, 1, 29, 0, 0, 0, 0)
    """
    require_integer("day", day)
    if day < 1:
        raise ArgumentRangeError(f"day must be at least 1, got {day}")
    if year is None:
        year = DateValue.now().year
    require_integer("year", year)

    return DateValue(year, month, min(day, last_day_of_month(month, year)))


def _month_constructor(month: int) -> Callable[..., DateValue]:
    name = MONTH_NAMES[month]

    def constructor(day: int = 1, year: int | None = None) -> DateValue:
        return on_month(month, day, year)

    constructor.__name__ = constructor.__qualname__ = name
    constructor.__doc__ = (
        f"Return midnight on ``day`` of {name.capitalize()} in ``year`` "
        "(default: this year)."
    )
    return constructor


january = _month_constructor(0)
february = _month_constructor(1)
march = _month_constructor(2)
april = _month_constructor(3)
may = _month_constructor(4)
june = _month_constructor(5)
july = _month_constructor(6)
august = _month_constructor(7)
september = _month_constructor(8)
october = _month_constructor(9)
november = _month_constructor(10)
december = _month_constructor(11)


__all__ = [
    "now",
    "tomorrow",
    "yesterday",
    "on_month",
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
]
