"""Calendar-aware month and year arithmetic.

This module implements the end-of-month policy of matteroftime:

    When a date on the last day of its month is moved by whole months,
    the result is the last day of the target month. When the last day of
    February is moved by whole years, the result is the last day of
    February in the target year.

Every other date, and every call with ``vanilla=True``, uses naive
component addition with the primitive's rollover, which may overflow
into the following month.

Examples:
    DateValue(2018, 9, 31) + 1 month                  -> Nov 30, 2018
    DateValue(2018, 10, 30) - 1 month                 -> Oct 31, 2018
    DateValue(2018, 2, 31) - 1 month, vanilla=True    -> Mar 3, 2018
    DateValue(2016, 1, 29) + 1 year                   -> Feb 28, 2017
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from matteroftime._internal.calendar import last_day_of_month
from matteroftime._internal.constants import FEBRUARY
from matteroftime._internal.validation import require_integer

if TYPE_CHECKING:
    from matteroftime.core.value import DateValue

logger = logging.getLogger(__name__)


def add_months(date: DateValue, count: int, vanilla: bool = False) -> DateValue:
    """Return a new DateValue offset by ``count`` months.

    Args:
        date: The starting value, left untouched.
        count: Number of months to add (can be negative).
        vanilla: If True, always use naive component addition.

    Returns:
        A new DateValue. Time of day is preserved.

    Raises:
        TypeError: If count is not an integer.
        DateOverflowError: If the result is out of range.

    Examples:
        >>> from matteroftime.core.value import DateValue
        >>> add_months(DateValue(2018, 0, 31), 1)
        DateValue(2018, 1, 28, 0, 0, 0, 0)

        >>> add_months(DateValue(2018, 0, 31), 1, vanilla=True)
        DateValue(2018, 2, 3, 0, 0, 0, 0)

        >>> add_months(DateValue(2018, 0, 31), -1)
        DateValue(2017, 11, 31, 0, 0, 0, 0)
    """
    require_integer("count", count)
    result = date.copy()

    if not vanilla and date.is_last_day_of_month():
        month_index = date.month + count
        target_year = date.year + month_index // 12
        target_month = month_index % 12
        target_day = last_day_of_month(target_month, target_year)

        # Park on the 1st so the year and month steps cannot roll over
        result.day = 1
        result.year = target_year
        result.month = target_month
        result.day = target_day
        logger.debug(
            "end of month kept: %s + %d months -> %04d-%02d-%02d",
            date,
            count,
            target_year,
            target_month + 1,
            target_day,
        )
    else:
        result.month = date.month + count

    return result


def add_years(date: DateValue, count: int, vanilla: bool = False) -> DateValue:
    """Return a new DateValue offset by ``count`` years.

    Unless ``vanilla`` is set, the last day of February stays the last day
    of February: Feb 29 becomes Feb 28 in a common year and Feb 28 becomes
    Feb 29 in a leap year.

    Args:
        date: The starting value, left untouched.
        count: Number of years to add (can be negative).
        vanilla: If True, always use naive component addition.

    Returns:
        A new DateValue. Time of day is preserved.

    Raises:
        TypeError: If count is not an integer.
        DateOverflowError: If the result is out of range.

    Examples:
        >>> from matteroftime.core.value import DateValue
        >>> add_years(DateValue(2016, 1, 29), 1)
        DateValue(2017, 1, 28, 0, 0, 0, 0)

        >>> add_years(DateValue(2016, 1, 29), 1, vanilla=True)
        DateValue(2017, 2, 1, 0, 0, 0, 0)
    """
    require_integer("count", count)
    result = date.copy()

    if not vanilla and date.month == FEBRUARY and date.is_last_day_of_month():
        result.day = 1
        result.year = date.year + count
        result.day = last_day_of_month(FEBRUARY, result.year)
        logger.debug(
            "end of February kept: %s + %d years -> %s", date, count, result
        )
    else:
        result.year = date.year + count

    return result


def set_year(date: DateValue, year: int) -> DateValue:
    """Return a new DateValue moved to ``year`` with ``add_years`` semantics."""
    require_integer("year", year)
    return add_years(date, year - date.year)


__all__ = [
    "add_months",
    "add_years",
    "set_year",
]
