"""TimeUnit enumeration for the fixed-ratio duration units.

This module provides the TimeUnit enum representing the time spans
the duration constructors understand, from milliseconds to millennia.
"""

from __future__ import annotations

from enum import Enum

from matteroftime._internal.constants import (
    DAYS_PER_MONTH,
    DAYS_PER_WEEK,
    DAYS_PER_YEAR,
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
)


class TimeUnit(Enum):
    """Fixed-length time units.

    Each unit converts to a whole number of milliseconds. MONTH and YEAR
    (and everything built on them) are approximations: a month is always
    30 days and a year always 365 days. For calendar-aware month and year
    steps use ``add_months`` and ``add_years`` instead.

    Examples:
        >>> TimeUnit.HOUR.to_millis()
        3600000

        >>> TimeUnit.FORTNIGHT.to_millis() == 14 * TimeUnit.DAY.to_millis()
        True

        >>> TimeUnit.MONTH.to_millis() == 30 * TimeUnit.DAY.to_millis()
        True
    """

    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    FORTNIGHT = "fortnight"
    MONTH = "month"
    TRIMESTER = "trimester"
    SEMESTER = "semester"
    YEAR = "year"
    DECADE = "decade"
    CENTURY = "century"
    MILLENNIUM = "millennium"

    def to_millis(self) -> int:
        """Convert one unit of this TimeUnit to milliseconds."""
        return _MILLIS[self]


_MILLIS: dict[TimeUnit, int] = {
    TimeUnit.MILLISECOND: 1,
    TimeUnit.SECOND: MILLIS_PER_SECOND,
    TimeUnit.MINUTE: MILLIS_PER_MINUTE,
    TimeUnit.HOUR: MILLIS_PER_HOUR,
    TimeUnit.DAY: MILLIS_PER_DAY,
    TimeUnit.WEEK: DAYS_PER_WEEK * MILLIS_PER_DAY,
    TimeUnit.FORTNIGHT: 2 * DAYS_PER_WEEK * MILLIS_PER_DAY,
    TimeUnit.MONTH: DAYS_PER_MONTH * MILLIS_PER_DAY,
    TimeUnit.TRIMESTER: 4 * DAYS_PER_MONTH * MILLIS_PER_DAY,
    TimeUnit.SEMESTER: 6 * DAYS_PER_MONTH * MILLIS_PER_DAY,
    TimeUnit.YEAR: DAYS_PER_YEAR * MILLIS_PER_DAY,
    TimeUnit.DECADE: 10 * DAYS_PER_YEAR * MILLIS_PER_DAY,
    TimeUnit.CENTURY: 100 * DAYS_PER_YEAR * MILLIS_PER_DAY,
    TimeUnit.MILLENNIUM: 1000 * DAYS_PER_YEAR * MILLIS_PER_DAY,
}


__all__ = ["TimeUnit"]
