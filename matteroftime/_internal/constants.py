"""Internal constants for matteroftime.

These constants define the conversion ratios, calendar tables and names
used throughout the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
MILLIS_PER_SECOND: int = 1_000
MILLIS_PER_MINUTE: int = 60 * MILLIS_PER_SECOND
MILLIS_PER_HOUR: int = 60 * MILLIS_PER_MINUTE
MILLIS_PER_DAY: int = 24 * MILLIS_PER_HOUR  # 86_400_000

DAYS_PER_WEEK: int = 7

# Fixed approximations used by the duration constructors, not calendar-aware
DAYS_PER_MONTH: int = 30
DAYS_PER_YEAR: int = 365

# Year limits of the wrapped datetime primitive
MIN_YEAR: int = 1
MAX_YEAR: int = 9999

# Zero-based months with 31 days: Jan, Mar, May, Jul, Aug, Oct, Dec
LONG_MONTHS: frozenset[int] = frozenset({0, 2, 4, 6, 7, 9, 11})

FEBRUARY: int = 1

WEEKDAY_NAMES: tuple[str, ...] = (
    "sunday",
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
)

MONTH_NAMES: tuple[str, ...] = (
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
)

ORDINAL_NAMES: tuple[str, ...] = ("first", "second", "third", "fourth", "fifth")

MAX_NTH: int = len(ORDINAL_NAMES)


__all__ = [
    "MILLIS_PER_SECOND",
    "MILLIS_PER_MINUTE",
    "MILLIS_PER_HOUR",
    "MILLIS_PER_DAY",
    "DAYS_PER_WEEK",
    "DAYS_PER_MONTH",
    "DAYS_PER_YEAR",
    "MIN_YEAR",
    "MAX_YEAR",
    "LONG_MONTHS",
    "FEBRUARY",
    "WEEKDAY_NAMES",
    "MONTH_NAMES",
    "ORDINAL_NAMES",
    "MAX_NTH",
]
