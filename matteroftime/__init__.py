"""matteroftime: fluent, calendar-aware date arithmetic.

matteroftime wraps a point in time in a DateValue and adds human-readable
helpers for the questions people actually ask about dates.

Core Type:
    DateValue: An instant with settable year, month (0-11), day, hour,
        minute, second and millisecond, normalized on every change

Relative weekdays:
    date.current.monday(), date.upcoming.friday(),
    date.next.wednesday(), date.last.sunday()
    first.sunday.of.june(2018), last.friday.of.october()

Calendar arithmetic:
    add_months, add_years, set_year: keep the end of the month
    date.next.month(), date.last.year(), date.in_year(2020)

Durations (fixed ratios, as millisecond offsets):
    milliseconds, seconds, minutes, hours, days, weeks, fortnights,
    months, trimester, semester, years, decades, centuries, millenia

Time of day:
    date.at("5:42:23.123 pm")

Exceptions:
    MatterOfTimeError: Base exception
    InvalidFormatError: Malformed time of day
    ArgumentRangeError: Weekday, ordinal or month out of range
    MeridiemConflictError: 24-hour value with am/pm
    DateOverflowError: Result outside years 1-9999

Example:
    >>> import matteroftime as mot
    >>> d = mot.october(12, 2018)
    >>> d.next.wednesday()
    DateValue(2018, 9, 17, 0, 0, 0, 0)
    >>> mot.hours(3).offset_from(d)
    DateValue(2018, 9, 12, 3, 0, 0, 0)
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core type and constructors
from matteroftime.core import (
    DateValue,
    april,
    august,
    december,
    february,
    january,
    july,
    june,
    march,
    may,
    november,
    now,
    october,
    on_month,
    september,
    tomorrow,
    yesterday,
)

# Calendar math
from matteroftime._internal.calendar import (
    is_last_day_of_month,
    is_leap_year,
    last_day_of_month,
)
from matteroftime.arithmetic import (
    add_months,
    add_years,
    centuries,
    days,
    decades,
    fortnights,
    fortnites,
    hours,
    millenia,
    milliseconds,
    minutes,
    months,
    offset_from,
    seconds,
    semester,
    set_year,
    trimester,
    weeks,
    years,
)

# Weekdays
from matteroftime.weekday import (
    current_weekday,
    fifth,
    first,
    fourth,
    last,
    last_week_weekday,
    last_weekday_of_month,
    next_week_weekday,
    nth_weekday_of_month,
    second,
    third,
    upcoming_weekday,
)

# Time of day
from matteroftime.infer import TimeOfDay, apply_time_of_day, parse_time_of_day

# Units
from matteroftime.units import Month, TimeUnit, Weekday

# Exceptions
from matteroftime.errors import (
    ArgumentRangeError,
    DateOverflowError,
    InvalidFormatError,
    MatterOfTimeError,
    MeridiemConflictError,
)

__all__: list[str] = [
    "__version__",
    # Core
    "DateValue",
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
    # Calendar math
    "is_leap_year",
    "last_day_of_month",
    "is_last_day_of_month",
    "add_months",
    "add_years",
    "set_year",
    # Durations
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
    # Weekdays
    "current_weekday",
    "next_week_weekday",
    "last_week_weekday",
    "upcoming_weekday",
    "nth_weekday_of_month",
    "last_weekday_of_month",
    "first",
    "second",
    "third",
    "fourth",
    "fifth",
    "last",
    # Time of day
    "TimeOfDay",
    "parse_time_of_day",
    "apply_time_of_day",
    # Units
    "Month",
    "TimeUnit",
    "Weekday",
    # Exceptions
    "MatterOfTimeError",
    "InvalidFormatError",
    "ArgumentRangeError",
    "MeridiemConflictError",
    "DateOverflowError",
]
