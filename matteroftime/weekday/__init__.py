"""Weekday lookups.

This module provides:
    - Resolver primitives: current_weekday, next_week_weekday,
      last_week_weekday, upcoming_weekday, nth_weekday_of_month,
      last_weekday_of_month
    - Per-date views behind ``date.current/upcoming/next/last``
    - Ordinal tables: first .. fifth, last (``first.sunday.of.june()``)
"""

from __future__ import annotations

from matteroftime.weekday.ordinals import fifth, first, fourth, last, second, third
from matteroftime.weekday.resolver import (
    current_weekday,
    last_week_weekday,
    last_weekday_of_month,
    next_week_weekday,
    nth_weekday_of_month,
    upcoming_weekday,
)
from matteroftime.weekday.views import (
    CurrentWeekdays,
    LastWeekdays,
    NextWeekdays,
    UpcomingWeekdays,
)

__all__: list[str] = [
    "current_weekday",
    "next_week_weekday",
    "last_week_weekday",
    "upcoming_weekday",
    "nth_weekday_of_month",
    "last_weekday_of_month",
    "CurrentWeekdays",
    "UpcomingWeekdays",
    "NextWeekdays",
    "LastWeekdays",
    "first",
    "second",
    "third",
    "fourth",
    "fifth",
    "last",
]
