"""Arithmetic on DateValue.

This module provides:
    - Calendar-aware steps: add_months, add_years, set_year
    - Fixed-ratio duration constructors: milliseconds ... millenia
    - offset_from: apply a duration to a point in time
"""

from __future__ import annotations

from matteroftime.arithmetic.calendar_ops import add_months, add_years, set_year
from matteroftime.arithmetic.durations import (
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
    span,
    trimester,
    weeks,
    years,
)

__all__: list[str] = [
    "add_months",
    "add_years",
    "set_year",
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
