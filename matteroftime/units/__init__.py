"""Units and enumerations.

This module provides:
    - Weekday: Sunday-first, zero-based day of week enum
    - Month: zero-based month enum
    - TimeUnit: fixed-ratio duration units (MILLISECOND ... MILLENNIUM)
"""

from __future__ import annotations

from matteroftime.units.month import Month
from matteroftime.units.timeunit import TimeUnit
from matteroftime.units.weekday import Weekday

__all__: list[str] = [
    "Month",
    "TimeUnit",
    "Weekday",
]
