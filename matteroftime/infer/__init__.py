"""Text parsing.

This module provides the time-of-day parser behind ``DateValue.at``:
    - parse_time_of_day: parse "HH[:MM[:SS[.XXX]]] [am|pm]" into fields
    - apply_time_of_day: parse and set the time on a DateValue in place
"""

from __future__ import annotations

from matteroftime.infer.time_of_day import (
    TimeOfDay,
    apply_time_of_day,
    parse_time_of_day,
)

__all__: list[str] = [
    "TimeOfDay",
    "apply_time_of_day",
    "parse_time_of_day",
]
