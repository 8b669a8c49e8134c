"""Core value type and its named constructors.

This module provides:
    - DateValue: an instant with settable calendar components
    - now, tomorrow, yesterday
    - on_month and the month constructors january .. december
"""

from __future__ import annotations

from matteroftime.core.months import (
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
from matteroftime.core.value import DateValue

__all__: list[str] = [
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
]
