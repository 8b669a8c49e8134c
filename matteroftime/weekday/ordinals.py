"""Ordinal weekday-of-month tables: ``first.sunday.of.june(2018)``.

The tables are built once at import time and never change. ``first`` to
``fifth`` bind ``nth_weekday_of_month``, and ``last`` binds
``last_weekday_of_month``. The month accessors take an optional year that
defaults to the current one.

Examples:
    >>> first.sunday.of.june(2018)
    DateValue(2018, 5, 3, 0, 0, 0, 0)
    >>> fifth.friday.of.february(2021) is None
    True
    >>> last.sunday.of.october(2018)
    DateValue(2018, 9, 28, 0, 0, 0, 0)
"""

from __future__ import annotations

from typing import Callable, Optional

from matteroftime._internal.constants import (
    MONTH_NAMES,
    ORDINAL_NAMES,
    WEEKDAY_NAMES,
)
from matteroftime._internal.validation import validate_weekday
from matteroftime.core.value import DateValue
from matteroftime.weekday.resolver import last_weekday_of_month, nth_weekday_of_month

# (month, year) -> result
MonthResolver = Callable[[int, Optional[int]], Optional[DateValue]]


def _month_accessor(month: int) -> Callable[..., DateValue | None]:
    name = MONTH_NAMES[month]

    def accessor(self: MonthSelector, year: int | None = None) -> DateValue | None:
        return self._resolve(month, year)

    accessor.__name__ = name
    accessor.__qualname__ = f"MonthSelector.{name}"
    return accessor


class MonthSelector:
    """The ``.of`` step: one accessor per month, ``january`` .. ``december``."""

    __slots__ = ("_resolve",)

    def __init__(self, resolve: MonthResolver) -> None:
        self._resolve = resolve

    def month(self, month: int, year: int | None = None) -> DateValue | None:
        """Resolve a zero-based month given as a number."""
        return self._resolve(month, year)


for _month, _name in enumerate(MONTH_NAMES):
    setattr(MonthSelector, _name, _month_accessor(_month))
del _month, _name


class WeekdayOfMonth:
    """One weekday within an ordinal, e.g. ``first.sunday``."""

    __slots__ = ("of",)

    def __init__(self, resolve: MonthResolver) -> None:
        self.of = MonthSelector(resolve)


class OrdinalWeekdays:
    """All seven weekdays for one ordinal (first .. fifth, or last)."""

    def __init__(self, name: str, resolve_for: Callable[[int], MonthResolver]) -> None:
        self._name = name
        for day, weekday_name in enumerate(WEEKDAY_NAMES):
            setattr(self, weekday_name, WeekdayOfMonth(resolve_for(day)))

    def weekday(self, day: int) -> WeekdayOfMonth:
        """Return the table entry for a weekday given as a number."""
        validate_weekday(day)
        return getattr(self, WEEKDAY_NAMES[day])

    def __repr__(self) -> str:
        return f"<OrdinalWeekdays {self._name}>"


def _nth_resolver(nth: int) -> Callable[[int], MonthResolver]:
    def resolve_for(day: int) -> MonthResolver:
        return lambda month, year: nth_weekday_of_month(day, nth, month, year)

    return resolve_for


def _last_resolver(day: int) -> MonthResolver:
    return lambda month, year: last_weekday_of_month(day, month, year)


first, second, third, fourth, fifth = (
    OrdinalWeekdays(name, _nth_resolver(nth))
    for nth, name in enumerate(ORDINAL_NAMES, start=1)
)
last = OrdinalWeekdays("last", _last_resolver)


__all__ = [
    "MonthSelector",
    "WeekdayOfMonth",
    "OrdinalWeekdays",
    "first",
    "second",
    "third",
    "fourth",
    "fifth",
    "last",
]
