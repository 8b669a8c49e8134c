"""Per-date weekday views: ``date.current``, ``upcoming``, ``next``, ``last``.

Each view is a light wrapper around one DateValue. The ``sunday()`` ..
``saturday()`` accessors are attached to the view classes once at import
time, so building a view costs one small object and no closures.

Examples:
    >>> from matteroftime.core.value import DateValue
    >>> d = DateValue(2018, 9, 12)  # Friday, October 12 2018
    >>> d.current.monday()
    DateValue(2018, 9, 8, 0, 0, 0, 0)
    >>> d.last.friday()
    DateValue(2018, 9, 5, 0, 0, 0, 0)
    >>> d.next.month()
    DateValue(2018, 10, 12, 0, 0, 0, 0)
"""

from __future__ import annotations

from typing import Callable

from matteroftime._internal.constants import WEEKDAY_NAMES
from matteroftime.arithmetic.calendar_ops import add_months, add_years
from matteroftime.arithmetic.durations import weeks
from matteroftime.core.value import DateValue
from matteroftime.weekday.resolver import (
    current_weekday,
    last_week_weekday,
    next_week_weekday,
    upcoming_weekday,
)


def _weekday_accessor(day: int) -> Callable[[_WeekdayView], DateValue]:
    name = WEEKDAY_NAMES[day]

    def accessor(self: _WeekdayView) -> DateValue:
        return self.weekday(day)

    accessor.__name__ = name
    accessor.__qualname__ = f"_WeekdayView.{name}"
    accessor.__doc__ = f"Resolve {name.capitalize()} relative to the viewed date."
    return accessor


def _repeat_count(repeat: object) -> int:
    # Anything but a positive integer means a single step
    if isinstance(repeat, int) and not isinstance(repeat, bool) and repeat >= 1:
        return repeat
    return 1


class _WeekdayView:
    """Base class: resolves weekdays against one reference date."""

    __slots__ = ("_date",)

    _resolve: Callable[[DateValue, int], DateValue]

    def __init__(self, date: DateValue) -> None:
        self._date = date

    def weekday(self, day: int) -> DateValue:
        """Resolve a weekday given as a number (0=Sunday, 6=Saturday)."""
        return type(self)._resolve(self._date, day)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._date!r})"


for _day, _name in enumerate(WEEKDAY_NAMES):
    setattr(_WeekdayView, _name, _weekday_accessor(_day))
del _day, _name


class _SteppingView(_WeekdayView):
    """Adds whole week, month and year steps in one direction."""

    __slots__ = ()

    _direction: int

    def week(self, repeat: int = 1) -> DateValue:
        """Step ``repeat`` weeks of exactly 7 days."""
        return weeks(self._direction * _repeat_count(repeat)).offset_from(self._date)

    def month(self, repeat: int = 1, vanilla: bool = False) -> DateValue:
        """Step ``repeat`` calendar months, see ``add_months``."""
        return add_months(self._date, self._direction * _repeat_count(repeat), vanilla)

    def year(self, repeat: int = 1, vanilla: bool = False) -> DateValue:
        """Step ``repeat`` calendar years, see ``add_years``."""
        return add_years(self._date, self._direction * _repeat_count(repeat), vanilla)


class CurrentWeekdays(_WeekdayView):
    """Weekdays of the Sunday-to-Saturday week containing the date."""

    __slots__ = ()
    _resolve = staticmethod(current_weekday)


class UpcomingWeekdays(_WeekdayView):
    """Next occurrence of each weekday, 1 to 7 days ahead."""

    __slots__ = ()
    _resolve = staticmethod(upcoming_weekday)


class NextWeekdays(_SteppingView):
    """Weekdays of the following week, and forward steps."""

    __slots__ = ()
    _resolve = staticmethod(next_week_weekday)
    _direction = 1


class LastWeekdays(_SteppingView):
    """Weekdays of the previous week, and backward steps."""

    __slots__ = ()
    _resolve = staticmethod(last_week_weekday)
    _direction = -1


__all__ = [
    "CurrentWeekdays",
    "UpcomingWeekdays",
    "NextWeekdays",
    "LastWeekdays",
]
