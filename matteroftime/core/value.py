"""DateValue, the single value type of matteroftime.

This module provides the DateValue class: an absolute instant held as a
``datetime.datetime`` and exposed through mutable calendar components,
plus the fluent accessors for weekday lookup and calendar arithmetic.
"""

from __future__ import annotations

import datetime as _datetime
from typing import TYPE_CHECKING

from matteroftime._internal.calendar import (
    compose,
    day_of_week,
    from_epoch_millis,
    is_last_day_of_month,
    to_epoch_millis,
)
from matteroftime._internal.validation import require_integer

if TYPE_CHECKING:
    from matteroftime.weekday.views import (
        CurrentWeekdays,
        LastWeekdays,
        NextWeekdays,
        UpcomingWeekdays,
    )

_FIELDS = ("year", "month", "day", "hour", "minute", "second", "millisecond")


class DateValue:
    """An absolute point in time with settable calendar components.

    A DateValue is an instant measured in milliseconds since
    1970-01-01T00:00:00 UTC. Its calendar components are read and written
    as UTC wall-clock values. Months are zero-based (0 = January) and days
    of the week run from 0 = Sunday to 6 = Saturday.

    Component setters mutate the value in place and normalize out-of-range
    input by rolling into the neighbouring unit, so ``d.day = 0`` moves to
    the last day of the previous month. Arithmetic methods return new
    values and leave the receiver untouched; the exception is ``at``,
    which sets the time of day in place and returns ``self``.

    Construction:
        - ``DateValue()``: the current instant
        - ``DateValue(millis)``: milliseconds since the epoch
        - ``DateValue(year, month, day=1, hour=0, minute=0, second=0,
          millisecond=0)``: explicit components, zero-based month
        - ``DateValue(other)``: copy of a DateValue, or conversion of a
          ``datetime.datetime`` (naive values are taken as UTC)

    Examples:
        >>> d = DateValue(2018, 9, 12)  # October 12, 2018
        >>> d.day_of_week  # Friday
        5
        >>> d.next.wednesday()
        DateValue(2018, 9, 17, 0, 0, 0, 0)
        >>> DateValue(2018, 9, 31).add_months(1)  # End of month is kept
        DateValue(2018, 10, 30, 0, 0, 0, 0)
    """

    __slots__ = ("_dt",)

    def __init__(self, *args: object) -> None:
        """Create a DateValue.

        Raises:
            TypeError: If the arguments match none of the construction forms.
            DateOverflowError: If the instant is outside years 1-9999.
        """
        if not args:
            self._dt = _utc_now()
        elif len(args) == 1:
            self._dt = _coerce(args[0])
        elif len(args) <= len(_FIELDS):
            for name, value in zip(_FIELDS, args):
                require_integer(name, value)
            self._dt = compose(*args)  # type: ignore[arg-type]
        else:
            raise TypeError(
                f"DateValue takes at most {len(_FIELDS)} arguments, got {len(args)}"
            )

    @classmethod
    def _from_datetime(cls, dt: _datetime.datetime) -> DateValue:
        result = cls.__new__(cls)
        result._dt = dt
        return result

    @classmethod
    def now(cls) -> DateValue:
        """Return the current instant."""
        return cls._from_datetime(_utc_now())

    @classmethod
    def from_datetime(cls, dt: _datetime.datetime) -> DateValue:
        """Create a DateValue from a datetime.

        Aware datetimes are converted to UTC; naive ones are taken as UTC.
        """
        return cls._from_datetime(_coerce(dt))

    @classmethod
    def from_millis(cls, millis: int) -> DateValue:
        """Create a DateValue from milliseconds since the epoch."""
        require_integer("millis", millis)
        return cls._from_datetime(from_epoch_millis(millis))

    def _components(self) -> dict[str, int]:
        dt = self._dt
        return {
            "year": dt.year,
            "month": dt.month - 1,
            "day": dt.day,
            "hour": dt.hour,
            "minute": dt.minute,
            "second": dt.second,
            "millisecond": dt.microsecond // 1000,
        }

    def _set(self, name: str, value: int) -> None:
        require_integer(name, value)
        parts = self._components()
        parts[name] = value
        self._dt = compose(**parts)

    @property
    def year(self) -> int:
        """The year (1-9999)."""
        return self._dt.year

    @year.setter
    def year(self, value: int) -> None:
        self._set("year", value)

    @property
    def month(self) -> int:
        """The zero-based month (0 = January, 11 = December)."""
        return self._dt.month - 1

    @month.setter
    def month(self, value: int) -> None:
        self._set("month", value)

    @property
    def day(self) -> int:
        """The day of the month (1-31)."""
        return self._dt.day

    @day.setter
    def day(self, value: int) -> None:
        self._set("day", value)

    @property
    def day_of_week(self) -> int:
        """The day of the week (0 = Sunday, 6 = Saturday)."""
        return day_of_week(self._dt)

    @property
    def hour(self) -> int:
        return self._dt.hour

    @hour.setter
    def hour(self, value: int) -> None:
        self._set("hour", value)

    @property
    def minute(self) -> int:
        return self._dt.minute

    @minute.setter
    def minute(self, value: int) -> None:
        self._set("minute", value)

    @property
    def second(self) -> int:
        return self._dt.second

    @second.setter
    def second(self, value: int) -> None:
        self._set("second", value)

    @property
    def millisecond(self) -> int:
        return self._dt.microsecond // 1000

    @millisecond.setter
    def millisecond(self, value: int) -> None:
        self._set("millisecond", value)

    @property
    def epoch_millis(self) -> int:
        """Milliseconds since 1970-01-01T00:00:00 UTC."""
        return to_epoch_millis(self._dt)

    @epoch_millis.setter
    def epoch_millis(self, value: int) -> None:
        require_integer("epoch_millis", value)
        self._dt = from_epoch_millis(value)

    value = epoch_millis

    def copy(self) -> DateValue:
        """Return an independent copy of this value."""
        return DateValue._from_datetime(self._dt)

    def to_datetime(self) -> _datetime.datetime:
        """Return an aware UTC datetime for this instant."""
        return self._dt.replace(tzinfo=_datetime.timezone.utc)

    def to_iso_format(self) -> str:
        """Return the instant as an ISO 8601 string with millisecond precision.

        Examples:
            >>> DateValue(2018, 9, 13, 17, 42, 23, 123).to_iso_format()
            '2018-10-13T17:42:23.123Z'
        """
        return self._dt.isoformat(timespec="milliseconds") + "Z"

    def is_last_day_of_month(self) -> bool:
        """Return True if this is the last day of its month."""
        return is_last_day_of_month(self.year, self.month, self.day)

    def add_months(self, count: int, vanilla: bool = False) -> DateValue:
        """Return a new value ``count`` months away.

        See ``matteroftime.arithmetic.add_months`` for the end-of-month
        policy and what ``vanilla`` switches off.
        """
        from matteroftime.arithmetic.calendar_ops import add_months

        return add_months(self, count, vanilla)

    def add_years(self, count: int, vanilla: bool = False) -> DateValue:
        """Return a new value ``count`` years away.

        See ``matteroftime.arithmetic.add_years``.
        """
        from matteroftime.arithmetic.calendar_ops import add_years

        return add_years(self, count, vanilla)

    def in_year(self, year: int) -> DateValue:
        """Return this date moved to ``year``, keeping the end of February.

        Examples:
            >>> DateValue(2026, 1, 28).in_year(2016)
            DateValue(2016, 1, 29, 0, 0, 0, 0)
        """
        from matteroftime.arithmetic.calendar_ops import set_year

        return set_year(self, year)

    def offset_from(self, base: DateValue | _datetime.datetime | int) -> DateValue:
        """Treat this value as a duration and add it to ``base``.

        Examples:
            >>> from matteroftime.arithmetic.durations import hours
            >>> hours(3).offset_from(DateValue(2018, 9, 15))
            DateValue(2018, 9, 15, 3, 0, 0, 0)
        """
        from matteroftime.arithmetic.durations import offset_from

        return offset_from(self, base)

    def tomorrow(self) -> DateValue:
        """Return the instant exactly one day later."""
        from matteroftime.arithmetic.durations import days

        return days(1).offset_from(self)

    def yesterday(self) -> DateValue:
        """Return the instant exactly one day earlier."""
        from matteroftime.arithmetic.durations import days

        return days(-1).offset_from(self)

    def at(self, text: str) -> DateValue:
        """Set the time of day from text like ``"5:42:23.123 pm"``.

        Mutates this value and returns it for chaining. Nothing changes
        if the text is rejected.

        Raises:
            InvalidFormatError: If the text is not a valid time of day.
            MeridiemConflictError: If a 24-hour value carries am/pm.
        """
        from matteroftime.infer.time_of_day import apply_time_of_day

        return apply_time_of_day(self, text)

    @property
    def current(self) -> CurrentWeekdays:
        """Weekdays of this week (the week starts on Sunday)."""
        from matteroftime.weekday.views import CurrentWeekdays

        return CurrentWeekdays(self)

    @property
    def upcoming(self) -> UpcomingWeekdays:
        """The next occurrence of each weekday, excluding today."""
        from matteroftime.weekday.views import UpcomingWeekdays

        return UpcomingWeekdays(self)

    @property
    def next(self) -> NextWeekdays:
        """Weekdays of next week, plus week/month/year steps forward."""
        from matteroftime.weekday.views import NextWeekdays

        return NextWeekdays(self)

    @property
    def last(self) -> LastWeekdays:
        """Weekdays of last week, plus week/month/year steps back."""
        from matteroftime.weekday.views import LastWeekdays

        return LastWeekdays(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateValue):
            return NotImplemented
        return self._dt == other._dt

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateValue):
            return NotImplemented
        return self._dt < other._dt

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateValue):
            return NotImplemented
        return self._dt <= other._dt

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateValue):
            return NotImplemented
        return self._dt > other._dt

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateValue):
            return NotImplemented
        return self._dt >= other._dt

    def __hash__(self) -> int:
        return hash(self._dt)

    def __int__(self) -> int:
        return self.epoch_millis

    def __repr__(self) -> str:
        """Return a representation that reconstructs the value.

        Returns:
            String like 'DateValue(2018, 9, 12, 0, 0, 0, 0)'.
        """
        parts = ", ".join(str(v) for v in self._components().values())
        return f"DateValue({parts})"

    def __str__(self) -> str:
        return self.to_iso_format()


def _utc_now() -> _datetime.datetime:
    now = _datetime.datetime.now(_datetime.timezone.utc).replace(tzinfo=None)
    # Millisecond precision, like every other DateValue
    return now.replace(microsecond=now.microsecond - now.microsecond % 1000)


def _coerce(source: object) -> _datetime.datetime:
    if isinstance(source, DateValue):
        return source._dt
    if isinstance(source, _datetime.datetime):
        if source.tzinfo is not None:
            source = source.astimezone(_datetime.timezone.utc).replace(tzinfo=None)
        return source.replace(microsecond=source.microsecond - source.microsecond % 1000)
    if isinstance(source, bool) or not isinstance(source, int):
        raise TypeError(
            "expected a DateValue, datetime or epoch milliseconds, "
            f"got {type(source).__name__}"
        )
    return from_epoch_millis(source)


__all__ = ["DateValue"]
