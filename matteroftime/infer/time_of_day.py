"""Time-of-day parsing.

This module parses times of day of the form::

    HH[:MM[:SS[.XXX]]] [am|pm]

where HH is one or two digits (first digit 0-2), MM and SS are two digits
in 00-59 and XXX is one to three digits taken as a plain millisecond count
("5" is 5 ms, not 500). Matching is case-insensitive and ignores
surrounding whitespace. Any trailing part may be omitted along with its
separator.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, NamedTuple

from matteroftime.errors import InvalidFormatError, MeridiemConflictError

if TYPE_CHECKING:
    from matteroftime.core.value import DateValue

logger = logging.getLogger(__name__)

# The hour group is optional in the pattern so that a missing hour can be
# reported separately from a malformed string.
TIME_OF_DAY_PATTERN = re.compile(
    r"^\s*([0-2]?\d)?(?::([0-5]\d)(?::([0-5]\d)(?:\.(\d{1,3}))?)?)?\s*(am|pm)?\s*$",
    re.IGNORECASE,
)


class TimeOfDay(NamedTuple):
    """Parsed time-of-day fields; absent fields are None."""

    hour: int
    minute: int | None
    second: int | None
    millisecond: int | None
    meridiem: str | None  # "am", "pm" or None


def _optional_int(group: str | None) -> int | None:
    return int(group) if group is not None else None


def parse_time_of_day(text: str) -> TimeOfDay:
    """Parse a time-of-day string without applying it.

    Args:
        text: Text like "4:45am", "17:42:23.123" or "12 PM".

    Returns:
        TimeOfDay with the fields found; the meridiem is lower-cased.

    Raises:
        TypeError: If text is not a string.
        InvalidFormatError: If the text does not match, or has no hour.
        MeridiemConflictError: If an hour above 12 carries am/pm.

    Examples:
        >>> parse_time_of_day("5:42:23.123 pm")
        TimeOfDay(hour=5, minute=42, second=23, millisecond=123, meridiem='pm')

        >>> parse_time_of_day("17")
        TimeOfDay(hour=17, minute=None, second=None, millisecond=None, meridiem=None)
    """
    if not isinstance(text, str):
        raise TypeError(f"time of day must be a string, got {type(text).__name__}")

    match = TIME_OF_DAY_PATTERN.match(text)
    if not match:
        logger.debug("rejected time of day %r", text)
        raise InvalidFormatError(
            f"invalid time of day {text!r}, expected HH[:MM[:SS[.MS]]] [am|pm]"
        )

    hour_text, minute_text, second_text, millis_text, meridiem = match.groups()
    if hour_text is None:
        raise InvalidFormatError(f"invalid time of day {text!r}, at least hours required")

    hour = int(hour_text)
    if meridiem is not None:
        meridiem = meridiem.lower()
        if hour > 12:
            raise MeridiemConflictError(
                f"unexpected {meridiem} specifier with 24-hour value {hour} in {text!r}"
            )

    return TimeOfDay(
        hour=hour,
        minute=_optional_int(minute_text),
        second=_optional_int(second_text),
        millisecond=_optional_int(millis_text),
        meridiem=meridiem,
    )


def apply_time_of_day(date: DateValue, text: str) -> DateValue:
    """Set the time of day of ``date`` in place and return it.

    The hour is always set; minute, second and millisecond only when
    present, so omitted parts keep their current values. With am/pm, hour
    12 maps to 0 before "pm" adds 12. The text is fully validated before
    ``date`` changes, so a rejected string leaves it untouched.

    Args:
        date: The value to modify.
        text: The time of day, see ``parse_time_of_day``.

    Returns:
        ``date`` itself, for chaining.

    Raises:
        TypeError: If text is not a string.
        InvalidFormatError: If the text does not match, or has no hour.
        MeridiemConflictError: If an hour above 12 carries am/pm.

    Examples:
        >>> from matteroftime.core.value import DateValue
        >>> apply_time_of_day(DateValue(2018, 9, 13), "12am")
        DateValue(2018, 9, 13, 0, 0, 0, 0)
        >>> apply_time_of_day(DateValue(2018, 9, 13), "5:42:23.123 pm")
        DateValue(2018, 9, 13, 17, 42, 23, 123)
    """
    parsed = parse_time_of_day(text)
    logger.debug("applying time of day %r -> %s", text, parsed)

    scratch = date.copy()
    scratch.hour = parsed.hour
    if parsed.minute is not None:
        scratch.minute = parsed.minute
    if parsed.second is not None:
        scratch.second = parsed.second
    if parsed.millisecond is not None:
        scratch.millisecond = parsed.millisecond

    if parsed.meridiem is not None:
        if scratch.hour == 12:
            scratch.hour = 0
        if parsed.meridiem == "pm":
            scratch.hour = scratch.hour + 12

    date.epoch_millis = scratch.epoch_millis
    return date


__all__ = [
    "TIME_OF_DAY_PATTERN",
    "TimeOfDay",
    "parse_time_of_day",
    "apply_time_of_day",
]
