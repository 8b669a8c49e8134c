"""matteroftime exception hierarchy.

All matteroftime-specific exceptions inherit from MatterOfTimeError.
"""

from __future__ import annotations


class MatterOfTimeError(Exception):
    """Base exception for all matteroftime errors."""

    pass


class InvalidFormatError(MatterOfTimeError):
    """Failed to parse a time-of-day string.

    Examples:
        - Text that is not of the form HH[:MM[:SS[.XXX]]] [am|pm]
        - Minutes or seconds outside 00-59
        - Text without an hour component
    """

    pass


class ArgumentRangeError(MatterOfTimeError):
    """An argument is outside its permitted range.

    Examples:
        - Weekday outside 0-6
        - Ordinal (nth) outside 1-5
        - Month outside 0-11
    """

    pass


class MeridiemConflictError(MatterOfTimeError):
    """A 24-hour clock value was combined with an am/pm specifier.

    Examples:
        - "17:30 pm"
        - "13am"
    """

    pass


class DateOverflowError(MatterOfTimeError):
    """Arithmetic left the representable range of years 1 to 9999."""

    pass


__all__ = [
    "MatterOfTimeError",
    "InvalidFormatError",
    "ArgumentRangeError",
    "MeridiemConflictError",
    "DateOverflowError",
]
