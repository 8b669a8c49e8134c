"""Weekday enumeration.

This module provides the Weekday enum with the zero-based, Sunday-first
numbering used throughout matteroftime.
"""

from __future__ import annotations

from enum import IntEnum

from matteroftime.errors import ArgumentRangeError


class Weekday(IntEnum):
    """Day of the week, Sunday = 0 through Saturday = 6.

    Weekday members are plain integers, so they can be passed anywhere a
    weekday number is expected.

    Examples:
        >>> Weekday.FRIDAY
        <Weekday.FRIDAY: 5>

        >>> Weekday.from_name("Monday")
        <Weekday.MONDAY: 1>
    """

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def from_name(cls, name: str) -> Weekday:
        """Look up a weekday by its English name, case-insensitively.

        Raises:
            ArgumentRangeError: If the name is not a weekday.
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ArgumentRangeError(f"unknown weekday name: {name!r}") from None

    @property
    def is_weekend(self) -> bool:
        """Return True for Saturday and Sunday."""
        return self in (Weekday.SATURDAY, Weekday.SUNDAY)


__all__ = ["Weekday"]
