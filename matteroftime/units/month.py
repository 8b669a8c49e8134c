"""Month enumeration.

This module provides the Month enum with zero-based numbering,
January = 0 through December = 11.
"""

from __future__ import annotations

from enum import IntEnum

from matteroftime.errors import ArgumentRangeError


class Month(IntEnum):
    """Calendar month, January = 0 through December = 11.

    Examples:
        >>> Month.OCTOBER
        <Month.OCTOBER: 9>

        >>> Month.from_name("june")
        <Month.JUNE: 5>

        >>> Month.FEBRUARY.last_day(2016)
        29
    """

    JANUARY = 0
    FEBRUARY = 1
    MARCH = 2
    APRIL = 3
    MAY = 4
    JUNE = 5
    JULY = 6
    AUGUST = 7
    SEPTEMBER = 8
    OCTOBER = 9
    NOVEMBER = 10
    DECEMBER = 11

    @classmethod
    def from_name(cls, name: str) -> Month:
        """Look up a month by its English name, case-insensitively.

        Raises:
            ArgumentRangeError: If the name is not a month.
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ArgumentRangeError(f"unknown month name: {name!r}") from None

    def last_day(self, year: int) -> int:
        """Return the last day of this month in ``year``."""
        from matteroftime._internal.calendar import last_day_of_month

        return last_day_of_month(self.value, year)


__all__ = ["Month"]
