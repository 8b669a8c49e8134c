"""Validation utilities for matteroftime.

This module provides validation decorators and utilities for
ensuring arguments are within their permitted ranges.

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import inspect
from typing import Callable, TypeVar, ParamSpec

from matteroftime._internal.constants import MAX_NTH
from matteroftime.errors import ArgumentRangeError

P = ParamSpec("P")
T = TypeVar("T")


def validate_range(
    **limits: tuple[int, int],
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator to validate that parameters are within specified ranges.

    This decorator validates named parameters against specified (min, max)
    ranges, raising ArgumentRangeError if any value is out of range.
    Parameters passed as None are skipped, so optional arguments can be
    validated only when given.

    Args:
        **limits: Mapping of parameter names to (min, max) tuples.
                  Both min and max are inclusive.

    Returns:
        A decorator function.

    Examples:
        >>> @validate_range(day=(0, 6), month=(0, 11))
        ... def lookup(day: int, month: int | None = None) -> None:
        ...     pass

        >>> lookup(7)
        Traceback (most recent call last):
        ...
        ArgumentRangeError: day must be between 0 and 6, got 7
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        sig = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            bound = sig.bind_partial(*args, **kwargs)

            for param_name, (min_val, max_val) in limits.items():
                value = bound.arguments.get(param_name)
                if value is not None and (value < min_val or value > max_val):
                    raise ArgumentRangeError(
                        f"{param_name} must be between {min_val} and {max_val}, "
                        f"got {value}"
                    )

            return func(*args, **kwargs)

        return wrapper

    return decorator


def require_integer(name: str, value: object) -> None:
    """Raise TypeError unless ``value`` is an int (bool excluded)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")


def validate_weekday(day: int) -> None:
    """Validate that a weekday is within 0-6 (0 = Sunday).

    Raises:
        ArgumentRangeError: If day is outside 0-6.
    """
    if day < 0 or day > 6:
        raise ArgumentRangeError(f"weekday must be between 0 and 6, got {day}")


def validate_month(month: int) -> None:
    """Validate that a zero-based month is within 0-11.

    Raises:
        ArgumentRangeError: If month is outside 0-11.
    """
    if month < 0 or month > 11:
        raise ArgumentRangeError(f"month must be between 0 and 11, got {month}")


def validate_nth(nth: int) -> None:
    """Validate an ordinal for nth-weekday lookups.

    Raises:
        ArgumentRangeError: If nth is outside 1-5.
    """
    if nth < 1:
        raise ArgumentRangeError(
            f"cannot determine the {nth}th weekday of a month, expected 1 to {MAX_NTH}"
        )
    if nth > MAX_NTH:
        raise ArgumentRangeError(
            f"no month has a {nth}th occurrence of a weekday, expected 1 to {MAX_NTH}"
        )


__all__ = [
    "validate_range",
    "require_integer",
    "validate_weekday",
    "validate_month",
    "validate_nth",
]
