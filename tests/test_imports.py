"""Tests for matteroftime package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations


def test_import_matteroftime() -> None:
    """Import matteroftime package succeeds."""
    import matteroftime

    assert hasattr(matteroftime, "__version__")
    assert matteroftime.__version__ == "0.1.0"


def test_public_names_resolve() -> None:
    """Every name in __all__ is an attribute of the package."""
    import matteroftime

    for name in matteroftime.__all__:
        assert hasattr(matteroftime, name), name


def test_import_subpackages() -> None:
    """Import each subpackage succeeds and declares __all__."""
    from matteroftime import _internal, arithmetic, core, infer, units, weekday

    for module in (_internal, arithmetic, core, infer, units, weekday):
        assert hasattr(module, "__all__")


def test_import_errors() -> None:
    """Import matteroftime.errors succeeds with all exception classes."""
    from matteroftime.errors import (
        ArgumentRangeError,
        DateOverflowError,
        InvalidFormatError,
        MatterOfTimeError,
        MeridiemConflictError,
    )

    assert issubclass(InvalidFormatError, MatterOfTimeError)
    assert issubclass(ArgumentRangeError, MatterOfTimeError)
    assert issubclass(MeridiemConflictError, MatterOfTimeError)
    assert issubclass(DateOverflowError, MatterOfTimeError)
    assert issubclass(MatterOfTimeError, Exception)


def test_import_constants() -> None:
    """Import matteroftime._internal.constants succeeds."""
    from matteroftime._internal.constants import (
        LONG_MONTHS,
        MAX_NTH,
        MILLIS_PER_DAY,
        MONTH_NAMES,
        WEEKDAY_NAMES,
    )

    assert MILLIS_PER_DAY == 86_400_000
    assert LONG_MONTHS == {0, 2, 4, 6, 7, 9, 11}
    assert MAX_NTH == 5
    assert len(MONTH_NAMES) == 12
    assert WEEKDAY_NAMES[0] == "sunday"
