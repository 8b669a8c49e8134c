"""Pytest configuration and fixtures for matteroftime tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so matteroftime can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from matteroftime import DateValue  # noqa: E402


@pytest.fixture
def friday_ref() -> DateValue:
    """Reference date that is a Friday (2018-10-12, midnight)."""
    return DateValue(2018, 9, 12)


@pytest.fixture
def monday_ref() -> DateValue:
    """Reference date that is a Monday (2018-10-15, midnight)."""
    return DateValue(2018, 9, 15)
