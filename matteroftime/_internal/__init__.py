"""Internal utilities for matteroftime.

This module contains private implementation details:
    - Calendar tables and component normalization
    - Validation helpers and the @validate_range decorator
    - Constants and conversion ratios
    - Custom decorators (@deprecated)

Note: This module is not part of the public API.
"""

from __future__ import annotations

from matteroftime._internal.decorators import deprecated
from matteroftime._internal.validation import (
    require_integer,
    validate_month,
    validate_nth,
    validate_range,
    validate_weekday,
)

__all__: list[str] = [
    "deprecated",
    "require_integer",
    "validate_month",
    "validate_nth",
    "validate_range",
    "validate_weekday",
]
