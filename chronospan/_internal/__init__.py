"""Internal utilities for Chronospan.

This module contains private implementation details:
    - Calendar math
    - Constants and magic numbers
    - Range validation

Note: This module is not part of the public API.
"""

from __future__ import annotations

from chronospan._internal.validation import (
    check_msecs,
    validate_day,
    validate_month,
    validate_time,
    validate_year,
)

__all__: list[str] = [
    "check_msecs",
    "validate_day",
    "validate_month",
    "validate_time",
    "validate_year",
]
