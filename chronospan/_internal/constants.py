"""Internal constants for Chronospan.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
MSECS_PER_SECOND: int = 1_000
MSECS_PER_MINUTE: int = 60 * MSECS_PER_SECOND
MSECS_PER_HOUR: int = 60 * MSECS_PER_MINUTE
MSECS_PER_DAY: int = 24 * MSECS_PER_HOUR  # 86_400_000
MSECS_PER_WEEK: int = 7 * MSECS_PER_DAY

SECONDS_PER_DAY: int = 86_400

# Year limits (practical limits for the library)
MIN_YEAR: int = -9999
MAX_YEAR: int = 9999

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Integer ranges of the span length and of decomposed parts
INT32_MIN: int = -(2**31)
INT32_MAX: int = 2**31 - 1
INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1

# Capture groups honoured by a regex parse
MAX_CAPTURE_UNITS: int = 8


__all__ = [
    "MSECS_PER_SECOND",
    "MSECS_PER_MINUTE",
    "MSECS_PER_HOUR",
    "MSECS_PER_DAY",
    "MSECS_PER_WEEK",
    "SECONDS_PER_DAY",
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_IN_MONTH",
    "INT32_MIN",
    "INT32_MAX",
    "INT64_MIN",
    "INT64_MAX",
    "MAX_CAPTURE_UNITS",
]
