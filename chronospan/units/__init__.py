"""Span units.

This module provides:
    - TimeUnit: Flag set of units (MILLISECOND through YEAR)
    - Unit sets: FIXED_UNITS, CALENDAR_UNITS, ALL_UNITS, DAYS_AND_TIME
"""

from __future__ import annotations

from chronospan.units.timeunit import (
    ALL_UNITS,
    CALENDAR_UNITS,
    DAYS_AND_TIME,
    FIXED_UNITS,
    LADDER,
    TimeUnit,
)

__all__: list[str] = [
    "ALL_UNITS",
    "CALENDAR_UNITS",
    "DAYS_AND_TIME",
    "FIXED_UNITS",
    "LADDER",
    "TimeUnit",
]
