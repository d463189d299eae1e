"""Core value types.

This module provides the fundamental types:
    - DateTime: Naive point in calendar time with millisecond precision
    - TimeSpan: Signed length of time with an optional reference point
"""

from __future__ import annotations

from chronospan.core.datetime import DateTime
from chronospan.core.timespan import TimeSpan

__all__: list[str] = [
    "DateTime",
    "TimeSpan",
]
