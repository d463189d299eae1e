"""Chronospan: calendar-aware time spans.

Chronospan provides a TimeSpan value type: a signed length of time in
milliseconds that can be anchored to a reference date. Anchored spans
can be measured in months and years, split into mixed units, combined
with set operations and rendered or parsed with a small pattern
language.

Core Types:
    TimeSpan: Signed length of time with an optional reference point
    DateTime: Naive point in calendar time with millisecond precision
    Parts: Result of splitting a span into units

Units:
    TimeUnit: Flag set of units, MILLISECOND through YEAR

Exceptions:
    ChronospanError: Base exception
    ValidationError: Invalid input values
    ParseError: Failed to parse string
    OverflowError: Value out of representable range
    NoReferenceError: Calendar operation on a span without a reference
    DivisionByZeroError: Span divided by integer zero

Example:
    >>> from chronospan import DateTime, TimeSpan, TimeUnit
    >>> span = DateTime(2010, 3, 16, 12) - DateTime(2010, 1, 1)
    >>> span.to_string("M'm' d'd' hh'h'")
    '2m 15d 12h'
    >>> span.to_months()
    2.5
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from chronospan.core.datetime import DateTime
from chronospan.core.timespan import TimeSpan
from chronospan.arithmetic.parts import Parts

# Units
from chronospan.units.timeunit import (
    ALL_UNITS,
    CALENDAR_UNITS,
    DAYS_AND_TIME,
    FIXED_UNITS,
    TimeUnit,
)

# Exceptions
from chronospan.errors import (
    ChronospanError,
    DivisionByZeroError,
    NoReferenceError,
    OverflowError,
    ParseError,
    ValidationError,
)

# Format functions
from chronospan.format import format_span, parse_span

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "DateTime",
    "Parts",
    "TimeSpan",
    # Units
    "ALL_UNITS",
    "CALENDAR_UNITS",
    "DAYS_AND_TIME",
    "FIXED_UNITS",
    "TimeUnit",
    # Exceptions
    "ChronospanError",
    "DivisionByZeroError",
    "NoReferenceError",
    "OverflowError",
    "ParseError",
    "ValidationError",
    # Format functions
    "format_span",
    "parse_span",
]
