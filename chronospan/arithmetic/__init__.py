"""Span arithmetic.

This module provides the functions behind TimeSpan's calendar-aware
methods and operators:

Calendar Operations (from chronospan.arithmetic.calendar_ops):
    - add_calendar_unit: Lengthen a span by any unit, months included
    - set_from_months, set_from_years: Fractional calendar lengths
    - set_from_time_unit, from_time_unit: Build spans from unit amounts
    - to_time_unit: Read a length in one unit

Decomposition (from chronospan.arithmetic.parts):
    - parts: Split a span into mixed units
    - part, set_part: Read or change one unit's value
    - magnitude: Largest unit a span holds

Set Operations (from chronospan.arithmetic.set_ops):
    - union, intersection, overlapped
    - overlaps, contains
"""

from __future__ import annotations

from chronospan.arithmetic.calendar_ops import (
    add_calendar_unit,
    from_time_unit,
    set_from_months,
    set_from_time_unit,
    set_from_years,
    to_time_unit,
)
from chronospan.arithmetic.parts import (
    Parts,
    magnitude,
    part,
    parts,
    set_part,
)
from chronospan.arithmetic.set_ops import (
    contains,
    intersection,
    overlapped,
    overlaps,
    union,
)

__all__ = [
    # Calendar operations
    "add_calendar_unit",
    "from_time_unit",
    "set_from_months",
    "set_from_time_unit",
    "set_from_years",
    "to_time_unit",
    # Decomposition
    "Parts",
    "magnitude",
    "part",
    "parts",
    "set_part",
    # Set operations
    "contains",
    "intersection",
    "overlapped",
    "overlaps",
    "union",
]
