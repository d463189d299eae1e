"""Conversion utilities.

This module provides functions for converting spans and datetimes to
and from other representations:
    - JSON serialization and deserialization

Examples:
    >>> from chronospan import DateTime, TimeSpan
    >>> from chronospan.convert import to_json, from_json

    >>> span = TimeSpan.hour() * 2
    >>> from_json(to_json(span)) == span
    True
"""

from __future__ import annotations

from chronospan.convert.json import from_json, to_json

__all__ = [
    "to_json",
    "from_json",
]
