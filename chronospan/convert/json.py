"""JSON serialization and deserialization for spans and datetimes.

This module provides functions for converting chronospan values to and
from JSON-serializable dictionaries.

Functions:
    to_json: Convert a TimeSpan or DateTime to a JSON-serializable dict.
    from_json: Create a TimeSpan or DateTime from a JSON dict.

The JSON format uses type tags for polymorphic deserialization. A span
is stored as its reference followed by its length, which round-trips
both fields exactly:

    {"_type": "TimeSpan", "reference": "2010-01-01T00:00:00", "msecs": 3600000}
    {"_type": "TimeSpan", "reference": null, "msecs": -500}
    {"_type": "DateTime", "value": "2010-01-01T12:30:00.250"}

Examples:
    >>> from chronospan import DateTime, TimeSpan
    >>> from chronospan.convert import to_json, from_json

    >>> span = TimeSpan(3600000, DateTime(2010, 1, 1))
    >>> data = to_json(span)
    >>> data['_type']
    'TimeSpan'

    >>> from_json(data) == span
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Union

from chronospan.errors import ParseError

if TYPE_CHECKING:
    from chronospan.core.datetime import DateTime
    from chronospan.core.timespan import TimeSpan

# Type alias for serializable values
SerializableType = Union["TimeSpan", "DateTime"]


def to_json(value: SerializableType) -> dict[str, Any]:
    """Convert a TimeSpan or DateTime to a JSON-serializable dictionary.

    Args:
        value: The value to convert.

    Returns:
        A JSON-serializable dictionary with a ``_type`` tag.

    Raises:
        TypeError: If value is not a TimeSpan or DateTime.

    Examples:
        >>> from chronospan import DateTime, TimeSpan
        >>> to_json(TimeSpan(1500))
        {'_type': 'TimeSpan', 'reference': None, 'msecs': 1500}
        >>> to_json(DateTime(2010, 1, 1))
        {'_type': 'DateTime', 'value': '2010-01-01T00:00:00'}
    """
    # Import here to avoid circular imports
    from chronospan.core.datetime import DateTime
    from chronospan.core.timespan import TimeSpan

    if isinstance(value, TimeSpan):
        reference = value.reference
        return {
            "_type": "TimeSpan",
            "reference": None if reference is None else reference.to_iso_format(),
            "msecs": value.msecs,
        }
    elif isinstance(value, DateTime):
        return {
            "_type": "DateTime",
            "value": value.to_iso_format(),
        }
    else:
        raise TypeError(
            f"expected TimeSpan or DateTime, got {type(value).__name__}"
        )


def from_json(data: dict[str, Any]) -> SerializableType:
    """Create a TimeSpan or DateTime from a JSON dictionary.

    Args:
        data: A dictionary produced by :func:`to_json`.

    Returns:
        The deserialized value.

    Raises:
        ParseError: If the data is malformed or the type is unknown.
    """
    from chronospan.core.datetime import DateTime
    from chronospan.core.timespan import TimeSpan

    if not isinstance(data, dict):
        raise ParseError(f"expected dict, got {type(data).__name__}")

    type_name = data.get("_type")
    if type_name is None:
        raise ParseError("missing '_type' field in JSON data")

    if type_name == "TimeSpan":
        if "msecs" not in data:
            raise ParseError("missing 'msecs' field for TimeSpan")
        msecs = data["msecs"]
        if isinstance(msecs, bool) or not isinstance(msecs, int):
            raise ParseError(f"'msecs' must be an integer, got {msecs!r}")
        reference = data.get("reference")
        if reference is not None:
            if not isinstance(reference, str):
                raise ParseError(f"'reference' must be a string, got {reference!r}")
            reference = DateTime.from_iso_format(reference)
        return TimeSpan(msecs, reference)
    elif type_name == "DateTime":
        value = data.get("value")
        if not isinstance(value, str):
            raise ParseError("missing 'value' field for DateTime")
        return DateTime.from_iso_format(value)
    else:
        raise ParseError(f"unknown type: {type_name}")


__all__ = [
    "to_json",
    "from_json",
]
