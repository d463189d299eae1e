"""Chronospan exception hierarchy.

All Chronospan-specific exceptions inherit from ChronospanError.
"""

from __future__ import annotations


class ChronospanError(Exception):
    """Base exception for all Chronospan errors."""

    pass


class ValidationError(ChronospanError):
    """Invalid input values.

    Raised when a field or argument is out of range or otherwise invalid.

    Examples:
        - Month value outside 1-12
        - Day value outside valid range for month
        - Setting a part whose unit was not requested
        - More than eight capture units passed to a regex parse
    """

    pass


class ParseError(ChronospanError):
    """Failed to parse string representation.

    Raised when a string cannot be read back as a span or a point in time.

    Examples:
        - Invalid ISO 8601 datetime
        - Non-integer text in a unit field of a span pattern
        - Input shorter than the pattern requires
    """

    pass


class OverflowError(ChronospanError):
    """Arithmetic operation exceeded representable range.

    Examples:
        - Span length outside the signed 64-bit millisecond range
        - A decomposed part that does not fit a signed 32-bit integer
        - Shifting a point in time past year 9999
    """

    pass


class NoReferenceError(ChronospanError):
    """Operation needs a reference point that the span does not have.

    Months and years have no fixed length, so any calendar-aware
    operation must be anchored to a concrete point in time.

    Examples:
        - Adding months to a span without a reference
        - Decomposing into years without a reference
        - Union or intersection with an unanchored span
    """

    pass


class DivisionByZeroError(ChronospanError, ZeroDivisionError):
    """Span divided by an integer zero."""

    pass


__all__ = [
    "ChronospanError",
    "ValidationError",
    "ParseError",
    "OverflowError",
    "NoReferenceError",
    "DivisionByZeroError",
]
