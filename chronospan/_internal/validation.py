"""Validation utilities for Chronospan.

This module provides helpers for ensuring calendar fields and span
lengths are within valid ranges.

This module is not part of the public API.
"""

from __future__ import annotations

from chronospan._internal.constants import (
    INT64_MAX,
    INT64_MIN,
    MAX_YEAR,
    MIN_YEAR,
)
from chronospan.errors import OverflowError, ValidationError


def validate_year(year: int) -> None:
    """Validate that a year is within the supported range.

    Args:
        year: The year to validate.

    Raises:
        ValidationError: If year is outside MIN_YEAR to MAX_YEAR.
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise ValidationError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Args:
        month: The month to validate.

    Raises:
        ValidationError: If month is outside 1-12.
    """
    if month < 1 or month > 12:
        raise ValidationError(f"month must be between 1 and 12, got {month}")


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day to validate.

    Raises:
        ValidationError: If day is invalid for the month.
    """
    from chronospan._internal.calendar import days_in_month

    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise ValidationError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


def validate_time(hour: int, minute: int, second: int, millisecond: int) -> None:
    """Validate the time-of-day fields.

    Raises:
        ValidationError: If any field is out of range.
    """
    for name, value, upper in (
        ("hour", hour, 23),
        ("minute", minute, 59),
        ("second", second, 59),
        ("millisecond", millisecond, 999),
    ):
        if value < 0 or value > upper:
            raise ValidationError(
                f"{name} must be between 0 and {upper}, got {value}"
            )


def check_msecs(msecs: int) -> int:
    """Return msecs unchanged if it fits the signed 64-bit range.

    Raises:
        OverflowError: If msecs cannot be stored as a span length.
    """
    if msecs < INT64_MIN or msecs > INT64_MAX:
        raise OverflowError(f"span length {msecs} ms exceeds the 64-bit range")
    return msecs


__all__ = [
    "validate_year",
    "validate_month",
    "validate_day",
    "validate_time",
    "check_msecs",
]
