"""TimeUnit flag set for span units.

This module provides the TimeUnit flag enum representing the units a
span can be measured in, from milliseconds up to years. Members combine
with ``|`` into unit sets, which is how callers choose the units a span
is decomposed into or rendered with.
"""

from __future__ import annotations

from enum import Flag

from chronospan._internal.constants import (
    MSECS_PER_DAY,
    MSECS_PER_HOUR,
    MSECS_PER_MINUTE,
    MSECS_PER_SECOND,
    MSECS_PER_WEEK,
)


class TimeUnit(Flag):
    """Units a span can be expressed in.

    Each single unit knows its fixed length in milliseconds where one
    exists. MONTH and YEAR have no fixed length: their size depends on
    where in the calendar they are measured, so ``msecs`` is None and
    any operation using them needs a reference point.

    Examples:
        >>> TimeUnit.HOUR.msecs
        3600000

        >>> TimeUnit.MONTH.msecs is None
        True

        >>> TimeUnit.DAY in (TimeUnit.DAY | TimeUnit.HOUR)
        True
    """

    NO_UNIT = 0
    MILLISECOND = 1
    SECOND = 2
    MINUTE = 4
    HOUR = 8
    DAY = 16
    WEEK = 32
    MONTH = 64
    YEAR = 128

    @property
    def msecs(self) -> int | None:
        """Return the fixed length of one unit in milliseconds.

        Returns:
            Milliseconds in one unit, or None for MONTH, YEAR and unit sets.
        """
        return _UNIT_MSECS.get(self)

    @property
    def is_calendar(self) -> bool:
        """Return True for MONTH and YEAR."""
        return self in (TimeUnit.MONTH, TimeUnit.YEAR)

    @property
    def symbol(self) -> str:
        """Return the pattern letter for a single unit.

        Raises:
            KeyError: If this is NO_UNIT or a combination of units.
        """
        return _UNIT_SYMBOLS[self]

    @classmethod
    def from_symbol(cls, char: str) -> TimeUnit | None:
        """Return the unit for a pattern letter, or None."""
        return _SYMBOL_UNITS.get(char)

    def contains_all(self, other: TimeUnit) -> bool:
        """Return True if every unit in other is also in this set."""
        return (self & other) == other

    def single_units(self) -> list[TimeUnit]:
        """Return the single units in this set, smallest first."""
        return [unit for unit in LADDER if unit & self]

    def to_seconds(self) -> float | None:
        """Convert one unit to seconds, or None for variable-length units.

        Examples:
            >>> TimeUnit.MINUTE.to_seconds()
            60.0
        """
        msecs = self.msecs
        if msecs is None:
            return None
        return msecs / MSECS_PER_SECOND


_UNIT_MSECS: dict[TimeUnit, int] = {
    TimeUnit.MILLISECOND: 1,
    TimeUnit.SECOND: MSECS_PER_SECOND,
    TimeUnit.MINUTE: MSECS_PER_MINUTE,
    TimeUnit.HOUR: MSECS_PER_HOUR,
    TimeUnit.DAY: MSECS_PER_DAY,
    TimeUnit.WEEK: MSECS_PER_WEEK,
}

_UNIT_SYMBOLS: dict[TimeUnit, str] = {
    TimeUnit.MILLISECOND: "z",
    TimeUnit.SECOND: "s",
    TimeUnit.MINUTE: "m",
    TimeUnit.HOUR: "h",
    TimeUnit.DAY: "d",
    TimeUnit.WEEK: "w",
    TimeUnit.MONTH: "M",
    TimeUnit.YEAR: "y",
}

_SYMBOL_UNITS: dict[str, TimeUnit] = {v: k for k, v in _UNIT_SYMBOLS.items()}

# Smallest to largest
LADDER: tuple[TimeUnit, ...] = (
    TimeUnit.MILLISECOND,
    TimeUnit.SECOND,
    TimeUnit.MINUTE,
    TimeUnit.HOUR,
    TimeUnit.DAY,
    TimeUnit.WEEK,
    TimeUnit.MONTH,
    TimeUnit.YEAR,
)

DAYS_AND_TIME = (
    TimeUnit.MILLISECOND
    | TimeUnit.SECOND
    | TimeUnit.MINUTE
    | TimeUnit.HOUR
    | TimeUnit.DAY
)
FIXED_UNITS = DAYS_AND_TIME | TimeUnit.WEEK
CALENDAR_UNITS = TimeUnit.MONTH | TimeUnit.YEAR
ALL_UNITS = FIXED_UNITS | CALENDAR_UNITS


__all__ = [
    "TimeUnit",
    "LADDER",
    "DAYS_AND_TIME",
    "FIXED_UNITS",
    "CALENDAR_UNITS",
    "ALL_UNITS",
]
