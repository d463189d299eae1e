"""Decomposition of spans into mixed units.

This module splits a span into a caller-chosen set of units, such as
"years, months and days" or "hours and minutes", and finds the largest
unit a span holds at least one of.

Years and months are counted as complete calendar years and months
from the span's start point, so decomposing into them needs a
reference. Fixed units are then taken from what remains, largest
first. Optionally the smallest requested unit is also reported as a
real number that includes the remainder.

Functions:
    parts: Decompose a span; fails without a reference or on overflow.
    part: One unit's value; drops months and years without a reference.
    set_part: Adjust a span so one unit's value changes.
    magnitude: Largest unit the span holds at least one of.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from chronospan._internal.constants import (
    INT32_MAX,
    INT32_MIN,
    MSECS_PER_DAY,
    MSECS_PER_HOUR,
    MSECS_PER_MINUTE,
    MSECS_PER_SECOND,
    MSECS_PER_WEEK,
)
from chronospan.arithmetic.calendar_ops import (
    add_calendar_unit,
    days_in_month_at,
    days_in_year_at,
)
from chronospan.core.timespan import TimeSpan
from chronospan.errors import NoReferenceError, OverflowError, ValidationError
from chronospan.units.timeunit import ALL_UNITS, CALENDAR_UNITS, LADDER, TimeUnit

logger = logging.getLogger(__name__)

# Largest first
_FIXED_DESCENDING: tuple[TimeUnit, ...] = (
    TimeUnit.WEEK,
    TimeUnit.DAY,
    TimeUnit.HOUR,
    TimeUnit.MINUTE,
    TimeUnit.SECOND,
    TimeUnit.MILLISECOND,
)

_FIELD_NAMES: dict[TimeUnit, str] = {
    TimeUnit.MILLISECOND: "milliseconds",
    TimeUnit.SECOND: "seconds",
    TimeUnit.MINUTE: "minutes",
    TimeUnit.HOUR: "hours",
    TimeUnit.DAY: "days",
    TimeUnit.WEEK: "weeks",
    TimeUnit.MONTH: "months",
    TimeUnit.YEAR: "years",
}

_YEAR_THRESHOLD = 366 * MSECS_PER_DAY


@dataclass(frozen=True)
class Parts:
    """The result of decomposing a span.

    Each unit field holds the unit's value, or None when the unit was
    not requested. Values share the span's sign.

    Properties:
        units: The units that were requested.
        fraction: The smallest requested unit as a real number including
            the remainder, or None if not asked for.
    """

    units: TimeUnit = TimeUnit.NO_UNIT
    milliseconds: int | None = None
    seconds: int | None = None
    minutes: int | None = None
    hours: int | None = None
    days: int | None = None
    weeks: int | None = None
    months: int | None = None
    years: int | None = None
    fraction: float | None = None

    def get(self, unit: TimeUnit, default: int | None = None) -> int | None:
        """Return the value for unit, or default if it was not requested."""
        name = _FIELD_NAMES.get(unit)
        if name is None:
            return default
        value = getattr(self, name)
        return default if value is None else value

    def __getitem__(self, unit: TimeUnit) -> int:
        value = self.get(unit)
        if value is None:
            raise KeyError(unit)
        return value


def _check_int32(unit: TimeUnit, value: int) -> int:
    if value < INT32_MIN or value > INT32_MAX:
        raise OverflowError(
            f"{_FIELD_NAMES[unit]} value {value} does not fit a 32-bit integer"
        )
    return value


def parts(span: TimeSpan, units: TimeUnit, fractional: bool = False) -> Parts:
    """Decompose span into the requested units.

    Args:
        span: The span to decompose.
        units: The units to fill, combined with ``|``.
        fractional: Also report the smallest requested unit as a real
            number that includes the remainder.

    Returns:
        A Parts record. A negative span gives negative values.

    Raises:
        NoReferenceError: If months or years are requested and span has
            no reference.
        OverflowError: If a value does not fit a signed 32-bit integer.

    Examples:
        >>> from chronospan import DateTime
        >>> span = TimeSpan.between(DateTime(2008, 1, 15), DateTime(2010, 3, 20, 6))
        >>> p = parts(span, TimeUnit.YEAR | TimeUnit.MONTH | TimeUnit.DAY | TimeUnit.HOUR)
        >>> (p.years, p.months, p.days, p.hours)
        (2, 2, 5, 6)
    """
    units = units & ALL_UNITS
    requested = units.single_units()
    if not requested:
        return Parts(units=units)

    smallest = requested[0]
    sign = -1 if span.msecs < 0 else 1
    values: dict[TimeUnit, int] = {}
    fraction: float | None = None

    if units & CALENDAR_UNITS:
        if span.reference is None:
            raise NoReferenceError("months and years need a span with a reference date")
        start, end = span.start, span.end
        start_key = (start.month, start.day, start.msecs_of_day)
        end_key = (end.month, end.day, end.msecs_of_day)

        years = end.year - start.year
        if end_key < start_key:
            years -= 1

        if TimeUnit.MONTH in units:
            months = end.month - start.month
            if end_key[1:] < start_key[1:]:
                months -= 1
            # Wrap after the decrement so the count stays in 0..11.
            months %= 12
            if TimeUnit.YEAR in units:
                values[TimeUnit.YEAR] = years
            else:
                months += years * 12
                years = 0
            values[TimeUnit.MONTH] = months
            anchor = start.add_months(years * 12 + months)
        else:
            values[TimeUnit.YEAR] = years
            anchor = start.add_years(years)

        remainder = anchor.msecs_to(end)
        if fractional and smallest is TimeUnit.MONTH:
            days = days_in_month_at(anchor, look_back=span.msecs < 0)
            fraction = months + remainder / (days * MSECS_PER_DAY)
        elif fractional and smallest is TimeUnit.YEAR:
            days = days_in_year_at(anchor, look_back=span.msecs < 0)
            fraction = years + remainder / (days * MSECS_PER_DAY)
    else:
        remainder = abs(span.msecs)

    for unit in _FIXED_DESCENDING:
        if unit not in units:
            continue
        if fractional and unit is smallest:
            fraction = remainder / unit.msecs
        values[unit], remainder = divmod(remainder, unit.msecs)

    fields: dict[str, object] = {"units": units}
    for unit, value in values.items():
        fields[_FIELD_NAMES[unit]] = _check_int32(unit, sign * value)
    if fraction is not None:
        fields["fraction"] = sign * fraction
    return Parts(**fields)


def part(span: TimeSpan, unit: TimeUnit, units: TimeUnit) -> int:
    """Return one unit's value from the decomposition into units.

    Unlike :func:`parts`, a span without a reference does not fail when
    months or years are requested: those units are dropped from the set
    and a warning is logged.

    Returns:
        The value, or 0 if unit is not among the (remaining) units.

    Raises:
        OverflowError: If a value does not fit a signed 32-bit integer.
    """
    if span.reference is None and units & CALENDAR_UNITS:
        logger.warning(
            "span has no reference date, ignoring months and years in part()"
        )
        units = units & ~CALENDAR_UNITS
    if not unit & units or unit not in LADDER:
        return 0
    return parts(span, units)[unit]


def set_part(span: TimeSpan, unit: TimeUnit, value: int, units: TimeUnit) -> TimeSpan:
    """Return span adjusted so its ``unit`` part equals value.

    The difference to the current value is added with calendar-aware
    addition, so the other parts are preserved where the calendar
    allows.

    Raises:
        ValidationError: If unit is not a single unit within units.
        NoReferenceError: If months or years are involved without a reference.

    Examples:
        >>> span = TimeSpan.hour() * 2 + TimeSpan.minute() * 5
        >>> units = TimeUnit.HOUR | TimeUnit.MINUTE
        >>> set_part(span, TimeUnit.HOUR, 7, units).to_string("hh:mm")
        '07:05'
    """
    if unit not in LADDER or not unit & units:
        raise ValidationError(f"{unit!r} is not one of the requested units")

    current = parts(span, units)[unit]
    return add_calendar_unit(span, unit, value - current)


def magnitude(span: TimeSpan) -> TimeUnit:
    """Return the largest unit the span holds at least one whole of.

    Without a reference the result is capped at WEEK.

    Examples:
        >>> magnitude(TimeSpan.hour() * 30)
        <TimeUnit.DAY: 16>
    """
    length = abs(span.msecs)
    if length < MSECS_PER_SECOND:
        return TimeUnit.MILLISECOND
    if length < MSECS_PER_MINUTE:
        return TimeUnit.SECOND
    if length < MSECS_PER_HOUR:
        return TimeUnit.MINUTE
    if length < MSECS_PER_DAY:
        return TimeUnit.HOUR
    if length < MSECS_PER_WEEK:
        return TimeUnit.DAY
    if span.reference is None:
        return TimeUnit.WEEK
    if length > _YEAR_THRESHOLD:
        return TimeUnit.YEAR

    calendar = parts(span, CALENDAR_UNITS)
    if calendar.years:
        return TimeUnit.YEAR
    if calendar.months:
        return TimeUnit.MONTH
    return TimeUnit.WEEK


__all__ = [
    "Parts",
    "magnitude",
    "part",
    "parts",
    "set_part",
]
