"""Calendar-aware span arithmetic.

This module resolves month and year amounts into milliseconds. Months
and years have no fixed length, so every conversion is made against a
concrete point in the calendar: the span's reference, or for additions
the span's referenced point.

Fractional amounts are split into a whole part, applied with calendar
month/year addition (which clamps the day to the target month), and a
fraction scaled by the length of the month or year the whole part lands
in. When the fraction is negative and the whole part lands exactly on a
month or year boundary, the length of the preceding month or year is
used instead.

Functions:
    add_calendar_unit: Lengthen a span by an amount of any unit.
    set_from_months: Span of a fractional number of months.
    set_from_years: Span of a fractional number of years.
    set_from_time_unit: Span of a fractional amount of any unit.
    from_time_unit: Build a span from a unit amount and reference.
    to_time_unit: Read a span's length in one unit.

Examples:
    >>> from chronospan import DateTime, TimeSpan
    >>> span = set_from_months(TimeSpan(0, DateTime(2010, 1, 1)), 2.5)
    >>> span.referenced
    DateTime(2010, 3, 16, 12, 0, 0, millisecond=0)
"""

from __future__ import annotations

import logging

from chronospan._internal.constants import MSECS_PER_DAY
from chronospan.core.datetime import DateTime
from chronospan.core.timespan import TimeSpan
from chronospan.errors import NoReferenceError, ValidationError
from chronospan.units.timeunit import LADDER, TimeUnit

logger = logging.getLogger(__name__)


def _require_single_unit(unit: TimeUnit) -> None:
    if unit not in LADDER:
        raise ValidationError(f"expected a single time unit, got {unit!r}")


def _require_reference(span: TimeSpan, what: str) -> DateTime:
    if span.reference is None:
        raise NoReferenceError(f"{what} need a span with a reference date")
    return span.reference


def days_in_month_at(point: DateTime, look_back: bool = False) -> int:
    """Return the days in the month containing point.

    With look_back, measure one millisecond earlier, which selects the
    preceding month when point sits exactly on a month boundary.
    """
    if look_back:
        point = point.add_msecs(-1)
    return point.days_in_month


def days_in_year_at(point: DateTime, look_back: bool = False) -> int:
    """Return the days in the year containing point, with the same look-back rule."""
    if look_back:
        point = point.add_msecs(-1)
    return point.days_in_year


def set_from_months(span: TimeSpan, months: float) -> TimeSpan:
    """Return a span of ``months`` calendar months from span's reference.

    Args:
        span: Supplies the reference point; its length is ignored.
        months: Number of months, possibly fractional or negative.

    Returns:
        A span anchored at the same reference.

    Raises:
        NoReferenceError: If span has no reference.

    Examples:
        >>> ref = TimeSpan(0, DateTime(2008, 3, 1))
        >>> set_from_months(ref, -0.5).referenced
        DateTime(2008, 2, 15, 12, 0, 0, millisecond=0)
    """
    reference = _require_reference(span, "months")
    whole = int(months)
    fraction = months - whole

    landing = reference.add_months(whole)
    days = days_in_month_at(landing, look_back=fraction < 0)
    msecs = reference.msecs_to(landing) + int(fraction * days * MSECS_PER_DAY)
    return TimeSpan._from_internal(msecs, reference)


def set_from_years(span: TimeSpan, years: float) -> TimeSpan:
    """Return a span of ``years`` calendar years from span's reference.

    The fraction is scaled by 365 or 366 days depending on the year the
    whole part lands in.

    Raises:
        NoReferenceError: If span has no reference.

    Examples:
        >>> ref = TimeSpan(0, DateTime(2007, 1, 1))
        >>> set_from_years(ref, 1.5).referenced
        DateTime(2008, 7, 2, 0, 0, 0, millisecond=0)
    """
    reference = _require_reference(span, "years")
    whole = int(years)
    fraction = years - whole

    landing = reference.add_years(whole)
    days = days_in_year_at(landing, look_back=fraction < 0)
    msecs = reference.msecs_to(landing) + int(fraction * days * MSECS_PER_DAY)
    return TimeSpan._from_internal(msecs, reference)


def set_from_time_unit(span: TimeSpan, unit: TimeUnit, amount: float) -> TimeSpan:
    """Return a span of ``amount`` units from span's reference.

    Fixed units truncate toward zero to whole milliseconds.

    Raises:
        ValidationError: If unit is not a single unit.
        NoReferenceError: If unit is MONTH or YEAR and span has no reference.
    """
    _require_single_unit(unit)
    if unit is TimeUnit.MONTH:
        return set_from_months(span, amount)
    if unit is TimeUnit.YEAR:
        return set_from_years(span, amount)
    return TimeSpan._from_internal(int(amount * unit.msecs), span.reference)


def from_time_unit(
    unit: TimeUnit, amount: float, reference: DateTime | None = None
) -> TimeSpan:
    """Build a span of ``amount`` units anchored at reference.

    Raises:
        NoReferenceError: If unit is MONTH or YEAR and reference is None.
    """
    return set_from_time_unit(TimeSpan(0, reference), unit, amount)


def add_calendar_unit(span: TimeSpan, unit: TimeUnit, amount: float) -> TimeSpan:
    """Return span lengthened by ``amount`` units.

    Fixed units add ``amount`` times their length. Months and years are
    measured from the span's referenced point, so adding one month to a
    span ending on January 31 adds the 28 or 29 days up to the end of
    February.

    Args:
        span: The span to lengthen.
        unit: A single unit.
        amount: Amount to add, possibly fractional or negative.

    Returns:
        A new span with the same reference.

    Raises:
        ValidationError: If unit is not a single unit.
        NoReferenceError: If unit is MONTH or YEAR and span has no reference.
        OverflowError: If the result does not fit a 64-bit length.
    """
    _require_single_unit(unit)
    if unit.is_calendar:
        _require_reference(span, "months and years")
        step = set_from_time_unit(TimeSpan(0, span.referenced), unit, amount)
        delta = step.msecs
    else:
        delta = int(amount * unit.msecs)
    logger.debug("adding %s %s as %d ms", amount, unit.name, delta)
    return span.with_msecs(span.msecs + delta)


def to_time_unit(span: TimeSpan, unit: TimeUnit) -> float:
    """Return span's length as a real number of ``unit``.

    Months and years use the fractional reading of the span's
    decomposition into that unit.

    Raises:
        ValidationError: If unit is not a single unit.
        NoReferenceError: If unit is MONTH or YEAR and span has no reference.

    Examples:
        >>> to_time_unit(TimeSpan.day() * 3, TimeUnit.WEEK)
        0.42857142857142855
    """
    _require_single_unit(unit)
    if not unit.is_calendar:
        return span.msecs / unit.msecs

    from chronospan.arithmetic.parts import parts

    return parts(span, unit, fractional=True).fraction


__all__ = [
    "add_calendar_unit",
    "days_in_month_at",
    "days_in_year_at",
    "from_time_unit",
    "set_from_months",
    "set_from_time_unit",
    "set_from_years",
    "to_time_unit",
]
