"""TimeSpan: a calendar-aware length of time.

This module provides the TimeSpan class. A TimeSpan is a signed number
of milliseconds that may be anchored to a reference DateTime. Anchored
spans know where in the calendar they lie, which lets them be measured
in months and years and combined with set operations; unanchored spans
only support fixed-length units (milliseconds through weeks).

TimeSpan is an immutable value type. The calendar, decomposition,
set and formatting logic lives in the ``arithmetic`` and ``format``
packages; the methods here delegate to them.
"""

from __future__ import annotations

import math
import re
from typing import TYPE_CHECKING

from chronospan._internal.constants import (
    MSECS_PER_DAY,
    MSECS_PER_HOUR,
    MSECS_PER_MINUTE,
    MSECS_PER_SECOND,
    MSECS_PER_WEEK,
)
from chronospan._internal.validation import check_msecs
from chronospan.core.datetime import DateTime
from chronospan.errors import DivisionByZeroError, OverflowError
from chronospan.units.timeunit import TimeUnit

if TYPE_CHECKING:
    from chronospan.arithmetic.parts import Parts


class TimeSpan:
    """A signed length of time with an optional reference point.

    The span runs from ``reference`` to ``referenced`` (reference plus
    the length). A negative length means the referenced point lies
    before the reference.

    Equality compares both the length and the reference. Ordering
    compares only the length, so two spans of equal length anchored at
    different points are neither less nor greater than each other, yet
    not equal.

    Attributes:
        msecs: The signed length in milliseconds.
        reference: The anchor point, or None.

    Examples:
        >>> span = TimeSpan.day() * 3
        >>> span.to_days()
        3.0

        >>> ref = DateTime(2010, 1, 1)
        >>> TimeSpan(0, ref).with_months(1.5).referenced
        DateTime(2010, 2, 15, 0, 0, 0, millisecond=0)
    """

    __slots__ = ("_msecs", "_reference")

    def __init__(self, msecs: int = 0, reference: DateTime | None = None) -> None:
        """Create a TimeSpan.

        Args:
            msecs: Signed length in milliseconds.
            reference: Optional anchor point.

        Raises:
            TypeError: If msecs is not an int or reference is not a DateTime.
            OverflowError: If msecs is outside the signed 64-bit range.
        """
        if isinstance(msecs, bool) or not isinstance(msecs, int):
            raise TypeError(f"msecs must be int, got {type(msecs).__name__}")
        if reference is not None and not isinstance(reference, DateTime):
            raise TypeError(
                f"reference must be DateTime or None, got {type(reference).__name__}"
            )
        self._msecs: int = check_msecs(msecs)
        self._reference: DateTime | None = reference

    @classmethod
    def _from_internal(cls, msecs: int, reference: DateTime | None) -> TimeSpan:
        """Create a TimeSpan without type checks.

        The length is still range checked.
        """
        instance = object.__new__(cls)
        instance._msecs = check_msecs(msecs)
        instance._reference = reference
        return instance

    @classmethod
    def from_span(cls, reference: DateTime | None, other: TimeSpan) -> TimeSpan:
        """Create a span with other's length anchored at reference."""
        return cls._from_internal(other._msecs, reference)

    @classmethod
    def between(cls, reference: DateTime, referenced: DateTime) -> TimeSpan:
        """Create the span from reference to referenced.

        Examples:
            >>> TimeSpan.between(DateTime(2010, 1, 2), DateTime(2010, 1, 1)).msecs
            -86400000
        """
        return cls._from_internal(reference.msecs_to(referenced), reference)

    # Unit constants

    @classmethod
    def second(cls) -> TimeSpan:
        """Return an unanchored span of one second."""
        return cls._from_internal(MSECS_PER_SECOND, None)

    @classmethod
    def minute(cls) -> TimeSpan:
        """Return an unanchored span of one minute."""
        return cls._from_internal(MSECS_PER_MINUTE, None)

    @classmethod
    def hour(cls) -> TimeSpan:
        """Return an unanchored span of one hour."""
        return cls._from_internal(MSECS_PER_HOUR, None)

    @classmethod
    def day(cls) -> TimeSpan:
        """Return an unanchored span of one day."""
        return cls._from_internal(MSECS_PER_DAY, None)

    @classmethod
    def week(cls) -> TimeSpan:
        """Return an unanchored span of one week."""
        return cls._from_internal(MSECS_PER_WEEK, None)

    @classmethod
    def from_time_unit(
        cls,
        unit: TimeUnit,
        amount: float,
        reference: DateTime | None = None,
    ) -> TimeSpan:
        """Create a span of ``amount`` units, anchored at reference.

        Raises:
            NoReferenceError: If unit is MONTH or YEAR and reference is None.
        """
        from chronospan.arithmetic.calendar_ops import from_time_unit

        return from_time_unit(unit, amount, reference)

    @classmethod
    def from_string(
        cls,
        text: str,
        pattern: str,
        reference: DateTime | None = None,
        *,
        strict: bool = False,
    ) -> TimeSpan:
        """Parse text laid out according to a span pattern.

        See :func:`chronospan.format.pattern.parse_span`.
        """
        from chronospan.format.pattern import parse_span

        return parse_span(text, pattern, reference, strict=strict)

    @classmethod
    def from_regex(
        cls,
        text: str,
        pattern: str | re.Pattern[str],
        reference: DateTime | None,
        *units: TimeUnit,
        strict: bool = False,
    ) -> TimeSpan:
        """Parse text by matching capture groups to units.

        See :func:`chronospan.format.pattern.parse_span_regex`.
        """
        from chronospan.format.pattern import parse_span_regex

        return parse_span_regex(text, pattern, reference, *units, strict=strict)

    # Properties

    @property
    def msecs(self) -> int:
        """Return the signed length in milliseconds."""
        return self._msecs

    @property
    def reference(self) -> DateTime | None:
        """Return the reference point, or None."""
        return self._reference

    @property
    def referenced(self) -> DateTime | None:
        """Return the point at the other end of the span, or None.

        Raises:
            OverflowError: If the point falls outside the supported years.
        """
        if self._reference is None:
            return None
        return self._reference.add_msecs(self._msecs)

    @property
    def has_valid_reference(self) -> bool:
        return self._reference is not None

    @property
    def is_empty(self) -> bool:
        """Return True if the span has zero length."""
        return self._msecs == 0

    @property
    def is_null(self) -> bool:
        """Return True if the span is empty and has no reference."""
        return self._msecs == 0 and self._reference is None

    @property
    def is_negative(self) -> bool:
        return self._msecs < 0

    @property
    def is_normal(self) -> bool:
        return self._msecs >= 0

    @property
    def start(self) -> DateTime | None:
        """Return the earlier end of the span, or None without a reference."""
        if self._reference is None:
            return None
        if self._msecs < 0:
            return self.referenced
        return self._reference

    @property
    def end(self) -> DateTime | None:
        """Return the later end of the span, or None without a reference."""
        if self._reference is None:
            return None
        if self._msecs < 0:
            return self._reference
        return self.referenced

    # Reference handling

    def with_reference(self, reference: DateTime | None) -> TimeSpan:
        """Return a span with a new reference, keeping the referenced point.

        If either the current or the new reference is missing, the
        reference is replaced and the length kept.

        Examples:
            >>> span = TimeSpan.between(DateTime(2010, 1, 1), DateTime(2010, 1, 3))
            >>> span.with_reference(DateTime(2010, 1, 2)).to_days()
            1.0
        """
        if self._reference is not None and reference is not None:
            return TimeSpan._from_internal(
                reference.msecs_to(self.referenced), reference
            )
        return TimeSpan._from_internal(self._msecs, reference)

    def moved_to_reference(self, reference: DateTime | None) -> TimeSpan:
        """Return a span of the same length anchored at a new reference."""
        return TimeSpan._from_internal(self._msecs, reference)

    def with_referenced(self, referenced: DateTime) -> TimeSpan:
        """Return a span whose referenced point is ``referenced``.

        With a reference, the reference is kept and the length changes.
        Without one, the length is kept and a reference is derived.
        """
        if self._reference is not None:
            return TimeSpan._from_internal(
                self._reference.msecs_to(referenced), self._reference
            )
        return self.moved_to_referenced(referenced)

    def moved_to_referenced(self, referenced: DateTime) -> TimeSpan:
        """Return a span of the same length ending at ``referenced``."""
        return TimeSpan._from_internal(
            self._msecs, referenced.add_msecs(-self._msecs)
        )

    def with_msecs(self, msecs: int) -> TimeSpan:
        """Return a span with a new length and the same reference."""
        return TimeSpan._from_internal(msecs, self._reference)

    # Length queries

    def normalized(self) -> TimeSpan:
        """Return the span with a non-negative length.

        A negative anchored span is re-anchored at its referenced point
        so that it covers the same stretch of time.

        Examples:
            >>> span = TimeSpan(-1000, DateTime(2010, 1, 1))
            >>> span.normalized().reference
            DateTime(2009, 12, 31, 23, 59, 59, millisecond=0)
        """
        if self._msecs >= 0:
            return self
        if self._reference is None:
            return TimeSpan._from_internal(-self._msecs, None)
        return TimeSpan._from_internal(-self._msecs, self.referenced)

    def abs(self) -> TimeSpan:
        """Return a span with the absolute length and the same reference.

        Unlike :meth:`normalized`, a negative anchored span changes which
        stretch of time it covers.
        """
        return TimeSpan._from_internal(abs(self._msecs), self._reference)

    def matches_length(self, other: TimeSpan, normalize: bool = False) -> bool:
        """Return True if both spans have the same length.

        Args:
            other: The span to compare with.
            normalize: Compare absolute lengths.
        """
        if normalize:
            return abs(self._msecs) == abs(other._msecs)
        return self._msecs == other._msecs

    # Calendar arithmetic

    def add_unit(self, unit: TimeUnit, amount: float) -> TimeSpan:
        """Return the span lengthened by ``amount`` units.

        Raises:
            NoReferenceError: If unit is MONTH or YEAR without a reference.
        """
        from chronospan.arithmetic.calendar_ops import add_calendar_unit

        return add_calendar_unit(self, unit, amount)

    def with_time_unit(self, unit: TimeUnit, amount: float) -> TimeSpan:
        """Return a span of ``amount`` units from the same reference."""
        from chronospan.arithmetic.calendar_ops import set_from_time_unit

        return set_from_time_unit(self, unit, amount)

    def with_months(self, months: float) -> TimeSpan:
        """Return a span of ``months`` calendar months from the reference."""
        from chronospan.arithmetic.calendar_ops import set_from_months

        return set_from_months(self, months)

    def with_years(self, years: float) -> TimeSpan:
        """Return a span of ``years`` calendar years from the reference."""
        from chronospan.arithmetic.calendar_ops import set_from_years

        return set_from_years(self, years)

    def to_time_unit(self, unit: TimeUnit) -> float:
        """Return the length expressed in a single unit."""
        from chronospan.arithmetic.calendar_ops import to_time_unit

        return to_time_unit(self, unit)

    def to_milliseconds(self) -> float:
        return float(self._msecs)

    def to_seconds(self) -> float:
        return self._msecs / MSECS_PER_SECOND

    def to_minutes(self) -> float:
        return self._msecs / MSECS_PER_MINUTE

    def to_hours(self) -> float:
        return self._msecs / MSECS_PER_HOUR

    def to_days(self) -> float:
        return self._msecs / MSECS_PER_DAY

    def to_weeks(self) -> float:
        return self._msecs / MSECS_PER_WEEK

    def to_months(self) -> float:
        return self.to_time_unit(TimeUnit.MONTH)

    def to_years(self) -> float:
        return self.to_time_unit(TimeUnit.YEAR)

    # Decomposition

    def parts(self, units: TimeUnit, fractional: bool = False) -> Parts:
        """Split the span into the given units.

        See :func:`chronospan.arithmetic.parts.parts`.
        """
        from chronospan.arithmetic.parts import parts

        return parts(self, units, fractional)

    def part(self, unit: TimeUnit, units: TimeUnit | None = None) -> int:
        """Return one unit's value from the decomposition into ``units``."""
        from chronospan.arithmetic.parts import part

        return part(self, unit, unit if units is None else units)

    def with_part(
        self, unit: TimeUnit, value: int, units: TimeUnit | None = None
    ) -> TimeSpan:
        """Return a span whose ``unit`` part equals ``value``."""
        from chronospan.arithmetic.parts import set_part

        return set_part(self, unit, value, unit if units is None else units)

    @property
    def magnitude(self) -> TimeUnit:
        """Return the largest unit the span holds at least one of."""
        from chronospan.arithmetic.parts import magnitude

        return magnitude(self)

    # Set operations

    def union(self, other: TimeSpan) -> TimeSpan:
        from chronospan.arithmetic.set_ops import union

        return union(self, other)

    def intersection(self, other: TimeSpan) -> TimeSpan:
        from chronospan.arithmetic.set_ops import intersection

        return intersection(self, other)

    def overlaps(self, other: TimeSpan) -> bool:
        from chronospan.arithmetic.set_ops import overlaps

        return overlaps(self, other)

    def overlapped(self, other: TimeSpan) -> TimeSpan:
        from chronospan.arithmetic.set_ops import overlapped

        return overlapped(self, other)

    def contains(self, other: DateTime | TimeSpan) -> bool:
        """Return True if the point or span lies within this span."""
        from chronospan.arithmetic.set_ops import contains

        return contains(self, other)

    def __contains__(self, other: object) -> bool:
        if not isinstance(other, (DateTime, TimeSpan)):
            return False
        return self.contains(other)

    # Formatting

    def to_string(self, pattern: str) -> str:
        """Render the span with a pattern such as ``"hh:mm:ss"``.

        See :func:`chronospan.format.pattern.format_span`.
        """
        from chronospan.format.pattern import format_span

        return format_span(self, pattern)

    def to_approximate_string(
        self,
        units: TimeUnit | None = None,
        suppress_second_unit_limit: int = 3,
    ) -> str:
        """Render the span as one or two named units, like ``"2 hours, 5 minutes"``."""
        from chronospan.format.approximate import approximate_string

        return approximate_string(self, units, suppress_second_unit_limit)

    # Arithmetic operators

    def __add__(self, other: object) -> TimeSpan:
        """Add a span or a number of milliseconds.

        The result keeps this span's reference, or takes other's if
        this span has none.
        """
        if isinstance(other, TimeSpan):
            reference = self._reference if self._reference is not None else other._reference
            return TimeSpan._from_internal(self._msecs + other._msecs, reference)
        if isinstance(other, int) and not isinstance(other, bool):
            return TimeSpan._from_internal(self._msecs + other, self._reference)
        return NotImplemented

    def __radd__(self, other: object) -> TimeSpan:
        if isinstance(other, int) and not isinstance(other, bool):
            return TimeSpan._from_internal(other + self._msecs, self._reference)
        return NotImplemented

    def __sub__(self, other: object) -> TimeSpan:
        """Subtract a span or a number of milliseconds."""
        if isinstance(other, TimeSpan):
            reference = self._reference if self._reference is not None else other._reference
            return TimeSpan._from_internal(self._msecs - other._msecs, reference)
        if isinstance(other, int) and not isinstance(other, bool):
            return TimeSpan._from_internal(self._msecs - other, self._reference)
        return NotImplemented

    def __mul__(self, other: object) -> TimeSpan:
        """Scale the length. Real factors truncate toward zero.

        Raises:
            OverflowError: If the result is not a finite 64-bit length.
        """
        if isinstance(other, bool) or not isinstance(other, (int, float)):
            return NotImplemented
        return TimeSpan._from_internal(_scaled(self._msecs * other), self._reference)

    def __rmul__(self, other: object) -> TimeSpan:
        return self.__mul__(other)

    def __truediv__(self, other: object) -> TimeSpan | float:
        """Divide by a number, or by another span.

        Dividing by a span returns their ratio as a float; a zero-length
        divisor yields ``inf``, ``-inf`` or ``nan``.

        Dividing by a number returns a span. An integer zero raises
        DivisionByZeroError; a real zero gives an infinite length and
        raises OverflowError.

        Examples:
            >>> TimeSpan.day() / TimeSpan.hour()
            24.0
            >>> (TimeSpan.hour() / 4).to_minutes()
            15.0
        """
        if isinstance(other, TimeSpan):
            if other._msecs == 0:
                if self._msecs == 0:
                    return math.nan
                return math.copysign(math.inf, self._msecs)
            return self._msecs / other._msecs
        if isinstance(other, bool) or not isinstance(other, (int, float)):
            return NotImplemented
        if isinstance(other, int):
            return self.__floordiv__(other)
        if other == 0.0:
            raise OverflowError("span divided by zero has no finite length")
        return TimeSpan._from_internal(_scaled(self._msecs / other), self._reference)

    def __floordiv__(self, other: object) -> TimeSpan:
        """Divide by an integer, truncating toward zero.

        Raises:
            DivisionByZeroError: If other is zero.
        """
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        if other == 0:
            raise DivisionByZeroError("span divided by integer zero")
        quotient = abs(self._msecs) // abs(other)
        if (self._msecs < 0) != (other < 0):
            quotient = -quotient
        return TimeSpan._from_internal(quotient, self._reference)

    def __neg__(self) -> TimeSpan:
        return TimeSpan._from_internal(-self._msecs, self._reference)

    def __pos__(self) -> TimeSpan:
        return self

    def __abs__(self) -> TimeSpan:
        return self.abs()

    def __or__(self, other: object) -> TimeSpan:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: object) -> TimeSpan:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self.intersection(other)

    # Comparison operators

    def __eq__(self, other: object) -> bool:
        """Spans are equal when both length and reference match."""
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self._msecs == other._msecs and self._reference == other._reference

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        """Compare lengths only; references are ignored."""
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self._msecs < other._msecs

    def __le__(self, other: object) -> bool:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self._msecs <= other._msecs

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self._msecs > other._msecs

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self._msecs >= other._msecs

    def __hash__(self) -> int:
        return hash((self._msecs, self._reference))

    def __bool__(self) -> bool:
        """Empty spans are falsy."""
        return self._msecs != 0

    def __reduce__(self) -> tuple:
        return (TimeSpan, (self._msecs, self._reference))

    def __repr__(self) -> str:
        """Return the debug representation.

        Examples:
            >>> TimeSpan(1500, DateTime(2010, 1, 1))
            TimeSpan(Reference = 2010-01-01T00:00:00, msecs = 1500)
            >>> TimeSpan(1500)
            TimeSpan(Reference = invalid, msecs = 1500)
        """
        reference = "invalid" if self._reference is None else self._reference.to_iso_format()
        return f"TimeSpan(Reference = {reference}, msecs = {self._msecs})"

    def __str__(self) -> str:
        """Return the approximate human-readable form."""
        return self.to_approximate_string()


def _scaled(value: float) -> int:
    """Truncate a scaled length toward zero.

    Raises:
        OverflowError: If value is infinite or not a number.
    """
    if isinstance(value, int):
        return value
    if math.isnan(value) or math.isinf(value):
        raise OverflowError(f"span length {value} is not finite")
    return int(value)


__all__ = ["TimeSpan"]
