"""DateTime class for reference points of time spans.

This module provides the DateTime class: a naive point in calendar time
with millisecond precision. It supplies the calendar arithmetic spans
need (adding months and years with day clamping, leap year and month
length queries) and millisecond differences between points.
"""

from __future__ import annotations

import datetime as _datetime
import re
from typing import TYPE_CHECKING, overload

from chronospan._internal.calendar import (
    civil_from_days,
    days_from_civil,
    days_in_month,
    days_in_year,
    is_leap_year,
)
from chronospan._internal.constants import (
    MAX_YEAR,
    MIN_YEAR,
    MSECS_PER_DAY,
    MSECS_PER_HOUR,
    MSECS_PER_MINUTE,
    MSECS_PER_SECOND,
)
from chronospan._internal.validation import (
    validate_day,
    validate_month,
    validate_time,
    validate_year,
)
from chronospan.errors import OverflowError, ParseError, ValidationError

if TYPE_CHECKING:
    from chronospan.core.timespan import TimeSpan

_MIN_DAYS = days_from_civil(MIN_YEAR, 1, 1)
_MAX_DAYS = days_from_civil(MAX_YEAR, 12, 31)

_ISO_PATTERN = re.compile(
    r"^(?P<year>[+-]?\d{4,})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"(?:[T ](?P<hour>\d{2}):(?P<minute>\d{2})"
    r"(?::(?P<second>\d{2})(?:\.(?P<fraction>\d{1,9}))?)?)?$"
)


class DateTime:
    """A naive date and time with millisecond precision.

    DateTime is the reference point a TimeSpan is anchored to. It is
    immutable; arithmetic returns new instances.

    The internal representation is the number of days since 1970-01-01
    plus milliseconds since midnight, so the total millisecond offset
    from the Unix epoch is a single multiply-add.

    Attributes:
        year: The year component (can be zero or negative).
        month: The month component (1-12).
        day: The day component (1-31).
        hour: The hour component (0-23).
        minute: The minute component (0-59).
        second: The second component (0-59).
        millisecond: The millisecond component (0-999).

    Examples:
        >>> dt = DateTime(2010, 1, 31, 14, 30)
        >>> dt.add_months(1)
        DateTime(2010, 2, 28, 14, 30, 0, millisecond=0)

        >>> DateTime(2008, 1, 1).is_leap_year
        True
    """

    __slots__ = ("_days", "_msecs")

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
    ) -> None:
        """Create a DateTime from component parts.

        Args:
            year: The year (can be 0 or negative).
            month: The month (1-12).
            day: The day of the month.
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).
            millisecond: The millisecond (0-999).

        Raises:
            ValidationError: If any component is out of range.
        """
        validate_year(year)
        validate_month(month)
        validate_day(year, month, day)
        validate_time(hour, minute, second, millisecond)

        self._days: int = days_from_civil(year, month, day)
        self._msecs: int = (
            hour * MSECS_PER_HOUR
            + minute * MSECS_PER_MINUTE
            + second * MSECS_PER_SECOND
            + millisecond
        )

    @classmethod
    def _from_internal(cls, days: int, msecs: int) -> DateTime:
        """Create a DateTime from internal days + msecs representation.

        This is an internal factory method that bypasses validation.

        Args:
            days: Days since 1970-01-01.
            msecs: Milliseconds since midnight.

        Returns:
            A new DateTime instance.
        """
        instance = object.__new__(cls)
        instance._days = days
        instance._msecs = msecs
        return instance

    @classmethod
    def _from_total_msecs(cls, total: int) -> DateTime:
        days, msecs = divmod(total, MSECS_PER_DAY)
        if days < _MIN_DAYS or days > _MAX_DAYS:
            raise OverflowError(
                f"result is outside years {MIN_YEAR} to {MAX_YEAR}"
            )
        return cls._from_internal(days, msecs)

    @classmethod
    def now(cls) -> DateTime:
        """Return the current local date and time."""
        return cls.from_python(_datetime.datetime.now())

    @classmethod
    def today(cls) -> DateTime:
        """Return midnight of the current local date."""
        today = _datetime.date.today()
        return cls(today.year, today.month, today.day)

    @classmethod
    def from_unix_millis(cls, millis: int) -> DateTime:
        """Create a DateTime from milliseconds since 1970-01-01T00:00:00.

        Raises:
            OverflowError: If the result falls outside the supported years.
        """
        return cls._from_total_msecs(millis)

    @classmethod
    def from_python(cls, value: _datetime.date) -> DateTime:
        """Create a DateTime from a standard library date or datetime.

        Microseconds are truncated to milliseconds.

        Args:
            value: A naive ``datetime.datetime`` or a ``datetime.date``.

        Returns:
            The equivalent DateTime.

        Raises:
            ValidationError: If value is timezone-aware.
            TypeError: If value is not a date or datetime.

        Examples:
            >>> import datetime
            >>> DateTime.from_python(datetime.datetime(2010, 1, 1, 12, 0, 0, 250999))
            DateTime(2010, 1, 1, 12, 0, 0, millisecond=250)
        """
        if isinstance(value, _datetime.datetime):
            if value.tzinfo is not None:
                raise ValidationError("timezone-aware datetimes are not supported")
            return cls(
                value.year,
                value.month,
                value.day,
                value.hour,
                value.minute,
                value.second,
                value.microsecond // 1000,
            )
        if isinstance(value, _datetime.date):
            return cls(value.year, value.month, value.day)
        raise TypeError(f"expected date or datetime, got {type(value).__name__}")

    @classmethod
    def from_iso_format(cls, s: str) -> DateTime:
        """Parse a datetime from ISO 8601 format.

        Supports formats:
        - YYYY-MM-DD (time defaults to midnight)
        - YYYY-MM-DDTHH:MM
        - YYYY-MM-DDTHH:MM:SS
        - YYYY-MM-DDTHH:MM:SS.f (1-9 decimal places, truncated to ms)

        A space is accepted in place of ``T``.

        Args:
            s: The ISO 8601 datetime string to parse.

        Returns:
            A DateTime parsed from the string.

        Raises:
            ParseError: If the string is not valid ISO 8601 format.
            ValidationError: If the datetime components are invalid.

        Examples:
            >>> DateTime.from_iso_format("2010-01-01T12:30:00.5")
            DateTime(2010, 1, 1, 12, 30, 0, millisecond=500)
        """
        s = s.strip()
        if not s:
            raise ParseError("empty datetime string")

        match = _ISO_PATTERN.match(s)
        if match is None:
            raise ParseError(f"invalid ISO 8601 datetime: {s!r}")

        fraction = match.group("fraction") or "0"
        return cls(
            int(match.group("year")),
            int(match.group("month")),
            int(match.group("day")),
            int(match.group("hour") or 0),
            int(match.group("minute") or 0),
            int(match.group("second") or 0),
            int(fraction[:3].ljust(3, "0")),
        )

    # Properties - date components

    @property
    def year(self) -> int:
        """Return the year component."""
        year, _, _ = civil_from_days(self._days)
        return year

    @property
    def month(self) -> int:
        """Return the month component (1-12)."""
        _, month, _ = civil_from_days(self._days)
        return month

    @property
    def day(self) -> int:
        """Return the day of the month (1-31)."""
        _, _, day = civil_from_days(self._days)
        return day

    # Properties - time components

    @property
    def hour(self) -> int:
        """Return the hour component (0-23)."""
        return self._msecs // MSECS_PER_HOUR

    @property
    def minute(self) -> int:
        """Return the minute component (0-59)."""
        return (self._msecs % MSECS_PER_HOUR) // MSECS_PER_MINUTE

    @property
    def second(self) -> int:
        """Return the second component (0-59)."""
        return (self._msecs % MSECS_PER_MINUTE) // MSECS_PER_SECOND

    @property
    def millisecond(self) -> int:
        """Return the millisecond component (0-999)."""
        return self._msecs % MSECS_PER_SECOND

    @property
    def msecs_of_day(self) -> int:
        """Return milliseconds elapsed since midnight."""
        return self._msecs

    # Calendar queries

    @property
    def is_leap_year(self) -> bool:
        """Return True if this point falls in a leap year."""
        return is_leap_year(self.year)

    @property
    def days_in_month(self) -> int:
        """Return the number of days in this point's month."""
        year, month, _ = civil_from_days(self._days)
        return days_in_month(year, month)

    @property
    def days_in_year(self) -> int:
        """Return 365 or 366 for this point's year."""
        return days_in_year(self.year)

    # Conversions

    def to_unix_millis(self) -> int:
        """Return milliseconds since 1970-01-01T00:00:00."""
        return self._days * MSECS_PER_DAY + self._msecs

    def to_python(self) -> _datetime.datetime:
        """Return the equivalent naive ``datetime.datetime``.

        Raises:
            ValidationError: If the year is outside 1-9999, which the
                standard library cannot represent.
        """
        year, month, day = civil_from_days(self._days)
        if year < _datetime.MINYEAR:
            raise ValidationError(
                f"year {year} cannot be represented by datetime.datetime"
            )
        return _datetime.datetime(
            year,
            month,
            day,
            self.hour,
            self.minute,
            self.second,
            self.millisecond * 1000,
        )

    def to_iso_format(self) -> str:
        """Return the datetime as an ISO 8601 string.

        Milliseconds are included only when non-zero.

        Examples:
            >>> DateTime(2010, 3, 16, 12).to_iso_format()
            '2010-03-16T12:00:00'
            >>> DateTime(2010, 3, 16, 12, 0, 0, 5).to_iso_format()
            '2010-03-16T12:00:00.005'
        """
        year, month, day = civil_from_days(self._days)
        if year < 0:
            year_str = f"-{-year:04d}"
        else:
            year_str = f"{year:04d}"
        result = (
            f"{year_str}-{month:02d}-{day:02d}"
            f"T{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )
        if self.millisecond:
            result += f".{self.millisecond:03d}"
        return result

    # Arithmetic

    def add_msecs(self, msecs: int) -> DateTime:
        """Return a new DateTime shifted by a number of milliseconds.

        Raises:
            OverflowError: If the result falls outside the supported years.
        """
        return DateTime._from_total_msecs(self.to_unix_millis() + msecs)

    def add_days(self, days: int) -> DateTime:
        """Return a new DateTime shifted by whole days."""
        return self.add_msecs(days * MSECS_PER_DAY)

    def add_months(self, months: int) -> DateTime:
        """Return a new DateTime offset by the given number of months.

        If the resulting day is invalid for the new month, it is
        clamped to the last valid day of that month. The time of day
        is kept.

        Args:
            months: Number of months to add (can be negative).

        Returns:
            A new DateTime offset by the specified months.

        Raises:
            OverflowError: If the result falls outside the supported years.

        Examples:
            >>> DateTime(2008, 1, 31).add_months(1)  # Clamps to Feb 29
            DateTime(2008, 2, 29, 0, 0, 0, millisecond=0)
        """
        year, month, day = civil_from_days(self._days)
        new_year, month_index = divmod(year * 12 + (month - 1) + months, 12)
        return self._with_date(new_year, month_index + 1, day)

    def add_years(self, years: int) -> DateTime:
        """Return a new DateTime offset by the given number of years.

        Feb 29 becomes Feb 28 when the target year is not a leap year.

        Raises:
            OverflowError: If the result falls outside the supported years.
        """
        year, month, day = civil_from_days(self._days)
        return self._with_date(year + years, month, day)

    def _with_date(self, year: int, month: int, day: int) -> DateTime:
        if year < MIN_YEAR or year > MAX_YEAR:
            raise OverflowError(
                f"year {year} is outside {MIN_YEAR} to {MAX_YEAR}"
            )
        day = min(day, days_in_month(year, month))
        return DateTime._from_internal(days_from_civil(year, month, day), self._msecs)

    def msecs_to(self, other: DateTime) -> int:
        """Return the signed number of milliseconds from this point to other.

        Examples:
            >>> DateTime(2010, 1, 1).msecs_to(DateTime(2010, 1, 2))
            86400000
        """
        return other.to_unix_millis() - self.to_unix_millis()

    # Arithmetic operators

    def __add__(self, other: object) -> DateTime:
        """Shift this point by a TimeSpan's length.

        The span's own reference is ignored.
        """
        from chronospan.core.timespan import TimeSpan

        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self.add_msecs(other.msecs)

    @overload
    def __sub__(self, other: DateTime) -> TimeSpan: ...

    @overload
    def __sub__(self, other: TimeSpan) -> DateTime: ...

    def __sub__(self, other: object) -> DateTime | TimeSpan:
        """Subtract a TimeSpan or a DateTime from this point.

        Subtracting a DateTime returns the span from ``other`` to this
        point, referenced at ``other``.

        Examples:
            >>> span = DateTime(2010, 1, 2) - DateTime(2010, 1, 1)
            >>> span.msecs
            86400000
            >>> span.reference
            DateTime(2010, 1, 1, 0, 0, 0, millisecond=0)
        """
        from chronospan.core.timespan import TimeSpan

        if isinstance(other, TimeSpan):
            return self.add_msecs(-other.msecs)
        if isinstance(other, DateTime):
            return TimeSpan(other.msecs_to(self), other)
        return NotImplemented

    # Comparison operators

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._days == other._days and self._msecs == other._msecs

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return (self._days, self._msecs) < (other._days, other._msecs)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return (self._days, self._msecs) <= (other._days, other._msecs)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return (self._days, self._msecs) > (other._days, other._msecs)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return (self._days, self._msecs) >= (other._days, other._msecs)

    def __hash__(self) -> int:
        return hash((self._days, self._msecs))

    def __reduce__(self) -> tuple:
        return (DateTime._from_internal, (self._days, self._msecs))

    def __repr__(self) -> str:
        """Return a detailed string representation."""
        year, month, day = civil_from_days(self._days)
        return (
            f"DateTime({year}, {month}, {day}, {self.hour}, {self.minute}, "
            f"{self.second}, millisecond={self.millisecond})"
        )

    def __str__(self) -> str:
        """Return the ISO 8601 representation."""
        return self.to_iso_format()

    def __bool__(self) -> bool:
        """DateTimes are always truthy."""
        return True


__all__ = ["DateTime"]
