"""Tests for decomposing spans into mixed units."""

from __future__ import annotations

import logging

import pytest

from chronospan import DateTime, Parts, TimeSpan, TimeUnit
from chronospan.arithmetic.parts import magnitude, part, parts, set_part
from chronospan.errors import NoReferenceError, OverflowError, ValidationError
from chronospan.units.timeunit import ALL_UNITS, DAYS_AND_TIME

DAY = 86_400_000
HOUR = 3_600_000

YMD = TimeUnit.YEAR | TimeUnit.MONTH | TimeUnit.DAY


class TestFixedParts:
    """Tests for decomposition into fixed-length units."""

    def test_days_and_time(self) -> None:
        """Each unit takes what the larger units leave."""
        span = TimeSpan(2 * DAY + 3 * HOUR + 4 * 60_000 + 5_006)
        p = parts(span, DAYS_AND_TIME)
        assert (p.days, p.hours, p.minutes, p.seconds, p.milliseconds) == (2, 3, 4, 5, 6)
        assert p.weeks is None
        assert p.months is None

    def test_skipped_units_fold_down(self) -> None:
        """Without days, hours absorb whole days."""
        p = parts(TimeSpan(2 * DAY + 3 * HOUR), TimeUnit.HOUR | TimeUnit.MINUTE)
        assert p.hours == 51
        assert p.minutes == 0

    def test_weeks(self) -> None:
        """Weeks are seven days."""
        p = parts(TimeSpan(10 * DAY), TimeUnit.WEEK | TimeUnit.DAY)
        assert (p.weeks, p.days) == (1, 3)

    def test_negative_span(self) -> None:
        """Every value carries the span's sign."""
        p = parts(TimeSpan(-(DAY + 2 * HOUR)), TimeUnit.DAY | TimeUnit.HOUR)
        assert (p.days, p.hours) == (-1, -2)

    def test_fraction_of_smallest_unit(self) -> None:
        """The smallest unit can be read as a real number."""
        p = parts(TimeSpan(DAY + 90 * 60_000), TimeUnit.DAY | TimeUnit.HOUR, fractional=True)
        assert p.hours == 1
        assert p.fraction == pytest.approx(1.5)

    def test_fraction_negative(self) -> None:
        """Fractions carry the sign too."""
        p = parts(TimeSpan(-1500), TimeUnit.SECOND, fractional=True)
        assert p.seconds == -1
        assert p.fraction == pytest.approx(-1.5)

    def test_no_fraction_by_default(self) -> None:
        """fraction is None unless asked for."""
        assert parts(TimeSpan(1500), TimeUnit.SECOND).fraction is None

    def test_no_units(self) -> None:
        """An empty unit set gives an empty record."""
        assert parts(TimeSpan(1500), TimeUnit.NO_UNIT) == Parts()

    def test_overflow_guard(self) -> None:
        """Values beyond 32 bits raise OverflowError."""
        span = TimeSpan(2**31)
        with pytest.raises(OverflowError):
            parts(span, TimeUnit.MILLISECOND)
        assert parts(span, TimeUnit.SECOND).seconds == 2**31 // 1000
        assert parts(TimeSpan(-(2**31)), TimeUnit.MILLISECOND).milliseconds == -(2**31)

    def test_lookup_by_unit(self) -> None:
        """Parts can be indexed by unit."""
        p = parts(TimeSpan(HOUR), TimeUnit.HOUR)
        assert p[TimeUnit.HOUR] == 1
        assert p.get(TimeUnit.DAY) is None
        assert p.get(TimeUnit.DAY, 0) == 0
        with pytest.raises(KeyError):
            p[TimeUnit.DAY]


class TestCalendarParts:
    """Tests for decomposition into months and years."""

    def test_years_months_days(self) -> None:
        """Complete calendar years and months are counted from the start."""
        span = TimeSpan.between(DateTime(2008, 1, 15), DateTime(2010, 3, 20, 6))
        p = parts(span, YMD | TimeUnit.HOUR)
        assert (p.years, p.months, p.days, p.hours) == (2, 2, 5, 6)

    def test_incomplete_year(self) -> None:
        """A year is only counted once its anniversary has passed."""
        span = TimeSpan.between(DateTime(2009, 3, 15), DateTime(2010, 3, 10))
        p = parts(span, YMD)
        assert (p.years, p.months, p.days) == (0, 11, 23)

    def test_time_of_day_breaks_ties(self) -> None:
        """The anniversary counts only from the start's time of day."""
        span = TimeSpan.between(DateTime(2009, 3, 15, 12), DateTime(2010, 3, 15, 6))
        p = parts(span, YMD | TimeUnit.HOUR)
        assert (p.years, p.months, p.days, p.hours) == (0, 11, 27, 18)

    def test_months_without_years(self) -> None:
        """Without years, months absorb whole years."""
        span = TimeSpan.between(DateTime(2008, 1, 15), DateTime(2010, 3, 20))
        p = parts(span, TimeUnit.MONTH | TimeUnit.DAY)
        assert p.years is None
        assert (p.months, p.days) == (26, 5)

    def test_years_without_months(self) -> None:
        """Without months, the remainder is counted from the anniversary."""
        span = TimeSpan.between(DateTime(2008, 1, 15), DateTime(2010, 3, 20))
        p = parts(span, TimeUnit.YEAR | TimeUnit.DAY)
        assert (p.years, p.days) == (2, 31 + 28 + 5)

    def test_month_end_clamping(self) -> None:
        """Months from Jan 31 land on the clamped last day."""
        span = TimeSpan.between(DateTime(2010, 1, 31), DateTime(2010, 3, 1))
        p = parts(span, TimeUnit.MONTH | TimeUnit.DAY)
        assert (p.months, p.days) == (1, 1)

    def test_negative_span(self) -> None:
        """Negative spans give negative calendar values."""
        span = TimeSpan.between(DateTime(2010, 3, 20), DateTime(2008, 1, 15))
        p = parts(span, YMD)
        assert (p.years, p.months, p.days) == (-2, -2, -5)

    def test_month_fraction(self) -> None:
        """A month fraction uses the length of the month it falls in."""
        span = TimeSpan.between(DateTime(2010, 1, 1), DateTime(2010, 3, 16, 12))
        p = parts(span, TimeUnit.MONTH, fractional=True)
        assert p.months == 2
        assert p.fraction == pytest.approx(2.5)

    def test_year_fraction(self) -> None:
        """A year fraction uses the length of the year it falls in."""
        span = TimeSpan.between(DateTime(2007, 1, 1), DateTime(2008, 7, 2))
        p = parts(span, TimeUnit.YEAR, fractional=True)
        assert p.fraction == pytest.approx(1.5)

    def test_negative_month_fraction_looks_back(self) -> None:
        """A negative span whose anchor starts a month measures the month before."""
        span = TimeSpan.between(DateTime(2010, 3, 15), DateTime(2010, 2, 1))
        p = parts(span, TimeUnit.MONTH, fractional=True)
        assert p.months == -1
        assert p.fraction == pytest.approx(-1.5)
        assert span.to_months() == pytest.approx(-1.5)

    def test_positive_month_fraction_uses_anchor_month(self) -> None:
        """The same stretch read forwards measures the anchor's month."""
        span = TimeSpan.between(DateTime(2010, 2, 1), DateTime(2010, 3, 15))
        p = parts(span, TimeUnit.MONTH, fractional=True)
        assert p.fraction == pytest.approx(1 + 14 / 31)

    def test_negative_year_fraction_looks_back(self) -> None:
        """A negative span whose anchor starts a year measures the year before."""
        span = TimeSpan.between(DateTime(2009, 2, 21, 12), DateTime(2007, 1, 1))
        p = parts(span, TimeUnit.YEAR, fractional=True)
        assert p.years == -2
        # 2008 has 366 days; 51.5 days remain past the 2009-01-01 anchor
        assert p.fraction == pytest.approx(-(2 + 51.5 / 366))

    def test_month_count_wraps_within_year(self) -> None:
        """An end earlier in the same month of a later year gives eleven months."""
        span = TimeSpan.between(DateTime(2010, 1, 15), DateTime(2011, 1, 10))
        p = parts(span, YMD)
        assert (p.years, p.months, p.days) == (0, 11, 26)

    def test_requires_reference(self) -> None:
        """Months and years need a reference."""
        with pytest.raises(NoReferenceError):
            parts(TimeSpan(400 * DAY), TimeUnit.YEAR)
        with pytest.raises(NoReferenceError):
            TimeSpan(DAY).parts(TimeUnit.MONTH | TimeUnit.DAY)


class TestPart:
    """Tests for the single-unit accessor."""

    def test_value(self) -> None:
        """part reads one value from the decomposition."""
        span = TimeSpan(DAY + 2 * HOUR)
        assert part(span, TimeUnit.HOUR, TimeUnit.DAY | TimeUnit.HOUR) == 2
        assert span.part(TimeUnit.HOUR) == 26

    def test_unit_not_requested(self) -> None:
        """Units outside the requested set read as zero."""
        assert part(TimeSpan(DAY), TimeUnit.HOUR, TimeUnit.DAY) == 0

    def test_drops_calendar_units_without_reference(self, caplog: pytest.LogCaptureFixture) -> None:
        """Months are dropped with a warning instead of failing."""
        span = TimeSpan(40 * DAY)
        with caplog.at_level(logging.WARNING, logger="chronospan"):
            days = part(span, TimeUnit.DAY, TimeUnit.MONTH | TimeUnit.DAY)
            months = part(span, TimeUnit.MONTH, TimeUnit.MONTH | TimeUnit.DAY)
        assert days == 40
        assert months == 0
        assert "no reference date" in caplog.text

    def test_calendar_units_with_reference(self) -> None:
        """With a reference months are counted."""
        span = TimeSpan.between(DateTime(2010, 1, 1), DateTime(2010, 2, 10))
        assert span.part(TimeUnit.MONTH, TimeUnit.MONTH | TimeUnit.DAY) == 1
        assert span.part(TimeUnit.DAY, TimeUnit.MONTH | TimeUnit.DAY) == 9


class TestSetPart:
    """Tests for changing one unit's value."""

    def test_fixed_unit(self) -> None:
        """Other units are preserved."""
        units = TimeUnit.HOUR | TimeUnit.MINUTE
        span = set_part(TimeSpan(2 * HOUR + 5 * 60_000), TimeUnit.HOUR, 7, units)
        assert span.to_string("hh:mm") == "07:05"

    def test_month(self) -> None:
        """Months are added on the calendar."""
        span = TimeSpan.between(DateTime(2010, 1, 1), DateTime(2010, 2, 10))
        units = TimeUnit.MONTH | TimeUnit.DAY
        changed = span.with_part(TimeUnit.MONTH, 3, units)
        assert changed.referenced == DateTime(2010, 4, 10)
        assert changed.part(TimeUnit.DAY, units) == 9

    def test_negative(self) -> None:
        """Negative spans move further from zero."""
        span = set_part(TimeSpan(-2 * HOUR), TimeUnit.HOUR, -5, TimeUnit.HOUR)
        assert span == TimeSpan(-5 * HOUR)

    def test_unit_not_requested(self) -> None:
        """Setting a unit outside the requested set is an error."""
        with pytest.raises(ValidationError):
            set_part(TimeSpan(HOUR), TimeUnit.DAY, 1, TimeUnit.HOUR)


class TestMagnitude:
    """Tests for the largest contained unit."""

    @pytest.mark.parametrize(
        ("msecs", "expected"),
        [
            (0, TimeUnit.MILLISECOND),
            (999, TimeUnit.MILLISECOND),
            (1000, TimeUnit.SECOND),
            (60_000, TimeUnit.MINUTE),
            (HOUR, TimeUnit.HOUR),
            (-DAY, TimeUnit.DAY),
            (7 * DAY, TimeUnit.WEEK),
            (400 * DAY, TimeUnit.WEEK),
        ],
    )
    def test_without_reference(self, msecs: int, expected: TimeUnit) -> None:
        """Unanchored spans cap at weeks."""
        assert magnitude(TimeSpan(msecs)) == expected

    def test_weeks_with_reference(self) -> None:
        """Less than a calendar month is weeks."""
        span = TimeSpan(20 * DAY, DateTime(2010, 1, 1))
        assert span.magnitude == TimeUnit.WEEK

    def test_months_with_reference(self) -> None:
        """A full calendar month is months."""
        span = TimeSpan.between(DateTime(2010, 2, 1), DateTime(2010, 3, 1))
        assert span.magnitude == TimeUnit.MONTH

    def test_years_with_reference(self) -> None:
        """A full calendar year is years."""
        span = TimeSpan.between(DateTime(2010, 2, 1), DateTime(2011, 2, 1))
        assert span.magnitude == TimeUnit.YEAR

    def test_beyond_366_days(self) -> None:
        """More than 366 days is always years."""
        span = TimeSpan(367 * DAY, DateTime(2010, 1, 1))
        assert span.magnitude == TimeUnit.YEAR

    def test_all_units_constant(self) -> None:
        """ALL_UNITS covers every single unit."""
        assert len(ALL_UNITS.single_units()) == 8
