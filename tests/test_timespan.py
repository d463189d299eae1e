"""Tests for the TimeSpan value type.

These tests verify construction, reference handling, derived start and
end points, operators and value semantics.
"""

from __future__ import annotations

import copy
import math
import pickle

import pytest

from chronospan import DateTime, TimeSpan, TimeUnit
from chronospan.errors import DivisionByZeroError, OverflowError

HOUR = 3_600_000
DAY = 86_400_000


class TestTimeSpanConstruction:
    """Tests for TimeSpan construction and basic queries."""

    def test_default_is_null(self) -> None:
        """TimeSpan() is empty and has no reference."""
        span = TimeSpan()
        assert span.msecs == 0
        assert span.reference is None
        assert span.is_empty
        assert span.is_null
        assert not span

    def test_empty_with_reference_is_not_null(self) -> None:
        """A reference makes an empty span non-null."""
        span = TimeSpan(0, DateTime(2010, 1, 1))
        assert span.is_empty
        assert not span.is_null

    def test_negative(self) -> None:
        """Negative lengths are allowed."""
        span = TimeSpan(-5)
        assert span.is_negative
        assert not span.is_normal

    def test_from_span_copies_length(self) -> None:
        """from_span takes the length but not the reference of other."""
        ref = DateTime(2010, 1, 1)
        other = TimeSpan(1234, DateTime(2000, 1, 1))
        assert TimeSpan.from_span(ref, other) == TimeSpan(1234, ref)

    def test_between(self) -> None:
        """between measures from reference to referenced."""
        a = DateTime(2010, 1, 1)
        b = DateTime(2010, 1, 2)
        assert TimeSpan.between(a, b) == TimeSpan(DAY, a)
        assert TimeSpan.between(b, a) == TimeSpan(-DAY, b)

    def test_unit_constants(self) -> None:
        """Unit constructors produce unanchored fixed lengths."""
        assert TimeSpan.second().msecs == 1000
        assert TimeSpan.minute().msecs == 60_000
        assert TimeSpan.hour().msecs == HOUR
        assert TimeSpan.day().msecs == DAY
        assert TimeSpan.week().msecs == 7 * DAY
        assert TimeSpan.week().reference is None

    def test_rejects_float_length(self) -> None:
        """Lengths are whole milliseconds."""
        with pytest.raises(TypeError):
            TimeSpan(1.5)  # type: ignore[arg-type]

    def test_rejects_64_bit_overflow(self) -> None:
        """Lengths must fit a signed 64-bit integer."""
        TimeSpan(2**63 - 1)
        with pytest.raises(OverflowError):
            TimeSpan(2**63)


class TestTimeSpanEnds:
    """Tests for referenced, start and end."""

    def test_referenced(self) -> None:
        """referenced is reference plus the length."""
        span = TimeSpan(HOUR, DateTime(2010, 1, 1))
        assert span.referenced == DateTime(2010, 1, 1, 1)

    def test_no_reference_has_no_ends(self) -> None:
        """Unanchored spans have no start, end or referenced point."""
        span = TimeSpan(HOUR)
        assert span.referenced is None
        assert span.start is None
        assert span.end is None

    @pytest.mark.parametrize("msecs", [-DAY, -1, 0, 1, DAY])
    def test_start_not_after_end(self, msecs: int) -> None:
        """start <= end, equal only for empty spans."""
        span = TimeSpan(msecs, DateTime(2010, 6, 15))
        assert span.start <= span.end
        assert (span.start == span.end) == (msecs == 0)

    def test_negative_span_swaps_ends(self) -> None:
        """For negative spans the reference is the end."""
        ref = DateTime(2010, 1, 1)
        span = TimeSpan(-HOUR, ref)
        assert span.end == ref
        assert span.start == DateTime(2009, 12, 31, 23)


class TestTimeSpanReferenceHandling:
    """Tests for changing reference and referenced points."""

    def test_with_reference_keeps_referenced(self) -> None:
        """Replacing an existing reference keeps the other end fixed."""
        span = TimeSpan(2 * DAY, DateTime(2010, 1, 1))
        moved = span.with_reference(DateTime(2010, 1, 2))
        assert moved.referenced == DateTime(2010, 1, 3)
        assert moved.msecs == DAY

    def test_with_reference_on_unanchored(self) -> None:
        """Without a previous reference the length is kept."""
        span = TimeSpan(DAY).with_reference(DateTime(2010, 1, 1))
        assert span == TimeSpan(DAY, DateTime(2010, 1, 1))

    def test_moved_to_reference_keeps_length(self) -> None:
        """moved_to_reference shifts the whole span."""
        span = TimeSpan(DAY, DateTime(2010, 1, 1)).moved_to_reference(DateTime(2011, 1, 1))
        assert span == TimeSpan(DAY, DateTime(2011, 1, 1))

    def test_with_referenced(self) -> None:
        """with_referenced keeps the reference and changes the length."""
        span = TimeSpan(DAY, DateTime(2010, 1, 1)).with_referenced(DateTime(2009, 12, 31))
        assert span == TimeSpan(-DAY, DateTime(2010, 1, 1))

    def test_with_referenced_unanchored(self) -> None:
        """Without a reference one is derived from the length."""
        span = TimeSpan(DAY).with_referenced(DateTime(2010, 1, 2))
        assert span == TimeSpan(DAY, DateTime(2010, 1, 1))

    def test_moved_to_referenced(self) -> None:
        """moved_to_referenced keeps the length."""
        span = TimeSpan(HOUR, DateTime(2010, 1, 1)).moved_to_referenced(DateTime(2010, 1, 1))
        assert span == TimeSpan(HOUR, DateTime(2009, 12, 31, 23))


class TestTimeSpanNormalization:
    """Tests for normalized() and abs()."""

    def test_normalized_negative(self) -> None:
        """Normalizing swaps the ends of a negative span."""
        span = TimeSpan(-DAY, DateTime(2010, 1, 2))
        normal = span.normalized()
        assert normal.msecs == DAY
        assert normal.start == span.start
        assert normal.end == span.end
        assert normal.reference == DateTime(2010, 1, 1)

    def test_normalized_positive_is_noop(self) -> None:
        """Non-negative spans are unchanged."""
        span = TimeSpan(DAY, DateTime(2010, 1, 2))
        assert span.normalized() == span

    def test_normalized_unanchored(self) -> None:
        """Without a reference only the sign changes."""
        assert TimeSpan(-5).normalized() == TimeSpan(5)

    def test_abs_keeps_reference(self) -> None:
        """abs() differs from normalized() for negative anchored spans."""
        ref = DateTime(2010, 1, 2)
        span = TimeSpan(-DAY, ref)
        assert abs(span) == TimeSpan(DAY, ref)
        assert abs(span) != span.normalized()

    def test_matches_length(self) -> None:
        """Length comparison ignores references and optionally sign."""
        a = TimeSpan(DAY, DateTime(2010, 1, 1))
        b = TimeSpan(-DAY)
        assert not a.matches_length(b)
        assert a.matches_length(b, normalize=True)
        assert a.matches_length(TimeSpan(DAY))


class TestTimeSpanArithmetic:
    """Tests for arithmetic operators."""

    def test_add_keeps_left_reference(self) -> None:
        """The left operand's reference wins."""
        left = TimeSpan(HOUR, DateTime(2010, 1, 1))
        right = TimeSpan(HOUR, DateTime(2000, 1, 1))
        assert (left + right) == TimeSpan(2 * HOUR, DateTime(2010, 1, 1))

    def test_add_takes_right_reference_when_left_has_none(self) -> None:
        """An unanchored left operand takes the right's reference."""
        right = TimeSpan(HOUR, DateTime(2000, 1, 1))
        assert (TimeSpan(HOUR) + right).reference == DateTime(2000, 1, 1)
        assert (TimeSpan(HOUR) - right) == TimeSpan(0, DateTime(2000, 1, 1))

    def test_add_milliseconds(self) -> None:
        """Integers are milliseconds."""
        assert TimeSpan(1000) + 500 == TimeSpan(1500)
        assert 500 + TimeSpan(1000) == TimeSpan(1500)
        assert TimeSpan(1000) - 1500 == TimeSpan(-500)

    def test_sum(self) -> None:
        """sum() works starting from an integer zero."""
        total = sum([TimeSpan.hour(), TimeSpan.minute(), TimeSpan.second()])
        assert total.to_string("hh:mm:ss") == "01:01:01"

    def test_multiply(self) -> None:
        """Multiplication scales and truncates toward zero."""
        assert TimeSpan(1000) * 3 == TimeSpan(3000)
        assert 3 * TimeSpan(1000) == TimeSpan(3000)
        assert TimeSpan(3) * 0.5 == TimeSpan(1)
        assert TimeSpan(-3) * 0.5 == TimeSpan(-1)

    def test_multiply_keeps_reference(self) -> None:
        """Scaling keeps the reference."""
        ref = DateTime(2010, 1, 1)
        assert (TimeSpan(1000, ref) * 2).reference == ref

    def test_integer_division_truncates(self) -> None:
        """Integer division truncates toward zero."""
        assert TimeSpan(7) / 2 == TimeSpan(3)
        assert TimeSpan(-7) / 2 == TimeSpan(-3)
        assert TimeSpan(-7) // 2 == TimeSpan(-3)

    def test_real_division(self) -> None:
        """Real divisors scale by the reciprocal."""
        assert TimeSpan(1000) / 0.5 == TimeSpan(2000)

    def test_integer_zero_divisor(self) -> None:
        """Dividing by integer zero raises DivisionByZeroError."""
        with pytest.raises(DivisionByZeroError):
            TimeSpan(1000) / 0
        with pytest.raises(ZeroDivisionError):
            TimeSpan(1000) // 0

    def test_real_zero_divisor(self) -> None:
        """Dividing by 0.0 gives no representable length."""
        with pytest.raises(OverflowError):
            TimeSpan(1000) / 0.0

    def test_span_ratio(self) -> None:
        """Dividing spans gives a float."""
        assert TimeSpan.day() / TimeSpan.hour() == 24.0

    def test_span_ratio_by_empty_span(self) -> None:
        """Ratios by an empty span follow IEEE-754."""
        assert TimeSpan(5) / TimeSpan() == math.inf
        assert TimeSpan(-5) / TimeSpan() == -math.inf
        assert math.isnan(TimeSpan() / TimeSpan())

    def test_negation_keeps_reference(self) -> None:
        """Unary minus flips the sign only."""
        ref = DateTime(2010, 1, 1)
        assert -TimeSpan(5, ref) == TimeSpan(-5, ref)
        assert +TimeSpan(5, ref) == TimeSpan(5, ref)

    def test_overflowing_sum(self) -> None:
        """Results beyond 64 bits raise OverflowError."""
        with pytest.raises(OverflowError):
            TimeSpan(2**63 - 1) + 1


class TestTimeSpanComparison:
    """Tests for equality and ordering."""

    def test_equality_is_structural(self) -> None:
        """Equal spans need equal lengths and references."""
        assert TimeSpan(5, DateTime(2010, 1, 1)) == TimeSpan(5, DateTime(2010, 1, 1))
        assert TimeSpan(5, DateTime(2010, 1, 1)) != TimeSpan(5, DateTime(2010, 1, 2))
        assert TimeSpan(5) != TimeSpan(5, DateTime(2010, 1, 1))

    def test_ordering_ignores_reference(self) -> None:
        """Ordering compares lengths only."""
        a = TimeSpan(5, DateTime(2010, 1, 1))
        b = TimeSpan(5, DateTime(2020, 1, 1))
        assert a <= b and b <= a
        assert not a < b
        assert a != b
        assert TimeSpan(4) < TimeSpan(5, DateTime(2020, 1, 1))

    def test_hash_follows_equality(self) -> None:
        """Equal spans hash alike and can be set members."""
        ref = DateTime(2010, 1, 1)
        spans = {TimeSpan(5, ref), TimeSpan(5, ref), TimeSpan(5)}
        assert len(spans) == 2

    def test_compare_with_other_types(self) -> None:
        """Comparing with a number is unsupported."""
        assert TimeSpan(5) != 5
        with pytest.raises(TypeError):
            TimeSpan(5) < 5  # type: ignore[operator]


class TestTimeSpanConversions:
    """Tests for unit conversions."""

    def test_fixed_units(self) -> None:
        """Fixed units divide by their length."""
        span = TimeSpan.day() * 3
        assert span.to_days() == 3.0
        assert span.to_hours() == 72.0
        assert span.to_weeks() == pytest.approx(3 / 7)
        assert span.to_time_unit(TimeUnit.MINUTE) == 4320.0
        assert TimeSpan(1500).to_seconds() == 1.5
        assert TimeSpan(1500).to_milliseconds() == 1500.0

    def test_from_time_unit(self) -> None:
        """Spans can be built from a unit amount."""
        assert TimeSpan.from_time_unit(TimeUnit.HOUR, 1.5) == TimeSpan(90 * 60_000)
        ref = DateTime(2010, 1, 1)
        assert TimeSpan.from_time_unit(TimeUnit.MONTH, 1, ref).referenced == DateTime(2010, 2, 1)


class TestTimeSpanValueSemantics:
    """Tests for copying, pickling and text forms."""

    def test_copy_and_pickle(self) -> None:
        """Copies compare equal to the original."""
        span = TimeSpan(-1234, DateTime(2010, 1, 1, 0, 0, 0, 5))
        assert copy.copy(span) == span
        assert copy.deepcopy(span) == span
        assert pickle.loads(pickle.dumps(span)) == span

    def test_repr(self) -> None:
        """repr shows the reference and the length."""
        assert repr(TimeSpan(1500, DateTime(2010, 1, 1))) == (
            "TimeSpan(Reference = 2010-01-01T00:00:00, msecs = 1500)"
        )
        assert repr(TimeSpan(-7)) == "TimeSpan(Reference = invalid, msecs = -7)"

    def test_str_is_approximate(self) -> None:
        """str() gives the approximate description."""
        assert str(TimeSpan.hour() * 2) == "2 hours"

    def test_contains_operator(self) -> None:
        """The in operator tests containment."""
        span = TimeSpan(DAY, DateTime(2010, 1, 1))
        assert DateTime(2010, 1, 1, 12) in span
        assert DateTime(2010, 1, 3) not in span
        assert "2010-01-01" not in span
