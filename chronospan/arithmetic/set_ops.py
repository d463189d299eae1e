"""Set operations over anchored spans.

Anchored spans cover a stretch of the calendar from ``start`` to
``end``, so they can be combined like closed intervals.

Two boundary conventions coexist. :func:`intersection` and
:func:`overlaps` treat spans that only touch at one instant as
disjoint, while :func:`overlapped` treats them as overlapping in a
zero-length span at the touching instant.

Functions:
    union: Smallest span covering both spans.
    intersection: Common part of two spans, empty if they do not overlap.
    overlaps: Whether two spans share more than a single instant.
    overlapped: Common part of two spans, touching spans included.
    contains: Whether a point or span lies within a span.
"""

from __future__ import annotations

from chronospan.core.datetime import DateTime
from chronospan.core.timespan import TimeSpan
from chronospan.errors import NoReferenceError


def _require_references(a: TimeSpan, b: TimeSpan, operation: str) -> None:
    if a.reference is None or b.reference is None:
        raise NoReferenceError(f"{operation} needs both spans to have a reference date")


def _ordered(a: TimeSpan, b: TimeSpan) -> tuple[TimeSpan, TimeSpan]:
    """Return the spans ordered by start, a first on ties."""
    if b.start < a.start:
        return b, a
    return a, b


def union(a: TimeSpan, b: TimeSpan) -> TimeSpan:
    """Return the span from the earliest start to the latest end.

    The result is non-negative and anchored at its start.

    Raises:
        NoReferenceError: If either span has no reference.

    Examples:
        >>> a = TimeSpan(TimeSpan.day().msecs, DateTime(2010, 1, 1))
        >>> b = TimeSpan(TimeSpan.day().msecs, DateTime(2010, 1, 5))
        >>> union(a, b).to_days()
        5.0
    """
    _require_references(a, b, "union")
    start = min(a.start, b.start)
    end = max(a.end, b.end)
    return TimeSpan.between(start, end)


def intersection(a: TimeSpan, b: TimeSpan) -> TimeSpan:
    """Return the stretch of time covered by both spans.

    Spans that do not overlap, or only touch, give an empty span
    anchored at a's reference.

    Raises:
        NoReferenceError: If either span has no reference.
    """
    _require_references(a, b, "intersection")
    first, last = _ordered(a, b)
    if not first.end > last.start:
        return TimeSpan(0, a.reference)
    return TimeSpan.between(last.start, min(first.end, last.end))


def overlaps(a: TimeSpan, b: TimeSpan) -> bool:
    """Return True if the spans share more than a single instant.

    Spans without a reference never overlap.
    """
    if a.reference is None or b.reference is None:
        return False
    first, last = _ordered(a, b)
    return first.end > last.start


def overlapped(a: TimeSpan, b: TimeSpan) -> TimeSpan:
    """Return the common part of both spans, counting touching spans.

    Returns:
        The common span anchored at its start, a zero-length span at the
        touching instant, or the null span if the spans are disjoint.

    Raises:
        NoReferenceError: If either span has no reference.
    """
    _require_references(a, b, "overlapped")
    first, last = _ordered(a, b)
    if not first.end >= last.start:
        return TimeSpan()
    return TimeSpan.between(last.start, min(first.end, last.end))


def contains(span: TimeSpan, other: DateTime | TimeSpan) -> bool:
    """Return True if a point or a whole span lies within span.

    Both ends are inclusive. Returns False when span, or a span being
    tested, has no reference.

    Raises:
        TypeError: If other is neither a DateTime nor a TimeSpan.
    """
    if span.reference is None:
        return False
    if isinstance(other, DateTime):
        return span.start <= other <= span.end
    if isinstance(other, TimeSpan):
        if other.reference is None:
            return False
        return span.start <= other.start and other.end <= span.end
    raise TypeError(f"expected DateTime or TimeSpan, got {type(other).__name__}")


__all__ = [
    "contains",
    "intersection",
    "overlapped",
    "overlaps",
    "union",
]
