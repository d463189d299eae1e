"""Pattern-based formatting and parsing of spans.

Functions:
    format_span: Render a span with a pattern such as ``"d'd' hh:mm"``.
    parse_span: Read fixed-width text laid out by a pattern.
    parse_span_regex: Read text by mapping regex capture groups to units.

Parsing assembles the span from the reference date: years are added
first, then months, then the fixed units, so that month lengths are
measured where the years leave off.

Parse failures return the null span ``TimeSpan()`` unless ``strict`` is
set, in which case ParseError is raised. Because an empty span is also
a legitimate result, callers that must tell the two apart should pass
a reference (a failure never carries one) or use ``strict``.

Examples:
    >>> from chronospan import TimeSpan
    >>> span = TimeSpan.hour() * 26 + TimeSpan.second() * 7
    >>> format_span(span, "d'd' hh:mm:ss")
    '1d 02:00:07'
    >>> parse_span("1d 02:00:07", "d'd' hh:mm:ss") == span
    True
"""

from __future__ import annotations

import logging
import re

from chronospan._internal.constants import MAX_CAPTURE_UNITS
from chronospan.arithmetic.calendar_ops import add_calendar_unit
from chronospan.arithmetic.parts import parts
from chronospan.core.datetime import DateTime
from chronospan.core.timespan import TimeSpan
from chronospan.errors import NoReferenceError, ParseError, ValidationError
from chronospan.format.tokenizer import FormatToken, pattern_units, tokenize
from chronospan.units.timeunit import CALENDAR_UNITS, LADDER, TimeUnit

logger = logging.getLogger(__name__)

_INTEGER_PATTERN = re.compile(r"[+-]?\d+")

# Assembly order: calendar units first, largest first
_ASSEMBLY_ORDER: tuple[TimeUnit, ...] = tuple(reversed(LADDER))


def _parse_int(chunk: str | None, unit: TimeUnit) -> int:
    if chunk is None:
        raise ParseError(f"no text captured for {unit.name.lower()}")
    stripped = chunk.strip()
    if not _INTEGER_PATTERN.fullmatch(stripped):
        raise ParseError(f"expected an integer for {unit.name.lower()}, got {chunk!r}")
    return int(stripped)


def _assemble(values: dict[TimeUnit, int], reference: DateTime | None) -> TimeSpan:
    span = TimeSpan(0, reference)
    for unit in _ASSEMBLY_ORDER:
        if unit in values:
            span = add_calendar_unit(span, unit, values[unit])
    return span


def _require_reference(units: TimeUnit, reference: DateTime | None) -> None:
    if reference is None and units & CALENDAR_UNITS:
        raise NoReferenceError("parsing months or years needs a reference date")


def format_span(span: TimeSpan, pattern: str) -> str:
    """Render span according to pattern.

    Each placeholder is replaced by its unit's value from decomposing
    span into the units the pattern uses, zero-padded to the
    placeholder's width. A negative value keeps its sign in front of the
    padding, so ``-5`` in a width-3 field renders as ``-05``.

    Args:
        span: The span to render.
        pattern: The format pattern.

    Returns:
        The rendered text.

    Raises:
        NoReferenceError: If the pattern uses months or years and span
            has no reference.
        OverflowError: If a value does not fit a signed 32-bit integer.
    """
    tokens = tokenize(pattern)
    values = parts(span, pattern_units(tokens))
    pieces = []
    for token in tokens:
        if token.is_literal:
            pieces.append(token.text)
        else:
            pieces.append(f"{values[token.unit]:0{token.width}d}")
    return "".join(pieces)


def _read_fixed_width(text: str, tokens: list[FormatToken]) -> dict[TimeUnit, int]:
    values: dict[TimeUnit, int] = {}
    position = 0
    for token in tokens:
        chunk = text[position:position + token.width]
        position += token.width
        if token.is_literal:
            continue
        values[token.unit] = _parse_int(chunk, token.unit)
    return values


def parse_span(
    text: str,
    pattern: str,
    reference: DateTime | None = None,
    *,
    strict: bool = False,
) -> TimeSpan:
    """Read a span from text laid out according to pattern.

    Every token consumes exactly its width in characters. Literal text
    is skipped without being compared. Unit fields may be padded with
    spaces and carry a sign. When a unit appears more than once the
    last value wins. Text past the end of the pattern is ignored.

    Args:
        text: The text to read.
        pattern: The format pattern.
        reference: The reference date of the result.
        strict: Raise ParseError instead of returning the null span.

    Returns:
        The parsed span anchored at reference, or ``TimeSpan()`` if the
        text does not fit the pattern.

    Raises:
        NoReferenceError: If the pattern uses months or years and
            reference is None.
        ParseError: If strict is set and the text does not fit.

    Examples:
        >>> parse_span("03:30", "hh:mm").to_minutes()
        210.0
        >>> parse_span("3h", "hh").is_null
        True
    """
    tokens = tokenize(pattern)
    _require_reference(pattern_units(tokens), reference)
    try:
        values = _read_fixed_width(text, tokens)
    except ParseError as e:
        if strict:
            raise
        logger.debug("could not parse %r with pattern %r: %s", text, pattern, e)
        return TimeSpan()
    return _assemble(values, reference)


def parse_span_regex(
    text: str,
    pattern: str | re.Pattern[str],
    reference: DateTime | None,
    *units: TimeUnit,
    strict: bool = False,
) -> TimeSpan:
    """Read a span by matching a regular expression against text.

    The n-th unit names what the n-th capture group holds. NO_UNIT
    entries skip their group, and units beyond the last group are
    ignored. The expression is searched for anywhere in text.

    Args:
        text: The text to read.
        pattern: A regular expression, compiled or not.
        reference: The reference date of the result.
        *units: Up to eight units, one per capture group.
        strict: Raise ParseError instead of returning the null span.

    Returns:
        The parsed span anchored at reference, or ``TimeSpan()`` if the
        expression does not match or a capture is not an integer.

    Raises:
        ValidationError: If more than eight units are given, or an entry
            is not a single unit.
        NoReferenceError: If months or years are captured and reference
            is None.
        ParseError: If strict is set and the text does not fit.

    Examples:
        >>> span = parse_span_regex(
        ...     "took 2 hours and 15 minutes", r"(\\d+) hours? and (\\d+) minutes?",
        ...     None, TimeUnit.HOUR, TimeUnit.MINUTE)
        >>> span.to_minutes()
        135.0
    """
    if len(units) > MAX_CAPTURE_UNITS:
        raise ValidationError(
            f"at most {MAX_CAPTURE_UNITS} capture units are supported, got {len(units)}"
        )
    wanted = TimeUnit.NO_UNIT
    for unit in units:
        if unit is not TimeUnit.NO_UNIT and unit not in LADDER:
            raise ValidationError(f"expected a single time unit, got {unit!r}")
        wanted |= unit
    _require_reference(wanted, reference)

    regex = re.compile(pattern) if isinstance(pattern, str) else pattern
    try:
        match = regex.search(text)
        if match is None:
            raise ParseError(f"{regex.pattern!r} does not match {text!r}")
        values: dict[TimeUnit, int] = {}
        # Units past the last capture group are ignored.
        for group, unit in zip(range(1, regex.groups + 1), units):
            if unit is TimeUnit.NO_UNIT:
                continue
            values[unit] = _parse_int(match.group(group), unit)
    except ParseError as e:
        if strict:
            raise
        logger.debug("could not parse %r: %s", text, e)
        return TimeSpan()
    return _assemble(values, reference)


__all__ = [
    "format_span",
    "parse_span",
    "parse_span_regex",
]
