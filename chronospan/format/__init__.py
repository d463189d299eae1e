"""Span formatting and parsing.

This module provides functions for converting spans to and from
text:
    - Pattern formatting and fixed-width parsing (``"hh:mm:ss"``)
    - Regex capture-group parsing
    - Approximate human-readable descriptions

Functions:
    format_span: Render a span with a pattern.
    parse_span: Parse fixed-width text laid out by a pattern.
    parse_span_regex: Parse text through regex capture groups.
    approximate_string: Describe a span in one or two units.
    tokenize: Split a pattern into unit and literal tokens.

Examples:
    >>> from chronospan import TimeSpan
    >>> from chronospan.format import format_span, parse_span

    >>> format_span(TimeSpan.minute() * 90, "hh:mm")
    '01:30'

    >>> parse_span("01:30", "hh:mm").to_minutes()
    90.0
"""

from __future__ import annotations

from chronospan.format.approximate import approximate_string, unit_name
from chronospan.format.pattern import format_span, parse_span, parse_span_regex
from chronospan.format.tokenizer import FormatToken, pattern_units, tokenize

__all__: list[str] = [
    # Patterns
    "format_span",
    "parse_span",
    "parse_span_regex",
    # Tokenizer
    "FormatToken",
    "pattern_units",
    "tokenize",
    # Approximate text
    "approximate_string",
    "unit_name",
]
