"""Tokenizer for span format patterns.

A pattern mixes unit placeholders with literal text:

    y  years          w  weeks       m  minutes
    M  months         d  days        s  seconds
                      h  hours       z  milliseconds

A run of N identical letters is one placeholder of width N, so
``"hh:mm"`` is an hour of width 2, a literal ``":"`` and a minute of
width 2. Any other character is literal. Single quotes enclose literal
text that may contain letters; two quotes inside a quoted run produce
one quote character. An unclosed quote runs to the end of the pattern.

Examples:
    >>> [t.text or t.unit.symbol * t.width for t in tokenize("d'd 'hh")]
    ['d', 'd ', 'hh']
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from chronospan.units.timeunit import TimeUnit

_QUOTE = "'"


class _State(Enum):
    NORMAL = "normal"
    IN_LITERAL = "in_literal"


@dataclass(frozen=True)
class FormatToken:
    """One element of a tokenized pattern.

    Unit placeholders have ``unit`` set and ``text`` empty; literal
    tokens have ``unit`` NO_UNIT. ``width`` is the number of input
    characters the token stands for.
    """

    unit: TimeUnit = TimeUnit.NO_UNIT
    width: int = 0
    text: str = ""

    @property
    def is_literal(self) -> bool:
        return self.unit is TimeUnit.NO_UNIT


class _TokenBuilder:
    """Accumulates tokens, merging runs as the tokenizer feeds it."""

    def __init__(self) -> None:
        self.tokens: list[FormatToken] = []

    def unit(self, unit: TimeUnit) -> None:
        last = self.tokens[-1] if self.tokens else None
        if last is not None and last.unit is unit:
            self.tokens[-1] = FormatToken(unit, last.width + 1)
        else:
            self.tokens.append(FormatToken(unit, 1))

    def literal(self, char: str) -> None:
        last = self.tokens[-1] if self.tokens else None
        if last is not None and last.is_literal:
            text = last.text + char
            self.tokens[-1] = FormatToken(TimeUnit.NO_UNIT, len(text), text)
        else:
            self.tokens.append(FormatToken(TimeUnit.NO_UNIT, 1, char))

    def open_literal(self) -> None:
        self.tokens.append(FormatToken(TimeUnit.NO_UNIT, 0, ""))


def tokenize(pattern: str) -> list[FormatToken]:
    """Split a pattern into unit and literal tokens.

    An opening quote always starts a new literal token, even right
    after another literal. Unquoted literal characters are appended to
    a preceding literal token, quoted or not.

    Args:
        pattern: The format pattern.

    Returns:
        Tokens in pattern order. Empty quoted runs yield empty literal
        tokens.

    Examples:
        >>> tokenize("hh'h'")
        [FormatToken(unit=<TimeUnit.HOUR: 8>, width=2, text=''), FormatToken(unit=<TimeUnit.NO_UNIT: 0>, width=1, text='h')]
    """
    builder = _TokenBuilder()
    state = _State.NORMAL
    i = 0
    length = len(pattern)

    while i < length:
        char = pattern[i]
        if state is _State.NORMAL:
            if char == _QUOTE:
                builder.open_literal()
                state = _State.IN_LITERAL
            else:
                unit = TimeUnit.from_symbol(char)
                if unit is not None:
                    builder.unit(unit)
                else:
                    builder.literal(char)
        else:
            if char == _QUOTE:
                if i + 1 < length and pattern[i + 1] == _QUOTE:
                    builder.literal(_QUOTE)
                    i += 1
                else:
                    state = _State.NORMAL
            else:
                builder.literal(char)
        i += 1

    return builder.tokens


def pattern_units(tokens: list[FormatToken]) -> TimeUnit:
    """Return the set of units the tokens use."""
    units = TimeUnit.NO_UNIT
    for token in tokens:
        units |= token.unit
    return units


__all__ = [
    "FormatToken",
    "pattern_units",
    "tokenize",
]
