"""Human-readable approximations of spans.

Renders a span as its largest meaningful unit, optionally followed by
the next smaller unit, for example ``"3 days"`` or ``"1 hour, 20
minutes"``. Unit names are looked up through :mod:`gettext` in the
``chronospan`` domain so applications can install translations with
plural forms.
"""

from __future__ import annotations

import gettext
import logging

from chronospan.arithmetic.parts import magnitude, parts
from chronospan.core.timespan import TimeSpan
from chronospan.units.timeunit import (
    ALL_UNITS,
    CALENDAR_UNITS,
    FIXED_UNITS,
    TimeUnit,
)

logger = logging.getLogger(__name__)

TEXT_DOMAIN = "chronospan"

_UNIT_NAMES: dict[TimeUnit, tuple[str, str]] = {
    TimeUnit.MILLISECOND: ("%d millisecond", "%d milliseconds"),
    TimeUnit.SECOND: ("%d second", "%d seconds"),
    TimeUnit.MINUTE: ("%d minute", "%d minutes"),
    TimeUnit.HOUR: ("%d hour", "%d hours"),
    TimeUnit.DAY: ("%d day", "%d days"),
    TimeUnit.WEEK: ("%d week", "%d weeks"),
    TimeUnit.MONTH: ("%d month", "%d months"),
    TimeUnit.YEAR: ("%d year", "%d years"),
}


def unit_name(unit: TimeUnit, count: int) -> str:
    """Return count with its pluralized unit name.

    Examples:
        >>> unit_name(TimeUnit.HOUR, 1)
        '1 hour'
        >>> unit_name(TimeUnit.DAY, -3)
        '-3 days'
    """
    singular, plural = _UNIT_NAMES[unit]
    return gettext.dngettext(TEXT_DOMAIN, singular, plural, abs(count)) % count


def approximate_string(
    span: TimeSpan,
    units: TimeUnit | None = None,
    suppress_second_unit_limit: int = 3,
) -> str:
    """Describe span with one or two of the given units.

    The primary unit is the largest enabled unit not exceeding the
    span's magnitude, or the smallest enabled unit if none qualifies.
    The secondary unit is the next smaller enabled unit. It is shown
    only when its value is non-zero and the primary value is below
    ``suppress_second_unit_limit``; a negative limit always shows it.

    Args:
        span: The span to describe.
        units: Units to choose from. Defaults to all units for spans with
            a reference and fixed units otherwise. Months and years are
            dropped for spans without a reference.
        suppress_second_unit_limit: Primary value from which the
            secondary unit is left out.

    Returns:
        The description, or an empty string if no units are enabled.

    Examples:
        >>> approximate_string(TimeSpan.hour() + TimeSpan.minute() * 20)
        '1 hour, 20 minutes'
        >>> approximate_string(TimeSpan.day() * 5 + TimeSpan.hour())
        '5 days'
    """
    if units is None:
        units = ALL_UNITS if span.reference is not None else FIXED_UNITS
    if span.reference is None and units & CALENDAR_UNITS:
        logger.warning(
            "span has no reference date, ignoring months and years in approximate string"
        )
        units = units & ~CALENDAR_UNITS

    enabled = units.single_units()
    if not enabled:
        return ""

    largest = magnitude(span)
    fitting = [unit for unit in enabled if unit.value <= largest.value]
    primary = fitting[-1] if fitting else enabled[0]
    index = enabled.index(primary)
    secondary = enabled[index - 1] if index > 0 else None

    wanted = primary if secondary is None else primary | secondary
    values = parts(span, wanted)
    primary_value = values[primary]
    text = unit_name(primary, primary_value)

    if secondary is not None:
        secondary_value = values[secondary]
        limit = suppress_second_unit_limit
        if secondary_value != 0 and (abs(primary_value) < limit or limit < 0):
            text = f"{text}, {unit_name(secondary, secondary_value)}"
    return text


__all__ = [
    "TEXT_DOMAIN",
    "approximate_string",
    "unit_name",
]
