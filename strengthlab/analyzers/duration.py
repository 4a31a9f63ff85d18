"""
Duration Formatting
====================

Formats a crack-time figure in seconds for display when the oracle's own
display string cannot be used.
"""

from __future__ import annotations

import math

from shared.math_utils import round_half_away_from_zero


# (unit name, factor to the next unit); the last unit never converts further
_UNIT_LADDER: tuple[tuple[str, float | None], ...] = (
    ("second", 60),
    ("minute", 60),
    ("hour", 24),
    ("day", 365),
    ("year", None),
)


def format_duration(seconds: float) -> str:
    """Render *seconds* as a short human-readable duration.

    The value is divided up the ladder second -> minute -> hour -> day ->
    year until the rounded value is below the next step. Values under 10
    keep one decimal, larger ones are whole numbers, and the unit is
    pluralised unless the shown value is exactly 1.

    Examples::

        >>> format_duration(1)
        '1 second'
        >>> format_duration(120)
        '2 minutes'
        >>> format_duration(float("inf"))
        'almost instantly'

    Args:
        seconds: Duration in seconds; may be non-finite or non-positive.

    Returns:
        Display string. Never raises.
    """
    if not math.isfinite(seconds) or seconds <= 0:
        return "almost instantly"
    if seconds < 1:
        return "less than a second"

    value = float(seconds)
    for unit, step in _UNIT_LADDER:
        shown = _round_for_display(value)
        # Compare the rounded figure so 59.96 s reads "1 minute", not "60 seconds"
        if step is None or shown < step:
            break
        value /= step

    number = str(int(shown)) if shown.is_integer() else f"{shown:.1f}"
    suffix = "" if shown == 1 else "s"
    return f"{number} {unit}{suffix}"


def _round_for_display(value: float) -> float:
    if value < 10:
        return round_half_away_from_zero(value, 1)
    return round_half_away_from_zero(value)
