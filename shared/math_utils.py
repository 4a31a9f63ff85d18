"""
Strength Lab Mathematical Utilities
====================================

Small numeric helpers shared by the meter curve, the entropy conversion,
and the duration formatter.

Rounding in this project is always half-away-from-zero. Python's built-in
:func:`round` uses banker's rounding (``round(2.5) == 2``), which would make
the displayed figures disagree with the usual schoolbook convention.

References (master list):
    [1] IEEE 754-2019. Standard for Floating-Point Arithmetic, Section 4.3
        (roundTiesToAway).
    [2] Poynton, C. (2003). Digital Video and HDTV: Algorithms and
        Interfaces. Morgan Kaufmann. (Gamma correction.)
"""

from __future__ import annotations

import math


LOG2_10: float = math.log2(10)


# ========================== Range helpers ==================================


def clamp(value: float, lower: float, upper: float) -> float:
    """Constrain *value* to the closed interval ``[lower, upper]``.

    Args:
        value: Value to constrain.
        lower: Inclusive lower bound.
        upper: Inclusive upper bound.

    Returns:
        *value* if already in range, otherwise the nearest bound.
    """
    return min(max(value, lower), upper)


# ========================== Rounding =======================================


def round_half_away_from_zero(value: float, ndigits: int = 0) -> float:
    """Round *value* to *ndigits* decimals, ties away from zero.

    Reference:
        IEEE 754-2019, roundTiesToAway.

    Args:
        value: Finite value to round.
        ndigits: Number of decimal places to keep.

    Returns:
        The rounded value as a float (``2.5 -> 3.0``, ``-2.5 -> -3.0``).
    """
    factor = 10.0 ** ndigits
    return math.copysign(math.floor(abs(value) * factor + 0.5) / factor, value)


# ========================== Easing =========================================


def gamma_curve(t: float, gamma: float) -> float:
    """Apply power-law (gamma) easing to a normalised value.

    With ``gamma < 1`` the low end of the range is lifted and the curve
    flattens towards the top, which is the perceptual compression wanted
    for a strength meter. ``t`` is clamped into ``[0, 1]`` first, so the
    curve always maps 0 to 0 and 1 to 1 and is monotonically
    non-decreasing.

    Reference:
        Poynton, C. (2003). Digital Video and HDTV, Ch. 23.

    Args:
        t: Normalised position in the window.
        gamma: Exponent; must be positive.

    Returns:
        Eased value in ``[0, 1]``.
    """
    return clamp(t, 0.0, 1.0) ** gamma
