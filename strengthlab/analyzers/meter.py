"""
Meter Percentage Curve
=======================

Maps the oracle's guess-count magnitude (``guesses_log10``) onto a 0-100
meter fill. Guess counts span many orders of magnitude, and a linear
rescale makes moderate passwords look nearly full, so the magnitude is
clamped into a fixed window, normalised, and passed through a power-law
(gamma) curve.

Window:
    - ``METER_MIN_LOG10 = 3``: about a thousand guesses, trivially guessable.
    - ``METER_MAX_LOG10 = 24``: about 1e24 guesses, a century or more at
      1e10 guesses/second.

Shifting either bound changes the feel of the whole meter.

References:
    - Poynton, C. (2003). Digital Video and HDTV, Ch. 23 (gamma).
    - Wheeler, D. L. (2016). zxcvbn: Low-Budget Password Strength
      Estimation. USENIX Security.
"""

from __future__ import annotations

from shared.math_utils import clamp, gamma_curve, round_half_away_from_zero


METER_MIN_LOG10: float = 3.0
METER_MAX_LOG10: float = 24.0
METER_GAMMA: float = 0.72


def meter_percent(guesses_log10: float, has_input: bool) -> int:
    """Compute the meter fill for a guess-count magnitude.

    Args:
        guesses_log10: Base-10 logarithm of the estimated guess count.
        has_input: ``False`` for the empty password.

    Returns:
        Integer percentage in ``[0, 100]``; 0 whenever *has_input* is false,
        0 at or below the window floor, 100 at or above the ceiling.
    """
    if not has_input:
        return 0

    clamped = clamp(guesses_log10, METER_MIN_LOG10, METER_MAX_LOG10)
    t = (clamped - METER_MIN_LOG10) / (METER_MAX_LOG10 - METER_MIN_LOG10)
    percent = round_half_away_from_zero(gamma_curve(t, METER_GAMMA) * 100)
    return int(clamp(percent, 0, 100))
