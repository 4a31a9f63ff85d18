import math

from shared.math_utils import LOG2_10, clamp, gamma_curve, round_half_away_from_zero


def test_clamp_bounds():
    assert clamp(5, 0, 10) == 5
    assert clamp(-1, 0, 10) == 0
    assert clamp(11, 0, 10) == 10


def test_round_half_away_from_zero_ties():
    assert round_half_away_from_zero(2.5) == 3.0
    assert round_half_away_from_zero(3.5) == 4.0
    assert round_half_away_from_zero(-2.5) == -3.0
    assert round_half_away_from_zero(2.4) == 2.0


def test_round_half_away_from_zero_decimals():
    assert round_half_away_from_zero(5.25, 1) == 5.3
    assert round_half_away_from_zero(1.04, 1) == 1.0


def test_gamma_curve_endpoints_and_clamping():
    assert gamma_curve(0.0, 0.72) == 0.0
    assert gamma_curve(1.0, 0.72) == 1.0
    assert gamma_curve(-0.5, 0.72) == 0.0
    assert gamma_curve(2.0, 0.72) == 1.0
    assert gamma_curve(0.5, 0.72) > 0.5


def test_log2_10():
    assert math.isclose(LOG2_10, 3.321928094887362)
