import pytest

from strengthlab.analyzers.duration import format_duration


@pytest.mark.parametrize("seconds", [0, -5, float("inf"), float("-inf"), float("nan")])
def test_degenerate_input_is_almost_instantly(seconds):
    assert format_duration(seconds) == "almost instantly"


def test_singular_and_plural():
    assert format_duration(1) == "1 second"
    assert format_duration(45) == "45 seconds"
    assert format_duration(120) == "2 minutes"
    assert format_duration(3600) == "1 hour"
    assert format_duration(2 * 86400) == "2 days"


def test_one_decimal_below_ten():
    assert format_duration(90) == "1.5 minutes"
    assert format_duration(5.25) == "5.3 seconds"


def test_years_are_the_last_unit():
    assert format_duration(150 * 365 * 86400) == "150 years"


def test_sub_second():
    assert format_duration(0.2) == "less than a second"


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (59.96, "1 minute"),
        (3599.9, "1 hour"),
        (86399.0, "1 day"),
        (364.99 * 86400, "1 year"),
        (9.96, "10 seconds"),
    ],
)
def test_rounding_up_moves_to_the_next_unit(seconds, expected):
    assert format_duration(seconds) == expected
