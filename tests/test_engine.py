import json

import pytest
from pydantic import ValidationError

from shared.config import LabConfig
from strengthlab.core.engine import (
    EMPTY_PROMPT,
    STRONG_FALLBACK,
    StrengthEstimator,
    empty_estimate,
    entropy_bits,
)
from strengthlab.analyzers.meter import meter_percent
from strengthlab.oracles.base import OracleError

from tests.conftest import FakeOracle, make_result


def test_empty_password_skips_the_oracle(fake_oracle):
    estimator = StrengthEstimator(oracle=fake_oracle)
    result = estimator.estimate("")

    assert fake_oracle.calls == 0
    assert result.entropy_bits == 0
    assert result.meter_percent == 0
    assert result.variety == 0
    assert result.coarse_score == 0
    assert result.suggestion == EMPTY_PROMPT
    assert result.crack_time_text == "almost instantly"


def test_derived_fields(fake_oracle):
    fake_oracle.result = make_result(guesses_log10=10.0, score=2)
    result = StrengthEstimator(oracle=fake_oracle).estimate("password123")

    assert fake_oracle.calls == 1
    assert result.entropy_bits == 33
    assert result.variety == 2
    assert result.coarse_score == 2
    assert result.meter_percent == meter_percent(10.0, has_input=True)
    assert result.crack_seconds == 120.0
    assert result.crack_time_text == "2 minutes"


def test_entropy_bits_conversion():
    assert entropy_bits(0.0) == 0
    # 3 * log2(10) = 9.97
    assert entropy_bits(3.0) == 10
    assert entropy_bits(24.0) == 80


def test_warning_wins_over_suggestions(fake_oracle):
    fake_oracle.result = make_result(
        warning="This is a top-100 common password.",
        suggestions=["Add another word or two."],
    )
    result = StrengthEstimator(oracle=fake_oracle).estimate("password")
    assert result.suggestion == "This is a top-100 common password."


def test_first_suggestion_when_no_warning(fake_oracle):
    fake_oracle.result = make_result(
        suggestions=["Add another word or two.", "Avoid dates."],
    )
    result = StrengthEstimator(oracle=fake_oracle).estimate("Summer2025!")
    assert result.suggestion == "Add another word or two."


def test_fallback_when_no_feedback(fake_oracle):
    fake_oracle.result = make_result(guesses_log10=22.0, score=4)
    result = StrengthEstimator(oracle=fake_oracle).estimate("7*JGiULWFJtydsK*VdpwtGJw")
    assert result.suggestion == STRONG_FALLBACK


def test_missing_display_text_is_formatted_locally(fake_oracle):
    fake_oracle.result = make_result(seconds=7200.0, display="")
    result = StrengthEstimator(oracle=fake_oracle).estimate("abc")
    assert result.crack_time_text == "2 hours"


def test_non_finite_seconds_never_reach_the_display(fake_oracle):
    fake_oracle.result = make_result(seconds=float("inf"), display="Infinity")
    result = StrengthEstimator(oracle=fake_oracle).estimate("abc")
    assert result.crack_time_text == "almost instantly"


def test_oracle_text_survives_non_finite_seconds(fake_oracle):
    fake_oracle.result = make_result(seconds=float("inf"), display="centuries")
    result = StrengthEstimator(oracle=fake_oracle).estimate("abc")
    assert result.crack_time_text == "centuries"


@pytest.mark.parametrize("display", ["", "inf", "NaN", "-Infinity"])
def test_unreadable_oracle_text_is_reformatted(fake_oracle, display):
    fake_oracle.result = make_result(seconds=7200.0, display=display)
    result = StrengthEstimator(oracle=fake_oracle).estimate("abc")
    assert result.crack_time_text == "2 hours"


def test_non_finite_guess_magnitude_is_rejected():
    with pytest.raises(ValidationError):
        make_result(guesses_log10=float("inf"))
    with pytest.raises(ValidationError):
        make_result(guesses_log10=float("nan"))


@pytest.mark.parametrize("magnitude", [1e308, float("inf")])
def test_extreme_guess_magnitude_still_estimates(magnitude):
    # model_copy skips validation, standing in for an oracle that does too
    oracle = FakeOracle(make_result().model_copy(update={"guesses_log10": magnitude}))
    result = StrengthEstimator(oracle=oracle).estimate("abc")

    assert result.entropy_bits == entropy_bits(1000.0)
    assert result.meter_percent == 100
    assert result.variety == 1


def test_unusable_guess_magnitude_degrades_to_empty_estimate():
    oracle = FakeOracle(make_result().model_copy(update={"guesses_log10": float("nan")}))
    result = StrengthEstimator(oracle=oracle).estimate("abc")

    assert oracle.calls == 1
    assert result == empty_estimate()


@pytest.mark.parametrize("error", [OracleError("too long"), RuntimeError("boom")])
def test_oracle_failure_degrades_to_empty_estimate(error):
    oracle = FakeOracle(error=error)
    result = StrengthEstimator(oracle=oracle).estimate("x" * 500)

    assert oracle.calls == 1
    assert result == empty_estimate()


def test_each_call_is_independent(fake_oracle):
    estimator = StrengthEstimator(oracle=fake_oracle)
    first = estimator.estimate("abc")
    second = estimator.estimate("abc")

    assert fake_oracle.calls == 2
    assert first == second
    assert first is not second


def test_estimate_is_immutable(fake_oracle):
    result = StrengthEstimator(oracle=fake_oracle).estimate("abc")
    with pytest.raises(ValidationError):
        result.meter_percent = 100


def test_failure_log_never_contains_the_password(tmp_path):
    log_file = tmp_path / "lab.log"
    config = LabConfig()
    config.global_settings.log_file = str(log_file)
    config.global_settings.log_json = True

    secret = "hunter2-but-longer"
    estimator = StrengthEstimator(
        oracle=FakeOracle(error=OracleError("rejected")),
        config=config,
    )
    estimator.estimate(secret)

    content = log_file.read_text(encoding="utf-8")
    assert secret not in content
    record = json.loads(content.splitlines()[0])
    assert record["level"] == "WARNING"
    assert record["operation"] == "estimate"
    assert record["extra"]["error_type"] == "OracleError"


def test_oracle_result_is_logged_on_request(tmp_path, fake_oracle):
    log_file = tmp_path / "lab.log"
    config = LabConfig()
    config.global_settings.log_file = str(log_file)
    config.global_settings.log_json = True
    config.global_settings.debug = True
    config.estimator.log_oracle_result = True

    StrengthEstimator(oracle=fake_oracle, config=config).estimate("abc")

    records = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    assert any(r["message"] == "Oracle result" for r in records)
    assert all("abc" not in json.dumps(r.get("extra", {})) for r in records)
