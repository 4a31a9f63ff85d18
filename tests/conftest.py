"""Shared fixtures for the Strength Lab test suite."""

from __future__ import annotations

from typing import Optional

import pytest

from strengthlab.core.models import GuessingOracleResult, OracleFeedback


class FakeOracle:
    """In-memory oracle returning a canned result and counting calls."""

    def __init__(
        self,
        result: Optional[GuessingOracleResult] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self.result = result
        self.error = error
        self.calls = 0

    def estimate_guessability(self, password: str) -> GuessingOracleResult:
        self.calls += 1
        if self.error is not None:
            raise self.error
        assert self.result is not None
        return self.result


def make_result(
    guesses_log10: float = 10.0,
    score: int = 2,
    warning: str = "",
    suggestions: Optional[list[str]] = None,
    seconds: float = 120.0,
    display: str = "2 minutes",
) -> GuessingOracleResult:
    return GuessingOracleResult(
        guesses_log10=guesses_log10,
        crack_seconds_by_scenario={
            "online_throttling_100_per_hour": seconds * 360_000,
            "offline_slow_hashing_1e4_per_second": seconds,
            "offline_fast_hashing_1e10_per_second": seconds / 1e6,
        },
        crack_display_by_scenario={
            "online_throttling_100_per_hour": "centuries",
            "offline_slow_hashing_1e4_per_second": display,
            "offline_fast_hashing_1e10_per_second": "less than a second",
        },
        coarse_score=score,
        feedback=OracleFeedback(warning=warning, suggestions=suggestions or []),
    )


@pytest.fixture
def fake_oracle() -> FakeOracle:
    return FakeOracle(make_result())
