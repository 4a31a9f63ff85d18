"""
zxcvbn Guessing Oracle
=======================

Adapter that runs the ``zxcvbn`` estimator and reshapes its answer into a
:class:`~strengthlab.core.models.GuessingOracleResult`.

zxcvbn matches the password against frequency-ranked dictionaries,
keyboard spatial patterns, repeats, sequences, dates and l33t
substitutions, then searches for the least-guesses decomposition. Its
crack times assume four attack scenarios:

- ``online_throttling_100_per_hour``
- ``online_no_throttling_10_per_second``
- ``offline_slow_hashing_1e4_per_second`` (bcrypt/scrypt class hashes)
- ``offline_fast_hashing_1e10_per_second`` (unsalted fast hashes on GPUs)

The raw zxcvbn dictionary echoes the password under ``"password"``; it is
consumed here and never returned or logged.

References:
    - Wheeler, D. L. (2016). zxcvbn: Low-Budget Password Strength
      Estimation. USENIX Security.
    - https://github.com/dwolfhub/zxcvbn-python
"""

from __future__ import annotations

from typing import Any, Iterable

from pydantic import ValidationError
from zxcvbn import zxcvbn

from strengthlab.core.models import GuessingOracleResult, OracleFeedback
from strengthlab.oracles.base import OracleError


CRACK_SCENARIOS: tuple[str, ...] = (
    "online_throttling_100_per_hour",
    "online_no_throttling_10_per_second",
    "offline_slow_hashing_1e4_per_second",
    "offline_fast_hashing_1e10_per_second",
)


class ZxcvbnOracle:
    """Guessing oracle backed by the ``zxcvbn`` package.

    Usage::

        oracle = ZxcvbnOracle(user_inputs=["alice", "example.com"])
        result = oracle.estimate_guessability("alice2024!")
        print(result.coarse_score, result.guesses_log10)

    Args:
        user_inputs: Words specific to the user or site that zxcvbn should
            treat as cheap to guess.
        max_length: Longest prefix handed to zxcvbn. Longer passwords are
            estimated on their first *max_length* characters, which keeps
            the guess count a lower bound and the matcher fast.
    """

    def __init__(
        self,
        user_inputs: Iterable[str] = (),
        max_length: int = 72,
    ) -> None:
        self._user_inputs = [str(word) for word in user_inputs]
        self._max_length = max_length

    def estimate_guessability(self, password: str) -> GuessingOracleResult:
        """Run zxcvbn on *password*, truncated to ``max_length``.

        Args:
            password: Password to estimate.

        Returns:
            The reshaped zxcvbn answer.

        Raises:
            OracleError: If zxcvbn rejects the input or returns a result
                that does not fit :class:`GuessingOracleResult`.
        """
        try:
            raw = zxcvbn(
                password[: self._max_length],
                user_inputs=self._user_inputs,
                max_length=self._max_length,
            )
        except ValueError as exc:
            raise OracleError(f"zxcvbn rejected the password: {exc}") from exc

        try:
            return self._to_result(raw)
        except (KeyError, TypeError, ValueError, ValidationError) as exc:
            raise OracleError(
                f"Unexpected zxcvbn result shape: {type(exc).__name__}"
            ) from exc

    @staticmethod
    def _to_result(raw: dict[str, Any]) -> GuessingOracleResult:
        """Convert the zxcvbn dictionary, dropping the echoed password.

        zxcvbn reports crack seconds as :class:`decimal.Decimal`; they are
        converted to ``float`` (overflowing to ``inf`` for huge values).
        """
        seconds = {
            name: float(value)
            for name, value in raw["crack_times_seconds"].items()
        }
        display = {
            name: str(value)
            for name, value in raw["crack_times_display"].items()
        }
        feedback = raw.get("feedback") or {}

        return GuessingOracleResult(
            guesses_log10=max(0.0, float(raw["guesses_log10"])),
            crack_seconds_by_scenario=seconds,
            crack_display_by_scenario=display,
            coarse_score=int(raw["score"]),
            feedback=OracleFeedback(
                warning=feedback.get("warning") or "",
                suggestions=list(feedback.get("suggestions") or []),
            ),
        )
