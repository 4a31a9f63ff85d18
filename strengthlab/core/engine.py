"""
Strength Estimation Engine
===========================

Central entry point of Strength Lab. :class:`StrengthEstimator` calls the
guessing oracle once per password and derives every display figure from
the oracle's answer plus the raw password:

1. character variety (four classes),
2. entropy bits, ``round(guesses_log10 * log2(10))`` floored at 0,
3. crack time for one fixed attack scenario,
4. a single suggestion (oracle warning, else first oracle suggestion,
   else a fixed compliment),
5. the coarse score, forwarded verbatim,
6. the non-linear meter percentage.

Every call is a fresh, independent computation. Nothing keyed on the
password is cached, and the password is never logged.

Architecture follows the Facade pattern (Gamma et al., 1994), providing
a single ``estimate`` call over the oracle and the analyzer helpers.

References:
    - Gamma, E., Helm, R., Johnson, R., & Vlissides, J. (1994).
      Design Patterns: Elements of Reusable Object-Oriented Software.
      Addison-Wesley.
    - Wheeler, D. L. (2016). zxcvbn: Low-Budget Password Strength
      Estimation. USENIX Security.
"""

from __future__ import annotations

import math
from typing import Optional

from shared.config import LabConfig
from shared.logger import LabLogger
from shared.math_utils import LOG2_10, clamp, round_half_away_from_zero

from strengthlab.analyzers.duration import format_duration
from strengthlab.analyzers.meter import meter_percent
from strengthlab.analyzers.variety import character_variety
from strengthlab.core.models import Estimate, GuessingOracleResult
from strengthlab.oracles.base import GuessingOracle
from strengthlab.oracles.zxcvbn_oracle import ZxcvbnOracle


# Offline attack against a slow hash at moderate hardware speed
CRACK_SCENARIO: str = "offline_slow_hashing_1e4_per_second"

EMPTY_PROMPT: str = "Type a password to see how strong it is!"
STRONG_FALLBACK: str = "Nice job! This looks strong."


class StrengthEstimator:
    """Turns a password into an :class:`Estimate`.

    Usage::

        estimator = StrengthEstimator()
        result = estimator.estimate("correct horse battery staple")
        print(result.entropy_bits, result.meter_percent, result.suggestion)

    Attributes:
        config: Strength Lab configuration instance.
        oracle: The guessing oracle consulted for non-empty passwords.
        logger: Logger for the estimator.
    """

    def __init__(
        self,
        oracle: Optional[GuessingOracle] = None,
        config: Optional[LabConfig] = None,
    ) -> None:
        self.config = config or LabConfig()
        self.logger = LabLogger.from_config("engine", self.config)
        self.oracle: GuessingOracle = oracle or ZxcvbnOracle(
            user_inputs=self.config.estimator.user_inputs,
            max_length=self.config.estimator.max_length,
        )

    def estimate(self, password: str) -> Estimate:
        """Estimate the strength of *password*.

        Never raises. The empty password, and any password the oracle
        fails on, yield the zero estimate with the typing prompt.

        Args:
            password: Candidate password; any string.

        Returns:
            A new, immutable :class:`Estimate`.
        """
        if not password:
            return empty_estimate()

        with self.logger.operation("estimate"):
            try:
                result = self.oracle.estimate_guessability(password)
                if self.config.estimator.log_oracle_result:
                    self.logger.debug(
                        "Oracle result",
                        guesses_log10=result.guesses_log10,
                        coarse_score=result.coarse_score,
                        has_warning=bool(result.feedback.warning),
                        suggestion_count=len(result.feedback.suggestions),
                    )

                crack_seconds, crack_time_text = self._crack_time(result)
                return Estimate(
                    entropy_bits=entropy_bits(result.guesses_log10),
                    crack_seconds=crack_seconds,
                    crack_time_text=crack_time_text,
                    variety=character_variety(password),
                    coarse_score=result.coarse_score,
                    meter_percent=meter_percent(result.guesses_log10, has_input=True),
                    suggestion=self._suggestion(result),
                )
            except Exception as exc:
                self.logger.warning(
                    "Estimation failed; returning the empty estimate",
                    error_type=type(exc).__name__,
                    length=len(password),
                )
                return empty_estimate()

    # ------------------------------------------------------------------ #
    #  Helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _crack_time(result: GuessingOracleResult) -> tuple[float, str]:
        """Pick the fixed scenario's seconds and display text.

        The oracle's text is used verbatim unless it is missing or is a bare
        non-finite number such as ``"Infinity"``, in which case it is
        formatted here.
        """
        seconds = result.crack_seconds_by_scenario.get(CRACK_SCENARIO, 0.0)
        text = result.crack_display_by_scenario.get(CRACK_SCENARIO, "")
        if not _is_readable_duration(text):
            text = format_duration(seconds)
        return seconds, text

    @staticmethod
    def _suggestion(result: GuessingOracleResult) -> str:
        feedback = result.feedback
        if feedback.warning:
            return feedback.warning
        if feedback.suggestions and feedback.suggestions[0]:
            return feedback.suggestions[0]
        return STRONG_FALLBACK


# ===================================================================== #
#  Module-level helpers
# ===================================================================== #


# Ceiling for the entropy conversion; far above any real guess count
MAX_GUESSES_LOG10: float = 1000.0


def entropy_bits(guesses_log10: float) -> int:
    """Convert a base-10 guess magnitude into whole entropy bits (>= 0)."""
    magnitude = clamp(guesses_log10, 0.0, MAX_GUESSES_LOG10)
    return max(0, int(round_half_away_from_zero(magnitude * LOG2_10)))


def _is_readable_duration(text: str) -> bool:
    """False for empty text and bare numbers like ``"inf"`` or ``"NaN"``."""
    if not text.strip():
        return False
    try:
        return math.isfinite(float(text))
    except ValueError:
        return True


def empty_estimate() -> Estimate:
    """The estimate shown before anything has been typed."""
    return Estimate(
        entropy_bits=0,
        crack_seconds=0.0,
        crack_time_text=format_duration(0.0),
        variety=0,
        coarse_score=0,
        meter_percent=0,
        suggestion=EMPTY_PROMPT,
    )


_default_estimator: Optional[StrengthEstimator] = None


def estimate(password: str) -> Estimate:
    """Estimate *password* with a shared default :class:`StrengthEstimator`.

    The shared estimator only holds configuration and the oracle; it keeps
    no per-password state.
    """
    global _default_estimator
    if _default_estimator is None:
        _default_estimator = StrengthEstimator()
    return _default_estimator.estimate(password)
