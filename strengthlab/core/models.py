"""
Strength Lab Core Data Models
==============================

Pydantic models for the strength estimator: the oracle's raw answer, the
derived :class:`Estimate`, the display tiers, and the demonstration presets.

None of these models carries the password itself. An :class:`Estimate` is
safe to serialise, log, or hand to a renderer.

References:
    - Wheeler, D. L. (2016). zxcvbn: Low-Budget Password Strength
      Estimation. USENIX Security.
    - Pydantic v2 documentation. https://docs.pydantic.dev/latest/
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


# ===================================================================== #
#  Oracle Models
# ===================================================================== #


class OracleFeedback(BaseModel):
    """Free-text feedback from the guessing oracle.

    Attributes:
        warning: Short explanation of the main weakness, or empty.
        suggestions: Ordered improvement hints, possibly empty.
    """

    model_config = ConfigDict(frozen=True)

    warning: str = ""
    suggestions: list[str] = Field(default_factory=list)


class GuessingOracleResult(BaseModel):
    """Read-only answer of a guessing-resistance oracle.

    Attributes:
        guesses_log10: Base-10 logarithm of the estimated guess count.
        crack_seconds_by_scenario: Seconds to crack per attack scenario.
            Values may be non-finite for very large guess counts.
        crack_display_by_scenario: Human-formatted durations, keyed like
            *crack_seconds_by_scenario*.
        coarse_score: The oracle's own 0-4 bucketed strength judgment.
        feedback: Warning and suggestions.
    """

    model_config = ConfigDict(frozen=True)

    guesses_log10: float = Field(..., ge=0.0, allow_inf_nan=False)
    crack_seconds_by_scenario: dict[str, float] = Field(default_factory=dict)
    crack_display_by_scenario: dict[str, str] = Field(default_factory=dict)
    coarse_score: int = Field(..., ge=0, le=4)
    feedback: OracleFeedback = Field(default_factory=OracleFeedback)


# ===================================================================== #
#  Estimate
# ===================================================================== #


class Estimate(BaseModel):
    """Derived password strength estimate, built fresh for every call.

    Attributes:
        entropy_bits: Approximate bit strength, ``round(guesses_log10 * log2(10))``.
        crack_seconds: Seconds to crack in the fixed display scenario.
        crack_time_text: Human-readable form of *crack_seconds*.
        variety: Number of character classes present (0-4).
        coarse_score: Oracle score forwarded verbatim (0-4).
        meter_percent: Non-linear visual fill percentage (0-100).
        suggestion: The single most useful piece of feedback.
    """

    model_config = ConfigDict(frozen=True)

    entropy_bits: int = Field(0, ge=0)
    crack_seconds: float = 0.0
    crack_time_text: str = ""
    variety: int = Field(0, ge=0, le=4)
    coarse_score: int = Field(0, ge=0, le=4)
    meter_percent: int = Field(0, ge=0, le=100)
    suggestion: str = ""


# ===================================================================== #
#  Display Tables
# ===================================================================== #


class StrengthTier(BaseModel):
    """One entry of the fixed, ordered strength tier table.

    Attributes:
        score: Coarse score this tier is selected by.
        label: Display label (e.g. ``"Strong"``).
        color: Hex colour token used by renderers.
    """

    model_config = ConfigDict(frozen=True)

    score: int
    label: str
    color: str


class Preset(BaseModel):
    """Example password used to pre-fill the input for demonstration."""

    model_config = ConfigDict(frozen=True)

    label: str
    value: str
