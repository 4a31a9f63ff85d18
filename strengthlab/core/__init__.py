"""
Strength Lab Core Module
=========================

Data models and fixed tables for the estimator. The estimator itself
lives in :mod:`strengthlab.core.engine`.
"""

from strengthlab.core.models import (
    Estimate,
    GuessingOracleResult,
    OracleFeedback,
    Preset,
    StrengthTier,
)
from strengthlab.core.presets import PRESETS

__all__ = [
    "Estimate",
    "GuessingOracleResult",
    "OracleFeedback",
    "PRESETS",
    "Preset",
    "StrengthTier",
]
