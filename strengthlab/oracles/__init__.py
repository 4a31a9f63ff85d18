"""
Guessing Oracles
=================

The oracle seam of the estimator and the default zxcvbn-backed adapter.
"""

from strengthlab.oracles.base import GuessingOracle, OracleError
from strengthlab.oracles.zxcvbn_oracle import (
    CRACK_SCENARIOS,
    ZxcvbnOracle,
)

__all__ = [
    "CRACK_SCENARIOS",
    "GuessingOracle",
    "OracleError",
    "ZxcvbnOracle",
]
