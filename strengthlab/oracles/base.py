"""
Guessing Oracle Interface
==========================

The estimator depends on exactly one external capability: something that,
given a password, estimates how many guesses an attacker would need. Any
object with an ``estimate_guessability`` method returning a
:class:`~strengthlab.core.models.GuessingOracleResult` can be injected.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from strengthlab.core.models import GuessingOracleResult


class OracleError(RuntimeError):
    """Raised when an oracle cannot produce a result for a password."""


@runtime_checkable
class GuessingOracle(Protocol):
    """Guessing-resistance estimator consumed by the strength estimator."""

    def estimate_guessability(self, password: str) -> GuessingOracleResult:
        ...
