"""
Strength Tier Classifier
=========================

Maps the oracle's coarse 0-4 score onto the fixed, ordered display tiers.
Lookup is by exact score; anything unknown falls back to the weakest tier
so the classifier is total.
"""

from __future__ import annotations

from strengthlab.core.models import StrengthTier


STRENGTH_TIERS: tuple[StrengthTier, ...] = (
    StrengthTier(score=0, label="Very weak", color="#ef4444"),
    StrengthTier(score=1, label="Weak", color="#f97316"),
    StrengthTier(score=2, label="Okay", color="#f59e0b"),
    StrengthTier(score=3, label="Strong", color="#10b981"),
    StrengthTier(score=4, label="Excellent", color="#14b8a6"),
)


def tier_for(coarse_score: int) -> StrengthTier:
    """Return the tier whose score equals *coarse_score*.

    Args:
        coarse_score: Oracle score, documented range 0-4.

    Returns:
        The matching :class:`StrengthTier`, or the weakest tier when no
        entry matches.
    """
    for tier in STRENGTH_TIERS:
        if tier.score == coarse_score:
            return tier
    return STRENGTH_TIERS[0]
