"""
Strength Lab Analyzers
=======================

Pure helpers that turn raw oracle figures and the password into display
values. Each function is total over its documented input.
"""

from strengthlab.analyzers.duration import format_duration
from strengthlab.analyzers.meter import (
    METER_GAMMA,
    METER_MAX_LOG10,
    METER_MIN_LOG10,
    meter_percent,
)
from strengthlab.analyzers.tiers import STRENGTH_TIERS, tier_for
from strengthlab.analyzers.variety import character_variety, variety_label

__all__ = [
    "METER_GAMMA",
    "METER_MAX_LOG10",
    "METER_MIN_LOG10",
    "STRENGTH_TIERS",
    "character_variety",
    "format_duration",
    "meter_percent",
    "tier_for",
    "variety_label",
]
