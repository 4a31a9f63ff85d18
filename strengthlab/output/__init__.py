"""
Strength Lab Output
====================

Console renderers for estimates, presets, and tiers.
"""

from strengthlab.output.console import StrengthConsoleOutput, mask_password

__all__ = ["StrengthConsoleOutput", "mask_password"]
