"""
Strength Lab Shared Module
==========================

Common utilities and configuration management shared across all
Strength Lab components.
"""

from shared.config import LabConfig, get_config

__all__ = ["LabConfig", "get_config"]
