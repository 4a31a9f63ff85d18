"""
Strength Lab -- Password Strength Estimation
=============================================

Estimates how resistant a candidate password is to automated guessing and
renders the estimate as an entropy figure, a meter percentage, a strength
tier, a character-variety label, a crack-time duration, and one actionable
suggestion.

Modules:
    - strengthlab.core.engine: The estimator entry point
    - strengthlab.core.models: Pydantic data models
    - strengthlab.analyzers: Meter curve, tiers, variety and durations
    - strengthlab.oracles: Guessing-resistance oracle adapters
    - strengthlab.output: Console output
    - strengthlab.cli: Click-based command-line interface

References:
    - Wheeler, D. L. (2016). zxcvbn: Low-Budget Password Strength
      Estimation. USENIX Security.
    - NIST SP 800-63B (2017). Digital Identity Guidelines.
"""

__version__ = "1.0.0"
__tool_name__ = "strengthlab"
