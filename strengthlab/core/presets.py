"""
Demonstration Presets
======================

Example passwords spanning weak to strong, used only to pre-fill the input
of a presentation layer. They carry no algorithmic meaning.
"""

from __future__ import annotations

from strengthlab.core.models import Preset


PRESETS: tuple[Preset, ...] = (
    Preset(label="Very weak", value="password123"),
    Preset(label="Weak (pattern)", value="Summer2025!"),
    Preset(label="Okay", value="D0gz4Life"),
    Preset(label="Strong", value="D0gz4Life!!-v2"),
    Preset(label="Passphrase", value="correct horse battery staple"),
    Preset(label="Random", value="7*JGiULWFJtydsK*VdpwtGJw"),
)
