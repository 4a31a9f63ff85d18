"""
Strength Lab Console Output
============================

Rich-based terminal rendering of estimates: a colour-coded strength meter,
a details table, and the preset and tier overviews. This is the terminal
rendition of the presentation layer; it only reads :class:`Estimate` and
:class:`StrengthTier` objects and never shows a password in clear.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

from typing import Optional, Sequence

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import LabConsole
from strengthlab.analyzers.tiers import STRENGTH_TIERS, tier_for
from strengthlab.analyzers.variety import variety_label
from strengthlab.core.models import Estimate, Preset, StrengthTier


_METER_WIDTH = 40


def mask_password(password: str) -> str:
    """Show the first and last character with asterisks in between."""
    if len(password) <= 2:
        return "*" * len(password)
    return password[0] + "*" * (len(password) - 2) + password[-1]


class StrengthConsoleOutput:
    """Console output formatters for strength estimates.

    Usage::

        output = StrengthConsoleOutput(LabConsole())
        output.display_estimate(estimate, masked="p*********3")
    """

    def __init__(self, console: Optional[LabConsole] = None) -> None:
        self.console = console or LabConsole()
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Single estimate
    # ------------------------------------------------------------------ #

    def display_estimate(self, estimate: Estimate, masked: str = "") -> None:
        """Display one estimate with its strength meter.

        Args:
            estimate: The estimate to render.
            masked: Masked form of the password, shown in the details table.
        """
        tier = tier_for(estimate.coarse_score)

        self._rich.print(Panel(
            self.meter(estimate, tier),
            title="Strength Meter",
            border_style="cyan",
        ))

        tbl = Table(
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("Property", style="bold")
        tbl.add_column("Value")

        if masked:
            tbl.add_row("Password", Text(masked))
        tbl.add_row("Entropy", f"{estimate.entropy_bits} bits")
        tbl.add_row("Estimated crack time", estimate.crack_time_text)
        tbl.add_row("Character variety", variety_label(estimate.variety))
        tbl.add_row("Score", f"{estimate.coarse_score}/4")

        self._rich.print(tbl)
        self._rich.print(
            f"  [bright_cyan]•[/bright_cyan] {escape(estimate.suggestion)}"
        )

    @staticmethod
    def meter(estimate: Estimate, tier: StrengthTier) -> Text:
        """Build the one-line meter bar in the tier's colour."""
        filled = int(estimate.meter_percent / 100 * _METER_WIDTH)
        filled = max(0, min(_METER_WIDTH, filled))

        meter = Text()
        meter.append(f"{estimate.meter_percent:>3}%  ", style="bold")
        meter.append("[", style="dim")
        meter.append("█" * filled, style=tier.color)
        meter.append("░" * (_METER_WIDTH - filled), style="dim")
        meter.append("]", style="dim")
        meter.append(f"  {tier.label}", style=f"bold {tier.color}")
        return meter

    # ------------------------------------------------------------------ #
    #  Overviews
    # ------------------------------------------------------------------ #

    def display_presets(
        self, rows: Sequence[tuple[Preset, Estimate]]
    ) -> None:
        """Display every preset next to its estimate."""
        self.console.section("Presets")
        table_rows = []
        for preset, estimate in rows:
            tier = tier_for(estimate.coarse_score)
            table_rows.append((
                preset.label,
                preset.value,
                Text(tier.label, style=f"bold {tier.color}"),
                f"{estimate.entropy_bits} bits",
                f"{estimate.meter_percent}%",
                estimate.crack_time_text,
                variety_label(estimate.variety),
            ))
        self.console.table(
            "Preset Passwords",
            ["Preset", "Value", "Tier", "Entropy", "Meter", "Crack time", "Variety"],
            table_rows,
            styles=["bold", "", "", "", "", "", ""],
        )

    def display_tiers(self) -> None:
        """Display the fixed tier table."""
        self.console.section("Strength Tiers")
        self.console.table(
            "Strength Tiers",
            ["Score", "Label", "Colour"],
            [
                (tier.score, Text(tier.label, style=f"bold {tier.color}"), tier.color)
                for tier in STRENGTH_TIERS
            ],
        )
