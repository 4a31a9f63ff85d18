"""
Strength Lab Console Interface
===============================

Rich-powered console abstraction providing a unified presentation layer
for every Strength Lab command.

The class wraps :class:`rich.console.Console` and adds convenience methods
for banners, section headers, info messages, and tables, all with
consistent styling.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

import datetime as _dt
from typing import Any, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

# ---------------------------------------------------------------------------
# Theme -- consistent palette across all Strength Lab output
# ---------------------------------------------------------------------------
_LAB_THEME = Theme(
    {
        "lab.banner": "bold bright_cyan",
        "lab.section": "bold bright_magenta",
        "lab.info": "bold bright_blue",
        "lab.dim": "dim white",
        "lab.tagline": "bold bright_green",
    }
)

# ---------------------------------------------------------------------------
# ASCII banner art
# ---------------------------------------------------------------------------
_BANNER_ART = r"""
[bright_cyan]
  ___ _                       _   _       _         _
 / __| |_ _ _ ___ _ _  __ _ _| |_| |_    | |   __ _| |__
 \__ \  _| '_/ -_) ' \/ _` |  _| ' \    | |__/ _` | '_ \
 |___/\__|_| \___|_||_\__, |\__|_||_|   |____\__,_|_.__/
                      |___/
[/bright_cyan]"""

_TAGLINE = "How long might it take a robot to guess your password?"


class LabConsole:
    """Unified console interface for Strength Lab commands.

    Usage::

        con = LabConsole()
        con.banner()
        con.section("Estimate")
        con.info("Nothing is stored between entries")
    """

    def __init__(self, *, quiet: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet: Suppress all output (useful in library / test mode).
        """
        self._console = Console(
            theme=_LAB_THEME,
            quiet=quiet,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Banner
    # ------------------------------------------------------------------ #

    def banner(self, version: str = "1.0.0") -> None:
        """Display the Strength Lab ASCII-art banner.

        Args:
            version: Version string shown beneath the logo.
        """
        now = _dt.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        subtitle = (
            f"[lab.tagline]{_TAGLINE}[/lab.tagline]\n"
            f"[lab.dim]Version: {version}  |  {now}[/lab.dim]"
        )
        panel = Panel(
            Align.center(Text.from_markup(_BANNER_ART + "\n" + subtitle)),
            border_style="bright_cyan",
            padding=(1, 2),
        )
        self._console.print(panel)

    # ------------------------------------------------------------------ #
    #  Section header
    # ------------------------------------------------------------------ #

    def section(self, title: str) -> None:
        """Print a prominent section header."""
        self._console.rule(
            f"  {title}  ",
            style="lab.section",
            characters="─",
        )
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Message helpers
    # ------------------------------------------------------------------ #

    def info(self, message: str) -> None:
        """Print an informational message."""
        self._console.print(
            f"[lab.info][ℹ] INFO:[/lab.info] {message}"
        )

    # ------------------------------------------------------------------ #
    #  Table display
    # ------------------------------------------------------------------ #

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        *,
        caption: str | None = None,
        styles: Sequence[str] | None = None,
    ) -> None:
        """Render a styled Rich table.

        Args:
            title:    Table title.
            columns:  Column header labels.
            rows:     Iterable of row tuples; each element is stringified
                      unless it is already a Rich renderable such as
                      :class:`rich.text.Text`.
            caption:  Optional footer caption.
            styles:   Optional per-column Rich style strings.
        """
        tbl = Table(
            title=title,
            caption=caption,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
            padding=(0, 1),
        )
        for idx, col_name in enumerate(columns):
            style = styles[idx] if styles and idx < len(styles) else ""
            tbl.add_column(col_name, style=style)

        for row in rows:
            tbl.add_row(*(
                cell if isinstance(cell, Text) else str(cell) for cell in row
            ))

        self._console.print(tbl)

