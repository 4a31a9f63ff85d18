"""
Strength Lab CLI
=================

Click-based command-line interface for Strength Lab. Each subcommand
builds fresh estimates through :class:`StrengthEstimator` and renders them
with Rich, or prints them as JSON.

Usage::

    python -m strengthlab check "MyP@ssw0rd!"
    python -m strengthlab check                 # prompts with hidden input
    python -m strengthlab presets
    python -m strengthlab tiers
    python -m strengthlab interactive
    python -m strengthlab -o json check "correct horse battery staple"

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import json
from typing import Any, Optional

import click

from shared.config import LabConfig
from shared.console import LabConsole

from strengthlab import __version__
from strengthlab.analyzers.tiers import STRENGTH_TIERS, tier_for
from strengthlab.analyzers.variety import variety_label
from strengthlab.core.engine import StrengthEstimator
from strengthlab.core.models import Estimate
from strengthlab.core.presets import PRESETS
from strengthlab.output.console import StrengthConsoleOutput, mask_password


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a Strength Lab configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json"]),
    default="console",
    help="Output format.",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress the banner.",
)
@click.version_option(__version__, prog_name="strengthlab")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: str,
    quiet: bool,
) -> None:
    """Strength Lab -- how long might it take a robot to guess it?

    Estimate password strength, crack time, and character variety.
    """
    ctx.ensure_object(dict)

    lab_config = LabConfig.load(config) if config else LabConfig()
    ctx.obj["config"] = lab_config
    ctx.obj["output_format"] = output

    console = LabConsole()
    ctx.obj["console"] = console
    ctx.obj["estimator"] = StrengthEstimator(config=lab_config)
    ctx.obj["display"] = StrengthConsoleOutput(console)

    if not quiet and output == "console":
        console.banner(version=__version__)


def _estimate_payload(estimate: Estimate) -> dict[str, Any]:
    """JSON-ready view of an estimate plus its tier; never the password."""
    tier = tier_for(estimate.coarse_score)
    return {
        "estimate": estimate.model_dump(mode="json"),
        "tier": tier.model_dump(),
        "variety_label": variety_label(estimate.variety),
    }


def _echo_json(payload: Any) -> None:
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False))


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@click.argument("password", required=False)
@click.pass_context
def check(ctx: click.Context, password: Optional[str]) -> None:
    """Estimate the strength of PASSWORD.

    When PASSWORD is omitted it is read with hidden input, which keeps it
    out of the shell history.
    """
    if password is None:
        password = click.prompt(
            "Password", hide_input=True, default="", show_default=False
        )

    estimator: StrengthEstimator = ctx.obj["estimator"]
    estimate = estimator.estimate(password)

    if ctx.obj["output_format"] == "json":
        _echo_json(_estimate_payload(estimate))
        return

    display: StrengthConsoleOutput = ctx.obj["display"]
    display.console.section("Password Strength")
    display.display_estimate(estimate, masked=mask_password(password))


@cli.command()
@click.pass_context
def presets(ctx: click.Context) -> None:
    """Estimate every demonstration preset, weakest to strongest."""
    estimator: StrengthEstimator = ctx.obj["estimator"]
    rows = [(preset, estimator.estimate(preset.value)) for preset in PRESETS]

    if ctx.obj["output_format"] == "json":
        _echo_json([
            {"label": preset.label, "value": preset.value, **_estimate_payload(estimate)}
            for preset, estimate in rows
        ])
        return

    display: StrengthConsoleOutput = ctx.obj["display"]
    display.display_presets(rows)


@cli.command()
@click.pass_context
def tiers(ctx: click.Context) -> None:
    """Show the strength tier table."""
    if ctx.obj["output_format"] == "json":
        _echo_json([tier.model_dump() for tier in STRENGTH_TIERS])
        return

    display: StrengthConsoleOutput = ctx.obj["display"]
    display.display_tiers()


@cli.command()
@click.pass_context
def interactive(ctx: click.Context) -> None:
    """Estimate passwords one after another until an empty entry.

    Each entry gets a fresh estimate; nothing from earlier entries is kept.
    """
    estimator: StrengthEstimator = ctx.obj["estimator"]
    display: StrengthConsoleOutput = ctx.obj["display"]
    as_json = ctx.obj["output_format"] == "json"

    if not as_json:
        display.console.info(
            "Input is hidden. Each entry is estimated fresh and nothing is stored."
        )

    while True:
        try:
            password = click.prompt(
                "Password (empty to quit)",
                hide_input=True,
                default="",
                show_default=False,
            )
        except click.Abort:
            break
        if not password:
            break

        estimate = estimator.estimate(password)
        if as_json:
            click.echo(json.dumps(_estimate_payload(estimate), ensure_ascii=False))
        else:
            display.display_estimate(estimate, masked=mask_password(password))


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the Strength Lab CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
