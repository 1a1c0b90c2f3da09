"""Command: suggest color adjustments for failing pairs."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cvdctl.commands._base import CvdCommand

if TYPE_CHECKING:
    from cvdctl.commands._context import AppContext


@click.command(
    cls=CvdCommand,
    examples="""\
  cvdctl suggest red=#ff0000 green=#00ff00
  cvdctl suggest --target 8 --max-suggestions 1 '#d32f2f' '#388e3c'
  cvdctl suggest --adjacent --report s1=#e3f2fd s2=#bbdefb s3=#90caf9""",
)
@click.argument("colors", nargs=-1, required=True)
@click.option("--adjacent", is_flag=True, help="Only compare neighbors (ordered shade ramps).")
@click.option("--target", "target_delta_e", type=float, default=None, help="Target ΔE.")
@click.option(
    "--max-suggestions",
    type=click.IntRange(min=0),
    default=None,
    help="Suggestions kept per pair.",
)
@click.option("--report", is_flag=True, help="Print the plain-text improvement report.")
@click.pass_obj
def suggest(
    app: AppContext,
    colors: tuple[str, ...],
    adjacent: bool,
    target_delta_e: float | None,
    max_suggestions: int | None,
    report: bool,
) -> None:
    """Suggest lightness, hue and chroma tweaks that separate failing pairs."""
    app.emit(
        app.palette.suggest(
            list(colors),
            adjacent=adjacent,
            target_delta_e=target_delta_e,
            max_suggestions=max_suggestions,
            report=report,
        )
    )
