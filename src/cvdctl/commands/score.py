"""Command: weighted CVD accessibility score and grade."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cvdctl.commands._base import CvdCommand

if TYPE_CHECKING:
    from cvdctl.commands._context import AppContext


@click.command(
    cls=CvdCommand,
    examples="""\
  cvdctl score red=#e53935 green=#43a047 blue=#1e88e5
  cvdctl score --weight tritanopia=0.5 --weight achromatopsia=0 '#f00' '#0f0'
  cvdctl score --report primary=#0055ff accent=#ff9800""",
)
@click.argument("colors", nargs=-1, required=True)
@click.option(
    "--weight",
    "weights",
    multiple=True,
    metavar="TYPE=W",
    help="Override one vision type's weight (repeatable).",
)
@click.option("--report", is_flag=True, help="Print the plain-text score report.")
@click.pass_obj
def score(app: AppContext, colors: tuple[str, ...], weights: tuple[str, ...], report: bool) -> None:
    """Score COLORS from 0 to 100 across all four CVD types."""
    app.emit(app.palette.score(list(colors), weights=list(weights), report=report))
