"""Command: find colors that only collide under CVD."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cvdctl.commands._base import CvdCommand

if TYPE_CHECKING:
    from cvdctl.commands._context import AppContext


@click.command(
    cls=CvdCommand,
    examples="""\
  cvdctl detect '#ff0000' '#00ff00' '#0000ff'
  cvdctl detect --threshold 8 series-1=#1f77b4 series-2=#ff7f0e series-3=#2ca02c""",
)
@click.argument("colors", nargs=-1, required=True)
@click.option("--threshold", type=float, default=None, help="ΔE below which colors collide.")
@click.pass_obj
def detect(app: AppContext, colors: tuple[str, ...], threshold: float | None) -> None:
    """List pairs that differ for normal vision but merge under a CVD type."""
    app.emit(app.palette.detect(list(colors), threshold=threshold))
