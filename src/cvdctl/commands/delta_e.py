"""Command: perceptual distance between two colors."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cvdctl.commands._base import CvdCommand

if TYPE_CHECKING:
    from cvdctl.commands._context import AppContext


@click.command(
    "delta-e",
    cls=CvdCommand,
    examples="""\
  cvdctl delta-e '#ff0000' '#00ff00'
  cvdctl delta-e error=#d32f2f success=#388e3c""",
)
@click.argument("color_a")
@click.argument("color_b")
@click.pass_obj
def delta_e(app: AppContext, color_a: str, color_b: str) -> None:
    """Print the simple and hue-weighted OKLCH ΔE between two colors."""
    app.emit(app.palette.delta_e(color_a, color_b))
