"""Command: show one color under each type of color vision deficiency."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cvdctl.commands._base import CvdCommand

if TYPE_CHECKING:
    from cvdctl.commands._context import AppContext


@click.command(
    cls=CvdCommand,
    examples="""\
  cvdctl simulate '#ff0000'
  cvdctl simulate brand=#0055ff
  cvdctl --json simulate 3a7""",
)
@click.argument("color")
@click.pass_obj
def simulate(app: AppContext, color: str) -> None:
    """Simulate COLOR (NAME=HEX or HEX) under each CVD type."""
    app.emit(app.palette.simulate(color))
