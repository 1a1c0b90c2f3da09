"""Command: validate palette distinguishability under CVD."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cvdctl.commands._base import CvdCommand, threshold_options, to_vision_types

if TYPE_CHECKING:
    from cvdctl.commands._context import AppContext


@click.command(
    cls=CvdCommand,
    examples="""\
  cvdctl check error=#d32f2f success=#388e3c info=#1976d2
  cvdctl check --adjacent blue-100=#bbdefb blue-300=#64b5f6 blue-500=#2196f3
  cvdctl check --threshold 4 --type protanopia --type deuteranopia red=#f00 green=#0f0
  cvdctl --json check '#ff0000' '#00ff00'""",
)
@click.argument("colors", nargs=-1, required=True)
@click.option("--adjacent", is_flag=True, help="Only compare neighbors (ordered shade ramps).")
@threshold_options
@click.pass_obj
def check(
    app: AppContext,
    colors: tuple[str, ...],
    adjacent: bool,
    threshold: float | None,
    warning_threshold: float | None,
    vision_types: tuple[str, ...],
) -> None:
    """Check that every pair of COLORS stays distinguishable under CVD."""
    app.emit(
        app.palette.check(
            list(colors),
            adjacent=adjacent,
            threshold=threshold,
            warning_threshold=warning_threshold,
            vision_types=to_vision_types(vision_types),
        )
    )
