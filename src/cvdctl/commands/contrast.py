"""Command: validate text colors against background colors."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cvdctl.commands._base import CvdCommand, threshold_options, to_vision_types

if TYPE_CHECKING:
    from cvdctl.commands._context import AppContext


@click.command(
    cls=CvdCommand,
    examples="""\
  cvdctl contrast --bg surface=#ffffff --text body=#212121 --text muted=#9e9e9e
  cvdctl contrast --bg '#000' --bg '#1e1e1e' --text '#ff5555' --type tritanopia""",
)
@click.option("--bg", "backgrounds", multiple=True, required=True, help="Background color.")
@click.option("--text", "texts", multiple=True, required=True, help="Text color.")
@threshold_options
@click.pass_obj
def contrast(
    app: AppContext,
    backgrounds: tuple[str, ...],
    texts: tuple[str, ...],
    threshold: float | None,
    warning_threshold: float | None,
    vision_types: tuple[str, ...],
) -> None:
    """Check every background against every text color under CVD."""
    app.emit(
        app.palette.check_background_text(
            list(backgrounds),
            list(texts),
            threshold=threshold,
            warning_threshold=warning_threshold,
            vision_types=to_vision_types(vision_types),
        )
    )
