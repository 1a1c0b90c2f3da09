"""Subcommand modules for cvdctl.

Provides register_commands(), which imports each command module only
when the root group is built.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register every standalone command on the root CLI group."""
    from cvdctl.commands.check import check
    from cvdctl.commands.contrast import contrast
    from cvdctl.commands.delta_e import delta_e
    from cvdctl.commands.detect import detect
    from cvdctl.commands.score import score
    from cvdctl.commands.simulate import simulate
    from cvdctl.commands.suggest import suggest

    cli.add_command(simulate)
    cli.add_command(delta_e)
    cli.add_command(check)
    cli.add_command(contrast)
    cli.add_command(score)
    cli.add_command(suggest)
    cli.add_command(detect)
