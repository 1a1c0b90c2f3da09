"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Owns logging setup, the lazily built service, and
result emission (stdout/stderr routing plus exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cvdctl.config.logging import configure_logging
from cvdctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from cvdctl.config.settings import CvdSettings
    from cvdctl.services.palette import PaletteService
    from cvdctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: CvdSettings) -> None:
        self.settings = settings
        self._palette: PaletteService | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def palette(self) -> PaletteService:
        """The palette service (built on first access)."""
        if self._palette is None:
            from cvdctl.services.palette import PaletteService

            self._palette = PaletteService(self.settings)
        return self._palette

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: stdout. Warnings go to stderr so piped output stays clean.
        * Failure: stderr, exit code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # JSON output already carries the warnings list.
            if not settings.json_output and not settings.quiet:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
