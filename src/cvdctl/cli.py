"""Root CLI group for cvdctl with global flags and command registration."""

from __future__ import annotations

import click

from cvdctl import __version__
from cvdctl.commands import register_commands
from cvdctl.commands._base import CvdGroup
from cvdctl.commands._context import AppContext
from cvdctl.config.settings import CvdSettings


@click.group(
    "cvdctl",
    cls=CvdGroup,
    invoke_without_command=True,
    examples="""\
  cvdctl check red=#e53935 green=#43a047
  cvdctl --json score '#f00' '#0f0' '#00f'
  cvdctl -c ./cvdctl.toml suggest --report '#d32f2f' '#388e3c'""",
)
@click.version_option(version=__version__, prog_name="cvdctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logs.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """cvdctl — color vision deficiency checks for palettes."""
    ctx.ensure_object(dict)
    settings = CvdSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
