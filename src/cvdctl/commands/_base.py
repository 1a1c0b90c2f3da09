"""Click base classes and shared options.

CvdCommand and CvdGroup take an ``examples`` string; passing
``--examples`` prints it and exits, so ``--help`` stays short.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import click

from cvdctl.domain.cvd import CVDType

VISION_TYPE_CHOICE = click.Choice([t.value for t in CVDType], case_sensitive=False)


def _attach_examples(cmd: click.Command, examples: str) -> None:
    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class CvdCommand(click.Command):
    """Command with an optional ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _attach_examples(self, examples)


class CvdGroup(click.Group):
    """Group whose subcommands default to :class:`CvdCommand`."""

    command_class = CvdCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _attach_examples(self, examples)


def threshold_options[F: Callable[..., Any]](func: F) -> F:
    """``--threshold``, ``--warning-threshold`` and repeatable ``--type``."""
    func = click.option(
        "--type",
        "vision_types",
        multiple=True,
        type=VISION_TYPE_CHOICE,
        help="Limit checks to a CVD type (repeatable). Default: all four.",
    )(func)
    func = click.option(
        "--warning-threshold",
        type=float,
        default=None,
        help="ΔE below which a pair is a warning.",
    )(func)
    func = click.option(
        "--threshold",
        type=float,
        default=None,
        help="ΔE below which a pair is an error.",
    )(func)
    return func


def to_vision_types(values: tuple[str, ...]) -> list[CVDType] | None:
    """Convert ``--type`` values; an empty tuple means "use config"."""
    return [CVDType(v.lower()) for v in values] or None
