"""Tests for the --examples flag on every command."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from cvdctl.cli import cli

EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    ([], ["cvdctl check", "--json score"]),
    (["simulate"], ["cvdctl simulate"]),
    (["delta-e"], ["cvdctl delta-e"]),
    (["check"], ["--adjacent", "--type protanopia"]),
    (["contrast"], ["--bg", "--text"]),
    (["score"], ["--weight tritanopia=0.5", "--report"]),
    (["suggest"], ["--target 8", "--max-suggestions 1"]),
    (["detect"], ["--threshold 8"]),
]


@pytest.mark.parametrize(
    ("args", "keywords"),
    EXAMPLES_COMMANDS,
    ids=[" ".join(args) or "root" for args, _ in EXAMPLES_COMMANDS],
)
def test_examples(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, [*args, "--examples"])
    assert result.exit_code == 0, result.output
    assert "Examples for 'cvdctl" in result.stdout
    for keyword in keywords:
        assert keyword in result.stdout


def test_examples_not_in_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["check", "--help"])
    assert "--examples" in result.stdout
    assert "cvdctl check --adjacent" not in result.stdout
