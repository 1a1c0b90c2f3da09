"""Tests for the root CLI group."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from cvdctl import __version__
from cvdctl.cli import cli

COMMANDS = ["simulate", "delta-e", "check", "contrast", "score", "suggest", "detect"]


@pytest.mark.usefixtures("isolated_cwd")
class TestRootGroup:
    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert f"cvdctl, version {__version__}" in result.stdout

    def test_no_subcommand_prints_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [])
        assert result.exit_code == 0
        for name in COMMANDS:
            assert name in result.stdout

    @pytest.mark.parametrize("name", COMMANDS)
    def test_subcommand_help(self, cli_runner: CliRunner, name: str) -> None:
        result = cli_runner.invoke(cli, [name, "--help"])
        assert result.exit_code == 0
        assert "Usage:" in result.stdout

    def test_global_flags_accepted(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-v", "--log-json", "simulate", "#fff"])
        assert result.exit_code == 0

    def test_missing_config_file_falls_back(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-c", "does-not-exist.toml", "simulate", "#fff"])
        assert result.exit_code == 0

    def test_invalid_config_file(self, cli_runner: CliRunner, isolated_cwd) -> None:
        (isolated_cwd / "cvdctl.toml").write_text("not = [valid\n")
        result = cli_runner.invoke(cli, ["simulate", "#fff"])
        assert result.exit_code == 1
        assert "Invalid TOML" in result.stderr
