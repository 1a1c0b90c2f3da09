"""Tests for the score command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from cvdctl.cli import cli


@pytest.mark.usefixtures("isolated_cwd")
class TestScoreCommand:
    def test_human(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["score", "#000", "#fff"])
        assert result.exit_code == 0
        assert result.stdout.startswith("Score: 100.0/100  Grade: A")

    def test_weights(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "score", "--weight", "tritanopia=0.5", "#000", "#fff"]
        )
        assert json.loads(result.stdout)["data"]["weights"]["tritanopia"] == 0.5

    def test_bad_weight(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["score", "--weight", "tritanopia=-2", "#000", "#fff"])
        assert result.exit_code == 1
        assert "ERROR  score" in result.stderr

    def test_report(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["score", "--report", "a=#777777", "b=#787878"])
        assert "=== CVD Accessibility Score Report ===" in result.stdout
        assert "WARNING: Palette grade F" in result.stderr

    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--quiet", "score", "#000", "#fff"])
        assert result.stdout.strip() == "100.0 A"
