"""Tests for the detect command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from cvdctl.cli import cli


@pytest.mark.usefixtures("isolated_cwd")
class TestDetectCommand:
    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "detect", "#000", "#fff"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        assert data["count"] == 0
        assert data["threshold"] == 5.0

    def test_threshold(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "detect", "--threshold", "150", "#000", "#fff"])
        data = json.loads(result.stdout)["data"]
        assert data["conflicts"] == [0]

    def test_human(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["detect", "#777777", "#787878"])
        assert "No CVD-only confusions found." in result.stdout
