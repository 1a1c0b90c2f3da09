"""Tests for the delta-e command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from cvdctl.cli import cli


@pytest.mark.usefixtures("isolated_cwd")
class TestDeltaECommand:
    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "delta-e", "k=#000", "w=#fff"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        assert data["pair"] == ["k", "w"]
        assert data["simple"] == pytest.approx(100.0, abs=0.01)

    def test_duplicate_name(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "delta-e", "x=#000", "x=#fff"])
        assert result.exit_code == 1
        payload = json.loads(result.stderr)
        assert payload["error"]["code"] == "DUPLICATE_NAME"
