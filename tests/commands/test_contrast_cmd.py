"""Tests for the contrast command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from cvdctl.cli import cli


@pytest.mark.usefixtures("isolated_cwd")
class TestContrastCommand:
    def test_cross_product(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            [
                "--json", "contrast", "--bg", "page=#fff",
                "--text", "body=#fefefe", "--text", "ink=#000",
            ],
        )
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["op"] == "check_background_text"
        pairs = {tuple(i["pair"]) for i in payload["data"]["issues"]}
        assert pairs == {("bg:page", "text:body")}

    def test_requires_both_sides(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["contrast", "--bg", "#fff"])
        assert result.exit_code == 2
