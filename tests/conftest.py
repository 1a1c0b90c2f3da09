"""Shared pytest fixtures for cvdctl tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from cvdctl.config.settings import CvdSettings
from cvdctl.domain.color import Color


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's CVDCTL_* environment out of the tests."""
    import os

    for key in list(os.environ):
        if key.startswith("CVDCTL_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty temp dir so no stray cvdctl.toml is discovered."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings(isolated_cwd: Path) -> CvdSettings:
    """Default settings with no config file."""
    return CvdSettings.from_cli(start=isolated_cwd)


@pytest.fixture
def red() -> Color:
    return Color.from_hex("#ff0000")


@pytest.fixture
def green() -> Color:
    return Color.from_hex("#00ff00")


@pytest.fixture
def white() -> Color:
    return Color.from_hex("#ffffff")


@pytest.fixture
def black() -> Color:
    return Color.from_hex("#000000")
