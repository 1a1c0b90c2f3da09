"""Locating and reading ``cvdctl.toml``.

The ``CVDCTL_CONFIG`` env var names a file directly. Otherwise the search
starts in the working directory and climbs parent by parent, the way git
finds ``.git/``.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

from cvdctl.config.models import CvdConfig

CONFIG_FILENAME = "cvdctl.toml"
CONFIG_ENV_VAR = "CVDCTL_CONFIG"


class ConfigFileError(click.ClickException):
    """A config file exists but cannot be parsed."""


def find_config(start: Path | None = None) -> Path | None:
    """Nearest ``cvdctl.toml`` at or above *start* (default: cwd), or None."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        explicit = Path(override)
        return explicit if explicit.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        if (directory / CONFIG_FILENAME).is_file():
            return directory / CONFIG_FILENAME
    return None


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path*, turning decode errors into :class:`ConfigFileError`."""
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigFileError(f"Invalid TOML in {path}: {exc}") from exc


def load_config(path: Path | None = None, cwd: Path | None = None) -> CvdConfig:
    """Section models only, without CLI flags or env vars.

    Falls back to discovery from *cwd* when *path* is None, and to
    defaults when nothing is found. Top-level flag keys are ignored.
    """
    source = path if path is not None else find_config(cwd)
    if source is None:
        return CvdConfig()
    return CvdConfig.model_validate(read_toml(source))
