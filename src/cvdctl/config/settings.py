"""CvdSettings: one frozen object for flags, environment and cvdctl.toml.

Sources are consulted in this order, and the first one holding a value wins:

- keyword arguments (the root command's global flags)
- ``CVDCTL_*`` environment variables, with ``__`` between nested keys
- the TOML file given by ``--config`` or found by :func:`find_config`
- model defaults
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from cvdctl.config.discovery import find_config, read_toml
from cvdctl.config.models import (
    DetectionConfig,
    ImprovementConfig,
    ReportConfig,
    ScoreConfig,
    ValidationConfig,
)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by a parsed ``cvdctl.toml``.

    Keys that are not settings fields are dropped. BaseSettings forbids
    extra input by default, so a stray table would otherwise fail validation.
    """

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._table: dict[str, Any] = {}
        if toml_path is not None and toml_path.is_file():
            self._table = read_toml(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._table.get(field_name), field_name, field_name in self._table

    def __call__(self) -> dict[str, Any]:
        fields = self.settings_cls.model_fields
        return {key: value for key, value in self._table.items() if key in fields}


# from_cli() parks the resolved path here for settings_customise_sources.
_pending = threading.local()


class CvdSettings(BaseSettings):
    """Settings for the cvdctl CLI.

    Attributes:
        config_path: The TOML file that was loaded, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "CVDCTL_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # Global flags
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # cvdctl.toml tables
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    score: ScoreConfig = Field(default_factory=ScoreConfig)
    improvement: ImprovementConfig = Field(default_factory=ImprovementConfig)
    detection: DetectionConfig = Field(default_factory=DetectionConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Put the TOML file below env vars. Dotenv and secrets are unused."""
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_pending, "toml_path", None)),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> CvdSettings:
        """Build settings for one CLI invocation.

        An explicit *config_path* that does not exist means "no file"; it
        does not fall back to discovery from *start* (default: cwd).
        """
        if config_path:
            explicit = Path(config_path)
            toml_path = explicit if explicit.is_file() else None
        else:
            toml_path = find_config(start)

        _pending.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            del _pending.toml_path
