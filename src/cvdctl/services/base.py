"""BaseService — shared foundation for cvdctl services.

Every service receives the resolved :class:`CvdSettings` at construction
time and reads option defaults from its TOML-backed sections. Services
never print; they return ServiceResult and log through structlog.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from cvdctl.config.settings import CvdSettings


class BaseService:
    """Base for service-layer classes.

    Usage::

        class PaletteService(BaseService):
            def score(self, specs: list[str]) -> ServiceResult:
                opts = self._settings.score.to_options(self._settings.validation)
                ...
    """

    def __init__(self, settings: CvdSettings) -> None:
        self._settings = settings
        self._log = structlog.get_logger(type(self).__module__)

    @property
    def settings(self) -> CvdSettings:
        return self._settings
