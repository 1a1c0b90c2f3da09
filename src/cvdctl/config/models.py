"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, cvdctl.toml only contains overrides.
Each section converts to the matching domain options object, so the domain
never reads configuration itself.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from cvdctl.domain.cvd import CVDType, all_cvd_types
from cvdctl.domain.distinguishability import (
    DEFAULT_THRESHOLD,
    DEFAULT_WARNING_THRESHOLD,
    DISTINGUISHABILITY_THRESHOLD,
    DistinguishabilityOptions,
)
from cvdctl.domain.improvement import ImprovementOptions
from cvdctl.domain.reports import DEFAULT_MAX_LISTED_PAIRS
from cvdctl.domain.scoring import CVDScoreOptions

# --- cvdctl.toml sections ---


class ValidationConfig(BaseModel):
    """[validation] section."""

    model_config = {"frozen": True}

    threshold: float = DEFAULT_THRESHOLD
    warning_threshold: float = DEFAULT_WARNING_THRESHOLD
    vision_types: list[CVDType] = Field(default_factory=all_cvd_types)

    def to_options(self) -> DistinguishabilityOptions:
        return DistinguishabilityOptions(
            threshold=self.threshold,
            warning_threshold=self.warning_threshold,
            vision_types=tuple(self.vision_types),
        )


class ScoreConfig(BaseModel):
    """[score] section. Only overridden weights need to be listed."""

    model_config = {"frozen": True}

    weights: dict[CVDType, float] = Field(default_factory=dict)

    def to_options(self, validation: ValidationConfig) -> CVDScoreOptions:
        return CVDScoreOptions(
            weights=self.weights,
            distinguishability_options=validation.to_options(),
        )


class ImprovementConfig(BaseModel):
    """[improvement] section."""

    model_config = {"frozen": True}

    target_delta_e: float = 5.0
    max_lightness_adjustment: float = 0.2
    max_hue_adjustment: float = 30.0
    max_chroma_adjustment: float = 0.1
    max_suggestions: int = 3

    def to_options(self) -> ImprovementOptions:
        return ImprovementOptions.model_validate(self.model_dump())


class DetectionConfig(BaseModel):
    """[detection] section."""

    model_config = {"frozen": True}

    confusion_threshold: float = DISTINGUISHABILITY_THRESHOLD


class ReportConfig(BaseModel):
    """[report] section."""

    model_config = {"frozen": True}

    max_listed_pairs: int = DEFAULT_MAX_LISTED_PAIRS


class CvdConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    score: ScoreConfig = Field(default_factory=ScoreConfig)
    improvement: ImprovementConfig = Field(default_factory=ImprovementConfig)
    detection: DetectionConfig = Field(default_factory=DetectionConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)
