"""Weighted CVD accessibility score and letter grade for a palette.

Per-type sub-scores are pass rates of the palette check for that CVD type.
The overall score is their weighted mean; default weights follow the
relative prevalence of each deficiency.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType

from pydantic import BaseModel, Field, field_validator

from cvdctl.domain.cvd import CVDType, all_cvd_types
from cvdctl.domain.distinguishability import (
    ColorCollection,
    DistinguishabilityOptions,
    check_palette,
    color_entries,
)

DEFAULT_WEIGHTS: Mapping[CVDType, float] = MappingProxyType(
    {
        CVDType.PROTANOPIA: 0.30,
        CVDType.DEUTERANOPIA: 0.35,  # most common
        CVDType.TRITANOPIA: 0.20,
        CVDType.ACHROMATOPSIA: 0.15,
    }
)


class Grade(StrEnum):
    """Letter grade for an overall score."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"

    @classmethod
    def from_score(cls, score: float) -> Grade:
        if score >= 90:
            return cls.A
        if score >= 75:
            return cls.B
        if score >= 60:
            return cls.C
        if score >= 40:
            return cls.D
        return cls.F


GRADE_DESCRIPTIONS: dict[Grade, str] = {
    Grade.A: "Excellent: distinguishable for almost every type of color vision.",
    Grade.B: "Good: distinguishable for most types of color vision; some pairs need attention.",
    Grade.C: "Fair: some color pairs may be hard to tell apart.",
    Grade.D: "Needs improvement: many color pairs are hard to tell apart.",
    Grade.F: "Failing: serious distinguishability problems for users with CVD.",
}

TRIVIAL_PALETTE_DESCRIPTION = "One color or fewer: nothing can be confused."


def merge_weights(overrides: Mapping[CVDType, float] | None = None) -> dict[CVDType, float]:
    """Merge *overrides* over :data:`DEFAULT_WEIGHTS` key by key."""
    weights = dict(DEFAULT_WEIGHTS)
    for key, value in (overrides or {}).items():
        weights[CVDType(key)] = float(value)
    return weights


class CVDScoreOptions(BaseModel):
    """Weight overrides and validation thresholds for scoring."""

    model_config = {"frozen": True}

    weights: dict[CVDType, float] = Field(default_factory=dict)
    distinguishability_options: DistinguishabilityOptions = Field(
        default_factory=DistinguishabilityOptions
    )

    @field_validator("weights")
    @classmethod
    def _check_weights(cls, value: dict[CVDType, float]) -> dict[CVDType, float]:
        if not all(math.isfinite(w) and w >= 0 for w in value.values()):
            raise ValueError("CVD weights must be finite and non-negative")
        if sum(merge_weights(value).values()) <= 0:
            raise ValueError("CVD weights must sum to a positive number")
        return value

    @property
    def merged_weights(self) -> dict[CVDType, float]:
        return merge_weights(self.weights)


class CVDScoreResult(BaseModel):
    """Overall score, per-type sub-scores, weights used, and grade."""

    model_config = {"frozen": True}

    overall_score: float
    scores_by_type: dict[CVDType, float]
    weights: dict[CVDType, float]
    grade: Grade
    description: str


def _round1(value: float) -> float:
    return round(value, 1)


def calculate_cvd_score(
    colors: ColorCollection,
    options: CVDScoreOptions | None = None,
) -> CVDScoreResult:
    """Score a palette from 0 to 100 for CVD distinguishability.

    A palette with fewer than two colors is a vacuous pass (100, grade A).
    Vision types excluded from the run score 100 for display; a weight of 0
    keeps a type's sub-score visible without affecting the total.
    """
    opts = options or CVDScoreOptions()
    weights = opts.merged_weights

    if len(color_entries(colors)) < 2:
        return CVDScoreResult(
            overall_score=100.0,
            scores_by_type={cvd_type: 100.0 for cvd_type in all_cvd_types()},
            weights=weights,
            grade=Grade.A,
            description=TRIVIAL_PALETTE_DESCRIPTION,
        )

    palette = check_palette(colors, opts.distinguishability_options)

    scores_by_type: dict[CVDType, float] = {}
    for cvd_type in all_cvd_types():
        type_results = [r for r in palette.results if r.vision_type is cvd_type]
        if not type_results:
            scores_by_type[cvd_type] = 100.0
            continue
        passed = sum(1 for r in type_results if r.is_distinguishable)
        scores_by_type[cvd_type] = passed / len(type_results) * 100

    total_weight = sum(weights.values())
    overall = sum(scores_by_type[t] * weights[t] for t in all_cvd_types()) / total_weight
    grade = Grade.from_score(overall)

    return CVDScoreResult(
        overall_score=_round1(overall),
        scores_by_type={t: _round1(s) for t, s in scores_by_type.items()},
        weights=weights,
        grade=grade,
        description=GRADE_DESCRIPTIONS[grade],
    )
