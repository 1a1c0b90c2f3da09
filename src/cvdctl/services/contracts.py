"""Typed payload contracts for service and adapter boundaries.

These models validate operation payload shapes before they leave the
service layer, so renderers and JSON consumers can rely on key names.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

from cvdctl.domain.distinguishability import DistinguishabilityResult
from cvdctl.domain.improvement import ImprovementSuggestion, PairImprovementResult


def dump_validated[T: BaseModel](model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a JSON-safe payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="json")


# --- simulate / delta_e ---


class SimulationItem(BaseModel):
    """One CVD rendering of the input color."""

    cvd_type: str
    label: str
    hex: str
    delta_e: float


class SimulateResultData(BaseModel):
    """Payload contract for ``PaletteService.simulate``."""

    name: str
    hex: str
    oklch: dict[str, float | None]
    simulations: list[SimulationItem]


class DeltaEResultData(BaseModel):
    """Payload contract for ``PaletteService.delta_e``."""

    pair: tuple[str, str]
    hexes: tuple[str, str]
    simple: float
    weighted: float


# --- check ---


class PairIssue(BaseModel):
    """One failing (pair, CVD type) evaluation."""

    model_config = ConfigDict(extra="allow")

    pair: tuple[str, str]
    hexes: tuple[str, str]
    vision_type: str
    normal_delta_e: float
    simulated_delta_e: float
    severity: Literal["ok", "warning", "error"]

    @classmethod
    def from_result(cls, result: DistinguishabilityResult) -> PairIssue:
        return cls(
            pair=result.color_pair,
            hexes=(result.colors[0].to_hex(), result.colors[1].to_hex()),
            vision_type=str(result.vision_type),
            normal_delta_e=result.normal_delta_e,
            simulated_delta_e=result.simulated_delta_e,
            severity=result.severity.value,
        )


class CheckResultData(BaseModel):
    """Payload contract for the three palette check operations."""

    mode: Literal["all_pairs", "adjacent", "background_text"]
    count: int
    total_checks: int
    pass_rate: float
    issues_by_type: dict[str, int]
    issues: list[PairIssue]


# --- score ---


class ScoreResultData(BaseModel):
    """Payload contract for ``PaletteService.score``."""

    overall_score: float
    grade: Literal["A", "B", "C", "D", "F"]
    description: str
    scores_by_type: dict[str, float]
    weights: dict[str, float]
    report: str | None = None


# --- suggest ---


class SuggestionItem(BaseModel):
    """One ranked adjustment."""

    type: Literal["lightness", "hue", "chroma"]
    target_color: str
    original_hex: str
    suggested_hex: str
    adjustment_amount: float
    direction: str
    expected_improvement: float
    new_delta_e: float

    @classmethod
    def from_suggestion(cls, suggestion: ImprovementSuggestion) -> SuggestionItem:
        return cls(
            type=suggestion.type.value,
            target_color=suggestion.target_color,
            original_hex=suggestion.original_color.to_hex(),
            suggested_hex=suggestion.suggested_color.to_hex(),
            adjustment_amount=suggestion.adjustment_amount,
            direction=suggestion.direction,
            expected_improvement=suggestion.expected_improvement,
            new_delta_e=suggestion.new_delta_e,
        )


class PairImprovementItem(BaseModel):
    """Suggestions for one failing pair."""

    pair: tuple[str, str]
    vision_type: str
    original_delta_e: float
    target_delta_e: float
    is_improvable: bool
    suggestions: list[SuggestionItem]

    @classmethod
    def from_result(cls, result: PairImprovementResult) -> PairImprovementItem:
        return cls(
            pair=result.color_pair,
            vision_type=str(result.vision_type),
            original_delta_e=result.original_delta_e,
            target_delta_e=result.target_delta_e,
            is_improvable=result.is_improvable,
            suggestions=[SuggestionItem.from_suggestion(s) for s in result.suggestions],
        )


class SuggestResultData(BaseModel):
    """Payload contract for ``PaletteService.suggest``."""

    count: int
    improvable_count: int
    improvements: list[PairImprovementItem]
    report: str | None = None


# --- detect ---


class ConfusionItem(BaseModel):
    """One CVD confusion between two positions."""

    index1: int
    index2: int
    pair: tuple[str, str]
    cvd_type: str
    cvd_delta_e: float


class DetectResultData(BaseModel):
    """Payload contract for ``PaletteService.detect``."""

    threshold: float
    count: int
    pairs: list[ConfusionItem]
    by_type: dict[str, int]
    conflicts: list[int]
