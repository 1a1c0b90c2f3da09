"""Improvement suggestions for color pairs that fail CVD distinguishability.

For one failing pair, each adjustment axis (lightness, hue, chroma) runs a
bounded two-direction step search over one of the two colors, keeping the
other fixed, and reports the candidate with the highest simulated ΔE.

Search order per axis:
  evaluate current ΔE -> already at target? stop -> step search -> best or None

Axis priority for ``generate_improvement_suggestions`` is lightness, hue,
chroma; results are then ranked by expected improvement.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, Field

from cvdctl.domain.color import Color
from cvdctl.domain.cvd import CVDType, simulate
from cvdctl.domain.distance import simple_delta_e
from cvdctl.domain.distinguishability import (
    DistinguishabilityResult,
    PaletteDistinguishabilityResult,
)

logger = logging.getLogger(__name__)

LIGHTNESS_STEP = 0.02
HUE_STEP = 5.0
CHROMA_STEP = 0.02
MAX_CHROMA = 0.4

# Absorbs float error in max/step so e.g. 0.2 / 0.02 yields 10 steps.
_STEP_EPSILON = 1e-9


class AdjustmentType(StrEnum):
    """Axis along which a suggestion changes a color."""

    LIGHTNESS = "lightness"
    HUE = "hue"
    CHROMA = "chroma"


class ImprovementOptions(BaseModel):
    """Search bounds and target for improvement suggestions."""

    model_config = {"frozen": True}

    target_delta_e: float = 5.0
    max_lightness_adjustment: float = Field(default=0.2, ge=0)
    max_hue_adjustment: float = Field(default=30.0, ge=0)
    max_chroma_adjustment: float = Field(default=0.1, ge=0)
    max_suggestions: int = Field(default=3, ge=0)


class ImprovementSuggestion(BaseModel):
    """One proposed edit to one color of a pair."""

    model_config = {"frozen": True}

    type: AdjustmentType
    target_color: str
    original_color: Color
    suggested_color: Color
    adjustment_amount: float
    direction: str
    expected_improvement: float
    new_delta_e: float


class PairImprovementResult(BaseModel):
    """Ranked suggestions for one failing (pair, CVD type)."""

    model_config = {"frozen": True}

    color_pair: tuple[str, str]
    vision_type: CVDType
    original_delta_e: float
    target_delta_e: float
    suggestions: list[ImprovementSuggestion] = Field(default_factory=list)
    is_improvable: bool = False

    @property
    def best_improvement(self) -> float:
        """Expected improvement of the top suggestion, 0 when there is none."""
        return self.suggestions[0].expected_improvement if self.suggestions else 0.0


# ---------------------------------------------------------------------------
# Bounded step search
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class _Candidate:
    color: Color
    adjustment: float
    delta_e: float


def _simulated_delta_e(a: Color, b: Color, cvd_type: CVDType) -> float:
    return simple_delta_e(simulate(a, cvd_type), simulate(b, cvd_type))


def _search_axis(
    other: Color,
    cvd_type: CVDType,
    *,
    current_delta_e: float,
    target_delta_e: float,
    step: float,
    max_adjustment: float,
    build: Callable[[float], Color],
) -> _Candidate | None:
    """Try ``±k·step`` for k = 1..max/step and return the best candidate.

    Stops early once a candidate reaches *target_delta_e*. Returns None when
    nothing beats *current_delta_e*.
    """
    steps = int(max_adjustment / step + _STEP_EPSILON)
    other_simulated = simulate(other, cvd_type)
    best: _Candidate | None = None
    best_delta_e = current_delta_e

    for direction in (1, -1):
        for k in range(1, steps + 1):
            amount = round(direction * k * step, 10)
            candidate = build(amount)
            delta_e = simple_delta_e(simulate(candidate, cvd_type), other_simulated)
            if delta_e > best_delta_e:
                best_delta_e = delta_e
                best = _Candidate(candidate, amount, delta_e)
                if delta_e >= target_delta_e:
                    break
        if best_delta_e >= target_delta_e:
            break

    return best


def _pick(
    first: tuple[str, Color],
    second: tuple[str, Color],
    prefer_first: bool,
) -> tuple[str, Color, Color]:
    """Return ``(target name, target color, fixed other color)``."""
    if prefer_first:
        return first[0], first[1], second[1]
    return second[0], second[1], first[1]


def _suggestion(
    axis: AdjustmentType,
    target_name: str,
    target: Color,
    best: _Candidate,
    current_delta_e: float,
    direction: str,
) -> ImprovementSuggestion:
    return ImprovementSuggestion(
        type=axis,
        target_color=target_name,
        original_color=target,
        suggested_color=best.color,
        adjustment_amount=best.adjustment,
        direction=direction,
        expected_improvement=best.delta_e - current_delta_e,
        new_delta_e=best.delta_e,
    )


# ---------------------------------------------------------------------------
# Per-axis suggestions
# ---------------------------------------------------------------------------


def suggest_lightness_adjustment(
    color_a: Color,
    color_b: Color,
    name_a: str,
    name_b: str,
    cvd_type: CVDType,
    options: ImprovementOptions | None = None,
) -> ImprovementSuggestion | None:
    """Suggest a lightness change for the lighter color of the pair."""
    opts = options or ImprovementOptions()
    current = _simulated_delta_e(color_a, color_b, cvd_type)
    if current >= opts.target_delta_e:
        return None

    target_name, target, other = _pick(
        (name_a, color_a), (name_b, color_b), color_a.l > color_b.l
    )
    best = _search_axis(
        other,
        cvd_type,
        current_delta_e=current,
        target_delta_e=opts.target_delta_e,
        step=LIGHTNESS_STEP,
        max_adjustment=opts.max_lightness_adjustment,
        build=lambda amount: target.with_lightness(max(0.0, min(1.0, target.l + amount))),
    )
    logger.debug("Lightness search for %s under %s: %s", target_name, cvd_type, best)
    if best is None:
        return None
    direction = "lighter" if best.adjustment > 0 else "darker"
    return _suggestion(AdjustmentType.LIGHTNESS, target_name, target, best, current, direction)


def suggest_hue_adjustment(
    color_a: Color,
    color_b: Color,
    name_a: str,
    name_b: str,
    cvd_type: CVDType,
    options: ImprovementOptions | None = None,
) -> ImprovementSuggestion | None:
    """Suggest a hue rotation for the less chromatic color of the pair."""
    opts = options or ImprovementOptions()
    current = _simulated_delta_e(color_a, color_b, cvd_type)
    if current >= opts.target_delta_e:
        return None

    # Low-chroma colors respond more visibly to hue shifts.
    target_name, target, other = _pick(
        (name_a, color_a), (name_b, color_b), color_a.c < color_b.c
    )
    base_hue = target.hue_or_zero
    best = _search_axis(
        other,
        cvd_type,
        current_delta_e=current,
        target_delta_e=opts.target_delta_e,
        step=HUE_STEP,
        max_adjustment=opts.max_hue_adjustment,
        build=lambda amount: target.with_hue((base_hue + amount) % 360.0),
    )
    logger.debug("Hue search for %s under %s: %s", target_name, cvd_type, best)
    if best is None:
        return None
    direction = f"{best.adjustment:+g}°"
    return _suggestion(AdjustmentType.HUE, target_name, target, best, current, direction)


def suggest_chroma_adjustment(
    color_a: Color,
    color_b: Color,
    name_a: str,
    name_b: str,
    cvd_type: CVDType,
    options: ImprovementOptions | None = None,
) -> ImprovementSuggestion | None:
    """Suggest a chroma change for the more chromatic color of the pair."""
    opts = options or ImprovementOptions()
    current = _simulated_delta_e(color_a, color_b, cvd_type)
    if current >= opts.target_delta_e:
        return None

    target_name, target, other = _pick(
        (name_a, color_a), (name_b, color_b), color_a.c > color_b.c
    )
    best = _search_axis(
        other,
        cvd_type,
        current_delta_e=current,
        target_delta_e=opts.target_delta_e,
        step=CHROMA_STEP,
        max_adjustment=opts.max_chroma_adjustment,
        build=lambda amount: target.with_chroma(max(0.0, min(MAX_CHROMA, target.c + amount))),
    )
    logger.debug("Chroma search for %s under %s: %s", target_name, cvd_type, best)
    if best is None:
        return None
    direction = "more saturated" if best.adjustment > 0 else "less saturated"
    return _suggestion(AdjustmentType.CHROMA, target_name, target, best, current, direction)


_AXIS_SEARCHES = (
    suggest_lightness_adjustment,  # most effective and safest
    suggest_hue_adjustment,
    suggest_chroma_adjustment,
)


# ---------------------------------------------------------------------------
# Pair and palette orchestration
# ---------------------------------------------------------------------------


def generate_improvement_suggestions(
    result: DistinguishabilityResult,
    options: ImprovementOptions | None = None,
) -> PairImprovementResult:
    """Run all three axis searches for one pair and rank the outcomes."""
    opts = options or ImprovementOptions()
    name_a, name_b = result.color_pair
    color_a, color_b = result.colors

    suggestions = [
        suggestion
        for search in _AXIS_SEARCHES
        if (suggestion := search(color_a, color_b, name_a, name_b, result.vision_type, opts))
        is not None
    ]
    suggestions.sort(key=lambda s: s.expected_improvement, reverse=True)
    limited = suggestions[: opts.max_suggestions]

    return PairImprovementResult(
        color_pair=(name_a, name_b),
        vision_type=result.vision_type,
        original_delta_e=result.simulated_delta_e,
        target_delta_e=opts.target_delta_e,
        suggestions=limited,
        is_improvable=len(limited) > 0,
    )


def generate_palette_improvement_suggestions(
    palette_result: PaletteDistinguishabilityResult,
    options: ImprovementOptions | None = None,
) -> list[PairImprovementResult]:
    """Suggest fixes for every problematic pair, most improvable first."""
    improvements = [
        generate_improvement_suggestions(pair, options) for pair in palette_result.problematic_pairs
    ]
    improvements.sort(key=lambda r: r.best_improvement, reverse=True)
    return improvements
