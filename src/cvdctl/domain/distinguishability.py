"""Distinguishability validation for color pairs and whole palettes.

Each pair is compared twice: under normal vision and after simulating a
CVD type. The simulated ΔE (simple metric) decides pass/fail and severity.

Three palette shapes share one aggregation:
- all unordered pairs (``check_palette``)
- consecutive pairs of an ordered ramp (``check_adjacent_shades``)
- background x text cross product (``check_background_text``)

INVARIANT: Iteration follows input insertion order, so the order of
``results`` and ``problematic_pairs`` is reproducible.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from enum import StrEnum

from pydantic import BaseModel, Field

from cvdctl.domain.color import Color
from cvdctl.domain.cvd import CVDType, all_cvd_types, simulate
from cvdctl.domain.distance import simple_delta_e

logger = logging.getLogger(__name__)

# Shared ΔE boundary used by confusion detection and ordering checks.
# Kept separate from the per-call default ``threshold`` below.
DISTINGUISHABILITY_THRESHOLD = 5.0

DEFAULT_THRESHOLD = 3.0
DEFAULT_WARNING_THRESHOLD = 5.0


class Severity(StrEnum):
    """Severity of a pair's post-simulation distinguishability."""

    OK = "ok"
    WARNING = "warning"
    ERROR = "error"

    @classmethod
    def classify(cls, delta_e: float, threshold: float, warning_threshold: float) -> Severity:
        if delta_e >= warning_threshold:
            return cls.OK
        if delta_e >= threshold:
            return cls.WARNING
        return cls.ERROR


# Report ordering: most severe first.
SEVERITY_ORDER: dict[Severity, int] = {
    Severity.ERROR: 0,
    Severity.WARNING: 1,
    Severity.OK: 2,
}


class NamedColor(BaseModel):
    """A palette role or shade name paired with its color."""

    model_config = {"frozen": True}

    name: str
    color: Color


class DistinguishabilityOptions(BaseModel):
    """Thresholds and vision types for a validation run."""

    model_config = {"frozen": True}

    threshold: float = DEFAULT_THRESHOLD
    warning_threshold: float = DEFAULT_WARNING_THRESHOLD
    vision_types: tuple[CVDType, ...] = Field(default_factory=lambda: tuple(all_cvd_types()))


class DistinguishabilityResult(BaseModel):
    """One (color pair, CVD type) evaluation.

    ``simulated_delta_e <= normal_delta_e`` is typical but not guaranteed.
    """

    model_config = {"frozen": True}

    color_pair: tuple[str, str]
    colors: tuple[Color, Color]
    normal_delta_e: float
    simulated_delta_e: float
    vision_type: CVDType
    is_distinguishable: bool
    severity: Severity


class PaletteDistinguishabilityResult(BaseModel):
    """All pair evaluations of one validation run, with aggregates."""

    model_config = {"frozen": True}

    results: list[DistinguishabilityResult] = Field(default_factory=list)
    problematic_pairs: list[DistinguishabilityResult] = Field(default_factory=list)
    issues_by_type: dict[CVDType, int] = Field(default_factory=dict)
    pass_rate: float = 100.0

    @property
    def total_checks(self) -> int:
        return len(self.results)

    @property
    def passed_checks(self) -> int:
        return sum(1 for r in self.results if r.is_distinguishable)


ColorCollection = Mapping[str, Color] | Sequence[NamedColor]


def color_entries(colors: ColorCollection) -> list[tuple[str, Color]]:
    """Normalize a name->Color mapping or NamedColor sequence to ordered pairs."""
    if isinstance(colors, Mapping):
        return list(colors.items())
    return [(item.name, item.color) for item in colors]


# ---------------------------------------------------------------------------
# Pair check
# ---------------------------------------------------------------------------


def check_pair(
    color_a: Color,
    color_b: Color,
    name_a: str,
    name_b: str,
    cvd_type: CVDType,
    options: DistinguishabilityOptions | None = None,
) -> DistinguishabilityResult:
    """Check whether two colors stay distinguishable under *cvd_type*."""
    opts = options or DistinguishabilityOptions()
    cvd_type = CVDType(cvd_type)

    normal_delta_e = simple_delta_e(color_a, color_b)
    simulated_delta_e = simple_delta_e(simulate(color_a, cvd_type), simulate(color_b, cvd_type))

    return DistinguishabilityResult(
        color_pair=(name_a, name_b),
        colors=(color_a, color_b),
        normal_delta_e=normal_delta_e,
        simulated_delta_e=simulated_delta_e,
        vision_type=cvd_type,
        is_distinguishable=simulated_delta_e >= opts.threshold,
        severity=Severity.classify(simulated_delta_e, opts.threshold, opts.warning_threshold),
    )


# ---------------------------------------------------------------------------
# Palette checks
# ---------------------------------------------------------------------------

_Pair = tuple[str, Color, str, Color]


def _aggregate(
    pairs: Iterable[_Pair],
    options: DistinguishabilityOptions,
) -> PaletteDistinguishabilityResult:
    results: list[DistinguishabilityResult] = []
    problematic: list[DistinguishabilityResult] = []
    issues_by_type = {cvd_type: 0 for cvd_type in all_cvd_types()}

    for name_a, color_a, name_b, color_b in pairs:
        for vision_type in options.vision_types:
            result = check_pair(color_a, color_b, name_a, name_b, vision_type, options)
            results.append(result)
            if not result.is_distinguishable:
                problematic.append(result)
                issues_by_type[result.vision_type] += 1

    total = len(results)
    passed = total - len(problematic)
    pass_rate = passed / total * 100 if total > 0 else 100.0

    logger.debug(
        "Checked %d pair evaluations: %d problematic, pass rate %.1f%%",
        total,
        len(problematic),
        pass_rate,
    )
    return PaletteDistinguishabilityResult(
        results=results,
        problematic_pairs=problematic,
        issues_by_type=issues_by_type,
        pass_rate=pass_rate,
    )


def _all_pairs(entries: list[tuple[str, Color]]) -> Iterator[_Pair]:
    for i, (name_a, color_a) in enumerate(entries):
        for name_b, color_b in entries[i + 1 :]:
            yield name_a, color_a, name_b, color_b


def check_palette(
    colors: ColorCollection,
    options: DistinguishabilityOptions | None = None,
) -> PaletteDistinguishabilityResult:
    """Check every unordered pair of *colors* under each requested vision type."""
    opts = options or DistinguishabilityOptions()
    return _aggregate(_all_pairs(color_entries(colors)), opts)


def check_adjacent_shades(
    shades: ColorCollection,
    options: DistinguishabilityOptions | None = None,
) -> PaletteDistinguishabilityResult:
    """Check only neighboring steps ``(i, i+1)`` of an ordered ramp."""
    opts = options or DistinguishabilityOptions()
    entries = color_entries(shades)
    pairs = (
        (name_a, color_a, name_b, color_b)
        for (name_a, color_a), (name_b, color_b) in zip(entries, entries[1:], strict=False)
    )
    return _aggregate(pairs, opts)


def check_background_text(
    backgrounds: ColorCollection,
    texts: ColorCollection,
    options: DistinguishabilityOptions | None = None,
) -> PaletteDistinguishabilityResult:
    """Check every background against every text color.

    Pair names are prefixed ``bg:`` and ``text:`` in the results.
    """
    opts = options or DistinguishabilityOptions()
    bg_entries = color_entries(backgrounds)
    text_entries = color_entries(texts)
    pairs = (
        (f"bg:{bg_name}", bg_color, f"text:{text_name}", text_color)
        for bg_name, bg_color in bg_entries
        for text_name, text_color in text_entries
    )
    return _aggregate(pairs, opts)
