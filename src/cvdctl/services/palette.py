"""PaletteService — CVD accessibility operations over color specs.

Accepts colors as ``NAME=HEX`` (or bare ``HEX``) specs, runs the domain
engine with options resolved from settings plus per-call overrides, and
returns payloads shaped by :mod:`cvdctl.services.contracts`.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from pydantic import ValidationError

from cvdctl.domain.color import InvalidColorError
from cvdctl.domain.cvd import CVDType, cvd_type_label, simulate_all
from cvdctl.domain.detection import (
    detect_color_conflicts,
    detect_cvd_confusion_pairs,
    group_pairs_by_cvd_type,
)
from cvdctl.domain.distance import simple_delta_e, weighted_delta_e
from cvdctl.domain.distinguishability import (
    DistinguishabilityOptions,
    PaletteDistinguishabilityResult,
    check_adjacent_shades,
    check_background_text,
    check_palette,
)
from cvdctl.domain.improvement import (
    ImprovementOptions,
    generate_palette_improvement_suggestions,
)
from cvdctl.domain.reports import generate_cvd_score_report, generate_improvement_report
from cvdctl.domain.scoring import CVDScoreOptions, calculate_cvd_score
from cvdctl.services._helpers import (
    DuplicateNameError,
    WeightSpecError,
    parse_color_spec,
    parse_color_specs,
    parse_weight_specs,
)
from cvdctl.services.base import BaseService
from cvdctl.services.contracts import (
    CheckResultData,
    ConfusionItem,
    DeltaEResultData,
    DetectResultData,
    PairImprovementItem,
    PairIssue,
    ScoreResultData,
    SimulateResultData,
    SimulationItem,
    SuggestResultData,
    dump_validated,
)
from cvdctl.services.result import ErrorCode, ServiceResult


class PaletteService(BaseService):
    """Simulate, measure, validate, score, and improve color palettes."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def simulate(self, spec: str) -> ServiceResult:
        """Show how one color appears under each CVD type."""

        def run() -> ServiceResult:
            named = parse_color_spec(spec)
            items = [
                SimulationItem(
                    cvd_type=str(cvd_type),
                    label=cvd_type_label(cvd_type),
                    hex=simulated.to_hex(),
                    delta_e=simple_delta_e(named.color, simulated),
                )
                for cvd_type, simulated in simulate_all(named.color).items()
            ]
            data = {
                "name": named.name,
                "hex": named.color.to_hex(),
                "oklch": {"l": named.color.l, "c": named.color.c, "h": named.color.h},
                "simulations": items,
            }
            return ServiceResult(
                ok=True, op="simulate", data=dump_validated(SimulateResultData, data)
            )

        return self._guard("simulate", run)

    def delta_e(self, spec_a: str, spec_b: str) -> ServiceResult:
        """Both ΔE metrics for one pair under normal vision."""

        def run() -> ServiceResult:
            a, b = parse_color_specs([spec_a, spec_b])
            data = {
                "pair": (a.name, b.name),
                "hexes": (a.color.to_hex(), b.color.to_hex()),
                "simple": simple_delta_e(a.color, b.color),
                "weighted": weighted_delta_e(a.color, b.color),
            }
            return ServiceResult(ok=True, op="delta_e", data=dump_validated(DeltaEResultData, data))

        return self._guard("delta_e", run)

    def check(
        self,
        specs: Sequence[str],
        *,
        adjacent: bool = False,
        threshold: float | None = None,
        warning_threshold: float | None = None,
        vision_types: Sequence[CVDType] | None = None,
    ) -> ServiceResult:
        """Validate all pairs, or only neighbors of an ordered ramp."""
        op = "check_adjacent" if adjacent else "check_palette"

        def run() -> ServiceResult:
            colors = parse_color_specs(specs)
            opts = self._validation_options(threshold, warning_threshold, vision_types)
            if adjacent:
                result = check_adjacent_shades(colors, opts)
            else:
                result = check_palette(colors, opts)
            mode = "adjacent" if adjacent else "all_pairs"
            return self._check_result(op, mode, result, opts)

        return self._guard(op, run)

    def check_background_text(
        self,
        backgrounds: Sequence[str],
        texts: Sequence[str],
        *,
        threshold: float | None = None,
        warning_threshold: float | None = None,
        vision_types: Sequence[CVDType] | None = None,
    ) -> ServiceResult:
        """Validate every background against every text color."""
        op = "check_background_text"

        def run() -> ServiceResult:
            bg_colors = parse_color_specs(backgrounds)
            text_colors = parse_color_specs(texts)
            opts = self._validation_options(threshold, warning_threshold, vision_types)
            result = check_background_text(bg_colors, text_colors, opts)
            return self._check_result(op, "background_text", result, opts)

        return self._guard(op, run)

    def score(
        self,
        specs: Sequence[str],
        *,
        weights: Sequence[str] = (),
        report: bool = False,
    ) -> ServiceResult:
        """Weighted CVD score and letter grade for a palette."""

        def run() -> ServiceResult:
            colors = parse_color_specs(specs)
            merged = {**self._settings.score.weights, **parse_weight_specs(weights)}
            try:
                opts = CVDScoreOptions(
                    weights=merged,
                    distinguishability_options=self._settings.validation.to_options(),
                )
            except ValidationError as exc:
                return ServiceResult.failure(
                    "score",
                    ErrorCode.INVALID_WEIGHTS,
                    _first_error(exc),
                    weights={str(k): v for k, v in merged.items()},
                )

            result = calculate_cvd_score(colors, opts)
            data = result.model_dump(mode="json", include={
                "overall_score",
                "grade",
                "description",
                "scores_by_type",
                "weights",
            })
            if report:
                data["report"] = generate_cvd_score_report(
                    colors,
                    opts,
                    max_listed_pairs=self._settings.report.max_listed_pairs,
                )

            warnings: list[str] = []
            if result.grade in ("D", "F"):
                warnings.append(f"Palette grade {result.grade}: {result.description}")

            self._log.info(
                "palette.scored",
                colors=len(colors),
                overall_score=result.overall_score,
                grade=str(result.grade),
            )
            return ServiceResult(
                ok=True,
                op="score",
                data=dump_validated(ScoreResultData, data),
                warnings=warnings,
            )

        return self._guard("score", run)

    def suggest(
        self,
        specs: Sequence[str],
        *,
        adjacent: bool = False,
        target_delta_e: float | None = None,
        max_suggestions: int | None = None,
        report: bool = False,
    ) -> ServiceResult:
        """Suggest lightness/hue/chroma fixes for every failing pair."""

        def run() -> ServiceResult:
            colors = parse_color_specs(specs)
            validation = self._settings.validation.to_options()
            if adjacent:
                palette = check_adjacent_shades(colors, validation)
            else:
                palette = check_palette(colors, validation)
            opts = self._improvement_options(target_delta_e, max_suggestions)

            improvements = generate_palette_improvement_suggestions(palette, opts)
            items = [PairImprovementItem.from_result(r) for r in improvements]
            data: dict[str, object] = {
                "count": len(items),
                "improvable_count": sum(1 for r in improvements if r.is_improvable),
                "improvements": items,
            }
            if report:
                data["report"] = generate_improvement_report(improvements)

            warnings = [
                f"No adjustment found for {a} / {b} under {r.vision_type}"
                for r in improvements
                if not r.is_improvable
                for a, b in [r.color_pair]
            ]
            self._log.info(
                "palette.suggested",
                problematic=len(palette.problematic_pairs),
                improvable=data["improvable_count"],
            )
            return ServiceResult(
                ok=True,
                op="suggest",
                data=dump_validated(SuggestResultData, data),
                warnings=warnings,
                meta={"options": opts.model_dump(mode="json")},
            )

        return self._guard("suggest", run)

    def detect(self, specs: Sequence[str], *, threshold: float | None = None) -> ServiceResult:
        """Find pairs distinct to normal vision that merge under CVD."""

        def run() -> ServiceResult:
            colors = parse_color_specs(specs)
            limit = self._settings.detection.confusion_threshold if threshold is None else threshold
            pairs = detect_cvd_confusion_pairs(colors, limit)
            grouped = group_pairs_by_cvd_type(pairs)
            items = [
                ConfusionItem(
                    index1=p.index1,
                    index2=p.index2,
                    pair=(colors[p.index1].name, colors[p.index2].name),
                    cvd_type=str(p.cvd_type),
                    cvd_delta_e=p.cvd_delta_e,
                )
                for p in pairs
            ]
            data = {
                "threshold": limit,
                "count": len(items),
                "pairs": items,
                "by_type": {str(t): len(group) for t, group in grouped.items()},
                "conflicts": detect_color_conflicts(colors, adjacent_only=True, threshold=limit),
            }
            return ServiceResult(ok=True, op="detect", data=dump_validated(DetectResultData, data))

        return self._guard("detect", run)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _guard(self, op: str, run: Callable[[], ServiceResult]) -> ServiceResult:
        """Run *run*, converting unusable input into a failed ServiceResult."""
        try:
            return run()
        except DuplicateNameError as exc:
            return ServiceResult.failure(op, ErrorCode.DUPLICATE_NAME, str(exc), name=exc.name)
        except InvalidColorError as exc:
            return ServiceResult.failure(op, ErrorCode.INVALID_COLOR, str(exc))
        except WeightSpecError as exc:
            return ServiceResult.failure(op, ErrorCode.INVALID_WEIGHTS, str(exc))
        except ValidationError as exc:
            return ServiceResult.failure(op, ErrorCode.INVALID_OPTIONS, _first_error(exc))

    def _validation_options(
        self,
        threshold: float | None,
        warning_threshold: float | None,
        vision_types: Sequence[CVDType] | None,
    ) -> DistinguishabilityOptions:
        base = self._settings.validation
        return DistinguishabilityOptions(
            threshold=base.threshold if threshold is None else threshold,
            warning_threshold=(
                base.warning_threshold if warning_threshold is None else warning_threshold
            ),
            vision_types=tuple(vision_types) if vision_types else tuple(base.vision_types),
        )

    def _improvement_options(
        self,
        target_delta_e: float | None,
        max_suggestions: int | None,
    ) -> ImprovementOptions:
        overrides: dict[str, float | int] = {}
        if target_delta_e is not None:
            overrides["target_delta_e"] = target_delta_e
        if max_suggestions is not None:
            overrides["max_suggestions"] = max_suggestions
        base = self._settings.improvement.to_options()
        return ImprovementOptions.model_validate({**base.model_dump(), **overrides})

    def _check_result(
        self,
        op: str,
        mode: str,
        result: PaletteDistinguishabilityResult,
        opts: DistinguishabilityOptions,
    ) -> ServiceResult:
        issues = [PairIssue.from_result(r) for r in result.problematic_pairs]
        data = {
            "mode": mode,
            "count": len(issues),
            "total_checks": result.total_checks,
            "pass_rate": result.pass_rate,
            "issues_by_type": {str(t): n for t, n in result.issues_by_type.items()},
            "issues": issues,
        }

        listed = self._settings.report.max_listed_pairs
        warnings = [
            f"{issue.pair[0]} / {issue.pair[1]} hard to distinguish under "
            f"{issue.vision_type} (ΔE {issue.simulated_delta_e:.1f})"
            for issue in issues[:listed]
        ]
        if len(issues) > listed:
            warnings.append(f"... and {len(issues) - listed} more issues")

        self._log.info(
            "palette.checked",
            mode=mode,
            total_checks=result.total_checks,
            problematic=len(issues),
            pass_rate=round(result.pass_rate, 1),
        )
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(CheckResultData, data),
            warnings=warnings,
            meta={"options": opts.model_dump(mode="json")},
        )


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    return str(errors[0].get("msg", exc))
