"""Plain-text report generators for logs and debug panels.

The exact layout is not a compatibility contract.
"""

from __future__ import annotations

from collections.abc import Sequence

from cvdctl.domain.cvd import CVDType, cvd_type_label
from cvdctl.domain.distinguishability import SEVERITY_ORDER, ColorCollection, check_palette
from cvdctl.domain.improvement import PairImprovementResult
from cvdctl.domain.scoring import CVDScoreOptions, calculate_cvd_score

DEFAULT_MAX_LISTED_PAIRS = 10


def generate_cvd_score_report(
    colors: ColorCollection,
    options: CVDScoreOptions | None = None,
    *,
    max_listed_pairs: int = DEFAULT_MAX_LISTED_PAIRS,
) -> str:
    """Summarize the palette score and its most severe problematic pairs."""
    opts = options or CVDScoreOptions()
    score = calculate_cvd_score(colors, opts)
    palette = check_palette(colors, opts.distinguishability_options)

    lines = [
        "=== CVD Accessibility Score Report ===",
        "",
        f"Overall Score: {score.overall_score}/100 (Grade: {score.grade})",
        score.description,
        "",
        "--- Scores by Vision Type ---",
    ]
    for cvd_type in CVDType:
        label = f"{cvd_type_label(cvd_type)}:"
        lines.append(f"  {label:<24}{score.scores_by_type[cvd_type]}%")
    lines.append("")

    if not palette.problematic_pairs:
        lines.append("No problematic color pairs found!")
        return "\n".join(lines)

    lines.append("--- Problematic Color Pairs ---")
    ranked = sorted(palette.problematic_pairs, key=lambda r: SEVERITY_ORDER[r.severity])
    for pair in ranked[:max_listed_pairs]:
        name_a, name_b = pair.color_pair
        lines.append(
            f"  [{pair.severity.upper()}] {name_a} - {name_b} "
            f"({pair.vision_type}, ΔE: {pair.simulated_delta_e:.1f})"
        )
    if len(ranked) > max_listed_pairs:
        lines.append(f"  ... and {len(ranked) - max_listed_pairs} more issues")

    return "\n".join(lines)


def generate_improvement_report(improvements: Sequence[PairImprovementResult]) -> str:
    """List before/after colors and expected ΔE gains per problematic pair."""
    if not improvements:
        return "No improvement suggestions needed - all color pairs are distinguishable!"

    lines = ["=== CVD Improvement Suggestions ===", ""]
    for improvement in improvements:
        name_a, name_b = improvement.color_pair
        lines.append(f"Color Pair: {name_a} - {name_b}")
        lines.append(f"Vision Type: {improvement.vision_type}")
        lines.append(
            f"Current ΔE: {improvement.original_delta_e:.1f} "
            f"→ Target: {improvement.target_delta_e:.1f}"
        )

        if not improvement.suggestions:
            lines.append("  No effective adjustment found")
        else:
            lines.append("  Suggestions:")
            for priority, suggestion in enumerate(improvement.suggestions, start=1):
                lines.append(
                    f"    {priority}. [{suggestion.type.upper()}] "
                    f'Adjust "{suggestion.target_color}" {suggestion.direction}'
                )
                lines.append(
                    f"       {suggestion.original_color.to_hex()} "
                    f"→ {suggestion.suggested_color.to_hex()}"
                )
                lines.append(
                    f"       Expected ΔE: {suggestion.new_delta_e:.1f} "
                    f"(+{suggestion.expected_improvement:.1f})"
                )
        lines.append("")

    return "\n".join(lines)
