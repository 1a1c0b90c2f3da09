"""Tests for the plain-text report generators."""

from __future__ import annotations

from cvdctl.domain.color import Color
from cvdctl.domain.cvd import CVDType
from cvdctl.domain.distinguishability import check_palette
from cvdctl.domain.improvement import (
    PairImprovementResult,
    generate_palette_improvement_suggestions,
)
from cvdctl.domain.reports import generate_cvd_score_report, generate_improvement_report

GRAYS = {"a": Color.from_hex("#777777"), "b": Color.from_hex("#787878")}


class TestScoreReport:
    def test_clean_palette(self) -> None:
        report = generate_cvd_score_report(
            {"w": Color.from_hex("#ffffff"), "k": Color.from_hex("#000000")}
        )
        assert report.startswith("=== CVD Accessibility Score Report ===")
        assert "Overall Score: 100.0/100 (Grade: A)" in report
        assert "--- Scores by Vision Type ---" in report
        assert "Deuteranopia (D-type):" in report
        assert report.endswith("No problematic color pairs found!")

    def test_lists_problem_pairs(self) -> None:
        report = generate_cvd_score_report(GRAYS)
        assert "Overall Score: 0.0/100 (Grade: F)" in report
        assert "--- Problematic Color Pairs ---" in report
        assert "[ERROR] a - b (protanopia, ΔE:" in report
        assert "more issues" not in report

    def test_truncates_listing(self) -> None:
        report = generate_cvd_score_report(GRAYS, max_listed_pairs=1)
        assert report.count("[ERROR]") == 1
        assert report.endswith("... and 3 more issues")


class TestImprovementReport:
    def test_empty(self) -> None:
        assert generate_improvement_report([]) == (
            "No improvement suggestions needed - all color pairs are distinguishable!"
        )

    def test_pair_without_suggestions(self) -> None:
        result = PairImprovementResult(
            color_pair=("x", "y"),
            vision_type=CVDType.TRITANOPIA,
            original_delta_e=1.23,
            target_delta_e=5.0,
        )
        report = generate_improvement_report([result])
        assert "Color Pair: x - y" in report
        assert "Vision Type: tritanopia" in report
        assert "Current ΔE: 1.2 → Target: 5.0" in report
        assert "No effective adjustment found" in report

    def test_lists_suggestions(self) -> None:
        improvements = generate_palette_improvement_suggestions(check_palette(GRAYS))
        report = generate_improvement_report(improvements)
        assert report.startswith("=== CVD Improvement Suggestions ===")
        assert "1. [" in report
        assert 'Adjust "' in report
        assert "Expected ΔE:" in report
