"""Tests for op-specific Rich renderers."""

from __future__ import annotations

import pytest

from cvdctl.config.settings import CvdSettings
from cvdctl.output.renderers import render_quiet, render_result
from cvdctl.services.palette import PaletteService
from cvdctl.services.result import ErrorCode, ServiceResult

GRAYS = ["a=#777777", "b=#787878"]


@pytest.fixture
def svc(settings: CvdSettings) -> PaletteService:
    return PaletteService(settings)


class TestRenderResult:
    def test_simulate(self, svc: PaletteService) -> None:
        output = render_result(svc.simulate("brand=#ff0000"))
        assert output.startswith("OK  simulate")
        assert "brand" in output
        assert "██ #ff0000" in output
        assert "Protanopia (P-type)" in output
        assert "Achromatopsia" in output

    def test_delta_e(self, svc: PaletteService) -> None:
        output = render_result(svc.delta_e("k=#000000", "w=#ffffff"))
        assert "k / w" in output
        assert "simple ΔE: 100.00" in output

    def test_check_with_issues(self, svc: PaletteService) -> None:
        output = render_result(svc.check(GRAYS))
        assert "pass rate: 0.0%" in output
        assert "a / b" in output
        assert "error" in output
        assert output.endswith("4 issues")

    def test_check_clean(self, svc: PaletteService) -> None:
        output = render_result(svc.check(["#000000", "#ffffff"]))
        assert "No problematic color pairs found." in output

    def test_check_verbose_shows_meta(self, svc: PaletteService) -> None:
        output = render_result(svc.check(GRAYS), verbose=True)
        assert "by type:" in output
        assert "threshold: 3.0" in output

    def test_score_table(self, svc: PaletteService) -> None:
        output = render_result(svc.score(["#000000", "#ffffff"]))
        assert output.startswith("Score: 100.0/100  Grade: A")
        assert "deuteranopia" in output

    def test_score_report(self, svc: PaletteService) -> None:
        output = render_result(svc.score(GRAYS, report=True))
        assert output.startswith("=== CVD Accessibility Score Report ===")
        assert "[ERROR] a - b" in output

    def test_suggest(self, svc: PaletteService) -> None:
        output = render_result(svc.suggest(GRAYS))
        assert output.startswith("OK  suggest")
        assert "a / b" in output
        assert "New ΔE" in output

    def test_suggest_nothing(self, svc: PaletteService) -> None:
        output = render_result(svc.suggest(["#000000", "#ffffff"]))
        assert "All color pairs are distinguishable." in output

    def test_detect_none(self, svc: PaletteService) -> None:
        output = render_result(svc.detect(GRAYS))
        assert "No CVD-only confusions found." in output
        assert "adjacent conflicts: 0" in output

    def test_error(self) -> None:
        failed = ServiceResult.failure("check_palette", ErrorCode.DUPLICATE_NAME, "dup", name="a")
        assert render_result(failed) == "ERROR  check_palette — dup"
        verbose = render_result(failed, verbose=True)
        assert "code: DUPLICATE_NAME" in verbose
        assert "name: a" in verbose

    def test_generic_fallback(self) -> None:
        output = render_result(ServiceResult(ok=True, op="custom", data={"k": [1, 2]}))
        assert output == "OK  custom\n  k: [1,2]"


class TestRenderQuiet:
    def test_check(self, svc: PaletteService) -> None:
        assert render_quiet(svc.check(GRAYS)) == "OK: check_palette 4 issues, 0.0% pass"

    def test_suggest(self, svc: PaletteService) -> None:
        assert render_quiet(svc.suggest(GRAYS)) == "OK: suggest 4/4 improvable"

    def test_detect(self, svc: PaletteService) -> None:
        assert render_quiet(svc.detect(GRAYS)) == "OK: detect 0 confusions"

    def test_other_ops(self, svc: PaletteService) -> None:
        assert render_quiet(svc.simulate("#ff0000")) == "OK: simulate"
