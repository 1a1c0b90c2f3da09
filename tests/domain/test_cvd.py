"""Tests for CVD simulation."""

from __future__ import annotations

import pytest

from cvdctl.domain.color import Color
from cvdctl.domain.cvd import (
    CVDType,
    all_cvd_types,
    cvd_type_label,
    simulate,
    simulate_all,
    simulate_linear,
)

SAMPLE_HEXES = ["#ff0000", "#00ff00", "#0000ff", "#ffff00", "#3a7bd5", "#c0ffee", "#808080"]


class TestCVDType:
    def test_canonical_order(self) -> None:
        assert all_cvd_types() == [
            CVDType.PROTANOPIA,
            CVDType.DEUTERANOPIA,
            CVDType.TRITANOPIA,
            CVDType.ACHROMATOPSIA,
        ]

    def test_values_are_lowercase_names(self) -> None:
        assert CVDType("tritanopia") is CVDType.TRITANOPIA

    def test_labels(self) -> None:
        assert cvd_type_label(CVDType.PROTANOPIA) == "Protanopia (P-type)"
        assert cvd_type_label(CVDType.ACHROMATOPSIA) == "Achromatopsia"


class TestSimulate:
    @pytest.mark.parametrize("cvd_type", list(CVDType))
    def test_deterministic(self, cvd_type: CVDType) -> None:
        color = Color.from_hex("#3a7bd5")
        assert simulate(color, cvd_type) == simulate(color, cvd_type)

    @pytest.mark.parametrize("value", SAMPLE_HEXES)
    def test_achromatopsia_is_gray(self, value: str) -> None:
        r, g, b = simulate(Color.from_hex(value), CVDType.ACHROMATOPSIA).to_rgb()
        assert max(r, g, b) - min(r, g, b) <= 1

    @pytest.mark.parametrize("cvd_type", list(CVDType))
    def test_black_and_white_fixed(self, cvd_type: CVDType) -> None:
        assert simulate(Color.from_hex("#000000"), cvd_type).to_hex() == "#000000"
        assert simulate(Color.from_hex("#ffffff"), cvd_type).to_hex() == "#ffffff"

    def test_achromatopsia_uses_bt709_luminance(self) -> None:
        assert simulate_linear((1.0, 0.0, 0.0), CVDType.ACHROMATOPSIA) == pytest.approx(
            (0.2126, 0.2126, 0.2126)
        )

    def test_protanopia_matrix(self) -> None:
        assert simulate_linear((1.0, 0.0, 0.0), CVDType.PROTANOPIA) == pytest.approx(
            (0.56667, 0.55833, 0.0)
        )

    def test_accepts_string_type(self) -> None:
        color = Color.from_hex("#ff0000")
        assert simulate(color, "deuteranopia") == simulate(color, CVDType.DEUTERANOPIA)

    def test_simulate_all_covers_every_type(self) -> None:
        results = simulate_all(Color.from_hex("#ff0000"))
        assert list(results) == all_cvd_types()
        assert all(isinstance(c, Color) for c in results.values())

    def test_red_loses_its_hue_under_protanopia(self) -> None:
        red = Color.from_hex("#ff0000")
        simulated = simulate(red, CVDType.PROTANOPIA)
        assert simulated != red
        assert simulated.to_rgb()[2] == 0
