"""Tests for the ΔE metrics."""

from __future__ import annotations

import pytest

from cvdctl.domain.color import Color
from cvdctl.domain.distance import normalize_hue_delta, simple_delta_e, weighted_delta_e

PAIRS = [
    ("#ff0000", "#00ff00"),
    ("#0000ff", "#ffff00"),
    ("#808080", "#3a7bd5"),
    ("#000000", "#ffffff"),
    ("#c0ffee", "#c0ffef"),
]


class TestNormalizeHueDelta:
    @pytest.mark.parametrize(
        ("delta", "expected"),
        [(0.0, 0.0), (90.0, 90.0), (180.0, 180.0), (270.0, -90.0), (-270.0, 90.0), (360.0, 0.0)],
    )
    def test_folds_into_half_open_range(self, delta: float, expected: float) -> None:
        assert normalize_hue_delta(delta) == pytest.approx(expected)


class TestProperties:
    @pytest.mark.parametrize(("a", "b"), PAIRS)
    def test_symmetry(self, a: str, b: str) -> None:
        ca, cb = Color.from_hex(a), Color.from_hex(b)
        assert simple_delta_e(ca, cb) == simple_delta_e(cb, ca)
        assert weighted_delta_e(ca, cb) == pytest.approx(weighted_delta_e(cb, ca))

    @pytest.mark.parametrize("value", ["#ff0000", "#808080", "#000000", "#c0ffee"])
    def test_identity(self, value: str) -> None:
        color = Color.from_hex(value)
        assert simple_delta_e(color, color) == 0
        assert weighted_delta_e(color, color) == 0

    @pytest.mark.parametrize(("a", "b"), PAIRS)
    def test_non_negative(self, a: str, b: str) -> None:
        ca, cb = Color.from_hex(a), Color.from_hex(b)
        assert simple_delta_e(ca, cb) >= 0
        assert weighted_delta_e(ca, cb) >= 0


class TestValues:
    def test_black_white_about_100(self) -> None:
        black, white = Color.from_hex("#000000"), Color.from_hex("#ffffff")
        assert simple_delta_e(black, white) == pytest.approx(100.0, abs=0.01)
        assert weighted_delta_e(black, white) == pytest.approx(100.0, abs=0.01)

    def test_opposite_hues(self) -> None:
        a = Color.from_oklch(0.5, 0.1, 0.0)
        b = Color.from_oklch(0.5, 0.1, 180.0)
        assert simple_delta_e(a, b) == pytest.approx(20.0)
        assert weighted_delta_e(a, b) == pytest.approx(20.0)

    def test_weighted_hue_term_uses_shorter_arc(self) -> None:
        a = Color.from_oklch(0.5, 0.1, 350.0)
        b = Color.from_oklch(0.5, 0.1, 10.0)
        c = Color.from_oklch(0.5, 0.1, 30.0)
        assert weighted_delta_e(a, b) == pytest.approx(weighted_delta_e(b, c))

    def test_achromatic_has_no_hue_term(self) -> None:
        gray = Color.from_oklch(0.5, 0.0)
        tinted = Color.from_oklch(0.5, 0.1, 200.0)
        assert weighted_delta_e(gray, tinted) == pytest.approx(10.0)
