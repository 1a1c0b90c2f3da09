"""CVD simulation — how a color appears under four color-vision deficiencies.

Dichromatic types (protanopia, deuteranopia, tritanopia) apply a fixed
Brettel/Viénot-derived 3x3 matrix to linear RGB. Achromatopsia collapses
every channel to ITU-R BT.709 luminance.

INVARIANT: ``simulate`` is deterministic and total for any valid Color.
"""

from __future__ import annotations

from enum import StrEnum

from cvdctl.domain.color import (
    Color,
    Matrix,
    Vector,
    apply_matrix,
    clamp_channel,
    format_hex,
    linear_to_srgb,
    round_half_up,
    srgb_to_linear,
)


class CVDType(StrEnum):
    """Color-vision deficiency classes, in canonical iteration order."""

    PROTANOPIA = "protanopia"
    DEUTERANOPIA = "deuteranopia"
    TRITANOPIA = "tritanopia"
    ACHROMATOPSIA = "achromatopsia"


# --- Simulation matrices (linear RGB, row-major) ---

PROTANOPIA_MATRIX: Matrix = (
    (0.56667, 0.43333, 0.0),
    (0.55833, 0.44167, 0.0),
    (0.0, 0.24167, 0.75833),
)

DEUTERANOPIA_MATRIX: Matrix = (
    (0.625, 0.375, 0.0),
    (0.7, 0.3, 0.0),
    (0.0, 0.3, 0.7),
)

TRITANOPIA_MATRIX: Matrix = (
    (0.95, 0.05, 0.0),
    (0.0, 0.43333, 0.56667),
    (0.0, 0.475, 0.525),
)

DICHROMAT_MATRICES: dict[CVDType, Matrix] = {
    CVDType.PROTANOPIA: PROTANOPIA_MATRIX,
    CVDType.DEUTERANOPIA: DEUTERANOPIA_MATRIX,
    CVDType.TRITANOPIA: TRITANOPIA_MATRIX,
}

# ITU-R BT.709 luminance coefficients
LUMINANCE_COEFFICIENTS: Vector = (0.2126, 0.7152, 0.0722)

CVD_TYPE_LABELS: dict[CVDType, str] = {
    CVDType.PROTANOPIA: "Protanopia (P-type)",
    CVDType.DEUTERANOPIA: "Deuteranopia (D-type)",
    CVDType.TRITANOPIA: "Tritanopia (T-type)",
    CVDType.ACHROMATOPSIA: "Achromatopsia",
}


def all_cvd_types() -> list[CVDType]:
    """All four CVD types in canonical order."""
    return list(CVDType)


def cvd_type_label(cvd_type: CVDType) -> str:
    """Human-readable display name for a CVD type."""
    return CVD_TYPE_LABELS[CVDType(cvd_type)]


def _to_linear(color: Color) -> Vector:
    r, g, b = color.to_rgb()
    return srgb_to_linear(r / 255), srgb_to_linear(g / 255), srgb_to_linear(b / 255)


def _to_8bit(value: float) -> int:
    return clamp_channel(round_half_up(linear_to_srgb(value) * 255))


def simulate_linear(linear: Vector, cvd_type: CVDType) -> Vector:
    """Apply the CVD transform to a linear-RGB vector."""
    cvd_type = CVDType(cvd_type)
    if cvd_type is CVDType.ACHROMATOPSIA:
        kr, kg, kb = LUMINANCE_COEFFICIENTS
        luminance = kr * linear[0] + kg * linear[1] + kb * linear[2]
        return luminance, luminance, luminance
    return apply_matrix(DICHROMAT_MATRICES[cvd_type], linear)


def simulate(color: Color, cvd_type: CVDType) -> Color:
    """Return how *color* appears to a viewer with *cvd_type*.

    The color round-trips through 8-bit sRGB on both sides of the
    transform, so the result is always a displayable color.
    """
    simulated = simulate_linear(_to_linear(color), cvd_type)
    r, g, b = (_to_8bit(v) for v in simulated)
    return Color.from_hex(format_hex(r, g, b))


def simulate_all(color: Color) -> dict[CVDType, Color]:
    """Simulate *color* under every CVD type."""
    return {cvd_type: simulate(color, cvd_type) for cvd_type in CVDType}
