"""Perceptual distance (ΔE) between two colors in OKLCH.

Both metrics scale OKLCH by 100 so that black/white sit about 100 apart.
"""

from __future__ import annotations

import math

from cvdctl.domain.color import Color


def normalize_hue_delta(delta: float) -> float:
    """Fold a hue difference in degrees into (-180, 180]."""
    delta = delta % 360.0
    if delta > 180.0:
        delta -= 360.0
    return delta


def weighted_delta_e(a: Color, b: Color) -> float:
    """Chroma-weighted ΔE: sqrt(ΔL² + ΔC² + ΔH'²).

    ΔH' weights the hue difference by the geometric mean of both chromas,
    using the half-angle ``sin(Δh·π/360)``.
    """
    delta_l = (b.l - a.l) * 100
    delta_c = (b.c - a.c) * 100
    delta_h = normalize_hue_delta(b.hue_or_zero - a.hue_or_zero)
    delta_h_prime = 2 * math.sqrt(a.c * b.c) * math.sin(delta_h * math.pi / 360) * 100
    return math.sqrt(delta_l**2 + delta_c**2 + delta_h_prime**2)


def _cartesian(color: Color) -> tuple[float, float, float]:
    rad = math.radians(color.hue_or_zero)
    return color.l * 100, color.c * 100 * math.cos(rad), color.c * 100 * math.sin(rad)


def simple_delta_e(a: Color, b: Color) -> float:
    """Euclidean distance between the two colors' OKLab-like triples."""
    la, xa, ya = _cartesian(a)
    lb, xb, yb = _cartesian(b)
    return math.sqrt((lb - la) ** 2 + (xb - xa) ** 2 + (yb - ya) ** 2)
