"""Color value type stored as OKLCH, with sRGB hex round-trips.

OKLab conversion uses the published matrices from Björn Ottosson's
reference implementation (linear sRGB -> LMS -> OKLab).

INVARIANT: Colors are immutable. Adjusting a color always builds a new one.
Achromatic colors carry ``h=None``; consumers default it to 0 only at the
point of trigonometric use.
"""

from __future__ import annotations

import math
import re

from pydantic import BaseModel, computed_field

HEX_PATTERN = re.compile(r"^#?([0-9a-f]{6}|[0-9a-f]{3})$", re.IGNORECASE)

# Chroma below this is treated as "no hue" (gray, white, black).
ACHROMATIC_EPSILON = 1e-6

# Tolerance for float noise at the ends of the lightness range.
_LIGHTNESS_TOLERANCE = 1e-6

_M1 = (
    (0.4122214708, 0.5363325363, 0.0514459929),
    (0.2119034982, 0.6806995451, 0.1073969566),
    (0.0883024619, 0.2817188376, 0.6299787005),
)
_M2 = (
    (0.2104542553, 0.7936177850, -0.0040720468),
    (1.9779984951, -2.4285922050, 0.4505937099),
    (0.0259040371, 0.7827717662, -0.8086757660),
)
_M2_INV = (
    (1.0, 0.3963377774, 0.2158037573),
    (1.0, -0.1055613458, -0.0638541728),
    (1.0, -0.0894841775, -1.2914855480),
)
_M1_INV = (
    (4.0767416621, -3.3077115913, 0.2309699292),
    (-1.2684380046, 2.6097574011, -0.3413193965),
    (-0.0041960863, -0.7034186147, 1.7076147010),
)

Vector = tuple[float, float, float]
Matrix = tuple[Vector, Vector, Vector]


class InvalidColorError(ValueError):
    """Raised when a color string or OKLCH triple cannot form a Color."""


# --- Channel transfer functions (shared with the CVD simulator) ---


def srgb_to_linear(value: float) -> float:
    """Undo sRGB gamma for a channel in [0, 1]."""
    if value <= 0.04045:
        return value / 12.92
    return ((value + 0.055) / 1.055) ** 2.4


def linear_to_srgb(value: float) -> float:
    """Apply sRGB gamma to a linear channel. Negative input stays on the linear segment."""
    if value <= 0.0031308:
        return value * 12.92
    return 1.055 * value ** (1 / 2.4) - 0.055


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity."""
    return math.floor(value + 0.5)


def clamp_channel(value: int) -> int:
    """Clamp an 8-bit channel into [0, 255]."""
    return max(0, min(255, value))


def apply_matrix(matrix: Matrix, vec: Vector) -> Vector:
    """Multiply a row-major 3x3 matrix by a column vector."""
    x, y, z = vec
    return (
        matrix[0][0] * x + matrix[0][1] * y + matrix[0][2] * z,
        matrix[1][0] * x + matrix[1][1] * y + matrix[1][2] * z,
        matrix[2][0] * x + matrix[2][1] * y + matrix[2][2] * z,
    )


def parse_hex(value: str) -> tuple[int, int, int]:
    """Parse ``#rrggbb`` / ``#rgb`` (hash optional) into 8-bit channels."""
    match = HEX_PATTERN.match(value.strip())
    if match is None:
        raise InvalidColorError(f"Invalid color string: {value!r}")
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def format_hex(r: int, g: int, b: int) -> str:
    """Format 8-bit channels as lowercase ``#rrggbb``."""
    return f"#{clamp_channel(r):02x}{clamp_channel(g):02x}{clamp_channel(b):02x}"


class Color(BaseModel):
    """A perceptual color in OKLCH.

    Attributes:
        l: Lightness in [0, 1].
        c: Chroma, >= 0 (about 0.4 at most inside sRGB).
        h: Hue in degrees [0, 360), or None for achromatic colors.
    """

    model_config = {"frozen": True}

    l: float  # noqa: E741
    c: float
    h: float | None = None

    # --- Construction ---

    @classmethod
    def from_oklch(cls, l: float, c: float, h: float | None = None) -> Color:  # noqa: E741
        """Build a color from an explicit OKLCH triple.

        The triple is stored verbatim (hue wrapped into [0, 360)), so
        reading it back is lossless.
        """
        if not math.isfinite(l) or not math.isfinite(c):
            raise InvalidColorError(f"Non-finite OKLCH value: l={l}, c={c}")
        if l < -_LIGHTNESS_TOLERANCE or l > 1 + _LIGHTNESS_TOLERANCE:
            raise InvalidColorError(f"Lightness must be 0-1, got {l}")
        if c < 0:
            raise InvalidColorError(f"Chroma must be >= 0, got {c}")
        hue = None if h is None else h % 360.0
        return cls(l=l, c=c, h=hue)

    @classmethod
    def from_hex(cls, value: str) -> Color:
        """Parse an sRGB hex string into OKLCH."""
        return cls.from_rgb(*parse_hex(value))

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> Color:
        """Convert 8-bit sRGB channels into OKLCH."""
        linear = (
            srgb_to_linear(r / 255),
            srgb_to_linear(g / 255),
            srgb_to_linear(b / 255),
        )
        lms = apply_matrix(_M1, linear)
        lms_ = (math.cbrt(lms[0]), math.cbrt(lms[1]), math.cbrt(lms[2]))
        lightness, a, b_ = apply_matrix(_M2, lms_)

        chroma = math.hypot(a, b_)
        if chroma < ACHROMATIC_EPSILON:
            return cls(l=lightness, c=0.0, h=None)
        hue = math.degrees(math.atan2(b_, a)) % 360.0
        return cls(l=lightness, c=chroma, h=hue)

    # --- Accessors ---

    @property
    def oklch(self) -> tuple[float, float, float | None]:
        """The ``(l, c, h)`` triple."""
        return self.l, self.c, self.h

    @property
    def is_achromatic(self) -> bool:
        return self.h is None

    @property
    def hue_or_zero(self) -> float:
        """Hue for trigonometric use; achromatic colors count as 0 degrees."""
        return 0.0 if self.h is None else self.h

    # --- Conversion back to sRGB ---

    def to_rgb(self) -> tuple[int, int, int]:
        """Convert to 8-bit sRGB, clamping out-of-gamut channels."""
        rad = math.radians(self.hue_or_zero)
        lab = (self.l, self.c * math.cos(rad), self.c * math.sin(rad))
        lms_ = apply_matrix(_M2_INV, lab)
        lms = (lms_[0] ** 3, lms_[1] ** 3, lms_[2] ** 3)
        linear = apply_matrix(_M1_INV, lms)
        channels = [
            round_half_up(min(1.0, max(0.0, linear_to_srgb(v))) * 255) for v in linear
        ]
        return clamp_channel(channels[0]), clamp_channel(channels[1]), clamp_channel(channels[2])

    def to_hex(self) -> str:
        """Lowercase ``#rrggbb`` string."""
        return format_hex(*self.to_rgb())

    def to_css(self) -> str:
        """CSS ``oklch()`` notation."""
        return f"oklch({self.l:.4f} {self.c:.4f} {self.hue_or_zero:.4f})"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def hex(self) -> str:
        return self.to_hex()

    # --- Derived variants ---

    def with_lightness(self, l: float) -> Color:  # noqa: E741
        return Color.from_oklch(l, self.c, self.h)

    def with_chroma(self, c: float) -> Color:
        # An achromatic color gaining chroma is given hue 0.
        hue = self.h if self.h is not None or c == 0 else 0.0
        return Color.from_oklch(self.l, c, hue)

    def with_hue(self, h: float) -> Color:
        return Color.from_oklch(self.l, self.c, h)

    def __str__(self) -> str:
        return self.to_hex()
