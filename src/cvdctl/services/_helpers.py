"""Parsing helpers for CLI-style color and weight specs."""

from __future__ import annotations

from collections.abc import Sequence

from cvdctl.domain.color import Color, InvalidColorError
from cvdctl.domain.cvd import CVDType
from cvdctl.domain.distinguishability import NamedColor


class DuplicateNameError(ValueError):
    """Raised when two color specs share a name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Duplicate color name: {name!r}")
        self.name = name


class WeightSpecError(ValueError):
    """Raised for a malformed ``TYPE=WEIGHT`` spec."""


def parse_color_spec(spec: str) -> NamedColor:
    """Parse ``NAME=HEX`` or a bare ``HEX`` (the hex doubles as the name).

    Examples:
        >>> parse_color_spec("primary=#0055ff").name
        'primary'
        >>> parse_color_spec("#FF0000").name
        '#ff0000'
    """
    name, sep, value = spec.partition("=")
    if not sep:
        color = Color.from_hex(spec)
        return NamedColor(name=color.to_hex(), color=color)
    name = name.strip()
    if not name:
        raise InvalidColorError(f"Missing name in color spec: {spec!r}")
    return NamedColor(name=name, color=Color.from_hex(value))


def parse_color_specs(specs: Sequence[str]) -> list[NamedColor]:
    """Parse specs in order, rejecting duplicate names."""
    seen: set[str] = set()
    colors: list[NamedColor] = []
    for spec in specs:
        named = parse_color_spec(spec)
        if named.name in seen:
            raise DuplicateNameError(named.name)
        seen.add(named.name)
        colors.append(named)
    return colors


def parse_weight_specs(specs: Sequence[str]) -> dict[CVDType, float]:
    """Parse ``TYPE=WEIGHT`` specs such as ``tritanopia=0.5``."""
    weights: dict[CVDType, float] = {}
    for spec in specs:
        key, sep, value = spec.partition("=")
        if not sep:
            raise WeightSpecError(f"Expected TYPE=WEIGHT, got {spec!r}")
        try:
            cvd_type = CVDType(key.strip().lower())
        except ValueError as exc:
            raise WeightSpecError(f"Unknown CVD type: {key!r}") from exc
        try:
            weights[cvd_type] = float(value)
        except ValueError as exc:
            raise WeightSpecError(f"Weight is not a number: {value!r}") from exc
    return weights
