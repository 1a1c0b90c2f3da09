"""CVD confusion detection over an ordered list of colors.

Uses the shared :data:`DISTINGUISHABILITY_THRESHOLD` so boundary checks
and confusion checks agree on what "too close" means.
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel

from cvdctl.domain.cvd import CVDType, all_cvd_types, simulate
from cvdctl.domain.distance import simple_delta_e
from cvdctl.domain.distinguishability import DISTINGUISHABILITY_THRESHOLD, NamedColor


class CvdConfusionPair(BaseModel):
    """Two positions that look alike under one CVD type."""

    model_config = {"frozen": True}

    index1: int
    index2: int
    cvd_type: CVDType
    cvd_delta_e: float


def detect_color_conflicts(
    colors: Sequence[NamedColor],
    adjacent_only: bool,
    threshold: float = DISTINGUISHABILITY_THRESHOLD,
) -> list[int]:
    """Return boundary indices where colors sit closer than *threshold*.

    With *adjacent_only*, index ``i`` marks a conflict between positions
    ``i`` and ``i + 1``. Otherwise every pair is compared and ``i`` is the
    first index of a conflicting pair, recorded once.
    """
    conflicts: list[int] = []

    if adjacent_only:
        for i in range(len(colors) - 1):
            if simple_delta_e(colors[i].color, colors[i + 1].color) < threshold:
                conflicts.append(i)
        return conflicts

    for i in range(len(colors)):
        for j in range(i + 1, len(colors)):
            if simple_delta_e(colors[i].color, colors[j].color) < threshold:
                if i not in conflicts:
                    conflicts.append(i)
                break
    return conflicts


def detect_cvd_confusion_pairs(
    colors: Sequence[NamedColor],
    threshold: float = DISTINGUISHABILITY_THRESHOLD,
) -> list[CvdConfusionPair]:
    """Find pairs that are distinct to normal vision but merge under CVD.

    Pairs already closer than *threshold* under normal vision are skipped:
    they are a problem regardless of color vision.
    """
    pairs: list[CvdConfusionPair] = []
    simulated = [
        {cvd_type: simulate(item.color, cvd_type) for cvd_type in all_cvd_types()}
        for item in colors
    ]

    for i in range(len(colors)):
        for j in range(i + 1, len(colors)):
            if simple_delta_e(colors[i].color, colors[j].color) < threshold:
                continue
            for cvd_type in all_cvd_types():
                cvd_delta_e = simple_delta_e(simulated[i][cvd_type], simulated[j][cvd_type])
                if cvd_delta_e < threshold:
                    pairs.append(
                        CvdConfusionPair(
                            index1=i,
                            index2=j,
                            cvd_type=cvd_type,
                            cvd_delta_e=cvd_delta_e,
                        )
                    )
    return pairs


def group_pairs_by_cvd_type(
    pairs: Sequence[CvdConfusionPair],
) -> dict[CVDType, list[CvdConfusionPair]]:
    """Group confusion pairs by CVD type, keeping first-seen order."""
    grouped: dict[CVDType, list[CvdConfusionPair]] = {}
    for pair in pairs:
        grouped.setdefault(pair.cvd_type, []).append(pair)
    return grouped
