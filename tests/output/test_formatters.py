"""Tests for output mode selection."""

from __future__ import annotations

import json

from cvdctl.output.formatters import OutputSettings, format_result
from cvdctl.services.result import ErrorCode, ServiceResult

SCORE = ServiceResult(
    ok=True,
    op="score",
    data={
        "overall_score": 82.5,
        "grade": "B",
        "description": "Good",
        "scores_by_type": {"protanopia": 75.0},
        "weights": {"protanopia": 0.3},
        "report": None,
    },
    warnings=["careful"],
)


class TestFormatResult:
    def test_json(self) -> None:
        output = format_result(SCORE, settings=OutputSettings(json_output=True))
        parsed = json.loads(output)
        assert parsed["ok"] is True
        assert parsed["data"]["grade"] == "B"
        assert parsed["warnings"] == ["careful"]

    def test_json_wins_over_quiet(self) -> None:
        output = format_result(SCORE, settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(output)["op"] == "score"

    def test_quiet(self) -> None:
        assert format_result(SCORE, settings=OutputSettings(quiet=True)) == "82.5 B"

    def test_quiet_failure(self) -> None:
        failed = ServiceResult.failure("simulate", ErrorCode.INVALID_COLOR, "bad color")
        assert format_result(failed, settings=OutputSettings(quiet=True)) == (
            "ERROR: simulate — bad color"
        )

    def test_default_is_rich(self) -> None:
        output = format_result(SCORE)
        assert "Score: 82.5/100" in output
        assert "Grade: B" in output
