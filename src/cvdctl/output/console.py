"""Rich Console factory and theme for cvdctl output.

Consoles render into a StringIO buffer so every renderer keeps the
``format_result() -> str`` contract. Under CliRunner and pipes Rich
detects no terminal and emits plain text.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

CVD_THEME = Theme(
    {
        "cvd.ok": "bold green",
        "cvd.error": "bold red",
        "cvd.warning": "bold yellow",
        "cvd.op": "bold cyan",
        "cvd.key": "dim",
        "cvd.name": "bold",
        "cvd.hex": "blue",
        "cvd.score": "magenta",
        "cvd.grade.good": "bold green",
        "cvd.grade.fair": "bold yellow",
        "cvd.grade.poor": "bold red",
    }
)

_SEVERITY_STYLES: dict[str, str] = {
    "ok": "cvd.ok",
    "warning": "cvd.warning",
    "error": "cvd.error",
}

_GRADE_STYLES: dict[str, str] = {
    "A": "cvd.grade.good",
    "B": "cvd.grade.good",
    "C": "cvd.grade.fair",
    "D": "cvd.grade.poor",
    "F": "cvd.grade.poor",
}

SWATCH = "██"


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (keeps table layout stable in tests).
    """
    return Console(
        file=StringIO(),
        theme=CVD_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_severity(severity: str) -> str:
    return _SEVERITY_STYLES.get(severity, "")


def style_for_grade(grade: str) -> str:
    return _GRADE_STYLES.get(grade, "")


def swatch(hex_value: str) -> Text:
    """A two-cell block painted in *hex_value*, followed by the hex code."""
    text = Text(SWATCH, style=hex_value)
    text.append(f" {hex_value}", style="cvd.hex")
    return text
