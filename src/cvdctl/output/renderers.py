"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO); the caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from cvdctl.output.console import (
    create_console,
    get_output,
    style_for_grade,
    style_for_severity,
    swatch,
)

if TYPE_CHECKING:
    from rich.console import Console

    from cvdctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render one status line for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    d = result.data
    if result.op == "score":
        return f"{d['overall_score']} {d['grade']}"
    if result.op in ("check_palette", "check_adjacent", "check_background_text"):
        return f"OK: {result.op} {d['count']} issues, {d['pass_rate']:.1f}% pass"
    if result.op == "suggest":
        return f"OK: suggest {d['improvable_count']}/{d['count']} improvable"
    if result.op == "detect":
        return f"OK: detect {d['count']} confusions"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    line = Text("OK", style="cvd.ok")
    line.append(f"  {result.op}", style="cvd.op")
    console.print(line)


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    line = Text(f"  {key}: ", style="cvd.key")
    if isinstance(value, Text):
        line.append_text(value)
    elif key == "name":
        line.append(str(value), style="cvd.name")
    else:
        line.append(str(value))
    console.print(line)


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if isinstance(v, dict):
            console.print(f"    {k}:")
            for sk, sv in v.items():
                console.print(f"      {sk}: {sv}", markup=False)
        else:
            console.print(f"    {k}: {v}", markup=False)


def _pair_label(pair: list[str] | tuple[str, str]) -> str:
    return f"{pair[0]} / {pair[1]}"


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    line = Text("ERROR", style="cvd.error")
    line.append(f"  {result.op}", style="cvd.op")
    line.append(f" — {msg}")
    console.print(line)
    if err and verbose:
        console.print(Text(f"  code: {err.code}", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}", markup=False)


# ── Color renderers ───────────────────────────────────────────────────


def _render_simulate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render one color's appearance under each CVD type."""
    d = result.data
    _status_line(console, result)
    _field(console, "name", d["name"])
    _field(console, "color", swatch(d["hex"]))
    oklch = d["oklch"]
    hue = "none" if oklch["h"] is None else f"{oklch['h']:.1f}"
    _field(console, "oklch", f"L={oklch['l']:.3f} C={oklch['c']:.3f} H={hue}")

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Vision")
    table.add_column("Appears as")
    table.add_column("ΔE", style="cvd.score", justify="right")
    for item in d["simulations"]:
        table.add_row(item["label"], swatch(item["hex"]), f"{item['delta_e']:.2f}")
    console.print()
    console.print(table)


def _render_delta_e(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "pair", _pair_label(d["pair"]))
    _field(console, d["pair"][0], swatch(d["hexes"][0]))
    _field(console, d["pair"][1], swatch(d["hexes"][1]))
    _field(console, "simple ΔE", f"{d['simple']:.2f}")
    _field(console, "weighted ΔE", f"{d['weighted']:.2f}")


# ── Validation renderers ──────────────────────────────────────────────


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render problematic pairs for any of the three check modes."""
    d = result.data
    _status_line(console, result)
    _field(console, "mode", d["mode"])
    _field(console, "checks", d["total_checks"])
    _field(console, "pass rate", f"{d['pass_rate']:.1f}%")

    issues = d["issues"]
    if not issues:
        console.print()
        console.print(Text("No problematic color pairs found.", style="cvd.ok"))
    else:
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        table.add_column("Pair", style="cvd.name")
        table.add_column("Vision")
        table.add_column("Normal ΔE", justify="right")
        table.add_column("CVD ΔE", style="cvd.score", justify="right")
        table.add_column("Severity")
        for issue in issues:
            severity = issue["severity"]
            table.add_row(
                Text(_pair_label(issue["pair"])),
                issue["vision_type"],
                f"{issue['normal_delta_e']:.2f}",
                f"{issue['simulated_delta_e']:.2f}",
                Text(severity, style=style_for_severity(severity)),
            )
        console.print()
        console.print(table)
        console.print(f"\n{d['count']} issues")

    if verbose:
        counts = ", ".join(f"{t}={n}" for t, n in d["issues_by_type"].items())
        _field(console, "by type", counts)
        _render_meta(console, result)


def _render_score(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    if d.get("report"):
        console.print(d["report"], markup=False)
        return

    grade = d["grade"]
    line = Text("Score: ")
    line.append(f"{d['overall_score']}/100", style="cvd.score")
    line.append("  Grade: ")
    line.append(grade, style=style_for_grade(grade))
    console.print(line)
    console.print(f"  {d['description']}")

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Vision")
    table.add_column("Score", style="cvd.score", justify="right")
    table.add_column("Weight", justify="right")
    for cvd_type, score in d["scores_by_type"].items():
        table.add_row(cvd_type, f"{score:.1f}", f"{d['weights'].get(cvd_type, 0.0):.2f}")
    console.print()
    console.print(table)


def _render_suggest(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render ranked adjustments per failing pair."""
    d = result.data
    if d.get("report"):
        console.print(d["report"], markup=False)
        return

    _status_line(console, result)
    if not d["improvements"]:
        console.print()
        console.print(Text("All color pairs are distinguishable.", style="cvd.ok"))
        return

    for item in d["improvements"]:
        console.print()
        header = Text(_pair_label(item["pair"]), style="cvd.name")
        header.append(
            f"  {item['vision_type']}  ΔE {item['original_delta_e']:.2f}"
            f" → {item['target_delta_e']:.2f}"
        )
        console.print(header)
        if not item["suggestions"]:
            console.print(Text("  No effective adjustment found", style="cvd.warning"))
            continue

        table = Table(show_header=True, show_lines=False, pad_edge=True, expand=False)
        table.add_column("Adjust")
        table.add_column("Color", style="cvd.name")
        table.add_column("Direction")
        table.add_column("From")
        table.add_column("To")
        table.add_column("New ΔE", style="cvd.score", justify="right")
        for s in item["suggestions"]:
            table.add_row(
                s["type"],
                Text(s["target_color"]),
                s["direction"],
                swatch(s["original_hex"]),
                swatch(s["suggested_hex"]),
                f"{s['new_delta_e']:.2f}",
            )
        console.print(table)

    if verbose:
        _render_meta(console, result)


def _render_detect(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "threshold", d["threshold"])

    if not d["pairs"]:
        console.print()
        console.print(Text("No CVD-only confusions found.", style="cvd.ok"))
    else:
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        table.add_column("#", justify="right")
        table.add_column("Pair", style="cvd.name")
        table.add_column("Vision")
        table.add_column("CVD ΔE", style="cvd.score", justify="right")
        for p in d["pairs"]:
            table.add_row(
                f"{p['index1']}-{p['index2']}",
                Text(_pair_label(p["pair"])),
                p["cvd_type"],
                f"{p['cvd_delta_e']:.2f}",
            )
        console.print()
        console.print(table)
        console.print(f"\n{d['count']} confusions")

    if d["conflicts"]:
        _field(console, "adjacent conflicts", ", ".join(str(i) for i in d["conflicts"]))


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "simulate": _render_simulate,
    "delta_e": _render_delta_e,
    "check_palette": _render_check,
    "check_adjacent": _render_check,
    "check_background_text": _render_check,
    "score": _render_score,
    "suggest": _render_suggest,
    "detect": _render_detect,
}
