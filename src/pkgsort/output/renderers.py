"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Every op a service emits has an entry in ``_OP_RENDERERS``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from pkgsort.output.console import create_console, get_output, style_for_stack

if TYPE_CHECKING:
    from rich.console import Console

    from pkgsort.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS[result.op]
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        code = result.error.code if result.error else "Unknown"
        return f"ERROR: {result.op} {code}"
    classification = result.data.get("classification")
    if classification:
        return str(classification)
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _number(value: float) -> str:
    """Group thousands and drop a trailing ``.0`` (1000000.0 -> ``1,000,000``)."""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,}"


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="pkg.ok")
    op = Text(f"  {result.op}", style="pkg.op")
    console.print(label, op, sep="")


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="pkg.key")
    if key == "classification":
        v = Text(str(value), style=style_for_stack(str(value)))
    elif isinstance(value, float):
        v = Text(_number(value))
    elif isinstance(value, list):
        v = Text(", ".join(str(item) for item in value) or "-")
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry timing (verbose only)."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry" and isinstance(v, dict):
            duration = v.get("duration_ms", 0.0)
            console.print(f"    [dim]{duration:>8.3f}ms[/dim]  {v.get('name', '?')}")
        else:
            console.print(f"    {k}: {v}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_classify(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    data = result.data
    _status_line(console, result)
    _field(console, "classification", data.get("classification", ""))
    _field(console, "bulky", data.get("bulky"))
    _field(console, "heavy", data.get("heavy"))
    if verbose:
        _field(console, "volume_cm3", data.get("volume_cm3"))
        _field(console, "reasons", data.get("reasons", []))
        _render_meta(console, result)


def _render_thresholds(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    _status_line(console, result)
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Threshold", style="pkg.key")
    table.add_column("Value", justify="right")
    for key, value in result.data.items():
        table.add_row(key, _number(value) if isinstance(value, (int, float)) else str(value))
    console.print(table)
    if verbose:
        _render_meta(console, result)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    label = Text("ERROR", style="pkg.error")
    op = Text(f"  {result.op}", style="pkg.op")
    console.print(label, op, sep="")
    if result.error is None:
        console.print("  Unknown error")
        return
    code = Text(f"  {result.error.code}: ", style="pkg.error")
    console.print(code, Text(result.error.message), sep="")
    if verbose and result.error.detail:
        for key, value in result.error.detail.items():
            _field(console, key, value)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "classify": _render_classify,
    "thresholds": _render_thresholds,
}
