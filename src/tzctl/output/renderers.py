"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from tzctl.output.console import create_console, get_output, style_for_offset
from tzctl.output.formatters import OutputSettings

if TYPE_CHECKING:
    from rich.console import Console

    from tzctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    show_date: bool = True,
    show_delta: bool = True,
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()
    opts = OutputSettings(verbose=verbose, show_date=show_date, show_delta=show_delta)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, opts)
    else:
        _render_error(result, console, opts)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Conversions and zone listings print one ``ZONE<TAB>VALUE`` line per
    row; everything else prints a single status line.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if isinstance(items, list) and items:
        return "\n".join(_quiet_line(item) for item in items)
    if result.op == "resolve_offset":
        return str(result.data.get("offset", ""))
    if "tracked" in result.data:
        return "\n".join(result.data["tracked"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _quiet_line(item: dict[str, Any]) -> str:
    zone = item.get("zone", "")
    if item.get("error"):
        return f"{zone}\tERROR"
    value = item.get("time") if "delta" in item else item.get("offset")
    return f"{zone}\t{value}"


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    console.print(Text("OK", style="tz.ok"), Text(f"  {result.op}", style="tz.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="tz.key")
    if key in ("zone", "source"):
        v = Text(str(value), style="tz.zone")
    elif isinstance(value, (dict, list)):
        v = Text(_json.dumps(value, separators=(",", ":")))
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _offset_text(item: dict[str, Any]) -> Text:
    return Text(str(item.get("offset", "")), style=style_for_offset(item.get("offset_minutes")))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a hierarchical span tree with color-coded timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    if duration > 100:
        style = "bold red"
    elif duration > 10:
        style = "yellow"
    else:
        style = "dim"

    line = f"{prefix}[{style}]{duration:>8.3f}ms[/{style}]  {name}"
    annotations = span_data.get("annotations") or {}
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, opts: OutputSettings) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="tz.error")
    op = Text(f"  {result.op}", style="tz.op")
    console.print(label, op, Text(" — "), msg, sep="")

    if opts.verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Conversion renderers ──────────────────────────────────────────────


def _render_convert(result: ServiceResult, console: Console, opts: OutputSettings) -> None:
    """Render a conversion as a source line plus one table row per target."""
    d = result.data
    _status_line(console, result)
    _field(console, "source", d["source"])
    console.print(
        Text("  input: ", style="tz.key"),
        Text(d["input"], style="tz.time"),
        Text(f"  ({d['source_offset']})", style=style_for_offset(d["source_offset_minutes"])),
        sep="",
    )
    if opts.verbose:
        _field(console, "instant", d["instant"])

    items: list[dict[str, Any]] = d.get("items", [])
    if not items:
        console.print(Text("  (no target zones)", style="dim"))
    else:
        console.print(_conversion_table(items, opts))

    if opts.verbose:
        _render_meta(console, result)


def _conversion_table(items: list[dict[str, Any]], opts: OutputSettings) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Zone", style="tz.zone", no_wrap=True)
    table.add_column("Time", style="tz.time")
    if opts.show_date:
        table.add_column("Date", style="tz.date")
    table.add_column("Offset")
    if opts.show_delta:
        table.add_column("Delta", justify="right")

    for item in items:
        if not item.get("ok", True):
            message = item.get("error", {}).get("message", "failed")
            row: list[str | Text] = [item["zone"], Text(message, style="tz.error")]
            if opts.show_date:
                row.append("")
            row.append("")
            if opts.show_delta:
                row.append("")
            table.add_row(*row)
            continue
        row = [item["zone"], item["time"]]
        if opts.show_date:
            row.append(item["date"])
        row.append(_offset_text(item))
        if opts.show_delta:
            row.append(item["delta"])
        table.add_row(*row)
    return table


def _render_zone_list(result: ServiceResult, console: Console, opts: OutputSettings) -> None:
    """Render the catalog with offsets at the queried instant."""
    d = result.data
    _status_line(console, result)
    _field(console, "instant", d["instant"])
    _field(console, "count", d["count"])

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Zone", style="tz.zone", no_wrap=True)
    table.add_column("Offset")
    table.add_column("Local time", style="tz.time")
    if opts.show_date:
        table.add_column("Date", style="tz.date")
    for item in d.get("items", []):
        if item.get("error"):
            row: list[str | Text] = [item["zone"], Text(item["error"]["message"], style="tz.error")]
            row.extend([""] * (2 if opts.show_date else 1))
        else:
            row = [item["zone"], _offset_text(item), item["time"]]
            if opts.show_date:
                row.append(item["date"])
        table.add_row(*row)
    console.print(table)

    if opts.verbose:
        _render_meta(console, result)


def _render_offset(result: ServiceResult, console: Console, opts: OutputSettings) -> None:
    """Render a single offset lookup."""
    d = result.data
    _status_line(console, result)
    _field(console, "zone", d["zone"])
    _field(console, "instant", d["instant"])
    console.print(Text("  offset: ", style="tz.key"), _offset_text(d), sep="")
    _field(console, "local", f"{d['date']}T{d['time']}")
    if opts.verbose:
        _render_meta(console, result)


# ── Board renderers ───────────────────────────────────────────────────


def _render_board_state(result: ServiceResult, console: Console, opts: OutputSettings) -> None:
    """Render add/remove/source/at/now/list results."""
    d = result.data
    _status_line(console, result)
    if "zone" in d:
        _field(console, "zone", d["zone"])
    _field(console, "source", d["source"])
    _field(console, "input", d["input"])
    tracked = d.get("tracked", [])
    _field(console, "tracked", ", ".join(tracked) if tracked else "(none)")


def _render_help(result: ServiceResult, console: Console, opts: OutputSettings) -> None:
    for line in result.data.get("commands", []):
        console.print(f"  {line}")


def _render_quit(result: ServiceResult, console: Console, opts: OutputSettings) -> None:
    console.print(Text("bye", style="dim"))


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, opts: OutputSettings) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if opts.verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_Renderer = Callable[["ServiceResult", "Console", OutputSettings], None]

_OP_RENDERERS: dict[str, _Renderer] = {
    # Conversion
    "convert": _render_convert,
    # Catalog
    "list_zones": _render_zone_list,
    "resolve_offset": _render_offset,
    # Board
    "add": _render_board_state,
    "remove": _render_board_state,
    "source": _render_board_state,
    "at": _render_board_state,
    "now": _render_board_state,
    "list": _render_board_state,
    "help": _render_help,
    "quit": _render_quit,
}
