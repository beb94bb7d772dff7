"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Every service op has an entry in ``_OP_RENDERERS``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from gildedrose.output.console import create_console, get_output, style_for_change

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from gildedrose.services.result import ServiceResult

    Renderer = Callable[..., None]


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
    """Render minimal output for ``--quiet`` mode.

    Inventory rows print as ``name, sell_in, quality``; other item lists
    print one name per line.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(_quiet_line(item) for item in items)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _quiet_line(item: dict[str, Any]) -> str:
    if "sell_in" in item and "quality" in item:
        return f"{item['name']}, {item['sell_in']}, {item['quality']}"
    return str(item.get("name", ""))


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="gr.ok")
    op = Text(f"  {result.op}", style="gr.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="gr.key")
    v = Text(str(value), style="gr.name" if key == "name" else "")
    console.print(k, v, sep="", end="")
    console.print()


def _changed(before: int, after: int) -> Text:
    return Text(f"{before} → {after}", style=style_for_change(before, after))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="gr.error")
    op = Text(f"  {result.op}", style="gr.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Inventory renderers ───────────────────────────────────────────────


def _render_inventory(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render update_quality results as a before/after table."""
    _status_line(console, result)
    items: list[dict[str, Any]] = result.data.get("items", [])
    _field(console, "count", result.data.get("count", len(items)))
    if not items:
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Name", style="gr.name")
    table.add_column("Sell In", justify="right")
    table.add_column("Quality", justify="right")

    for item in items:
        table.add_row(
            str(item["name"]),
            _changed(item["sell_in_before"], item["sell_in"]),
            _changed(item["quality_before"], item["quality"]),
        )

    console.print()
    console.print(table)


def _render_rules(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render describe_rules results as a name-to-rule table."""
    _status_line(console, result)
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Name", style="gr.name")
    table.add_column("Quality Rule")
    table.add_column("Sell-In Rule")
    if verbose:
        table.add_column("Special", style="gr.special")

    for item in result.data.get("items", []):
        row: list[str] = [item["name"], item["quality_rule"], item["sell_in_rule"]]
        if verbose:
            row.append("yes" if item["special"] else "default")
        table.add_row(*row)

    console.print(table)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Renderer] = {
    "update_quality": _render_inventory,
    "describe_rules": _render_rules,
}
