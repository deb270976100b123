"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from cusiptool.output.console import create_console, get_output

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from cusiptool.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.op == "check":
        _render_check(result, console, verbose=verbose)
    elif result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if result.op == "check":
        return str(result.data.get("summary", ""))

    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(str(item["id"]) for item in items if item.get("id"))

    if "id" in result.data:
        return str(result.data["id"])

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="cusip.ok")
    op = Text(f"  {result.op}", style="cusip.op")
    console.print(label, op, sep="", end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="cusip.key")
    if key in ("id", "suggestion"):
        v = Text(str(value), style="cusip.id")
    elif key == "check_digit":
        v = Text(str(value), style="cusip.digit")
    else:
        v = Text(str(value))
    console.print(k, v, sep="", end="")
    console.print()


def _item_table(items: list[dict[str, Any]], *, verbose: bool = False) -> Table:
    """Build a Rich Table of parse outcomes."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Input", no_wrap=True)
    table.add_column("Status")
    table.add_column("Detail")
    if verbose:
        table.add_column("Issuer", style="dim")
        table.add_column("Issue", style="dim")

    for item in items:
        if item.get("valid"):
            status = Text("valid", style="cusip.valid")
            detail = Text(f"check digit {item['check_digit']}")
        else:
            status = Text("invalid", style="cusip.invalid")
            detail = Text(item["error"]["message"])
            if item.get("suggestion"):
                detail.append(f" (fix: {item['suggestion']})", style="cusip.id")
        row: list[str | Text] = [Text(item["input"]), status, detail]
        if verbose:
            row += [str(item.get("issuer", "")), str(item.get("issue", ""))]
        table.add_row(*row)

    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="cusip.error")
    op = Text(f"  {result.op}", style="cusip.op")
    dash = Text(" — ")
    console.print(label, op, dash, Text(msg), sep="")

    items = result.data.get("items")
    if items and len(items) > 1:
        console.print(_item_table(items, verbose=verbose))
    elif verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_parse(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    items = result.data.get("items", [])
    if len(items) == 1:
        item = items[0]
        for key in ("id", "issuer", "issue", "check_digit"):
            _field(console, key, item[key])
    else:
        _field(console, "count", result.data.get("count", len(items)))
        console.print(_item_table(items, verbose=verbose))


def _render_repair(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    _field(console, "id", d["id"])
    _field(console, "changed", d.get("changed", False))
    if verbose and "was" in d:
        _field(console, "was", d["was"])
        _field(console, "expected", d["expected"])


def _render_check_digit(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "check_digit", result.data["check_digit"])
    _field(console, "id", result.data["id"])


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the summary line, plus the raw counts when verbose."""
    console.print(Text(str(result.data.get("summary", ""))))
    if verbose:
        for key in ("total", "good", "bad", "fixed", "omitted"):
            if key in result.data:
                _field(console, key, result.data[key])


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "parse": _render_parse,
    "repair": _render_repair,
    "check_digit": _render_check_digit,
    "check": _render_check,
}
