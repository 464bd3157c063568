"""Operation-specific Rich renderers for ServiceResult.

Each renderer prints to a recording Rich Console; :func:`render_result`
exports what was recorded, with ANSI styles only when stdout is a terminal.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
import sys
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

if TYPE_CHECKING:
    from collections.abc import Callable

    from cyberdocs.services.result import ServiceResult


THEME = Theme(
    {
        "docs.ok": "bold green",
        "docs.error": "bold red",
        "docs.op": "bold cyan",
        "docs.key": "dim",
        "docs.id": "bold blue",
        "docs.uri": "underline",
        "docs.kind.binary-resource": "magenta",
        "docs.kind.text-resource": "green",
        "docs.kind.tool": "yellow",
    }
)


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult for humans.

    Plain text inside Click's CliRunner and when piped.
    """
    # Document bodies are printed verbatim, never through Rich markup.
    if result.ok and result.op == "show":
        return _show_payload(result)

    console = _recording_console()
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return console.export_text(styles=console.is_terminal).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"
    if result.op == "show":
        return _show_payload(result)

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(str(item.get("key") or item.get("id", "")) for item in items)
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _recording_console() -> Console:
    return Console(
        file=StringIO(),
        record=True,
        theme=THEME,
        highlight=False,
        width=120,
        force_terminal=sys.stdout.isatty(),
    )


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "docs.ok"), (f"  {result.op}", "docs.op")))


def _show_payload(result: ServiceResult) -> str:
    """Text for ``show``: the body for text/tool forms, JSON for binary."""
    data = result.data
    if data.get("form") == "binary":
        return json.dumps({"contents": data["contents"]}, indent=2)
    if data.get("form") == "tool":
        return str(data["content"][0]["text"])
    return str(data["contents"][0]["text"])


# ── Renderers ─────────────────────────────────────────────────────────


def _render_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Document", style="docs.id")
    table.add_column("Kind")
    table.add_column("Key", style="docs.uri")
    if verbose:
        table.add_column("Name")
        table.add_column("MIME type", style="docs.key")

    for item in result.data.get("items", []):
        row = [
            item["document"],
            Text(item["kind"], style=f"docs.kind.{item['kind']}"),
            item["key"],
        ]
        if verbose:
            row += [item["name"], item.get("mime_type") or ""]
        table.add_row(*row)

    console.print(table)
    console.print(
        f"{result.data.get('count', 0)} registrations for "
        f"{result.data.get('documents', 0)} documents",
        style="docs.key",
    )


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for item in result.data.get("items", []):
        console.print(
            Text.assemble(
                ("  ok ", "docs.ok"),
                (item["id"], "docs.id"),
                (f"  {item['bytes']} bytes", "docs.key"),
            )
        )


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            value = json.dumps(value, separators=(",", ":"), ensure_ascii=False)
        console.print(Text.assemble((f"  {key}: ", "docs.key"), str(value)))


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    error = result.error
    console.print(Text.assemble(("ERROR", "docs.error"), (f"  {result.op}", "docs.op")))
    if error is None:
        console.print("  Unknown error")
        return
    console.print(f"  {error.message}", markup=False)
    known = error.detail.get("known")
    if known:
        console.print(Text(f"  known documents: {', '.join(known)}", style="docs.key"))
    for item in error.detail.get("items", []):
        if not item.get("readable", True):
            console.print(
                Text.assemble(
                    ("  missing ", "docs.error"),
                    (item["id"], "docs.id"),
                    (f"  {item.get('reason', '')}", "docs.key"),
                )
            )
    if verbose and error.detail:
        console.print(
            Text(f"  detail: {json.dumps(error.detail, ensure_ascii=False)}", style="docs.key")
        )


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "list": _render_list,
    "check": _render_check,
}
