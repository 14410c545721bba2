"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op``; unknown ops fall through to a
generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from savctl.output.console import create_console, get_output, style_for_status

if TYPE_CHECKING:
    from rich.console import Console

    from savctl.services.result import ServiceResult


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
    """Minimal output: account numbers for pages, a status line otherwise."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("pageItems")
    if isinstance(items, list):
        return "\n".join(str(item.get("account_no", "")) for item in items)
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="sav.ok"), Text(f"  {result.op}", style="sav.op"))


def _field(console: Console, key: str, value: Any) -> None:
    console.print(Text(f"  {key}: ", style="sav.key"), Text(str(value)), sep="")


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="sav.error"), Text(f"  {result.op}", style="sav.op"), "—", Text(msg)
    )
    if err and err.detail.get("field"):
        _field(console, "field", err.detail["field"])
    if verbose and err:
        for key, value in err.detail.items():
            if key != "field":
                _field(console, key, value)


# ── Search ────────────────────────────────────────────────────────────


def _account_table(items: list[dict[str, Any]], *, verbose: bool) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Account", style="sav.account", no_wrap=True)
    table.add_column("Owner")
    table.add_column("Office")
    table.add_column("Product")
    table.add_column("Status")
    table.add_column("Balance", style="sav.amount", justify="right")
    if verbose:
        table.add_column("External ID", style="dim")
        table.add_column("Officer", style="dim")

    for item in items:
        status = str(item.get("status", ""))
        owner = item.get("client_name") or item.get("group_name") or ""
        row: list[Any] = [
            str(item.get("account_no", "")),
            str(owner),
            str(item.get("office_name", "")),
            str(item.get("product_name", "")),
            Text(status, style=style_for_status(status)),
            f"{item.get('currency_code', '')} {item.get('account_balance', '')}",
        ]
        if verbose:
            row.append(str(item.get("external_id") or ""))
            row.append(str(item.get("field_officer_name") or ""))
        table.add_row(*row)
    return table


def _render_page(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("pageItems", [])
    total = result.data.get("totalFilteredRecords", len(items))
    if items:
        console.print(_account_table(items, verbose=verbose))
        console.print()
    meta = result.meta or {}
    offset = int(meta.get("offset", 0))
    if items:
        console.print(f"{offset + 1}-{offset + len(items)} of {total} accounts")
    else:
        console.print(f"0 of {total} accounts")


# ── Init ──────────────────────────────────────────────────────────────


def _render_init(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("database", "created", "tables", "head_office"):
        if key in result.data:
            _field(console, key, result.data[key])


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Any] = {
    "retrieve_all": _render_page,
    "init_database": _render_init,
}
