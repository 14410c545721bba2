"""Rich Console factory and theme for savctl output.

Consoles render into a StringIO buffer so formatters keep a plain
``-> str`` contract. Outside a terminal (tests, pipes) Rich drops color
codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

SAV_THEME = Theme(
    {
        "sav.ok": "bold green",
        "sav.error": "bold red",
        "sav.warning": "bold yellow",
        "sav.op": "bold cyan",
        "sav.key": "dim",
        "sav.account": "bold blue",
        "sav.amount": "magenta",
        "sav.status.active": "green",
        "sav.status.closed": "dim",
        "sav.status.pending": "yellow",
    }
)

_STATUS_STYLES: dict[str, str] = {
    "active": "sav.status.active",
    "closed": "sav.status.closed",
    "matured": "sav.status.closed",
    "submitted_and_pending_approval": "sav.status.pending",
    "approved": "sav.status.pending",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=SAV_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_status(status: str) -> str:
    return _STATUS_STYLES.get(status, "")
