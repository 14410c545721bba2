"""Standalone command: create the reference database."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from savctl.commands._base import SavCommand
from savctl.services.setup import SetupService

if TYPE_CHECKING:
    from savctl.commands._context import AppContext


@click.command(
    "init",
    cls=SavCommand,
    examples="""\
  savctl init
  savctl --db /tmp/savings.db init
  savctl --json init""",
)
@click.pass_obj
def init_cmd(app: AppContext) -> None:
    """Create the savings schema and the head office."""
    app.emit(SetupService(app.store).init_database())
