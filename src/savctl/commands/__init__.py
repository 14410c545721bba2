"""Subcommand modules for savctl.

Provides register_commands(), which imports command modules lazily so
``savctl --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``accounts`` group and the standalone ``init`` command."""
    from savctl.commands.accounts import accounts
    from savctl.commands.init_cmd import init_cmd

    cli.add_command(accounts)
    cli.add_command(init_cmd)
