"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Opens the store lazily so ``--help`` and
``--version`` never touch the database, and centralizes result output
(stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from savctl.config.logging import configure_logging
from savctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from savctl.config.settings import SavSettings
    from savctl.domain.context import RequestContext
    from savctl.infrastructure.store import Store
    from savctl.services.result import ServiceResult


class AppContext:
    """State shared by every command in one invocation."""

    def __init__(self, settings: SavSettings) -> None:
        self.settings = settings
        self._store: Store | None = None
        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            sql_echo=settings.database.echo,
        )

    @property
    def store(self) -> Store:
        """The store (opened on first access)."""
        if self._store is None:
            from savctl.infrastructure.store import Store

            self._store = Store(self.settings)
        return self._store

    def require_database(self) -> Store:
        """The store, refusing to go on when its SQLite file is missing.

        Read commands must not create a database as a side effect.
        """
        store = self.store
        if not store.exists:
            msg = f"No database at {store.db_path}; run 'savctl init' first."
            raise click.ClickException(msg)
        return store

    def request_context(self) -> RequestContext:
        """Explicit request context for the configured operator."""
        return self.settings.operator_context()

    def close(self) -> None:
        if self._store is not None:
            self._store.close()
            self._store = None

    def emit(self, result: ServiceResult) -> None:
        """Print a ServiceResult and set the exit status.

        Success goes to stdout (warnings to stderr outside JSON mode).
        Failure goes to stderr and exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
