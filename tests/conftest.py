"""Shared pytest fixtures and test helpers for savctl tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner
from sqlalchemy import insert, select
from sqlalchemy.engine import Engine

from savctl.config.settings import SavSettings
from savctl.domain.context import RequestContext
from savctl.infrastructure.database.engine import init_database
from savctl.infrastructure.database.schema import (
    clients,
    groups,
    offices,
    savings_accounts,
    savings_products,
    staff,
)
from savctl.infrastructure.store import Store


@pytest.fixture(autouse=True)
def _no_ambient_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's SAVCTL_* environment out of the tests."""
    for var in ("SAVCTL_CONFIG", "SAVCTL_ROOT", "SAVCTL_DATABASE__URL", "SAVCTL_DATABASE__PATH"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Restore root, savctl and SQL logger state; CLI invocations reconfigure them."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    tracked = [logging.getLogger(name) for name in ("savctl", "sqlalchemy.engine")]
    levels = [logger.level for logger in tracked]
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    for logger, level in zip(tracked, levels, strict=True):
        logger.setLevel(level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_engine(tmp_path: Path) -> Iterator[Engine]:
    """Initialized SQLite engine with all tables and the head office."""
    engine = init_database(tmp_path / "test.db")
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def settings(tmp_path: Path) -> SavSettings:
    return SavSettings.from_cli(root=tmp_path)


@pytest.fixture
def store(settings: SavSettings) -> Iterator[Store]:
    """Store on a temp SQLite file (schema created, no accounts)."""
    s = Store(settings)
    s.initialize()
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def seeded_store(store: Store) -> Store:
    """Store holding the standard portfolio from :func:`seed_portfolio`."""
    seed_portfolio(store.engine)
    return store


@pytest.fixture
def root_context() -> RequestContext:
    """Head-office operator allowed to read everything."""
    return make_context(".")


@pytest.fixture
def _isolated_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp dir so the CLI creates an isolated database."""
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def make_context(
    hierarchy: str,
    *,
    permissions: tuple[str, ...] = ("ALL_FUNCTIONS",),
    username: str = "tester",
) -> RequestContext:
    return RequestContext(
        username=username,
        office_hierarchy=hierarchy,
        permissions=frozenset(permissions),
    )


def add_office(engine: Engine, office_id: int, name: str, parent_id: int) -> str:
    """Insert an office under *parent_id*; returns its hierarchy."""
    with engine.begin() as conn:
        parent = conn.execute(
            select(offices.c.hierarchy).where(offices.c.id == parent_id)
        ).scalar_one()
        hierarchy = f"{parent}{office_id}."
        conn.execute(
            insert(offices).values(
                id=office_id, parent_id=parent_id, hierarchy=hierarchy, name=name
            )
        )
    return hierarchy


def add_row(engine: Engine, table: Any, **values: Any) -> None:
    with engine.begin() as conn:
        conn.execute(insert(table).values(**values))


def add_account(engine: Engine, account_id: int, **values: Any) -> None:
    """Insert a savings account with sensible defaults."""
    row: dict[str, Any] = {
        "id": account_id,
        "account_no": f"{account_id:09d}",
        "product_id": 1,
        "status": "active",
        "currency_code": "USD",
        "account_balance": 0.0,
        "submitted_on_date": "2024-01-15",
        "deposit_type_enum": 100,
    }
    row.update(values)
    add_row(engine, savings_accounts, **row)


def seed_portfolio(engine: Engine) -> None:
    """Standard portfolio used across service, executor, and CLI tests.

    Offices: 1 Head Office (.), 2 North (.2.), 3 North East (.2.3.), 4 South (.4.)
    Accounts (savings deposits):
      1 Ada   / North      / active  USD 150.00 / born 1990-10-20 / EXT-1
      2 Ben   / North East / active  USD  20.00 / born 1985-02-28
      3 Cleo  / South      / closed  EUR   0.00 / born 1972-10-20
      4 Market Women group / North / submitted_and_pending_approval USD 0
      5 Dan   / Head Office/ active  EUR 999.50 / no birth date
    Account 6 (Ada, fixed deposit) must never be returned.
    """
    add_office(engine, 2, "North", 1)
    add_office(engine, 3, "North East", 2)
    add_office(engine, 4, "South", 1)

    add_row(engine, staff, id=1, office_id=2, display_name="Jane Officer")
    add_row(engine, savings_products, id=1, name="Passbook Savings", short_name="PBS", currency_code="USD")
    add_row(engine, savings_products, id=2, name="Euro Saver", short_name="EUR", currency_code="EUR")

    add_row(engine, clients, id=1, office_id=2, display_name="Ada", date_of_birth="1990-10-20")
    add_row(engine, clients, id=2, office_id=3, display_name="Ben", date_of_birth="1985-02-28")
    add_row(engine, clients, id=3, office_id=4, display_name="Cleo", date_of_birth="1972-10-20")
    add_row(engine, clients, id=4, office_id=1, display_name="Dan", date_of_birth=None)
    add_row(engine, groups, id=1, office_id=2, display_name="Market Women")

    add_account(
        engine, 1, client_id=1, account_balance=150.0, external_id="EXT-1",
        field_officer_id=1, activated_on_date="2024-02-01",
    )
    add_account(engine, 2, client_id=2, account_balance=20.0)
    add_account(engine, 3, client_id=3, product_id=2, status="closed", currency_code="EUR")
    add_account(engine, 4, group_id=1, status="submitted_and_pending_approval")
    add_account(engine, 5, client_id=4, product_id=2, currency_code="EUR", account_balance=999.5)
    add_account(engine, 6, client_id=1, deposit_type_enum=300)
