"""Command group: savings-account search."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from savctl.commands._base import SavGroup
from savctl.domain.criteria import ORDERABLE_FIELDS, RawSearchParams
from savctl.services.search import SavingsSearchService

if TYPE_CHECKING:
    from savctl.commands._context import AppContext

_ACCOUNTS_EXAMPLES = """\
  savctl accounts list
  savctl accounts list --client-id 42
  savctl accounts list --birth-month 10 --birth-day 20
  savctl accounts list --status active --currency USD --order-by accountBalance --sort-order desc
  savctl --json accounts list --offset 200 --limit 100"""


@click.group(cls=SavGroup, examples=_ACCOUNTS_EXAMPLES)
@click.pass_obj
def accounts(app: AppContext) -> None:
    """Search savings accounts."""


@accounts.command(
    name="list",
    examples="""\
  savctl accounts list --office-id 2
  savctl accounts list --product-id 1 --status active
  savctl accounts list --external-id EXT-0042
  savctl accounts list --birth-month 2 --birth-day 29
  savctl -q accounts list --group-id 7""",
)
@click.option("--office-id", type=int, default=None, help="Only accounts of this office.")
@click.option("--client-id", type=int, default=None, help="Only accounts of this client.")
@click.option("--group-id", type=int, default=None, help="Only accounts of this group.")
@click.option("--product-id", type=int, default=None, help="Only accounts of this product.")
@click.option("--external-id", default=None, help="Match the account's external id.")
@click.option("--status", default=None, help="Account status code (e.g. active).")
@click.option("--currency", "currency_code", default=None, help="ISO currency code.")
@click.option(
    "--birth-month", type=int, default=None, help="Client birth month (needs --birth-day)."
)
@click.option(
    "--birth-day", type=int, default=None, help="Client birth day (needs --birth-month)."
)
@click.option("--offset", type=int, default=None, help="Rows to skip.")
@click.option("--limit", type=int, default=None, help="Page size.")
@click.option(
    "--order-by",
    default=None,
    help=f"Sort column: {', '.join(sorted(ORDERABLE_FIELDS))}.",
)
@click.option("--sort-order", default=None, help="ASC or DESC.")
@click.pass_obj
def list_cmd(
    app: AppContext,
    office_id: int | None,
    client_id: int | None,
    group_id: int | None,
    product_id: int | None,
    external_id: str | None,
    status: str | None,
    currency_code: str | None,
    birth_month: int | None,
    birth_day: int | None,
    offset: int | None,
    limit: int | None,
    order_by: str | None,
    sort_order: str | None,
) -> None:
    """List savings accounts visible to the configured operator."""
    raw = RawSearchParams(
        office_id=office_id,
        client_id=client_id,
        group_id=group_id,
        product_id=product_id,
        external_id=external_id,
        status=status,
        currency_code=currency_code,
        client_birth_month=birth_month,
        client_birth_day=birth_day,
        offset=offset,
        limit=limit,
        order_by=order_by,
        sort_order=sort_order,
    )
    svc = SavingsSearchService(app.require_database())
    app.emit(svc.retrieve_all(raw, app.request_context()))
