"""SQL composition for the savings-account search.

``SavingsQueryBuilder.build`` turns validated criteria into SQL text with
``?`` placeholders plus the matching positional parameter list.

Clause order is fixed: hierarchy, office, client, group, product,
external id, status, currency, then the birth month/day pair. A clause
is emitted only when its filter has a value, so each parameter keeps the
same index whenever the filters before it are held constant, and the
birth-date pair, when present, is always the last two parameters.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from savctl.domain.criteria import ORDER_FIELDS, PageRequest, SearchCriteria
from savctl.domain.records import SAVINGS_DEPOSIT_TYPE, SavingsAccountRecord
from savctl.infrastructure.database.dialect import SqlGenerator

# SavingsAccountRecord attribute -> selected column
SELECT_COLUMNS: dict[str, str] = {
    "id": "sa.id",
    "account_no": "sa.account_no",
    "external_id": "sa.external_id",
    "status": "sa.status",
    "currency_code": "sa.currency_code",
    "account_balance": "sa.account_balance",
    "submitted_on_date": "sa.submitted_on_date",
    "activated_on_date": "sa.activated_on_date",
    "client_id": "c.id",
    "client_name": "c.display_name",
    "group_id": "g.id",
    "group_name": "g.display_name",
    "office_id": "o.id",
    "office_name": "o.name",
    "product_id": "p.id",
    "product_name": "p.name",
    "field_officer_id": "s.id",
    "field_officer_name": "s.display_name",
}

_SELECT_LIST = ",\n           ".join(
    f"{column} AS {attr}" for attr, column in SELECT_COLUMNS.items()
)

# An account belongs to its client's office, or its group's when it has no client.
SAVINGS_BASE_SQL = f"""
    SELECT {_SELECT_LIST}
    FROM m_savings_account sa
    JOIN m_savings_product p ON p.id = sa.product_id
    LEFT JOIN m_client c ON c.id = sa.client_id
    LEFT JOIN m_group g ON g.id = sa.group_id
    LEFT JOIN m_staff s ON s.id = sa.field_officer_id
    JOIN m_office o ON o.id = COALESCE(c.office_id, g.office_id)
    WHERE o.hierarchy LIKE ?
      AND sa.deposit_type_enum = {SAVINGS_DEPOSIT_TYPE}
"""

# orderBy key -> column expression
ORDER_COLUMNS: dict[str, str] = {
    key: SELECT_COLUMNS[attr] for key, attr in ORDER_FIELDS.items()
}

TIE_BREAK_COLUMN = "sa.id"


class SavingsQueryBuilder:
    """Compose the parameterized savings search for one backend."""

    def __init__(self, generator: SqlGenerator | None = None) -> None:
        self._sql = generator or SqlGenerator()

    def build(self, criteria: SearchCriteria) -> tuple[str, list[Any]]:
        """Return ``(sql_text, params)`` for *criteria*."""
        sql = SAVINGS_BASE_SQL.rstrip()
        params: list[Any] = [criteria.hierarchy_pattern]

        if criteria.office_id is not None:
            sql += " AND o.id = ?"
            params.append(criteria.office_id)
        if criteria.client_id is not None:
            sql += " AND sa.client_id = ?"
            params.append(criteria.client_id)
        if criteria.group_id is not None:
            sql += " AND sa.group_id = ?"
            params.append(criteria.group_id)
        if criteria.product_id is not None:
            sql += " AND sa.product_id = ?"
            params.append(criteria.product_id)
        if criteria.external_id is not None:
            sql += " AND sa.external_id = ?"
            params.append(criteria.external_id)
        if criteria.status is not None:
            sql += " AND sa.status = ?"
            params.append(criteria.status)
        if criteria.currency_code is not None:
            sql += " AND sa.currency_code = ?"
            params.append(criteria.currency_code)

        if criteria.has_birth_date:
            dob = "c.date_of_birth"
            sql += f" AND {self._sql.month(dob)} = ? AND {self._sql.day(dob)} = ?"
            params.extend([criteria.client_birth_month, criteria.client_birth_day])

        return sql, params

    def order_clause(self, page: PageRequest) -> str:
        """ORDER BY for *page*, always ending on the account id for stable paging."""
        if page.order_by is None:
            return f"ORDER BY {TIE_BREAK_COLUMN} {page.sort_order}"
        column = ORDER_COLUMNS[page.order_by]
        if column == TIE_BREAK_COLUMN:
            return f"ORDER BY {column} {page.sort_order}"
        return f"ORDER BY {column} {page.sort_order}, {TIE_BREAK_COLUMN}"


def map_savings_row(row: Mapping[str, Any]) -> SavingsAccountRecord:
    """Map one result row to a record. Malformed rows raise."""
    return SavingsAccountRecord.model_validate(dict(row))
