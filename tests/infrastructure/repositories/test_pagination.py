"""Tests for PaginationExecutor and positional parameter binding."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest
from sqlalchemy.engine import Engine

from savctl.domain.criteria import PageRequest, SearchCriteria
from savctl.infrastructure.repositories.pagination import PaginationExecutor, bind_positional
from savctl.infrastructure.repositories.savings import SavingsQueryBuilder, map_savings_row
from tests.conftest import seed_portfolio

ACCOUNT_IDS_SQL = "SELECT id, account_no FROM m_savings_account WHERE deposit_type_enum = ?"


def _ids(row: Mapping[str, Any]) -> int:
    return int(row["id"])


class TestBindPositional:
    def test_rewrites_placeholders(self) -> None:
        stmt, bound = bind_positional("a = ? AND b = ?", [1, "x"])
        assert str(stmt) == "a = :p0 AND b = :p1"
        assert bound == {"p0": 1, "p1": "x"}

    def test_no_placeholders(self) -> None:
        stmt, bound = bind_positional("SELECT 1", [])
        assert str(stmt) == "SELECT 1"
        assert bound == {}

    def test_count_mismatch(self) -> None:
        with pytest.raises(ValueError, match="placeholders"):
            bind_positional("a = ?", [1, 2])


class TestExecute:
    def test_empty_match(self, db_engine: Engine) -> None:
        page = PaginationExecutor(db_engine).execute(
            ACCOUNT_IDS_SQL, [100], _ids, PageRequest()
        )
        assert page.items == []
        assert page.total_count == 0

    def test_full_window(self, db_engine: Engine) -> None:
        seed_portfolio(db_engine)
        page = PaginationExecutor(db_engine).execute(
            ACCOUNT_IDS_SQL, [100], _ids, PageRequest(), order_clause="ORDER BY id"
        )
        assert page.items == [1, 2, 3, 4, 5]
        assert page.total_count == 5

    def test_window_smaller_than_total(self, db_engine: Engine) -> None:
        seed_portfolio(db_engine)
        page = PaginationExecutor(db_engine).execute(
            ACCOUNT_IDS_SQL,
            [100],
            _ids,
            PageRequest(offset=1, limit=2),
            order_clause="ORDER BY id",
        )
        assert page.items == [2, 3]
        assert page.total_count == 5

    def test_offset_past_end(self, db_engine: Engine) -> None:
        seed_portfolio(db_engine)
        page = PaginationExecutor(db_engine).execute(
            ACCOUNT_IDS_SQL, [100], _ids, PageRequest(offset=50), order_clause="ORDER BY id"
        )
        assert page.items == []
        assert page.total_count == 5

    def test_composed_search_maps_records(self, db_engine: Engine) -> None:
        seed_portfolio(db_engine)
        builder = SavingsQueryBuilder()
        sql, params = builder.build(
            SearchCriteria(office_hierarchy=".", client_birth_month=10, client_birth_day=20)
        )
        request = PageRequest()
        page = PaginationExecutor(db_engine).execute(
            sql, params, map_savings_row, request, order_clause=builder.order_clause(request)
        )
        assert [r.account_no for r in page.items] == ["000000001", "000000003"]
        assert page.items[0].client_name == "Ada"
        assert page.items[0].field_officer_name == "Jane Officer"

    def test_mapping_error_propagates_and_releases_connection(self, db_engine: Engine) -> None:
        seed_portfolio(db_engine)

        def _explode(row: Mapping[str, Any]) -> Any:
            raise RuntimeError(f"bad row {row['id']}")

        with pytest.raises(RuntimeError, match="bad row"):
            PaginationExecutor(db_engine).execute(ACCOUNT_IDS_SQL, [100], _explode, PageRequest())
        assert db_engine.pool.checkedout() == 0  # type: ignore[attr-defined]

    def test_param_mismatch_raises_before_query(self, db_engine: Engine) -> None:
        with pytest.raises(ValueError):
            PaginationExecutor(db_engine).execute(ACCOUNT_IDS_SQL, [], _ids, PageRequest())
