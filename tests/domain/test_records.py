"""Tests for search inputs and read models."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from savctl.domain.context import RequestContext
from savctl.domain.criteria import PageRequest, SearchCriteria, SortOrder
from savctl.domain.errors import AccessDeniedError, InvalidQueryParamError
from savctl.domain.records import Page, SavingsAccountRecord


def _record(**overrides: object) -> SavingsAccountRecord:
    values: dict[str, object] = {
        "id": 1,
        "account_no": "000000001",
        "status": "active",
        "currency_code": "USD",
        "account_balance": "150.00",
        "submitted_on_date": "2024-01-15",
        "office_id": 2,
        "office_name": "North",
        "product_id": 1,
        "product_name": "Passbook Savings",
    }
    values.update(overrides)
    return SavingsAccountRecord.model_validate(values)


class TestSavingsAccountRecord:
    def test_coerces_row_values(self) -> None:
        record = _record()
        assert record.account_balance == Decimal("150.00")
        assert record.submitted_on_date == date(2024, 1, 15)
        assert record.client_id is None

    def test_frozen(self) -> None:
        record = _record()
        with pytest.raises(ValidationError):
            record.status = "closed"  # type: ignore[misc]

    def test_missing_required_column_raises(self) -> None:
        with pytest.raises(ValidationError):
            SavingsAccountRecord.model_validate({"id": 1})


class TestPage:
    def test_empty(self) -> None:
        page = Page[SavingsAccountRecord].empty()
        assert page.items == []
        assert page.total_count == 0

    def test_items_cannot_exceed_total(self) -> None:
        with pytest.raises(ValidationError, match="total_count"):
            Page[int](items=[1, 2], total_count=1)

    def test_negative_total_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Page[int](items=[], total_count=-1)

    def test_window_smaller_than_total(self) -> None:
        page = Page[int](items=[1], total_count=10)
        assert page.total_count == 10

    def test_payload_shape(self) -> None:
        page = Page[SavingsAccountRecord](items=[_record()], total_count=3)
        payload = page.to_payload()
        assert payload["totalFilteredRecords"] == 3
        assert len(payload["pageItems"]) == 1
        item = payload["pageItems"][0]
        assert item["account_no"] == "000000001"
        assert item["submitted_on_date"] == "2024-01-15"


class TestCriteria:
    def test_hierarchy_required(self) -> None:
        with pytest.raises(ValidationError):
            SearchCriteria(office_hierarchy="")

    def test_hierarchy_pattern(self) -> None:
        assert SearchCriteria(office_hierarchy=".2.").hierarchy_pattern == ".2.%"

    def test_birth_date_needs_both(self) -> None:
        assert not SearchCriteria(office_hierarchy=".", client_birth_month=1).has_birth_date

    def test_page_request_bounds(self) -> None:
        with pytest.raises(ValidationError):
            PageRequest(offset=-1)
        with pytest.raises(ValidationError):
            PageRequest(limit=0)
        assert PageRequest().sort_order is SortOrder.ASC


class TestRequestContext:
    def test_has_permission(self) -> None:
        ctx = RequestContext(
            username="mifos", office_hierarchy=".", permissions=frozenset({"READ_SAVINGSACCOUNT"})
        )
        assert ctx.has_permission("READ_SAVINGSACCOUNT")
        assert not ctx.has_permission("ALL_FUNCTIONS")
        assert ctx.tenant == "default"


class TestErrors:
    def test_invalid_query_param_is_value_error(self) -> None:
        exc = InvalidQueryParamError("clientBirthDay", 32, "must be between 1 and 31")
        assert isinstance(exc, ValueError)
        assert exc.field == "clientBirthDay"
        assert "clientBirthDay" in str(exc)

    def test_access_denied_is_permission_error(self) -> None:
        exc = AccessDeniedError("bob", "READ_SAVINGSACCOUNT")
        assert isinstance(exc, PermissionError)
        assert exc.permission == "READ_SAVINGSACCOUNT"
        assert "bob" in str(exc)
