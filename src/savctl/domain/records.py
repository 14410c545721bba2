"""Read models returned by the search: account records and result pages."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any, Generic, Self, TypeVar

from pydantic import BaseModel, Field, model_validator

# deposit_type_enum value identifying plain savings accounts
SAVINGS_DEPOSIT_TYPE = 100

T = TypeVar("T")


class SavingsAccountRecord(BaseModel):
    """One savings account as seen by the search, joined with its owners."""

    model_config = {"frozen": True}

    id: int
    account_no: str
    external_id: str | None = None
    status: str
    currency_code: str
    account_balance: Decimal = Decimal("0")
    submitted_on_date: date | None = None
    activated_on_date: date | None = None
    client_id: int | None = None
    client_name: str | None = None
    group_id: int | None = None
    group_name: str | None = None
    office_id: int
    office_name: str
    product_id: int
    product_name: str
    field_officer_id: int | None = None
    field_officer_name: str | None = None


class Page(BaseModel, Generic[T]):
    """A bounded window of results plus the count of every matching row."""

    model_config = {"frozen": True}

    items: list[T] = Field(default_factory=list)
    total_count: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def check_items_within_total(self) -> Self:
        if len(self.items) > self.total_count:
            msg = f"page holds {len(self.items)} items but total_count is {self.total_count}"
            raise ValueError(msg)
        return self

    @classmethod
    def empty(cls) -> Page[T]:
        return cls(items=[], total_count=0)

    def to_payload(self) -> dict[str, Any]:
        """Transport shape: ``totalFilteredRecords`` and ``pageItems``."""
        return {
            "totalFilteredRecords": self.total_count,
            "pageItems": [
                item.model_dump(mode="json") if isinstance(item, BaseModel) else item
                for item in self.items
            ],
        }
