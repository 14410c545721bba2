"""Search inputs: raw request parameters, validated criteria, and paging.

``RawSearchParams`` carries whatever the transport layer received.
``SearchCriteria`` and ``PageRequest`` exist only after validation and
are frozen; they are built fresh for each request and never cached.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class SortOrder(StrEnum):
    """Direction applied to the ``orderBy`` column."""

    ASC = "ASC"
    DESC = "DESC"


# ``orderBy`` key -> SavingsAccountRecord attribute. The repository resolves
# each attribute to the column it selects.
ORDER_FIELDS: dict[str, str] = {
    "id": "id",
    "accountNo": "account_no",
    "externalId": "external_id",
    "status": "status",
    "currencyCode": "currency_code",
    "accountBalance": "account_balance",
    "submittedOnDate": "submitted_on_date",
    "activatedOnDate": "activated_on_date",
    "clientName": "client_name",
    "groupName": "group_name",
    "officeName": "office_name",
    "productName": "product_name",
}

ORDERABLE_FIELDS: frozenset[str] = frozenset(ORDER_FIELDS)


class RawSearchParams(BaseModel):
    """Unvalidated search parameters, as received from a caller."""

    model_config = {"frozen": True}

    office_id: int | None = None
    client_id: int | None = None
    group_id: int | None = None
    product_id: int | None = None
    external_id: str | None = None
    status: str | None = None
    currency_code: str | None = None
    client_birth_month: int | None = None
    client_birth_day: int | None = None
    offset: int | None = None
    limit: int | None = None
    order_by: str | None = None
    sort_order: str | None = None


class SearchCriteria(BaseModel):
    """Validated filter set driving a single search.

    Attributes:
        office_hierarchy: Caller's office scope, prefix-matched against
            the account's office. Never taken from user input.
        client_birth_month: Present if and only if ``client_birth_day`` is.
    """

    model_config = {"frozen": True}

    office_hierarchy: str = Field(min_length=1)
    office_id: int | None = None
    client_id: int | None = None
    group_id: int | None = None
    product_id: int | None = None
    external_id: str | None = None
    status: str | None = None
    currency_code: str | None = None
    client_birth_month: int | None = None
    client_birth_day: int | None = None

    @property
    def hierarchy_pattern(self) -> str:
        """LIKE pattern matching the caller's office and all offices below it."""
        return f"{self.office_hierarchy}%"

    @property
    def has_birth_date(self) -> bool:
        return self.client_birth_month is not None and self.client_birth_day is not None


class PageRequest(BaseModel):
    """Pagination window and ordering, kept apart from the filters."""

    model_config = {"frozen": True}

    offset: int = Field(default=0, ge=0)
    limit: int = Field(default=200, gt=0)
    order_by: str | None = None
    sort_order: SortOrder = SortOrder.ASC
