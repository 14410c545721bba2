"""Typed payload contracts for service and adapter boundaries.

These models validate payload shapes before they leave the service
layer, so a renamed key (``pageItems`` vs ``items``) fails fast in tests.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T", bound=BaseModel)


def dump_validated(model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="json")


class SavingsAccountItem(BaseModel):
    """One account row in a retrieve_all page."""

    model_config = ConfigDict(extra="allow")

    id: int
    account_no: str
    status: str
    currency_code: str
    office_id: int
    office_name: str
    product_id: int
    product_name: str


class RetrieveAllData(BaseModel):
    """Payload contract for ``SavingsSearchService.retrieve_all``."""

    totalFilteredRecords: int = Field(ge=0)  # noqa: N815
    pageItems: list[SavingsAccountItem]  # noqa: N815
