"""RequestContext — the authenticated caller's scope for one request.

Tenant, business date, and the caller's office hierarchy travel as an
explicit value through the pipeline instead of being read from
per-thread state, so every stage stays a function of its inputs.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field


class RequestContext(BaseModel):
    """Who is asking, and which slice of the portfolio they may see."""

    model_config = {"frozen": True}

    username: str
    office_hierarchy: str = Field(min_length=1)
    permissions: frozenset[str] = Field(default_factory=frozenset)
    tenant: str = "default"
    timezone: str = "UTC"
    business_date: date | None = None

    def has_permission(self, code: str) -> bool:
        return code in self.permissions
