"""Authorization gate consulted before any read.

Permission policy belongs to the surrounding platform; the search only
needs a yes/no on "may this caller read this resource". ``PermissionGate``
answers it from the permission codes carried in the request context.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from savctl.domain.context import RequestContext
from savctl.domain.errors import AccessDeniedError

SAVINGS_ACCOUNT_RESOURCE = "SAVINGSACCOUNT"

ALL_FUNCTIONS = "ALL_FUNCTIONS"
ALL_FUNCTIONS_READ = "ALL_FUNCTIONS_READ"


@runtime_checkable
class AuthorizationGate(Protocol):
    def require_read(self, context: RequestContext, resource: str) -> None: ...


class PermissionGate:
    """Grant reads to callers holding a superuser code or ``READ_<RESOURCE>``."""

    def require_read(self, context: RequestContext, resource: str) -> None:
        permission = f"READ_{resource}"
        if any(
            context.has_permission(code)
            for code in (ALL_FUNCTIONS, ALL_FUNCTIONS_READ, permission)
        ):
            return
        raise AccessDeniedError(context.username, permission)
