"""Domain error kinds raised before any query executes."""

from __future__ import annotations

from typing import Any


class InvalidQueryParamError(ValueError):
    """A search parameter is missing, out of range, or not recognized.

    ``field`` uses the transport-level parameter name (``clientBirthMonth``,
    ``orderBy``, ...) so callers can report it back verbatim.
    """

    def __init__(self, field: str, value: Any, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Unrecognized query param '{field}' with value {value!r}: {reason}")


class AccessDeniedError(PermissionError):
    """The authenticated caller lacks the permission an operation needs."""

    def __init__(self, username: str, permission: str) -> None:
        self.username = username
        self.permission = permission
        super().__init__(f"User '{username}' has no authority to {permission}")
