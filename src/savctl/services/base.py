"""BaseService — common foundation for savctl services.

Every service receives a :class:`Store` at construction time and builds
its read collaborators from it. Services never hold connections.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from savctl.domain.context import RequestContext
    from savctl.infrastructure.store import Store


class BaseService:
    """Base for service-layer classes.

    Usage::

        class SavingsSearchService(BaseService):
            def retrieve_all(self, raw, context) -> ServiceResult:
                log = self._log_for(context)
                ...
    """

    def __init__(self, store: Store) -> None:
        self._store = store

    def _log_for(self, context: RequestContext) -> structlog.stdlib.BoundLogger:
        """Logger bound to the caller's tenant and username."""
        log: structlog.stdlib.BoundLogger = structlog.get_logger(type(self).__module__)
        return log.bind(tenant=context.tenant, user=context.username)
