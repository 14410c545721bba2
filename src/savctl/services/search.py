"""SavingsSearchService — the single entry point for savings-account search.

Pipeline, strictly linear:

1. authorization gate (read permission on the savings resource)
2. criteria validation, then page validation
3. query composition
4. paginated execution

Each stage either feeds the next or ends the request. Validation
failures return before the database is touched; database and row-mapping
errors propagate unchanged.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from savctl.domain.criteria import PageRequest, RawSearchParams, SearchCriteria
from savctl.domain.errors import AccessDeniedError, InvalidQueryParamError
from savctl.domain.records import Page, SavingsAccountRecord
from savctl.domain.validation import CriteriaValidator
from savctl.infrastructure.repositories.pagination import RowMapper
from savctl.infrastructure.repositories.savings import map_savings_row
from savctl.services.authorization import (
    SAVINGS_ACCOUNT_RESOURCE,
    AuthorizationGate,
    PermissionGate,
)
from savctl.services.base import BaseService
from savctl.services.contracts import RetrieveAllData, dump_validated
from savctl.services.result import ServiceResult

if TYPE_CHECKING:
    from savctl.domain.context import RequestContext
    from savctl.infrastructure.store import Store


@runtime_checkable
class CriteriaBuilder(Protocol):
    def validate(self, raw: RawSearchParams, context: RequestContext) -> SearchCriteria: ...

    def validate_page(self, raw: RawSearchParams) -> PageRequest: ...


@runtime_checkable
class QueryBuilder(Protocol):
    def build(self, criteria: SearchCriteria) -> tuple[str, list[Any]]: ...

    def order_clause(self, page: PageRequest) -> str: ...


@runtime_checkable
class QueryExecutor(Protocol):
    def execute(
        self,
        sql: str,
        params: Sequence[Any],
        row_mapper: RowMapper,
        page: PageRequest,
        *,
        order_clause: str = "",
    ) -> Page[Any]: ...


class SavingsSearchService(BaseService):
    """Search savings accounts visible to the caller's office.

    Every collaborator can be swapped at construction; the defaults are
    built from the store and its settings.
    """

    def __init__(
        self,
        store: Store,
        *,
        criteria_builder: CriteriaBuilder | None = None,
        query_builder: QueryBuilder | None = None,
        executor: QueryExecutor | None = None,
        gate: AuthorizationGate | None = None,
    ) -> None:
        super().__init__(store)
        search = store.settings.search
        self._criteria = criteria_builder or CriteriaValidator(
            default_limit=search.default_limit,
            max_limit=search.max_limit,
        )
        self._queries = query_builder or store.query_builder()
        self._executor = executor or store.executor()
        self._gate = gate or PermissionGate()

    def search(
        self, raw: RawSearchParams, context: RequestContext
    ) -> Page[SavingsAccountRecord]:
        """Run the pipeline and return the typed page.

        Raises:
            AccessDeniedError: caller may not read savings accounts.
            InvalidQueryParamError: a parameter failed validation.
        """
        return self._run(raw, context)[0]

    def _run(
        self, raw: RawSearchParams, context: RequestContext
    ) -> tuple[Page[SavingsAccountRecord], PageRequest]:
        self._gate.require_read(context, SAVINGS_ACCOUNT_RESOURCE)
        criteria = self._criteria.validate(raw, context)
        page = self._criteria.validate_page(raw)

        sql, params = self._queries.build(criteria)
        result = self._executor.execute(
            sql,
            params,
            map_savings_row,
            page,
            order_clause=self._queries.order_clause(page),
        )
        return result, page

    def retrieve_all(self, raw: RawSearchParams, context: RequestContext) -> ServiceResult:
        """Search and wrap the outcome for transport adapters.

        Returns ``INVALID_QUERY_PARAM`` (with the offending field in
        ``error.detail``) or ``NO_AUTHORIZATION`` failures; on success
        ``data`` holds ``totalFilteredRecords`` and ``pageItems``.
        """
        op = "retrieve_all"
        log = self._log_for(context)
        try:
            result_page, page = self._run(raw, context)
        except AccessDeniedError as exc:
            log.warning("search.denied", permission=exc.permission)
            return ServiceResult.failure(
                op, "NO_AUTHORIZATION", str(exc), permission=exc.permission
            )
        except InvalidQueryParamError as exc:
            log.info("search.rejected", field=exc.field, value=exc.value)
            return ServiceResult.failure(
                op, "INVALID_QUERY_PARAM", str(exc), field=exc.field, value=exc.value
            )

        log.debug(
            "search.completed",
            total=result_page.total_count,
            returned=len(result_page.items),
        )
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(RetrieveAllData, result_page.to_payload()),
            meta={"offset": page.offset, "limit": page.limit},
        )
