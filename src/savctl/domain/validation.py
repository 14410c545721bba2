"""CriteriaValidator — turns raw search parameters into validated criteria.

Birth-date rules:
- ``clientBirthMonth`` and ``clientBirthDay`` come as a pair; a lone
  value is rejected whatever its magnitude, naming the missing field.
- Month must lie in [1, 12] and day in [1, 31]. The day bound is the
  same for every month (February 30 passes), matching the upstream
  search contract.

Month is checked before day and the first violation wins. Every other
filter passes through untouched. Validation is pure: no I/O, no state.
"""

from __future__ import annotations

from savctl.domain.context import RequestContext
from savctl.domain.criteria import (
    ORDERABLE_FIELDS,
    PageRequest,
    RawSearchParams,
    SearchCriteria,
    SortOrder,
)
from savctl.domain.errors import InvalidQueryParamError

BIRTH_MONTH_FIELD = "clientBirthMonth"
BIRTH_DAY_FIELD = "clientBirthDay"

MONTH_RANGE = (1, 12)
DAY_RANGE = (1, 31)


class CriteriaValidator:
    """Default criteria builder used by the search service.

    Args:
        default_limit: Page size used when the caller gives none.
        max_limit: Upper bound silently applied to larger page sizes.
    """

    def __init__(self, *, default_limit: int = 200, max_limit: int = 200) -> None:
        self._default_limit = default_limit
        self._max_limit = max_limit

    def validate(self, raw: RawSearchParams, context: RequestContext) -> SearchCriteria:
        """Check the filter parameters and return frozen criteria.

        Raises:
            InvalidQueryParamError: naming the offending birth-date field.
        """
        _check_birth_date(raw.client_birth_month, raw.client_birth_day)
        return SearchCriteria(
            office_hierarchy=context.office_hierarchy,
            office_id=raw.office_id,
            client_id=raw.client_id,
            group_id=raw.group_id,
            product_id=raw.product_id,
            external_id=raw.external_id,
            status=raw.status,
            currency_code=raw.currency_code,
            client_birth_month=raw.client_birth_month,
            client_birth_day=raw.client_birth_day,
        )

    def validate_page(self, raw: RawSearchParams) -> PageRequest:
        """Check offset, limit, and ordering parameters."""
        offset = raw.offset if raw.offset is not None else 0
        if offset < 0:
            raise InvalidQueryParamError("offset", raw.offset, "must not be negative")

        limit = raw.limit if raw.limit is not None else self._default_limit
        if limit <= 0:
            raise InvalidQueryParamError("limit", raw.limit, "must be greater than zero")
        limit = min(limit, self._max_limit)

        if raw.order_by is not None and raw.order_by not in ORDERABLE_FIELDS:
            raise InvalidQueryParamError("orderBy", raw.order_by, "not a sortable column")

        sort_order = SortOrder.ASC
        if raw.sort_order is not None:
            try:
                sort_order = SortOrder(raw.sort_order.upper())
            except ValueError:
                raise InvalidQueryParamError(
                    "sortOrder", raw.sort_order, "expected ASC or DESC"
                ) from None

        return PageRequest(
            offset=offset,
            limit=limit,
            order_by=raw.order_by,
            sort_order=sort_order,
        )


def _check_birth_date(month: int | None, day: int | None) -> None:
    if month is not None and day is None:
        raise InvalidQueryParamError(BIRTH_DAY_FIELD, day, "required with clientBirthMonth")
    if day is not None and month is None:
        raise InvalidQueryParamError(BIRTH_MONTH_FIELD, month, "required with clientBirthDay")
    if month is None or day is None:
        return
    if not MONTH_RANGE[0] <= month <= MONTH_RANGE[1]:
        raise InvalidQueryParamError(BIRTH_MONTH_FIELD, month, "must be between 1 and 12")
    if not DAY_RANGE[0] <= day <= DAY_RANGE[1]:
        raise InvalidQueryParamError(BIRTH_DAY_FIELD, day, "must be between 1 and 31")
