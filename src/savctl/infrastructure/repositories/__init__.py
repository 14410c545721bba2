"""Read-side repositories: SQL composition and paginated execution."""

from savctl.infrastructure.repositories.pagination import PaginationExecutor, bind_positional
from savctl.infrastructure.repositories.savings import (
    ORDER_COLUMNS,
    SavingsQueryBuilder,
    map_savings_row,
)

__all__ = [
    "ORDER_COLUMNS",
    "PaginationExecutor",
    "SavingsQueryBuilder",
    "bind_positional",
    "map_savings_row",
]
