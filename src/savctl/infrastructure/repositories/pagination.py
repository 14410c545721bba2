"""Run a composed query as a counted, windowed page."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from sqlalchemy import text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.sql.elements import TextClause

from savctl.domain.criteria import PageRequest
from savctl.domain.records import Page
from savctl.infrastructure.database.dialect import SqlGenerator

RowMapper = Callable[[Mapping[str, Any]], Any]


def bind_positional(sql: str, params: Sequence[Any]) -> tuple[TextClause, dict[str, Any]]:
    """Rewrite ``?`` placeholders as named binds ``:p0, :p1, ...``.

    Raises:
        ValueError: if the placeholder count differs from ``len(params)``.
    """
    parts = sql.split("?")
    if len(parts) - 1 != len(params):
        msg = f"SQL has {len(parts) - 1} placeholders but {len(params)} params were given"
        raise ValueError(msg)

    pieces = [parts[0]]
    bound: dict[str, Any] = {}
    for index, (value, tail) in enumerate(zip(params, parts[1:], strict=True)):
        name = f"p{index}"
        pieces.append(f":{name}{tail}")
        bound[name] = value
    return text("".join(pieces)), bound


class PaginationExecutor:
    """Execute count + window queries against the engine's pool.

    Each call holds one connection for its duration and always returns
    it, including when a row fails to map.
    """

    def __init__(self, engine: Engine, generator: SqlGenerator | None = None) -> None:
        self._engine = engine
        self._sql = generator or SqlGenerator(engine.dialect.name)

    def execute(
        self,
        sql: str,
        params: Sequence[Any],
        row_mapper: RowMapper,
        page: PageRequest,
        *,
        order_clause: str = "",
    ) -> Page[Any]:
        """Return the rows of *sql* inside *page*'s window, plus the total count.

        An empty match is ``Page(items=[], total_count=0)``, not an error.
        """
        count_sql = f"SELECT COUNT(*) FROM ({sql}) matched"
        window = self._sql.limit(page.limit, page.offset)
        window_sql = " ".join(part for part in (sql, order_clause, window) if part)

        with self._engine.connect() as conn:
            total = self._count(conn, count_sql, params)
            if total == 0:
                return Page.empty()
            stmt, bound = bind_positional(window_sql, params)
            rows = conn.execute(stmt, bound).mappings().all()
            items = [row_mapper(row) for row in rows]

        # count and window are separate statements; a concurrent insert may land between them
        return Page(items=items, total_count=max(total, len(items)))

    @staticmethod
    def _count(conn: Connection, count_sql: str, params: Sequence[Any]) -> int:
        stmt, bound = bind_positional(count_sql, params)
        return int(conn.execute(stmt, bound).scalar_one() or 0)
