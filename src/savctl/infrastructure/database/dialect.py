"""Backend-specific SQL fragments for composed text queries.

Only the handful of expressions the search needs differ between
backends: date-part extraction and the LIMIT/OFFSET window.
"""

from __future__ import annotations

_MONTH_TEMPLATES: dict[str, str] = {
    "sqlite": "CAST(strftime('%m', {column}) AS INTEGER)",
    "mysql": "MONTH({column})",
    "mariadb": "MONTH({column})",
    "postgresql": "EXTRACT(MONTH FROM {column})",
}

_DAY_TEMPLATES: dict[str, str] = {
    "sqlite": "CAST(strftime('%d', {column}) AS INTEGER)",
    "mysql": "DAY({column})",
    "mariadb": "DAY({column})",
    "postgresql": "EXTRACT(DAY FROM {column})",
}


class SqlGenerator:
    """Render dialect-dependent SQL snippets for a given backend name.

    Args:
        dialect: SQLAlchemy dialect name (``engine.dialect.name``).

    Raises:
        ValueError: if the dialect is not supported.
    """

    def __init__(self, dialect: str = "sqlite") -> None:
        if dialect not in _MONTH_TEMPLATES:
            msg = f"Unsupported database dialect: {dialect}"
            raise ValueError(msg)
        self.dialect = dialect

    def month(self, column: str) -> str:
        return _MONTH_TEMPLATES[self.dialect].format(column=column)

    def day(self, column: str) -> str:
        return _DAY_TEMPLATES[self.dialect].format(column=column)

    def limit(self, limit: int, offset: int = 0) -> str:
        """LIMIT/OFFSET clause. Both values are inlined, so they must be ints."""
        if not isinstance(limit, int) or not isinstance(offset, int):
            msg = "limit and offset must be integers"
            raise TypeError(msg)
        clause = f"LIMIT {limit}"
        if offset:
            clause += f" OFFSET {offset}"
        return clause
