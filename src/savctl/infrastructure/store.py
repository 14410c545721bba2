"""Store: owner of the database engine shared by every service.

The Store is the single dependency injected into services. Opening one
touches nothing on disk: the engine connects lazily, per query. Only
:meth:`Store.initialize` (behind ``savctl init``) creates files, tables,
or rows.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from savctl.infrastructure.database.dialect import SqlGenerator
from savctl.infrastructure.database.engine import create_db_engine, create_schema, sqlite_url
from savctl.infrastructure.repositories.pagination import PaginationExecutor
from savctl.infrastructure.repositories.savings import SavingsQueryBuilder

if TYPE_CHECKING:
    from pathlib import Path

    from sqlalchemy.engine import Engine

    from savctl.config.settings import SavSettings

logger = logging.getLogger(__name__)


class Store:
    """Engine holder constructed once per process from :class:`SavSettings`.

    A configured ``database.url`` is used as-is. Otherwise the engine points
    at the SQLite file ``database.path`` (relative to ``root``).
    """

    def __init__(self, settings: SavSettings) -> None:
        self._settings = settings
        url = settings.database.url or sqlite_url(self.db_path)
        self._engine: Engine = create_db_engine(url)
        self._generator = SqlGenerator(self._engine.dialect.name)
        logger.debug("store opened on %s", self._engine.url)

    @property
    def db_path(self) -> Path:
        """Resolved SQLite path (meaningful only when no URL is configured)."""
        path = self._settings.database.path
        return path if path.is_absolute() else self._settings.root / path

    @property
    def exists(self) -> bool:
        """False when the SQLite file is missing; URL databases are assumed present."""
        return bool(self._settings.database.url) or self.db_path.is_file()

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def settings(self) -> SavSettings:
        return self._settings

    def initialize(self) -> None:
        """Create the SQLite directory, missing tables, and the head office."""
        if not self._settings.database.url:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
        create_schema(self._engine)
        logger.info("schema ready on %s", self._engine.url)

    def query_builder(self) -> SavingsQueryBuilder:
        return SavingsQueryBuilder(self._generator)

    def executor(self) -> PaginationExecutor:
        return PaginationExecutor(self._engine, self._generator)

    def close(self) -> None:
        """Dispose the engine's connection pool."""
        self._engine.dispose()
