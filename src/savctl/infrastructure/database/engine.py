"""Database engine setup.

SQLite is the default backend: WAL mode for concurrent readers and
foreign keys enforced. Any SQLAlchemy URL works for read-only search as
long as it exposes the reference schema.

SQLAlchemy Core (not ORM) is used because the search path issues
composed text queries and maps rows itself.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event, insert, select
from sqlalchemy.engine import Engine

from savctl.infrastructure.database.schema import metadata, offices

HEAD_OFFICE_ID = 1
HEAD_OFFICE_NAME = "Head Office"
ROOT_HIERARCHY = "."


def create_db_engine(url: str) -> Engine:
    """Create an engine; SQLite connections get WAL mode and foreign keys.

    Nothing is opened until the first query. SQL echo is a logging concern
    (see ``configure_logging``), not an engine flag.
    """
    engine = create_engine(url)

    if engine.dialect.name == "sqlite":

        @event.listens_for(engine, "connect")
        def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def sqlite_url(db_path: Path) -> str:
    return f"sqlite:///{db_path}"


def init_database(db_path: Path) -> Engine:
    """Initialize the SQLite database at *db_path*.

    Creates the parent directory, every table in :data:`schema.metadata`,
    and the head office that roots the office hierarchy.

    Idempotent, safe to call on an existing database.
    """
    db_path.parent.mkdir(parents=True, exist_ok=True)
    engine = create_db_engine(sqlite_url(db_path))
    create_schema(engine)
    return engine


def create_schema(engine: Engine) -> None:
    """Create missing tables and the head office on any backend."""
    metadata.create_all(engine)
    _seed_head_office(engine)


def _seed_head_office(engine: Engine) -> None:
    """Insert the root office if it doesn't exist."""
    with engine.begin() as conn:
        row = conn.execute(select(offices.c.id).where(offices.c.id == HEAD_OFFICE_ID)).first()
        if row is None:
            conn.execute(
                insert(offices).values(
                    id=HEAD_OFFICE_ID,
                    parent_id=None,
                    hierarchy=ROOT_HIERARCHY,
                    name=HEAD_OFFICE_NAME,
                )
            )
