"""SetupService: prepare the reference database for searching."""

from __future__ import annotations

from sqlalchemy import inspect, select

from savctl.infrastructure.database.engine import HEAD_OFFICE_ID
from savctl.infrastructure.database.schema import metadata, offices
from savctl.services.base import BaseService
from savctl.services.result import ServiceResult


class SetupService(BaseService):
    """Create the reference schema and report what is there."""

    def init_database(self) -> ServiceResult:
        """Initialize the store, then describe tables and the head office.

        Safe to rerun; existing tables and rows are left alone.
        """
        created = not self._store.exists
        self._store.initialize()

        engine = self._store.engine
        present = sorted(set(inspect(engine).get_table_names()) & set(metadata.tables))
        with engine.connect() as conn:
            head = conn.execute(
                select(offices.c.name).where(offices.c.id == HEAD_OFFICE_ID)
            ).scalar_one()

        return ServiceResult(
            ok=True,
            op="init_database",
            data={
                "database": engine.url.render_as_string(hide_password=True),
                "created": created,
                "tables": present,
                "head_office": head,
            },
        )
