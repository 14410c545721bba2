"""Database engine, schema, and dialect helpers via SQLAlchemy Core."""

from savctl.infrastructure.database.dialect import SqlGenerator
from savctl.infrastructure.database.engine import create_db_engine, create_schema, init_database
from savctl.infrastructure.database.schema import (
    clients,
    groups,
    metadata,
    offices,
    savings_accounts,
    savings_products,
    staff,
)

__all__ = [
    "SqlGenerator",
    "clients",
    "create_db_engine",
    "create_schema",
    "groups",
    "init_database",
    "metadata",
    "offices",
    "savings_accounts",
    "savings_products",
    "staff",
]
