"""SQLAlchemy Core table definitions for the reference savings schema.

The search core only assumes these columns exist; the write path that
populates them lives elsewhere. Dates are stored as ISO ``YYYY-MM-DD``
text so month/day extraction works the same on every backend.
"""

from __future__ import annotations

from sqlalchemy import (
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Numeric,
    Table,
    Text,
)

metadata = MetaData()

offices = Table(
    "m_office",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("parent_id", Integer, ForeignKey("m_office.id")),
    Column("hierarchy", Text, nullable=False),  # e.g. ".1.4."
    Column("name", Text, nullable=False, unique=True),
    Column("external_id", Text, unique=True),
    Column("opening_date", Text),
)

staff = Table(
    "m_staff",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("office_id", Integer, ForeignKey("m_office.id"), nullable=False),
    Column("display_name", Text, nullable=False),
    Column("is_active", Integer, default=1, server_default="1"),
)

groups = Table(
    "m_group",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("office_id", Integer, ForeignKey("m_office.id"), nullable=False),
    Column("staff_id", Integer, ForeignKey("m_staff.id")),
    Column("display_name", Text, nullable=False),
    Column("external_id", Text, unique=True),
)

clients = Table(
    "m_client",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("office_id", Integer, ForeignKey("m_office.id"), nullable=False),
    Column("staff_id", Integer, ForeignKey("m_staff.id")),
    Column("display_name", Text, nullable=False),
    Column("external_id", Text, unique=True),
    Column("date_of_birth", Text),
)

savings_products = Table(
    "m_savings_product",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("name", Text, nullable=False, unique=True),
    Column("short_name", Text, nullable=False),
    Column("currency_code", Text, nullable=False),
)

savings_accounts = Table(
    "m_savings_account",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("account_no", Text, nullable=False, unique=True),
    Column("external_id", Text, unique=True),
    Column("client_id", Integer, ForeignKey("m_client.id")),
    Column("group_id", Integer, ForeignKey("m_group.id")),
    Column("product_id", Integer, ForeignKey("m_savings_product.id"), nullable=False),
    Column("field_officer_id", Integer, ForeignKey("m_staff.id")),
    Column("deposit_type_enum", Integer, nullable=False, default=100, server_default="100"),
    Column("status", Text, nullable=False),
    Column("currency_code", Text, nullable=False),
    Column("account_balance", Numeric(19, 6), default=0, server_default="0"),
    Column("submitted_on_date", Text),
    Column("activated_on_date", Text),
)

# ---------------------------------------------------------------------------
# Indexes for frequently filtered columns
# ---------------------------------------------------------------------------

Index("ix_office_hierarchy", offices.c.hierarchy)
Index("ix_client_office", clients.c.office_id)
Index("ix_group_office", groups.c.office_id)
Index("ix_savings_client", savings_accounts.c.client_id)
Index("ix_savings_group", savings_accounts.c.group_id)
Index("ix_savings_product", savings_accounts.c.product_id)
Index("ix_savings_status", savings_accounts.c.status)
