"""SQLAlchemy table definitions for the accounts service.

These table definitions match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", Text, nullable=False),  # length is checked on the trimmed value
    Column("email", Text, nullable=False),
    Column("telephone", String(20), nullable=False),
    Column("password", String(255), nullable=False),  # bcrypt hash, never raw
    Column("status", String(20), nullable=False, server_default="active"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("email", name="uq_users_email"),
    CheckConstraint(
        "status IN ('active', 'inactive', 'blocked')", name="ck_users_status"
    ),
)

Index("idx_users_name", users_table.c.name)
Index("idx_users_created_at", users_table.c.created_at)

# Columns a listing may be ordered by
SORTABLE_COLUMNS = {
    "name": users_table.c.name,
    "email": users_table.c.email,
    "telephone": users_table.c.telephone,
    "status": users_table.c.status,
    "created_at": users_table.c.created_at,
    "updated_at": users_table.c.updated_at,
}
