"""SQLAlchemy table definitions for Quote Vote.

These table definitions match the schema created by the Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# QUOTES TABLE
# ============================================================================
quotes_table = Table(
    "quotes",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("text", Text, nullable=False),
    Column("author", String(255), nullable=False, server_default="anonymous"),
    Column("category", String(255), nullable=True),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    Column("votes", Integer, nullable=False, server_default="0"),
    Column("voted_by", ARRAY(Text), nullable=False, server_default="{}"),
    CheckConstraint("votes >= 0", name="ck_quotes_votes_non_negative"),
    CheckConstraint(
        "votes = cardinality(voted_by)", name="ck_quotes_votes_match_voters"
    ),
)

Index("idx_quotes_created_at", quotes_table.c.created_at)
Index("idx_quotes_category", quotes_table.c.category)
Index("idx_quotes_votes", quotes_table.c.votes)

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("username", String(50), nullable=False, unique=True),
    Column("password_hash", String(255), nullable=False),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
)
