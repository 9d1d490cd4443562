"""initial_schema

Create the schema for Quote Vote:
- Quotes (text, author, category, vote counter and voter set)
- Users (username/password accounts)

Revision ID: 3f1c2a9d7b44
Revises:
Create Date: 2026-10-19 10:12:41.503218

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b44"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "quotes",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column(
            "author", sa.String(255), nullable=False, server_default="anonymous"
        ),
        sa.Column("category", sa.String(255), nullable=True),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("votes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "voted_by",
            postgresql.ARRAY(sa.Text()),
            nullable=False,
            server_default="{}",
        ),
        sa.CheckConstraint("votes >= 0", name="ck_quotes_votes_non_negative"),
        sa.CheckConstraint(
            "votes = cardinality(voted_by)", name="ck_quotes_votes_match_voters"
        ),
    )
    op.create_index("idx_quotes_created_at", "quotes", ["created_at"])
    op.create_index("idx_quotes_category", "quotes", ["category"])
    op.create_index("idx_quotes_votes", "quotes", ["votes"])

    op.create_table(
        "users",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("username", sa.String(50), nullable=False, unique=True),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("users")
    op.drop_index("idx_quotes_votes", table_name="quotes")
    op.drop_index("idx_quotes_category", table_name="quotes")
    op.drop_index("idx_quotes_created_at", table_name="quotes")
    op.drop_table("quotes")
