"""Add suppression_entry - memory of deleted duplicate hash pairs.

Revision ID: 002
Revises: 001
Create Date: 2025-12-05

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

revision: str = "002"
down_revision: str | None = "001"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "suppression_entry",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("owner_id", sa.String(255), nullable=False),
        sa.Column("hash_a", sa.Text(), nullable=False),
        sa.Column("hash_b", sa.Text(), nullable=False),
        sa.Column("label_a", sa.Text(), nullable=False),
        sa.Column("label_b", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
    )
    op.create_index("ix_suppression_entry_owner", "suppression_entry", ["owner_id"])
    op.create_index(
        "ix_suppression_entry_hashes", "suppression_entry", ["hash_a", "hash_b"]
    )


def downgrade() -> None:
    op.drop_table("suppression_entry")
