"""Initial schema - document, duplicate_relationship, activity_event.

Revision ID: 001
Revises:
Create Date: 2025-11-17

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "document",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("owner_id", sa.String(255), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("size", sa.BigInteger(), nullable=False),
        sa.Column("file_type", sa.String(255), nullable=False, server_default=""),
        sa.Column("content_hash", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_document_owner_created", "document", ["owner_id", "created_at"])
    op.create_index("ix_document_owner_hash", "document", ["owner_id", "content_hash"])

    op.create_table(
        "duplicate_relationship",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column(
            "source_document_id",
            sa.UUID(),
            sa.ForeignKey("document.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "duplicate_document_id",
            sa.UUID(),
            sa.ForeignKey("document.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("similarity_percentage", sa.Integer(), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="similar"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("reviewed_by", sa.String(255), nullable=True),
        sa.Column("reviewed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.CheckConstraint(
            "similarity_percentage >= 0 AND similarity_percentage <= 100",
            name="ck_duplicate_similarity_range",
        ),
        sa.CheckConstraint(
            "status IN ('exact', 'similar', 'reviewed', 'dismissed')",
            name="ck_duplicate_status",
        ),
    )
    op.create_index(
        "ix_duplicate_pair",
        "duplicate_relationship",
        ["source_document_id", "duplicate_document_id"],
        unique=True,
    )
    op.create_index(
        "ix_duplicate_duplicate_document",
        "duplicate_relationship",
        ["duplicate_document_id"],
    )

    op.create_table(
        "activity_event",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("owner_id", sa.String(255), nullable=False),
        sa.Column("action", sa.String(100), nullable=False),
        sa.Column("entity_type", sa.String(50), nullable=False),
        sa.Column("subject_id", sa.UUID(), nullable=True),
        sa.Column("payload", postgresql.JSONB(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_activity_event_owner_created", "activity_event", ["owner_id", "created_at"])


def downgrade() -> None:
    op.drop_table("activity_event")
    op.drop_table("duplicate_relationship")
    op.drop_table("document")
