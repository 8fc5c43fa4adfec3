"""initial_schema

Create the OER store schema:
- Keywords (keyed by normalized value)
- Resources (OERs keyed by external id, with usage count and likes)
- Learning documents (learning scenarios and learning paths as JSONB)

Revision ID: 3c6f2d91a4e7
Revises:
Create Date: 2026-10-18 10:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c6f2d91a4e7"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE learning_document_kind AS ENUM ('learning_scenario', 'learning_path');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # KEYWORDS table
    # ========================================================================
    op.create_table(
        "keywords",
        sa.Column("value", sa.String(length=255), nullable=False),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("value"),
    )

    # ========================================================================
    # RESOURCES table
    # ========================================================================
    op.create_table(
        "resources",
        sa.Column("id", sa.String(length=255), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("count", sa.Integer(), server_default=sa.text("1"), nullable=False),
        sa.Column("likes", sa.Integer(), server_default=sa.text("0"), nullable=False),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("count >= 0", name="count_non_negative"),
        sa.CheckConstraint("likes >= 0", name="likes_non_negative"),
    )
    op.create_index(
        "idx_resources_count", "resources", [sa.text('"count" DESC')], unique=False
    )

    # ========================================================================
    # LEARNING DOCUMENTS table
    # ========================================================================
    op.create_table(
        "learning_documents",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column(
            "kind",
            postgresql.ENUM(
                "learning_scenario",
                "learning_path",
                name="learning_document_kind",
                create_type=False,
            ),
            nullable=False,
        ),
        sa.Column("content", postgresql.JSONB(), nullable=False),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_learning_documents_kind_created_at",
        "learning_documents",
        ["kind", sa.text("created_at DESC")],
        unique=False,
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(
        "idx_learning_documents_kind_created_at", table_name="learning_documents"
    )
    op.drop_table("learning_documents")
    op.drop_index("idx_resources_count", table_name="resources")
    op.drop_table("resources")
    op.drop_table("keywords")
    op.execute("DROP TYPE IF EXISTS learning_document_kind")
