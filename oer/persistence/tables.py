"""SQLAlchemy table definitions for the OER store.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Enum,
    Index,
    Integer,
    MetaData,
    String,
    Text,
    Table,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# KEYWORDS TABLE (keyed by normalized value)
# ============================================================================
keywords_table = Table(
    "keywords",
    metadata,
    Column("value", String(255), primary_key=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# RESOURCES TABLE (OERs, keyed by external id)
# ============================================================================
resources_table = Table(
    "resources",
    metadata,
    Column("id", String(255), primary_key=True),
    Column("title", Text, nullable=False),
    Column("description", Text, nullable=True),
    Column("count", Integer, nullable=False, server_default="1"),
    Column("likes", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("count >= 0", name="count_non_negative"),
    CheckConstraint("likes >= 0", name="likes_non_negative"),
)

Index("idx_resources_count", resources_table.c["count"].desc())

# ============================================================================
# LEARNING DOCUMENTS TABLE (scenarios and paths, stored as-is)
# ============================================================================
learning_documents_table = Table(
    "learning_documents",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "kind",
        Enum(
            "learning_scenario",
            "learning_path",
            name="learning_document_kind",
            create_type=False,
        ),
        nullable=False,
    ),
    Column("content", JSONB, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_learning_documents_kind_created_at",
    learning_documents_table.c.kind,
    learning_documents_table.c.created_at.desc(),
)
