"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from oer.domain.model import Keyword, LearningDocument, Resource
from oer.domain.value import DocumentId, DocumentKind, KeywordValue, ResourceId


def row_to_keyword(row: Dict[str, Any]) -> Keyword:
    """Convert database row to Keyword domain model."""
    return Keyword(
        value=KeywordValue(row["value"]),
        created_at=row["created_at"],
    )


def row_to_resource(row: Dict[str, Any]) -> Resource:
    """Convert database row to Resource domain model.

    Args:
        row: Database row as dict

    Returns:
        Resource domain model
    """
    return Resource(
        id=ResourceId(row["id"]),
        title=row["title"],
        description=row.get("description"),
        count=row["count"],
        likes=row["likes"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def row_to_document(row: Dict[str, Any]) -> LearningDocument:
    """Convert database row to LearningDocument domain model."""
    return LearningDocument(
        id=DocumentId(UUID(row["id"]) if isinstance(row["id"], str) else row["id"]),
        kind=DocumentKind(row["kind"]),
        content=row["content"],
        created_at=row["created_at"],
    )


def document_to_dict(document: LearningDocument) -> Dict[str, Any]:
    """Convert LearningDocument domain model to database dict.

    Args:
        document: Document domain model

    Returns:
        Dict suitable for database insert
    """
    return {
        "id": document.id,
        "kind": document.kind.value,
        "content": document.content,
        "created_at": document.created_at,
    }
