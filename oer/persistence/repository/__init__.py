"""PostgreSQL repository implementations."""

from oer.persistence.repository.document import PostgresLearningDocumentRepository
from oer.persistence.repository.keyword import PostgresKeywordRepository
from oer.persistence.repository.resource import PostgresResourceRepository

__all__ = [
    "PostgresKeywordRepository",
    "PostgresResourceRepository",
    "PostgresLearningDocumentRepository",
]
