"""Repository interfaces for the OER store domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from oer.domain.repository.document import LearningDocumentRepository
from oer.domain.repository.keyword import KeywordRepository
from oer.domain.repository.resource import ResourceRepository

__all__ = [
    "KeywordRepository",
    "ResourceRepository",
    "LearningDocumentRepository",
]
