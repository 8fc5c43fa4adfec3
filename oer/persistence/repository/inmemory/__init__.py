"""In-memory repository implementations for testing."""

from .document import InMemoryLearningDocumentRepository
from .keyword import InMemoryKeywordRepository
from .resource import InMemoryResourceRepository

__all__ = [
    "InMemoryKeywordRepository",
    "InMemoryLearningDocumentRepository",
    "InMemoryResourceRepository",
]
