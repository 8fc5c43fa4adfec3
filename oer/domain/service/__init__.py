"""Domain services."""

from .base import Service
from .document_service import LearningDocumentService
from .keyword_service import KeywordService
from .resource_service import ResourceService

__all__ = [
    "KeywordService",
    "LearningDocumentService",
    "ResourceService",
    "Service",
]
