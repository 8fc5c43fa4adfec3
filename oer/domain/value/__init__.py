"""Domain value objects for the OER store."""

from oer.domain.value.identifiers import DocumentId, ResourceId
from oer.domain.value.types import DecrementOutcome, DocumentKind, KeywordValue

__all__ = [
    # Identifiers
    "ResourceId",
    "DocumentId",
    # Types
    "KeywordValue",
    "DecrementOutcome",
    "DocumentKind",
]
