"""Learning document repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from oer.domain.model.document import LearningDocument
from oer.domain.value import DocumentId, DocumentKind


class LearningDocumentRepository(ABC):
    """Repository interface for learning scenarios and learning paths."""

    @abstractmethod
    async def save(self, document: LearningDocument) -> LearningDocument:
        """Store a new document.

        Args:
            document: Document to store

        Returns:
            Stored document
        """
        pass

    @abstractmethod
    async def find_by_id(
        self, kind: DocumentKind, document_id: DocumentId
    ) -> Optional[LearningDocument]:
        """Find a document of the given kind by id.

        Returns:
            Document if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, kind: DocumentKind) -> list[LearningDocument]:
        """Find all documents of one kind, newest first."""
        pass
