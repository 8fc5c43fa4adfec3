"""In-memory implementation of LearningDocument repository for testing."""

from copy import deepcopy
from typing import Optional

from oer.domain.model.document import LearningDocument
from oer.domain.repository.document import LearningDocumentRepository
from oer.domain.value import DocumentId, DocumentKind


class InMemoryLearningDocumentRepository(LearningDocumentRepository):
    """In-memory implementation of LearningDocumentRepository for testing."""

    def __init__(self) -> None:
        """Initialize empty repository."""
        self._documents: dict[DocumentId, LearningDocument] = {}

    async def save(self, document: LearningDocument) -> LearningDocument:
        """Store a new document."""
        self._documents[document.id] = deepcopy(document)
        return deepcopy(document)

    async def find_by_id(
        self, kind: DocumentKind, document_id: DocumentId
    ) -> Optional[LearningDocument]:
        """Find a document of the given kind by id."""
        document = self._documents.get(document_id)
        if document is None or document.kind != kind:
            return None
        return deepcopy(document)

    async def find_all(self, kind: DocumentKind) -> list[LearningDocument]:
        """Find all documents of one kind, newest first."""
        documents = [d for d in self._documents.values() if d.kind == kind]
        documents.sort(key=lambda d: d.created_at, reverse=True)
        return [deepcopy(d) for d in documents]
