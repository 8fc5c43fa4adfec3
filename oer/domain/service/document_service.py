"""Learning document domain service."""

from datetime import UTC, datetime
from typing import Any
from uuid import uuid4

import logfire

from oer.domain.error import NotFoundError
from oer.domain.model.document import LearningDocument
from oer.domain.repository import LearningDocumentRepository
from oer.domain.value import DocumentId, DocumentKind

from .base import Service


class LearningDocumentService(Service):
    """Domain service for learning scenarios and learning paths.

    Documents are passed through to storage unchanged.
    """

    def __init__(self, document_repository: LearningDocumentRepository) -> None:
        """Initialize document service.

        Args:
            document_repository: Learning document repository
        """
        self.document_repository = document_repository

    async def save_document(
        self, kind: DocumentKind, content: dict[str, Any]
    ) -> LearningDocument:
        """Store a new document of the given kind."""
        with logfire.span("document_service.save_document", kind=kind.value):
            document = LearningDocument(
                id=DocumentId(uuid4()),
                kind=kind,
                content=content,
                created_at=datetime.now(UTC),
            )
            saved = await self.document_repository.save(document)
            logfire.info("Document saved", kind=kind.value, document_id=str(saved.id))
            return saved

    async def list_documents(self, kind: DocumentKind) -> list[LearningDocument]:
        """Get all documents of one kind, newest first."""
        with logfire.span("document_service.list_documents", kind=kind.value):
            documents = await self.document_repository.find_all(kind)
            logfire.info("Documents retrieved", kind=kind.value, count=len(documents))
            return documents

    async def get_document(
        self, kind: DocumentKind, document_id: DocumentId
    ) -> LearningDocument:
        """Get one document.

        Raises:
            NotFoundError: If no document of this kind has the id
        """
        with logfire.span(
            "document_service.get_document",
            kind=kind.value,
            document_id=str(document_id),
        ):
            document = await self.document_repository.find_by_id(kind, document_id)
            if document is None:
                logfire.warn(
                    "Document not found", kind=kind.value, document_id=str(document_id)
                )
                raise NotFoundError(kind.label, str(document_id))
            return document
