"""Save learning document use case."""

from datetime import datetime
from typing import Any

import logfire
from pydantic import BaseModel

from oer.application.usecase.base import BaseUseCase
from oer.domain.model.document import LearningDocument
from oer.domain.service import LearningDocumentService
from oer.domain.value import DocumentKind


class DocumentItem(BaseModel):
    """Learning document as returned to API clients."""

    id: str
    kind: DocumentKind
    content: dict[str, Any]
    created_at: datetime

    @classmethod
    def from_document(cls, document: LearningDocument) -> "DocumentItem":
        """Build the response item from a domain document."""
        return cls(
            id=str(document.id),
            kind=document.kind,
            content=document.content,
            created_at=document.created_at,
        )


class SaveDocumentRequest(BaseModel):
    """Save document request."""

    kind: DocumentKind
    content: dict[str, Any]


class SaveDocumentResponse(BaseModel):
    """Save document response."""

    message: str
    document: DocumentItem


class SaveDocumentUseCase(BaseUseCase[SaveDocumentRequest, SaveDocumentResponse]):
    """Use case for storing a learning scenario or learning path."""

    def __init__(self, document_service: LearningDocumentService) -> None:
        """Initialize save document use case.

        Args:
            document_service: Learning document domain service
        """
        self.document_service = document_service

    async def execute(self, request: SaveDocumentRequest) -> SaveDocumentResponse:
        """Execute save document flow."""
        with logfire.span("save_document.execute", kind=request.kind.value):
            document = await self.document_service.save_document(
                request.kind, request.content
            )
            return SaveDocumentResponse(
                message=f"{request.kind.label} saved successfully.",
                document=DocumentItem.from_document(document),
            )
