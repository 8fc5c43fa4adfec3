"""List and fetch learning document use cases."""

from uuid import UUID

from pydantic import BaseModel

from oer.application.usecase.base import BaseUseCase
from oer.application.usecase.document.save_document import DocumentItem
from oer.domain.service import LearningDocumentService
from oer.domain.value import DocumentId, DocumentKind


class ListDocumentsRequest(BaseModel):
    """List documents request."""

    kind: DocumentKind


class ListDocumentsResponse(BaseModel):
    """List documents response."""

    documents: list[DocumentItem]


class GetDocumentRequest(BaseModel):
    """Get document request."""

    kind: DocumentKind
    document_id: UUID


class GetDocumentResponse(BaseModel):
    """Get document response."""

    document: DocumentItem


class ListDocumentsUseCase(
    BaseUseCase[ListDocumentsRequest, ListDocumentsResponse]
):
    """Use case for listing documents of one kind."""

    def __init__(self, document_service: LearningDocumentService) -> None:
        """Initialize list documents use case.

        Args:
            document_service: Learning document domain service
        """
        self.document_service = document_service

    async def execute(self, request: ListDocumentsRequest) -> ListDocumentsResponse:
        """Execute list documents flow."""
        documents = await self.document_service.list_documents(request.kind)
        return ListDocumentsResponse(
            documents=[DocumentItem.from_document(d) for d in documents]
        )


class GetDocumentUseCase(BaseUseCase[GetDocumentRequest, GetDocumentResponse]):
    """Use case for fetching a single document."""

    def __init__(self, document_service: LearningDocumentService) -> None:
        """Initialize get document use case.

        Args:
            document_service: Learning document domain service
        """
        self.document_service = document_service

    async def execute(self, request: GetDocumentRequest) -> GetDocumentResponse:
        """Execute get document flow.

        Raises:
            NotFoundError: If no document of this kind has the id
        """
        document = await self.document_service.get_document(
            request.kind, DocumentId(request.document_id)
        )
        return GetDocumentResponse(document=DocumentItem.from_document(document))
