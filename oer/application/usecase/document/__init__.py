"""Learning document use cases."""

from .get_documents import (
    GetDocumentRequest,
    GetDocumentResponse,
    GetDocumentUseCase,
    ListDocumentsRequest,
    ListDocumentsResponse,
    ListDocumentsUseCase,
)
from .save_document import (
    DocumentItem,
    SaveDocumentRequest,
    SaveDocumentResponse,
    SaveDocumentUseCase,
)

__all__ = [
    "DocumentItem",
    "GetDocumentRequest",
    "GetDocumentResponse",
    "GetDocumentUseCase",
    "ListDocumentsRequest",
    "ListDocumentsResponse",
    "ListDocumentsUseCase",
    "SaveDocumentRequest",
    "SaveDocumentResponse",
    "SaveDocumentUseCase",
]
