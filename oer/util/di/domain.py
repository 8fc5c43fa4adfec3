"""Domain layer DI providers."""

from dishka import Scope, provide

from oer.config import StoreSettings
from oer.domain.repository import (
    KeywordRepository,
    LearningDocumentRepository,
    ResourceRepository,
)
from oer.domain.service import (
    KeywordService,
    LearningDocumentService,
    ResourceService,
)
from oer.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_keyword_service(
        self, keyword_repository: KeywordRepository, store_settings: StoreSettings
    ) -> KeywordService:
        """Provide keyword domain service."""
        return KeywordService(
            keyword_repository=keyword_repository, store_settings=store_settings
        )

    @provide
    def get_resource_service(
        self, resource_repository: ResourceRepository, store_settings: StoreSettings
    ) -> ResourceService:
        """Provide resource domain service."""
        return ResourceService(
            resource_repository=resource_repository, store_settings=store_settings
        )

    @provide
    def get_document_service(
        self, document_repository: LearningDocumentRepository
    ) -> LearningDocumentService:
        """Provide learning document domain service."""
        return LearningDocumentService(document_repository=document_repository)
