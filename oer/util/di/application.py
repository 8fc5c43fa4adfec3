"""Application layer DI providers."""

from dishka import Scope, provide

from oer.application.usecase.document import (
    GetDocumentUseCase,
    ListDocumentsUseCase,
    SaveDocumentUseCase,
)
from oer.application.usecase.keyword import (
    DeleteAllKeywordsUseCase,
    ListKeywordsUseCase,
    SaveKeywordUseCase,
)
from oer.application.usecase.resource import (
    DeleteAllResourcesUseCase,
    GetCountUseCase,
    GetLikesUseCase,
    LikeResourceUseCase,
    ListTopResourcesUseCase,
    ResetCountsUseCase,
    SaveResourceUseCase,
    UnlikeResourceUseCase,
    UpdateCountUseCase,
)
from oer.domain.service import (
    KeywordService,
    LearningDocumentService,
    ResourceService,
)
from oer.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Keyword use cases
    @provide(scope=Scope.REQUEST)
    def get_save_keyword_use_case(
        self, keyword_service: KeywordService
    ) -> SaveKeywordUseCase:
        """Provide save keyword use case."""
        return SaveKeywordUseCase(keyword_service=keyword_service)

    @provide(scope=Scope.REQUEST)
    def get_list_keywords_use_case(
        self, keyword_service: KeywordService
    ) -> ListKeywordsUseCase:
        """Provide list keywords use case."""
        return ListKeywordsUseCase(keyword_service=keyword_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_all_keywords_use_case(
        self, keyword_service: KeywordService
    ) -> DeleteAllKeywordsUseCase:
        """Provide delete all keywords use case."""
        return DeleteAllKeywordsUseCase(keyword_service=keyword_service)

    # Resource use cases
    @provide(scope=Scope.REQUEST)
    def get_save_resource_use_case(
        self, resource_service: ResourceService
    ) -> SaveResourceUseCase:
        """Provide save resource use case."""
        return SaveResourceUseCase(resource_service=resource_service)

    @provide(scope=Scope.REQUEST)
    def get_update_count_use_case(
        self, resource_service: ResourceService
    ) -> UpdateCountUseCase:
        """Provide decrement count use case."""
        return UpdateCountUseCase(resource_service=resource_service)

    @provide(scope=Scope.REQUEST)
    def get_get_count_use_case(
        self, resource_service: ResourceService
    ) -> GetCountUseCase:
        """Provide get count use case."""
        return GetCountUseCase(resource_service=resource_service)

    @provide(scope=Scope.REQUEST)
    def get_reset_counts_use_case(
        self, resource_service: ResourceService
    ) -> ResetCountsUseCase:
        """Provide reset counts use case."""
        return ResetCountsUseCase(resource_service=resource_service)

    @provide(scope=Scope.REQUEST)
    def get_like_resource_use_case(
        self, resource_service: ResourceService
    ) -> LikeResourceUseCase:
        """Provide like use case."""
        return LikeResourceUseCase(resource_service=resource_service)

    @provide(scope=Scope.REQUEST)
    def get_unlike_resource_use_case(
        self, resource_service: ResourceService
    ) -> UnlikeResourceUseCase:
        """Provide unlike use case."""
        return UnlikeResourceUseCase(resource_service=resource_service)

    @provide(scope=Scope.REQUEST)
    def get_get_likes_use_case(
        self, resource_service: ResourceService
    ) -> GetLikesUseCase:
        """Provide get likes use case."""
        return GetLikesUseCase(resource_service=resource_service)

    @provide(scope=Scope.REQUEST)
    def get_list_top_resources_use_case(
        self, resource_service: ResourceService
    ) -> ListTopResourcesUseCase:
        """Provide top resources use case."""
        return ListTopResourcesUseCase(resource_service=resource_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_all_resources_use_case(
        self, resource_service: ResourceService
    ) -> DeleteAllResourcesUseCase:
        """Provide delete all resources use case."""
        return DeleteAllResourcesUseCase(resource_service=resource_service)

    # Learning document use cases
    @provide(scope=Scope.REQUEST)
    def get_save_document_use_case(
        self, document_service: LearningDocumentService
    ) -> SaveDocumentUseCase:
        """Provide save document use case."""
        return SaveDocumentUseCase(document_service=document_service)

    @provide(scope=Scope.REQUEST)
    def get_list_documents_use_case(
        self, document_service: LearningDocumentService
    ) -> ListDocumentsUseCase:
        """Provide list documents use case."""
        return ListDocumentsUseCase(document_service=document_service)

    @provide(scope=Scope.REQUEST)
    def get_get_document_use_case(
        self, document_service: LearningDocumentService
    ) -> GetDocumentUseCase:
        """Provide get document use case."""
        return GetDocumentUseCase(document_service=document_service)
