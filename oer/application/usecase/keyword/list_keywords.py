"""List keywords use case."""

from pydantic import BaseModel

from oer.domain.service import KeywordService


class ListKeywordsResponse(BaseModel):
    """List keywords response."""

    keywords: list[str]


class ListKeywordsUseCase:
    """Use case for listing every saved keyword."""

    def __init__(self, keyword_service: KeywordService) -> None:
        """Initialize list keywords use case.

        Args:
            keyword_service: Keyword domain service
        """
        self.keyword_service = keyword_service

    async def execute(self) -> ListKeywordsResponse:
        """Execute list keywords flow."""
        keywords = await self.keyword_service.list_keywords()
        return ListKeywordsResponse(keywords=keywords)
