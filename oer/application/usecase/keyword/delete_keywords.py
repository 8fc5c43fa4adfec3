"""Delete all keywords use case."""

from pydantic import BaseModel

from oer.domain.service import KeywordService


class DeleteAllKeywordsResponse(BaseModel):
    """Delete all keywords response."""

    message: str


class DeleteAllKeywordsUseCase:
    """Use case for removing every keyword."""

    def __init__(self, keyword_service: KeywordService) -> None:
        """Initialize delete all keywords use case.

        Args:
            keyword_service: Keyword domain service
        """
        self.keyword_service = keyword_service

    async def execute(self) -> DeleteAllKeywordsResponse:
        """Execute delete all keywords flow."""
        await self.keyword_service.clear_keywords()
        return DeleteAllKeywordsResponse(message="All keywords deleted successfully.")
