"""Save keyword use case."""

import logfire
from pydantic import BaseModel, Field

from oer.application.usecase.base import BaseUseCase
from oer.domain.service import KeywordService


class SaveKeywordRequest(BaseModel):
    """Save keyword request."""

    keyword: str = Field(min_length=1)


class SaveKeywordResponse(BaseModel):
    """Save keyword response."""

    message: str
    keyword: str  # Normalized value as stored


class SaveKeywordUseCase(BaseUseCase[SaveKeywordRequest, SaveKeywordResponse]):
    """Use case for saving a keyword."""

    def __init__(self, keyword_service: KeywordService) -> None:
        """Initialize save keyword use case.

        Args:
            keyword_service: Keyword domain service
        """
        self.keyword_service = keyword_service

    async def execute(self, request: SaveKeywordRequest) -> SaveKeywordResponse:
        """Execute save keyword flow.

        Args:
            request: Save keyword request

        Returns:
            Confirmation with the normalized keyword

        Raises:
            ValidationError: If the keyword is blank
            ConflictError: If the keyword exists under the conflict policy
        """
        with logfire.span("save_keyword.execute"):
            keyword = await self.keyword_service.upsert_keyword(request.keyword)
            return SaveKeywordResponse(
                message="Keyword saved successfully.",
                keyword=keyword.value.root,
            )
