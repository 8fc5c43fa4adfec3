"""Keyword domain service."""

import logfire
from pydantic import ValidationError as PydanticValidationError

from oer.config import DuplicateKeywordPolicy, StoreSettings
from oer.domain.error import ConflictError, ValidationError
from oer.domain.model.keyword import Keyword
from oer.domain.repository import KeywordRepository
from oer.domain.value import KeywordValue

from .base import Service


def _first_error_message(error: PydanticValidationError) -> str:
    """Message of the first failed check, without pydantic's "Value error, " prefix."""
    detail = error.errors()[0]
    cause = detail.get("ctx", {}).get("error")
    return str(cause) if cause is not None else detail["msg"]


class KeywordService(Service):
    """Domain service for keyword operations."""

    def __init__(
        self, keyword_repository: KeywordRepository, store_settings: StoreSettings
    ) -> None:
        """Initialize keyword service.

        Args:
            keyword_repository: Keyword repository
            store_settings: Store policies
        """
        self.keyword_repository = keyword_repository
        self.store_settings = store_settings

    async def upsert_keyword(self, raw_value: str) -> Keyword:
        """Save a keyword, normalizing it first.

        Under the upsert policy repeated saves return the existing record;
        under the conflict policy they are rejected.

        Args:
            raw_value: Keyword as submitted

        Returns:
            The stored keyword

        Raises:
            ValidationError: If the keyword is blank or too long
            ConflictError: If the keyword exists and the conflict policy is active
        """
        try:
            value = KeywordValue(raw_value)
        except PydanticValidationError as e:
            raise ValidationError(_first_error_message(e)) from e

        policy = self.store_settings.duplicate_keyword
        with logfire.span(
            "keyword_service.upsert_keyword", keyword=value.root, policy=policy.value
        ):
            if policy == DuplicateKeywordPolicy.CONFLICT:
                keyword = await self.keyword_repository.insert(value)
                if keyword is None:
                    logfire.warn("Duplicate keyword rejected", keyword=value.root)
                    raise ConflictError("Keyword", value.root)
            else:
                keyword = await self.keyword_repository.upsert(value)

            logfire.info("Keyword saved", keyword=keyword.value.root)
            return keyword

    async def list_keywords(self) -> list[str]:
        """Get every stored keyword value.

        Returns:
            Normalized keyword values, in no particular order
        """
        with logfire.span("keyword_service.list_keywords"):
            keywords = await self.keyword_repository.find_all()
            logfire.info("Keywords retrieved", count=len(keywords))
            return [keyword.value.root for keyword in keywords]

    async def clear_keywords(self) -> int:
        """Delete all keywords.

        Returns:
            Number of keywords removed
        """
        with logfire.span("keyword_service.clear_keywords"):
            removed = await self.keyword_repository.delete_all()
            logfire.info("Keywords cleared", removed=removed)
            return removed
