"""In-memory implementation of Keyword repository for testing."""

from datetime import UTC, datetime
from typing import Optional

from oer.domain.model.keyword import Keyword
from oer.domain.repository.keyword import KeywordRepository
from oer.domain.value import KeywordValue


class InMemoryKeywordRepository(KeywordRepository):
    """In-memory implementation of KeywordRepository for testing."""

    def __init__(self) -> None:
        """Initialize empty repository."""
        self._keywords: dict[str, Keyword] = {}

    async def upsert(self, value: KeywordValue) -> Keyword:
        """Find or create the keyword."""
        keyword = self._keywords.get(value.root)
        if keyword is None:
            keyword = Keyword(value=value, created_at=datetime.now(UTC))
            self._keywords[value.root] = keyword
        return keyword

    async def insert(self, value: KeywordValue) -> Optional[Keyword]:
        """Create the keyword unless it already exists."""
        if value.root in self._keywords:
            return None
        keyword = Keyword(value=value, created_at=datetime.now(UTC))
        self._keywords[value.root] = keyword
        return keyword

    async def find_all(self) -> list[Keyword]:
        """Find all keywords."""
        return list(self._keywords.values())

    async def delete_all(self) -> int:
        """Delete every keyword."""
        removed = len(self._keywords)
        self._keywords.clear()
        return removed
