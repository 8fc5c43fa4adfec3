"""Keyword repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from oer.domain.model.keyword import Keyword
from oer.domain.value import KeywordValue


class KeywordRepository(ABC):
    """Repository interface for Keyword records."""

    @abstractmethod
    async def upsert(self, value: KeywordValue) -> Keyword:
        """Find or create the keyword with this value in one atomic step.

        Concurrent calls with the same value converge on a single record.

        Args:
            value: Normalized keyword value

        Returns:
            The stored keyword
        """
        pass

    @abstractmethod
    async def insert(self, value: KeywordValue) -> Optional[Keyword]:
        """Create the keyword unless it already exists.

        Args:
            value: Normalized keyword value

        Returns:
            The created keyword, or None if the value was already stored
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[Keyword]:
        """Find all keywords.

        Returns:
            List of keywords, in no particular order
        """
        pass

    @abstractmethod
    async def delete_all(self) -> int:
        """Delete every keyword.

        Returns:
            Number of keywords removed
        """
        pass
