"""Resource repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from oer.domain.model.resource import Resource
from oer.domain.value import ResourceId


class ResourceRepository(ABC):
    """Repository for Resource records.

    Every counter change is a single atomic operation in the backing store;
    callers never read a counter, change it and write it back.
    """

    @abstractmethod
    async def upsert(
        self,
        resource_id: ResourceId,
        title: str,
        description: str | None,
        initial_count: int,
    ) -> Resource:
        """Create the resource or bump its count.

        A new record starts at ``initial_count``. An existing record gets
        ``count + 1``, the new title and, when given, the new description,
        all in the same write.

        Args:
            resource_id: External resource id
            title: Resource title
            description: Optional description
            initial_count: Count for a newly created record

        Returns:
            The stored resource after the write
        """
        pass

    @abstractmethod
    async def find_by_id(self, resource_id: ResourceId) -> Optional[Resource]:
        """Find a resource by id.

        Args:
            resource_id: External resource id

        Returns:
            The resource if found, None otherwise
        """
        pass

    @abstractmethod
    async def decrement_count(self, resource_id: ResourceId) -> Optional[int]:
        """Lower the count by one, deleting the record when it runs out.

        A record whose count would drop to zero or below is deleted instead
        of being updated.

        Args:
            resource_id: External resource id

        Returns:
            None if the resource does not exist, 0 if it was deleted,
            otherwise the new count
        """
        pass

    @abstractmethod
    async def reset_all_counts(self) -> int:
        """Set every count to zero without deleting anything.

        Returns:
            Number of resources touched
        """
        pass

    @abstractmethod
    async def increment_likes(self, resource_id: ResourceId) -> Optional[int]:
        """Atomically add one like.

        Returns:
            New like count, or None if the resource does not exist
        """
        pass

    @abstractmethod
    async def decrement_likes(self, resource_id: ResourceId) -> Optional[int]:
        """Atomically remove one like, never going below zero.

        Returns:
            New like count, or None if the resource does not exist
        """
        pass

    @abstractmethod
    async def find_top_by_count(self, limit: int) -> list[Resource]:
        """Find the resources with the highest counts.

        Order among equal counts is unspecified.

        Args:
            limit: Maximum number of resources to return

        Returns:
            Resources ordered by count, highest first
        """
        pass

    @abstractmethod
    async def delete_all(self) -> int:
        """Delete every resource.

        Returns:
            Number of resources removed
        """
        pass
