"""In-memory resource repository for testing.

No method awaits between reading and writing a record, so each call is
atomic with respect to other coroutines on the same event loop.
"""

from datetime import UTC, datetime
from typing import Optional

from oer.domain.model.resource import Resource
from oer.domain.repository.resource import ResourceRepository
from oer.domain.value import ResourceId


class InMemoryResourceRepository(ResourceRepository):
    """In-memory implementation of ResourceRepository for testing."""

    def __init__(self) -> None:
        self._resources: dict[ResourceId, Resource] = {}

    async def upsert(
        self,
        resource_id: ResourceId,
        title: str,
        description: str | None,
        initial_count: int,
    ) -> Resource:
        """Create the resource or bump its count."""
        now = datetime.now(UTC)
        existing = self._resources.get(resource_id)

        if existing is None:
            resource = Resource(
                id=resource_id,
                title=title,
                description=description,
                count=initial_count,
                likes=0,
                created_at=now,
                updated_at=now,
            )
        else:
            resource = existing.model_copy(
                update={
                    "count": existing.count + 1,
                    "title": title,
                    "description": (
                        description
                        if description is not None
                        else existing.description
                    ),
                    "updated_at": now,
                }
            )

        self._resources[resource_id] = resource
        return resource

    async def find_by_id(self, resource_id: ResourceId) -> Optional[Resource]:
        """Find a resource by id."""
        return self._resources.get(resource_id)

    async def decrement_count(self, resource_id: ResourceId) -> Optional[int]:
        """Lower the count, deleting the record when it runs out."""
        resource = self._resources.get(resource_id)
        if resource is None:
            return None

        if resource.count <= 1:
            del self._resources[resource_id]
            return 0

        self._resources[resource_id] = resource.model_copy(
            update={"count": resource.count - 1, "updated_at": datetime.now(UTC)}
        )
        return resource.count - 1

    async def reset_all_counts(self) -> int:
        """Set every count to zero."""
        now = datetime.now(UTC)
        for resource_id, resource in self._resources.items():
            self._resources[resource_id] = resource.model_copy(
                update={"count": 0, "updated_at": now}
            )
        return len(self._resources)

    async def increment_likes(self, resource_id: ResourceId) -> Optional[int]:
        """Add one like."""
        resource = self._resources.get(resource_id)
        if resource is None:
            return None
        self._resources[resource_id] = resource.model_copy(
            update={"likes": resource.likes + 1}
        )
        return resource.likes + 1

    async def decrement_likes(self, resource_id: ResourceId) -> Optional[int]:
        """Remove one like, floored at zero."""
        resource = self._resources.get(resource_id)
        if resource is None:
            return None
        likes = max(resource.likes - 1, 0)
        self._resources[resource_id] = resource.model_copy(update={"likes": likes})
        return likes

    async def find_top_by_count(self, limit: int) -> list[Resource]:
        """Find the resources with the highest counts."""
        resources = sorted(
            self._resources.values(), key=lambda r: r.count, reverse=True
        )
        return resources[:limit]

    async def delete_all(self) -> int:
        """Delete every resource."""
        removed = len(self._resources)
        self._resources.clear()
        return removed
