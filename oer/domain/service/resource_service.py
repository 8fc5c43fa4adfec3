"""Resource domain service."""

import logfire

from oer.config import MissingResourcePolicy, StoreSettings
from oer.domain.error import NotFoundError, ValidationError
from oer.domain.model.resource import CountDecrement, Resource
from oer.domain.repository import ResourceRepository
from oer.domain.value import DecrementOutcome, ResourceId

from .base import Service


class ResourceService(Service):
    """Domain service for resource (OER) operations.

    Owns the count and like lifecycle: save bumps the count, decrementing to
    zero deletes the record, and likes never go below zero.
    """

    def __init__(
        self, resource_repository: ResourceRepository, store_settings: StoreSettings
    ) -> None:
        """Initialize resource service.

        Args:
            resource_repository: Resource repository
            store_settings: Store policies
        """
        self.resource_repository = resource_repository
        self.store_settings = store_settings

    @property
    def _missing_is_error(self) -> bool:
        return (
            self.store_settings.missing_resource == MissingResourcePolicy.NOT_FOUND
        )

    async def upsert_resource(
        self, resource_id: str, title: str, description: str | None = None
    ) -> Resource:
        """Create a resource or count another use of it.

        Args:
            resource_id: External resource id
            title: Resource title
            description: Optional description

        Returns:
            The stored resource

        Raises:
            ValidationError: If the id or title is blank
        """
        if not resource_id or not resource_id.strip():
            raise ValidationError("Resource id is required")
        if not title or not title.strip():
            raise ValidationError("Resource title is required")

        with logfire.span("resource_service.upsert_resource", resource_id=resource_id):
            resource = await self.resource_repository.upsert(
                ResourceId(resource_id),
                title=title,
                description=description,
                initial_count=self.store_settings.initial_count,
            )
            logfire.info(
                "Resource saved", resource_id=resource_id, count=resource.count
            )
            return resource

    async def decrement_resource_count(self, resource_id: ResourceId) -> CountDecrement:
        """Lower a resource count by one, removing the resource at zero.

        Args:
            resource_id: External resource id

        Returns:
            Whether the resource was updated or removed, and its remaining count

        Raises:
            NotFoundError: If the resource does not exist
        """
        with logfire.span(
            "resource_service.decrement_resource_count", resource_id=resource_id
        ):
            remaining = await self.resource_repository.decrement_count(resource_id)
            if remaining is None:
                logfire.warn("Decrement on missing resource", resource_id=resource_id)
                raise NotFoundError("Resource", resource_id)

            if remaining == 0:
                logfire.info("Resource removed", resource_id=resource_id)
                outcome = DecrementOutcome.REMOVED
            else:
                logfire.info(
                    "Resource count decremented",
                    resource_id=resource_id,
                    count=remaining,
                )
                outcome = DecrementOutcome.UPDATED

            return CountDecrement(
                resource_id=resource_id, outcome=outcome, count=remaining
            )

    async def get_resource_count(self, resource_id: ResourceId) -> int:
        """Get the usage count of a resource.

        Returns:
            Stored count, or 0 for a missing resource under the default policy

        Raises:
            NotFoundError: If the resource does not exist and the policy says so
        """
        with logfire.span(
            "resource_service.get_resource_count", resource_id=resource_id
        ):
            resource = await self.resource_repository.find_by_id(resource_id)
            if resource is None:
                if self._missing_is_error:
                    raise NotFoundError("Resource", resource_id)
                return 0
            return resource.count

    async def reset_all_counts(self) -> int:
        """Set every resource count to zero. Nothing is deleted.

        Returns:
            Number of resources reset
        """
        with logfire.span("resource_service.reset_all_counts"):
            touched = await self.resource_repository.reset_all_counts()
            logfire.info("Resource counts reset", resources=touched)
            return touched

    async def like_resource(self, resource_id: ResourceId) -> int | None:
        """Add a like to a resource.

        Returns:
            New like count, or None when a missing resource was ignored

        Raises:
            NotFoundError: If the resource does not exist and the policy says so
        """
        with logfire.span("resource_service.like_resource", resource_id=resource_id):
            likes = await self.resource_repository.increment_likes(resource_id)
            return self._likes_or_missing(resource_id, likes)

    async def unlike_resource(self, resource_id: ResourceId) -> int | None:
        """Remove a like from a resource; no-op when it has none.

        Returns:
            New like count, or None when a missing resource was ignored

        Raises:
            NotFoundError: If the resource does not exist and the policy says so
        """
        with logfire.span("resource_service.unlike_resource", resource_id=resource_id):
            likes = await self.resource_repository.decrement_likes(resource_id)
            return self._likes_or_missing(resource_id, likes)

    def _likes_or_missing(self, resource_id: ResourceId, likes: int | None) -> int | None:
        if likes is None:
            if self._missing_is_error:
                logfire.warn("Like change on missing resource", resource_id=resource_id)
                raise NotFoundError("Resource", resource_id)
            logfire.info("Like change on missing resource ignored", resource_id=resource_id)
            return None

        logfire.info("Resource likes changed", resource_id=resource_id, likes=likes)
        return likes

    async def get_likes(self, resource_id: ResourceId) -> int:
        """Get the like count of a resource.

        Returns:
            Stored likes, or 0 for a missing resource under the default policy

        Raises:
            NotFoundError: If the resource does not exist and the policy says so
        """
        with logfire.span("resource_service.get_likes", resource_id=resource_id):
            resource = await self.resource_repository.find_by_id(resource_id)
            if resource is None:
                if self._missing_is_error:
                    raise NotFoundError("Resource", resource_id)
                return 0
            return resource.likes

    async def delete_all_resources(self) -> int:
        """Delete every resource.

        Returns:
            Number of resources removed
        """
        with logfire.span("resource_service.delete_all_resources"):
            removed = await self.resource_repository.delete_all()
            logfire.info("Resources deleted", removed=removed)
            return removed

    async def list_resources_by_count_descending(
        self, limit: int | None = None
    ) -> list[Resource]:
        """Get the most used resources.

        Args:
            limit: Maximum number of resources, defaults to the configured size

        Returns:
            Resources ordered by count, highest first (ties in any order)

        Raises:
            ValidationError: If limit is below 1
        """
        if limit is None:
            limit = self.store_settings.top_resources_limit
        if limit < 1:
            raise ValidationError("Limit must be at least 1")

        with logfire.span(
            "resource_service.list_resources_by_count_descending", limit=limit
        ):
            resources = await self.resource_repository.find_top_by_count(limit)
            logfire.info("Top resources retrieved", count=len(resources))
            return resources
