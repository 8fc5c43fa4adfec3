"""Delete all resources use case."""

from pydantic import BaseModel

from oer.domain.service import ResourceService


class DeleteAllResourcesResponse(BaseModel):
    """Delete all resources response."""

    message: str


class DeleteAllResourcesUseCase:
    """Use case for removing every resource."""

    def __init__(self, resource_service: ResourceService) -> None:
        """Initialize delete all resources use case.

        Args:
            resource_service: Resource domain service
        """
        self.resource_service = resource_service

    async def execute(self) -> DeleteAllResourcesResponse:
        """Execute delete all resources flow."""
        await self.resource_service.delete_all_resources()
        return DeleteAllResourcesResponse(message="All OERs deleted successfully.")
