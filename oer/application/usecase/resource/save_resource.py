"""Save resource (OER) use case."""

import logfire
from pydantic import BaseModel, Field

from oer.application.usecase.base import BaseUseCase
from oer.domain.model.resource import Resource
from oer.domain.service import ResourceService


class OERItem(BaseModel):
    """Resource as returned to API clients."""

    id: str
    title: str
    description: str | None
    count: int
    likes: int

    @classmethod
    def from_resource(cls, resource: Resource) -> "OERItem":
        """Build the response item from a domain resource."""
        return cls(
            id=resource.id,
            title=resource.title,
            description=resource.description,
            count=resource.count,
            likes=resource.likes,
        )


class SaveResourceRequest(BaseModel):
    """Save resource request."""

    id: str = Field(min_length=1, max_length=255)
    title: str = Field(min_length=1)
    description: str | None = None


class SaveResourceResponse(BaseModel):
    """Save resource response."""

    message: str
    oer: OERItem


class SaveResourceUseCase(BaseUseCase[SaveResourceRequest, SaveResourceResponse]):
    """Use case for saving a resource or counting another use of it."""

    def __init__(self, resource_service: ResourceService) -> None:
        """Initialize save resource use case.

        Args:
            resource_service: Resource domain service
        """
        self.resource_service = resource_service

    async def execute(self, request: SaveResourceRequest) -> SaveResourceResponse:
        """Execute save resource flow.

        Args:
            request: Save resource request

        Returns:
            Confirmation with the stored resource

        Raises:
            ValidationError: If id or title is blank
        """
        with logfire.span("save_resource.execute", resource_id=request.id):
            resource = await self.resource_service.upsert_resource(
                request.id, request.title, request.description
            )
            return SaveResourceResponse(
                message="OER saved successfully.",
                oer=OERItem.from_resource(resource),
            )
