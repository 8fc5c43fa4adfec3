"""Decrement resource count use case."""

from pydantic import BaseModel

from oer.application.usecase.base import BaseUseCase
from oer.domain.service import ResourceService
from oer.domain.value import DecrementOutcome, ResourceId


class UpdateCountRequest(BaseModel):
    """Decrement count request."""

    resource_id: str


class UpdateCountResponse(BaseModel):
    """Decrement count response."""

    message: str


class UpdateCountUseCase(BaseUseCase[UpdateCountRequest, UpdateCountResponse]):
    """Use case for lowering a resource count, removing it at zero."""

    def __init__(self, resource_service: ResourceService) -> None:
        """Initialize update count use case.

        Args:
            resource_service: Resource domain service
        """
        self.resource_service = resource_service

    async def execute(self, request: UpdateCountRequest) -> UpdateCountResponse:
        """Execute decrement flow.

        Raises:
            NotFoundError: If the resource does not exist
        """
        result = await self.resource_service.decrement_resource_count(
            ResourceId(request.resource_id)
        )

        if result.outcome == DecrementOutcome.REMOVED:
            return UpdateCountResponse(
                message="OER count reached zero, OER removed successfully."
            )
        return UpdateCountResponse(message="OER count updated successfully.")
