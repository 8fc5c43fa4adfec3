"""Get resource count use case."""

from pydantic import BaseModel

from oer.application.usecase.base import BaseUseCase
from oer.domain.service import ResourceService
from oer.domain.value import ResourceId


class GetCountRequest(BaseModel):
    """Get count request."""

    resource_id: str


class GetCountResponse(BaseModel):
    """Get count response."""

    count: int


class GetCountUseCase(BaseUseCase[GetCountRequest, GetCountResponse]):
    """Use case for reading a resource count."""

    def __init__(self, resource_service: ResourceService) -> None:
        """Initialize get count use case.

        Args:
            resource_service: Resource domain service
        """
        self.resource_service = resource_service

    async def execute(self, request: GetCountRequest) -> GetCountResponse:
        """Execute get count flow.

        Raises:
            NotFoundError: If the resource does not exist and the policy reports it
        """
        count = await self.resource_service.get_resource_count(
            ResourceId(request.resource_id)
        )
        return GetCountResponse(count=count)
