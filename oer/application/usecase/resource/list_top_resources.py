"""List most used resources use case."""

import logfire
from pydantic import BaseModel, ConfigDict, Field

from oer.application.usecase.base import BaseUseCase
from oer.application.usecase.resource.save_resource import OERItem
from oer.domain.service import ResourceService


class ListTopResourcesRequest(BaseModel):
    """List top resources request."""

    limit: int | None = Field(default=None, ge=1, le=100)


class ListTopResourcesResponse(BaseModel):
    """List top resources response."""

    model_config = ConfigDict(populate_by_name=True)

    max_count_oers: list[OERItem] = Field(alias="maxCountOERs")


class ListTopResourcesUseCase(
    BaseUseCase[ListTopResourcesRequest, ListTopResourcesResponse]
):
    """Use case for listing resources by count, highest first."""

    def __init__(self, resource_service: ResourceService) -> None:
        """Initialize list top resources use case.

        Args:
            resource_service: Resource domain service
        """
        self.resource_service = resource_service

    async def execute(self, request: ListTopResourcesRequest) -> ListTopResourcesResponse:
        """Execute list top resources flow.

        Args:
            request: Optional limit, the configured default applies when unset

        Returns:
            Resources ordered by count
        """
        with logfire.span("list_top_resources.execute", limit=request.limit):
            resources = await self.resource_service.list_resources_by_count_descending(
                request.limit
            )
            items = [OERItem.from_resource(resource) for resource in resources]
            return ListTopResourcesResponse(max_count_oers=items)
