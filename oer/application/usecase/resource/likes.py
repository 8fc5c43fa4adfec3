"""Like, unlike and like count use cases."""

from pydantic import BaseModel

from oer.application.usecase.base import BaseUseCase
from oer.domain.service import ResourceService
from oer.domain.value import ResourceId

MISSING_RESOURCE_MESSAGE = "OER not found, nothing changed."


class LikeRequest(BaseModel):
    """Like or unlike request."""

    resource_id: str


class LikeResponse(BaseModel):
    """Like or unlike response."""

    message: str


class GetLikesRequest(BaseModel):
    """Get likes request."""

    resource_id: str


class GetLikesResponse(BaseModel):
    """Get likes response."""

    likes: int


class LikeResourceUseCase(BaseUseCase[LikeRequest, LikeResponse]):
    """Use case for liking a resource."""

    def __init__(self, resource_service: ResourceService) -> None:
        """Initialize like resource use case.

        Args:
            resource_service: Resource domain service
        """
        self.resource_service = resource_service

    async def execute(self, request: LikeRequest) -> LikeResponse:
        """Execute like flow.

        Raises:
            NotFoundError: If the resource does not exist and the policy reports it
        """
        likes = await self.resource_service.like_resource(
            ResourceId(request.resource_id)
        )
        if likes is None:
            return LikeResponse(message=MISSING_RESOURCE_MESSAGE)
        return LikeResponse(message="OER liked successfully.")


class UnlikeResourceUseCase(BaseUseCase[LikeRequest, LikeResponse]):
    """Use case for taking back a like."""

    def __init__(self, resource_service: ResourceService) -> None:
        """Initialize unlike resource use case.

        Args:
            resource_service: Resource domain service
        """
        self.resource_service = resource_service

    async def execute(self, request: LikeRequest) -> LikeResponse:
        """Execute unlike flow. Unliking at zero likes still succeeds.

        Raises:
            NotFoundError: If the resource does not exist and the policy reports it
        """
        likes = await self.resource_service.unlike_resource(
            ResourceId(request.resource_id)
        )
        if likes is None:
            return LikeResponse(message=MISSING_RESOURCE_MESSAGE)
        return LikeResponse(message="OER like removed successfully.")


class GetLikesUseCase(BaseUseCase[GetLikesRequest, GetLikesResponse]):
    """Use case for reading a like count."""

    def __init__(self, resource_service: ResourceService) -> None:
        """Initialize get likes use case.

        Args:
            resource_service: Resource domain service
        """
        self.resource_service = resource_service

    async def execute(self, request: GetLikesRequest) -> GetLikesResponse:
        """Execute get likes flow.

        Raises:
            NotFoundError: If the resource does not exist and the policy reports it
        """
        likes = await self.resource_service.get_likes(ResourceId(request.resource_id))
        return GetLikesResponse(likes=likes)
