"""Resource (OER) routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status

from oer.application.usecase.resource import (
    DeleteAllResourcesResponse,
    DeleteAllResourcesUseCase,
    GetCountRequest,
    GetCountResponse,
    GetCountUseCase,
    GetLikesRequest,
    GetLikesResponse,
    GetLikesUseCase,
    LikeRequest,
    LikeResourceUseCase,
    LikeResponse,
    ListTopResourcesRequest,
    ListTopResourcesResponse,
    ListTopResourcesUseCase,
    ResetCountsResponse,
    ResetCountsUseCase,
    SaveResourceRequest,
    SaveResourceResponse,
    SaveResourceUseCase,
    UnlikeResourceUseCase,
    UpdateCountRequest,
    UpdateCountResponse,
    UpdateCountUseCase,
)
from oer.domain.error import NotFoundError, ValidationError

router = APIRouter(prefix="/api", tags=["oers"], route_class=DishkaRoute)


def _not_found(resource_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"OER not found: {resource_id}",
    )


@router.post(
    "/saveOER",
    response_model=SaveResourceResponse,
    summary="Save an OER",
    description="Create an OER, or count another use of an existing one and refresh its title and description.",
)
async def save_oer(
    request: SaveResourceRequest,
    use_case: FromDishka[SaveResourceUseCase],
) -> SaveResourceResponse:
    """Save an OER.

    Raises:
        HTTPException: 400 if id or title is blank
    """
    with logfire.span("api.save_oer", resource_id=request.id):
        try:
            return await use_case.execute(request)
        except ValidationError as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(e),
            )


@router.put(
    "/updateCount/{resource_id}",
    response_model=UpdateCountResponse,
    summary="Decrement an OER count",
    description="Lower the count by one. The OER is removed when its count reaches zero.",
)
async def update_count(
    resource_id: str,
    use_case: FromDishka[UpdateCountUseCase],
) -> UpdateCountResponse:
    """Decrement an OER count.

    Raises:
        HTTPException: 404 if the OER does not exist
    """
    with logfire.span("api.update_count", resource_id=resource_id):
        try:
            return await use_case.execute(UpdateCountRequest(resource_id=resource_id))
        except NotFoundError:
            raise _not_found(resource_id)


@router.get(
    "/getCount/{resource_id}",
    response_model=GetCountResponse,
    summary="Get an OER count",
)
async def get_count(
    resource_id: str,
    use_case: FromDishka[GetCountUseCase],
) -> GetCountResponse:
    """Get an OER count.

    Raises:
        HTTPException: 404 if the OER does not exist and the store reports missing OERs
    """
    try:
        return await use_case.execute(GetCountRequest(resource_id=resource_id))
    except NotFoundError:
        raise _not_found(resource_id)


@router.put(
    "/resetAllOERCounts",
    response_model=ResetCountsResponse,
    summary="Reset every OER count to zero",
)
async def reset_all_counts(
    use_case: FromDishka[ResetCountsUseCase],
) -> ResetCountsResponse:
    """Reset every OER count. No OER is deleted."""
    with logfire.span("api.reset_all_counts"):
        return await use_case.execute()


@router.post(
    "/likeOER/{resource_id}",
    response_model=LikeResponse,
    summary="Like an OER",
)
async def like_oer(
    resource_id: str,
    use_case: FromDishka[LikeResourceUseCase],
) -> LikeResponse:
    """Like an OER.

    Raises:
        HTTPException: 404 if the OER does not exist and the store reports missing OERs
    """
    with logfire.span("api.like_oer", resource_id=resource_id):
        try:
            return await use_case.execute(LikeRequest(resource_id=resource_id))
        except NotFoundError:
            raise _not_found(resource_id)


@router.put(
    "/reduceLike/{resource_id}",
    response_model=LikeResponse,
    summary="Remove a like from an OER",
)
async def reduce_like(
    resource_id: str,
    use_case: FromDishka[UnlikeResourceUseCase],
) -> LikeResponse:
    """Remove a like. An OER with no likes keeps zero likes.

    Raises:
        HTTPException: 404 if the OER does not exist and the store reports missing OERs
    """
    with logfire.span("api.reduce_like", resource_id=resource_id):
        try:
            return await use_case.execute(LikeRequest(resource_id=resource_id))
        except NotFoundError:
            raise _not_found(resource_id)


@router.get(
    "/getLikes/{resource_id}",
    response_model=GetLikesResponse,
    summary="Get an OER like count",
)
async def get_likes(
    resource_id: str,
    use_case: FromDishka[GetLikesUseCase],
) -> GetLikesResponse:
    """Get an OER like count.

    Raises:
        HTTPException: 404 if the OER does not exist and the store reports missing OERs
    """
    try:
        return await use_case.execute(GetLikesRequest(resource_id=resource_id))
    except NotFoundError:
        raise _not_found(resource_id)


@router.get(
    "/getMaxCountOERs",
    response_model=ListTopResourcesResponse,
    summary="List the most used OERs",
)
async def get_max_count_oers(
    use_case: FromDishka[ListTopResourcesUseCase],
    limit: int | None = Query(default=None, ge=1, le=100),
) -> ListTopResourcesResponse:
    """List OERs by count, highest first.

    Example:
        GET /api/getMaxCountOERs?limit=5
    """
    with logfire.span("api.get_max_count_oers", limit=limit):
        try:
            return await use_case.execute(ListTopResourcesRequest(limit=limit))
        except ValidationError as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(e),
            )


@router.delete(
    "/deleteAllOERs",
    response_model=DeleteAllResourcesResponse,
    summary="Delete all OERs",
)
async def delete_all_oers(
    use_case: FromDishka[DeleteAllResourcesUseCase],
) -> DeleteAllResourcesResponse:
    """Delete every OER."""
    with logfire.span("api.delete_all_oers"):
        return await use_case.execute()
