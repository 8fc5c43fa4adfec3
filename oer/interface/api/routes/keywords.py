"""Keyword routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status

from oer.application.usecase.keyword import (
    DeleteAllKeywordsResponse,
    DeleteAllKeywordsUseCase,
    ListKeywordsResponse,
    ListKeywordsUseCase,
    SaveKeywordRequest,
    SaveKeywordResponse,
    SaveKeywordUseCase,
)
from oer.domain.error import ConflictError, ValidationError

router = APIRouter(prefix="/api", tags=["keywords"], route_class=DishkaRoute)


@router.post(
    "/saveKeyword",
    response_model=SaveKeywordResponse,
    summary="Save a keyword",
    description="Store a keyword, lower-cased and trimmed. Saving an existing keyword is idempotent unless the conflict policy is enabled.",
)
async def save_keyword(
    request: SaveKeywordRequest,
    use_case: FromDishka[SaveKeywordUseCase],
) -> SaveKeywordResponse:
    """Save a keyword.

    Raises:
        HTTPException: 400 if the keyword is blank, 409 on a rejected duplicate
    """
    with logfire.span("api.save_keyword"):
        try:
            return await use_case.execute(request)
        except ValidationError as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(e),
            )
        except ConflictError:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Keyword already exists.",
            )


@router.get(
    "/getAllKeywords",
    response_model=ListKeywordsResponse,
    summary="List all keywords",
)
@router.get(
    "/getKeywords",
    response_model=ListKeywordsResponse,
    include_in_schema=False,
)
async def list_keywords(
    use_case: FromDishka[ListKeywordsUseCase],
) -> ListKeywordsResponse:
    """List every saved keyword.

    Example:
        GET /api/getAllKeywords
    """
    return await use_case.execute()


@router.post(
    "/deleteAllKeywords",
    response_model=DeleteAllKeywordsResponse,
    summary="Delete all keywords",
)
async def delete_all_keywords(
    use_case: FromDishka[DeleteAllKeywordsUseCase],
) -> DeleteAllKeywordsResponse:
    """Delete every keyword. Succeeds on an empty collection too."""
    with logfire.span("api.delete_all_keywords"):
        return await use_case.execute()
