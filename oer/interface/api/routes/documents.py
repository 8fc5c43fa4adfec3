"""Learning scenario and learning path routes.

Both document kinds share one store and one set of use cases. The routes
only differ in the document kind they pass down and the key the document
is returned under.
"""

from typing import Any
from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, HTTPException, status
from pydantic import BaseModel, ConfigDict, Field

from oer.application.usecase.document import (
    DocumentItem,
    GetDocumentRequest,
    GetDocumentUseCase,
    ListDocumentsRequest,
    ListDocumentsUseCase,
    SaveDocumentRequest,
    SaveDocumentUseCase,
)
from oer.domain.error import NotFoundError
from oer.domain.value import DocumentKind

router = APIRouter(prefix="/api", tags=["documents"], route_class=DishkaRoute)


class _CamelResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class SaveLearningScenarioResponse(_CamelResponse):
    """Saved learning scenario."""

    message: str
    learning_scenario: DocumentItem = Field(alias="learningScenario")


class LearningScenarioListResponse(_CamelResponse):
    """All learning scenarios."""

    learning_scenarios: list[DocumentItem] = Field(alias="learningScenarios")


class LearningScenarioResponse(_CamelResponse):
    """Single learning scenario."""

    learning_scenario: DocumentItem = Field(alias="learningScenario")


class SaveLearningPathResponse(_CamelResponse):
    """Saved learning path."""

    message: str
    learning_path: DocumentItem = Field(alias="learningPath")


class LearningPathListResponse(_CamelResponse):
    """All learning paths."""

    learning_paths: list[DocumentItem] = Field(alias="learningPaths")


class LearningPathResponse(_CamelResponse):
    """Single learning path."""

    learning_path: DocumentItem = Field(alias="learningPath")


async def _get_document(
    use_case: GetDocumentUseCase, kind: DocumentKind, document_id: UUID
) -> DocumentItem:
    try:
        response = await use_case.execute(
            GetDocumentRequest(kind=kind, document_id=document_id)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return response.document


@router.post(
    "/saveLearningScenario",
    response_model=SaveLearningScenarioResponse,
    summary="Save a learning scenario",
)
async def save_learning_scenario(
    use_case: FromDishka[SaveDocumentUseCase],
    content: dict[str, Any] = Body(...),
) -> SaveLearningScenarioResponse:
    """Store a learning scenario as given."""
    with logfire.span("api.save_learning_scenario"):
        response = await use_case.execute(
            SaveDocumentRequest(kind=DocumentKind.LEARNING_SCENARIO, content=content)
        )
        return SaveLearningScenarioResponse(
            message=response.message, learning_scenario=response.document
        )


@router.get(
    "/getLearningScenarios",
    response_model=LearningScenarioListResponse,
    summary="List learning scenarios",
)
async def list_learning_scenarios(
    use_case: FromDishka[ListDocumentsUseCase],
) -> LearningScenarioListResponse:
    """List learning scenarios, newest first."""
    response = await use_case.execute(
        ListDocumentsRequest(kind=DocumentKind.LEARNING_SCENARIO)
    )
    return LearningScenarioListResponse(learning_scenarios=response.documents)


@router.get(
    "/getLearningScenario/{document_id}",
    response_model=LearningScenarioResponse,
    summary="Get a learning scenario",
)
async def get_learning_scenario(
    document_id: UUID,
    use_case: FromDishka[GetDocumentUseCase],
) -> LearningScenarioResponse:
    """Get a learning scenario.

    Raises:
        HTTPException: 404 if no learning scenario has this id
    """
    document = await _get_document(
        use_case, DocumentKind.LEARNING_SCENARIO, document_id
    )
    return LearningScenarioResponse(learning_scenario=document)


@router.post(
    "/saveLearningPath",
    response_model=SaveLearningPathResponse,
    summary="Save a learning path",
)
async def save_learning_path(
    use_case: FromDishka[SaveDocumentUseCase],
    content: dict[str, Any] = Body(...),
) -> SaveLearningPathResponse:
    """Store a learning path as given."""
    with logfire.span("api.save_learning_path"):
        response = await use_case.execute(
            SaveDocumentRequest(kind=DocumentKind.LEARNING_PATH, content=content)
        )
        return SaveLearningPathResponse(
            message=response.message, learning_path=response.document
        )


@router.get(
    "/getLearningPaths",
    response_model=LearningPathListResponse,
    summary="List learning paths",
)
async def list_learning_paths(
    use_case: FromDishka[ListDocumentsUseCase],
) -> LearningPathListResponse:
    """List learning paths, newest first."""
    response = await use_case.execute(
        ListDocumentsRequest(kind=DocumentKind.LEARNING_PATH)
    )
    return LearningPathListResponse(learning_paths=response.documents)


@router.get(
    "/getLearningPath/{document_id}",
    response_model=LearningPathResponse,
    summary="Get a learning path",
)
async def get_learning_path(
    document_id: UUID,
    use_case: FromDishka[GetDocumentUseCase],
) -> LearningPathResponse:
    """Get a learning path.

    Raises:
        HTTPException: 404 if no learning path has this id
    """
    document = await _get_document(use_case, DocumentKind.LEARNING_PATH, document_id)
    return LearningPathResponse(learning_path=document)
