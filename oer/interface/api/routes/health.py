"""Health check routes."""

from fastapi import APIRouter, Response, status

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK, response_class=Response)
async def health_check() -> Response:
    """Liveness probe. Answers 200 with an empty body while the process runs."""
    return Response(status_code=status.HTTP_200_OK)
