"""Interface layer error handling.

Maps failures that are not handled inside individual routes onto HTTP
responses. Storage details never reach the client.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from oer.domain.error import StorageUnavailableError
from oer.util.logging import get_logger

logger = get_logger(__name__)

INTERNAL_ERROR_DETAIL = "Internal Server Error."


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer missing or malformed request fields with 400."""
    errors = exc.errors()
    fields = [
        ".".join(str(part) for part in err["loc"] if part != "body") for err in errors
    ]
    detail = "; ".join(
        f"{field}: {err['msg']}" if field else err["msg"]
        for field, err in zip(fields, errors)
    )
    logfire.info("Request rejected", path=request.url.path, detail=detail)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": detail},
    )


async def storage_unavailable_handler(
    request: Request, exc: StorageUnavailableError
) -> JSONResponse:
    """Answer storage failures with a generic 500."""
    logger.error(
        "Storage unavailable: path=%s operation=%s cause=%r",
        request.url.path,
        exc.operation,
        exc.cause,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": INTERNAL_ERROR_DETAIL},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register app-wide exception handlers.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StorageUnavailableError, storage_unavailable_handler)
