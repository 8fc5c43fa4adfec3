"""Translation of storage failures into domain errors."""

import functools
import sys
from typing import Awaitable, Callable, ParamSpec, TypeVar

import logfire
from sqlalchemy.exc import SQLAlchemyError

from oer.domain.error import StorageUnavailableError

P = ParamSpec("P")
R = TypeVar("R")


def translate_storage_errors(
    operation: str,
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """Wrap a repository coroutine so SQLAlchemy failures surface as StorageUnavailableError.

    The failure is logged here with full detail; callers only see the
    operation name. Nothing is retried.

    Args:
        operation: Name reported in logs and in the raised error
    """

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            try:
                return await func(*args, **kwargs)
            except SQLAlchemyError as e:
                logfire.error(
                    "Storage operation failed",
                    operation=operation,
                    error=str(e),
                    error_type=type(e).__name__,
                    _exc_info=sys.exc_info(),
                )
                raise StorageUnavailableError(operation, e) from e

        return wrapper

    return decorator
