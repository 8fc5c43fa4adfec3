"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """Use case that turns one API request model into one response model.

    Every use case driven by a request subclasses this. Bulk operations
    (list or clear everything) take no request and stand alone.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
