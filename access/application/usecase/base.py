"""Use case base class."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """Application entry point taking one request model."""

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
