"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """Base use case for one gateway operation.

    Turns a request model into a response model, or raises a domain or
    adapter error for the interface layer to render.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
