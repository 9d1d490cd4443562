"""Base class for application use cases."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One client-facing operation from a request model to a response model.

    Subclasses call domain services and translate their results; they never
    catch domain errors, which the interface layer maps to HTTP statuses.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
