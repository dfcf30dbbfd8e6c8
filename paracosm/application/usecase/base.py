"""Use case base class."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """A single API operation orchestrated over the domain services.

    Use cases take a pydantic request, return a pydantic response, and let
    domain errors propagate for the route layer to map onto HTTP statuses.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT: ...
