"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any
from uuid import UUID

from humor.domain.error import NotFoundError


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def parse_id(value: str, resource: str) -> UUID:
    """Parse an ID from a request.

    A malformed ID can't name an existing resource, so it is reported as
    not found.

    Raises:
        NotFoundError: If ``value`` is not a UUID
    """
    try:
        return UUID(value)
    except (TypeError, ValueError):
        raise NotFoundError(resource, value)
