"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from humor.domain.model.user import User
from humor.domain.value import UserId
from humor.domain.value.types import Handle


class UserRepository(ABC):
    """Repository for the User aggregate."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: List[UserId]) -> List[User]:
        """Find several users at once. Unknown IDs are skipped."""
        pass

    @abstractmethod
    async def find_by_handle(self, handle: Handle) -> Optional[User]:
        """Find a user by handle, ignoring case.

        Args:
            handle: The handle to search for

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[User]:
        """List all users, oldest account first."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user

        Raises:
            BusinessRuleViolationError: If another user holds the same handle
        """
        pass
