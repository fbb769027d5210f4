"""In-memory user repository for testing."""

from typing import Optional

from humor.domain.error import BusinessRuleViolationError
from humor.domain.model.user import User
from humor.domain.repository.user import UserRepository
from humor.domain.value import UserId
from humor.domain.value.types import Handle


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        """Find several users by ID."""
        return [self._users[u] for u in user_ids if u in self._users]

    async def find_by_handle(self, handle: Handle) -> Optional[User]:
        """Find a user by handle, ignoring case."""
        for user in self._users.values():
            if user.handle.normalized == handle.normalized:
                return user
        return None

    async def find_all(self) -> list[User]:
        """List all users, oldest first."""
        return sorted(self._users.values(), key=lambda u: u.created_at)

    async def save(self, user: User) -> User:
        """Save or update a user, enforcing handle uniqueness."""
        for other in self._users.values():
            if other.id != user.id and other.handle.normalized == user.handle.normalized:
                raise BusinessRuleViolationError("User with this handle already exists")
        self._users[user.id] = user
        return user
