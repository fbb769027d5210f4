"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from humor.domain.error import BusinessRuleViolationError
from humor.domain.model import User
from humor.domain.repository import UserRepository
from humor.domain.value import UserId
from humor.domain.value.types import Handle
from humor.persistence.mappers import row_to_user, user_to_dict
from humor.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        """Find several users by ID."""
        if not user_ids:
            return []
        stmt = select(users_table).where(users_table.c.id.in_(user_ids))
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings()]

    async def find_by_handle(self, handle: Handle) -> Optional[User]:
        """Find a user by handle, ignoring case."""
        stmt = select(users_table).where(
            func.lower(users_table.c.handle) == handle.root.lower()
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_all(self) -> list[User]:
        """List all users, oldest first."""
        stmt = select(users_table).order_by(users_table.c.created_at)
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings()]

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Raises:
            BusinessRuleViolationError: If the handle is taken
        """
        existing = await self.find_by_id(user.id)
        user_dict = user_to_dict(user)

        try:
            async with self.session.begin_nested():
                if existing:
                    stmt = (
                        users_table.update()
                        .where(users_table.c.id == user.id)
                        .values(**user_dict)
                    )
                else:
                    stmt = users_table.insert().values(**user_dict)
                await self.session.execute(stmt)
        except IntegrityError as e:
            raise BusinessRuleViolationError(
                "User with this handle already exists"
            ) from e

        await self.session.flush()
        return user
