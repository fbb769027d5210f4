"""User domain service."""

from uuid import uuid4

import logfire

from humor.config import ContentSettings
from humor.domain.error import (
    AuthenticationError,
    BusinessRuleViolationError,
    NotFoundError,
)
from humor.domain.model.user import User
from humor.domain.repository import UserRepository
from humor.domain.value import HumorTag, UserId
from humor.domain.value.types import Handle
from humor.util.password import hash_password, verify_password

from .base import Service


class UserService(Service):
    """Domain service for the identity store."""

    def __init__(
        self, user_repository: UserRepository, content_settings: ContentSettings
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            content_settings: Profile defaults
        """
        self.user_repository = user_repository
        self.content_settings = content_settings

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def find_by_id(self, user_id: UserId) -> User | None:
        return await self.user_repository.find_by_id(user_id)

    async def get_user_by_handle(self, handle: Handle) -> User | None:
        """Get a user by handle, ignoring case."""
        with logfire.span("user_service.get_user_by_handle", handle=str(handle)):
            return await self.user_repository.find_by_handle(handle)

    async def get_users_by_ids(self, user_ids: list[UserId]) -> dict[UserId, User]:
        """Load several users, keyed by ID. Unknown IDs are left out."""
        if not user_ids:
            return {}
        users = await self.user_repository.find_by_ids(list(dict.fromkeys(user_ids)))
        return {u.id: u for u in users}

    async def list_users(self) -> list[User]:
        with logfire.span("user_service.list_users"):
            return await self.user_repository.find_all()

    async def register(
        self, handle: Handle, password: str, humor_tag: HumorTag
    ) -> User:
        """Create a new account.

        Args:
            handle: Desired handle
            password: Plain text password
            humor_tag: Chosen humor style

        Returns:
            The created user

        Raises:
            BusinessRuleViolationError: If the handle is taken (any casing)
        """
        with logfire.span("user_service.register", handle=str(handle)):
            existing = await self.user_repository.find_by_handle(handle)
            if existing:
                logfire.info("Signup rejected, handle taken", handle=str(handle))
                raise BusinessRuleViolationError("User with this handle already exists")

            user = User(
                id=UserId(uuid4()),
                handle=handle,
                password_hash=hash_password(password),
                humor_tag=humor_tag,
                bio=self.content_settings.default_bio,
                profile_pic_url=self.content_settings.profile_pic_template.format(
                    handle=handle.root
                ),
            )
            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=str(saved.id), handle=str(handle))
            return saved

    async def authenticate(self, handle: Handle, password: str) -> User:
        """Check credentials.

        Raises:
            AuthenticationError: If the handle is unknown or the password is wrong
        """
        with logfire.span("user_service.authenticate", handle=str(handle)):
            user = await self.user_repository.find_by_handle(handle)
            if user is None or not verify_password(password, user.password_hash):
                logfire.info("Login failed", handle=str(handle))
                raise AuthenticationError()
            logfire.info("Login succeeded", user_id=str(user.id))
            return user
