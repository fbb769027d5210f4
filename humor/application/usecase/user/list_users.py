"""List users use case."""

from pydantic import BaseModel

from humor.application.usecase.base import BaseUseCase
from humor.application.usecase.user.view import UserView
from humor.domain.service import UserService


class ListUsersResponse(BaseModel):
    """List users response."""

    users: list[UserView]


class ListUsersUseCase(BaseUseCase):
    """Use case for the user directory."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: None = None) -> ListUsersResponse:
        users = await self.user_service.list_users()
        return ListUsersResponse(users=[UserView.from_user(u) for u in users])
