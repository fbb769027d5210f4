"""Get user use case."""

from pydantic import BaseModel

from humor.application.usecase.base import BaseUseCase, parse_id
from humor.application.usecase.user.view import UserView
from humor.domain.service import UserService
from humor.domain.value import UserId


class GetUserRequest(BaseModel):
    """Get user request."""

    user_id: str


class GetUserUseCase(BaseUseCase):
    """Use case for viewing a profile."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetUserRequest) -> UserView:
        """Return the profile.

        Raises:
            NotFoundError: If the user doesn't exist
        """
        user = await self.user_service.get_by_id(
            UserId(parse_id(request.user_id, "User"))
        )
        return UserView.from_user(user)
