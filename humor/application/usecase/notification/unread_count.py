"""Unread notification count use case."""

from pydantic import BaseModel

from humor.application.usecase.base import BaseUseCase, parse_id
from humor.domain.service import NotificationService
from humor.domain.value import UserId


class UnreadCountRequest(BaseModel):
    """Unread count request."""

    user_id: str


class UnreadCountResponse(BaseModel):
    """Unread count response."""

    count: int


class UnreadCountUseCase(BaseUseCase):
    """Use case for the unread badge."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: UnreadCountRequest) -> UnreadCountResponse:
        count = await self.notification_service.unread_count(
            UserId(parse_id(request.user_id, "User"))
        )
        return UnreadCountResponse(count=count)
