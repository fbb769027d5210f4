"""Mark all notifications read use case."""

from pydantic import BaseModel

from humor.application.usecase.base import BaseUseCase, parse_id
from humor.domain.service import NotificationService
from humor.domain.value import UserId


class MarkAllReadRequest(BaseModel):
    """Mark all notifications read request."""

    user_id: str


class MarkAllReadResponse(BaseModel):
    """Mark all notifications read response."""

    message: str = "All notifications marked as read"
    updated: int


class MarkAllReadUseCase(BaseUseCase):
    """Use case for clearing the recipient's unread notifications."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: MarkAllReadRequest) -> MarkAllReadResponse:
        updated = await self.notification_service.mark_all_read(
            UserId(parse_id(request.user_id, "User"))
        )
        return MarkAllReadResponse(updated=updated)
