"""Mark notification read use case."""

from pydantic import BaseModel

from humor.application.usecase.base import BaseUseCase, parse_id
from humor.application.usecase.notification.view import (
    NotificationView,
    render_notifications,
)
from humor.domain.service import NotificationService, UserService
from humor.domain.value import NotificationId, UserId


class MarkReadRequest(BaseModel):
    """Mark notification read request."""

    notification_id: str
    user_id: str  # Must be the recipient


class MarkReadUseCase(BaseUseCase):
    """Use case for marking a single notification read."""

    def __init__(
        self, notification_service: NotificationService, user_service: UserService
    ) -> None:
        self.notification_service = notification_service
        self.user_service = user_service

    async def execute(self, request: MarkReadRequest) -> NotificationView:
        """Mark the notification read.

        Raises:
            NotFoundError: If it doesn't exist or belongs to another user
        """
        notification = await self.notification_service.mark_read(
            NotificationId(parse_id(request.notification_id, "Notification")),
            UserId(parse_id(request.user_id, "User")),
        )
        (view,) = await render_notifications([notification], self.user_service)
        return view
