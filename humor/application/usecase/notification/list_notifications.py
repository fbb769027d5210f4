"""List notifications use case."""

from pydantic import BaseModel

from humor.application.usecase.base import BaseUseCase, parse_id
from humor.application.usecase.notification.view import (
    NotificationView,
    render_notifications,
)
from humor.domain.service import NotificationService, UserService
from humor.domain.value import UserId


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    user_id: str  # Recipient, from authenticated user


class ListNotificationsResponse(BaseModel):
    """List notifications response."""

    notifications: list[NotificationView]


class ListNotificationsUseCase(BaseUseCase):
    """Use case for the recipient's most recent notifications."""

    def __init__(
        self, notification_service: NotificationService, user_service: UserService
    ) -> None:
        self.notification_service = notification_service
        self.user_service = user_service

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        user_id = UserId(parse_id(request.user_id, "User"))
        notifications = await self.notification_service.list_for_recipient(user_id)
        views = await render_notifications(notifications, self.user_service)
        return ListNotificationsResponse(notifications=views)
