"""Notification representation."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from humor.domain.model import Notification, User
from humor.domain.service import UserService
from humor.domain.value import UserId


class SenderView(BaseModel):
    """Who triggered a notification."""

    id: str
    handle: Optional[str] = None
    profile_pic_url: Optional[str] = None


class NotificationView(BaseModel):
    """Notification as shown to its recipient."""

    id: str
    type: str
    message: str
    is_read: bool
    sender: SenderView
    post_id: str
    comment_id: Optional[str] = None
    reaction_type: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_notification(
        cls, notification: Notification, sender: User | None
    ) -> "NotificationView":
        return cls(
            id=str(notification.id),
            type=notification.type.value,
            message=notification.message,
            is_read=notification.is_read,
            sender=SenderView(
                id=str(notification.sender_id),
                handle=sender.handle.root if sender else None,
                profile_pic_url=sender.profile_pic_url if sender else None,
            ),
            post_id=str(notification.post_id),
            comment_id=str(notification.comment_id) if notification.comment_id else None,
            reaction_type=notification.reaction_type.value
            if notification.reaction_type
            else None,
            created_at=notification.created_at,
        )


async def render_notifications(
    notifications: list[Notification], user_service: UserService
) -> list[NotificationView]:
    """Render notifications with their senders loaded in one query."""
    senders: dict[UserId, User] = await user_service.get_users_by_ids(
        [n.sender_id for n in notifications]
    )
    return [
        NotificationView.from_notification(n, senders.get(n.sender_id))
        for n in notifications
    ]
