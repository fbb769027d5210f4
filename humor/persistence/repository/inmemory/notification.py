"""In-memory notification repository for testing."""

from typing import Optional

from humor.domain.model.notification import Notification
from humor.domain.repository.notification import NotificationRepository
from humor.domain.value import (
    NotificationId,
    NotificationType,
    PostId,
    ReactionType,
    UserId,
)


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self) -> None:
        self._notifications: dict[NotificationId, Notification] = {}

    async def find_unread(
        self,
        recipient_id: UserId,
        sender_id: UserId,
        type: NotificationType,
        post_id: PostId,
        reaction_type: Optional[ReactionType] = None,
    ) -> Optional[Notification]:
        """Find an unread notification for the same action."""
        for n in self._notifications.values():
            if (
                not n.is_read
                and n.recipient_id == recipient_id
                and n.sender_id == sender_id
                and n.type == type
                and n.post_id == post_id
                # Switching reaction type is a new action
                and n.reaction_type == reaction_type
            ):
                return n
        return None

    async def find_by_recipient(
        self, recipient_id: UserId, limit: int = 50
    ) -> list[Notification]:
        """List a recipient's notifications, newest first."""
        mine = [n for n in self._notifications.values() if n.recipient_id == recipient_id]
        # Later inserts win timestamp ties
        mine.reverse()
        mine.sort(key=lambda n: n.created_at, reverse=True)
        return mine[:limit]

    async def count_unread(self, recipient_id: UserId) -> int:
        """Count unread notifications."""
        return sum(
            1
            for n in self._notifications.values()
            if n.recipient_id == recipient_id and not n.is_read
        )

    async def save(self, notification: Notification) -> Notification:
        """Store a notification."""
        self._notifications[notification.id] = notification
        return notification

    async def mark_read(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> Optional[Notification]:
        """Mark one notification read if it belongs to the recipient."""
        notification = self._notifications.get(notification_id)
        if notification is None or notification.recipient_id != recipient_id:
            return None
        updated = notification.mark_read()
        self._notifications[notification_id] = updated
        return updated

    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Mark all of a recipient's unread notifications read."""
        count = 0
        for notification_id, n in list(self._notifications.items()):
            if n.recipient_id == recipient_id and not n.is_read:
                self._notifications[notification_id] = n.mark_read()
                count += 1
        return count
