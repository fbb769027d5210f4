"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from humor.domain.model.notification import Notification
from humor.domain.value import (
    NotificationId,
    NotificationType,
    PostId,
    ReactionType,
    UserId,
)


class NotificationRepository(ABC):
    """Repository for notifications."""

    @abstractmethod
    async def find_unread(
        self,
        recipient_id: UserId,
        sender_id: UserId,
        type: NotificationType,
        post_id: PostId,
        reaction_type: Optional[ReactionType] = None,
    ) -> Optional[Notification]:
        """Find a pending notification for the same action.

        Args:
            recipient_id: Who would receive it
            sender_id: Who caused it
            type: Notification type
            post_id: Post it refers to
            reaction_type: Reaction type, for reaction notifications

        Returns:
            An unread notification matching all fields, or None
        """
        pass

    @abstractmethod
    async def find_by_recipient(
        self, recipient_id: UserId, limit: int = 50
    ) -> List[Notification]:
        """List a recipient's notifications, newest first.

        Args:
            recipient_id: Recipient user ID
            limit: Maximum number of notifications

        Returns:
            Notifications ordered by creation time descending
        """
        pass

    @abstractmethod
    async def count_unread(self, recipient_id: UserId) -> int:
        """Count a recipient's unread notifications."""
        pass

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Insert a notification.

        Args:
            notification: Notification to store

        Returns:
            The stored notification
        """
        pass

    @abstractmethod
    async def mark_read(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> Optional[Notification]:
        """Mark one notification read, scoped to its recipient.

        Args:
            notification_id: Notification to update
            recipient_id: Requesting user

        Returns:
            The updated notification, or None if it doesn't exist or
            belongs to someone else
        """
        pass

    @abstractmethod
    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Mark every unread notification of a recipient read in one update.

        Args:
            recipient_id: Recipient user ID

        Returns:
            Number of notifications updated
        """
        pass
