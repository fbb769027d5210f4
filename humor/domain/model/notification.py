"""Notification entity.

Notifications tell a post author that someone reacted to or commented on
their post. They start unread and become read exactly once.
"""

from datetime import UTC, datetime
from typing import Optional

from pydantic import Field

from humor.domain.model.common import DomainModel
from humor.domain.value import (
    CommentId,
    NotificationId,
    NotificationType,
    PostId,
    ReactionType,
    UserId,
)


class Notification(DomainModel):
    """Notification entity."""

    id: NotificationId
    recipient_id: UserId
    sender_id: UserId
    type: NotificationType
    post_id: PostId
    comment_id: Optional[CommentId] = None
    reaction_type: Optional[ReactionType] = None
    message: str
    is_read: bool = False
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    def mark_read(self) -> "Notification":
        """Return a read copy. Read notifications are returned unchanged."""
        if self.is_read:
            return self
        return self.model_copy(
            update={"is_read": True, "updated_at": datetime.now(UTC)}
        )
