"""Domain value objects for the humor network."""

from humor.domain.value.identifiers import (
    CommentId,
    NotificationId,
    PostId,
    UserId,
)
from humor.domain.value.types import (
    Handle,
    HumorTag,
    NotificationType,
    ReactionType,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "NotificationId",
    # Types
    "Handle",
    "HumorTag",
    "NotificationType",
    "ReactionType",
]
