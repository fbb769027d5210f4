"""Notification domain service."""

from uuid import uuid4

import logfire

from humor.config import NotificationSettings
from humor.domain.error import NotFoundError
from humor.domain.model.notification import Notification
from humor.domain.repository import (
    NotificationRepository,
    PostRepository,
    UserRepository,
)
from humor.domain.value import (
    CommentId,
    NotificationId,
    NotificationType,
    PostId,
    ReactionType,
    UserId,
)

from .base import Service


def render_message(
    type: NotificationType, sender_handle: str, reaction_type: ReactionType | None
) -> str:
    """Render the text shown to the recipient."""
    if type is NotificationType.REACTION:
        label = reaction_type.value if reaction_type else "a reaction"
        return f"{sender_handle} reacted with {label} to your post"
    if type is NotificationType.COMMENT:
        return f"{sender_handle} commented on your post"
    return f"{sender_handle} replied to a comment on your post"


class NotificationService(Service):
    """Domain service for notifications.

    Notifications are advisory: ``notify`` never raises, so a failure here
    can't undo or block the reaction or comment that triggered it.
    """

    def __init__(
        self,
        notification_repository: NotificationRepository,
        user_repository: UserRepository,
        post_repository: PostRepository,
        notification_settings: NotificationSettings,
    ) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
            user_repository: User repository, to resolve the sender
            post_repository: Post repository, to resolve the post
            notification_settings: Feed limits
        """
        self.notification_repository = notification_repository
        self.user_repository = user_repository
        self.post_repository = post_repository
        self.notification_settings = notification_settings

    async def notify(
        self,
        recipient_id: UserId,
        sender_id: UserId,
        type: NotificationType,
        post_id: PostId,
        *,
        reaction_type: ReactionType | None = None,
        comment_id: CommentId | None = None,
    ) -> Notification | None:
        """Record a notification unless it would be redundant.

        Nothing is created when the sender is the recipient, when the sender
        or the post can't be resolved, or when an unread notification for the
        same action already exists.

        Args:
            recipient_id: Post author
            sender_id: User who acted
            type: Kind of action
            post_id: Post acted on
            reaction_type: Reaction type, for reaction notifications
            comment_id: New comment, for comment and reply notifications

        Returns:
            The created notification, or None if nothing was created
        """
        if recipient_id == sender_id:
            return None

        with logfire.span(
            "notification_service.notify",
            recipient_id=str(recipient_id),
            sender_id=str(sender_id),
            type=type.value,
            post_id=str(post_id),
        ):
            try:
                sender = await self.user_repository.find_by_id(sender_id)
                post = await self.post_repository.find_by_id(post_id)
                if sender is None or post is None:
                    logfire.warn(
                        "Notification skipped, sender or post missing",
                        sender_found=sender is not None,
                        post_found=post is not None,
                    )
                    return None

                pending = await self.notification_repository.find_unread(
                    recipient_id=recipient_id,
                    sender_id=sender_id,
                    type=type,
                    post_id=post_id,
                    reaction_type=reaction_type,
                )
                if pending is not None:
                    logfire.debug(
                        "Notification deduplicated", existing_id=str(pending.id)
                    )
                    return None

                notification = Notification(
                    id=NotificationId(uuid4()),
                    recipient_id=recipient_id,
                    sender_id=sender_id,
                    type=type,
                    post_id=post_id,
                    comment_id=comment_id,
                    reaction_type=reaction_type,
                    message=render_message(type, sender.handle.root, reaction_type),
                )
                saved = await self.notification_repository.save(notification)
                logfire.info("Notification created", notification_id=str(saved.id))
                return saved
            except Exception as e:
                logfire.error(
                    "Notification creation failed",
                    error=str(e),
                    error_type=e.__class__.__name__,
                )
                return None

    async def list_for_recipient(self, recipient_id: UserId) -> list[Notification]:
        """Most recent notifications for a user, newest first."""
        with logfire.span(
            "notification_service.list_for_recipient", recipient_id=str(recipient_id)
        ):
            return await self.notification_repository.find_by_recipient(
                recipient_id, limit=self.notification_settings.feed_limit
            )

    async def mark_read(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> Notification:
        """Mark one of the recipient's notifications read.

        Raises:
            NotFoundError: If it doesn't exist or belongs to another user
        """
        with logfire.span(
            "notification_service.mark_read",
            notification_id=str(notification_id),
            recipient_id=str(recipient_id),
        ):
            notification = await self.notification_repository.mark_read(
                notification_id, recipient_id
            )
            if notification is None:
                raise NotFoundError("Notification", str(notification_id))
            return notification

    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Mark every unread notification of the recipient read.

        Returns:
            Number of notifications changed
        """
        with logfire.span(
            "notification_service.mark_all_read", recipient_id=str(recipient_id)
        ):
            updated = await self.notification_repository.mark_all_read(recipient_id)
            logfire.info(
                "Notifications marked read",
                recipient_id=str(recipient_id),
                updated=updated,
            )
            return updated

    async def unread_count(self, recipient_id: UserId) -> int:
        return await self.notification_repository.count_unread(recipient_id)
