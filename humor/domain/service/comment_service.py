"""Comment domain service."""

from typing import NamedTuple
from uuid import uuid4

import logfire

from humor.domain.error import ValidationError
from humor.domain.model.comment import Comment
from humor.domain.model.post import Post
from humor.domain.value import CommentId, NotificationType, PostId, UserId

from .base import Service
from .notification_service import NotificationService
from .post_service import PostService


class CommentOutcome(NamedTuple):
    """Result of adding a comment.

    Attributes:
        post: Post as stored after the change
        comment: The new comment
        notification_type: Kind of notification owed to the post author, if any
    """

    post: Post
    comment: Comment
    notification_type: NotificationType | None


class CommentService(Service):
    """Domain service for threaded comments."""

    def __init__(
        self, post_service: PostService, notification_service: NotificationService
    ) -> None:
        """Initialize comment service.

        Args:
            post_service: Post service, for versioned writes
            notification_service: Notification service
        """
        self.post_service = post_service
        self.notification_service = notification_service

    async def add_comment(
        self,
        post_id: PostId,
        author_id: UserId,
        text: str,
        parent_id: CommentId | None = None,
    ) -> CommentOutcome:
        """Add a root comment or a reply at any depth.

        The post author is notified (``comment`` or ``reply``) unless they
        wrote the comment. The author of the parent comment is not notified.

        Args:
            post_id: Post to comment on
            author_id: Commenting user
            text: Comment text
            parent_id: Comment being replied to, None for a root comment

        Returns:
            The stored post, the new comment and the notification kind

        Raises:
            ValidationError: If the text is blank
            NotFoundError: If the post or the parent comment doesn't exist
        """
        text = (text or "").strip()
        if not text:
            raise ValidationError("Comment text is required")

        with logfire.span(
            "comment_service.add_comment",
            post_id=str(post_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            comment = Comment(
                id=CommentId(uuid4()),
                author_id=author_id,
                text=text,
                parent_id=parent_id,
            )

            def append(post: Post) -> tuple[Post, None]:
                thread = post.comments.append(comment)
                return post.model_copy(update={"comments": thread}), None

            post, _ = await self.post_service.mutate(post_id, append)
            logfire.info(
                "Comment added",
                post_id=str(post_id),
                comment_id=str(comment.id),
                is_reply=parent_id is not None,
            )

            notification_type = None
            if not post.is_authored_by(author_id):
                notification_type = (
                    NotificationType.REPLY if parent_id else NotificationType.COMMENT
                )
                await self.notification_service.notify(
                    recipient_id=post.author_id,
                    sender_id=author_id,
                    type=notification_type,
                    post_id=post.id,
                    comment_id=comment.id,
                )

            return CommentOutcome(
                post=post, comment=comment, notification_type=notification_type
            )
