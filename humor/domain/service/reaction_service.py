"""Reaction domain service."""

from typing import NamedTuple

import logfire

from humor.domain.error import NotFoundError, ValidationError
from humor.domain.model.comment import Comment
from humor.domain.model.post import Post
from humor.domain.model.reaction import apply_reaction
from humor.domain.value import (
    CommentId,
    NotificationType,
    PostId,
    ReactionType,
    UserId,
)

from .base import Service
from .notification_service import NotificationService
from .post_service import PostService


class ReactionOutcome(NamedTuple):
    """Result of applying a reaction.

    Attributes:
        post: Post as stored after the change
        previous_type: Reaction the user held before, if any
        current_type: Reaction the user holds now, None after a toggle-off
        notification_type: Kind of notification owed to the author, if any
    """

    post: Post
    previous_type: ReactionType | None
    current_type: ReactionType | None
    notification_type: NotificationType | None


def coerce_reaction_type(value: ReactionType | str) -> ReactionType:
    """Parse a reaction type.

    Raises:
        ValidationError: If the value isn't a known reaction type
    """
    try:
        return ReactionType(value)
    except ValueError:
        allowed = ", ".join(r.value for r in ReactionType)
        raise ValidationError(f"Invalid reaction type: {value!r} (expected {allowed})")


class ReactionService(Service):
    """Domain service for reactions on posts and comments."""

    def __init__(
        self, post_service: PostService, notification_service: NotificationService
    ) -> None:
        """Initialize reaction service.

        Args:
            post_service: Post service, for versioned writes
            notification_service: Notification service
        """
        self.post_service = post_service
        self.notification_service = notification_service

    async def react_to_post(
        self, post_id: PostId, user_id: UserId, reaction_type: ReactionType | str
    ) -> ReactionOutcome:
        """React to a post, switch reaction, or toggle it off.

        The post author is notified when the user ends up with a different
        reaction than before, unless the user is the author.

        Raises:
            ValidationError: If the reaction type is unknown
            NotFoundError: If the post doesn't exist
        """
        reaction_type = coerce_reaction_type(reaction_type)

        with logfire.span(
            "reaction_service.react_to_post",
            post_id=str(post_id),
            user_id=str(user_id),
            reaction_type=reaction_type.value,
        ):

            def react(post: Post) -> tuple[Post, ReactionType | None]:
                reactions, previous = apply_reaction(
                    post.reactions, user_id, reaction_type
                )
                return post.model_copy(update={"reactions": reactions}), previous

            post, previous_type = await self.post_service.mutate(post_id, react)
            outcome = _outcome(post, user_id, previous_type, reaction_type)
            logfire.info(
                "Reaction applied",
                post_id=str(post_id),
                previous=previous_type.value if previous_type else None,
                current=outcome.current_type.value if outcome.current_type else None,
            )

            if outcome.notification_type is not None:
                await self.notification_service.notify(
                    recipient_id=post.author_id,
                    sender_id=user_id,
                    type=outcome.notification_type,
                    post_id=post.id,
                    reaction_type=reaction_type,
                )

            return outcome

    async def react_to_comment(
        self,
        post_id: PostId,
        comment_id: CommentId,
        user_id: UserId,
        reaction_type: ReactionType | str,
    ) -> ReactionOutcome:
        """React to a comment anywhere in a post's thread.

        Same transitions as post reactions. No notification is sent; the
        notification types only describe actions on posts.

        Raises:
            ValidationError: If the reaction type is unknown
            NotFoundError: If the post or comment doesn't exist
        """
        reaction_type = coerce_reaction_type(reaction_type)

        with logfire.span(
            "reaction_service.react_to_comment",
            post_id=str(post_id),
            comment_id=str(comment_id),
            user_id=str(user_id),
            reaction_type=reaction_type.value,
        ):

            def react(post: Post) -> tuple[Post, ReactionType | None]:
                comment = post.comments.find(comment_id)
                if comment is None:
                    raise NotFoundError("Comment", str(comment_id))
                reactions, previous = apply_reaction(
                    comment.reactions, user_id, reaction_type
                )
                updated: Comment = comment.model_copy(update={"reactions": reactions})
                return (
                    post.model_copy(update={"comments": post.comments.replace(updated)}),
                    previous,
                )

            post, previous_type = await self.post_service.mutate(post_id, react)
            outcome = _outcome(post, user_id, previous_type, reaction_type)
            logfire.info(
                "Comment reaction applied",
                post_id=str(post_id),
                comment_id=str(comment_id),
            )
            return outcome._replace(notification_type=None)


def _outcome(
    post: Post,
    user_id: UserId,
    previous_type: ReactionType | None,
    reaction_type: ReactionType,
) -> ReactionOutcome:
    toggled_off = previous_type == reaction_type
    notify = not toggled_off and not post.is_authored_by(user_id)
    return ReactionOutcome(
        post=post,
        previous_type=previous_type,
        current_type=None if toggled_off else reaction_type,
        notification_type=NotificationType.REACTION if notify else None,
    )
