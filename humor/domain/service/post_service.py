"""Post domain service."""

from collections.abc import Callable
from datetime import UTC, datetime
from typing import TypeVar
from uuid import uuid4

import logfire

from humor.config import ContentSettings
from humor.domain.error import (
    ConcurrentModificationError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from humor.domain.model.post import Post
from humor.domain.repository import PostRepository
from humor.domain.value import PostId, UserId

from .base import Service

T = TypeVar("T")


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self, post_repository: PostRepository, content_settings: ContentSettings
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            content_settings: Retry limits and paging
        """
        self.post_repository = post_repository
        self.content_settings = content_settings

    async def create_post(
        self, author_id: UserId, text: str, category: str, is_anonymous: bool = False
    ) -> Post:
        """Create a post.

        Raises:
            ValidationError: If text or category is blank
        """
        with logfire.span("post_service.create_post", author_id=str(author_id)):
            text, category = _require_fields(text, category)
            post = Post(
                id=PostId(uuid4()),
                author_id=author_id,
                text=text,
                category=category,
                is_anonymous=is_anonymous,
            )
            saved = await self.post_repository.add(post)
            logfire.info("Post created", post_id=str(saved.id), category=category)
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Post not found", post_id=str(post_id))
            return post

    async def require_post(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        post = await self.get_post_by_id(post_id)
        if post is None:
            raise NotFoundError("Post", str(post_id))
        return post

    async def list_posts(self, limit: int | None = None, offset: int = 0) -> list[Post]:
        """List posts, newest first."""
        limit = limit or self.content_settings.feed_page_size
        with logfire.span("post_service.list_posts", limit=limit, offset=offset):
            return await self.post_repository.find_all(limit=limit, offset=offset)

    async def mutate(
        self, post_id: PostId, change: Callable[[Post], tuple[Post, T]]
    ) -> tuple[Post, T]:
        """Apply a change to a post as one atomic document write.

        ``change`` receives the current post and returns the modified post
        plus any extra result. On a version conflict the post is re-read and
        ``change`` runs again, so it must not have side effects.

        Args:
            post_id: Post to modify
            change: Pure function producing the new post state

        Returns:
            Tuple of (stored post, result of the last ``change`` call)

        Raises:
            NotFoundError: If the post doesn't exist
            ConcurrentModificationError: If every attempt lost a race
        """
        attempts = self.content_settings.max_write_retries
        with logfire.span("post_service.mutate", post_id=str(post_id)):
            for attempt in range(1, attempts + 1):
                post = await self.require_post(post_id)
                changed, result = change(post)
                try:
                    saved = await self.post_repository.replace(changed)
                    return saved, result
                except ConcurrentModificationError:
                    logfire.warn(
                        "Post write conflict, retrying",
                        post_id=str(post_id),
                        attempt=attempt,
                        version=post.version,
                    )

            logfire.error(
                "Post write retries exhausted", post_id=str(post_id), attempts=attempts
            )
            raise ConcurrentModificationError("Post", str(post_id), post.version)

    async def update_post(
        self,
        post_id: PostId,
        user_id: UserId,
        text: str,
        category: str,
        is_anonymous: bool,
    ) -> Post:
        """Edit a post's text, category and anonymity.

        Raises:
            ValidationError: If text or category is blank
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the user isn't the author
        """
        with logfire.span(
            "post_service.update_post", post_id=str(post_id), user_id=str(user_id)
        ):
            text, category = _require_fields(text, category)

            def edit(post: Post) -> tuple[Post, None]:
                if not post.is_authored_by(user_id):
                    raise NotAuthorizedError("post", str(post_id), str(user_id))
                return (
                    post.model_copy(
                        update={
                            "text": text,
                            "category": category,
                            "is_anonymous": is_anonymous,
                            "updated_at": datetime.now(UTC),
                        }
                    ),
                    None,
                )

            updated, _ = await self.mutate(post_id, edit)
            logfire.info("Post updated", post_id=str(post_id))
            return updated

    async def delete_post(self, post_id: PostId, user_id: UserId) -> None:
        """Delete a post.

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the user isn't the author
        """
        with logfire.span(
            "post_service.delete_post", post_id=str(post_id), user_id=str(user_id)
        ):
            post = await self.require_post(post_id)
            if not post.is_authored_by(user_id):
                logfire.warn(
                    "Unauthorized post delete attempt",
                    post_id=str(post_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError("post", str(post_id), str(user_id))

            if not await self.post_repository.delete(post_id):
                raise NotFoundError("Post", str(post_id))
            logfire.info("Post deleted", post_id=str(post_id))


def _require_fields(text: str, category: str) -> tuple[str, str]:
    text = (text or "").strip()
    category = (category or "").strip()
    if not text or not category:
        raise ValidationError("Missing required fields: text and category")
    return text, category
