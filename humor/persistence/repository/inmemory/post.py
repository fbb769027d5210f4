"""In-memory post repository for testing."""

from typing import Optional

from humor.domain.error import ConcurrentModificationError, NotFoundError
from humor.domain.model.post import Post
from humor.domain.repository.post import PostRepository
from humor.domain.value import PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    ``replace`` checks and writes without awaiting, so it is atomic with
    respect to other coroutines on the same event loop.
    """

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_all(self, limit: int = 50, offset: int = 0) -> list[Post]:
        """List posts newest first."""
        posts = sorted(self._posts.values(), key=lambda p: p.created_at, reverse=True)
        return posts[offset : offset + limit]

    async def add(self, post: Post) -> Post:
        """Insert a post."""
        self._posts[post.id] = post
        return post

    async def replace(self, post: Post) -> Post:
        """Compare-and-set on version."""
        stored = self._posts.get(post.id)
        if stored is None:
            raise NotFoundError("Post", str(post.id))
        if stored.version != post.version:
            raise ConcurrentModificationError("Post", str(post.id), post.version)

        saved = post.model_copy(update={"version": post.version + 1})
        self._posts[post.id] = saved
        return saved

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post."""
        return self._posts.pop(post_id, None) is not None
