"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from humor.domain.model.post import Post
from humor.domain.value import PostId


class PostRepository(ABC):
    """Repository for the Post aggregate.

    A post is stored as one document together with its reactions and
    comment thread. Writes after the first are compare-and-set on
    ``Post.version``.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, limit: int = 50, offset: int = 0) -> List[Post]:
        """List posts, newest first.

        Args:
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            Page of posts ordered by creation time descending
        """
        pass

    @abstractmethod
    async def add(self, post: Post) -> Post:
        """Insert a new post.

        Args:
            post: The post to insert

        Returns:
            The stored post
        """
        pass

    @abstractmethod
    async def replace(self, post: Post) -> Post:
        """Write a modified post if nobody else changed it meanwhile.

        The write only succeeds when the stored version equals
        ``post.version``; the stored copy then gets ``version + 1``.

        Args:
            post: Modified post carrying the version it was read at

        Returns:
            The stored post with its new version

        Raises:
            ConcurrentModificationError: If the stored version moved on
            NotFoundError: If the post no longer exists
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post.

        Args:
            post_id: The post ID to delete

        Returns:
            True if a post was deleted
        """
        pass
