"""Comments and the per-post comment thread.

Comments nest without a depth limit. Instead of a recursive type the thread
keeps an arena of nodes keyed by id plus an adjacency map from each parent
to its ordered replies. Lookups walk the tree explicitly, depth first.
"""

from collections.abc import Iterator
from datetime import UTC, datetime
from typing import Optional

from pydantic import Field

from humor.domain.error import NotFoundError
from humor.domain.model.common import DomainModel
from humor.domain.model.reaction import Reaction
from humor.domain.value import CommentId, UserId


class Comment(DomainModel):
    """A single node of a comment thread.

    Append-only: after creation only ``reactions`` change.
    """

    id: CommentId
    author_id: UserId
    text: str = Field(min_length=1, max_length=2000)
    parent_id: Optional[CommentId] = None
    reactions: tuple[Reaction, ...] = Field(default_factory=tuple)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class CommentThread(DomainModel):
    """All comments of a post.

    Attributes:
        nodes: Every comment, keyed by id
        roots: Ids of top-level comments in insertion order
        replies: Ordered reply ids per parent comment id
    """

    nodes: dict[CommentId, Comment] = Field(default_factory=dict)
    roots: tuple[CommentId, ...] = Field(default_factory=tuple)
    replies: dict[CommentId, tuple[CommentId, ...]] = Field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.nodes)

    def children_of(self, comment_id: CommentId) -> tuple[Comment, ...]:
        """Direct replies of a comment, oldest first."""
        return tuple(self.nodes[c] for c in self.replies.get(comment_id, ()))

    def root_comments(self) -> tuple[Comment, ...]:
        return tuple(self.nodes[c] for c in self.roots)

    def walk(self) -> Iterator[tuple[Comment, int]]:
        """Yield ``(comment, depth)`` in depth-first pre-order.

        Root comments have depth 0. Siblings keep insertion order.
        """
        stack: list[tuple[CommentId, int]] = [(c, 0) for c in reversed(self.roots)]
        while stack:
            comment_id, depth = stack.pop()
            yield self.nodes[comment_id], depth
            for child_id in reversed(self.replies.get(comment_id, ())):
                stack.append((child_id, depth + 1))

    def find(self, comment_id: CommentId) -> Comment | None:
        """Find a comment anywhere in the thread by depth-first search."""
        for comment, _ in self.walk():
            if comment.id == comment_id:
                return comment
        return None

    def depth_of(self, comment_id: CommentId) -> int | None:
        for comment, depth in self.walk():
            if comment.id == comment_id:
                return depth
        return None

    def append(self, comment: Comment) -> "CommentThread":
        """Return a new thread with ``comment`` added.

        Without a parent the comment becomes a new root. Otherwise it is
        appended to the replies of the parent, wherever that parent sits.

        Raises:
            NotFoundError: If the parent comment is not in the thread
        """
        nodes = {**self.nodes, comment.id: comment}

        if comment.parent_id is None:
            return self.model_copy(
                update={"nodes": nodes, "roots": self.roots + (comment.id,)}
            )

        parent = self.find(comment.parent_id)
        if parent is None:
            raise NotFoundError("Parent comment", str(comment.parent_id))

        replies = dict(self.replies)
        replies[parent.id] = replies.get(parent.id, ()) + (comment.id,)
        return self.model_copy(update={"nodes": nodes, "replies": replies})

    def replace(self, comment: Comment) -> "CommentThread":
        """Return a new thread with an existing node swapped for ``comment``."""
        if comment.id not in self.nodes:
            raise NotFoundError("Comment", str(comment.id))
        return self.model_copy(update={"nodes": {**self.nodes, comment.id: comment}})
