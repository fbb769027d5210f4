"""Post aggregate root.

A post owns its reactions and its whole comment thread, so every reaction,
comment and reply is a change to a single document. ``version`` guards those
changes against concurrent writers.
"""

from datetime import UTC, datetime

from pydantic import Field

from humor.domain.model.comment import CommentThread
from humor.domain.model.common import DomainModel
from humor.domain.model.reaction import Reaction
from humor.domain.value import PostId, UserId


class Post(DomainModel):
    """Post aggregate root."""

    id: PostId
    author_id: UserId
    text: str = Field(min_length=1, max_length=5000)
    category: str = Field(min_length=1, max_length=100)
    is_anonymous: bool = False
    reactions: tuple[Reaction, ...] = Field(default_factory=tuple)
    comments: CommentThread = Field(default_factory=CommentThread)
    version: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    def is_authored_by(self, user_id: UserId) -> bool:
        return self.author_id == user_id
