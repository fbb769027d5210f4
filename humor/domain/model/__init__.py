"""Domain model entities for the humor network."""

from humor.domain.model.comment import Comment, CommentThread
from humor.domain.model.notification import Notification
from humor.domain.model.post import Post
from humor.domain.model.reaction import Reaction, apply_reaction, reaction_of
from humor.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "Comment",
    "CommentThread",
    "Reaction",
    "Notification",
    "apply_reaction",
    "reaction_of",
]
