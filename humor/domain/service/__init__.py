"""Domain services for the humor network."""

from .base import Service
from .comment_service import CommentOutcome, CommentService
from .jwt_service import JWTService
from .notification_service import NotificationService
from .post_service import PostService
from .reaction_service import ReactionOutcome, ReactionService
from .user_service import UserService

__all__ = [
    "Service",
    "CommentOutcome",
    "CommentService",
    "JWTService",
    "NotificationService",
    "PostService",
    "ReactionOutcome",
    "ReactionService",
    "UserService",
]
