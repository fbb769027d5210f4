"""Repository interfaces for the humor domain.

Interfaces live in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from humor.domain.repository.notification import NotificationRepository
from humor.domain.repository.post import PostRepository
from humor.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "NotificationRepository",
]
