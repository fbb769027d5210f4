"""In-memory repository implementations for testing."""

from .notification import InMemoryNotificationRepository
from .post import InMemoryPostRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryNotificationRepository",
    "InMemoryPostRepository",
    "InMemoryUserRepository",
]
