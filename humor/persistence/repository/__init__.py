"""PostgreSQL repository implementations."""

from humor.persistence.repository.notification import PostgresNotificationRepository
from humor.persistence.repository.post import PostgresPostRepository
from humor.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
    "PostgresNotificationRepository",
]
