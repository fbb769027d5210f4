"""PostgreSQL implementation of Notification repository."""

from datetime import UTC, datetime
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from humor.domain.model import Notification
from humor.domain.repository import NotificationRepository
from humor.domain.value import (
    NotificationId,
    NotificationType,
    PostId,
    ReactionType,
    UserId,
)
from humor.persistence.mappers import notification_to_dict, row_to_notification
from humor.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_unread(
        self,
        recipient_id: UserId,
        sender_id: UserId,
        type: NotificationType,
        post_id: PostId,
        reaction_type: Optional[ReactionType] = None,
    ) -> Optional[Notification]:
        """Find an unread notification for the same action."""
        t = notifications_table
        stmt = (
            select(t)
            .where(t.c.recipient_id == recipient_id)
            .where(t.c.sender_id == sender_id)
            .where(t.c.type == type.value)
            .where(t.c.post_id == post_id)
            .where(t.c.is_read.is_(False))
            .limit(1)
        )
        # Reaction type is part of the key: switching Clever to Amused notifies
        # again, while repeating Clever over an unread notice does not.
        if reaction_type is None:
            stmt = stmt.where(t.c.reaction_type.is_(None))
        else:
            stmt = stmt.where(t.c.reaction_type == reaction_type.value)

        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_notification(dict(row)) if row else None

    async def find_by_recipient(
        self, recipient_id: UserId, limit: int = 50
    ) -> list[Notification]:
        """List a recipient's notifications, newest first."""
        stmt = (
            select(notifications_table)
            .where(notifications_table.c.recipient_id == recipient_id)
            .order_by(notifications_table.c.created_at.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(dict(row)) for row in result.mappings()]

    async def count_unread(self, recipient_id: UserId) -> int:
        """Count unread notifications."""
        stmt = (
            select(func.count())
            .select_from(notifications_table)
            .where(notifications_table.c.recipient_id == recipient_id)
            .where(notifications_table.c.is_read.is_(False))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def save(self, notification: Notification) -> Notification:
        """Insert a notification.

        Runs in a savepoint so a failed insert leaves the surrounding
        transaction (the reaction or comment write) usable.
        """
        async with self.session.begin_nested():
            await self.session.execute(
                notifications_table.insert().values(**notification_to_dict(notification))
            )
        return notification

    async def mark_read(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> Optional[Notification]:
        """Mark one notification read if it belongs to the recipient."""
        stmt = (
            notifications_table.update()
            .where(notifications_table.c.id == notification_id)
            .where(notifications_table.c.recipient_id == recipient_id)
            .values(is_read=True, updated_at=datetime.now(UTC))
            .returning(*notifications_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_notification(dict(row)) if row else None

    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Mark all unread notifications read with a single UPDATE."""
        stmt = (
            notifications_table.update()
            .where(notifications_table.c.recipient_id == recipient_id)
            .where(notifications_table.c.is_read.is_(False))
            .values(is_read=True, updated_at=datetime.now(UTC))
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
