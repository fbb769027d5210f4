"""PostgreSQL implementation of Post repository."""

from typing import Optional

import logfire
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from humor.domain.error import ConcurrentModificationError, NotFoundError
from humor.domain.model import Post
from humor.domain.repository import PostRepository
from humor.domain.value import PostId
from humor.persistence.mappers import post_to_dict, post_to_document, row_to_post
from humor.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository.

    Reactions and comments are kept in the ``document`` JSONB column, so
    every change to them is a single-row UPDATE guarded by ``version``.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_post(dict(row)) if row else None

    async def find_all(self, limit: int = 50, offset: int = 0) -> list[Post]:
        """List posts, newest first."""
        stmt = (
            select(posts_table)
            .order_by(posts_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_post(dict(row)) for row in result.mappings()]

    async def add(self, post: Post) -> Post:
        """Insert a new post."""
        await self.session.execute(posts_table.insert().values(**post_to_dict(post)))
        await self.session.flush()
        return post

    async def replace(self, post: Post) -> Post:
        """Write a post if its stored version still matches.

        Raises:
            ConcurrentModificationError: If another writer got there first
            NotFoundError: If the post was deleted
        """
        stmt = (
            posts_table.update()
            .where(posts_table.c.id == post.id)
            .where(posts_table.c.version == post.version)
            .values(
                text=post.text,
                category=post.category,
                is_anonymous=post.is_anonymous,
                document=post_to_document(post),
                version=post.version + 1,
                updated_at=post.updated_at,
            )
            .returning(posts_table.c.version)
        )
        result = await self.session.execute(stmt)
        new_version = result.scalar_one_or_none()

        if new_version is None:
            exists = await self.session.execute(
                select(posts_table.c.id).where(posts_table.c.id == post.id)
            )
            if exists.first() is None:
                raise NotFoundError("Post", str(post.id))
            logfire.debug(
                "Post version conflict", post_id=str(post.id), version=post.version
            )
            raise ConcurrentModificationError("Post", str(post.id), post.version)

        await self.session.flush()
        return post.model_copy(update={"version": new_version})

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post."""
        result = await self.session.execute(
            delete(posts_table).where(posts_table.c.id == post_id)
        )
        await self.session.flush()
        return result.rowcount > 0
