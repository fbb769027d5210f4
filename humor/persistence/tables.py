"""SQLAlchemy table definitions.

Core tables used by the repositories; they match the Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    func,
    text,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("handle", String(50), nullable=False),
    Column("password_hash", Text, nullable=False),
    Column("humor_tag", String(20), nullable=False),
    Column("bio", Text, nullable=False),
    Column("profile_pic_url", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=func.now()
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default=func.now()
    ),
)

# Handles are unique ignoring case
Index("uq_users_handle_lower", func.lower(users_table.c.handle), unique=True)

# ============================================================================
# POSTS TABLE
# Reactions and the comment thread live in the JSONB document column.
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("text", Text, nullable=False),
    Column("category", String(100), nullable=False),
    Column("is_anonymous", Boolean, nullable=False, server_default="false"),
    Column("document", JSONB, nullable=False, server_default=text("'{}'::jsonb")),
    Column("version", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=func.now()
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default=func.now()
    ),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_author_id", posts_table.c.author_id)

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "recipient_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "sender_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("type", String(20), nullable=False),
    Column(
        "post_id",
        UUID(as_uuid=True),
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("comment_id", UUID(as_uuid=True), nullable=True),
    Column("reaction_type", String(20), nullable=True),
    Column("message", Text, nullable=False),
    Column("is_read", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=func.now()
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default=func.now()
    ),
)

Index(
    "idx_notifications_recipient_created",
    notifications_table.c.recipient_id,
    notifications_table.c.created_at.desc(),
)
# Lookup for pending notifications (dedup and unread count)
Index(
    "idx_notifications_unread",
    notifications_table.c.recipient_id,
    notifications_table.c.sender_id,
    notifications_table.c.type,
    notifications_table.c.post_id,
    postgresql_where=notifications_table.c.is_read.is_(False),
)
