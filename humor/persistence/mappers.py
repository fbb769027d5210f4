"""Mappers between database rows and domain models.

Domain models are frozen pydantic models, so rows are mapped by hand.
A post's reactions and comment thread are stored as one JSON document.
Comments are a flat list in depth-first order; each node points at its
parent, so nesting depth never shows up in the JSON itself:

    {
        "reactions": [{"type": "Clever", "users": ["<uuid>"]}],
        "comments": [
            {
                "id": "<uuid>",
                "author": "<uuid>",
                "text": "...",
                "timestamp": "<iso-8601>",
                "parentComment": null,
                "reactions": [...]
            },
            {"id": "<uuid>", "parentComment": "<uuid of the first>", ...}
        ]
    }
"""

from datetime import datetime
from typing import Any, Dict, Iterable, List
from uuid import UUID

from humor.domain.model import Comment, CommentThread, Notification, Post, Reaction, User
from humor.domain.value import (
    CommentId,
    HumorTag,
    NotificationId,
    NotificationType,
    PostId,
    ReactionType,
    UserId,
)
from humor.domain.value.types import Handle


def _uuid(value: Any) -> UUID:
    return value if isinstance(value, UUID) else UUID(str(value))


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        handle=Handle(row["handle"]),
        password_hash=row["password_hash"],
        humor_tag=HumorTag(row["humor_tag"]),
        bio=row["bio"],
        profile_pic_url=row["profile_pic_url"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return {
        "id": user.id,
        "handle": user.handle.root,
        "password_hash": user.password_hash,
        "humor_tag": user.humor_tag.value,
        "bio": user.bio,
        "profile_pic_url": user.profile_pic_url,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def reactions_to_document(reactions: Iterable[Reaction]) -> List[Dict[str, Any]]:
    return [
        {"type": r.type.value, "users": [str(u) for u in r.users]} for r in reactions
    ]


def document_to_reactions(items: Iterable[Dict[str, Any]]) -> tuple[Reaction, ...]:
    return tuple(
        Reaction(
            type=ReactionType(item["type"]),
            users=tuple(UserId(_uuid(u)) for u in item.get("users", [])),
        )
        for item in items
        if item.get("users")
    )


def thread_to_document(thread: CommentThread) -> List[Dict[str, Any]]:
    """Render a comment thread as a flat node list in depth-first order."""
    return [
        {
            "id": str(comment.id),
            "author": str(comment.author_id),
            "text": comment.text,
            "timestamp": comment.created_at.isoformat(),
            "parentComment": str(comment.parent_id) if comment.parent_id else None,
            "reactions": reactions_to_document(comment.reactions),
        }
        for comment, _ in thread.walk()
    ]


def document_to_thread(nodes: Iterable[Dict[str, Any]]) -> CommentThread:
    """Rebuild a thread from flat comment nodes.

    Parents come before their replies, and replies keep list order.

    Raises:
        ValueError: If a node names a parent not seen earlier in the list
    """
    arena: Dict[CommentId, Comment] = {}
    roots: List[CommentId] = []
    replies: Dict[CommentId, List[CommentId]] = {}

    for node in nodes:
        parent = node.get("parentComment")
        parent_id = CommentId(_uuid(parent)) if parent else None
        if parent_id is not None and parent_id not in arena:
            raise ValueError(f"Comment {node['id']} stored before its parent {parent}")

        comment = Comment(
            id=CommentId(_uuid(node["id"])),
            author_id=UserId(_uuid(node["author"])),
            text=node["text"],
            parent_id=parent_id,
            reactions=document_to_reactions(node.get("reactions", [])),
            created_at=datetime.fromisoformat(node["timestamp"]),
        )
        arena[comment.id] = comment
        if parent_id is None:
            roots.append(comment.id)
        else:
            replies.setdefault(parent_id, []).append(comment.id)

    return CommentThread(
        nodes=arena,
        roots=tuple(roots),
        replies={k: tuple(v) for k, v in replies.items()},
    )


def post_to_document(post: Post) -> Dict[str, Any]:
    return {
        "reactions": reactions_to_document(post.reactions),
        "comments": thread_to_document(post.comments),
    }


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model."""
    document = row.get("document") or {}
    return Post(
        id=PostId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        text=row["text"],
        category=row["category"],
        is_anonymous=row["is_anonymous"],
        reactions=document_to_reactions(document.get("reactions", [])),
        comments=document_to_thread(document.get("comments", [])),
        version=row["version"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    return {
        "id": post.id,
        "author_id": post.author_id,
        "text": post.text,
        "category": post.category,
        "is_anonymous": post.is_anonymous,
        "document": post_to_document(post),
        "version": post.version,
        "created_at": post.created_at,
        "updated_at": post.updated_at,
    }


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model."""
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        recipient_id=UserId(_uuid(row["recipient_id"])),
        sender_id=UserId(_uuid(row["sender_id"])),
        type=NotificationType(row["type"]),
        post_id=PostId(_uuid(row["post_id"])),
        comment_id=CommentId(_uuid(row["comment_id"])) if row.get("comment_id") else None,
        reaction_type=ReactionType(row["reaction_type"]) if row.get("reaction_type") else None,
        message=row["message"],
        is_read=row["is_read"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict."""
    return {
        "id": notification.id,
        "recipient_id": notification.recipient_id,
        "sender_id": notification.sender_id,
        "type": notification.type.value,
        "post_id": notification.post_id,
        "comment_id": notification.comment_id,
        "reaction_type": notification.reaction_type.value
        if notification.reaction_type
        else None,
        "message": notification.message,
        "is_read": notification.is_read,
        "created_at": notification.created_at,
        "updated_at": notification.updated_at,
    }
