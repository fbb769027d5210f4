"""Post representation shared by post, reaction and comment use cases.

Comments are returned as a flat list in depth-first order. Each entry
carries ``parent_comment`` and ``depth`` so clients can rebuild the tree
at any depth.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from humor.domain.model import Post, Reaction, User
from humor.domain.service import UserService
from humor.domain.value import UserId


class AuthorView(BaseModel):
    """Author summary embedded in posts and comments."""

    id: str
    handle: Optional[str] = None
    profile_pic_url: Optional[str] = None
    humor_tag: Optional[str] = None


class ReactionView(BaseModel):
    """Users who reacted with one type."""

    type: str
    users: list[str]


class CommentView(BaseModel):
    """One comment of a thread. Root comments have depth 0."""

    id: str
    author: AuthorView
    text: str
    timestamp: datetime
    parent_comment: Optional[str] = None
    depth: int = 0
    reactions: list[ReactionView]


class PostView(BaseModel):
    """Post with reactions and the full comment thread."""

    id: str
    author: AuthorView
    text: str
    category: str
    is_anonymous: bool
    reactions: list[ReactionView]
    comments: list[CommentView]
    comment_count: int
    created_at: datetime
    updated_at: datetime


def _author(user_id: UserId, users: dict[UserId, User]) -> AuthorView:
    user = users.get(user_id)
    if user is None:
        return AuthorView(id=str(user_id))
    return AuthorView(
        id=str(user.id),
        handle=user.handle.root,
        profile_pic_url=user.profile_pic_url,
        humor_tag=user.humor_tag.value,
    )


def _reactions(reactions: tuple[Reaction, ...]) -> list[ReactionView]:
    return [
        ReactionView(type=r.type.value, users=[str(u) for u in r.users])
        for r in reactions
    ]


def render_post(post: Post, users: dict[UserId, User]) -> PostView:
    """Build the view of a post from already loaded users."""
    comments = [
        CommentView(
            id=str(comment.id),
            author=_author(comment.author_id, users),
            text=comment.text,
            timestamp=comment.created_at,
            parent_comment=str(comment.parent_id) if comment.parent_id else None,
            depth=depth,
            reactions=_reactions(comment.reactions),
        )
        for comment, depth in post.comments.walk()
    ]

    return PostView(
        id=str(post.id),
        author=_author(post.author_id, users),
        text=post.text,
        category=post.category,
        is_anonymous=post.is_anonymous,
        reactions=_reactions(post.reactions),
        comments=comments,
        comment_count=len(post.comments),
        created_at=post.created_at,
        updated_at=post.updated_at,
    )


class PostViewBuilder:
    """Resolves authors of posts and comments and renders post views."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def build(self, post: Post) -> PostView:
        return (await self.build_many([post]))[0]

    async def build_many(self, posts: list[Post]) -> list[PostView]:
        user_ids: list[UserId] = []
        for post in posts:
            user_ids.append(post.author_id)
            user_ids.extend(c.author_id for c in post.comments.nodes.values())
        users = await self.user_service.get_users_by_ids(user_ids)
        return [render_post(post, users) for post in posts]
