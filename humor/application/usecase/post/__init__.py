"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostResponse, DeletePostUseCase
from .get_post import GetPostRequest, GetPostUseCase
from .list_posts import ListPostsRequest, ListPostsResponse, ListPostsUseCase
from .react_to_post import (
    ReactToPostRequest,
    ReactToPostResponse,
    ReactToPostUseCase,
)
from .update_post import UpdatePostRequest, UpdatePostUseCase
from .view import AuthorView, CommentView, PostView, PostViewBuilder, ReactionView

__all__ = [
    "AuthorView",
    "CommentView",
    "CreatePostRequest",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostResponse",
    "DeletePostUseCase",
    "GetPostRequest",
    "GetPostUseCase",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "PostView",
    "PostViewBuilder",
    "ReactToPostRequest",
    "ReactToPostResponse",
    "ReactToPostUseCase",
    "ReactionView",
    "UpdatePostRequest",
    "UpdatePostUseCase",
]
