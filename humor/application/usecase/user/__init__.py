"""User use cases."""

from .get_user import GetUserRequest, GetUserUseCase
from .list_users import ListUsersResponse, ListUsersUseCase
from .view import UserView

__all__ = [
    "GetUserRequest",
    "GetUserUseCase",
    "ListUsersResponse",
    "ListUsersUseCase",
    "UserView",
]
