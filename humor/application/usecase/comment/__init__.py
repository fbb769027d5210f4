"""Comment use cases."""

from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .react_to_comment import (
    ReactToCommentRequest,
    ReactToCommentResponse,
    ReactToCommentUseCase,
)

__all__ = [
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "ReactToCommentRequest",
    "ReactToCommentResponse",
    "ReactToCommentUseCase",
]
