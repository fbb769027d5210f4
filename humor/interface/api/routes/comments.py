"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, status
from pydantic import BaseModel, Field

from humor.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    ReactToCommentRequest,
    ReactToCommentResponse,
    ReactToCommentUseCase,
)
from humor.domain.error import (
    ConcurrentModificationError,
    NotFoundError,
    ValidationError,
)
from humor.domain.service import JWTService
from humor.interface.api.routes.posts import ReactAPIRequest
from humor.interface.api.security import require_user_id

router = APIRouter(prefix="/posts", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    text: str = Field(default="", max_length=2000)
    parent_comment_id: str | None = None  # Comment being replied to


@router.post(
    "/{post_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> CreateCommentResponse:
    """Comment on a post, or reply to any comment in its thread.

    Requires authentication.

    Raises:
        HTTPException: 401, 400 for blank text, 404 if the post or parent is missing
    """
    user_id = require_user_id(jwt_service, authorization)

    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                post_id=post_id,
                text=request.text,
                author_id=user_id,
                parent_id=request.parent_comment_id,
            )
        )
    except NotFoundError as e:
        logfire.warn("Comment creation failed", error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except ConcurrentModificationError as e:
        logfire.error("Comment lost after retries", error=str(e))
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error creating comment", post_id=post_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create comment",
        )


@router.post(
    "/{post_id}/comments/{comment_id}/react", response_model=ReactToCommentResponse
)
async def react_to_comment(
    post_id: str,
    comment_id: str,
    request: ReactAPIRequest,
    react_to_comment_use_case: FromDishka[ReactToCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> ReactToCommentResponse:
    """React to a comment at any depth.

    Raises:
        HTTPException: 401, 400 for an unknown reaction type, or 404
    """
    user_id = require_user_id(jwt_service, authorization)

    try:
        return await react_to_comment_use_case.execute(
            ReactToCommentRequest(
                post_id=post_id,
                comment_id=comment_id,
                user_id=user_id,
                reaction_type=request.reaction_type,
            )
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ConcurrentModificationError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except Exception as e:
        logfire.error(
            "Unexpected error reacting to comment",
            post_id=post_id,
            comment_id=comment_id,
            error=str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to react to comment",
        )
