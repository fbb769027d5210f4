"""Post routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, Query, status
from pydantic import BaseModel, Field

from humor.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    PostView,
    ReactToPostRequest,
    ReactToPostResponse,
    ReactToPostUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from humor.domain.error import (
    ConcurrentModificationError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from humor.domain.service import JWTService
from humor.interface.api.security import require_user_id

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    text: str = Field(default="", max_length=5000)
    category: str = Field(default="", max_length=100)
    is_anonymous: bool = False


class UpdatePostAPIRequest(BaseModel):
    """API request for editing a post. Omitted fields are unchanged."""

    text: str | None = Field(default=None, max_length=5000)
    category: str | None = Field(default=None, max_length=100)
    is_anonymous: bool | None = None


class ReactAPIRequest(BaseModel):
    """API request for reacting to a post or comment."""

    reaction_type: str


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    limit: int | None = Query(default=None, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> ListPostsResponse:
    """List posts, newest first."""
    return await list_posts_use_case.execute(
        ListPostsRequest(limit=limit, offset=offset)
    )


@router.get("/{post_id}", response_model=PostView)
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> PostView:
    """Get a post with its reactions and comment thread."""
    try:
        return await get_post_use_case.execute(GetPostRequest(post_id=post_id))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("", response_model=PostView, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> PostView:
    """Create a new post.

    Requires authentication.

    Raises:
        HTTPException: 401 if not authenticated, 400 if text or category is missing
    """
    user_id = require_user_id(jwt_service, authorization)

    try:
        return await create_post_use_case.execute(
            CreatePostRequest(
                author_id=user_id,
                text=request.text,
                category=request.category,
                is_anonymous=request.is_anonymous,
            )
        )
    except ValidationError as e:
        logfire.warn("Post creation validation error", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        # Token for a user that no longer exists
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error creating post", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create post",
        )


@router.put("/{post_id}", response_model=PostView)
async def update_post(
    post_id: str,
    request: UpdatePostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> PostView:
    """Edit a post. Only the author can edit.

    Raises:
        HTTPException: 401, 403 for non-authors, 404, or 400 for blank fields
    """
    user_id = require_user_id(jwt_service, authorization)

    try:
        return await update_post_use_case.execute(
            UpdatePostRequest(
                post_id=post_id,
                user_id=user_id,
                text=request.text,
                category=request.category,
                is_anonymous=request.is_anonymous,
            )
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized post update attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User not authorized to update this post",
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except ConcurrentModificationError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error updating post", post_id=post_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update post",
        )


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> DeletePostResponse:
    """Delete a post. Only the author can delete.

    Raises:
        HTTPException: 401, 403 for non-authors, or 404
    """
    user_id = require_user_id(jwt_service, authorization)

    try:
        return await delete_post_use_case.execute(
            DeletePostRequest(post_id=post_id, user_id=user_id)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized post delete attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User not authorized to delete this post",
        )
    except Exception as e:
        logfire.error("Unexpected error deleting post", post_id=post_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete post",
        )


@router.post("/{post_id}/react", response_model=ReactToPostResponse)
async def react_to_post(
    post_id: str,
    request: ReactAPIRequest,
    react_to_post_use_case: FromDishka[ReactToPostUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> ReactToPostResponse:
    """React to a post.

    Reacting again with the same type removes the reaction; a different
    type replaces it.

    Raises:
        HTTPException: 401, 400 for an unknown reaction type, or 404
    """
    user_id = require_user_id(jwt_service, authorization)

    try:
        return await react_to_post_use_case.execute(
            ReactToPostRequest(
                post_id=post_id,
                user_id=user_id,
                reaction_type=request.reaction_type,
            )
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ConcurrentModificationError as e:
        logfire.error("Reaction lost after retries", error=str(e))
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error reacting to post", post_id=post_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to react to post",
        )
