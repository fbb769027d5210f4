"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status

from humor.application.usecase.user import (
    GetUserRequest,
    GetUserUseCase,
    ListUsersResponse,
    ListUsersUseCase,
    UserView,
)
from humor.domain.error import NotFoundError

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("", response_model=ListUsersResponse)
async def list_users(
    list_users_use_case: FromDishka[ListUsersUseCase],
) -> ListUsersResponse:
    """List all users."""
    return await list_users_use_case.execute()


@router.get("/{user_id}", response_model=UserView)
async def get_user(
    user_id: str,
    get_user_use_case: FromDishka[GetUserUseCase],
) -> UserView:
    """Get a user profile by ID.

    Raises:
        HTTPException: 404 if the user doesn't exist
    """
    try:
        return await get_user_use_case.execute(GetUserRequest(user_id=user_id))
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
