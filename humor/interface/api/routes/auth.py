"""Authentication routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from humor.application.usecase.auth import (
    AuthResponse,
    LoginRequest,
    LoginUseCase,
    SignupRequest,
    SignupUseCase,
)
from humor.domain.error import (
    AuthenticationError,
    BusinessRuleViolationError,
    ValidationError,
)

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


class SignupAPIRequest(BaseModel):
    """API request for creating an account."""

    handle: str = Field(min_length=1, max_length=50)
    password: str = Field(min_length=1, max_length=256)
    humor_tag: str


class LoginAPIRequest(BaseModel):
    """API request for logging in."""

    handle: str = Field(min_length=1, max_length=50)
    password: str = Field(min_length=1, max_length=256)


@router.post(
    "/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
async def signup(
    request: SignupAPIRequest,
    signup_use_case: FromDishka[SignupUseCase],
) -> AuthResponse:
    """Create an account and return a bearer token.

    Raises:
        HTTPException: 400 if a field is invalid or the handle is taken
    """
    try:
        return await signup_use_case.execute(
            SignupRequest(
                handle=request.handle,
                password=request.password,
                humor_tag=request.humor_tag,
            )
        )
    except (ValidationError, BusinessRuleViolationError) as e:
        logfire.info("Signup rejected", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error during signup", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create account",
        )


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginAPIRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> AuthResponse:
    """Exchange handle and password for a bearer token.

    Raises:
        HTTPException: 401 on bad credentials
    """
    try:
        return await login_use_case.execute(
            LoginRequest(handle=request.handle, password=request.password)
        )
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )
