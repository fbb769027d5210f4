"""Bearer token handling for routes."""

from fastapi import HTTPException, status

from humor.domain.service import JWTService
from humor.util.jwt import bearer_token


def require_user_id(jwt_service: JWTService, authorization: str | None) -> str:
    """Resolve the caller from an ``Authorization`` header.

    Args:
        jwt_service: JWT service
        authorization: Raw header value

    Returns:
        Authenticated user ID

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired
    """
    token = bearer_token(authorization)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authorized, no token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user_id = jwt_service.get_user_id_from_token(token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authorized, token failed",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user_id
