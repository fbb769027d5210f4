"""Notification routes.

All routes act on the authenticated user's own notifications.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, status

from humor.application.usecase.notification import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkAllReadRequest,
    MarkAllReadResponse,
    MarkAllReadUseCase,
    MarkReadRequest,
    MarkReadUseCase,
    NotificationView,
    UnreadCountRequest,
    UnreadCountResponse,
    UnreadCountUseCase,
)
from humor.domain.error import NotFoundError
from humor.domain.service import JWTService
from humor.interface.api.security import require_user_id

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


@router.get("", response_model=ListNotificationsResponse)
async def list_notifications(
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> ListNotificationsResponse:
    """Most recent notifications, newest first."""
    user_id = require_user_id(jwt_service, authorization)
    return await list_notifications_use_case.execute(
        ListNotificationsRequest(user_id=user_id)
    )


@router.get("/unread-count", response_model=UnreadCountResponse)
async def unread_count(
    unread_count_use_case: FromDishka[UnreadCountUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> UnreadCountResponse:
    """Number of unread notifications."""
    user_id = require_user_id(jwt_service, authorization)
    return await unread_count_use_case.execute(UnreadCountRequest(user_id=user_id))


@router.patch("/read-all", response_model=MarkAllReadResponse)
async def mark_all_read(
    mark_all_read_use_case: FromDishka[MarkAllReadUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> MarkAllReadResponse:
    """Mark every unread notification read."""
    user_id = require_user_id(jwt_service, authorization)
    return await mark_all_read_use_case.execute(MarkAllReadRequest(user_id=user_id))


@router.patch("/{notification_id}/read", response_model=NotificationView)
async def mark_read(
    notification_id: str,
    mark_read_use_case: FromDishka[MarkReadUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> NotificationView:
    """Mark one notification read.

    Raises:
        HTTPException: 404 if it doesn't exist or isn't the caller's
    """
    user_id = require_user_id(jwt_service, authorization)

    try:
        return await mark_read_use_case.execute(
            MarkReadRequest(notification_id=notification_id, user_id=user_id)
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Notification not found",
        )
