"""Notification use cases."""

from .list_notifications import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
)
from .mark_all_read import MarkAllReadRequest, MarkAllReadResponse, MarkAllReadUseCase
from .mark_read import MarkReadRequest, MarkReadUseCase
from .unread_count import UnreadCountRequest, UnreadCountResponse, UnreadCountUseCase
from .view import NotificationView, SenderView

__all__ = [
    "ListNotificationsRequest",
    "ListNotificationsResponse",
    "ListNotificationsUseCase",
    "MarkAllReadRequest",
    "MarkAllReadResponse",
    "MarkAllReadUseCase",
    "MarkReadRequest",
    "MarkReadUseCase",
    "NotificationView",
    "SenderView",
    "UnreadCountRequest",
    "UnreadCountResponse",
    "UnreadCountUseCase",
]
