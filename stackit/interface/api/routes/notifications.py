"""Notification inbox routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query

from stackit.application.usecase.notification import (
    GetUnreadCountRequest,
    GetUnreadCountResponse,
    GetUnreadCountUseCase,
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkAllNotificationsReadRequest,
    MarkAllNotificationsReadResponse,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadRequest,
    MarkNotificationReadUseCase,
    NotificationView,
)
from stackit.domain.service import JWTService
from stackit.interface.api.auth import require_actor

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


@router.get("", response_model=ListNotificationsResponse)
async def list_notifications(
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    limit: int = Query(default=20, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    unread_only: bool = Query(default=False),
    auth_token: str | None = Cookie(default=None),
) -> ListNotificationsResponse:
    """List the current user's notifications, newest first."""
    actor = require_actor(jwt_service, auth_token, "read notifications")
    return await list_notifications_use_case.execute(
        ListNotificationsRequest(
            user_id=str(actor.user_id),
            limit=limit,
            offset=offset,
            unread_only=unread_only,
        )
    )


@router.get("/unread-count", response_model=GetUnreadCountResponse)
async def get_unread_count(
    get_unread_count_use_case: FromDishka[GetUnreadCountUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetUnreadCountResponse:
    """Number of unread notifications for the current user."""
    actor = require_actor(jwt_service, auth_token, "read notifications")
    return await get_unread_count_use_case.execute(
        GetUnreadCountRequest(user_id=str(actor.user_id))
    )


@router.post("/read-all", response_model=MarkAllNotificationsReadResponse)
async def mark_all_read(
    mark_all_read_use_case: FromDishka[MarkAllNotificationsReadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> MarkAllNotificationsReadResponse:
    """Mark every notification of the current user as read."""
    actor = require_actor(jwt_service, auth_token, "update notifications")
    return await mark_all_read_use_case.execute(
        MarkAllNotificationsReadRequest(user_id=str(actor.user_id))
    )


@router.post("/{notification_id}/read", response_model=NotificationView)
async def mark_read(
    notification_id: UUID,
    mark_read_use_case: FromDishka[MarkNotificationReadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> NotificationView:
    """Mark one notification as read. Only its recipient may do so."""
    actor = require_actor(jwt_service, auth_token, "update notifications")
    return await mark_read_use_case.execute(
        MarkNotificationReadRequest(
            notification_id=str(notification_id), user_id=str(actor.user_id)
        )
    )
