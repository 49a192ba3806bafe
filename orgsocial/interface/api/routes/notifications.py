"""Notification routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from orgsocial.application.usecase.notification import (
    GetNotificationsRequest,
    GetNotificationsResponse,
    GetNotificationsUseCase,
)
from orgsocial.domain.error import DomainError
from orgsocial.domain.value import NotificationType
from orgsocial.interface.error import to_http_exception

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


@router.get("", response_model=GetNotificationsResponse)
async def get_notifications(
    get_notifications_use_case: FromDishka[GetNotificationsUseCase],
    notification_type: NotificationType | None = Query(default=None, alias="type"),
    limit: int | None = Query(default=None, ge=1),
    timeout_seconds: float | None = Query(default=None, gt=0),
) -> GetNotificationsResponse:
    """List mentions of and replies to the user, newest first."""
    try:
        request = GetNotificationsRequest(
            notification_type=notification_type,
            limit=limit,
            timeout_seconds=timeout_seconds,
        )
        return await get_notifications_use_case.execute(request)
    except (DomainError, OSError) as e:
        raise to_http_exception(e, "Notification listing") from e
