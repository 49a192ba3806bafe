"""Get notifications use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel, Field

from orgsocial.application.usecase.base import BaseUseCase
from orgsocial.application.usecase.common import PostResponse
from orgsocial.domain.model import Notification
from orgsocial.domain.repository import DocumentRepository
from orgsocial.domain.service import FeedService, NotificationService
from orgsocial.domain.value import NotificationType


class NotificationResponse(BaseModel):
    notification_type: NotificationType
    time: datetime | None
    post: PostResponse

    @classmethod
    def from_domain(cls, notification: Notification) -> "NotificationResponse":
        return cls(
            notification_type=notification.notification_type,
            time=notification.time(),
            post=PostResponse.from_domain(notification.post),
        )


class GetNotificationsRequest(BaseModel):
    """Get notifications request."""

    notification_type: NotificationType | None = None
    limit: int | None = Field(default=None, ge=1)
    timeout_seconds: float | None = Field(default=None, gt=0)


class GetNotificationsResponse(BaseModel):
    """Get notifications response."""

    notifications: list[NotificationResponse]
    total: int


class GetNotificationsUseCase(BaseUseCase):
    """Use case for listing mentions of and replies to the user."""

    def __init__(
        self,
        document_repository: DocumentRepository,
        feed_service: FeedService,
        notification_service: NotificationService,
        default_timeout: float | None = None,
    ) -> None:
        self.document_repository = document_repository
        self.feed_service = feed_service
        self.notification_service = notification_service
        self.default_timeout = default_timeout

    async def execute(
        self, request: GetNotificationsRequest
    ) -> GetNotificationsResponse:
        """Execute get notifications flow.

        ``total`` counts every notification of the requested type before
        ``limit`` is applied.
        """
        with logfire.span(
            "get_notifications.execute",
            notification_type=request.notification_type,
            limit=request.limit,
        ):
            profile, posts = await self.document_repository.load()
            feed = await self.feed_service.build_combined_feed(
                profile, posts, timeout=request.timeout_seconds or self.default_timeout
            )
            notification_feed = self.notification_service.build_notifications(
                profile, posts, feed.posts
            )

            if request.notification_type is not None:
                notifications = notification_feed.by_type(request.notification_type)
            else:
                notifications = notification_feed.notifications
            total = len(notifications)
            if request.limit is not None:
                notifications = notifications[: request.limit]

            return GetNotificationsResponse(
                notifications=[
                    NotificationResponse.from_domain(notification)
                    for notification in notifications
                ],
                total=total,
            )
