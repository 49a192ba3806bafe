"""Notification entity."""

from datetime import datetime

from orgsocial.domain.model.common import DomainModel
from orgsocial.domain.model.post import Post
from orgsocial.domain.value import NotificationType


class Notification(DomainModel):
    """A post that mentions the user, replies to them, or both."""

    post: Post
    notification_type: NotificationType

    def time(self) -> datetime | None:
        return self.post.time()
