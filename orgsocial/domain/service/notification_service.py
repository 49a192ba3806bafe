"""Notification domain service."""

from collections.abc import Iterable, Sequence
from datetime import datetime

import logfire

from orgsocial.domain.model import Mention, Notification, Post, Profile
from orgsocial.domain.value import NotificationType

from .base import Service


def _newest_first_key(notification: Notification) -> tuple[bool, datetime]:
    time = notification.time()
    return (time is not None, time or datetime.min)


def is_mention_of(post: Post, profile: Profile) -> bool:
    """Whether ``post`` mentions the owner of ``profile``.

    A mention token counts when its username is the user's nick (with or
    without a leading ``@``) or its URL is the user's document. Once a post
    has any mention token, a plain ``@username`` in its text counts too.
    """
    for token in post.tokens:
        if not isinstance(token, Mention):
            continue
        if token.username == profile.nick or f"@{token.username}" == profile.nick:
            return True
        if profile.source is not None and token.url == profile.source:
            return True
        if f"@{token.username}" in post.content:
            return True
    return False


def is_reply_to(post: Post, own_post_ids: set[str]) -> bool:
    target = post.reply_target_id()
    return target is not None and target in own_post_ids


class NotificationFeed:
    """Notifications for one user, newest first."""

    def __init__(self, notifications: list[Notification]) -> None:
        self.notifications = notifications

    def __len__(self) -> int:
        return len(self.notifications)

    def is_empty(self) -> bool:
        return not self.notifications

    def in_range(self, start: datetime, end: datetime) -> list[Notification]:
        return [
            notification
            for notification in self.notifications
            if (time := notification.time()) is not None and start <= time <= end
        ]

    def recent(self, limit: int) -> list[Notification]:
        return self.notifications[:limit]

    def by_type(self, notification_type: NotificationType) -> list[Notification]:
        return [
            notification
            for notification in self.notifications
            if notification.notification_type is notification_type
        ]


class NotificationService(Service):
    """Domain service for finding posts addressed to the user."""

    def build_notifications(
        self,
        profile: Profile,
        own_posts: Sequence[Post],
        all_posts: Iterable[Post],
    ) -> NotificationFeed:
        """Collect mentions of and replies to the user.

        The user's own posts are skipped, and a post id is reported once.

        Args:
            profile: The user's profile
            own_posts: The user's posts, used to recognize replies
            all_posts: Candidate posts, typically the combined feed

        Returns:
            Notifications sorted newest first
        """
        with logfire.span(
            "notification_service.build_notifications", nick=profile.nick
        ):
            own_post_ids = {post.id for post in own_posts}
            seen: set[str] = set()
            notifications: list[Notification] = []

            for post in all_posts:
                if post.author == profile.nick or post.id in seen:
                    continue

                mention = is_mention_of(post, profile)
                reply = is_reply_to(post, own_post_ids)
                if mention and reply:
                    notification_type = NotificationType.MENTION_AND_REPLY
                elif mention:
                    notification_type = NotificationType.MENTION
                elif reply:
                    notification_type = NotificationType.REPLY
                else:
                    continue

                notifications.append(
                    Notification(post=post, notification_type=notification_type)
                )
                seen.add(post.id)

            notifications.sort(key=_newest_first_key, reverse=True)
            logfire.info("Notifications built", count=len(notifications))
            return NotificationFeed(notifications)
