"""Domain services."""

from .base import Service
from .compose_service import ComposeService, normalize_tags
from .document_parser import (
    parse_document,
    parse_post,
    parse_profile,
    serialize_document,
    serialize_post,
    serialize_profile,
)
from .feed_service import FeedFetcher, FeedService, sort_newest_first
from .notification_service import NotificationFeed, NotificationService
from .poll_service import (
    PollService,
    is_poll_post,
    parse_poll_from_content,
)
from .thread_service import PLACEHOLDER_CONTENT, ThreadService

__all__ = [
    "ComposeService",
    "FeedFetcher",
    "FeedService",
    "NotificationFeed",
    "NotificationService",
    "PLACEHOLDER_CONTENT",
    "PollService",
    "Service",
    "ThreadService",
    "is_poll_post",
    "normalize_tags",
    "parse_document",
    "parse_poll_from_content",
    "parse_post",
    "parse_profile",
    "serialize_document",
    "serialize_post",
    "serialize_profile",
    "sort_newest_first",
]
