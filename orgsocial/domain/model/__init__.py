"""Domain model entities for org-social."""

from orgsocial.domain.model.token import (
    Bold,
    BoldItalic,
    InlineCode,
    Italic,
    Link,
    Mention,
    PlainText,
    Token,
    surface_text,
)
from orgsocial.domain.model.block import ActivatableElement, OrgBlock
from orgsocial.domain.model.profile import UNKNOWN_AUTHOR, Profile
from orgsocial.domain.model.post import Post
from orgsocial.domain.model.thread import ThreadForest, ThreadNode
from orgsocial.domain.model.poll import Poll, PollOption
from orgsocial.domain.model.notification import Notification
from orgsocial.domain.model.feed import Feed, FetchedFeed

__all__ = [
    # Tokens
    "Token",
    "PlainText",
    "Bold",
    "Italic",
    "BoldItalic",
    "Link",
    "Mention",
    "InlineCode",
    "surface_text",
    # Blocks
    "ActivatableElement",
    "OrgBlock",
    # Entities
    "UNKNOWN_AUTHOR",
    "Profile",
    "Post",
    "ThreadForest",
    "ThreadNode",
    "Poll",
    "PollOption",
    "Notification",
    "Feed",
    "FetchedFeed",
]
