"""Domain value objects for org-social."""

from orgsocial.domain.value.identifiers import (
    ID_SEPARATOR,
    FullPostId,
    PostId,
    SourceUrl,
    full_post_id,
    leading_source,
    trailing_id,
)
from orgsocial.domain.value.types import (
    Follow,
    NotificationType,
    PollStatus,
    ReparsePolicy,
)

__all__ = [
    # Identifiers
    "ID_SEPARATOR",
    "FullPostId",
    "PostId",
    "SourceUrl",
    "full_post_id",
    "leading_source",
    "trailing_id",
    # Types
    "Follow",
    "NotificationType",
    "PollStatus",
    "ReparsePolicy",
]
