"""Domain value objects for org-social.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import field_validator

from orgsocial.domain.value.common import ValueObject


class ReparsePolicy(str, Enum):
    """How a post's derived tokens and blocks follow content edits.

    AUTO re-derives on every content assignment. MANUAL clears the derived
    caches and waits for an explicit ``reparse()``.
    """

    AUTO = "auto"
    MANUAL = "manual"


class PollStatus(str, Enum):
    """Lifecycle state of a poll."""

    ACTIVE = "active"
    ENDED = "ended"
    INVALID = "invalid"


class NotificationType(str, Enum):
    """Why a post shows up in the user's notifications."""

    MENTION = "mention"
    REPLY = "reply"
    MENTION_AND_REPLY = "mention_and_reply"


class Follow(ValueObject):
    """An entry of a profile's follow list."""

    nick: str
    url: str

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate the followed document URL is not blank."""
        if not v.strip():
            raise ValueError("Follow URL must not be empty")
        return v
