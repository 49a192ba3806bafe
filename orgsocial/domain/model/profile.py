"""Profile entity: the header section of an org-social document."""

from pydantic import Field

from orgsocial.domain.model.common import EntityModel
from orgsocial.domain.value import Follow

UNKNOWN_AUTHOR = "unknown"


class Profile(EntityModel):
    """A user profile.

    ``follows`` keeps document order; lookups return the first match.
    ``source`` is the URL or path the document was loaded from and never
    appears in the document text.
    """

    title: str = ""
    nick: str = ""
    description: str = ""
    avatar: str | None = None
    links: list[str] = Field(default_factory=list)
    follows: list[Follow] = Field(default_factory=list)
    contacts: list[str] = Field(default_factory=list)
    source: str | None = None

    def display_name(self) -> str:
        """Nick, or the ``unknown`` marker when the nick is empty."""
        return self.nick or UNKNOWN_AUTHOR

    def find_follow_by_url(self, url: str) -> Follow | None:
        """First follow entry whose URL matches, ignoring a trailing slash."""
        wanted = url.rstrip("/")
        return next(
            (follow for follow in self.follows if follow.url.rstrip("/") == wanted),
            None,
        )

    def follow_sources(self) -> list[tuple[str, str]]:
        """Follow list as ``(nick, url)`` pairs, ready for fetching."""
        return [(follow.nick, follow.url) for follow in self.follows]
