"""Feed entities."""

from datetime import datetime

from pydantic import Field

from orgsocial.domain.model.common import DomainModel, EntityModel
from orgsocial.domain.model.post import Post
from orgsocial.domain.model.profile import Profile


class FetchedFeed(DomainModel):
    """A remote document retrieved over the network and parsed."""

    profile: Profile
    posts: list[Post]
    url: str


class Feed(EntityModel):
    """Posts from several documents, newest first."""

    posts: list[Post] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.posts)

    def is_empty(self) -> bool:
        return not self.posts

    def posts_in_range(self, start: datetime, end: datetime) -> list[Post]:
        """Posts whose time falls within ``[start, end]``."""
        return [
            post
            for post in self.posts
            if (time := post.time()) is not None and start <= time <= end
        ]

    def recent(self, limit: int) -> list[Post]:
        return self.posts[:limit]

    def posts_from_source(self, source: str) -> list[Post]:
        return [post for post in self.posts if post.source == source]

    def sources(self) -> list[str]:
        """Distinct sources present in the feed, sorted."""
        return sorted({post.source for post in self.posts if post.source})
