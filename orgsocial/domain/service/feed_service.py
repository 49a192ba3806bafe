"""Feed assembly domain service."""

from collections.abc import Sequence
from datetime import datetime

import logfire

from orgsocial.domain.model import UNKNOWN_AUTHOR, Feed, FetchedFeed, Post, Profile

from .base import Service


class FeedFetcher:
    """Retrieves remote org-social documents."""

    async def fetch_sources(
        self, sources: Sequence[tuple[str, str]], timeout: float | None = None
    ) -> list[FetchedFeed]:
        """Fetch and parse several documents concurrently.

        A source that fails or times out is left out of the result; the
        batch itself never fails.

        Args:
            sources: ``(identifier, url)`` pairs
            timeout: Per-request timeout in seconds, None for no limit

        Returns:
            Parsed documents in the order of ``sources``
        """
        raise NotImplementedError


def _newest_first_key(post: Post) -> tuple[bool, datetime]:
    time = post.time()
    return (time is not None, time or datetime.min)


def sort_newest_first(posts: list[Post]) -> None:
    """Sort in place, newest first; untimed posts keep their order at the end."""
    posts.sort(key=_newest_first_key, reverse=True)


class FeedService(Service):
    """Domain service combining the user's posts with followed documents."""

    def __init__(self, feed_fetcher: FeedFetcher) -> None:
        """Initialize feed service.

        Args:
            feed_fetcher: Retrieves followed documents
        """
        self.feed_fetcher = feed_fetcher

    async def fetch_followed(
        self, profile: Profile, timeout: float | None = None
    ) -> list[FetchedFeed]:
        """Fetch every document on the profile's follow list."""
        with logfire.span(
            "feed_service.fetch_followed", follow_count=len(profile.follows)
        ):
            if not profile.follows:
                return []
            feeds = await self.feed_fetcher.fetch_sources(
                profile.follow_sources(), timeout=timeout
            )
            logfire.info(
                "Followed feeds fetched",
                requested=len(profile.follows),
                received=len(feeds),
            )
            return feeds

    def build_user_feed(self, profile: Profile, posts: Sequence[Post]) -> Feed:
        """The user's own posts, labelled with their nick, newest first."""
        own = list(posts)
        for post in own:
            post.author = profile.nick
        sort_newest_first(own)
        return Feed(posts=own)

    def merge_feeds(
        self, profile: Profile, posts: Sequence[Post], followed: Sequence[FetchedFeed]
    ) -> Feed:
        """Combine own posts with already fetched followed documents.

        Followed posts are labelled with their author's nick, falling back to
        ``unknown`` for profiles without one.
        """
        combined = list(posts)
        for post in combined:
            post.author = profile.nick
        for feed in followed:
            author = feed.profile.nick or UNKNOWN_AUTHOR
            for post in feed.posts:
                post.author = author
                combined.append(post)
        sort_newest_first(combined)
        return Feed(posts=combined)

    async def build_combined_feed(
        self, profile: Profile, posts: Sequence[Post], timeout: float | None = None
    ) -> Feed:
        """Fetch followed documents and merge them with the user's posts.

        Args:
            profile: The user's profile, whose follow list is fetched
            posts: The user's own posts
            timeout: Per-request timeout in seconds

        Returns:
            Combined feed, newest first
        """
        with logfire.span("feed_service.build_combined_feed", nick=profile.nick):
            followed = await self.fetch_followed(profile, timeout=timeout)
            feed = self.merge_feeds(profile, posts, followed)
            logfire.info(
                "Combined feed built",
                post_count=len(feed),
                source_count=len(feed.sources()),
            )
            return feed
