"""HTTP retrieval of followed org-social documents."""

import asyncio
from collections.abc import Sequence

import httpx
import logfire

from orgsocial.adapter.error import FetchError
from orgsocial.domain.model import FetchedFeed
from orgsocial.domain.service import parse_document
from orgsocial.domain.service.feed_service import FeedFetcher
from orgsocial.domain.value import ReparsePolicy


class HttpxFeedFetcher(FeedFetcher):
    """Fetches documents concurrently over one ``httpx.AsyncClient``.

    Each source gets its own request and its own timeout. Failed sources
    are logged and left out; the others are returned in submission order.
    """

    def __init__(
        self,
        user_agent: str,
        default_timeout: float | None = None,
        reparse_policy: ReparsePolicy = ReparsePolicy.AUTO,
    ) -> None:
        """Initialize fetcher.

        Args:
            user_agent: User-Agent header sent with every request
            default_timeout: Timeout used when a call does not pass one
            reparse_policy: Policy given to parsed posts
        """
        self.user_agent = user_agent
        self.default_timeout = default_timeout
        self.reparse_policy = reparse_policy

    async def fetch_sources(
        self, sources: Sequence[tuple[str, str]], timeout: float | None = None
    ) -> list[FetchedFeed]:
        effective_timeout = timeout if timeout is not None else self.default_timeout
        with logfire.span(
            "feed_fetcher.fetch_sources",
            source_count=len(sources),
            timeout=effective_timeout,
        ):
            async with httpx.AsyncClient(
                headers={"User-Agent": self.user_agent}, follow_redirects=True
            ) as client:
                results = await asyncio.gather(
                    *(
                        self._fetch_source(client, identifier, url, effective_timeout)
                        for identifier, url in sources
                    )
                )

            feeds = [feed for feed in results if feed is not None]
            logfire.info(
                "Sources fetched",
                requested=len(sources),
                succeeded=len(feeds),
            )
            return feeds

    async def _fetch_source(
        self,
        client: httpx.AsyncClient,
        identifier: str,
        url: str,
        timeout: float | None,
    ) -> FetchedFeed | None:
        try:
            text = await self.fetch_document(client, url, timeout)
        except FetchError as e:
            logfire.warn(
                "Dropping unreachable source",
                identifier=identifier,
                url=url,
                reason=e.reason,
            )
            return None

        profile, posts = parse_document(
            text, source=url, reparse_policy=self.reparse_policy
        )
        return FetchedFeed(profile=profile, posts=posts, url=url)

    async def fetch_document(
        self, client: httpx.AsyncClient, url: str, timeout: float | None
    ) -> str:
        """GET one document.

        Raises:
            FetchError: On transport errors, timeouts and non-200 responses
        """
        try:
            response = await client.get(url, timeout=timeout)
        except httpx.TimeoutException as e:
            raise FetchError(url, f"timed out ({e})") from e
        except httpx.HTTPError as e:
            raise FetchError(url, str(e) or type(e).__name__) from e

        if response.status_code != 200:
            raise FetchError(url, f"HTTP {response.status_code}")
        return response.text


class MockFeedFetcher(FeedFetcher):
    """Mock fetcher for testing.

    Serves canned documents keyed by URL without making network calls;
    unknown URLs behave like unreachable sources.
    """

    def __init__(self, documents: dict[str, str] | None = None):
        self.documents = documents or {}
        self.requested: list[tuple[str, str]] = []

    async def fetch_sources(
        self, sources: Sequence[tuple[str, str]], timeout: float | None = None
    ) -> list[FetchedFeed]:
        feeds = []
        for identifier, url in sources:
            self.requested.append((identifier, url))
            text = self.documents.get(url)
            if text is None:
                logfire.warn("Dropping unreachable source", identifier=identifier, url=url)
                continue
            profile, posts = parse_document(text, source=url)
            feeds.append(FetchedFeed(profile=profile, posts=posts, url=url))
        return feeds
