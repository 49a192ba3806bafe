"""Get threads use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel, Field

from orgsocial.application.usecase.base import BaseUseCase
from orgsocial.application.usecase.common import PollResponse, PostResponse
from orgsocial.domain.model import ThreadNode
from orgsocial.domain.repository import DocumentRepository
from orgsocial.domain.service import FeedService, PollService, ThreadService


class ThreadNodeResponse(BaseModel):
    """Threaded post for API response.

    Recursive structure mirroring the domain forest. ``poll`` carries the
    tally from the direct replies when the post is a poll.
    """

    post: PostResponse
    depth: int
    latest_activity_time: datetime | None
    is_placeholder: bool
    poll: PollResponse | None = None
    children: list["ThreadNodeResponse"]

    @classmethod
    def from_domain(
        cls, node: ThreadNode, poll_service: PollService
    ) -> "ThreadNodeResponse":
        poll = None if node.is_placeholder else poll_service.tally_thread_node(node)
        return cls(
            post=PostResponse.from_domain(node.post),
            depth=node.depth,
            latest_activity_time=node.latest_activity_time,
            is_placeholder=node.is_placeholder,
            poll=PollResponse.from_domain(poll) if poll is not None else None,
            children=[cls.from_domain(child, poll_service) for child in node.children],
        )


class GetThreadsRequest(BaseModel):
    """Get threads request."""

    include_followed: bool = True
    # Per-source timeout in seconds; the configured default when unset
    timeout_seconds: float | None = Field(default=None, gt=0)


class GetThreadsResponse(BaseModel):
    """Get threads response."""

    threads: list[ThreadNodeResponse]
    thread_count: int
    total_posts: int


class GetThreadsUseCase(BaseUseCase):
    """Use case for the threaded timeline.

    Loads the user's document, optionally merges in every followed
    document, and threads the result: most recently active conversations
    first, replies oldest first.
    """

    def __init__(
        self,
        document_repository: DocumentRepository,
        feed_service: FeedService,
        thread_service: ThreadService,
        poll_service: PollService,
        default_timeout: float | None = None,
    ) -> None:
        """Initialize get threads use case.

        Args:
            document_repository: Source of the user's own document
            feed_service: Feed domain service
            thread_service: Threading domain service
            poll_service: Poll domain service
            default_timeout: Fetch timeout used when the request sets none
        """
        self.document_repository = document_repository
        self.feed_service = feed_service
        self.thread_service = thread_service
        self.poll_service = poll_service
        self.default_timeout = default_timeout

    async def execute(self, request: GetThreadsRequest) -> GetThreadsResponse:
        """Execute get threads flow.

        Steps:
        1. Load the user's profile and posts
        2. Build the feed, fetching followed documents when requested
        3. Thread the feed and tally polls

        Raises:
            NotFoundError: If the user's document does not exist
        """
        with logfire.span(
            "get_threads.execute", include_followed=request.include_followed
        ):
            profile, posts = await self.document_repository.load()

            if request.include_followed:
                timeout = request.timeout_seconds or self.default_timeout
                feed = await self.feed_service.build_combined_feed(
                    profile, posts, timeout=timeout
                )
            else:
                feed = self.feed_service.build_user_feed(profile, posts)

            forest = self.thread_service.build_forest(feed.posts)

            return GetThreadsResponse(
                threads=[
                    ThreadNodeResponse.from_domain(root, self.poll_service)
                    for root in forest.roots
                ],
                thread_count=forest.thread_count(),
                total_posts=forest.total_posts(),
            )
