"""Vote on poll use case."""

from collections.abc import Callable
from datetime import datetime

import logfire
from pydantic import BaseModel

from orgsocial.application.usecase.base import BaseUseCase
from orgsocial.application.usecase.common import PollResponse, PostResponse
from orgsocial.domain.error import NotAPollError, NotFoundError, ValidationError
from orgsocial.domain.model import Post
from orgsocial.domain.repository import DocumentRepository
from orgsocial.domain.service import ComposeService, FeedService, PollService
from orgsocial.domain.value import PollStatus


class VoteOnPollRequest(BaseModel):
    """Vote on poll request."""

    poll_id: str  # Full id (source#timestamp) of the poll post
    option: str
    content: str = ""


class VoteOnPollResponse(BaseModel):
    """Vote on poll response.

    ``poll`` is the poll as it was before this vote was counted.
    """

    post: PostResponse
    poll: PollResponse


class VoteOnPollUseCase(BaseUseCase):
    """Use case for casting a vote as a reply to a poll."""

    def __init__(
        self,
        compose_service: ComposeService,
        feed_service: FeedService,
        poll_service: PollService,
        document_repository: DocumentRepository,
        source: str | None = None,
        default_timeout: float | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize vote on poll use case.

        Args:
            compose_service: Compose domain service
            feed_service: Feed domain service, used to locate the poll
            poll_service: Poll domain service
            document_repository: The user's document
            source: Public URL of the document, attached to the vote
            default_timeout: Fetch timeout for followed documents
            clock: Returns the current time for poll status, None for now
        """
        self.compose_service = compose_service
        self.feed_service = feed_service
        self.poll_service = poll_service
        self.document_repository = document_repository
        self.source = source
        self.default_timeout = default_timeout
        self.clock = clock

    async def execute(self, request: VoteOnPollRequest) -> VoteOnPollResponse:
        """Execute vote flow.

        Steps:
        1. Locate the poll among the user's and followed posts
        2. Check it is an open poll offering the chosen option
        3. Compose the vote reply and append it to the document

        Raises:
            NotFoundError: If no known post has ``poll_id``
            NotAPollError: If the post is not a poll
            ValidationError: If the poll has ended or lacks the option
        """
        with logfire.span("vote_on_poll.execute", poll_id=request.poll_id):
            profile, posts = await self.document_repository.load()
            feed = await self.feed_service.build_combined_feed(
                profile, posts, timeout=self.default_timeout
            )

            poll_post = next(
                (post for post in feed.posts if post.full_id() == request.poll_id),
                None,
            )
            if poll_post is None:
                raise NotFoundError("Poll", request.poll_id)

            now: datetime | None = self.clock() if self.clock else None
            poll = self.poll_service.count_votes(
                poll_post,
                (post for post in feed.posts if self._votes_on(post, request.poll_id)),
                now=now,
            )
            if poll is None:
                raise NotAPollError(request.poll_id)
            if poll.status is PollStatus.ENDED:
                raise ValidationError(f"Poll {request.poll_id} has ended")

            wanted = request.option.strip().lower()
            option = next(
                (o.text for o in poll.options if o.text.strip().lower() == wanted),
                None,
            )
            if option is None:
                raise ValidationError(f"Poll has no option: {request.option}")

            vote = self.compose_service.compose_vote(
                poll_id=request.poll_id, option=option, content=request.content
            )
            await self.document_repository.append_post(vote)
            vote.source = self.source

            logfire.info("Vote cast", poll_id=request.poll_id, option=option)
            return VoteOnPollResponse(
                post=PostResponse.from_domain(vote),
                poll=PollResponse.from_domain(poll),
            )

    @staticmethod
    def _votes_on(post: Post, poll_id: str) -> bool:
        return post.is_poll_vote() and post.reply_to == poll_id
