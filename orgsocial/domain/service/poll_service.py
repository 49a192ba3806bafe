"""Poll domain service."""

from collections.abc import Iterable
from datetime import datetime

import logfire

from orgsocial.domain.markup import split_lines
from orgsocial.domain.model import Poll, Post, ThreadNode

from .base import Service

OPTION_MARKER = "- [ ]"


def has_poll_options(content: str) -> bool:
    """Whether the first run of option lines has at least two options.

    Blank lines inside the run do not end it, matching
    ``parse_poll_from_content``.
    """
    count = 0
    for line in split_lines(content):
        trimmed = line.strip()
        if trimmed.startswith(OPTION_MARKER):
            count += 1
        elif count > 0 and trimmed:
            break
    return count >= 2


def is_poll_post(post: Post) -> bool:
    return bool(post.poll_end) and has_poll_options(post.content)


def parse_poll_from_content(
    content: str, poll_end: str | None, now: datetime | None = None
) -> Poll | None:
    """Read the option list of a poll body.

    Options come from the first run of ``- [ ]`` lines; blank lines may sit
    between options, any other line ends the list.

    Returns:
        The poll, or None when fewer than two options are found
    """
    options: list[str] = []
    start_line: int | None = None
    end_line = 0
    for index, line in enumerate(split_lines(content)):
        trimmed = line.strip()
        if trimmed.startswith(OPTION_MARKER):
            if start_line is None:
                start_line = index
            text = trimmed[len(OPTION_MARKER) :].strip()
            if text:
                options.append(text)
            end_line = index
        elif start_line is not None and trimmed:
            break

    if len(options) < 2:
        return None
    return Poll.create(options, poll_end, start_line or 0, end_line, now=now)


class PollService(Service):
    """Domain service for reading polls and counting their votes."""

    def parse_poll(self, post: Post, now: datetime | None = None) -> Poll | None:
        if not is_poll_post(post):
            return None
        return parse_poll_from_content(post.content, post.poll_end, now=now)

    def count_votes(
        self, poll_post: Post, replies: Iterable[Post], now: datetime | None = None
    ) -> Poll | None:
        """Tally votes cast by ``replies`` on ``poll_post``.

        Replies without a ``POLL_OPTION`` or naming an unknown option are
        not counted.

        Returns:
            The tallied poll, or None if ``poll_post`` is not a poll
        """
        with logfire.span("poll_service.count_votes", post_id=poll_post.full_id()):
            poll = self.parse_poll(poll_post, now=now)
            if poll is None:
                return None
            for reply in replies:
                if reply.poll_option:
                    poll.add_vote_by_text(reply.poll_option)
            logfire.info(
                "Poll votes counted",
                post_id=poll_post.full_id(),
                total_votes=poll.total_votes,
            )
            return poll

    def tally_thread_node(
        self, node: ThreadNode, now: datetime | None = None
    ) -> Poll | None:
        """Count the votes cast by the direct replies of a threaded poll."""
        return self.count_votes(
            node.post, (child.post for child in node.children), now=now
        )
