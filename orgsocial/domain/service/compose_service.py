"""Post composition domain service."""

from collections.abc import Callable, Iterable

import logfire

from orgsocial.domain.error import ValidationError
from orgsocial.domain.model import Post
from orgsocial.util.timestamp import current_timestamp, parse_timestamp

from .base import Service
from .poll_service import OPTION_MARKER


def normalize_tags(tags: Iterable[str] | None) -> list[str] | None:
    """Strip leading ``#`` from tags and split multi-word entries."""
    if tags is None:
        return None
    normalized = [
        word.lstrip("#")
        for tag in tags
        for word in tag.split()
        if word.lstrip("#")
    ]
    return normalized or None


def _optional(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None


class ComposeService(Service):
    """Domain service building new posts, replies and poll votes.

    Composed posts get the current time as their id and the configured
    client label.
    """

    def __init__(
        self, client_label: str, clock: Callable[[], str] = current_timestamp
    ) -> None:
        """Initialize compose service.

        Args:
            client_label: Value written to the CLIENT property
            clock: Returns the timestamp used as a new post's id
        """
        self.client_label = client_label
        self.clock = clock

    def compose_post(
        self,
        content: str,
        tags: Iterable[str] | None = None,
        mood: str | None = None,
        lang: str | None = None,
        poll_end: str | None = None,
        poll_options: list[str] | None = None,
    ) -> Post:
        """Build a new top-level post.

        Args:
            content: Body text
            tags: Tags, with or without a leading ``#``
            mood: Optional mood
            lang: Optional language code
            poll_end: Poll deadline; required together with ``poll_options``
            poll_options: Turns the post into a poll with these options

        Returns:
            The new post

        Raises:
            ValidationError: If the content is blank or the poll is malformed
        """
        with logfire.span("compose_service.compose_post"):
            if not content.strip():
                raise ValidationError("Post content must not be empty")

            if poll_options is not None:
                content = self._append_poll_options(content, poll_end, poll_options)
            elif poll_end is not None:
                raise ValidationError("A poll deadline needs poll options")

            post = Post(
                id=self.clock(),
                content=content,
                tags=normalize_tags(tags),
                client=self.client_label,
                mood=_optional(mood),
                lang=_optional(lang),
                poll_end=_optional(poll_end),
            )
            logfire.info("Post composed", post_id=post.id, is_poll=bool(poll_options))
            return post

    @staticmethod
    def _append_poll_options(
        content: str, poll_end: str | None, poll_options: list[str]
    ) -> str:
        options = [option.strip() for option in poll_options if option.strip()]
        if len(options) < 2:
            raise ValidationError("A poll needs at least two options")
        if parse_timestamp(_optional(poll_end)) is None:
            raise ValidationError(f"Invalid poll deadline: {poll_end}")
        option_lines = "\n".join(f"{OPTION_MARKER} {option}" for option in options)
        return f"{content.rstrip()}\n\n{option_lines}"

    def compose_reply(
        self,
        reply_to: str,
        content: str,
        tags: Iterable[str] | None = None,
        mood: str | None = None,
    ) -> Post:
        """Build a reply to the post with full id ``reply_to``.

        Raises:
            ValidationError: If the content or the reply target is blank
        """
        with logfire.span("compose_service.compose_reply", reply_to=reply_to):
            if not reply_to.strip():
                raise ValidationError("Reply target must not be empty")
            if not content.strip():
                raise ValidationError("Reply content must not be empty")

            post = Post(
                id=self.clock(),
                content=content,
                tags=normalize_tags(tags),
                client=self.client_label,
                reply_to=reply_to.strip(),
                mood=_optional(mood),
            )
            logfire.info("Reply composed", post_id=post.id, reply_to=post.reply_to)
            return post

    def compose_vote(self, poll_id: str, option: str, content: str = "") -> Post:
        """Build a vote reply for ``option`` of the poll with full id ``poll_id``.

        Raises:
            ValidationError: If the poll id or the option is blank
        """
        with logfire.span("compose_service.compose_vote", poll_id=poll_id):
            if not poll_id.strip():
                raise ValidationError("Poll id must not be empty")
            if not option.strip():
                raise ValidationError("Vote option must not be empty")

            post = Post(
                id=self.clock(),
                content=content,
                client=self.client_label,
                reply_to=poll_id.strip(),
                poll_option=option.strip(),
            )
            logfire.info("Vote composed", post_id=post.id, option=post.poll_option)
            return post
