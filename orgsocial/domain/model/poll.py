"""Poll entity.

A poll is a post with a ``POLL_END`` deadline whose body lists at least two
``- [ ] option`` lines. Votes are replies carrying ``POLL_OPTION``.
"""

from datetime import datetime, timezone

from pydantic import Field

from orgsocial.domain.model.common import EntityModel
from orgsocial.domain.value import PollStatus
from orgsocial.util.timestamp import parse_timestamp


class PollOption(EntityModel):
    text: str
    votes: int = Field(default=0, ge=0)


class Poll(EntityModel):
    """Poll options and their running tally.

    ``start_line`` and ``end_line`` locate the option list in the post body.
    """

    options: list[PollOption]
    poll_end: str | None = None
    status: PollStatus = PollStatus.INVALID
    total_votes: int = Field(default=0, ge=0)
    start_line: int = 0
    end_line: int = 0

    @classmethod
    def create(
        cls,
        options: list[str],
        poll_end: str | None,
        start_line: int = 0,
        end_line: int = 0,
        now: datetime | None = None,
    ) -> "Poll":
        poll = cls(
            options=[PollOption(text=text) for text in options],
            poll_end=poll_end,
            start_line=start_line,
            end_line=end_line,
        )
        poll.update_status(now)
        return poll

    def update_status(self, now: datetime | None = None) -> None:
        """Recompute the status against ``now`` (defaults to the current time)."""
        end = parse_timestamp(self.poll_end)
        if end is None:
            self.status = PollStatus.INVALID
            return
        current = now or datetime.now(timezone.utc)
        self.status = PollStatus.ENDED if current > end else PollStatus.ACTIVE

    def is_active(self) -> bool:
        return self.status is PollStatus.ACTIVE

    def add_vote(self, option_index: int) -> bool:
        if not 0 <= option_index < len(self.options):
            return False
        self.options[option_index].votes += 1
        self.total_votes += 1
        return True

    def add_vote_by_text(self, option_text: str) -> bool:
        """Count a vote for the option matching ``option_text``.

        Matching ignores case and surrounding whitespace.
        """
        wanted = option_text.strip().lower()
        for index, option in enumerate(self.options):
            if option.text.strip().lower() == wanted:
                return self.add_vote(index)
        return False

    def add_vote_from_reply(self, reply) -> bool:
        """Count the vote carried by a reply, if it names an option exactly."""
        if not reply.poll_option:
            return False
        if not any(option.text == reply.poll_option for option in self.options):
            return False
        return self.add_vote_by_text(reply.poll_option)

    def results(self) -> list[tuple[str, int, float]]:
        """``(option, votes, percentage)`` per option, in option order."""
        return [
            (
                option.text,
                option.votes,
                option.votes / self.total_votes * 100.0 if self.total_votes else 0.0,
            )
            for option in self.options
        ]

    def summary(self) -> str:
        return (
            f"Poll ({len(self.options)} options, {self.total_votes} votes, "
            f"{self.status.value.capitalize()})"
        )

    def clear_votes(self) -> None:
        for option in self.options:
            option.votes = 0
        self.total_votes = 0
