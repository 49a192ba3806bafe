"""Response models shared by several use cases."""

from datetime import datetime

from pydantic import BaseModel

from orgsocial.domain.model import OrgBlock, Poll, Post, Profile, Token
from orgsocial.domain.value import PollStatus


class FollowResponse(BaseModel):
    nick: str
    url: str


class ProfileResponse(BaseModel):
    """Profile header of a document."""

    title: str
    nick: str
    description: str
    avatar: str | None
    links: list[str]
    follows: list[FollowResponse]
    contacts: list[str]
    source: str | None

    @classmethod
    def from_domain(cls, profile: Profile) -> "ProfileResponse":
        return cls(
            title=profile.title,
            nick=profile.nick,
            description=profile.description,
            avatar=profile.avatar,
            links=list(profile.links),
            follows=[
                FollowResponse(nick=follow.nick, url=follow.url)
                for follow in profile.follows
            ],
            contacts=list(profile.contacts),
            source=profile.source,
        )


class BlockResponse(BaseModel):
    block_type: str
    attributes: str | None
    content: str
    start_line: int
    end_line: int
    summary: str

    @classmethod
    def from_domain(cls, block: OrgBlock) -> "BlockResponse":
        return cls(
            block_type=block.block_type,
            attributes=block.attributes,
            content=block.content,
            start_line=block.start_line,
            end_line=block.end_line,
            summary=block.summary(),
        )


class PostResponse(BaseModel):
    """A post with its derived markup.

    ``time`` is the creation time read from the id, None when the id is
    not a timestamp.
    """

    id: str
    full_id: str
    source: str | None
    author: str | None
    time: datetime | None
    lang: str | None
    tags: list[str] | None
    client: str | None
    reply_to: str | None
    poll_end: str | None
    poll_option: str | None
    mood: str | None
    content: str
    tokens: list[Token]
    blocks: list[BlockResponse]

    @classmethod
    def from_domain(cls, post: Post) -> "PostResponse":
        return cls(
            id=post.id,
            full_id=post.full_id(),
            source=post.source,
            author=post.author,
            time=post.time(),
            lang=post.lang,
            tags=post.tags,
            client=post.client,
            reply_to=post.reply_to,
            poll_end=post.poll_end,
            poll_option=post.poll_option,
            mood=post.mood,
            content=post.content,
            tokens=list(post.tokens),
            blocks=[BlockResponse.from_domain(block) for block in post.blocks],
        )


class PollOptionResponse(BaseModel):
    text: str
    votes: int
    percentage: float


class PollResponse(BaseModel):
    """Poll options with their tally."""

    status: PollStatus
    poll_end: str | None
    total_votes: int
    options: list[PollOptionResponse]
    summary: str

    @classmethod
    def from_domain(cls, poll: Poll) -> "PollResponse":
        return cls(
            status=poll.status,
            poll_end=poll.poll_end,
            total_votes=poll.total_votes,
            options=[
                PollOptionResponse(text=text, votes=votes, percentage=percentage)
                for text, votes, percentage in poll.results()
            ],
            summary=poll.summary(),
        )
