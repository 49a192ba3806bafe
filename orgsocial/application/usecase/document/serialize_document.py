"""Serialize document use case."""

import logfire
from pydantic import BaseModel, Field

from orgsocial.application.usecase.base import BaseUseCase
from orgsocial.domain.model import Post, Profile
from orgsocial.domain.service import serialize_document
from orgsocial.domain.value import Follow


class FollowInput(BaseModel):
    nick: str
    url: str


class ProfileInput(BaseModel):
    """Profile header fields to render."""

    title: str = ""
    nick: str = ""
    description: str = ""
    avatar: str | None = None
    links: list[str] = Field(default_factory=list)
    follows: list[FollowInput] = Field(default_factory=list)
    contacts: list[str] = Field(default_factory=list)

    def to_domain(self) -> Profile:
        return Profile(
            title=self.title,
            nick=self.nick,
            description=self.description,
            avatar=self.avatar,
            links=list(self.links),
            follows=[Follow(nick=follow.nick, url=follow.url) for follow in self.follows],
            contacts=list(self.contacts),
        )


class PostInput(BaseModel):
    """Post fields to render; tokens and blocks are never serialized."""

    id: str
    lang: str | None = None
    tags: list[str] | None = None
    client: str | None = None
    reply_to: str | None = None
    poll_end: str | None = None
    poll_option: str | None = None
    mood: str | None = None
    content: str = ""

    def to_domain(self) -> Post:
        return Post(**self.model_dump())


class SerializeDocumentRequest(BaseModel):
    """Serialize document request."""

    profile: ProfileInput = Field(default_factory=ProfileInput)
    posts: list[PostInput] = Field(default_factory=list)


class SerializeDocumentResponse(BaseModel):
    """Serialize document response."""

    text: str


class SerializeDocumentUseCase(BaseUseCase):
    """Use case for rendering a profile and posts as document text."""

    async def execute(
        self, request: SerializeDocumentRequest
    ) -> SerializeDocumentResponse:
        with logfire.span("serialize_document.execute", post_count=len(request.posts)):
            text = serialize_document(
                request.profile.to_domain(),
                [post.to_domain() for post in request.posts],
            )
            return SerializeDocumentResponse(text=text)
