"""Parse document use case."""

import logfire
from pydantic import BaseModel

from orgsocial.application.usecase.base import BaseUseCase
from orgsocial.application.usecase.common import PostResponse, ProfileResponse
from orgsocial.domain.service import parse_document
from orgsocial.domain.value import ReparsePolicy


class ParseDocumentRequest(BaseModel):
    """Parse document request."""

    text: str
    source: str | None = None  # URL the text was fetched from, if any


class ParseDocumentResponse(BaseModel):
    """Parse document response."""

    profile: ProfileResponse
    posts: list[PostResponse]


class ParseDocumentUseCase(BaseUseCase):
    """Use case for parsing raw document text into a profile and posts."""

    def __init__(self, reparse_policy: ReparsePolicy = ReparsePolicy.AUTO) -> None:
        self.reparse_policy = reparse_policy

    async def execute(self, request: ParseDocumentRequest) -> ParseDocumentResponse:
        with logfire.span("parse_document.execute", source=request.source):
            profile, posts = parse_document(
                request.text,
                source=request.source,
                reparse_policy=self.reparse_policy,
            )
            for post in posts:
                post.author = profile.nick or None

            return ParseDocumentResponse(
                profile=ProfileResponse.from_domain(profile),
                posts=[PostResponse.from_domain(post) for post in posts],
            )
