"""Create reply use case."""

import logfire
from pydantic import BaseModel

from orgsocial.application.usecase.base import BaseUseCase
from orgsocial.application.usecase.common import PostResponse
from orgsocial.domain.repository import DocumentRepository
from orgsocial.domain.service import ComposeService


class CreateReplyRequest(BaseModel):
    """Create reply request."""

    reply_to: str  # Full id (source#timestamp) of the post replied to
    content: str
    tags: list[str] | None = None
    mood: str | None = None


class CreateReplyResponse(BaseModel):
    """Create reply response."""

    post: PostResponse


class CreateReplyUseCase(BaseUseCase):
    """Use case for replying to a post from any document."""

    def __init__(
        self,
        compose_service: ComposeService,
        document_repository: DocumentRepository,
        source: str | None = None,
    ) -> None:
        self.compose_service = compose_service
        self.document_repository = document_repository
        self.source = source

    async def execute(self, request: CreateReplyRequest) -> CreateReplyResponse:
        with logfire.span("create_reply.execute", reply_to=request.reply_to):
            post = self.compose_service.compose_reply(
                reply_to=request.reply_to,
                content=request.content,
                tags=request.tags,
                mood=request.mood,
            )
            await self.document_repository.append_post(post)
            post.source = self.source
            return CreateReplyResponse(post=PostResponse.from_domain(post))
