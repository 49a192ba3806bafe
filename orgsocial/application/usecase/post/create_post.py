"""Create post use case."""

import logfire
from pydantic import BaseModel

from orgsocial.application.usecase.base import BaseUseCase
from orgsocial.application.usecase.common import PostResponse
from orgsocial.domain.repository import DocumentRepository
from orgsocial.domain.service import ComposeService


class CreatePostRequest(BaseModel):
    """Create post request.

    Setting ``poll_options`` turns the post into a poll closing at
    ``poll_end``.
    """

    content: str
    tags: list[str] | None = None
    mood: str | None = None
    lang: str | None = None
    poll_end: str | None = None
    poll_options: list[str] | None = None


class CreatePostResponse(BaseModel):
    """Create post response."""

    post: PostResponse


class CreatePostUseCase(BaseUseCase):
    """Use case for composing a post and appending it to the user's document."""

    def __init__(
        self,
        compose_service: ComposeService,
        document_repository: DocumentRepository,
        source: str | None = None,
    ) -> None:
        """Initialize create post use case.

        Args:
            compose_service: Compose domain service
            document_repository: The user's document
            source: Public URL of the document, attached to the new post
        """
        self.compose_service = compose_service
        self.document_repository = document_repository
        self.source = source

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Raises:
            ValidationError: If the content is blank or the poll is malformed
            OSError: If the document cannot be written
        """
        with logfire.span("create_post.execute"):
            post = self.compose_service.compose_post(
                content=request.content,
                tags=request.tags,
                mood=request.mood,
                lang=request.lang,
                poll_end=request.poll_end,
                poll_options=request.poll_options,
            )
            await self.document_repository.append_post(post)
            post.source = self.source
            return CreatePostResponse(post=PostResponse.from_domain(post))
