"""In-memory document repository for testing."""

from orgsocial.domain.model import Post, Profile
from orgsocial.domain.repository import DocumentRepository
from orgsocial.domain.service import parse_document
from orgsocial.persistence.repository.document import format_appended_post


class InMemoryDocumentRepository(DocumentRepository):
    """In-memory implementation of DocumentRepository for testing.

    Holds the document as text, so appended posts go through the same
    serialize and parse path as the file implementation.
    """

    def __init__(self, text: str = "", source: str | None = None) -> None:
        self.text = text
        self.source = source

    async def load(self) -> tuple[Profile, list[Post]]:
        return parse_document(self.text, source=self.source)

    async def append_post(self, post: Post) -> None:
        self.text += format_appended_post(post)
