"""File-backed document repository."""

import asyncio
from pathlib import Path

import logfire

from orgsocial.domain.error import NotFoundError
from orgsocial.domain.model import Post, Profile
from orgsocial.domain.repository import DocumentRepository
from orgsocial.domain.service import parse_document, serialize_post
from orgsocial.domain.value import ReparsePolicy


def format_appended_post(post: Post) -> str:
    """Text appended to a document for one new post."""
    return f"\n{serialize_post(post)}\n"


class FileDocumentRepository(DocumentRepository):
    """Reads and appends to a ``social.org`` file on disk.

    Writes always open the file in append mode, so earlier content is never
    rewritten or reordered. Writers in other processes are not coordinated.
    """

    def __init__(
        self,
        path: Path,
        source: str | None = None,
        reparse_policy: ReparsePolicy = ReparsePolicy.AUTO,
    ) -> None:
        """Initialize repository.

        Args:
            path: Location of the document
            source: Public URL of the document, attached to parsed posts
            reparse_policy: Policy given to parsed posts
        """
        self.path = path
        self.source = source
        self.reparse_policy = reparse_policy

    async def load(self) -> tuple[Profile, list[Post]]:
        """Read and parse the document.

        Raises:
            NotFoundError: If the file does not exist
            OSError: If the file cannot be read
        """
        try:
            text = await asyncio.to_thread(self.path.read_text, encoding="utf-8")
        except FileNotFoundError as e:
            raise NotFoundError("Document", str(self.path)) from e
        return parse_document(
            text,
            source=self.source,
            reparse_policy=self.reparse_policy,
        )

    async def append_post(self, post: Post) -> None:
        with logfire.span(
            "document_repository.append_post", path=str(self.path), post_id=post.id
        ):
            await asyncio.to_thread(self._append, format_appended_post(post))
            logfire.info("Post appended", path=str(self.path), post_id=post.id)

    def _append(self, text: str) -> None:
        with self.path.open("a", encoding="utf-8") as document:
            document.write(text)
