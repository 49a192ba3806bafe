"""Document repository interface."""

from abc import ABC, abstractmethod

from orgsocial.domain.model import Post, Profile


class DocumentRepository(ABC):
    """Repository for the user's own org-social document.

    The document is append-only: posts are added at the end and existing
    text is never rewritten. Implementations live in the persistence layer.
    """

    @abstractmethod
    async def load(self) -> tuple[Profile, list[Post]]:
        """Read and parse the document.

        Returns:
            The profile and posts, with the document's source attached
        """
        pass

    @abstractmethod
    async def append_post(self, post: Post) -> None:
        """Append one serialized post to the end of the document.

        Raises:
            OSError: If the underlying storage cannot be written
        """
        pass
