"""Repository interfaces."""

from orgsocial.domain.repository.document import DocumentRepository

__all__ = [
    "DocumentRepository",
]
