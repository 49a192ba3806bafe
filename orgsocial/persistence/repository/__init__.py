"""Document repository implementations."""

from orgsocial.persistence.repository.document import (
    FileDocumentRepository,
    format_appended_post,
)

__all__ = [
    "FileDocumentRepository",
    "format_appended_post",
]
