"""In-memory repository implementations for testing."""

from .document import InMemoryDocumentRepository

__all__ = [
    "InMemoryDocumentRepository",
]
