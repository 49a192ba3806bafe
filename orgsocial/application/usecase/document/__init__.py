"""Document use cases."""

from .parse_document import (
    ParseDocumentRequest,
    ParseDocumentResponse,
    ParseDocumentUseCase,
)
from .serialize_document import (
    FollowInput,
    PostInput,
    ProfileInput,
    SerializeDocumentRequest,
    SerializeDocumentResponse,
    SerializeDocumentUseCase,
)

__all__ = [
    "FollowInput",
    "ParseDocumentRequest",
    "ParseDocumentResponse",
    "ParseDocumentUseCase",
    "PostInput",
    "ProfileInput",
    "SerializeDocumentRequest",
    "SerializeDocumentResponse",
    "SerializeDocumentUseCase",
]
