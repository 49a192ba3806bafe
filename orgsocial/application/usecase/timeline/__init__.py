"""Timeline use cases."""

from .get_threads import (
    GetThreadsRequest,
    GetThreadsResponse,
    GetThreadsUseCase,
    ThreadNodeResponse,
)

__all__ = [
    "GetThreadsRequest",
    "GetThreadsResponse",
    "GetThreadsUseCase",
    "ThreadNodeResponse",
]
