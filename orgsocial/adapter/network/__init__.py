"""Network adapter for followed documents."""

from .client import HttpxFeedFetcher, MockFeedFetcher

__all__ = [
    "HttpxFeedFetcher",
    "MockFeedFetcher",
]
