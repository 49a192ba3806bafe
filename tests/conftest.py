"""Test configuration and fixtures."""

import logfire
import pytest

from orgsocial.domain.model import Post
from orgsocial.domain.value import ReparsePolicy

# Spans and events are recorded locally only
logfire.configure(send_to_logfire=False, console=False)


def make_post(
    id: str,
    content: str = "",
    source: str | None = None,
    reply_to: str | None = None,
    **fields,
) -> Post:
    """Helper function to build test posts with only the fields that matter."""
    return Post(id=id, content=content, source=source, reply_to=reply_to, **fields)


@pytest.fixture
def manual_post() -> Post:
    """A post whose tokens are only rebuilt on explicit reparse."""
    return Post(
        id="2025-01-01T10:00:00+00:00",
        content="Hello *world*",
        reparse_policy=ReparsePolicy.MANUAL,
    )
