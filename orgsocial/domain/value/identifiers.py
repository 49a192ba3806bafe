"""Identifier types for org-social posts.

A post's ``id`` is a timestamp string, unique only within the document it
lives in. The full identifier ``source#id`` is unique across documents and is
the key space used by reply references and the threading engine.
"""

from typing import NewType

PostId = NewType("PostId", str)
FullPostId = NewType("FullPostId", str)
SourceUrl = NewType("SourceUrl", str)

# Separator between source and bare id in a full identifier
ID_SEPARATOR = "#"


def full_post_id(source: str | None, post_id: str) -> FullPostId:
    """Build the full identifier for a post."""
    if source:
        return FullPostId(f"{source}{ID_SEPARATOR}{post_id}")
    return FullPostId(post_id)


def trailing_id(reference: str) -> PostId:
    """Segment after the last ``#`` of a reference, or the whole reference."""
    return PostId(reference.rsplit(ID_SEPARATOR, 1)[-1])


def leading_source(reference: str) -> SourceUrl | None:
    """Segment before the first ``#`` of a reference, if there is one."""
    if ID_SEPARATOR not in reference:
        return None
    source = reference.split(ID_SEPARATOR, 1)[0]
    return SourceUrl(source) if source else None
