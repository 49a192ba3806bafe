"""Post entity.

A post is one ``**`` entry of an org-social document: a property drawer
followed by a free-form body. The body is decomposed into inline tokens and
fenced blocks, both derived from ``content`` and never stored in the
document.
"""

from datetime import datetime
from typing import Any

from pydantic import Field, PrivateAttr

from orgsocial.domain.model.block import OrgBlock
from orgsocial.domain.model.common import EntityModel
from orgsocial.domain.model.token import Token
from orgsocial.domain.value import FullPostId, ReparsePolicy, full_post_id, trailing_id
from orgsocial.util.timestamp import parse_timestamp


class Post(EntityModel):
    """A single post.

    ``id`` is a timestamp string, unique within its own document only;
    ``full_id()`` qualifies it with the source. ``source`` and ``author``
    are assigned by whoever loads the document.

    With ``ReparsePolicy.AUTO`` every assignment to ``content`` re-derives
    ``tokens`` and ``blocks``. With ``ReparsePolicy.MANUAL`` an assignment
    clears both until ``reparse()`` is called.
    """

    id: str = ""
    lang: str | None = None
    tags: list[str] | None = None
    client: str | None = None
    reply_to: str | None = None
    poll_end: str | None = None
    poll_option: str | None = None
    mood: str | None = None
    content: str = ""
    source: str | None = None
    author: str | None = None
    reparse_policy: ReparsePolicy = Field(default=ReparsePolicy.AUTO, exclude=True)

    _tokens: list[Token] = PrivateAttr(default_factory=list)
    _blocks: list[OrgBlock] = PrivateAttr(default_factory=list)

    def model_post_init(self, __context: Any) -> None:
        if self.reparse_policy is ReparsePolicy.AUTO:
            self.reparse()

    def __setattr__(self, name: str, value: Any) -> None:
        super().__setattr__(name, value)
        if name == "content":
            if self.reparse_policy is ReparsePolicy.AUTO:
                self.reparse()
            else:
                self.invalidate()

    @property
    def tokens(self) -> list[Token]:
        return self._tokens

    @property
    def blocks(self) -> list[OrgBlock]:
        return self._blocks

    def reparse(self) -> None:
        """Re-derive tokens and blocks from the current content."""
        # markup imports the model package, so it is loaded on first use
        from orgsocial.domain.markup import parse_blocks, tokenize

        self._tokens = tokenize(self.content)
        self._blocks = parse_blocks(self.content)

    def invalidate(self) -> None:
        """Drop derived tokens and blocks."""
        self._tokens = []
        self._blocks = []

    def set_content(self, content: str) -> None:
        self.content = content

    def full_id(self) -> FullPostId:
        return full_post_id(self.source, self.id)

    def time(self) -> datetime | None:
        """Creation time parsed from ``id``, None when it is not a timestamp."""
        return parse_timestamp(self.id)

    def reply_target_id(self) -> str | None:
        """Bare id of the reply target (segment after the last ``#``)."""
        if not self.reply_to:
            return None
        return trailing_id(self.reply_to)

    def is_poll_vote(self) -> bool:
        return bool(self.poll_option) and bool(self.reply_to)

    def summary(self, max_length: int = 50) -> str:
        """Content shortened to ``max_length`` characters for listings."""
        if len(self.content) <= max_length:
            return self.content
        return self.content[: max(max_length - 3, 0)] + "..."
