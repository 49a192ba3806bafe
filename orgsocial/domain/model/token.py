"""Inline markup tokens.

Tokens form a closed union discriminated by ``kind``. Every token knows its
source spelling through ``surface()``; joining the surfaces of a tokenized
body gives back the body unchanged.
"""

from typing import Annotated, Literal, Union

from pydantic import Field

from orgsocial.domain.model.common import DomainModel

MENTION_PREFIX = "org-social:"


class PlainText(DomainModel):
    kind: Literal["plain"] = "plain"
    text: str

    def surface(self) -> str:
        return self.text


class Bold(DomainModel):
    kind: Literal["bold"] = "bold"
    text: str

    def surface(self) -> str:
        return f"*{self.text}*"


class Italic(DomainModel):
    kind: Literal["italic"] = "italic"
    text: str

    def surface(self) -> str:
        return f"/{self.text}/"


class BoldItalic(DomainModel):
    kind: Literal["bold_italic"] = "bold_italic"
    text: str

    def surface(self) -> str:
        return f"*/{self.text}/*"


class Link(DomainModel):
    """A hyperlink.

    ``bracketed`` is False for bare ``http(s)://`` URLs found in running text
    and True for ``[[url]]`` or ``[[url][description]]`` links.
    """

    kind: Literal["link"] = "link"
    url: str
    description: str | None = None
    bracketed: bool = True

    def surface(self) -> str:
        if not self.bracketed:
            return self.url
        if self.description is None:
            return f"[[{self.url}]]"
        return f"[[{self.url}][{self.description}]]"


class Mention(DomainModel):
    """A ``[[org-social:<url>][<username>]]`` mention of another user."""

    kind: Literal["mention"] = "mention"
    url: str
    username: str

    def surface(self) -> str:
        return f"[[{MENTION_PREFIX}{self.url}][{self.username}]]"


class InlineCode(DomainModel):
    kind: Literal["code"] = "code"
    text: str

    def surface(self) -> str:
        return f"~{self.text}~"


Token = Annotated[
    Union[PlainText, Bold, Italic, BoldItalic, Link, Mention, InlineCode],
    Field(discriminator="kind"),
]


def surface_text(tokens: list[Token]) -> str:
    """Reassemble the source text of a token sequence."""
    return "".join(token.surface() for token in tokens)
