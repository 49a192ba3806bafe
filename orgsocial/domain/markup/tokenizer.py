"""Inline markup tokenizer.

Splits a post body into typed tokens in a single forward scan. At each
position the first rule that matches wins:

1. ``[[...]]`` mention or link
2. bare ``http://`` or ``https://`` URL starting at a letter
3. ``*/bold italic/*``
4. ``*bold*`` (one line, non-empty)
5. ``/italic/`` (one line, non-empty)
6. ``~code~`` (non-empty, may span lines)
7. plain text up to the next delimiter or URL

A delimiter that does not open a valid span is emitted as a one-character
plain text token. The scan never fails and never drops characters.
"""

from orgsocial.domain.model.token import (
    MENTION_PREFIX,
    Bold,
    BoldItalic,
    InlineCode,
    Italic,
    Link,
    Mention,
    PlainText,
    Token,
)

_URL_PREFIXES = ("https://", "http://")
_URL_TERMINATORS = frozenset(")]>\"'*~")
_PLAIN_STOPS = frozenset("*/~[")
_LINK_OPEN = "[["
_LINK_CLOSE = "]]"
_DESCRIPTION_SEPARATOR = "]["


class Tokenizer:
    """Single-use scanner over one body string."""

    def __init__(self, content: str) -> None:
        self.content = content
        self.position = 0

    def tokenize(self) -> list[Token]:
        tokens: list[Token] = []
        while self.position < len(self.content):
            tokens.append(self._next_token())
        return tokens

    def _next_token(self) -> Token:
        if self.content.startswith(_LINK_OPEN, self.position):
            return self._parse_bracketed()

        url = self._url_at(self.position)
        if url is not None:
            self.position += len(url)
            return Link(url=url, bracketed=False)

        char = self.content[self.position]
        token: Token | None = None
        if char == "*":
            if self.content.startswith("*/", self.position):
                token = self._parse_bold_italic()
            if token is None:
                # Unclosed bold italic is retried as bold
                token = self._parse_span("*", Bold, allow_newline=False)
        elif char == "/":
            token = self._parse_span("/", Italic, allow_newline=False)
        elif char == "~":
            token = self._parse_span("~", InlineCode, allow_newline=True)

        if token is not None:
            return token
        return self._parse_plain_text()

    def _parse_bracketed(self) -> Token:
        """Parse ``[[...]]`` as a mention, else a link.

        An unterminated ``[[`` becomes literal text and scanning resumes
        right after it.
        """
        start = self.position + len(_LINK_OPEN)
        end = self.content.find(_LINK_CLOSE, start)
        if end == -1:
            self.position = start
            return PlainText(text=_LINK_OPEN)

        inner = self.content[start:end]
        self.position = end + len(_LINK_CLOSE)

        target, separator, label = inner.partition(_DESCRIPTION_SEPARATOR)
        if separator and target.startswith(MENTION_PREFIX):
            return Mention(url=target[len(MENTION_PREFIX) :], username=label)
        if separator:
            return Link(url=target, description=label)
        return Link(url=inner)

    def _url_at(self, position: int) -> str | None:
        """Bare HTTP(S) URL starting at ``position``, if any."""
        if not self.content[position].isalpha():
            return None
        if not self.content.startswith(_URL_PREFIXES, position):
            return None

        end = position
        while end < len(self.content):
            char = self.content[end]
            if char.isspace() or char in _URL_TERMINATORS:
                break
            end += 1
        return self.content[position:end]

    def _parse_bold_italic(self) -> Token | None:
        start = self.position + 2
        end = self.content.find("/*", start)
        if end == -1:
            return None
        self.position = end + 2
        return BoldItalic(text=self.content[start:end])

    def _parse_span(self, delimiter: str, kind, allow_newline: bool) -> Token | None:
        start = self.position + 1
        end = self.content.find(delimiter, start)
        if end == -1:
            return None
        text = self.content[start:end]
        if not text or (not allow_newline and "\n" in text):
            return None
        self.position = end + 1
        return kind(text=text)

    def _parse_plain_text(self) -> Token:
        start = self.position
        position = start
        while position < len(self.content):
            char = self.content[position]
            if char in _PLAIN_STOPS:
                break
            if position > start and self._url_at(position) is not None:
                break
            position += 1

        if position == start:
            # Delimiter that opened nothing
            position += 1
        self.position = position
        return PlainText(text=self.content[start:position])


def tokenize(content: str) -> list[Token]:
    """Tokenize a post body."""
    return Tokenizer(content).tokenize()
