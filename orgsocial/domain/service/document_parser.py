"""Parsing and serialization of org-social documents.

A document is a profile header followed by a ``* Posts`` section::

    #+TITLE: Alice's journal
    #+NICK: alice
    #+FOLLOW: bob https://bob.example/social.org

    * Posts
    **
    :PROPERTIES:
    :ID: 2025-01-01T12:00:00+01:00
    :TAGS: emacs org
    :END:

    Hello *world*

Parsing is total: unknown keys, malformed property lines and stray markers
are ignored. Serialization emits every recognized field, so parsing the
output reproduces the same profile and posts.
"""

from collections.abc import Sequence

import logfire

from orgsocial.domain.model import Post, Profile
from orgsocial.domain.markup import split_lines
from orgsocial.domain.value import Follow, ReparsePolicy

POSTS_HEADER = "* Posts"
POST_MARKER = "**"
PROPERTIES_OPEN = ":PROPERTIES:"
PROPERTIES_OPEN_INLINE = "** :PROPERTIES:"
PROPERTIES_CLOSE = ":END:"

# Property drawer keys in serialization order
POST_PROPERTIES = (
    ("ID", "id"),
    ("LANG", "lang"),
    ("TAGS", "tags"),
    ("CLIENT", "client"),
    ("REPLY_TO", "reply_to"),
    ("POLL_END", "poll_end"),
    ("POLL_OPTION", "poll_option"),
    ("MOOD", "mood"),
)
_PROPERTY_FIELDS = dict(POST_PROPERTIES)


def parse_document(
    text: str,
    source: str | None = None,
    reparse_policy: ReparsePolicy = ReparsePolicy.AUTO,
) -> tuple[Profile, list[Post]]:
    """Parse a whole document.

    Args:
        text: Document text
        source: Where the document came from; attached to the profile and
            every post
        reparse_policy: Policy given to the parsed posts

    Returns:
        The profile and the posts in document order

    Raises:
        TypeError: If ``text`` is not a string
    """
    if not isinstance(text, str):
        raise TypeError(f"Document text must be str, got {type(text).__name__}")

    with logfire.span("document_parser.parse_document", source=source):
        lines = split_lines(text)
        header_index = next(
            (i for i, line in enumerate(lines) if line.startswith(POSTS_HEADER)),
            len(lines),
        )

        profile = parse_profile(lines[:header_index])
        profile.source = source

        posts = []
        for post_lines in _split_posts(lines[header_index + 1 :]):
            post = parse_post(post_lines, reparse_policy)
            post.source = source
            posts.append(post)

        logfire.debug(
            "Document parsed", source=source, nick=profile.nick, post_count=len(posts)
        )
        return profile, posts


def _split_posts(lines: list[str]) -> list[list[str]]:
    """Group the posts section into one line list per ``**`` entry."""
    starts = [i for i, line in enumerate(lines) if line.startswith(POST_MARKER)]
    bounds = starts[1:] + [len(lines)]
    return [lines[start:end] for start, end in zip(starts, bounds)]


def parse_profile(lines: Sequence[str]) -> Profile:
    """Parse profile header lines.

    TITLE, NICK and DESCRIPTION keep the last value seen; LINK, FOLLOW and
    CONTACT accumulate.
    """
    profile = Profile()
    for line in lines:
        key, separator, raw_value = line.partition(":")
        if not separator:
            continue
        value = raw_value.strip()
        match key.strip():
            case "#+TITLE":
                profile.title = value
            case "#+NICK":
                profile.nick = value
            case "#+DESCRIPTION":
                profile.description = value
            case "#+AVATAR":
                profile.avatar = value
            case "#+LINK":
                profile.links.append(value)
            case "#+FOLLOW":
                parts = value.split(maxsplit=1)
                if len(parts) == 2:
                    profile.follows.append(Follow(nick=parts[0], url=parts[1]))
            case "#+CONTACT":
                profile.contacts.append(value)
    return profile


def parse_post(
    lines: Sequence[str], reparse_policy: ReparsePolicy = ReparsePolicy.AUTO
) -> Post:
    """Parse the lines of one ``**`` entry into a post.

    Body lines are collected only after the property drawer closes, leading
    blank lines are skipped and trailing blank lines are dropped. Tokens and
    blocks are always derived, whatever ``reparse_policy`` the post gets.
    """
    fields: dict[str, object] = {}
    tags: list[str] | None = None
    in_properties = False
    properties_closed = False
    body: list[str] = []

    for line in lines:
        if line.startswith(PROPERTIES_OPEN_INLINE) or line.startswith(PROPERTIES_OPEN):
            in_properties = True
            continue
        if line.startswith(PROPERTIES_CLOSE):
            if in_properties:
                properties_closed = True
                in_properties = False
            continue
        if line.strip() == POST_MARKER:
            continue
        if in_properties and line.startswith(":"):
            key, separator, value = line.partition(": ")
            if not separator:
                continue
            key = key.strip()
            name = _PROPERTY_FIELDS.get(key[1:]) if key.startswith(":") else None
            if name == "tags":
                tags = (tags or []) + value.split()
            elif name is not None:
                fields[name] = value.strip()
            continue
        if properties_closed and (body or line):
            body.append(line)

    # Blank lines before the next entry separate posts, they are not content
    while body and not body[-1]:
        body.pop()

    post = Post(
        **fields,
        tags=tags,
        content="\n".join(body),
        reparse_policy=ReparsePolicy.MANUAL,
    )
    post.reparse_policy = reparse_policy
    post.reparse()
    return post


def serialize_profile(profile: Profile) -> str:
    lines = []
    if profile.title:
        lines.append(f"#+TITLE: {profile.title}")
    if profile.nick:
        lines.append(f"#+NICK: {profile.nick}")
    if profile.description:
        lines.append(f"#+DESCRIPTION: {profile.description}")
    if profile.avatar is not None:
        lines.append(f"#+AVATAR: {profile.avatar}")
    lines.extend(f"#+LINK: {link}" for link in profile.links)
    lines.extend(f"#+FOLLOW: {follow.nick} {follow.url}" for follow in profile.follows)
    lines.extend(f"#+CONTACT: {contact}" for contact in profile.contacts)
    return "\n".join(lines)


def serialize_post(post: Post) -> str:
    lines = [POST_MARKER, PROPERTIES_OPEN]
    for key, name in POST_PROPERTIES:
        value = getattr(post, name)
        if name == "tags":
            value = " ".join(value) if value else None
        if value:
            lines.append(f":{key}: {value}")
    lines.extend([PROPERTIES_CLOSE, "", post.content])
    return "\n".join(lines)


def serialize_document(profile: Profile, posts: Sequence[Post]) -> str:
    """Render a profile and its posts as document text."""
    sections = []
    header = serialize_profile(profile)
    if header:
        sections.extend([header, ""])
    sections.append(POSTS_HEADER)
    if posts:
        sections.append("\n\n".join(serialize_post(post) for post in posts))
    return "\n".join(sections)
