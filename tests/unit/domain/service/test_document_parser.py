"""Unit tests for document parsing and serialization."""

import pytest

from orgsocial.domain.model import Bold, Post, Profile
from orgsocial.domain.service import (
    parse_document,
    parse_post,
    parse_profile,
    serialize_document,
    serialize_post,
)
from orgsocial.domain.value import Follow, ReparsePolicy

DOCUMENT = """#+TITLE: Alice's journal
#+NICK: alice
#+DESCRIPTION: Emacs and tea
#+AVATAR: https://alice.example/avatar.png
#+LINK: https://alice.example
#+FOLLOW: bob https://bob.example/social.org
#+FOLLOW: carol https://carol.example/social.org
#+CONTACT: mailto:alice@example.com

* Posts
**
:PROPERTIES:
:ID: 2025-01-01T12:00:00+01:00
:LANG: en
:TAGS: emacs org
:CLIENT: org-social.el
:MOOD: happy
:END:

Hello *world*

#+begin_src elisp
(message "hi")
#+end_src

** :PROPERTIES:
:ID: 2025-01-02T08:30:00+01:00
:REPLY_TO: https://bob.example/social.org#2025-01-01T13:00:00+01:00
:END:

Agreed.
"""


class TestParseProfile:
    """Tests for parse_profile()."""

    def test_all_keys(self):
        """Should read every recognized header key."""
        # Act
        profile, _ = parse_document(DOCUMENT)

        # Assert
        assert profile.title == "Alice's journal"
        assert profile.nick == "alice"
        assert profile.description == "Emacs and tea"
        assert profile.avatar == "https://alice.example/avatar.png"
        assert profile.links == ["https://alice.example"]
        assert profile.follows == [
            Follow(nick="bob", url="https://bob.example/social.org"),
            Follow(nick="carol", url="https://carol.example/social.org"),
        ]
        assert profile.contacts == ["mailto:alice@example.com"]

    def test_single_valued_keys_keep_last(self):
        """Should overwrite TITLE and NICK when repeated."""
        # Act
        profile = parse_profile(["#+NICK: first", "#+NICK: second"])

        # Assert
        assert profile.nick == "second"

    def test_malformed_follow_ignored(self):
        """Should skip a FOLLOW line without a URL."""
        # Act
        profile = parse_profile(["#+FOLLOW: lonely", "just text", "#+UNKNOWN: x"])

        # Assert
        assert profile.follows == []
        assert profile == Profile()


class TestParsePosts:
    """Tests for post extraction."""

    def test_properties_and_body(self):
        """Should read the property drawer and the body."""
        # Act
        _, posts = parse_document(DOCUMENT)

        # Assert
        assert len(posts) == 2
        first, second = posts
        assert first.id == "2025-01-01T12:00:00+01:00"
        assert first.lang == "en"
        assert first.tags == ["emacs", "org"]
        assert first.client == "org-social.el"
        assert first.mood == "happy"
        assert first.content.startswith("Hello *world*\n\n#+begin_src elisp")
        assert first.content.endswith("#+end_src")
        assert second.reply_to == (
            "https://bob.example/social.org#2025-01-01T13:00:00+01:00"
        )
        assert second.content == "Agreed."

    def test_tokens_and_blocks_derived(self):
        """Should derive tokens and blocks for parsed posts."""
        # Act
        _, posts = parse_document(DOCUMENT)

        # Assert
        assert Bold(text="world") in posts[0].tokens
        assert [block.block_type for block in posts[0].blocks] == ["src"]
        assert posts[0].blocks[0].attributes == "elisp"

    def test_source_attached(self):
        """Should attach the source to the profile and to every post."""
        # Act
        profile, posts = parse_document(DOCUMENT, source="https://alice.example/s.org")

        # Assert
        assert profile.source == "https://alice.example/s.org"
        assert {post.source for post in posts} == {"https://alice.example/s.org"}
        assert posts[0].full_id() == (
            "https://alice.example/s.org#2025-01-01T12:00:00+01:00"
        )

    def test_body_lines_before_drawer_close_ignored(self):
        """Should only collect body lines after the drawer closes."""
        # Arrange
        lines = ["**", "stray", ":PROPERTIES:", ":ID: x", ":END:", "", "", "body"]

        # Act
        post = parse_post(lines)

        # Assert
        assert post.id == "x"
        assert post.content == "body"

    def test_trailing_blank_body_lines_dropped(self):
        """Should drop every blank line at the end of a body."""
        # Act
        post = parse_post(["**", ":PROPERTIES:", ":ID: x", ":END:", "", "body", "", ""])

        # Assert
        assert post.content == "body"

    def test_repeated_tags_lines_merge(self):
        """Should join every TAGS line of the drawer into one list."""
        # Act
        post = parse_post(
            ["**", ":PROPERTIES:", ":TAGS: a b", ":ID: x", ":TAGS: c", ":END:", "body"]
        )

        # Assert
        assert post.id == "x"
        assert post.tags == ["a", "b", "c"]

    def test_property_without_value_separator_ignored(self):
        """Should skip drawer lines that are not ``:KEY: value``."""
        # Act
        post = parse_post(["**", ":PROPERTIES:", ":ID:", ":MOOD: calm", ":END:", "x"])

        # Assert
        assert post.id == ""
        assert post.mood == "calm"

    def test_no_posts_section(self):
        """Should return no posts when the header is missing."""
        # Act
        profile, posts = parse_document("#+NICK: solo\n")

        # Assert
        assert profile.nick == "solo"
        assert posts == []

    def test_empty_document(self):
        """Should parse empty text to an empty profile."""
        # Act
        profile, posts = parse_document("")

        # Assert
        assert profile == Profile()
        assert posts == []

    def test_non_string_rejected(self):
        """Should raise TypeError for non-text input."""
        with pytest.raises(TypeError):
            parse_document(b"#+NICK: bytes")

    def test_manual_policy_still_derives(self):
        """Should derive tokens even when posts use the manual policy."""
        # Act
        _, posts = parse_document(DOCUMENT, reparse_policy=ReparsePolicy.MANUAL)

        # Assert
        assert posts[0].reparse_policy is ReparsePolicy.MANUAL
        assert posts[0].tokens


class TestSerialization:
    """Tests for serialization and round trips."""

    def test_serialize_post_layout(self):
        """Should write the drawer in a fixed order and skip empty fields."""
        # Arrange
        post = Post(
            id="2025-01-01T12:00:00+01:00",
            mood="calm",
            tags=["a", "b"],
            content="Body",
        )

        # Act
        text = serialize_post(post)

        # Assert
        assert text == "\n".join(
            [
                "**",
                ":PROPERTIES:",
                ":ID: 2025-01-01T12:00:00+01:00",
                ":TAGS: a b",
                ":MOOD: calm",
                ":END:",
                "",
                "Body",
            ]
        )

    def test_document_round_trip(self):
        """Should reproduce profile and posts after serialize then parse."""
        # Arrange
        profile, posts = parse_document(DOCUMENT)

        # Act
        reparsed_profile, reparsed_posts = parse_document(
            serialize_document(profile, posts)
        )

        # Assert
        assert reparsed_profile == profile
        assert [post.model_dump() for post in reparsed_posts] == [
            post.model_dump() for post in posts
        ]

    def test_round_trip_independent_of_field_order(self):
        """Should not depend on the property order of the source text."""
        # Arrange
        shuffled = (
            "* Posts\n**\n:PROPERTIES:\n:MOOD: calm\n:TAGS: x\n"
            ":ID: 2025-01-01T00:00:00Z\n:END:\n\nHi\n"
        )
        _, posts = parse_document(shuffled)

        # Act
        _, reparsed = parse_document(serialize_document(Profile(), posts))

        # Assert
        assert reparsed[0].model_dump() == posts[0].model_dump()
        assert reparsed[0].id == "2025-01-01T00:00:00Z"

    def test_empty_document_serializes_header_only(self):
        """Should always emit the posts header."""
        assert serialize_document(Profile(), []) == "* Posts"
