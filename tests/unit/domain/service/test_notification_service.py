"""Unit tests for NotificationService."""

from datetime import datetime, timezone

from orgsocial.domain.model import Profile
from orgsocial.domain.service import NotificationService
from orgsocial.domain.value import NotificationType
from tests.conftest import make_post

ALICE = "https://alice.example/social.org"
BOB = "https://bob.example/social.org"
OWN_ID = "2025-01-01T10:00:00Z"


def alice_profile() -> Profile:
    return Profile(nick="alice", source=ALICE)


def from_bob(id: str, content: str = "", reply_to: str | None = None, **fields):
    post = make_post(id, content=content, source=BOB, reply_to=reply_to, **fields)
    post.author = "bob"
    return post


class TestBuildNotifications:
    """Tests for NotificationService.build_notifications()."""

    def test_mention_by_nick(self):
        """Should report a mention token naming the user."""
        # Arrange
        own = [make_post(OWN_ID, source=ALICE)]
        mention = from_bob(
            "2025-01-02T00:00:00Z", content=f"cc [[org-social:{ALICE}][alice]]"
        )

        # Act
        feed = NotificationService().build_notifications(
            alice_profile(), own, [mention]
        )

        # Assert
        assert len(feed) == 1
        assert feed.notifications[0].notification_type is NotificationType.MENTION

    def test_mention_by_url(self):
        """Should report a mention whose URL is the user's document."""
        # Arrange
        mention = from_bob(
            "2025-01-02T00:00:00Z", content=f"[[org-social:{ALICE}][someone]]"
        )

        # Act
        feed = NotificationService().build_notifications(alice_profile(), [], [mention])

        # Assert
        assert feed.by_type(NotificationType.MENTION) == feed.notifications
        assert len(feed) == 1

    def test_mention_of_someone_else_ignored(self):
        """Should not report mentions of other users."""
        # Arrange
        other = from_bob(
            "2025-01-02T00:00:00Z",
            content="[[org-social:https://carol.example/social.org][carol]]",
        )

        # Act
        feed = NotificationService().build_notifications(alice_profile(), [], [other])

        # Assert
        assert feed.is_empty()

    def test_reply_and_combined_types(self):
        """Should classify replies, and replies that also mention."""
        # Arrange
        own = [make_post(OWN_ID, source=ALICE)]
        reply = from_bob("2025-01-02T00:00:00Z", reply_to=f"{ALICE}#{OWN_ID}")
        both = from_bob(
            "2025-01-03T00:00:00Z",
            content=f"[[org-social:{ALICE}][alice]] yes",
            reply_to=f"{ALICE}#{OWN_ID}",
        )

        # Act
        feed = NotificationService().build_notifications(
            alice_profile(), own, [reply, both]
        )

        # Assert
        assert [n.notification_type for n in feed.notifications] == [
            NotificationType.MENTION_AND_REPLY,
            NotificationType.REPLY,
        ]

    def test_own_posts_skipped(self):
        """Should ignore posts authored by the user."""
        # Arrange
        own_reply = make_post(
            "2025-01-02T00:00:00Z", source=ALICE, reply_to=f"{ALICE}#{OWN_ID}"
        )
        own_reply.author = "alice"

        # Act
        feed = NotificationService().build_notifications(
            alice_profile(), [make_post(OWN_ID)], [own_reply]
        )

        # Assert
        assert feed.is_empty()

    def test_duplicate_post_ids_reported_once(self):
        """Should keep the first occurrence of a post id."""
        # Arrange
        reply = from_bob("2025-01-02T00:00:00Z", reply_to=OWN_ID)
        duplicate = from_bob("2025-01-02T00:00:00Z", reply_to=OWN_ID)

        # Act
        feed = NotificationService().build_notifications(
            alice_profile(), [make_post(OWN_ID)], [reply, duplicate]
        )

        # Assert
        assert len(feed) == 1
        assert feed.notifications[0].post is reply


class TestNotificationFeedQueries:
    """Tests for NotificationFeed range and recency queries."""

    def test_recent_and_range(self):
        """Should slice newest first and filter by time."""
        # Arrange
        replies = [
            from_bob(f"2025-01-0{day}T00:00:00Z", reply_to=OWN_ID)
            for day in (2, 3, 4)
        ]
        feed = NotificationService().build_notifications(
            alice_profile(), [make_post(OWN_ID)], replies
        )

        # Act
        recent = feed.recent(2)
        in_range = feed.in_range(
            datetime(2025, 1, 2, 12, tzinfo=timezone.utc),
            datetime(2025, 1, 4, tzinfo=timezone.utc),
        )

        # Assert
        assert [n.post.id for n in recent] == [
            "2025-01-04T00:00:00Z",
            "2025-01-03T00:00:00Z",
        ]
        assert [n.post.id for n in in_range] == [
            "2025-01-04T00:00:00Z",
            "2025-01-03T00:00:00Z",
        ]
