"""Unit tests for ThreadService."""

from orgsocial.domain.model import UNKNOWN_AUTHOR
from orgsocial.domain.service import PLACEHOLDER_CONTENT, ThreadService
from orgsocial.domain.service.base import Service
from tests.conftest import make_post

ALICE = "https://alice.example/social.org"
BOB = "https://bob.example/social.org"


def root_ids(forest) -> list[str]:
    return [root.post.id for root in forest.roots]


class TestBuildForest:
    """Tests for ThreadService.build_forest()."""

    def test_reply_attached_to_parent(self):
        """Should hang a bare-id reply under its target."""
        # Arrange
        a = make_post("t1")
        b = make_post("t2", reply_to="t1")

        # Act
        forest = ThreadService().build_forest([a, b])

        # Assert
        assert root_ids(forest) == ["t1"]
        root = forest.roots[0]
        assert [child.post for child in root.children] == [b]
        assert root.children[0].depth == 1

    def test_dangling_reply_gets_placeholder(self):
        """Should create a placeholder root for an unknown target."""
        # Arrange
        b = make_post("t2", reply_to="missing")

        # Act
        forest = ThreadService().build_forest([b])

        # Assert
        assert forest.thread_count() == 1
        placeholder = forest.roots[0]
        assert placeholder.is_placeholder is True
        assert placeholder.post.id == "missing"
        assert placeholder.post.content == PLACEHOLDER_CONTENT
        assert placeholder.post.author == UNKNOWN_AUTHOR
        assert [child.post for child in placeholder.children] == [b]
        assert placeholder.children[0].depth == 1

    def test_placeholder_shared_by_replies_to_same_target(self):
        """Should create one placeholder per missing target."""
        # Arrange
        posts = [
            make_post("2025-01-01T10:00:00Z", reply_to=f"{BOB}#gone"),
            make_post("2025-01-01T11:00:00Z", reply_to=f"{BOB}#gone"),
        ]

        # Act
        forest = ThreadService().build_forest(posts)

        # Assert
        assert forest.thread_count() == 1
        placeholder = forest.roots[0]
        assert placeholder.post.source == BOB
        assert len(placeholder.children) == 2

    def test_timestamp_fallback_across_sources(self):
        """Should match a reply by bare id when the source differs."""
        # Arrange
        a = make_post("2025-01-01T00:00:00+0000", source=ALICE)
        b = make_post(
            "2025-01-02T00:00:00+0000",
            source=BOB,
            reply_to="other-source#2025-01-01T00:00:00+0000",
        )

        # Act
        forest = ThreadService().build_forest([a, b])

        # Assert
        assert forest.thread_count() == 1
        assert forest.roots[0].post is a
        assert forest.roots[0].children[0].post is b

    def test_timestamp_fallback_prefers_first_in_input_order(self):
        """Should pick the earliest listed post when several share the id."""
        # Arrange
        first = make_post("2025-01-01T00:00:00Z", source=ALICE)
        second = make_post("2025-01-01T00:00:00Z", source=BOB)
        reply = make_post(
            "2025-01-03T00:00:00Z",
            source="https://carol.example",
            reply_to="https://nowhere.example#2025-01-01T00:00:00Z",
        )

        # Act
        forest = ThreadService().build_forest([first, second, reply])

        # Assert
        parent = forest.parent_of(forest.nodes[2])
        assert parent is not None
        assert parent.post is first

    def test_full_id_resolution(self):
        """Should resolve a full id to the post from that source."""
        # Arrange
        alice_post = make_post("2025-01-01T00:00:00Z", source=ALICE)
        bob_post = make_post("2025-01-01T00:00:00Z", source=BOB)
        reply = make_post(
            "2025-01-02T00:00:00Z",
            source=ALICE,
            reply_to=f"{BOB}#2025-01-01T00:00:00Z",
        )

        # Act
        forest = ThreadService().build_forest([alice_post, bob_post, reply])

        # Assert
        assert forest.parent_of(forest.nodes[2]).post is bob_post

    def test_bare_reference_prefers_own_source(self):
        """Should resolve a bare id inside the replier's own document first."""
        # Arrange
        bob_post = make_post("2025-01-01T00:00:00Z", source=BOB)
        alice_post = make_post("2025-01-01T00:00:00Z", source=ALICE)
        reply = make_post(
            "2025-01-02T00:00:00Z", source=ALICE, reply_to="2025-01-01T00:00:00Z"
        )

        # Act
        forest = ThreadService().build_forest([bob_post, alice_post, reply])

        # Assert
        assert forest.parent_of(forest.nodes[2]).post is alice_post

    def test_deep_chain_depths(self):
        """Should number depths along a reply chain, whatever the input order."""
        # Arrange
        c = make_post("2025-01-03T00:00:00Z", reply_to="2025-01-02T00:00:00Z")
        b = make_post("2025-01-02T00:00:00Z", reply_to="2025-01-01T00:00:00Z")
        a = make_post("2025-01-01T00:00:00Z")

        # Act
        forest = ThreadService().build_forest([c, b, a])

        # Assert
        depths = {node.post.id: node.depth for node in forest.iter_nodes()}
        assert depths == {
            "2025-01-01T00:00:00Z": 0,
            "2025-01-02T00:00:00Z": 1,
            "2025-01-03T00:00:00Z": 2,
        }

    def test_reply_cycle_broken_at_earliest_post(self):
        """Should keep every post when replies form a loop."""
        # Arrange
        a = make_post("2025-01-01T00:00:00Z", reply_to="2025-01-02T00:00:00Z")
        b = make_post("2025-01-02T00:00:00Z", reply_to="2025-01-01T00:00:00Z")

        # Act
        forest = ThreadService().build_forest([a, b])

        # Assert
        assert root_ids(forest) == ["2025-01-01T00:00:00Z"]
        assert forest.total_posts() == 2

    def test_self_reply_becomes_root(self):
        """Should promote a post replying to itself to a root."""
        # Arrange
        a = make_post("2025-01-01T00:00:00Z", reply_to="2025-01-01T00:00:00Z")

        # Act
        forest = ThreadService().build_forest([a])

        # Assert
        assert forest.thread_count() == 1
        assert forest.roots[0].post is a
        assert forest.roots[0].children == []

    def test_every_post_appears_once(self):
        """Should place each input post exactly once."""
        # Arrange
        posts = [
            make_post("2025-01-01T00:00:00Z"),
            make_post("2025-01-02T00:00:00Z", reply_to="2025-01-01T00:00:00Z"),
            make_post("2025-01-03T00:00:00Z", reply_to="unknown"),
            make_post("not-a-time"),
        ]

        # Act
        forest = ThreadService().build_forest(posts)

        # Assert
        real = [node.post for node in forest.iter_nodes() if not node.is_placeholder]
        assert sorted(id(post) for post in real) == sorted(id(post) for post in posts)

    def test_empty_input(self):
        """Should build an empty forest."""
        # Act
        forest = ThreadService().build_forest([])

        # Assert
        assert forest.is_empty()
        assert forest.flatten() == []


class TestRecencyOrdering:
    """Tests for thread ordering."""

    def test_roots_newest_activity_first(self):
        """Should order roots by the latest activity in their subtree."""
        # Arrange
        t1 = make_post("2025-01-01T00:00:00Z")
        t2 = make_post("2025-01-02T00:00:00Z")
        t3 = make_post("2025-01-03T00:00:00Z")
        # A late reply makes t1 the most recently active thread
        late = make_post("2025-01-05T00:00:00Z", reply_to="2025-01-01T00:00:00Z")

        # Act
        without_reply = ThreadService().build_forest([t1, t2, t3])
        with_reply = ThreadService().build_forest([t2, t1, t3, late])

        # Assert
        assert root_ids(without_reply) == [t3.id, t2.id, t1.id]
        assert root_ids(with_reply) == [t1.id, t3.id, t2.id]
        assert with_reply.roots[0].latest_activity_time == late.time()

    def test_children_oldest_first(self):
        """Should order replies oldest first."""
        # Arrange
        root = make_post("2025-01-01T00:00:00Z")
        newer = make_post("2025-01-03T00:00:00Z", reply_to=root.id)
        older = make_post("2025-01-02T00:00:00Z", reply_to=root.id)

        # Act
        forest = ThreadService().build_forest([root, newer, older])

        # Assert
        assert [child.post for child in forest.roots[0].children] == [older, newer]

    def test_untimed_roots_last(self):
        """Should put roots without a parsable time after timed ones."""
        # Arrange
        untimed = make_post("draft")
        timed = make_post("2025-01-01T00:00:00Z")

        # Act
        forest = ThreadService().build_forest([untimed, timed])

        # Assert
        assert root_ids(forest) == [timed.id, untimed.id]

    def test_sort_is_idempotent(self):
        """Should keep the same order when sorted twice."""
        # Arrange
        posts = [
            make_post("2025-01-02T00:00:00Z"),
            make_post("x"),
            make_post("2025-01-01T00:00:00Z"),
            make_post("y"),
            make_post("2025-01-03T00:00:00Z", reply_to="2025-01-01T00:00:00Z"),
        ]
        forest = ThreadService().build_forest(posts)
        first = forest.flatten()

        # Act
        forest.sort_threads()

        # Assert
        assert forest.flatten() == first
        assert root_ids(forest)[-2:] == ["x", "y"]


class TestInsert:
    """Tests for ThreadService.insert()."""

    def test_insert_reply_under_existing_post(self):
        """Should attach below the target with depth one deeper."""
        # Arrange
        service = ThreadService()
        a = make_post("2025-01-01T00:00:00Z", source=ALICE)
        b = make_post("2025-01-02T00:00:00Z", source=ALICE, reply_to=a.id)
        forest = service.build_forest([a, b])
        c = make_post(
            "2025-01-03T00:00:00Z", source=BOB, reply_to=f"{ALICE}#2025-01-02T00:00:00Z"
        )

        # Act
        node = service.insert(forest, c)

        # Assert
        assert forest.parent_of(node).post is b
        assert node.depth == 2
        assert forest.roots[0].latest_activity_time == c.time()

    def test_insert_root_reorders(self):
        """Should move a newer root to the front."""
        # Arrange
        service = ThreadService()
        forest = service.build_forest([make_post("2025-01-01T00:00:00Z")])

        # Act
        service.insert(forest, make_post("2025-02-01T00:00:00Z"))

        # Assert
        assert root_ids(forest) == ["2025-02-01T00:00:00Z", "2025-01-01T00:00:00Z"]

    def test_insert_reuses_placeholder(self):
        """Should attach to an existing placeholder for the same target."""
        # Arrange
        service = ThreadService()
        forest = service.build_forest(
            [make_post("2025-01-01T00:00:00Z", reply_to=f"{BOB}#gone")]
        )

        # Act
        service.insert(forest, make_post("2025-01-02T00:00:00Z", reply_to=f"{BOB}#gone"))

        # Assert
        assert forest.thread_count() == 1
        assert len(forest.roots[0].children) == 2

    def test_insert_dangling_reply_creates_placeholder(self):
        """Should create a placeholder root when the target is unknown."""
        # Arrange
        service = ThreadService()
        forest = service.build_forest([])

        # Act
        node = service.insert(forest, make_post("2025-01-01T00:00:00Z", reply_to="nope"))

        # Assert
        parent = forest.parent_of(node)
        assert parent.is_placeholder is True
        assert parent.post.id == "nope"
        assert node.depth == 1

    def test_late_target_does_not_replace_placeholder(self):
        """Should keep routing replies to a placeholder once it exists.

        A post inserted later with the placeholder's id becomes a separate
        root; the placeholder stays the registered node for that id.
        """
        # Arrange
        service = ThreadService()
        forest = service.build_forest(
            [make_post("2025-01-01T00:00:00Z", reply_to="missing")]
        )

        # Act
        service.insert(forest, make_post("missing"))
        reply = service.insert(forest, make_post("2025-01-02T00:00:00Z", reply_to="missing"))

        # Assert
        assert forest.parent_of(reply).is_placeholder is True
        assert forest.thread_count() == 2


class TestServiceHierarchy:
    def test_thread_service_is_domain_service(self):
        """Should share the common domain service base."""
        assert isinstance(ThreadService(), Service)
