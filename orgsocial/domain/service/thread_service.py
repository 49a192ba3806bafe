"""Conversation threading domain service."""

from collections.abc import Sequence

import logfire

from orgsocial.domain.model import UNKNOWN_AUTHOR, Post, ThreadForest, ThreadNode
from orgsocial.domain.value import leading_source, trailing_id

from .base import Service

PLACEHOLDER_CONTENT = "[Post not available]"


def make_placeholder(reference: str) -> ThreadNode:
    """Stand-in node for a reply target that is not among the known posts."""
    post = Post(
        id=trailing_id(reference),
        source=leading_source(reference),
        content=PLACEHOLDER_CONTENT,
        author=UNKNOWN_AUTHOR,
    )
    return ThreadNode(post=post, is_placeholder=True)


class ThreadService(Service):
    """Builds and maintains reply forests.

    Every operation is total: a reply whose target cannot be found hangs
    under a placeholder instead of failing.
    """

    def build_forest(self, posts: Sequence[Post]) -> ThreadForest:
        """Thread a flat collection of posts.

        Algorithm:
        1. Wrap every post in a node, registering full and bare ids
        2. Resolve each reply target: exact full id, then a post in any
           source with the same bare id, then a placeholder (one per target)
        3. Break reply cycles by promoting their earliest post to a root
        4. Attach replies in input order; placeholders become extra roots
           after the real ones
        5. Recompute depths and apply recency ordering

        Args:
            posts: Posts in a fixed order; ties are broken by this order

        Returns:
            Ordered reply forest
        """
        with logfire.span("thread_service.build_forest", post_count=len(posts)):
            forest = ThreadForest()
            for post in posts:
                forest.add_node(ThreadNode(post=post))
                forest.register_bare_id(post)

            parents = self._resolve_parents(forest, len(posts))
            self._break_cycles(forest, parents)

            for node in forest.nodes:
                parent_index = parents[node.index]
                if parent_index is None:
                    forest.roots.append(node)
                else:
                    forest.attach(node, forest.nodes[parent_index])

            forest.recompute_depths()
            forest.sort_threads()

            logfire.info(
                "Built thread forest",
                thread_count=forest.thread_count(),
                placeholder_count=len(forest.nodes) - len(posts),
            )
            return forest

    def _resolve_parents(
        self, forest: ThreadForest, post_count: int
    ) -> list[int | None]:
        """Arena position of each node's parent; placeholders are added as needed."""
        parents: list[int | None] = [None] * post_count
        placeholders: dict[str, int] = {}

        for node in forest.nodes[:post_count]:
            reply_to = node.post.reply_to
            if not reply_to:
                continue

            target = forest.resolve(reply_to, node.post.source)
            position = forest.position_of(target)
            if position is None:
                position = self._find_by_bare_id(
                    forest, trailing_id(reply_to), node, post_count
                )
            if position is None:
                if target not in placeholders:
                    placeholder = forest.add_node(make_placeholder(target))
                    placeholders[target] = placeholder.index
                    parents.append(None)
                    logfire.debug("Reply target not found", reply_to=reply_to)
                position = placeholders[target]
            parents[node.index] = position

        return parents

    @staticmethod
    def _find_by_bare_id(
        forest: ThreadForest, bare_id: str, replier: ThreadNode, post_count: int
    ) -> int | None:
        """First other post, in input order, whose id equals ``bare_id``."""
        return next(
            (
                node.index
                for node in forest.nodes[:post_count]
                if node is not replier and node.post.id == bare_id
            ),
            None,
        )

    @staticmethod
    def _break_cycles(forest: ThreadForest, parents: list[int | None]) -> None:
        """Cut every reply cycle at its earliest post, which becomes a root."""
        done = [False] * len(parents)
        for start in range(len(parents)):
            path: list[int] = []
            on_path: set[int] = set()
            current: int | None = start
            while current is not None and not done[current] and current not in on_path:
                path.append(current)
                on_path.add(current)
                current = parents[current]

            if current is not None and current in on_path:
                cycle = path[path.index(current) :]
                promoted = min(cycle)
                parents[promoted] = None
                logfire.warn(
                    "Reply cycle broken",
                    promoted=forest.nodes[promoted].post.full_id(),
                    cycle_length=len(cycle),
                )

            for index in path:
                done[index] = True

    def insert(self, forest: ThreadForest, post: Post) -> ThreadNode:
        """Add one post to an existing forest.

        A reply is attached under the first node (depth-first) with the
        target's full id, or under a new placeholder root when there is none.
        The whole forest is re-sorted afterwards.

        Args:
            forest: Forest to update in place
            post: New post

        Returns:
            The node created for ``post``
        """
        with logfire.span("thread_service.insert", post_id=post.full_id()):
            node = forest.add_node(ThreadNode(post=post))

            if not post.reply_to:
                forest.roots.append(node)
            else:
                target = forest.resolve(post.reply_to, post.source)
                parent = forest.find(target)
                if parent is None:
                    parent = forest.add_node(make_placeholder(target))
                    forest.roots.append(parent)
                    logfire.debug("Reply target not found", reply_to=post.reply_to)
                forest.attach(node, parent)
                node.depth = parent.depth + 1

                latest = post.time()
                node.latest_activity_time = latest
                if latest is not None:
                    for ancestor in forest.ancestors(node):
                        if (
                            ancestor.latest_activity_time is None
                            or latest > ancestor.latest_activity_time
                        ):
                            ancestor.latest_activity_time = latest

            forest.register_bare_id(post)
            forest.sort_threads()
            return node
