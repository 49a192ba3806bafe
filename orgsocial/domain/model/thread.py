"""Reply forest structures.

Nodes live in a flat arena (``ThreadForest.nodes``). A node holds its
children directly and refers to its parent by arena position only, so
walking up to the root never needs a back reference.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime, timezone

from orgsocial.domain.model.post import Post
from orgsocial.domain.value import ID_SEPARATOR, FullPostId, full_post_id

# Stand-in for "no time" when ordering; never compared against a real time
_NO_TIME = datetime.min.replace(tzinfo=timezone.utc)


@dataclass(eq=False)
class ThreadNode:
    """A post and its direct replies.

    ``latest_activity_time`` is the newest timestamp anywhere in the
    subtree; None when no post in it has a parsable time.
    """

    post: Post
    children: list["ThreadNode"] = field(default_factory=list)
    depth: int = 0
    latest_activity_time: datetime | None = None
    is_placeholder: bool = False
    index: int = -1
    parent_index: int | None = None

    def count_posts(self) -> int:
        """Number of posts in this subtree, including this one."""
        return sum(1 for _ in self.walk())

    def flatten(self) -> list[Post]:
        """Posts of this subtree in display (pre-)order."""
        return [node.post for node in self.walk()]

    def walk(self) -> Iterator["ThreadNode"]:
        """Depth-first pre-order traversal of this subtree."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


def _newest(first: datetime | None, second: datetime | None) -> datetime | None:
    if first is None:
        return second
    if second is None:
        return first
    return max(first, second)


def _root_order_key(node: ThreadNode) -> tuple[bool, datetime]:
    return (node.latest_activity_time is not None, node.latest_activity_time or _NO_TIME)


def _reply_order_key(node: ThreadNode) -> tuple[bool, datetime]:
    return (node.latest_activity_time is None, node.latest_activity_time or _NO_TIME)


class ThreadForest:
    """Ordered reply trees over a flat node arena.

    Besides the roots, the forest keeps the lookup tables reply references
    are resolved against: full id to arena position and bare id to full id.
    For duplicated ids the first registered post wins.
    """

    def __init__(self) -> None:
        self.roots: list[ThreadNode] = []
        self.nodes: list[ThreadNode] = []
        self._positions: dict[FullPostId, int] = {}
        self._bare_ids: dict[str, FullPostId] = {}

    def add_node(self, node: ThreadNode) -> ThreadNode:
        """Store ``node`` in the arena without linking it anywhere."""
        node.index = len(self.nodes)
        self.nodes.append(node)
        self._positions.setdefault(node.post.full_id(), node.index)
        return node

    def register_bare_id(self, post: Post) -> None:
        self._bare_ids.setdefault(post.id, post.full_id())

    def position_of(self, full_id: str) -> int | None:
        return self._positions.get(FullPostId(full_id))

    def resolve(self, reference: str, source: str | None = None) -> str:
        """Turn a reply reference into a full identifier.

        References containing ``#`` are already qualified. A bare id is
        looked up in the replier's own document first, then in the bare id
        table, and is returned unchanged when neither knows it.
        """
        if ID_SEPARATOR in reference:
            return reference
        if source:
            own = full_post_id(source, reference)
            if own in self._positions:
                return own
        return self._bare_ids.get(reference, reference)

    def attach(self, child: ThreadNode, parent: ThreadNode) -> None:
        child.parent_index = parent.index
        parent.children.append(child)

    def parent_of(self, node: ThreadNode) -> ThreadNode | None:
        if node.parent_index is None:
            return None
        return self.nodes[node.parent_index]

    def ancestors(self, node: ThreadNode) -> Iterator[ThreadNode]:
        """Parents of ``node`` from the nearest up to its root."""
        parent = self.parent_of(node)
        while parent is not None:
            yield parent
            parent = self.parent_of(parent)

    def iter_nodes(self) -> Iterator[ThreadNode]:
        """Every node reachable from the roots, depth-first in root order."""
        for root in self.roots:
            yield from root.walk()

    def find(self, full_id: str) -> ThreadNode | None:
        """First node, depth-first, whose post has ``full_id``."""
        return next(
            (node for node in self.iter_nodes() if node.post.full_id() == full_id),
            None,
        )

    def recompute_depths(self) -> None:
        for root in self.roots:
            root.depth = 0
            for node in root.walk():
                for child in node.children:
                    child.depth = node.depth + 1

    def refresh_activity(self) -> None:
        """Recompute latest activity bottom-up for every tree."""
        for node in reversed(list(self.iter_nodes())):
            latest = node.post.time()
            for child in node.children:
                latest = _newest(latest, child.latest_activity_time)
            node.latest_activity_time = latest

    def sort_threads(self) -> None:
        """Order roots newest activity first and replies oldest first.

        Untimed nodes go last at both levels; ties keep their current order.
        """
        self.refresh_activity()
        self.roots.sort(key=_root_order_key, reverse=True)
        for node in self.iter_nodes():
            node.children.sort(key=_reply_order_key)

    def thread_count(self) -> int:
        return len(self.roots)

    def total_posts(self) -> int:
        return sum(root.count_posts() for root in self.roots)

    def flatten(self) -> list[Post]:
        return [node.post for node in self.iter_nodes()]

    def is_empty(self) -> bool:
        return not self.roots
