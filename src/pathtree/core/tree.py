from __future__ import annotations

"""
Incremental Path Tree.

Accumulates observed request targets into a hierarchy of segment nodes.
The tree only grows: inserting a target either walks an existing branch or
extends it with a chain of new nodes.
"""

import logging
import threading
from typing import Any, Iterable, List

from pathtree.core.segments import split_target
from pathtree.domain.tree_models import StructureNode

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# CORE TREE
# -----------------------------------------------------------------------------

class PathTree:
    """
    Append-only tree of observed targets.

    Not thread-safe. Callers sharing one instance between threads must
    serialize access themselves or use SynchronizedPathTree.
    """

    def __init__(self) -> None:
        # Synthetic container; its name is never read or serialized
        self._root = StructureNode(name="")

    def insert(self, segments: Iterable[str]) -> None:
        """
        Record one observed target given as an ordered segment sequence.

        Empty segments are discarded. A fully empty sequence is a no-op.
        Inserting the same sequence again leaves the tree unchanged.

        Args:
            segments: Conventionally [hostname, path_segment1, ...].
        """
        node = self._root
        created = 0

        for segment in segments:
            if segment == "":
                continue
            child = node.find_child(segment)
            if child is None:
                child = StructureNode(name=segment)
                node.children.append(child)
                created += 1
            node = child

        if created:
            logger.debug(f"Extended path tree with {created} node(s) ending at '{node.name}'.")

    def update(self, request: Any) -> None:
        """
        Record the target of an HTTP request.

        Args:
            request: URL string or request-like object (see split_target).

        Raises:
            InvalidTargetError: If the request URL cannot be split.
        """
        self.insert(split_target(request))

    def structure(self) -> List[StructureNode]:
        """Return the top-level nodes (the root's children) for rendering."""
        return self._root.children


class SynchronizedPathTree(PathTree):
    """
    PathTree guarded by a single lock.

    structure() returns a detached copy so that readers never observe a
    concurrent insertion half-way through.
    """

    def __init__(self) -> None:
        super().__init__()
        self._lock = threading.Lock()

    def insert(self, segments: Iterable[str]) -> None:
        # Consume the iterable before taking the lock
        items = list(segments)
        with self._lock:
            super().insert(items)

    def structure(self) -> List[StructureNode]:
        with self._lock:
            return [node.clone() for node in super().structure()]


def create_tree(synchronized: bool = False) -> PathTree:
    """Build an empty tree, lock-guarded when `synchronized` is set."""
    return SynchronizedPathTree() if synchronized else PathTree()
