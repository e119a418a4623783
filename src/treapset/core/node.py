"""Treap node with a cached subtree size."""

from __future__ import annotations

from typing import Any


class Node:
    """One tree vertex.

    ``count`` caches the size of the subtree rooted here and must be
    refreshed with :meth:`update_count` whenever a child link changes.
    """

    __slots__ = ("key", "priority", "left", "right", "count")

    def __init__(self, key: Any, priority: int) -> None:
        self.key = key
        self.priority = priority
        self.left: Node | None = None
        self.right: Node | None = None
        self.count = 1

    def update_count(self) -> None:
        self.count = size(self.left) + size(self.right) + 1

    def __repr__(self) -> str:
        return f"Node(key={self.key!r}, priority={self.priority}, count={self.count})"


def size(node: Node | None) -> int:
    """Subtree size, 0 for an empty link."""
    return node.count if node is not None else 0
