"""Ordered set backed by a randomized balanced binary search tree."""

from __future__ import annotations

from typing import Any, Iterator

from treapset.balancing import create_balancer
from treapset.core import search
from treapset.core.node import Node, size
from treapset.core.xorshift import XorShift32


class Treap:
    """Ordered set of unique keys with order-statistics queries.

    Keys are kept in binary-search order, node priorities in min-heap
    order, and every node caches the size of its subtree.  Priorities
    come from a per-instance :class:`XorShift32` seeded with *seed*, so
    two treaps built with the same seed and the same operations have
    identical shapes.

    Misses are not errors: duplicate inserts, absent erases and
    out-of-range ranks are reported through ``False`` / ``None``.

    Not safe for concurrent mutation; callers sharing an instance
    across threads must serialize access themselves.
    """

    def __init__(self, seed: int, balancer: str = "rotation") -> None:
        self._rng = XorShift32(seed)
        self._balancer = create_balancer(balancer)
        self._root: Node | None = None

    # ── size ──────────────────────────────────────────────────────────────

    def __len__(self) -> int:
        return size(self._root)

    def is_empty(self) -> bool:
        return self._root is None

    # ── mutation ──────────────────────────────────────────────────────────

    def insert(self, key: Any) -> bool:
        """Add *key*; return True iff it was not already present."""
        self._root, inserted = self._balancer.insert(self._root, key, self._rng)
        return inserted

    def erase(self, key: Any) -> bool:
        """Remove *key*; return True iff it was present."""
        self._root, removed = self._balancer.erase(self._root, key)
        return removed

    def clear(self) -> None:
        """Drop every key.  The priority stream keeps its position."""
        self._root = None

    # ── queries ───────────────────────────────────────────────────────────

    def contains(self, key: Any) -> bool:
        return search.find(self._root, key)[0]

    def __contains__(self, key: Any) -> bool:
        return self.contains(key)

    def index_of(self, key: Any) -> int | None:
        """0-based rank of *key*, or None if absent."""
        found, rank = search.find(self._root, key)
        return rank if found else None

    def rank(self, key: Any) -> int:
        """Number of stored keys strictly smaller than *key*."""
        return search.find(self._root, key)[1]

    def nth(self, n: int) -> Any | None:
        """The *n*-th smallest key (0-based), or None if out of range."""
        node = search.select(self._root, n)
        return node.key if node is not None else None

    def __iter__(self) -> Iterator[Any]:
        for node in search.walk(self._root):
            yield node.key

    def height(self) -> int:
        return search.height(self._root)

    # ── introspection ─────────────────────────────────────────────────────

    @property
    def root(self) -> Node | None:
        return self._root

    @property
    def balancer(self) -> str:
        return self._balancer.name

    def __repr__(self) -> str:
        return f"Treap(len={len(self)}, balancer={self.balancer!r})"
