"""Read-only walks over node subtrees.

All functions here are iterative top-down passes; none of them mutate
the tree, so they never need to rebalance.
"""

from __future__ import annotations

from typing import Any, Iterator

from treapset.core.errors import UnorderedKeyError
from treapset.core.node import Node, size


def compare(key: Any, other: Any) -> int:
    """Three-way comparison that fails fast on keys without a total order.

    Returns ``-1``, ``0`` or ``1``.  Raises :class:`UnorderedKeyError`
    when *key* is neither less than, greater than nor equal to *other*
    (e.g. ``float("nan")``).
    """
    if key < other:
        return -1
    if other < key:
        return 1
    if key == other:
        return 0
    raise UnorderedKeyError(f"{key!r} and {other!r} are not totally ordered")


def find(node: Node | None, key: Any) -> tuple[bool, int]:
    """Locate *key* and return ``(found, rank)``.

    *rank* is the number of keys in the subtree strictly smaller than
    *key*, which is the 0-based index when *key* is present and the
    insertion point otherwise.
    """
    rank = 0
    while node is not None:
        c = compare(key, node.key)
        if c == 0:
            return True, rank + size(node.left)
        if c < 0:
            node = node.left
        else:
            rank += size(node.left) + 1
            node = node.right
    return False, rank


def select(node: Node | None, n: int) -> Node | None:
    """Return the node holding the *n*-th smallest key, or ``None``."""
    if n < 0 or n >= size(node):
        return None
    while node is not None:
        left_size = size(node.left)
        if n == left_size:
            return node
        if n < left_size:
            node = node.left
        else:
            n -= left_size + 1
            node = node.right
    return None


def walk(node: Node | None) -> Iterator[Node]:
    """In-order traversal with an explicit stack."""
    stack: list[Node] = []
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def height(node: Node | None) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if node is None:
        return 0
    best = 0
    stack = [(node, 1)]
    while stack:
        current, depth = stack.pop()
        best = max(best, depth)
        if current.left is not None:
            stack.append((current.left, depth + 1))
        if current.right is not None:
            stack.append((current.right, depth + 1))
    return best
