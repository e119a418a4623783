"""Split/merge treap balancing by rank.

Both mutations first locate the key's rank with a read-only descent,
then cut the tree at that rank and glue the pieces back together by
priority.  Split and merge walk the tree with explicit stacks.
"""

from __future__ import annotations

from typing import Any

from treapset.balancing import register
from treapset.balancing.base import BaseBalancer
from treapset.core.node import Node, size
from treapset.core.search import find
from treapset.core.xorshift import XorShift32


def split(node: Node | None, k: int) -> tuple[Node | None, Node | None]:
    """Cut *node* into the first *k* keys and the rest."""
    # Nodes kept in the first part wait for a new right link, nodes in
    # the second part for a new left link.
    firsts: list[Node] = []
    seconds: list[Node] = []
    while node is not None:
        left_size = size(node.left)
        if k <= left_size:
            seconds.append(node)
            node = node.left
        else:
            k -= left_size + 1
            firsts.append(node)
            node = node.right

    first: Node | None = None
    for current in reversed(firsts):
        current.right = first
        current.update_count()
        first = current
    second: Node | None = None
    for current in reversed(seconds):
        current.left = second
        current.update_count()
        second = current
    return first, second


def merge(first: Node | None, second: Node | None) -> Node | None:
    """Join two treaps where every key of *first* precedes every key of *second*.

    The smaller priority becomes the root; ties keep *first* on top.
    """
    # (node, link_right) for every node whose child link is still open
    path: list[tuple[Node, bool]] = []
    while first is not None and second is not None:
        if first.priority <= second.priority:
            path.append((first, True))
            first = first.right
        else:
            path.append((second, False))
            second = second.left

    rest = first if first is not None else second
    while path:
        node, link_right = path.pop()
        if link_right:
            node.right = rest
        else:
            node.left = rest
        node.update_count()
        rest = node
    return rest


@register("split_merge")
class SplitMergeBalancer(BaseBalancer):
    """Rank split followed by priority merge."""

    def insert(self, root: Node | None, key: Any, rng: XorShift32) -> tuple[Node, bool]:
        found, rank = find(root, key)
        if found:
            return root, False
        first, second = split(root, rank)
        merged = merge(merge(first, Node(key, rng.next())), second)
        return merged, True

    def erase(self, root: Node | None, key: Any) -> tuple[Node | None, bool]:
        found, rank = find(root, key)
        if not found:
            return root, False
        first, second = split(root, rank + 1)
        first, _removed = split(first, rank)
        return merge(first, second), True
