"""Whole-tree verification of the treap invariants."""

from __future__ import annotations

from treapset.core.errors import InvariantError
from treapset.core.node import Node, size
from treapset.core.search import walk
from treapset.core.treap import Treap


def check_invariants(tree: Treap | Node | None) -> int:
    """Verify order, heap and count invariants.

    Accepts a :class:`Treap` or a bare root node.  Raises
    :class:`InvariantError` on the first violation found and returns
    the number of nodes checked otherwise.
    """
    root = tree.root if isinstance(tree, Treap) else tree

    checked = 0
    previous: Node | None = None
    for node in walk(root):
        if previous is not None and not previous.key < node.key:
            raise InvariantError(
                f"order: {previous.key!r} is not strictly less than {node.key!r}"
            )
        for child in (node.left, node.right):
            if child is not None and child.priority < node.priority:
                raise InvariantError(
                    f"heap: child {child.key!r} has priority {child.priority} "
                    f"below parent {node.key!r} ({node.priority})"
                )
        expected = 1 + size(node.left) + size(node.right)
        if node.count != expected:
            raise InvariantError(
                f"count: node {node.key!r} caches {node.count}, subtree holds {expected}"
            )
        previous = node
        checked += 1
    return checked
