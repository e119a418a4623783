"""Rotation-based treap balancing.

Insertion descends by key and, while unwinding, rotates a freshly
inserted child above its parent whenever the child's priority is
smaller.  Erasure promotes the in-order successor's *key* into a
two-child node, so priorities stay attached to their original nodes.

Descents record the visited nodes on an explicit stack and the
unwinding pops it, so depth is bounded by memory rather than by the
interpreter's recursion limit.
"""

from __future__ import annotations

from typing import Any

from treapset.balancing import register
from treapset.balancing.base import BaseBalancer
from treapset.core.node import Node
from treapset.core.search import compare
from treapset.core.xorshift import XorShift32


def rotate_right(node: Node) -> Node:
    """Lift ``node.left`` into *node*'s position.  *node* must have a left child."""
    pivot = node.left
    node.left = pivot.right
    node.update_count()
    pivot.right = node
    pivot.update_count()
    return pivot


def rotate_left(node: Node) -> Node:
    """Lift ``node.right`` into *node*'s position.  *node* must have a right child."""
    pivot = node.right
    node.right = pivot.left
    node.update_count()
    pivot.left = node
    pivot.update_count()
    return pivot


def erase_min(node: Node) -> tuple[Node | None, Any]:
    """Unlink the leftmost node of *node*'s subtree.

    Returns ``(new_subtree, removed_key)``.
    """
    if node.left is None:
        return node.right, node.key

    path: list[Node] = []
    current = node
    while current.left is not None:
        path.append(current)
        current = current.left
    path[-1].left = current.right
    for ancestor in reversed(path):
        ancestor.update_count()
    return node, current.key


@register("rotation")
class RotationBalancer(BaseBalancer):
    """Insert with single rotations, erase by successor promotion."""

    def insert(self, root: Node | None, key: Any, rng: XorShift32) -> tuple[Node, bool]:
        # (node, went_left) for every node above the empty slot
        path: list[tuple[Node, bool]] = []
        node = root
        while node is not None:
            c = compare(key, node.key)
            if c == 0:
                return root, False
            path.append((node, c < 0))
            node = node.left if c < 0 else node.right

        child = Node(key, rng.next())
        while path:
            parent, went_left = path.pop()
            if went_left:
                parent.left = child
                if child.priority < parent.priority:
                    child = rotate_right(parent)
                    continue
            else:
                parent.right = child
                if child.priority < parent.priority:
                    child = rotate_left(parent)
                    continue
            parent.update_count()
            child = parent
        return child, True

    def erase(self, root: Node | None, key: Any) -> tuple[Node | None, bool]:
        path: list[tuple[Node, bool]] = []
        node = root
        while node is not None:
            c = compare(key, node.key)
            if c == 0:
                break
            path.append((node, c < 0))
            node = node.left if c < 0 else node.right
        else:
            return root, False

        if node.left is None:
            replacement = node.right
        elif node.right is None:
            replacement = node.left
        else:
            node.right, node.key = erase_min(node.right)
            node.update_count()
            replacement = node

        while path:
            parent, went_left = path.pop()
            if went_left:
                parent.left = replacement
            else:
                parent.right = replacement
            parent.update_count()
            replacement = parent
        return replacement, True
