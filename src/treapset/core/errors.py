"""Exceptions raised by the treap core."""

from __future__ import annotations


class UnorderedKeyError(TypeError):
    """A key compared neither less, greater nor equal to a stored key."""


class InvariantError(AssertionError):
    """A structural invariant of the tree does not hold."""
