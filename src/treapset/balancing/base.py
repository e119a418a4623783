"""Abstract balancing strategy."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from treapset.core.node import Node
from treapset.core.xorshift import XorShift32


class BaseBalancer(ABC):
    """Interface that every treap balancing strategy must implement.

    Strategies are stateless: they consume a subtree and return the
    rebuilt subtree, never holding on to nodes between calls.
    """

    name: str = ""

    @abstractmethod
    def insert(self, root: Node | None, key: Any, rng: XorShift32) -> tuple[Node, bool]:
        """Insert *key* under *root*.

        Returns ``(new_root, inserted)``.  When *key* is already present
        the subtree is returned unchanged, ``inserted`` is False and
        *rng* is not advanced.
        """

    @abstractmethod
    def erase(self, root: Node | None, key: Any) -> tuple[Node | None, bool]:
        """Remove *key* from under *root*.

        Returns ``(new_root, removed)``; an absent key is a no-op.
        """
