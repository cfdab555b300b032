"""A simple tree whose nodes know their parent."""

from __future__ import annotations

import weakref
from typing import Generic, TypeVar

from advent2024.common import check

T = TypeVar("T")


class TreeNode(Generic[T]):
    """A node holding a value, its children and a weak link to its parent."""

    def __init__(self, value: T, parent: TreeNode[T] | None = None) -> None:
        self.value = value
        self.children: list[TreeNode[T]] = []
        self._parent = weakref.ref(parent) if parent is not None else None

    @property
    def parent(self) -> TreeNode[T] | None:
        return self._parent() if self._parent is not None else None

    def add_child(self, value: T) -> TreeNode[T]:
        """Append a child holding ``value`` and return it."""
        child = TreeNode(value, self)
        self.children.append(child)
        return child

    def child(self, index: int) -> TreeNode[T]:
        check(0 <= index < len(self.children), "child: bounds check failure")
        return self.children[index]


class Tree(Generic[T]):
    """A tree with a single root node."""

    def __init__(self, root: T) -> None:
        self.root: TreeNode[T] = TreeNode(root)