"""Binary search trees and randomly shaped binary trees with traversals."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass
class Node:
    """A binary tree node."""

    value: int
    left: Node | None = None
    right: Node | None = None


def inorder(node: Node | None) -> Iterator[int]:
    """Yield values left subtree first, then the node, then the right subtree."""
    stack: list[Node] = []
    current = node
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        yield current.value
        current = current.right


def preorder(node: Node | None) -> Iterator[int]:
    """Yield each node's value before those of its subtrees."""
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        yield current.value
        if current.right is not None:
            stack.append(current.right)
        if current.left is not None:
            stack.append(current.left)


def postorder(node: Node | None) -> Iterator[int]:
    """Yield each node's value after those of its subtrees."""
    reversed_order: list[int] = []
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        reversed_order.append(current.value)
        if current.left is not None:
            stack.append(current.left)
        if current.right is not None:
            stack.append(current.right)
    yield from reversed(reversed_order)


class BinarySearchTree:
    """Binary search tree; equal values go to the right."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Node | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        """Add ``value`` at its ordered place."""
        if self.root is None:
            self.root = Node(value)
            return
        current = self.root
        while True:
            if value < current.value:
                if current.left is None:
                    current.left = Node(value)
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = Node(value)
                    return
                current = current.right

    def __contains__(self, key: object) -> bool:
        current = self.root
        while current is not None:
            if current.value == key:
                return True
            current = current.left if key < current.value else current.right  # type: ignore[operator]
        return False

    def __iter__(self) -> Iterator[int]:
        return inorder(self.root)


class RandomBinaryTree:
    """Binary tree where each new value walks down a randomly chosen side."""

    def __init__(
        self, values: Iterable[int] = (), rng: random.Random | None = None
    ) -> None:
        self.root: Node | None = None
        self._rng = rng if rng is not None else random.Random()
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        """Add ``value`` as a new leaf at the end of a random walk."""
        if self.root is None:
            self.root = Node(value)
            return
        current = self.root
        while True:
            if self._rng.randrange(2) == 0:
                if current.left is None:
                    current.left = Node(value)
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = Node(value)
                    return
                current = current.right

    def __contains__(self, key: object) -> bool:
        return any(value == key for value in preorder(self.root))

    def height(self) -> int:
        """Return the number of edges on the longest root-to-leaf path; -1 if empty."""
        if self.root is None:
            return -1
        deepest = 0
        stack = [(self.root, 0)]
        while stack:
            node, depth = stack.pop()
            deepest = max(deepest, depth)
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, depth + 1))
        return deepest