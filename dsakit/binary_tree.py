"""Binary trees built from token streams where -1 marks a missing child."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

_NO_NODE = -1


@dataclass
class BinaryTreeNode:
    """A binary tree node with optional left and right children."""

    data: int
    left: BinaryTreeNode | None = None
    right: BinaryTreeNode | None = None


def _take(stream: Iterator[int]) -> int:
    try:
        return int(next(stream))
    except StopIteration:
        raise ValueError("tree input ended early") from None


def build_level_order(values: Iterable[int]) -> BinaryTreeNode | None:
    """Build a tree from values given level by level: root, then each node's children.

    -1 stands for a missing node; a root of -1 gives an empty tree.
    """
    stream = iter(values)
    root_data = _take(stream)
    if root_data == _NO_NODE:
        return None
    root = BinaryTreeNode(root_data)
    pending = deque([root])
    while pending:
        front = pending.popleft()
        left_data = _take(stream)
        if left_data != _NO_NODE:
            front.left = BinaryTreeNode(left_data)
            pending.append(front.left)
        right_data = _take(stream)
        if right_data != _NO_NODE:
            front.right = BinaryTreeNode(right_data)
            pending.append(front.right)
    return root


def build_preorder(values: Iterable[int]) -> BinaryTreeNode | None:
    """Build a tree from values in preorder, -1 marking each missing subtree."""
    stream = iter(values)

    def build() -> BinaryTreeNode | None:
        data = _take(stream)
        if data == _NO_NODE:
            return None
        node = BinaryTreeNode(data)
        node.left = build()
        node.right = build()
        return node

    return build()


def _describe(node: BinaryTreeNode) -> str:
    line = f"{node.data}: "
    if node.left is not None:
        line += f"L{node.left.data} "
    if node.right is not None:
        line += f"R{node.right.data} "
    return line


def format_level_order(root: BinaryTreeNode | None) -> list[str]:
    """Describe each node and its children, one line per node, level by level."""
    lines: list[str] = []
    pending = deque([root] if root is not None else [])
    while pending:
        front = pending.popleft()
        lines.append(_describe(front))
        for child in (front.left, front.right):
            if child is not None:
                pending.append(child)
    return lines


def format_preorder(root: BinaryTreeNode | None) -> list[str]:
    """Describe each node and its children, one line per node, in preorder."""
    lines: list[str] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        lines.append(_describe(node))
        for child in (node.right, node.left):
            if child is not None:
                stack.append(child)
    return lines


def count_nodes(root: BinaryTreeNode | None) -> int:
    """Return the number of nodes in the tree."""
    return len(format_preorder(root))