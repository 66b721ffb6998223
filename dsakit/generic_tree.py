"""Trees whose nodes hold any number of children."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass
class TreeNode:
    """A tree node with an ordered list of children."""

    data: int
    children: list[TreeNode] = field(default_factory=list)


def _take(stream: Iterator[int]) -> int:
    try:
        return int(next(stream))
    except StopIteration:
        raise ValueError("tree input ended early") from None


def build_level_order(values: Iterable[int]) -> TreeNode:
    """Build a tree from the root's data, then for each node level by level
    its number of children followed by their data."""
    stream = iter(values)
    root = TreeNode(_take(stream))
    pending = deque([root])
    while pending:
        front = pending.popleft()
        for _ in range(_take(stream)):
            child = TreeNode(_take(stream))
            front.children.append(child)
            pending.append(child)
    return root


def build_preorder(values: Iterable[int]) -> TreeNode:
    """Build a tree from each node's data and child count, subtrees in preorder."""
    stream = iter(values)

    def build() -> TreeNode:
        node = TreeNode(_take(stream))
        for _ in range(_take(stream)):
            node.children.append(build())
        return node

    return build()


def _walk(root: TreeNode | None) -> Iterator[TreeNode]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def format_level_order(root: TreeNode | None) -> list[str]:
    """Return one line per node, level by level: ``data:child,child``."""
    lines: list[str] = []
    pending = deque([root] if root is not None else [])
    while pending:
        front = pending.popleft()
        lines.append(f"{front.data}:" + ",".join(str(c.data) for c in front.children))
        pending.extend(front.children)
    return lines


def format_tree(root: TreeNode | None) -> list[str]:
    """Return one line per node in preorder: ``data: child child ``."""
    return [
        f"{node.data}: " + "".join(f"{child.data} " for child in node.children)
        for node in _walk(root)
    ]


def preorder(root: TreeNode | None) -> Iterator[int]:
    """Yield each node's data before that of its children."""
    return (node.data for node in _walk(root))


def postorder(root: TreeNode | None) -> Iterator[int]:
    """Yield each node's data after that of all its children."""
    order: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        order.append(node.data)
        stack.extend(node.children)
    yield from reversed(order)