"""
Binary search tree.

Values only need to support ``<`` and ``==``. Values smaller than a node go
left; equal or greater values go right. The tree is the one structure in
the toolkit that serializes: ``serialize`` writes a pre-order walk with
``#`` for missing children, and ``deserialize`` rebuilds it with the
``parse`` callable supplied at construction.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from src.structures.queue import Queue

T = TypeVar("T")

NULL_MARKER = "#"
SEPARATOR = ","


@dataclass(eq=False)
class TreeNode(Generic[T]):
    """Tree node holding one value and two optional children."""

    data: T
    left: TreeNode[T] | None = None
    right: TreeNode[T] | None = None

    def __str__(self) -> str:
        return str(self.data)


class BinaryTree(Generic[T]):
    """Unbalanced binary search tree.

    Usage:
        tree = BinaryTree(parse=int, value=10)
        tree.insert(5)
        tree.insert(15)
        tree.serialize()           # "10,5,#,#,15,#,#"
    """

    def __init__(self, parse: Callable[[str], T], value: T | None = None) -> None:
        """Initialize the tree.

        Args:
            parse: Converts one serialized token back into a value
            value: Optional root value
        """
        self._parse = parse
        self.root: TreeNode[T] | None = TreeNode(value) if value is not None else None

    # =========================================================================
    # Insertion / Deletion
    # =========================================================================

    def insert(self, value: T) -> None:
        new_node = TreeNode(value)
        if self.root is None:
            self.root = new_node
            return

        current = self.root
        while True:
            if _less(value, current.data):
                if current.left is None:
                    current.left = new_node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = new_node
                    return
                current = current.right

    def delete(self, value: T) -> None:
        """Remove one occurrence of ``value``; unknown values are ignored."""
        parent: TreeNode[T] | None = None
        node = self.root
        while node is not None:
            if _less(value, node.data):
                parent, node = node, node.left
            elif _less(node.data, value):
                parent, node = node, node.right
            else:
                break
        if node is None:
            return

        if node.left is not None and node.right is not None:
            # Two children: copy the in-order successor up, then unlink it
            successor_parent, successor = node, node.right
            while successor.left is not None:
                successor_parent, successor = successor, successor.left
            node.data = successor.data
            parent, node = successor_parent, successor

        child = node.left if node.left is not None else node.right
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    # =========================================================================
    # Queries
    # =========================================================================

    def contains(self, value: T) -> bool:
        current = self.root
        while current is not None:
            if _less(value, current.data):
                current = current.left
            elif _less(current.data, value):
                current = current.right
            else:
                return True
        return False

    def find_min(self, node: TreeNode[T] | None = None) -> T | None:
        current = node if node is not None else self.root
        if current is None:
            return None
        while current.left is not None:
            current = current.left
        return current.data

    def find_max(self, node: TreeNode[T] | None = None) -> T | None:
        current = node if node is not None else self.root
        if current is None:
            return None
        while current.right is not None:
            current = current.right
        return current.data

    def height(self) -> int:
        """Edges on the longest root-to-leaf path; -1 for an empty tree."""
        return _height(self.root)

    def is_balanced(self) -> bool:
        """True when no node's subtrees differ in height by more than one."""
        return _is_balanced(self.root)

    def count_nodes(self) -> int:
        return sum(1 for _ in self.traverse_in_order())

    def __len__(self) -> int:
        return self.count_nodes()

    # =========================================================================
    # Traversal
    # =========================================================================

    def traverse_in_order(self) -> list[TreeNode[T]]:
        """Return the nodes in sorted order."""
        result: list[TreeNode[T]] = []
        stack: list[TreeNode[T]] = []
        current = self.root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            result.append(current)
            current = current.right
        return result

    def bfs(self) -> list[T]:
        """Return the values level by level, left to right."""
        result: list[T] = []
        queue: Queue[TreeNode[T]] = Queue()
        if self.root is not None:
            queue.enqueue(self.root)

        node = queue.dequeue()
        while node is not None:
            result.append(node.data)
            if node.left is not None:
                queue.enqueue(node.left)
            if node.right is not None:
                queue.enqueue(node.right)
            node = queue.dequeue()
        return result

    # =========================================================================
    # Serialization
    # =========================================================================

    def serialize(self) -> str:
        tokens: list[str] = []
        stack: list[TreeNode[T] | None] = [self.root]
        while stack:
            node = stack.pop()
            if node is None:
                tokens.append(NULL_MARKER)
                continue
            tokens.append(str(node.data))
            stack.append(node.right)
            stack.append(node.left)
        return SEPARATOR.join(tokens)

    def deserialize(self, data: str) -> None:
        """Replace the tree with the one encoded in ``data``.

        Missing trailing tokens read as empty children; surplus tokens are
        ignored.
        """
        root: TreeNode[T] | None = None
        # Child slots still to fill, next one on top: (parent, is_left)
        slots: list[tuple[TreeNode[T] | None, bool]] = [(None, True)]
        for token in data.split(SEPARATOR) if data else []:
            if not slots:
                break
            parent, is_left = slots.pop()
            if token == NULL_MARKER:
                continue
            node = TreeNode(self._parse(token))
            if parent is None:
                root = node
            elif is_left:
                parent.left = node
            else:
                parent.right = node
            slots.append((node, False))
            slots.append((node, True))
        self.root = root


def _less(a: Any, b: Any) -> bool:
    return a < b


def _height(root: TreeNode[Any] | None) -> int:
    height = -1
    level = [root] if root is not None else []
    while level:
        height += 1
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return height


def _is_balanced(root: TreeNode[Any] | None) -> bool:
    """Post-order walk comparing subtree heights."""
    heights: dict[TreeNode[Any] | None, int] = {None: -1}
    stack: list[tuple[TreeNode[Any], bool]] = []
    if root is not None:
        stack.append((root, False))

    while stack:
        node, children_done = stack.pop()
        if not children_done:
            stack.append((node, True))
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, False))
            continue
        left, right = heights[node.left], heights[node.right]
        if abs(left - right) > 1:
            return False
        heights[node] = 1 + max(left, right)
    return True
