"""Binary trees with constant-space traversals, and a binary search tree."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding one value and links to two children."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


class BinaryTree:
    """A binary tree whose depth-first traversals use Morris threading.

    The traversals temporarily thread the tree and restore it before returning,
    so no stack or recursion is needed.
    """

    def __init__(self, root: TreeNode | None = None) -> None:
        self.root = root

    def inorder(self) -> list[Any]:
        """Return the values in left, node, right order."""
        result: list[Any] = []
        node = self.root
        while node is not None:
            if node.left is None:
                result.append(node.data)
                node = node.right
                continue
            predecessor = node.left
            while predecessor.right is not None and predecessor.right is not node:
                predecessor = predecessor.right
            if predecessor.right is None:
                predecessor.right = node
                node = node.left
            else:
                result.append(node.data)
                predecessor.right = None
                node = node.right
        return result

    def preorder(self) -> list[Any]:
        """Return the values in node, left, right order."""
        result: list[Any] = []
        node = self.root
        while node is not None:
            if node.left is None:
                result.append(node.data)
                node = node.right
                continue
            predecessor = node.left
            while predecessor.right is not None and predecessor.right is not node:
                predecessor = predecessor.right
            if predecessor.right is None:
                result.append(node.data)
                predecessor.right = node
                node = node.left
            else:
                predecessor.right = None
                node = node.right
        return result

    def postorder(self) -> list[Any]:
        """Return the values in left, right, node order."""
        # Walk node, right, left with mirrored threading, then reverse.
        result: list[Any] = []
        node = self.root
        while node is not None:
            if node.right is None:
                result.append(node.data)
                node = node.left
                continue
            successor = node.right
            while successor.left is not None and successor.left is not node:
                successor = successor.left
            if successor.left is None:
                result.append(node.data)
                successor.left = node
                node = node.right
            else:
                successor.left = None
                node = node.left
        result.reverse()
        return result

    def level_order(self) -> list[Any]:
        """Return the values level by level, left to right."""
        if self.root is None:
            return []
        result: list[Any] = []
        pending = deque([self.root])
        while pending:
            node = pending.popleft()
            result.append(node.data)
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
        return result


class BST(BinaryTree):
    """A binary search tree of distinct values."""

    def insert(self, data: Any) -> TreeNode:
        """Insert ``data`` and return its node; an existing equal value is left as is."""
        if self.root is None:
            self.root = TreeNode(data)
            return self.root
        node = self.root
        while True:
            if data < node.data:
                if node.left is None:
                    node.left = TreeNode(data)
                    return node.left
                node = node.left
            elif data > node.data:
                if node.right is None:
                    node.right = TreeNode(data)
                    return node.right
                node = node.right
            else:
                return node

    def remove(self, data: Any) -> None:
        """Remove ``data`` from the tree if present."""
        parent: TreeNode | None = None
        node = self.root
        while node is not None and data != node.data:
            parent = node
            node = node.right if data > node.data else node.left
        if node is None:
            return

        if node.left is not None and node.right is not None:
            # Take the in-order successor's value, then remove the successor,
            # which has no left child.
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.data = successor.data
            parent, node = successor_parent, successor

        child = node.left if node.left is not None else node.right
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def __contains__(self, data: object) -> bool:
        node = self.root
        while node is not None:
            if data == node.data:
                return True
            node = node.left if data < node.data else node.right
        return False