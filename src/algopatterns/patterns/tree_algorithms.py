"""
Tree Algorithms
===============
Traversal, search and structural checks on binary trees.

Traversals:
    - Inorder (left, root, right): ascending order for a BST
    - Preorder (root, left, right): copying a tree, prefix expressions
    - Postorder (left, right, root): deleting a tree, postfix expressions
    - Level order: breadth-first, one list per depth

Complexity:
    O(h) per BST operation, h being the height: O(log n) balanced, O(n) skewed.
    Traversals are O(n) time and O(h) stack space.
"""
from __future__ import annotations

from collections import deque
from typing import Any, Iterable, Optional

from algopatterns.registry import register


class TreeNode:
    """Binary tree node."""

    def __init__(
        self,
        val: Any,
        left: Optional[TreeNode] = None,
        right: Optional[TreeNode] = None,
    ) -> None:
        self.val = val
        self.left = left
        self.right = right

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(val={self.val!r})"


@register(time="O(n)", space="O(h)")
def inorder_traversal(root: Optional[TreeNode]) -> list[Any]:
    result: list[Any] = []

    def traverse(node: Optional[TreeNode]) -> None:
        if node is None:
            return
        traverse(node.left)
        result.append(node.val)
        traverse(node.right)

    traverse(root)
    return result


@register(time="O(n)", space="O(h)")
def preorder_traversal(root: Optional[TreeNode]) -> list[Any]:
    result: list[Any] = []

    def traverse(node: Optional[TreeNode]) -> None:
        if node is None:
            return
        result.append(node.val)
        traverse(node.left)
        traverse(node.right)

    traverse(root)
    return result


@register(time="O(n)", space="O(h)")
def postorder_traversal(root: Optional[TreeNode]) -> list[Any]:
    result: list[Any] = []

    def traverse(node: Optional[TreeNode]) -> None:
        if node is None:
            return
        traverse(node.left)
        traverse(node.right)
        result.append(node.val)

    traverse(root)
    return result


@register(time="O(n)", space="O(w)")
def level_order_traversal(root: Optional[TreeNode]) -> list[list[Any]]:
    """Values grouped per depth, top to bottom."""
    if root is None:
        return []

    levels: list[list[Any]] = []
    queue = deque([root])

    while queue:
        level = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.val)
            if node.left:
                queue.append(node.left)
            if node.right:
                queue.append(node.right)
        levels.append(level)

    return levels


@register(time="O(h)", space="O(h)")
def search_bst(root: Optional[TreeNode], val: Any) -> Optional[TreeNode]:
    """Node holding `val`, or None."""
    if root is None or root.val == val:
        return root
    if val < root.val:
        return search_bst(root.left, val)
    return search_bst(root.right, val)


@register(time="O(h)", space="O(h)")
def insert_into_bst(root: Optional[TreeNode], val: Any) -> TreeNode:
    """Insert `val` and return the (possibly new) root. Duplicates go right."""
    if root is None:
        return TreeNode(val)
    if val < root.val:
        root.left = insert_into_bst(root.left, val)
    else:
        root.right = insert_into_bst(root.right, val)
    return root


@register(time="O(n * h)", space="O(n)")
def build_bst(values: Iterable[Any]) -> Optional[TreeNode]:
    """BST from repeated insertion, in the given order."""
    root: Optional[TreeNode] = None
    for value in values:
        root = insert_into_bst(root, value)
    return root


@register(time="O(h)", space="O(1)")
def find_min(root: Optional[TreeNode]) -> Any:
    """Smallest value of a BST, or None for an empty tree."""
    if root is None:
        return None

    current = root
    while current.left:
        current = current.left
    return current.val


@register(time="O(n)", space="O(h)")
def lowest_common_ancestor(
    root: Optional[TreeNode],
    p: TreeNode,
    q: TreeNode,
) -> Optional[TreeNode]:
    """Deepest node having both `p` and `q` as descendants (a node descends from itself)."""
    if root is None or root is p or root is q:
        return root

    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)

    if left and right:
        return root
    return left or right


@register(time="O(n)", space="O(h)")
def is_balanced(root: Optional[TreeNode]) -> bool:
    """True if the subtree heights differ by at most one at every node."""

    def height(node: Optional[TreeNode]) -> int:
        # -1 marks an unbalanced subtree
        if node is None:
            return 0

        left = height(node.left)
        if left == -1:
            return -1
        right = height(node.right)
        if right == -1:
            return -1

        if abs(left - right) > 1:
            return -1
        return max(left, right) + 1

    return height(root) != -1
