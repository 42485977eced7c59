"""Binary tree helpers: diameter, traversals and BST lowest common ancestor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    data: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def _height_and_diameter(root: Optional[TreeNode]) -> tuple[int, int]:
    if root is None:
        return -1, 0
    left_height, left_diameter = _height_and_diameter(root.left)
    right_height, right_diameter = _height_and_diameter(root.right)
    through_root = left_height + right_height + 2
    return (
        max(left_height, right_height) + 1,
        max(through_root, left_diameter, right_diameter),
    )


def diameter(root: Optional[TreeNode]) -> int:
    """Number of edges on the longest path between any two nodes."""
    return _height_and_diameter(root)[1]


def inorder(root: Optional[TreeNode]) -> list[int]:
    """Values in left, node, right order."""
    if root is None:
        return []
    return [*inorder(root.left), root.data, *inorder(root.right)]


def postorder(root: Optional[TreeNode]) -> list[int]:
    """Values in left, right, node order."""
    if root is None:
        return []
    return [*postorder(root.left), *postorder(root.right), root.data]


def lowest_common_ancestor(root: Optional[TreeNode], n1: int, n2: int) -> Optional[TreeNode]:
    """Lowest node of a binary search tree lying between n1 and n2."""
    node = root
    while node is not None:
        if node.data > n1 and node.data > n2:
            node = node.left
        elif node.data < n1 and node.data < n2:
            node = node.right
        else:
            break
    return node