"""Binary and n-ary tree puzzles: balance checks and post-order traversal."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


@dataclass(eq=False)
class NaryNode:
    """A node of a tree with any number of children."""

    val: int = 0
    children: list[NaryNode] = field(default_factory=list)


def _binary_postorder_nodes(root: TreeNode | None) -> list[TreeNode]:
    if root is None:
        return []
    stack = [root]
    visited: list[TreeNode] = []
    while stack:
        node = stack.pop()
        visited.append(node)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    visited.reverse()
    return visited


def is_balanced(root: TreeNode | None) -> bool:
    """True when no node's subtrees differ in height by more than one."""
    heights: dict[TreeNode, int] = {}
    for node in _binary_postorder_nodes(root):
        left = heights[node.left] if node.left is not None else 0
        right = heights[node.right] if node.right is not None else 0
        if abs(left - right) > 1:
            return False
        heights[node] = 1 + max(left, right)
    return True


def postorder_traversal(root: TreeNode | None) -> list[int]:
    """Values of a binary tree in left, right, root order."""
    return [node.val for node in _binary_postorder_nodes(root)]


def nary_postorder(root: NaryNode | None) -> list[int]:
    """Values of an n-ary tree with every node after its children."""
    if root is None:
        return []
    stack = [root]
    values: list[int] = []
    while stack:
        node = stack.pop()
        values.append(node.val)
        stack.extend(node.children)
    values.reverse()
    return values