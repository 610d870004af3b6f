"""Puzzles over binary trees."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TreeNode:
    """A binary tree node."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def remove_leaf_nodes(root, target):
    """Remove leaves equal to target, repeatedly, as new leaves appear."""
    if root is None:
        return None
    root.left = remove_leaf_nodes(root.left, target)
    root.right = remove_leaf_nodes(root.right, target)
    if root.left is None and root.right is None and root.val == target:
        return None
    return root


def evaluate_tree(root):
    """Evaluate a tree of 0/1 leaves with OR (2) and AND (3) inner nodes."""
    if root.left is None and root.right is None:
        return bool(root.val)
    if root.val == 2:
        return evaluate_tree(root.left) or evaluate_tree(root.right)
    return evaluate_tree(root.left) and evaluate_tree(root.right)