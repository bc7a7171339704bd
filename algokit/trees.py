"""Binary tree nodes, construction, traversal and path queries."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: Any = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def tree_from_level_order(values: Iterable[Any]) -> Optional[TreeNode]:
    """Build a tree from level-order values, with None marking a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    pending: deque[TreeNode] = deque([root])
    while pending:
        node = pending.popleft()
        for side in ("left", "right"):
            value = next(items, None)
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                pending.append(child)
    return root


def is_sum_property(root: Optional[TreeNode]) -> bool:
    """Whether every inner node's value equals the sum of its children's values."""
    if root is None or (root.left is None and root.right is None):
        return True
    left = root.left.val if root.left is not None else 0
    right = root.right.val if root.right is not None else 0
    if root.val != left + right:
        return False
    return is_sum_property(root.left) and is_sum_property(root.right)


def _inorder_index(inorder: Sequence[Any], other: Sequence[Any]) -> dict[Any, int]:
    if len(inorder) != len(other):
        raise ValueError("traversals must have the same length")
    return {value: i for i, value in enumerate(inorder)}


def build_from_preorder_inorder(
    preorder: Sequence[Any], inorder: Sequence[Any]
) -> Optional[TreeNode]:
    """Rebuild a tree of distinct values from its preorder and inorder traversals."""
    index = _inorder_index(inorder, preorder)
    roots = iter(preorder)

    def build(low: int, high: int) -> Optional[TreeNode]:
        if low > high:
            return None
        value = next(roots)
        if value not in index:
            raise ValueError(f"value {value!r} missing from inorder traversal")
        middle = index[value]
        node = TreeNode(value)
        node.left = build(low, middle - 1)
        node.right = build(middle + 1, high)
        return node

    return build(0, len(inorder) - 1)


def build_from_inorder_postorder(
    inorder: Sequence[Any], postorder: Sequence[Any]
) -> Optional[TreeNode]:
    """Rebuild a tree of distinct values from its inorder and postorder traversals."""
    index = _inorder_index(inorder, postorder)
    roots = iter(reversed(postorder))

    def build(low: int, high: int) -> Optional[TreeNode]:
        if low > high:
            return None
        value = next(roots)
        if value not in index:
            raise ValueError(f"value {value!r} missing from inorder traversal")
        middle = index[value]
        node = TreeNode(value)
        node.right = build(middle + 1, high)
        node.left = build(low, middle - 1)
        return node

    return build(0, len(inorder) - 1)


def level_order_bottom(root: Optional[TreeNode]) -> list[list[Any]]:
    """Values level by level, from the deepest level up to the root."""
    levels: list[list[Any]] = []
    if root is None:
        return levels
    pending: deque[TreeNode] = deque([root])
    while pending:
        level = []
        for _ in range(len(pending)):
            node = pending.popleft()
            level.append(node.val)
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
        levels.append(level)
    levels.reverse()
    return levels


def flatten(root: Optional[TreeNode]) -> None:
    """Flatten the tree in place into a right-leaning chain in preorder."""
    current = root
    while current is not None:
        if current.left is not None:
            tail = current.left
            while tail.right is not None:
                tail = tail.right
            tail.right = current.right
            current.right = current.left
            current.left = None
        current = current.right


def _morris(root: Optional[TreeNode], preorder: bool) -> list[Any]:
    visited: list[Any] = []
    current = root
    while current is not None:
        if current.left is None:
            visited.append(current.val)
            current = current.right
            continue
        prev = current.left
        while prev.right is not None and prev.right is not current:
            prev = prev.right
        if prev.right is None:
            prev.right = current
            if preorder:
                visited.append(current.val)
            current = current.left
        else:
            prev.right = None
            if not preorder:
                visited.append(current.val)
            current = current.right
    return visited


def morris_inorder(root: Optional[TreeNode]) -> list[Any]:
    """Inorder values using constant extra space; the tree is left unchanged."""
    return _morris(root, preorder=False)


def morris_preorder(root: Optional[TreeNode]) -> list[Any]:
    """Preorder values using constant extra space; the tree is left unchanged."""
    return _morris(root, preorder=True)


def _path_to(root: Optional[TreeNode], target: Any) -> list[Any]:
    path: list[Any] = []

    def search(node: Optional[TreeNode]) -> bool:
        if node is None:
            return False
        path.append(node.val)
        if node.val == target or search(node.left) or search(node.right):
            return True
        path.pop()
        return False

    if not search(root):
        raise ValueError(f"value {target!r} not found in tree")
    return path


def path_between(root: Optional[TreeNode], p: Any, q: Any) -> list[Any]:
    """Values on the path from the node holding ``p`` to the node holding ``q``."""
    to_p = _path_to(root, p)
    to_q = _path_to(root, q)
    common = 0
    for a, b in zip(to_p, to_q):
        if a != b:
            break
        common += 1
    return list(reversed(to_p[common:])) + to_q[common - 1:]


def has_path_sum(root: Optional[TreeNode], target_sum: Any) -> bool:
    """Whether some root-to-leaf path has values adding up to ``target_sum``."""
    if root is None:
        return False
    if root.left is None and root.right is None:
        return root.val == target_sum
    remaining = target_sum - root.val
    return has_path_sum(root.left, remaining) or has_path_sum(root.right, remaining)


def sum_numbers(root: Optional[TreeNode]) -> int:
    """Sum of the numbers spelled by the digits on each root-to-leaf path."""

    def total(node: Optional[TreeNode], number: int) -> int:
        if node is None:
            return 0
        number = number * 10 + node.val
        if node.left is None and node.right is None:
            return number
        return total(node.left, number) + total(node.right, number)

    return total(root, 0)