"""Binary search trees: construction from traversals, lookups and edits."""

from __future__ import annotations

from typing import Iterator, Optional, Sequence

from algokit.tree import TreeNode


def build_tree(preorder: Sequence[int], inorder: Sequence[int]) -> Optional[TreeNode]:
    """Rebuild a binary tree of distinct values from its pre-order and in-order listings."""
    if len(preorder) != len(inorder):
        raise ValueError("traversals differ in length")
    position = {value: i for i, value in enumerate(inorder)}
    values = iter(preorder)

    def build(low: int, high: int) -> Optional[TreeNode]:
        if low > high:
            return None
        value = next(values)
        try:
            middle = position[value]
        except KeyError:
            raise ValueError(f"value {value!r} is missing from the in-order listing") from None
        node = TreeNode(value)
        node.left = build(low, middle - 1)
        node.right = build(middle + 1, high)
        return node

    return build(0, len(inorder) - 1)


def _inorder_values(root: Optional[TreeNode]) -> Iterator[int]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.val
        node = node.right


def kth_smallest(root: Optional[TreeNode], k: int) -> int:
    """Return the ``k``-th smallest value (counting from 1) of the search tree ``root``."""
    if k < 1:
        raise ValueError("k must be at least 1")
    for rank, value in enumerate(_inorder_values(root), start=1):
        if rank == k:
            return value
    raise ValueError(f"the tree holds fewer than {k} values")


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Return the deepest node of the search tree ``root`` that has both ``p`` and ``q`` below it."""
    low, high = sorted((p.val, q.val))
    node = root
    while node is not None:
        if high < node.val:
            node = node.left
        elif low > node.val:
            node = node.right
        else:
            return node
    return None


def delete_node(root: Optional[TreeNode], key: int) -> Optional[TreeNode]:
    """Remove ``key`` from the search tree ``root`` and return the new root."""
    if root is None:
        return None
    if key < root.val:
        root.left = delete_node(root.left, key)
    elif key > root.val:
        root.right = delete_node(root.right, key)
    else:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        successor = root.right
        while successor.left is not None:
            successor = successor.left
        root.val = successor.val
        root.right = delete_node(root.right, successor.val)
    return root


def insert_into_bst(root: Optional[TreeNode], val: int) -> TreeNode:
    """Insert ``val`` into the search tree ``root`` and return the root; duplicates are ignored."""
    if root is None:
        return TreeNode(val)
    if val < root.val:
        root.left = insert_into_bst(root.left, val)
    elif val > root.val:
        root.right = insert_into_bst(root.right, val)
    return root


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """Tell whether every node's value lies strictly between those of its left and right subtrees."""

    def within(node: Optional[TreeNode], low: Optional[int], high: Optional[int]) -> bool:
        if node is None:
            return True
        if low is not None and node.val <= low:
            return False
        if high is not None and node.val >= high:
            return False
        return within(node.left, low, node.val) and within(node.right, node.val, high)

    return within(root, None, None)