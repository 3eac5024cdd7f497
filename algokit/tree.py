"""Binary trees: construction, traversals and recursive queries."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def tree_from_list(values: Sequence[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from its level-order listing, with None marking missing children."""
    if not values or values[0] is None:
        return None
    items = iter(values)
    root = TreeNode(next(items))
    pending = deque([root])
    while pending:
        node = pending.popleft()
        for side in ("left", "right"):
            try:
                value = next(items)
            except StopIteration:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                pending.append(child)
    return root


def tree_to_list(root: Optional[TreeNode]) -> list[Optional[int]]:
    """Return the level-order listing of ``root``, without trailing None entries."""
    listing: list[Optional[int]] = []
    queue: deque[Optional[TreeNode]] = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            listing.append(None)
            continue
        listing.append(node.val)
        queue.append(node.left)
        queue.append(node.right)
    while listing and listing[-1] is None:
        listing.pop()
    return listing


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Tell whether two trees have the same shape and values."""
    if p is None and q is None:
        return True
    if p is None or q is None:
        return False
    return (
        p.val == q.val
        and is_same_tree(p.left, q.left)
        and is_same_tree(p.right, q.right)
    )


def _levels(root: Optional[TreeNode]) -> Iterator[list[int]]:
    level = [root] if root else []
    while level:
        yield [node.val for node in level]
        level = [child for node in level for child in (node.left, node.right) if child]


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return the values of ``root``, level by level, left to right."""
    return list(_levels(root))


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(max_depth(root.left), max_depth(root.right)) + 1


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Tell whether every node's subtrees differ in height by at most one."""

    def height(node: Optional[TreeNode]) -> Optional[int]:
        if node is None:
            return 0
        left = height(node.left)
        right = height(node.right)
        if left is None or right is None or abs(left - right) > 1:
            return None
        return max(left, right) + 1

    return height(root) is not None


def max_path_sum(root: Optional[TreeNode]) -> int:
    """Return the largest sum along any path between two nodes of a non-empty tree."""
    if root is None:
        raise ValueError("an empty tree has no path")
    best = root.val

    def gain(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = max(0, gain(node.left))
        right = max(0, gain(node.right))
        best = max(best, node.val + left + right)
        return node.val + max(left, right)

    gain(root)
    return best


def remove_leaf_nodes(root: Optional[TreeNode], target: int) -> Optional[TreeNode]:
    """Repeatedly remove leaves holding ``target``; return the new root, possibly None."""
    if root is None:
        return None
    root.left = remove_leaf_nodes(root.left, target)
    root.right = remove_leaf_nodes(root.right, target)
    if root.left is None and root.right is None and root.val == target:
        return None
    return root


def _preorder(node: Optional[TreeNode]) -> Iterator[int]:
    if node is not None:
        yield node.val
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node: Optional[TreeNode]) -> Iterator[int]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.val
        yield from _inorder(node.right)


def _postorder(node: Optional[TreeNode]) -> Iterator[int]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.val


def preorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return the values of ``root`` in pre-order."""
    return list(_preorder(root))


def inorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return the values of ``root`` in in-order."""
    return list(_inorder(root))


def postorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return the values of ``root`` in post-order."""
    return list(_postorder(root))


def good_nodes(root: Optional[TreeNode]) -> int:
    """Count nodes whose value is at least every value on the path from the root."""
    if root is None:
        return 0

    def count(node: Optional[TreeNode], highest: int) -> int:
        if node is None:
            return 0
        highest = max(highest, node.val)
        good = 1 if node.val >= highest else 0
        return good + count(node.left, highest) + count(node.right, highest)

    return count(root, root.val)


def right_side_view(root: Optional[TreeNode]) -> list[int]:
    """Return the rightmost value of each level, top to bottom."""
    return [level[-1] for level in _levels(root)]


def invert_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Mirror ``root`` in place and return it."""
    if root is not None:
        root.left, root.right = root.right, root.left
        invert_tree(root.left)
        invert_tree(root.right)
    return root


def rob(root: Optional[TreeNode]) -> int:
    """Return the largest sum of values taken from nodes no two of which are parent and child."""

    def best(node: Optional[TreeNode]) -> tuple[int, int]:
        """Return (best with node taken, best with node skipped)."""
        if node is None:
            return 0, 0
        left_take, left_skip = best(node.left)
        right_take, right_skip = best(node.right)
        take = node.val + left_skip + right_skip
        skip = max(left_take, left_skip) + max(right_take, right_skip)
        return take, skip

    return max(best(root))


def diameter_of_binary_tree(root: Optional[TreeNode]) -> int:
    """Return the number of edges on the longest path between any two nodes."""
    longest = 0

    def height(node: Optional[TreeNode]) -> int:
        nonlocal longest
        if node is None:
            return 0
        left = height(node.left)
        right = height(node.right)
        longest = max(longest, left + right)
        return max(left, right) + 1

    height(root)
    return longest


def is_subtree(root: Optional[TreeNode], sub_root: Optional[TreeNode]) -> bool:
    """Tell whether some node of ``root`` heads a tree identical to ``sub_root``."""
    if root is None:
        return False
    return (
        is_same_tree(root, sub_root)
        or is_subtree(root.left, sub_root)
        or is_subtree(root.right, sub_root)
    )