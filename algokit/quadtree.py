"""Quad trees built from square grids of zeros and ones."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass(eq=False)
class QuadNode:
    """A quad tree node; a leaf stands for a square whose cells all equal ``val``."""

    val: bool = False
    is_leaf: bool = False
    top_left: Optional[QuadNode] = None
    top_right: Optional[QuadNode] = None
    bottom_left: Optional[QuadNode] = None
    bottom_right: Optional[QuadNode] = None


def construct_quad_tree(grid: Sequence[Sequence[int]]) -> QuadNode:
    """Build the quad tree of a square ``grid`` whose side is a power of two."""
    size = len(grid)
    if size == 0 or size & (size - 1):
        raise ValueError("grid side must be a positive power of two")
    if any(len(row) != size for row in grid):
        raise ValueError("grid must be square")

    def build(r: int, c: int, n: int) -> QuadNode:
        if n == 1:
            return QuadNode(bool(grid[r][c]), True)
        half = n // 2
        quarters = (
            build(r, c, half),
            build(r, c + half, half),
            build(r + half, c, half),
            build(r + half, c + half, half),
        )
        if all(q.is_leaf for q in quarters) and len({q.val for q in quarters}) == 1:
            return QuadNode(bool(grid[r][c]), True)
        return QuadNode(bool(grid[r][c]), False, *quarters)

    return build(0, 0, size)