"""Classic algorithms on sequences, graphs, stacks and trees."""

__version__ = "0.1.0"
__all__ = [
    "bst",
    "combinatorics",
    "graphs",
    "quadtree",
    "search",
    "stacks",
    "tree",
]