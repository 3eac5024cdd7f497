# algokit

A small library of classic algorithms, written as plain functions over
Python's built-in data types. It needs nothing beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | What it holds |
| --- | --- |
| `algokit.combinatorics` | `subsets`, `subsets_with_dup`, `permute`, `permute_unique`, `combine`, `combination_sum`, `combination_sum2`, `letter_combinations`, `subset_xor_sum` |
| `algokit.search` | `palindrome_partitions`, `word_break`, `solve_n_queens`, `total_n_queens`, `makesquare`, `can_partition_k_subsets`, `word_search` |
| `algokit.graphs` | `GraphNode`, `graph_from_adjacency`, `graph_to_adjacency`, `clone_graph`, `is_alien_sorted`, `find_judge` |
| `algokit.stacks` | `eval_rpn`, `is_valid_parentheses`, `generate_parentheses`, `decode_string`, `cal_points`, `simplify_path`, `asteroid_collision`, `daily_temperatures`, `largest_rectangle_area`, `car_fleet` |
| `algokit.tree` | `TreeNode`, `tree_from_list`, `tree_to_list`, pre-, in- and post-order and level-order traversals, `right_side_view`, `max_depth`, `is_balanced`, `diameter_of_binary_tree`, `max_path_sum`, `good_nodes`, `rob`, `is_same_tree`, `is_subtree`, `invert_tree`, `remove_leaf_nodes` |
| `algokit.bst` | `build_tree` (from pre-order and in-order listings), `insert_into_bst`, `delete_node`, `is_valid_bst`, `kth_smallest`, `lowest_common_ancestor` |
| `algokit.quadtree` | `QuadNode` and `construct_quad_tree` for square grids of zeros and ones |

## Examples

```python
from algokit.combinatorics import subsets, permute
from algokit.search import total_n_queens
from algokit.stacks import eval_rpn, decode_string

subsets([1, 2])                     # [[], [1], [2], [1, 2]]
permute([1, 2])                     # [[1, 2], [2, 1]]
total_n_queens(4)                   # 2
eval_rpn(["2", "1", "+", "3", "*"]) # 9
decode_string("3[a]2[bc]")          # "aaabcbc"
```

Binary trees are built from and turned back into level-order lists, where
`None` marks a missing child:

```python
from algokit.tree import tree_from_list, tree_to_list, invert_tree, max_depth
from algokit.bst import insert_into_bst, is_valid_bst

root = tree_from_list([4, 2, 7, 1, 3, 6, 9])
max_depth(root)                     # 3
tree_to_list(invert_tree(root))     # [4, 7, 2, 9, 6, 3, 1]

bst = insert_into_bst(tree_from_list([4, 2, 7]), 5)
is_valid_bst(bst)                   # True
```

Graphs use `GraphNode` objects. They can be built from an adjacency list
whose nodes are numbered from 1:

```python
from algokit.graphs import graph_from_adjacency, graph_to_adjacency, clone_graph

node = graph_from_adjacency([[2, 4], [1, 3], [2, 4], [1, 3]])
graph_to_adjacency(clone_graph(node))  # [[2, 4], [1, 3], [2, 4], [1, 3]]
```

Some tree functions change the tree they are given: `invert_tree`,
`remove_leaf_nodes`, `insert_into_bst` and `delete_node` edit the nodes in
place and return the (possibly new) root.

Errors are raised as `ValueError`, for example for a malformed RPN
expression, an empty tree passed to `max_path_sum`, a `k` out of range in
`kth_smallest`, or a grid whose side is not a power of two in
`construct_quad_tree`.

## What it does not do

algokit is a library only: it has no command-line tool. It has no grid
flood-fill routines (island counting, surrounded regions, water flow or
rotting oranges); `word_search` and `construct_quad_tree` are its only
functions that take a grid.