# algonotes

A collection of classic algorithms and data structures written as small, plain
Python functions and classes. Each function takes ordinary Python values (lists,
tuples, ints, strings) and returns its result, so it is easy to study, test and
reuse. The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algonotes.searching` | `max_increasing_decreasing`, `find_peak`, `find_min_rotated`, `search_rotated`, `first_occurrence`, `last_occurrence`, `count_occurrences` |
| `algonotes.medians` | `median`, `median_of_three`, `median_of_four`, `median_different_sizes`, `median_by_merge`, `median_equal_sizes`, `median_equal_sizes_by_merge` |
| `algonotes.arrays` | `distinct`, `stock_trades`, `max_difference`, `merge_intervals` over `Interval`, `sliding_window_max` |
| `algonotes.number_theory` | `gcd`, `is_solvable` (linear Diophantine equations), `derivables`, `reachable` |
| `algonotes.bits` | `reverse_bits`, `reverse_bits_shifting`, `greater_by_*` and `smallest_by_*` comparisons without comparison operators, `rightmost_different_bit`, `rightmost_set_bit`, `all_bits_set`, `xor_of_subarray_xors`, `is_bit_rotation`, `nth_magic_number` |
| `algonotes.optimize` | `knapsack_recursive`, `knapsack` (tabulated), `max_stolen`, `fractional_knapsack` over `Item` |
| `algonotes.memory` | `byte_order` of this machine and `memory_layout` of an integer as hex bytes |
| `algonotes.queues` | bounded `CircularQueue` and `CircularDeque` raising `QueueFull` / `QueueEmpty` |
| `algonotes.graph` | directed `Graph` with `add_edge`, `bfs` and `dfs` |
| `algonotes.grid` | `largest_region` and `count_islands` over 8-connected truthy cells, `spiral_order` of a matrix |
| `algonotes.strings` | `are_rotations` |
| `algonotes.trees` | `TreeNode` and search-tree functions `insert`, `search`, `delete`, `inorder`, `height`, `transform_to_greater_sum` |
| `algonotes.linked_list` | `ListNode` lists built with `from_iterable` and read with `to_list`; `reverse_iterative`, `reverse_recursive`, `reverse_in_groups`, `reverse_in_groups_iterative`, `merge_sorted`; `MultiNode` lists built with `build_multilevel`, read with `down_values`, and merged by `flatten_recursive` / `flatten_iterative` |
| `algonotes.tree_edits` | `has_path_sum`, `remove_half_nodes` |
| `algonotes.tree_views` | `top_view`, `bottom_view`, `left_view`, `right_view` |
| `algonotes.tree_traversal` | `level_order`, `level_order_recursive`, `spiral_order`, `spiral_order_recursive`, `diameter`, `diameter_naive` |

## Examples

```python
from algonotes.searching import search_rotated, count_occurrences
from algonotes.queues import CircularQueue, QueueFull
from algonotes.trees import insert, inorder, delete
from algonotes.graph import Graph

search_rotated([5, 6, 7, 8, 9, 10, 1, 2, 3], 3)   # 8
count_occurrences([1, 2, 2, 3, 3, 3, 3], 3)        # 4

queue = CircularQueue(2)
queue.enqueue(10)
queue.enqueue(20)
try:
    queue.enqueue(30)
except QueueFull:
    pass

root = None
for key in (50, 30, 20, 40, 70, 60, 80):
    root = insert(root, key)
root = delete(root, 30)
inorder(root)                                      # [20, 40, 50, 60, 70, 80]

g = Graph(4)
for v, w in [(0, 1), (0, 2), (1, 2), (2, 0), (2, 3), (3, 3)]:
    g.add_edge(v, w)
g.bfs(2)                                           # [2, 0, 3, 1]
```

## Behaviour worth knowing

- Every function returns its result: lists of values, tuples of indices,
  numbers or booleans. Nothing is printed.
- Searches that find nothing (`search_rotated`, `first_occurrence`,
  `last_occurrence`) return `None`; `count_occurrences` returns `0`.
- Reading from or removing from an empty queue raises `QueueEmpty`; adding to a
  full one raises `QueueFull`. Inputs that a function cannot work with, such as
  an empty sequence where a value is required, raise `ValueError`.
- Linked list and tree functions relink or edit the nodes they are given in
  place and return the new head or root.

## What it does not do

This is a library only: it has no command-line program, and it reads and writes
no files.