# algopractice

Classic algorithm exercises as plain Python functions: sorting, stacks and
queues, recursion, greedy methods, dynamic programming and graph traversal.
It uses only the standard library.

## Installation

```
pip install .
```

The test suite uses pytest and hypothesis, which are available through the
`test` extra:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algopractice.sorting` | `selection_sort`, `bubble_sort` |
| `algopractice.stacks` | `ArrayStack`, `ArrayQueue`, `is_balanced`, `reverse_stack`, `sort_stack` |
| `algopractice.recursion` | `power`, `count_good_numbers`, `letter_combinations`, `power_set`, `subset_sums`, `count_subsequences_with_sum`, `is_palindrome`, `palindrome_partitions` |
| `algopractice.greedy` | `assign_cookies`, `min_coins`, `check_valid_string`, `can_jump`, `max_meetings` |
| `algopractice.dp_linear` | `climb_stairs`, `max_non_adjacent_sum`, `rob_circular`, `ninja_training`, `max_profit_single`, `max_profit_multiple` |
| `algopractice.dp_grid` | `unique_paths`, `unique_paths_with_obstacles`, `min_path_sum`, `minimum_total`, `min_falling_path_sum` |
| `algopractice.dp_subsets` | `knapsack_01`, `unbounded_knapsack`, `is_subset_sum`, `count_subsets_with_sum`, `can_partition`, `min_subset_sum_difference`, `count_partitions_with_difference`, `target_sum_ways`, `coin_change`, `cut_rod` |
| `algopractice.dp_strings` | `longest_common_subsequence`, `all_longest_common_subsequences`, `longest_common_substring`, `longest_palindromic_subsequence`, `min_insertions_palindrome`, `min_deletions_to_equal`, `shortest_common_supersequence`, `edit_distance`, `num_distinct` |
| `algopractice.graphs` | `adjacency_list`, `count_graphs`, `bfs_order`, `dfs_order`, `has_cycle_undirected`, `count_provinces`, `is_bipartite` |
| `algopractice.topo` | `topo_sort_dfs`, `topo_sort_kahn`, `has_cycle_directed`, `can_finish`, `find_order` |
| `algopractice.grids` | `update_matrix`, `flood_fill`, `num_enclaves`, `capture_surrounded` |

## Examples

```python
from algopractice.sorting import bubble_sort
from algopractice.stacks import ArrayStack, is_balanced
from algopractice.dp_strings import longest_common_subsequence
from algopractice.topo import find_order

bubble_sort([3, 1, 2])                       # [1, 2, 3]
is_balanced("{[()]}")                        # True

stack = ArrayStack()
stack.push(5)
stack.pop()                                  # 5

longest_common_subsequence("abcde", "ace")   # 3
find_order(2, [[1, 0]])                      # [0, 1]
```

## Conventions

- The sorts return a new list and leave their input alone.
- `ArrayStack.pop` and `ArrayQueue.pop` raise `IndexError` when empty.
- `reverse_stack` and `sort_stack` take and return stacks as sequences listed
  bottom first, top last.
- `is_balanced` checks `()`, `[]` and `{}`; any other character is accepted only
  while an opening bracket is pending.
- `min_coins` and `coin_change` both return `None` when the amount cannot be
  made. They differ at zero: `coin_change(coins, 0)` is `0`, while
  `min_coins(coins, 0)` is `None`.
- Counting functions such as `count_subsequences_with_sum`,
  `count_subsets_with_sum` and `count_partitions_with_difference` return their
  result modulo 10**9 + 7.
- Graphs are adjacency lists: entry `i` lists the neighbours of vertex `i`.
  `bfs_order` and `dfs_order` visit only what is reachable from vertex 0.
  `topo_sort_kahn` leaves out vertices on or behind a cycle.
- In `can_finish` and `find_order` each prerequisite pair `(course, required)`
  means `required` is taken first; `find_order` returns `[]` when no order exists.
- Grids are lists of rows. `flood_fill` and `capture_surrounded` return new
  grids rather than changing the one passed in.
- Invalid arguments (negative amounts or capacities, empty inputs where one
  is needed, ragged grids, edges to missing vertices) raise `ValueError`.

## Scope

This is a library of functions only. It has no command-line tool, and it
reads and writes no files.