# algolab

A collection of classic algorithms written in plain Python, using only the
standard library. Each module covers one family of problems and returns its
results as ordinary Python values; the few helpers that measure running times
write their results to CSV files.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algolab.knapsack` | 0/1 knapsack: `Item`, `knapsack_backtracking`, `knapsack_branch_and_bound` |
| `algolab.backtracking` | `subset_sums` (a generator of matching subsets), `n_queens` (a generator of placements), `render_board`, `graph_coloring` |
| `algolab.lcs` | `longest_common_subsequence` |
| `algolab.growth` | a table of growth-rate functions (n³, lg n, n·2ⁿ, ln n, 2ⁿ, n lg n, √lg n, n!): `growth_row`, `format_row`, `write_growth_csv`, `main` |
| `algolab.puzzle` | the sliding-tile puzzle by best-first search on moves plus Manhattan distance: `solve_puzzle`, `manhattan_cost`, `format_board`, `SearchLimitExceeded` |
| `algolab.vertex_cover` | `approximate_vertex_cover`, the 2-approximation |
| `algolab.shortest_paths` | `bellman_ford` (directed edges), `dijkstra` (undirected edges), `floyd_warshall` and `johnson` (adjacency matrices), `NegativeCycleError` |
| `algolab.flow` | `max_flow`, Ford–Fulkerson with breadth-first augmenting paths |
| `algolab.mst` | `Edge`, `kruskal`, `prim`, `random_complete_graph`, `benchmark_mst` |
| `algolab.tsp` | `Tour`, `tsp_nearest_neighbor`, `tsp_backtracking`, `tsp_branch_and_bound`, `tsp_mst_approximation` |
| `algolab.sorting` | `merge_sort`, `quick_sort`, `randomized_quick_sort`, `insertion_sort`, `selection_sort`, plus `generate_numbers`, `read_numbers`, `benchmark_sorts`, `write_timings_csv` |
| `algolab.divide_conquer` | `Point`, `closest_pair_distance`, `max_subarray_brute`, `max_subarray_divide_conquer`, `max_subarray_kadane`, `benchmark` |
| `algolab.geometry` | `orientation`, `hull_edges_brute_force`, `convex_hull` (monotone chain, counterclockwise from the leftmost point) |
| `algolab.matrix_chain` | `matrix_chain_order`, `optimal_parenthesization`, `multiply`, `strassen_multiply`, `chain_multiply`, `random_binary_matrix`, `write_matrix_csv` |
| `algolab.string_matching` | `rabin_karp`, `rabin_karp_stats` (returns `SearchStats` with match and spurious-hit counts), `generate_text_files` |

The sorting functions never change their input; they return a new sorted list.

## Examples

```python
from algolab.lcs import longest_common_subsequence
from algolab.shortest_paths import bellman_ford, NegativeCycleError
from algolab.sorting import merge_sort

print(longest_common_subsequence("ABCBDAB", "BDCABA"))

edges = [(0, 1, 4), (0, 2, 1), (2, 1, 2)]
try:
    print(bellman_ford(3, edges, 0))   # [0, 3, 1]
except NegativeCycleError:
    print("the graph has a negative cycle")

print(merge_sort([5, 3, 9, 1]))        # [1, 3, 5, 9]
```

## Results and errors

- Shortest-path functions report unreachable vertices as `None`. In the
  matrices given to `floyd_warshall` and `johnson`, `None` means "no edge".
  `bellman_ford` and `johnson` raise `NegativeCycleError` when a negative
  cycle makes distances undefined.
- `graph_coloring` returns `None` when the graph cannot be coloured with the
  given number of colours; `tsp_backtracking` and `tsp_branch_and_bound`
  return `None` when no closed tour exists. In TSP cost matrices, 0 means
  "no direct path".
- `solve_puzzle` raises `SearchLimitExceeded` when its open list grows past
  `max_nodes` (10000 by default) or the search ends without a solution.
- `prim` raises `ValueError` for a disconnected graph, `convex_hull` for
  fewer than three points, and the maximum-subarray functions for an empty
  sequence. `closest_pair_distance` returns infinity for fewer than two
  points.

## Command line

```
algolab-growth [OUTPUT] [--stop N]
```

prints the table of growth-rate functions for n from 0 to N (100 by default)
and saves it as CSV to OUTPUT (`function_values.csv` by default), ready to be
opened in a spreadsheet to plot the curves. Undefined values (such as lg 0)
are written as `undef`, and n! past 20 as `ovrflw`.

## What it does not do

There is no interactive program: apart from `algolab-growth`, nothing reads
graphs, matrices or numbers from the terminal. Everything else, including the
timing helpers `benchmark_mst`, `benchmark_sorts` and `benchmark`, is called
from Python.