# algoshelf

Classic algorithms and data structures in plain Python, using only the
standard library.

## Installation

```
pip install algoshelf
```

To run the test suite:

```
pip install "algoshelf[test]"
pytest
```

## What is on the shelf

| Module | Contents |
| --- | --- |
| `algoshelf.caches` | `LRUCache` and `LFUCache`, both with `get` and `put`; `get` returns `-1` for a key that is not cached |
| `algoshelf.ordered_set` | `IndexedSet` with `add`, `remove`, `find` (k-th smallest, 0-based) and `position` (rank of a value), plus `run_queries` for batches of `add`/`remove`/`find`/`findpos` operations |
| `algoshelf.bitonic` | `find_peak` and `bitonic_search` for sequences that rise and then fall |
| `algoshelf.bits` | `BitMask` (test, set, clear, flip, all, any, none, count over 60 bits) and helpers: `binary_representation`, `odd_one_out`, `sum_of_bits`, `find_kth_one`, `kth_one_position`, `total_bits_till`, `kth_one_in_concatenation`, `subsets_by_mask`, `bitset_and_or`, `msb`, `rightmost_set`, `is_power_of_two`, `next_power_of_two` |
| `algoshelf.backtracking` | `subsequences`, `count_n_queens`, `n_queens_boards`, `count_subsets_with_sum`, `min_bracket_fixes` |
| `algoshelf.segment_tree` | `SumSegmentTree`, `MinCountSegmentTree`, `ParitySegmentTree`, `FirstAtLeastTree` with `allocate`, `MaxSubarrayTree`, `LazyAssignTree` (range assignment with sum and maximum queries) |
| `algoshelf.union_find` | `UnionFind`, `WeightedUnionFind` (values known relative to each other), `TeamRegistry` (players joining teams that can merge) |
| `algoshelf.shortest_paths` | `zero_one_bfs`, `dijkstra`, `min_edge_reversals`, `arrow_grid_cost`, `longest_path_score`, `burn_time`, `cheapest_fuel_trip`, `floyd_warshall`, `removal_distance_sums`, `shortest_path_queries`, `min_walls_to_break` |
| `algoshelf.traversal` | `bfs_order`, `count_components`, `component_labels`, `component_size_grid`, `knight_distance`, `count_rooms`, `is_bipartite`, `has_directed_cycle`, `girth`, `grid_components`, `topological_order`, `count_dag_paths`, `topological_labels` |
| `algoshelf.grids` | `collapse_grid`, `area_and_perimeter`, `infection_time`, `escape_distance` |
| `algoshelf.formulations` | `jump_costs`, `snakes_and_ladders`, `distinct_colours_in_subtrees`, `components_after_removals`, `minimum_spanning_cost` |

## Conventions

- Graph functions take the number of nodes and a list of edge tuples. Nodes
  are numbered from 1 unless a function's docstring says otherwise.
- Where a target cannot be reached or no answer exists (an unreachable node,
  a graph with a cycle where an order is asked for, an impossible escape),
  functions return `None`.
- Invalid input, such as a node outside `1..n` or a negative edge weight
  given to `dijkstra`, raises `IndexError` or `ValueError`.
- Segment trees use 0-based positions and inclusive ranges; `allocate`
  answers with 1-based slot numbers and `0` where no slot has room.

## Examples

```python
from algoshelf.caches import LRUCache
from algoshelf.union_find import UnionFind
from algoshelf.backtracking import count_n_queens

cache = LRUCache(2)
cache.put(1, 10)
cache.put(2, 20)
cache.get(1)          # 10
cache.put(3, 30)      # evicts key 2
cache.get(2)          # -1

uf = UnionFind(5)
uf.union(1, 2)
uf.connected(1, 2)    # True
len(uf)               # 4 sets remain

count_n_queens(8)     # 92
```

```python
from algoshelf.shortest_paths import dijkstra
from algoshelf.segment_tree import SumSegmentTree

dijkstra(3, [(1, 2, 4), (2, 3, 1), (1, 3, 7)], 1)   # [0, 4, 5]

tree = SumSegmentTree([1, 2, 3, 4])
tree.query(1, 3)      # 9
tree.update(2, 10)
tree.query(0, 3)      # 17
```

## What it does not do

algoshelf is a library only. It has no command-line tool and reads no input
files; every routine is called from Python with its data passed as arguments.