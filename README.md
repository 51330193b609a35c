# algodrills

A collection of classic algorithm exercises written as small, plain Python
functions, plus two command-line simulations from operating-systems courses.
There are no dependencies beyond the standard library.

## Installation

```
pip install algodrills
```

To run the test suite:

```
pip install "algodrills[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algodrills.backtracking` | `combine`, `combination_sum3`, `letter_combinations`, `combination_sum`, `combination_sum2`, `partition_palindromes` |
| `algodrills.knapsack` | `climb_stairs`, `stairs_ways`, `get_way`, `complete_knapsack`, `zero_one_knapsack`, `can_partition`, `change`, `last_stone_weight`, `find_max_form`, `find_target_sum_ways`, `find_sum_ways` |
| `algodrills.sequences` | `max_profit`, `rob`, `rob_circular`, `find_length`, `find_length_of_lcis`, `length_of_lis`, `longest_common_subsequence`, `jewellery_value` |
| `algodrills.sorting` | `count_sort`, `quick_sort`, `quick_sort_two_way` |
| `algodrills.linked_list` | `ListNode`, `from_iterable`, `to_list`, `intersection` |
| `algodrills.tree` | `TreeNode`, `from_level_array`, `preorder` |
| `algodrills.traversal` | `preorder_traversal`, `inorder_traversal`, `postorder_traversal` |
| `algodrills.symmetry` | `is_symmetric`, `max_depth` |
| `algodrills.tree_shape` | `count_complete_nodes`, `get_height`, `is_balanced`, `build_tree` |
| `algodrills.tree_paths` | `all_paths`, `sum_of_left_leaves`, `find_bottom_left_value`, `has_path_sum` |
| `algodrills.tree_build` | `level_order`, `invert_tree`, `construct_maximum_binary_tree` |
| `algodrills.bst` | `is_valid_bst` |
| `algodrills.house_robber_tree` | `rob_tree` |
| `algodrills.islands` | `max_area_bfs`, `max_area_dfs`, `enclave_area`, `water_flow_cells` |
| `algodrills.shortest_paths` | `all_paths_source_target`, `dijkstra`, `dijkstra_from_file`, `prim` |
| `algodrills.hashmaps` | `Pair`, `ArrayHashMap`, `ChainedHashMap` |
| `algodrills.scheduling` | `Process`, `ScheduleReport`, `fcfs`, `sjf`, `highest_priority`, `hrn`, `round_robin`, `main` |
| `algodrills.paging` | `PagingResult`, `fifo`, `lru`, `opt`, `main` |

Functions raise `ValueError` on input they cannot handle (negative weights,
ragged grids, edges to unknown nodes and so on).

## Examples

```python
from algodrills.backtracking import combine, letter_combinations
from algodrills.knapsack import change

combine(4, 2)
# [[1, 2], [1, 3], [1, 4], [2, 3], [2, 4], [3, 4]]

letter_combinations("23")
# ['ad', 'ae', 'af', 'bd', 'be', 'bf', 'cd', 'ce', 'cf']

change(5, [1, 2, 5])
# 4
```

Trees are built from a level-order list in which `0` marks an empty slot:

```python
from algodrills.tree import from_level_array
from algodrills.symmetry import max_depth

root = from_level_array([3, 9, 20, 0, 0, 15, 7])
max_depth(root)
# 3
```

Because `0` means "empty", `algodrills.tree_build.level_order` reports an
empty tree as `[[0]]`.

### Hash maps

`ArrayHashMap` has 100 buckets of one pair each; a key that lands in a taken
bucket replaces the pair there, and `get` raises `KeyError` for an empty
bucket. `ChainedHashMap` keeps a chain per bucket, starts with 4 buckets and
doubles when its load factor exceeds 3/4.

```python
from algodrills.hashmaps import ChainedHashMap

table = ChainedHashMap()
table.put(2, "hello")
table.put(4, "world")
table.get(4)
# 'world'
table.key_set()
# [4, 2]
```

### Scheduling and paging

```python
from algodrills.scheduling import Process, fcfs, round_robin

jobs = [Process("A", 0, 3), Process("B", 1, 2)]
report = fcfs(jobs)
report.order
# ['A', 'B']
round_robin(jobs, quantum=1).average_turnaround
```

A `ScheduleReport` lists the processes in completion order and offers
`average_waiting`, `average_turnaround` and `average_weighted_turnaround`.

```python
from algodrills.paging import REFERENCE_STRING, fifo

result = fifo(REFERENCE_STRING, 3)
result.faults, result.fault_rate
# (15, 0.75)
```

A `PagingResult` also holds the evicted pages and the frame contents after
each request.

## Command-line tools

```
algodrills-schedule
algodrills-paging [PAGES ...] [--frames N]
```

`algodrills-schedule` reads from standard input the number of processes,
then a name, arrival time, burst time and priority for each, then an
algorithm number (1 first come first served, 2 shortest job first, 3 highest
priority, 4 highest response ratio, 5 round robin followed by a time
quantum), and prints the schedule table with averages.

`algodrills-paging` repeatedly reads a choice from standard input
(1 FIFO, 2 LRU, 3 OPT, 0 to quit) and prints the frame contents after each
request, the evicted pages and the fault rate. Without page arguments it uses
the built-in reference string; `--frames` defaults to 3.

## What it does not do

Everything runs in memory: the hash maps store nothing on disk, and the tree
functions take `TreeNode` objects or level-order lists rather than prompting
for nodes interactively. The only file input is
`algodrills.shortest_paths.dijkstra_from_file`.