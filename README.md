# dsakit

Classic data structures and algorithms, a CPU scheduling simulator and two
small console games. Plain Python with no third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `dsakit.sorting` | `bubble_sort`, `merge_sort`, `quick_sort`, `selection_sort`, `exchange_sort`; each returns a new ascending list |
| `dsakit.counted_sorts` | `merge_sort_counted`, `insertion_sort_counted`, `selection_sort_counted`, returning `SortStats` (values, comparisons, swaps) |
| `dsakit.heap` | `MaxHeap` (`push`, `pop`), `heapify`, `build_max_heap`, `heap_sort` |
| `dsakit.trie` | `Trie` with `insert` and `search` for words of capital letters A-Z |
| `dsakit.stacks` | `BoundedStack` (`push`, `pop`, `peek`, `is_empty`), `StackFullError`, `StackEmptyError`, `delete_middle`, `reverse_string` |
| `dsakit.queues` | `ArrayQueue` (`enqueue`, `dequeue`, `front`, `is_empty`) and `QueueFullError` |
| `dsakit.arrays` | `get_max`, `get_min`, `swap_alternate`, `row_sums`, `largest_row_sum`, `linear_search`, `contains_2d`, `merge_sorted`, `reversed_copy` |
| `dsakit.recursion` | `count_up`, `count_to`, `spell_digits`, `factorial`, `fibonacci`, `power_of_two`, `reach_home`, `gcd`, `is_prime` |
| `dsakit.tree` | binary tree `Node` and `height` |
| `dsakit.graphs` | `bellman_ford`, `dijkstra`, `floyd_warshall` returning `PathResult` with an operation count; `Edge`, `NegativeCycleError` |
| `dsakit.nqueens` | backtracking `solve_n_queens` returning `QueensResult`, and `format_board` |
| `dsakit.contests` | `days_to_reach_roster` and `min_assembly_cost` |
| `dsakit.sched_input` | `Process`, `AlgorithmSpec`, `Workload`, `parse_algorithms`, `parse_process`, `parse_workload` |
| `dsakit.schedulers` | FCFS, round robin, SPN, SRT, HRRN, FB-1, FB-2i and aging schedulers returning a `Schedule`; `run_algorithm` picks one by id |
| `dsakit.sched_report` | `algorithm_label`, `format_stats`, `format_trace` and the `dsakit-sched` command |
| `dsakit.simple_sched` | `fcfs`, `sjn`, `round_robin` over `Job`s, `waiting_and_turnaround`, `format_times_table` |
| `dsakit.casino` | a banker-or-player card game: `draw_hand`, `decide_winner`, `payout`, `should_continue`, `format_hand` |
| `dsakit.snake` | `SnakeGame`, a terminal snake game on a wrapping board |

Errors are raised as exceptions: for example `MaxHeap.pop` on an empty heap
raises `IndexError`, `bellman_ford` raises `NegativeCycleError`, and
`Trie.insert` raises `ValueError` for anything but capital letters.

## Library examples

```python
from dsakit.sorting import merge_sort
from dsakit.recursion import gcd, factorial
from dsakit.trie import Trie

print(merge_sort([9, 1, 8, 3, 6, 2]))   # [1, 2, 3, 6, 8, 9]
print(gcd(12, 18), factorial(5))        # 6 120

trie = Trie()
trie.insert("ABCD")
print(trie.search("ABCD"), trie.search("ABCDP"))  # True False
```

## Commands

### CPU scheduling simulator

```
dsakit-sched workload.txt
dsakit-sched < workload.txt
```

The workload is read from the named file, or from standard input when no
file is given, as whitespace separated fields:

1. the operation: `trace` prints a timeline, `stats` prints a statistics table;
2. a comma separated list of algorithms, each an id optionally followed by
   `-<quantum>`;
3. the last time instant to simulate;
4. the number of processes;
5. one `name,arrival,service` entry per process, in order of arrival.

| Id | Algorithm |
| --- | --- |
| 1 | First come, first served |
| 2 | Round robin (give a quantum, e.g. `2-4`) |
| 3 | Shortest process next |
| 4 | Shortest remaining time |
| 5 | Highest response ratio next |
| 6 | Feedback, quantum 1 |
| 7 | Feedback, quantum 2^i |
| 8 | Aging (give a quantum, e.g. `8-1`; without one the chosen process runs to the last instant) |

In a timeline `*` marks a running process and `.` a waiting one. On a
malformed workload or an unknown algorithm id the command prints an error
and exits with status 1.

Example input:

```
trace
1,2-4,5
20
5
A,0,3
B,2,6
C,4,4
D,6,5
E,8,2
```

### Simple scheduling comparison

```
dsakit-simple-sched [--quantum N]
```

Runs FCFS, shortest job next and round robin (quantum 2 by default) over a
fixed set of five jobs, printing each slice of execution and the average
waiting time, then a waiting and turnaround table for a fixed set of four
processes.

### Casino game

```
dsakit-casino [--seed N] [--money N]
```

Bet on the banker or the player side. Each hand is two cards valued 1 to 10,
taken modulo 10; unless the first two make 8 or 9, a third card is added.
The higher value wins and pays 1:1; a draw neither wins nor loses. The
balance starts at 10000 unless `--money` says otherwise, and play stops when
you answer N or the balance runs out.

### Snake

```
dsakit-snake [--width N] [--height N] [--seed N] [--delay SECONDS]
```

Steer with `w`, `a`, `s`, `d`; press `x` to quit. Each fruit eaten is worth
10 points and the final score is printed at the end.

## Limitations

- The snake moves only when a key is pressed: each move waits for one key.
  Keys are read without Enter only when standard input is a terminal that
  supports `termios`; otherwise characters are read from standard input as
  they come.
- The casino keeps no balance between sessions.
- The scheduling simulator expects processes listed in order of arrival and
  does not reorder them.