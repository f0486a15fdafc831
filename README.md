# algokit

A collection of classic algorithms and small everyday programs, written as a
plain Python package with no third-party dependencies.

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
| `algokit.sorting` | `bubble_sort`, `selection_sort`, `insertion_sort`, `merge_sort`, `merge_sorted`, `quick_sort`, `heapify`, `heap_sort`, `radix_sort`, `bucket_sort`, `shell_sort` |
| `algokit.searching` | `linear_search`, `binary_search`, `binary_search_recursive`, `jump_search`, `search_rotated`, `is_feasible`, `allocate_books` |
| `algokit.sequences` | `max_subarray_sum`, `trapped_water`, `can_jump`, `count_good_pairs`, `subset_sum_exists`, `longest_common_subsequence`, `largest_partial_union`, `reverse_madness` |
| `algokit.graphs` | `DirectedGraph` with breadth-first traversal, `dfs_order`, `floyd_warshall`, `Edge`, `kruskal_mst` |
| `algokit.puzzles` | `count_queen_placements`, `solve_n_queens`, `knight_tour`, `hanoi_moves`, `hanoi_disk_moves`, `permutations`, `gray_code`, `is_valid_sudoku`, `expand_wildcards`, `count_with_consecutive_ones` |
| `algokit.linked` | `BitList` (one's and two's complement), `DoublyLinkedList`, `LinkedList`, `Playlist` (circular music playlist) |
| `algokit.trees` | `TreeNode`, `flatten`, `preorder_right`, `TreapNode`, `treap_insert`, `inorder`, `huffman_codes`, `is_balanced`, `Matrix` |
| `algokit.numtheory` | `sieve`, `is_prime`, `armstrong_numbers`, `count_set_bits`, `is_power_of_two`, `integer_to_roman`, `binary_to_decimal`, `decimal_to_binary`, `decimal_to_octal`, `fast_inverse_sqrt`, `factorial`, `fibonacci`, `is_palindrome_number`, `digit_sum`, `series_sum`, `compare` |
| `algokit.text` | `is_anagram`, `is_palindrome_word`, `reverse_text` |
| `algokit.converters` | `convert_length`, `convert_pressure` (menu options 1-12) |
| `algokit.atm` | `Atm` and `note_breakdown` |
| `algokit.calculator` | `calculate` |
| `algokit.clockface` | `render_time`, `format_timestamp`, `dial_time` and a live terminal clock |
| `algokit.everyday` | `gift_for`, `classify_triangle`, `is_vowel`, `is_teen`, `vessel_moves`, `who_first`, `circle_measures`, `extremes` |
| `algokit.tictactoe` | `Board` and a two-player terminal game |

Sorting functions take any iterable and return a new list. Search functions
return the index of a match, or `None` when the target is absent.

## Examples

```python
from algokit.searching import binary_search
from algokit.numtheory import integer_to_roman
from algokit.puzzles import gray_code
from algokit.text import is_anagram

binary_search([2, 3, 4, 10, 40], 10)   # 3
binary_search([2, 3, 4, 10, 40], 1)    # None
integer_to_roman(19)                   # 'XIX'
gray_code(2)                           # ['00', '01', '11', '10']
is_anagram("gram", "arm")              # False
```

A directed graph traversed breadth-first:

```python
from algokit.graphs import DirectedGraph

graph = DirectedGraph(4)
for source, target in [(0, 1), (0, 2), (1, 2), (2, 0), (2, 3), (3, 3)]:
    graph.add_edge(source, target)
graph.bfs(2)                           # [2, 0, 3, 1]
```

## Command-line programs

Two interactive programs are installed with the package:

```
algokit-clock        # a large-digit clock that redraws every second
algokit-tictactoe    # two players take turns on a 3x3 board
```

`algokit-clock` runs until interrupted; `algokit-clock --ticks N` stops after
N refreshes.

## What it does not do

There is no recipe book: the package has no way to add, search or list
recipes, and nothing is kept on disk between runs of any of its programs.