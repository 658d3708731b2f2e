# puzzlebox

A library of small, self-contained solutions to classic algorithm puzzles,
grouped by the kind of data they work on. It needs nothing beyond the Python
standard library (3.10 or later).

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

- `puzzlebox.strings`: `string_matching` (words found inside longer words),
  `parse_html` (decodes `&gt;`, `&lt;`, `&quot;`, `&apos;`, `&frasl;`,
  `&amp;`), `min_length_after_removal`, `reverse_sentence`,
  `is_alphabetic_order`, `is_anagram`, and chat message helpers
  `find_user`, `count_words` and `top_n`.
- `puzzlebox.sequences`: `min_possible_number` for an I/D pattern,
  `collatz`, `kaprekar_next` and `kaprekar_sequence`, `num_of_ways` (n x 3
  grid painting, modulo 1e9+7), `count_min_steps` and `min_steps_to_one`,
  `power_iter` and `power_rec`, the `Fenwick` tree with `add` and
  `prefix_sum`, `process_queries`, and random text: `infinite_monkey`,
  `make_word`, `load_words` and `generate_words`. The random functions take
  an optional `random.Random` instance so results can be reproduced.
- `puzzlebox.arrays`: `subarray_sum`, `are_equal`, `binary_search`,
  `count_occurrences`, `max_sum_subarray` (Kadane, returns total and
  bounds), `longest_increasing_subsequence`, `longest_zero_sum_subarray`,
  `max_profit`, `max_expression`, `maximise_param`, `max_point_count`,
  `max_sum_from_ends`, `find_max_sum`, `sorted_intersection`,
  `furthest_building`, `is_possible_climb` and `sort_stack`.
- `puzzlebox.grids`: `count_islands` (8-connected), `largest_zero_submatrix`,
  `max_gold_path`, `is_path_possible`, `is_path_possible_dp`,
  `shortest_descending_path`, `max_points_on_line` and `valid_square`.
- `puzzlebox.linked_lists`: `ListNode` (iterable over its values),
  `build_list`, `to_list`, `add_one`, `kth_from_last`, `merge_sorted`, and
  circular lists with `build_circular`, `circular_values` and
  `remove_alternate`.
- `puzzlebox.trees`: `TreeNode` (with `left_cost` and `right_cost` edge
  weights), `min_cost_equal_branches`, `recover_bst`, `inorder`, `height`,
  `is_valid_bst`, `longest_consecutive` and `mirror`.
- `puzzlebox.scheduling`: `Task`, `execution_order` and `enqueue_tasks` for a
  single CPU, `settle_debts`, and flight logs with `FlightRecord`,
  `parse_flight_record`, `round_trip_people` and
  `round_trip_people_from_file`.

## Examples

```python
from puzzlebox.strings import parse_html, string_matching
from puzzlebox.sequences import collatz, process_queries
from puzzlebox.arrays import max_profit, max_sum_subarray
from puzzlebox.grids import count_islands
from puzzlebox.linked_lists import build_list, add_one, to_list

parse_html("x &gt; y &amp;&amp; y &lt; z")    # 'x > y && y < z'
string_matching(["mass", "as", "hero", "superhero"])  # ['as', 'hero']
collatz(6)                                   # [6, 3, 10, 5, 16, 8, 4, 2, 1]
process_queries([3, 1, 2, 1], 5)             # [2, 1, 2, 1]
max_profit([20, 30, 10, 50, 60, 90, 70])     # 80
max_sum_subarray([-3, -2, -1, 5, 6, -1, 8, -10, 5, 6])  # (19, 3, 9)
count_islands([[1, 1, 0, 0, 0],
               [0, 1, 0, 0, 1],
               [1, 0, 0, 1, 1],
               [0, 0, 0, 0, 0],
               [1, 0, 1, 0, 1]])             # 5
to_list(add_one(build_list([9, 9, 9])))      # [1, 0, 0, 0]
```

Functions raise `ValueError` for input they cannot handle, such as an empty
sequence where at least one element is needed, and `IndexError` for
positions out of range (`kth_from_last`, `Fenwick`).

## What it does not do

puzzlebox is a library only. It has no command-line program: nothing reads
puzzle input from standard input or prints results, so callers pass Python
values in and get Python values back. The only file access is
`load_words` and `round_trip_people_from_file`, which read a file at a
path the caller gives.