# puzzlekit

puzzlekit is a collection of short solutions to well-known programming puzzles.
Each solution is a plain function. It takes ordinary Python values such as
lists, strings and integers and returns the result. The package uses only the
standard library.

## Installation

From a checkout of the project:

```
pip install .
```

## Modules

### `puzzlekit.arrays`

Puzzles on lists of integers and on grids:

`height_checker`, `max_satisfied`, `relative_sort_array`,
`three_consecutive_odds`, `restore_matrix`, `special_array`, `eaten_apples`,
`min_moves_to_seat`, `watering_plants`, `largest_local`, `find_max_k`,
`min_operations`, `can_sort_array`, `maximum_happiness_sum`, `intersect`,
`find_relative_ranks`, `sort_colors`, `kth_smallest_prime_fraction`,
`subsets`, `is_n_straight_hand`, `num_rescue_boats`,
`min_increment_for_unique` and `deck_revealed_increasing`.

`sort_colors` sorts the list it receives in place and returns `None`. The other
functions leave their input lists untouched and return new values. A few inputs
raise `ValueError`:

- `max_satisfied` with a negative `minutes`.
- `is_n_straight_hand` with a `group_size` below 1.
- `kth_smallest_prime_fraction` with a `k` outside the number of fractions.

### `puzzlekit.bits`

Puzzles on integer bit patterns:

`number_of_steps`, `subset_xor_sum`, `min_bit_flips`, `largest_combination`,
`sum_indices_with_k_set_bits`, `count_bits`, `judge_square_sum` and
`pass_the_pillow`.

### `puzzlekit.strings`

Puzzles on text:

`wonderful_substrings`, `reverse_prefix`, `append_characters`,
`is_palindrome_permutation`, `count_seniors`, `min_changes`,
`score_of_string`, `compressed_string`, `reverse_string`,
`longest_palindrome` and `rotate_string`.

`reverse_string` reverses a list of characters in place and returns `None`.

### `puzzlekit.trees`

- `TreeNode`: a dataclass with the fields `val`, `left` and `right`.
- `remove_leaf_nodes`: removes leaves equal to a target value. It repeats the
  removal whenever that exposes new matching leaves.
- `evaluate_tree`: evaluates a boolean tree. Leaves are 0 or 1, and inner nodes
  are OR (2) or AND (3).

### `puzzlekit.linked`

- `ListNode`: a list node with the fields `val` and `next`.
  - `ListNode.from_iterable(values)` builds a list from the given values. It
    returns `None` when there are no values.
  - Iterating over a node yields the values from that node to the end of the
    list.
- `merge_nodes`: replaces each run of values between zeros with its sum.
- `remove_nodes`: drops every node that has a strictly greater value somewhere
  after it.
- `double_it`: doubles the decimal number whose digits the list holds, with the
  most significant digit first.

### `puzzlekit.graphs`

- `find_center`: finds the centre of a star graph from its edge list.
- `maximum_importance`: gives the largest total road importance when the values
  1..n are assigned to the cities. It raises `IndexError` for a city number
  outside `0..n-1`.

## Example

```python
from puzzlekit.arrays import height_checker, subsets
from puzzlekit.strings import compressed_string
from puzzlekit.linked import ListNode, double_it

height_checker([1, 1, 4, 2, 1, 3])                  # 3
subsets([1, 2])                                     # [[], [1], [2], [1, 2]]
compressed_string("aaaaaaaaaaaaaabb")               # "9a5a2b"
list(double_it(ListNode.from_iterable([1, 8, 9])))  # [3, 7, 8]
```

## What it does not do

puzzlekit is a library of functions only. It has no command-line tool, and it
does not read puzzle input from files or standard input.

## Running the tests

```
pip install -e ".[test]"
pytest
```