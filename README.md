# puzzlekit

Small solutions to classic algorithm puzzles, grouped by topic. The package
uses only the standard library and needs Python 3.10 or later.

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

### `puzzlekit.text`

- `longest_unique_substring(s)`: length of the longest substring with no
  repeated character.
- `bulls_and_cows(secret, guess)`: the hint `"<bulls>A<cows>B"`; raises
  `ValueError` if the strings differ in length.
- `word_subsets(words1, words2)`: words of `words1` that contain every word of
  `words2`, counting repeated letters.
- `reverse_parentheses(s)`: reverses the text inside each pair of parentheses,
  innermost first, and drops the parentheses.
- `nearest_palindrome(n)`: the closest palindrome to the decimal string `n`,
  other than `n` itself, with ties going to the smaller one.
- `fraction_addition(expression)`: evaluates an expression such as
  `"-1/2+1/3"` and returns the reduced result as `"p/q"`.
- `digit_sum_after_convert(s, k)`: maps lowercase letters to 1..26,
  concatenates the numbers and takes the digit sum `k` times.
- `reverse_string(chars)`: reverses a list of characters in place.
- `crawler_min_operations(logs)`: folder depth reached after a list of
  `"../"`, `"./"` and `"name/"` operations.
- `main(argv=None)`: the command-line entry point described below.

### `puzzlekit.arrays`

`sorted_squares`, `trap_rainwater`, `remove_duplicates` (compacts a sorted
list in place and returns the count of unique items), `single_non_duplicate`,
`is_array_special`, `is_sorted_and_rotated`, `next_permutation` (in place,
wrapping to the smallest ordering), `max_subarray`, `max_card_score`,
`chalk_replacer`, `average_waiting_time`, `grid_game` and `search_matrix`.

### `puzzlekit.linkedlist`

`ListNode` (fields `val` and `next`), `from_values` and `to_values` to build
and read lists, and `reverse_k_group`, `rotate_right` and `sort_list`, which
relink the existing nodes and return the new head.

### `puzzlekit.trees`

`TreeNode` (fields `val`, `left`, `right`) and `NaryNode` (fields `val`,
`children`), with `is_balanced`, `postorder_traversal` and `nary_postorder`.

### `puzzlekit.combinatorics`

`permutations`, `combination_sum`, `subsets`, `unique_paths`, `count_primes`
(primes strictly below `n`), `nth_ugly_number` and `min_keyboard_steps`.

### `puzzlekit.searching`

Binary searches over the answer: `min_eating_speed(piles, h)` and
`min_bouquet_days(bloom_day, m, k)`, which returns `None` when there are
fewer than `m * k` flowers.

### `puzzlekit.dynamic`

`can_partition`, `cherry_pickup`, `stone_game_ii` and `max_points`.

### `puzzlekit.graphs`

`num_islands`, `regions_by_slashes`, `max_probability`,
`min_days_to_disconnect` and `modified_graph_edges`, which returns the edge
list with every `-1` weight filled in, or an empty list when the target
distance cannot be met.

Invalid input, such as an empty list where a value is required, raises
`ValueError`.

## Example

```python
from puzzlekit.text import bulls_and_cows, longest_unique_substring
from puzzlekit.arrays import trap_rainwater
from puzzlekit.linkedlist import from_values, to_values, reverse_k_group

longest_unique_substring("abcabcbb")        # 3
bulls_and_cows("1807", "7810")              # "1A3B"
trap_rainwater([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])  # 6
to_values(reverse_k_group(from_values([1, 2, 3, 4, 5]), 2))  # [2, 1, 4, 3, 5]
```

## Command line

The `puzzlekit-longest` command prints the length of the longest substring
without repeated characters. It takes the word as an argument, or reads the
first word from standard input when none is given:

```
puzzlekit-longest abcabcbb
3
echo pwwkew | puzzlekit-longest
3
```

## What it does not do

`puzzlekit-longest` is the only command. Every other puzzle is available only
as a Python function; there is no command-line access to them and no input or
output file formats.