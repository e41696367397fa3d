# arraydrills

A collection of well-known array, matrix and sorting exercises in plain
Python. Many problems come in several versions: a brute-force one, a
better one and an optimal one. You can compare them side by side.

The package uses only the standard library.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## What is inside

| Module                  | Exercises |
|-------------------------|-----------|
| `arraydrills.search`    | `linear_search`, `two_sum_brute`, `two_sum`, `has_pair_with_sum` |
| `arraydrills.extremes`  | `largest`, `smallest`, `largest_two`, `smallest_two`, `is_sorted` |
| `arraydrills.subarrays` | `max_subarray_sum_cubic`, `max_subarray_sum_quadratic`, `max_subarray_sum`, `max_subarray_sum_clamped`, `max_subarray`, `longest_subarray_with_sum_brute`, `longest_subarray_with_sum`, `longest_subarray_with_sum_nonneg`, `count_subarrays_with_sum_brute`, `count_subarrays_with_sum`, `max_profit`, `max_consecutive_ones` |
| `arraydrills.counting`  | `single_element_brute`, `single_element_counting`, `single_element`, `missing_number_brute`, `missing_number_hash`, `missing_number_sum`, `missing_number`, `majority_element_brute`, `majority_element_counting`, `majority_element`, `longest_consecutive_brute`, `longest_consecutive_sorted`, `longest_consecutive` |
| `arraydrills.rearrange` | `rotate_left_one`, `rotate_left`, `rotate_left_reversal`, `move_zeros_to_end`, `move_zeros_in_place`, `next_permutation`, `alternate_signs_split`, `alternate_signs`, `leaders_brute`, `leaders`, `sort_colors_counting`, `sort_colors` |
| `arraydrills.setops`    | `intersection_brute`, `intersection`, `union_set`, `union`, `unique_sorted`, `dedupe_sorted_in_place` |
| `arraydrills.matrix`    | `rotate_copy`, `rotate_in_place`, `set_zeroes_marking`, `set_zeroes_flags`, `set_zeroes`, `spiral_order` |
| `arraydrills.sorting`   | `merge_sort`, `quick_sort`, `selection_sort`, `bubble_sort`, `insertion_sort` |

## Examples

```python
from arraydrills.search import linear_search, two_sum
from arraydrills.extremes import largest, largest_two
from arraydrills.subarrays import max_subarray_sum, max_subarray
from arraydrills.counting import missing_number
from arraydrills.matrix import rotate_copy, spiral_order
from arraydrills.sorting import merge_sort

linear_search([4, 7, 9], 9)          # 2
linear_search([4, 7, 9], 5)          # -1
two_sum([2, 7, 11, 15], 9)           # (0, 1)

largest([5, 4, 22, 4, 5, 6])         # 22
largest_two([5, 4, 22, 4, 5, 6])     # (22, 6)

max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4])   # 6
max_subarray([-2, 1, -3, 4, -1, 2, 1, -5, 4])       # (6, [4, -1, 2, 1])

missing_number([1, 2, 4, 5], 5)      # 3

rotate_copy([[1, 2], [3, 4]])        # [[3, 1], [4, 2]]
spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]])     # [1, 2, 3, 6, 9, 8, 7, 4, 5]

merge_sort([3, 1, 2])                # [1, 2, 3]
```

## Behaviour worth knowing

- Most functions take any iterable and return a new list or value. The
  ones named `*_in_place`, and `sort_colors`, `set_zeroes`,
  `set_zeroes_flags` and `set_zeroes_marking`, change the list you pass
  in. `dedupe_sorted_in_place` returns the count of distinct values.
- Every function in `arraydrills.sorting` returns a new sorted list.
- `largest`, `smallest`, `largest_two`, `smallest_two` and the
  `max_subarray_sum*` functions other than the clamped one raise
  `ValueError` on an empty sequence. `max_subarray_sum_clamped` returns 0
  when every sum is negative or the input is empty.
- `largest_two` and `smallest_two` return `None` as the second value when
  no distinct second value exists.
- `two_sum` and `two_sum_brute` return an index pair or `None`;
  `has_pair_with_sum` returns only `True` or `False`.
- The `missing_number*` functions need exactly `n - 1` values and raise
  `ValueError` otherwise.
- The `majority_element*` functions return `None` when no value occurs
  more than `len // 2` times.
- `sort_colors` and `sort_colors_counting` accept only 0, 1 and 2.
- `alternate_signs_split` and `alternate_signs` raise `ValueError` when
  the non-negative and negative values cannot alternate.
- `matrix` functions raise `ValueError` for ragged rows, and the rotations
  need a square matrix.

The versions of one exercise do not always agree:

- `single_element` XORs all values, so it is right only when every other
  value appears twice; `single_element_brute` returns the first value
  seen once, `single_element_counting` the smallest.
- `leaders_brute` lists leaders left to right and keeps repeats;
  `leaders` lists them right to left and reports a repeated value once.
- `rotate_left` moves the first `d` values to the end, while
  `rotate_left_reversal` brings the last `k` values to the front.
- `longest_subarray_with_sum_nonneg` is correct only when no value is
  negative.

## Command line

The package installs an `arraydrills` command with two subcommands.

Find the first index of a value (prints -1 when it is absent):

```
arraydrills search 4 7 9 --target 9
```

Without values on the command line, `search` reads integers from
standard input up to a `-1`, followed by the target.

Print the maximum subarray sum and the time it took:

```
arraydrills max-subarray -- -2 1 -3 4 -1 2 1 -5 4
```

Without values on the command line, `max-subarray` reads a count from
standard input followed by that many integers.

```
arraydrills --help
```

## What it does not do

The command line offers only `search` and `max-subarray`. Every other
exercise is reached by importing its module.