# algokit

Well-known algorithms and small data structures in plain Python. The package
depends only on the standard library and supports Python 3.10 and later.

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

### `algokit.arrays`

- `max_profit(prices)`: best profit from one buy and one later sell (0 if none).
- `max_subarray_sum(nums)`: largest sum of a non-empty contiguous run.
- `rotate(nums, k)`: rotate right by `k` steps, in place.
- `sort_colors(nums)`: sort 0s, 1s and 2s in place; any other value raises `ValueError`.
- `find_duplicate(nums)`: the repeated value among n+1 values from 1..n.
- `merge_intervals(intervals)`: merge overlapping `[start, end]` intervals.
- `merge_sorted(nums1, m, nums2, n)`: merge into `nums1` in place.
- `max_area(heights)`: most water held between two lines.
- `max_product(nums)`: largest product of a non-empty contiguous run.
- `missing_rolls(rolls, mean, n)`: dice values for `n` missing rolls, or `[]` if impossible.

### `algokit.inversions`

- `count_inversions(values)`: pairs `i < j` with `values[i] > values[j]`.
- `reverse_pairs(values)`: pairs `i < j` with `values[i] > 2 * values[j]`.
- `is_ideal_permutation(nums)`: whether global and adjacent inversion counts are equal.

### `algokit.sums`

- `three_sum(nums)`: distinct sorted triplets summing to zero.
- `four_sum(nums, target)`: distinct sorted quadruplets summing to `target`.
- `closest_to_zero(values)`: the pair sum closest to zero; ties go to the larger sum.
- `can_arrange(values, k)`: whether the values pair up into sums divisible by `k`.

### `algokit.voting`

- `majority_element(nums)`: the value seen more than half the time, or `None`.
- `majority_elements(nums)`: all values seen more than a third of the time.

### `algokit.binary_search`

- `aggressive_cows(stalls, k)`: largest minimum distance for placing `k` cows.
- `find_pages(pages, students)`: smallest maximum page load over contiguous allocations;
  raises `ValueError` when there are more students than books.

### `algokit.monotonic`

- `next_greater_circular(values)`: next greater value with wrap-around, `-1` where none.
- `daily_temperatures(temperatures)`: days until a warmer temperature, `0` where none.
- `build_array(target, n)`: the `"Push"`/`"Pop"` operations that build `target` from 1..n.

### `algokit.matrix`

- `rotate_image(matrix)`: rotate a square matrix 90° clockwise, in place.
- `construct_2d(original, m, n)`: reshape into `m` rows of `n`, or `[]` on a size mismatch.
- `count_sub_islands(grid1, grid2)`: islands of `grid2` lying wholly on land in `grid1`.

### `algokit.strings`

- `reverse_words(s)`, `count_and_say(n)`, `compare_version(version1, version2)`,
  `int_to_roman(num)`, `longest_common_prefix(strs)`, `first_unique_char(s)`,
  `frequency_sort(s)`, `str_str(haystack, needle)`.

### `algokit.dynamic`

- `min_steps(n)`: fewest Copy All / Paste operations to reach `n` characters.
- `min_cut_cost(n, cuts)`: least total cost of cutting a stick of length `n`.
- `num_distinct(s, t)`: number of distinct subsequences of `s` equal to `t`.
- `pascal_row(row_index)`: a row of Pascal's triangle.
- `add_digits(num)`: repeated digit sum down to one digit.
- `permutations(nums)`: every ordering of `nums`.

### `algokit.containers`

- `CircularDeque(capacity)`: fixed-size deque; `insert_front`, `insert_last`,
  `delete_front` and `delete_last` return `False` when they cannot act;
  `front()` and `rear()` raise `IndexError` when empty.
- `IncrementStack(max_size)`: bounded stack with `increment(k, val)` on the bottom `k` items.
- `StackQueue`: a FIFO queue built from two stacks (`push`, `pop`, `peek`, `is_empty`).
- `QueueStack`: a LIFO stack built on one queue (`push`, `pop`, `top`, `is_empty`).
- `MinStack`: a stack with constant-time `get_min()`.

All containers support `len()`. Reading from an empty one raises `IndexError`.

### `algokit.linked_list`

- `ListNode`, which can be iterated for its values, plus `build_list`, `list_values`,
  `remove_values`, `swap_pairs`, `insertion_sort_list`.

### `algokit.trees`

- `TreeNode` and `tree_from_level_order(values)`, where `None` marks a missing child.
- `is_sum_property`, `build_from_preorder_inorder`, `build_from_inorder_postorder`,
  `level_order_bottom`, `flatten`, `morris_inorder`, `morris_preorder`,
  `path_between`, `has_path_sum`, `sum_numbers`.

## Examples

```python
from algokit.arrays import max_profit, merge_intervals
from algokit.strings import int_to_roman, compare_version
from algokit.containers import MinStack
from algokit.linked_list import build_list, swap_pairs, list_values

max_profit([7, 1, 5, 3, 6, 4])              # 5
merge_intervals([[1, 3], [2, 6], [8, 10]])  # [[1, 6], [8, 10]]
int_to_roman(1994)                          # "MCMXCIV"
compare_version("1.01", "1.001")            # 0

stack = MinStack()
stack.push(3)
stack.push(1)
stack.get_min()                             # 1

list_values(swap_pairs(build_list([1, 2, 3, 4])))  # [2, 1, 4, 3]
```

Some functions change the object you pass in: `rotate`, `sort_colors`,
`merge_sorted`, `rotate_image` and `flatten`. The linked-list functions relink
the nodes they are given and return the new head.

## What it does not do

algokit is a library only. It has no command-line interface and reads or
writes no files.