# algokit

A collection of classic algorithm routines and small data structures in plain
Python, with no third-party dependencies. Python 3.10 or later.

## Installation

```
pip install .
```

## Modules

### `algokit.arrays_hashing`

- `has_duplicate(nums)`: whether any value occurs more than once.
- `is_anagram(s, t)`: whether `t` is a rearrangement of `s`.
- `two_sum(nums, target)`: first index pair `(i, j)` with `i < j` whose values
  add to `target`, or `(-1, -1)`.
- `group_anagrams(strs)`: groups of anagrams, ordered by their sorted-letter
  key; words keep their input order inside a group.
- `top_k_frequent(nums, k)`: the `k` most frequent values, most frequent first,
  ties broken from the largest value down. Raises `ValueError` if `k` is
  negative or larger than the number of distinct values.
- `encode(strs)` / `decode(s)`: join strings, each terminated by `~`, and split
  them back. Text after the last `~` is dropped by `decode`.
- `product_except_self(nums)`: for each position, the product of all other
  elements.
- `is_valid_sudoku(board)`: checks rows, columns and 3x3 boxes for repeated
  filled cells; empty cells are `"."`.
- `longest_consecutive(nums)`: length of the longest run of consecutive
  integers.

### `algokit.two_pointers`

- `is_palindrome(s)`: palindrome check ignoring case and anything but ASCII
  letters and digits.
- `two_sum_sorted(numbers, target)`: 1-based positions of two values in an
  ascending sequence that add to `target`, or `(-1, -1)`.
- `three_sum(nums)`: all distinct zero-sum triplets, each ascending, the list
  sorted.
- `max_area(heights)`: largest water area held between two walls.

### `algokit.sliding_window`

- `max_profit(prices)`: best profit from one buy and one later sale, or 0.
- `length_of_longest_substring(s)`: longest substring without repeated
  characters.
- `check_inclusion(s1, s2)`: whether a permutation of `s1` occurs in `s2`.
- `max_sliding_window(nums, k)`: maximum of every window of `k` values; a
  window wider than `nums` gives an empty list, and `k < 1` raises
  `ValueError`.

### `algokit.stacks`

- `Stack`: last-in, first-out stack with `push`, `pop`, `top`, `clear` and
  `len()`. `pop` and `top` raise `IndexError` when empty.
- `MinStack`: an integer `Stack` with `get_min()` returning the smallest value
  held, in constant time.
- `is_valid_parentheses(s)`: whether `s` holds only properly matched `()[]{}`.
- `eval_rpn(tokens)`: evaluates reverse Polish notation with `+ - * /`;
  division truncates toward zero. Raises `ValueError` on missing operands.
- `generate_parentheses(n)`: every well-formed string of `n` pairs, for
  `0 <= n <= 16` (`MAX_PAIRS`).
- `daily_temperatures(temperatures)`: days until a warmer day, or 0.

### `algokit.linked_list`

- `ListNode(val, next)`: a singly linked list node.
- `from_values(values)` / `to_values(head)`: build a list and read it back;
  `to_values` raises `ValueError` on a cyclic list.
- `has_cycle(head)`: whether the list loops.
- `merge_two_lists(list1, list2)`: splice two sorted lists, reusing nodes.
- `remove_nth_from_end(head, n)`: unlink the `n`-th node from the end (`n` of
  0 or 1 removes the last); raises `ValueError` for an empty list or `n` out
  of range.
- `reverse_list(head)`: reverse in place and return the new head.

### `algokit.binary_search`

- `search(nums, target)`: index of `target` in an ascending sequence (the last
  occurrence), or -1.
- `search_matrix(matrix, target)`: lookup in a matrix whose cells read row by
  row are ascending.
- `min_eating_speed(piles, hours)`: smallest speed that finishes all piles in
  time.
- `find_min(nums)`: minimum of a rotated ascending sequence.
- `TimeMap`: `set(key, value, timestamp)` and `get(key, timestamp)`, returning
  the latest value at or before `timestamp`, or `""`.

## Examples

```python
from algokit.arrays_hashing import group_anagrams, encode, decode
from algokit.stacks import MinStack, eval_rpn
from algokit.linked_list import from_values, to_values, reverse_list
from algokit.binary_search import TimeMap

group_anagrams(["act", "pots", "tops", "cat", "stop", "hat"])
decode(encode(["neet", "code"]))          # ["neet", "code"]

eval_rpn(["1", "2", "+", "3", "*", "4", "-"])   # 5

stack = MinStack()
for value in (1, 2, 0):
    stack.push(value)
stack.get_min()                           # 0

to_values(reverse_list(from_values([0, 1, 2, 3])))   # [3, 2, 1, 0]

store = TimeMap()
store.set("alice", "happy", 1)
store.get("alice", 2)                     # "happy"
```

## What it does not do

algokit is a library only: it has no command-line program. Import the
functions and classes from their modules.

## Running the tests

```
pip install ".[test]"
pytest
```