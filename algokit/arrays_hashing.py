"""Array and hash-table problems: duplicates, anagrams, frequencies, encodings."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence
from itertools import combinations
from math import prod

SEPARATOR = "~"
EMPTY_CELL = "."


def has_duplicate(nums: Iterable[int]) -> bool:
    """Return True if any value occurs more than once."""
    seen: set[int] = set()
    for num in nums:
        if num in seen:
            return True
        seen.add(num)
    return False


def is_anagram(s: str, t: str) -> bool:
    """Return True if ``t`` is a rearrangement of the characters of ``s``."""
    return sorted(s) == sorted(t)


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Return the first index pair ``(i, j)``, ``i < j``, whose values add to ``target``.

    ``(-1, -1)`` is returned when no such pair exists.
    """
    for (i, a), (j, b) in combinations(enumerate(nums), 2):
        if a + b == target:
            return i, j
    return -1, -1


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams of each other.

    Groups are ordered by their sorted-letter key; words within a group keep
    their input order.
    """
    groups: defaultdict[str, list[str]] = defaultdict(list)
    for word in strs:
        groups["".join(sorted(word))].append(word)
    return [groups[key] for key in sorted(groups)]


def top_k_frequent(nums: Iterable[int], k: int) -> list[int]:
    """Return the ``k`` most frequent values, most frequent first.

    Values with equal frequency are ordered from the largest value down.
    """
    counts = Counter(nums)
    if k < 0 or k > len(counts):
        raise ValueError(
            f"k must be between 0 and the number of distinct values ({len(counts)}), got {k}"
        )
    ranked = sorted(((freq, num) for num, freq in counts.items()), reverse=True)
    return [num for _, num in ranked[:k]]


def encode(strs: Iterable[str]) -> str:
    """Join strings into one, terminating each with the separator."""
    return "".join(f"{s}{SEPARATOR}" for s in strs)


def decode(s: str) -> list[str]:
    """Split an encoded string back into its parts.

    Text after the last separator is not a complete item and is dropped.
    """
    return s.split(SEPARATOR)[:-1]


def product_except_self(nums: Sequence[int]) -> list[int]:
    """For each position, return the product of every other element."""
    zeros = sum(1 for n in nums if n == 0)
    if zeros > 1:
        return [0] * len(nums)
    product = prod(n for n in nums if n != 0)
    if zeros == 1:
        return [product if n == 0 else 0 for n in nums]
    return [product // n for n in nums]


def _has_repeat(cells: Iterable[str]) -> bool:
    filled = [cell for cell in cells if cell != EMPTY_CELL]
    return len(filled) != len(set(filled))


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """Check that no filled cell repeats within a row, column or 3x3 box.

    Empty cells are marked with ``"."``; the board need not be solvable.
    """
    rows = [row[:9] for row in board[:9]]
    columns = list(zip(*rows))
    boxes = [
        [rows[r][c] for r in range(top, top + 3) for c in range(left, left + 3)]
        for top in (0, 3, 6)
        for left in (0, 3, 6)
    ]
    return not any(_has_repeat(unit) for unit in (*rows, *columns, *boxes))


def longest_consecutive(nums: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive integers in ``nums``."""
    values = sorted(set(nums))
    if not values:
        return 0
    longest = run = 1
    for prev, cur in zip(values, values[1:]):
        if cur == prev + 1:
            run += 1
        else:
            run = 1
        longest = max(longest, run)
    return longest