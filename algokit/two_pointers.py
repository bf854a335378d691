"""Two-pointer problems: palindromes, pair and triplet sums, container area."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def _is_word_char(c: str) -> bool:
    return c.isascii() and c.isalnum()


def is_palindrome(s: str) -> bool:
    """Check whether ``s`` reads the same both ways, ignoring case and
    everything except ASCII letters and digits."""
    cleaned = "".join(c.lower() for c in s if _is_word_char(c))
    return cleaned == cleaned[::-1]


def two_sum_sorted(numbers: Sequence[int], target: int) -> tuple[int, int]:
    """Find two values in ascending ``numbers`` that add to ``target``.

    Returns their 1-based positions, or ``(-1, -1)`` if there are none.
    """
    left, right = 0, len(numbers) - 1
    while left < right:
        total = numbers[left] + numbers[right]
        if total == target:
            return left + 1, right + 1
        if total > target:
            right -= 1
        else:
            left += 1
    return -1, -1


def _pairs_cancelling(numbers: Sequence[int], skip: int) -> Iterator[tuple[int, int]]:
    """Yield value pairs of sorted ``numbers`` (excluding index ``skip``)
    that sum to the negation of ``numbers[skip]``."""
    goal = -numbers[skip]
    left, right = 0, len(numbers) - 1
    while left < right:
        if left == skip:
            left += 1
        if right == skip:
            right -= 1
        if left == right:
            break
        total = numbers[left] + numbers[right]
        if total == goal:
            yield numbers[left], numbers[right]
            left += 1
        elif total > goal:
            right -= 1
        else:
            left += 1


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct triplet of values from ``nums`` summing to zero.

    Each triplet is in ascending order and the list is sorted.
    """
    ordered = sorted(nums)
    triplets = {
        tuple(sorted((a, b, value)))
        for index, value in enumerate(ordered)
        for a, b in _pairs_cancelling(ordered, index)
    }
    return [list(t) for t in sorted(triplets)]


def max_area(heights: Sequence[int]) -> int:
    """Return the largest water area held between two of the given walls."""
    best = 0
    left, right = 0, len(heights) - 1
    while left < right:
        best = max(best, (right - left) * min(heights[left], heights[right]))
        if heights[left] > heights[right]:
            right -= 1
        else:
            left += 1
    return best