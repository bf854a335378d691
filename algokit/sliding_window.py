"""Sliding-window problems: stock profit, unique substrings, permutations, window maxima."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable, Sequence


def max_profit(prices: Iterable[int]) -> int:
    """Return the best profit from one buy followed by one later sale.

    Returns 0 when no sale can make a profit.
    """
    it = iter(prices)
    low = next(it, None)
    if low is None:
        return 0
    best = 0
    for price in it:
        if price > low:
            best = max(best, price - low)
        else:
            low = price
    return best


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    seen: set[str] = set()
    left = 0
    best = 0
    for right, ch in enumerate(s):
        while ch in seen:
            seen.discard(s[left])
            left += 1
        seen.add(ch)
        best = max(best, right - left + 1)
    return best


def check_inclusion(s1: str, s2: str) -> bool:
    """Return True if some permutation of ``s1`` is a substring of ``s2``."""
    size = len(s1)
    if size > len(s2):
        return False
    target = Counter(s1)
    window = Counter(s2[:size])
    if window == target:
        return True
    for outgoing, incoming in zip(s2, s2[size:]):
        window[outgoing] -= 1
        if not window[outgoing]:
            del window[outgoing]
        window[incoming] += 1
        if window == target:
            return True
    return False


def max_sliding_window(nums: Sequence[int], k: int) -> list[int]:
    """Return the maximum of every window of ``k`` consecutive values.

    A window wider than ``nums`` yields no results.
    """
    if k < 1:
        raise ValueError(f"window size must be positive, got {k}")
    window: deque[int] = deque()
    result: list[int] = []
    for i, value in enumerate(nums):
        while window and nums[window[-1]] <= value:
            window.pop()
        window.append(i)
        if window[0] <= i - k:
            window.popleft()
        if i >= k - 1:
            result.append(nums[window[0]])
    return result