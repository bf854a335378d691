"""Binary-search problems: sorted lookup, matrix search, eating speed, rotated minimum, timed values."""

from __future__ import annotations

from bisect import bisect_right
from collections import defaultdict
from collections.abc import Sequence


def search(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in ascending ``nums``, or -1 if absent.

    When ``target`` occurs more than once, the last occurrence is returned.
    """
    index = bisect_right(nums, target) - 1
    if index >= 0 and nums[index] == target:
        return index
    return -1


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Return True if ``target`` is in ``matrix``.

    Every row is ascending and each row starts after the previous one ends,
    so the cells read row by row form one ascending sequence.
    """
    if not matrix or not matrix[0]:
        return False
    width = len(matrix[0])
    cells = range(len(matrix) * width)

    def cell(i: int) -> int:
        row, col = divmod(i, width)
        return matrix[row][col]

    index = bisect_right(cells, target, key=cell) - 1
    return index >= 0 and cell(index) == target


def _hours_needed(piles: Sequence[int], speed: int) -> int:
    return sum(-(-pile // speed) for pile in piles)


def min_eating_speed(piles: Sequence[int], hours: int) -> int:
    """Return the smallest whole eating speed that finishes ``piles`` within ``hours``.

    Each hour one pile is eaten from, at most ``speed`` items of it. If even the
    size of the largest pile is too slow, that size is returned.
    """
    if not piles:
        raise ValueError("piles must not be empty")
    low, high = 1, max(piles)
    while low < high:
        mid = (low + high) // 2
        if _hours_needed(piles, mid) <= hours:
            high = mid
        else:
            low = mid + 1
    return low


def find_min(nums: Sequence[int]) -> int:
    """Return the smallest value of an ascending sequence that has been rotated."""
    if not nums:
        raise ValueError("nums must not be empty")
    left, right = 0, len(nums) - 1
    while left < right:
        mid = (left + right) // 2
        if nums[left] > nums[mid] < nums[right]:
            right = mid
        elif nums[left] <= nums[mid] <= nums[right]:
            return nums[left]
        else:
            left = mid + 1
    return nums[left]


class TimeMap:
    """A key-value store that keeps every value a key has had, by timestamp.

    Values for a key are expected to be set with increasing timestamps.
    """

    def __init__(self) -> None:
        self._timestamps: defaultdict[str, list[int]] = defaultdict(list)
        self._values: defaultdict[str, list[str]] = defaultdict(list)

    def set(self, key: str, value: str, timestamp: int) -> None:
        """Record ``value`` for ``key`` as of ``timestamp``."""
        self._timestamps[key].append(timestamp)
        self._values[key].append(value)

    def get(self, key: str, timestamp: int) -> str:
        """Return the value ``key`` had at ``timestamp``, or ``""`` if it had none yet."""
        stamps = self._timestamps.get(key)
        if not stamps:
            return ""
        index = bisect_right(stamps, timestamp) - 1
        return self._values[key][index] if index >= 0 else ""