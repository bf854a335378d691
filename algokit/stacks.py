"""Stack-based problems and a stack that tracks its minimum."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Generic, TypeVar

T = TypeVar("T")

MAX_PAIRS = 16
_BRACKETS = {")": "(", "]": "[", "}": "{"}


class Stack(Generic[T]):
    """A last-in, first-out stack."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, value: T) -> None:
        """Place ``value`` on top."""
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def top(self) -> T:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def clear(self) -> None:
        """Remove every value."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)


class MinStack(Stack[int]):
    """A stack of integers that reports its smallest value in constant time."""

    def __init__(self) -> None:
        super().__init__()
        self._mins: Stack[int] = Stack()

    def push(self, value: int) -> None:
        smallest = value if not self._mins else min(self._mins.top(), value)
        self._mins.push(smallest)
        super().push(value)

    def pop(self) -> int:
        value = super().pop()
        self._mins.pop()
        return value

    def clear(self) -> None:
        super().clear()
        self._mins.clear()

    def get_min(self) -> int:
        """Return the smallest value currently on the stack."""
        if not self._mins:
            raise IndexError("minimum of empty stack")
        return self._mins.top()


def is_valid_parentheses(s: str) -> bool:
    """Check that ``s`` consists only of brackets that are properly matched and nested."""
    openers = set(_BRACKETS.values())
    pending: list[str] = []
    for c in s:
        if c in openers:
            pending.append(c)
        elif c in _BRACKETS:
            if not pending or pending.pop() != _BRACKETS[c]:
                return False
        else:
            return False
    return not pending


def _divide(left: int, right: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
}


def eval_rpn(tokens: Iterable[str]) -> int:
    """Evaluate an expression in reverse Polish notation.

    Division truncates toward zero. The value left on top of the stack is returned.
    """
    values: list[int] = []
    for token in tokens:
        op = _OPERATORS.get(token)
        if op is None:
            values.append(int(token))
            continue
        if len(values) < 2:
            raise ValueError(f"operator {token!r} needs two operands")
        right = values.pop()
        left = values.pop()
        values.append(op(left, right))
    if not values:
        raise ValueError("expression has no value")
    return values[-1]


def _balanced(prefix: str, opened: int, closed: int, n: int) -> Iterator[str]:
    if closed == n:
        yield prefix
        return
    if opened < n:
        yield from _balanced(prefix + "(", opened + 1, closed, n)
    if closed < opened:
        yield from _balanced(prefix + ")", opened, closed + 1, n)


def generate_parentheses(n: int) -> list[str]:
    """Return every well-formed string of ``n`` pairs of parentheses.

    Strings are ordered as binary numbers whose least significant digit is the
    first character, with ``(`` as 0 and ``)`` as 1. ``n`` may be at most 16.
    """
    if not 0 <= n <= MAX_PAIRS:
        raise ValueError(f"n must be between 0 and {MAX_PAIRS}, got {n}")
    return sorted(_balanced("", 0, 0, n), key=lambda s: s[::-1])


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """For each day, return how many days until a warmer one, or 0 if none follows."""
    result = [0] * len(temperatures)
    pending: list[int] = []
    for day, temp in enumerate(temperatures):
        while pending and temperatures[pending[-1]] < temp:
            earlier = pending.pop()
            result[earlier] = day - earlier
        pending.append(day)
    return result