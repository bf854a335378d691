"""Singly linked lists: building, cycle detection, merging, removal, reversal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: ListNode | None = field(default=None, repr=False)


def _walk(head: ListNode | None) -> Iterator[ListNode]:
    """Yield each node in order, raising ValueError if the list loops."""
    seen: set[int] = set()
    node = head
    while node is not None:
        if id(node) in seen:
            raise ValueError("linked list contains a cycle")
        seen.add(id(node))
        yield node
        node = node.next


def from_values(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_values(head: ListNode | None) -> list[int]:
    """Return the values of a linked list in order."""
    return [node.val for node in _walk(head)]


def has_cycle(head: ListNode | None) -> bool:
    """Return True if following ``next`` links ever revisits a node."""
    visited: set[int] = set()
    node = head
    while node is not None:
        if id(node) in visited:
            return True
        visited.add(id(node))
        node = node.next
    return False


def merge_two_lists(list1: ListNode | None, list2: ListNode | None) -> ListNode | None:
    """Splice two sorted lists into one sorted list, reusing their nodes.

    On equal values the node from ``list2`` comes first.
    """
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val < list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Unlink the ``n``-th node counted from the end and return the new head.

    ``n`` of 0 removes the last node, as does ``n`` of 1.
    """
    if head is None:
        raise ValueError("cannot remove from an empty list")
    nodes = list(_walk(head))
    size = len(nodes)
    if not 0 <= n <= size:
        raise ValueError(f"n must be between 0 and {size}, got {n}")
    n = max(n, 1)
    if n == size:
        return head.next
    before = nodes[size - n - 1]
    before.next = before.next.next if before.next is not None else None
    return head


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse a list in place and return its new head."""
    prev: ListNode | None = None
    node = head
    while node is not None:
        node.next, prev, node = prev, node, node.next
    return prev