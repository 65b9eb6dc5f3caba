"""Singly linked list puzzles: group reversal, rotation and merge sort."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: ListNode | None = None


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def from_values(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order; empty input gives ``None``."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: ListNode | None) -> list[int]:
    """Values of the list starting at ``head``, in order."""
    return [node.val for node in _nodes(head)]


def reverse_k_group(head: ListNode | None, k: int) -> ListNode | None:
    """Reverse each full group of ``k`` nodes; a short tail keeps its order."""
    if k < 1:
        raise ValueError("k must be at least 1")
    anchor = ListNode(0, head)
    tail = anchor
    while True:
        kth: ListNode | None = tail
        for _ in range(k):
            kth = kth.next
            if kth is None:
                return anchor.next
        group_start = tail.next
        after = kth.next
        prev, node = after, group_start
        while node is not after:
            node.next, prev, node = prev, node, node.next
        tail.next = kth
        tail = group_start


def rotate_right(head: ListNode | None, k: int) -> ListNode | None:
    """Rotate the list ``k`` places to the right."""
    if k < 0:
        raise ValueError("k must not be negative")
    nodes = list(_nodes(head))
    if len(nodes) < 2:
        return head
    shift = k % len(nodes)
    if shift == 0:
        return head
    new_tail = nodes[-shift - 1]
    new_head = nodes[-shift]
    nodes[-1].next = head
    new_tail.next = None
    return new_head


def _middle(head: ListNode) -> ListNode:
    slow, fast = head, head.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def _merge(first: ListNode | None, second: ListNode | None) -> ListNode | None:
    anchor = ListNode()
    tail = anchor
    while first is not None and second is not None:
        if first.val < second.val:
            tail.next, first = first, first.next
        else:
            tail.next, second = second, second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return anchor.next


def sort_list(head: ListNode | None) -> ListNode | None:
    """Sort the list in ascending order by relinking its nodes (merge sort)."""
    if head is None or head.next is None:
        return head
    middle = _middle(head)
    right = middle.next
    middle.next = None
    return _merge(sort_list(head), sort_list(right))