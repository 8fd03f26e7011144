"""Singly linked lists of integers and the classic operations on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import zip_longest
from typing import Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional[ListNode] = None

    def __iter__(self) -> Iterator[int]:
        return _iter_values(self)

    def __repr__(self) -> str:
        return f"ListNode({list(self)!r})"


def _iter_values(head: Optional[ListNode]) -> Iterator[int]:
    node = head
    while node is not None:
        yield node.val
        node = node.next


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return list(_iter_values(head))


def add_two_numbers(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Add two numbers stored as reversed digit lists, giving a new reversed digit list."""
    digits = []
    carry = 0
    for a, b in zip_longest(_iter_values(l1), _iter_values(l2), fillvalue=0):
        carry, digit = divmod(a + b + carry, 10)
        digits.append(digit)
    if carry:
        digits.append(1)
    return from_values(digits)


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the ``n``-th node counted from the end and return the new head."""
    length = sum(1 for _ in _iter_values(head))
    if n < 1 or n > length:
        raise ValueError(f"cannot remove node {n} from the end of a list of {length}")
    if n == length:
        return head.next
    prev = head
    for _ in range(length - n - 1):
        prev = prev.next
    prev.next = prev.next.next
    return head


def merge_two_lists(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Merge two sorted lists by relinking their nodes."""
    dummy = ListNode()
    tail = dummy
    first = True
    while l1 is not None and l2 is not None:
        if l1.val < l2.val or (first and l1.val == l2.val):
            tail.next, l1 = l1, l1.next
        else:
            tail.next, l2 = l2, l2.next
        tail = tail.next
        first = False
    tail.next = l1 if l1 is not None else l2
    return dummy.next


def swap_pairs(head: Optional[ListNode]) -> Optional[ListNode]:
    """Swap every two adjacent nodes and return the new head."""
    dummy = ListNode(0, head)
    prev = dummy
    while prev.next is not None and prev.next.next is not None:
        first = prev.next
        second = first.next
        first.next = second.next
        second.next = first
        prev.next = second
        prev = first
    return dummy.next


def delete_all_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Drop every value that occurs more than once in a sorted list."""
    dummy = ListNode(0, head)
    prev = dummy
    current = head
    while current is not None:
        if current.next is not None and current.next.val == current.val:
            value = current.val
            while current is not None and current.val == value:
                current = current.next
            prev.next = current
        else:
            prev = current
            current = current.next
    return dummy.next


def delete_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Keep only the first node of each run of equal values in a sorted list."""
    prev = head
    while prev is not None and prev.next is not None:
        if prev.next.val == prev.val:
            prev.next = prev.next.next
        else:
            prev = prev.next
    return head


def partition(head: Optional[ListNode], x: int) -> Optional[ListNode]:
    """Put nodes below ``x`` before the others, keeping relative order in each part."""
    less = ListNode()
    rest = ListNode()
    less_tail, rest_tail = less, rest
    node = head
    while node is not None:
        following = node.next
        node.next = None
        if node.val < x:
            less_tail.next = node
            less_tail = node
        else:
            rest_tail.next = node
            rest_tail = node
        node = following
    less_tail.next = rest.next
    return less.next


def remove_elements(head: Optional[ListNode], val: int) -> Optional[ListNode]:
    """Unlink every node whose value equals ``val``."""
    dummy = ListNode(0, head)
    prev = dummy
    while prev.next is not None:
        if prev.next.val == val:
            prev.next = prev.next.next
        else:
            prev = prev.next
    return dummy.next


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return the new head."""
    reversed_head: Optional[ListNode] = None
    node = head
    while node is not None:
        following = node.next
        node.next = reversed_head
        reversed_head = node
        node = following
    return reversed_head