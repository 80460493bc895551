"""Singly linked list node and list algorithms."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

__all__ = [
    "ListNode",
    "has_cycle",
    "merge_two_lists",
    "is_palindrome_list",
    "delete_duplicates",
    "remove_elements",
]


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list of integers."""

    val: int = 0
    next: Optional[ListNode] = None

    @classmethod
    def from_values(cls, values: Iterable[int]) -> Optional[ListNode]:
        """Build a list holding ``values`` in order; None when there are none."""
        head: Optional[ListNode] = None
        tail: Optional[ListNode] = None
        for value in values:
            node = cls(value)
            if tail is None:
                head = node
            else:
                tail.next = node
            tail = node
        return head

    def values(self) -> list[int]:
        """Return the values from this node to the end of an acyclic list."""
        return list(_iter_values(self))

    def __repr__(self) -> str:
        return f"ListNode({self.val})"


def _iter_values(head: Optional[ListNode]) -> Iterator[int]:
    node = head
    while node is not None:
        yield node.val
        node = node.next


def has_cycle(head: Optional[ListNode]) -> bool:
    """Return True if following ``next`` from ``head`` loops forever."""
    slow = fast = head
    while slow is not None and fast is not None:
        slow = slow.next
        fast = fast.next
        if fast is not None:
            fast = fast.next
        if fast is None:
            return False
        if slow is fast:
            return True
    return False


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Return a new sorted list built from the values of two sorted lists."""
    return ListNode.from_values(heapq.merge(_iter_values(list1), _iter_values(list2)))


def is_palindrome_list(head: Optional[ListNode]) -> bool:
    """Return True if the list's values read the same both ways."""
    values = list(_iter_values(head))
    return values == values[::-1]


def delete_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Unlink consecutive nodes with equal values, in place; return the head."""
    node = head
    while node is not None and node.next is not None:
        if node.val == node.next.val:
            node.next = node.next.next
        else:
            node = node.next
    return head


def remove_elements(head: Optional[ListNode], val: int) -> Optional[ListNode]:
    """Unlink every node holding ``val``; return the first remaining node."""
    new_head: Optional[ListNode] = None
    previous: Optional[ListNode] = None
    node = head
    while node is not None:
        if node.val != val:
            if new_head is None:
                new_head = node
            previous = node
        elif previous is not None:
            previous.next = node.next
        node = node.next
    return new_head