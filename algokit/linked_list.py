"""Singly linked list nodes and operations on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: Any = 0
    next: Optional[ListNode] = None

    def __iter__(self) -> Iterator[Any]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


def build_list(values: Iterable[Any]) -> Optional[ListNode]:
    """Linked list holding ``values`` in order; None for no values."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def list_values(head: Optional[ListNode]) -> list[Any]:
    """Values of the list starting at ``head``, in order."""
    return list(head) if head is not None else []


def remove_values(nums: Iterable[Any], head: Optional[ListNode]) -> Optional[ListNode]:
    """Unlink every node whose value is in ``nums``; returns the new head."""
    unwanted = set(nums)
    dummy = ListNode(next=head)
    node = dummy
    while node.next is not None:
        if node.next.val in unwanted:
            node.next = node.next.next
        else:
            node = node.next
    return dummy.next


def swap_pairs(head: Optional[ListNode]) -> Optional[ListNode]:
    """Swap every two adjacent nodes; returns the new head."""
    dummy = ListNode(next=head)
    prev = dummy
    while prev.next is not None and prev.next.next is not None:
        first = prev.next
        second = first.next
        first.next = second.next
        second.next = first
        prev.next = second
        prev = first
    return dummy.next


def insertion_sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort the list ascending by insertion sort; returns the new head."""
    dummy = ListNode()
    current = head
    while current is not None:
        following = current.next
        prev = dummy
        while prev.next is not None and prev.next.val < current.val:
            prev = prev.next
        current.next = prev.next
        prev.next = current
        current = following
    return dummy.next