"""Singly linked lists and the intersection of two sorted lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int
    next: ListNode | None = None

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next


def from_iterable(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order."""
    dummy = ListNode(0)
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_list(head: ListNode | None) -> list[int]:
    """Values of the linked list from head to tail."""
    return list(head) if head is not None else []


def intersection(head1: ListNode | None, head2: ListNode | None) -> ListNode | None:
    """New list of the values common to two ascending lists, in ascending order."""
    dummy = ListNode(0)
    tail = dummy
    while head1 is not None and head2 is not None:
        if head1.val < head2.val:
            head1 = head1.next
        elif head1.val > head2.val:
            head2 = head2.next
        else:
            tail.next = ListNode(head1.val)
            tail = tail.next
            head1 = head1.next
            head2 = head2.next
    return dummy.next