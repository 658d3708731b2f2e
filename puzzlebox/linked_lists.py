"""Singly linked lists: digit increment, k-th from last, merging and circular pruning."""

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    value: int
    next: Optional["ListNode"] = None

    def __iter__(self):
        """Yield the values from this node to the end of the list."""
        node = self
        while node is not None:
            yield node.value
            node = node.next


def build_list(values):
    """Build a linked list holding ``values`` in order; None if there are none."""
    head = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_list(head):
    """The values of a (non-circular) linked list as a Python list."""
    return list(head) if head is not None else []


def add_one(head):
    """Add one to the number whose decimal digits the list holds, most significant first.

    The list is changed in place; the returned head may be a new node.
    """
    if head is None:
        raise ValueError("the list must not be empty")
    last_not_nine = None
    node = head
    while node is not None:
        if node.value != 9:
            last_not_nine = node
        node = node.next
    if last_not_nine is None:
        head = ListNode(0, head)
        last_not_nine = head
    last_not_nine.value += 1
    node = last_not_nine.next
    while node is not None:
        node.value = 0
        node = node.next
    return head


def kth_from_last(head, k):
    """Value of the k-th node from the end, counting the last node as 1."""
    if k < 1:
        raise IndexError("k must be at least 1")
    fast = head
    for _ in range(k):
        if fast is None:
            raise IndexError("k is larger than the list")
        fast = fast.next
    slow = head
    while fast is not None:
        fast = fast.next
        slow = slow.next
    return slow.value


def merge_sorted(head1, head2):
    """Merge two sorted lists by relinking their nodes; on ties the second list goes first."""
    anchor = ListNode(0)
    tail = anchor
    while head1 is not None and head2 is not None:
        if head1.value < head2.value:
            tail.next, head1 = head1, head1.next
        else:
            tail.next, head2 = head2, head2.next
        tail = tail.next
    tail.next = head1 if head1 is not None else head2
    return anchor.next


def build_circular(values):
    """Build a circular list holding ``values`` in order; None if there are none."""
    head = build_list(values)
    if head is None:
        return None
    tail = head
    while tail.next is not None:
        tail = tail.next
    tail.next = head
    return head


def circular_values(head):
    """The values of a circular list, once around from ``head``."""
    if head is None:
        return []
    values = [head.value]
    node = head.next
    while node is not head:
        values.append(node.value)
        node = node.next
    return values


def remove_alternate(head):
    """Unlink every second node of a circular list, keeping ``head``."""
    if head is None:
        return None
    node = head
    while True:
        node.next = node.next.next
        node = node.next
        if node is head or node.next is head:
            break
    return head