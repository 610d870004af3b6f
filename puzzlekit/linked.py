"""Puzzles over singly linked lists."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice


@dataclass(eq=False, repr=False)
class ListNode:
    """A singly linked list node."""

    val: int = 0
    next: ListNode | None = None

    @classmethod
    def from_iterable(cls, values):
        """Build a list from values; None when there are none."""
        head = None
        for value in reversed(list(values)):
            head = cls(value, head)
        return head

    def __iter__(self):
        node = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self):
        return f"ListNode.from_iterable({list(self)!r})"


def merge_nodes(head):
    """Replace each run of values between zeros with its sum."""
    if head is None:
        raise ValueError("list must not be empty")
    sums = []
    total = 0
    for value in islice(head, 1, None):
        if value == 0:
            sums.append(total)
            total = 0
        else:
            total += value
    return ListNode.from_iterable(sums)


def remove_nodes(head):
    """Drop every node that has a strictly greater value somewhere after it."""
    kept = []
    node = head
    while node is not None:
        while kept and kept[-1].val < node.val:
            kept.pop()
        kept.append(node)
        node = node.next
    for current, following in zip(kept, kept[1:] + [None]):
        current.next = following
    return kept[0] if kept else None


def double_it(head):
    """Double the number whose decimal digits the list holds, most significant first."""
    if head.val > 4:
        head = ListNode(0, head)
    node = head
    while node is not None:
        node.val = (2 * node.val) % 10
        if node.next is not None and node.next.val > 4:
            node.val += 1
        node = node.next
    return head