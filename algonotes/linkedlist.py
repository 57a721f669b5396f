"""Singly linked lists and the classic algorithms on them."""

from __future__ import annotations

from dataclasses import dataclass, field
from operator import attrgetter
from typing import Any, Iterable, Iterator, TextIO


@dataclass(eq=False)
class Node:
    """A singly linked list element holding one value."""

    val: Any
    next: Node | None = field(default=None, repr=False)


class LinkedList:
    """A singly linked list that keeps its head and tail for fast appends."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self.tail: Node | None = None
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add ``value`` at the end of the list."""
        node = Node(value)
        if self.tail is None:
            self.head = self.tail = node
        else:
            self.tail.next = node
            self.tail = node

    def __iter__(self) -> Iterator[Any]:
        return (node.val for node in iter_nodes(self.head))

    def __len__(self) -> int:
        return sum(1 for _ in iter_nodes(self.head))

    def __str__(self) -> str:
        return "".join(f" -> {value}" for value in self)


def iter_nodes(head: Node | None) -> Iterator[Node]:
    """Yield the nodes starting at ``head``; never ends on a list with a loop."""
    node = head
    while node is not None:
        yield node
        node = node.next


def from_values(values: Iterable[Any]) -> Node | None:
    """Build a chain of nodes from ``values`` and return its head."""
    return LinkedList(values).head


def read_list(stream: TextIO) -> Node | None:
    """Read a count followed by that many integers and build a list from them.

    Returns ``None`` if the count is missing, not an integer or not positive.
    Reading stops early at the first token that is not an integer.
    """
    tokens = iter(stream.read().split())
    try:
        count = int(next(tokens))
    except (StopIteration, ValueError):
        return None
    if count <= 0:
        return None

    values = []
    for token in tokens:
        if len(values) == count:
            break
        try:
            values.append(int(token))
        except ValueError:
            break
    return from_values(values)


def format_list(head: Node | None) -> str:
    """Return the values from ``head`` joined by ``" -> "``."""
    return " -> ".join(str(node.val) for node in iter_nodes(head))


def find_loop(head: Node | None) -> Node | None:
    """Return the node where the slow and fast pointers meet, or ``None`` without a loop."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return fast
    return None


def find_middle(head: Node | None) -> Node | None:
    """Return the middle node in one pass; the second of two middles for even lengths."""
    middle = head
    for position, _ in enumerate(iter_nodes(head), start=1):
        if position % 2 == 0:
            middle = middle.next
    return middle


def reverse(head: Node | None) -> Node | None:
    """Reverse the list in place and return the new head."""
    new_head = None
    node = head
    while node is not None:
        following = node.next
        node.next = new_head
        new_head = node
        node = following
    return new_head


def reverse_between(head: Node | None, left: int, right: int) -> Node | None:
    """Reverse the nodes at 1-based positions ``left`` to ``right`` in place.

    A ``right`` past the end reverses to the end of the list. Returns the
    (possibly new) head. Raises ``ValueError`` if ``left`` is below 1, beyond
    the list, or greater than ``right``.
    """
    if left < 1 or right < left:
        raise ValueError("positions must satisfy 1 <= left <= right")
    if head is None or left == right:
        return head

    before = None
    current = head
    for _ in range(left - 1):
        if current is None:
            break
        before, current = current, current.next
    if current is None:
        raise ValueError(f"position {left} is beyond the end of the list")

    segment_start = current
    reversed_head = None
    for _ in range(right - left + 1):
        if current is None:
            break
        following = current.next
        current.next = reversed_head
        reversed_head = current
        current = following

    segment_start.next = current
    if before is None:
        return reversed_head
    before.next = reversed_head
    return head


def selection_sort_nodes(head: Node | None) -> Node | None:
    """Sort by repeatedly unlinking the smallest node; return the new head."""
    sorted_head = sorted_tail = None
    while head is not None:
        minimum = head
        before_min = None
        node = head
        while node.next is not None:
            if minimum.val > node.next.val:
                minimum = node.next
                before_min = node
            node = node.next

        if before_min is None:
            head = minimum.next
        else:
            before_min.next = minimum.next
        minimum.next = None

        if sorted_tail is None:
            sorted_head = minimum
        else:
            sorted_tail.next = minimum
        sorted_tail = minimum
    return sorted_head


def selection_sort_values(head: Node | None) -> Node | None:
    """Sort by swapping values between nodes, leaving the links untouched; return ``head``."""
    for node in iter_nodes(head):
        minimum = min(iter_nodes(node), key=attrgetter("val"))
        if minimum is not node:
            node.val, minimum.val = minimum.val, node.val
    return head