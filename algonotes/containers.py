"""A LIFO stack and a FIFO queue."""

from __future__ import annotations

from collections import deque
from typing import Any


class Stack:
    """Last-in, first-out stack."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, item: Any) -> None:
        """Put ``item`` on top."""
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item; raise ``IndexError`` when empty."""
        if not self._items:
            raise IndexError("Stack is empty")
        return self._items.pop()

    def top(self) -> Any:
        """Return the top item without removing it; raise ``IndexError`` when empty."""
        if not self._items:
            raise IndexError("Stack is empty")
        return self._items[-1]

    def empty(self) -> bool:
        """Return whether the stack holds no items."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class Queue:
    """First-in, first-out queue."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, item: Any) -> None:
        """Add ``item`` at the back."""
        self._items.append(item)

    def dequeue(self) -> Any:
        """Remove and return the front item; raise ``IndexError`` when empty."""
        if not self._items:
            raise IndexError("Queue is empty")
        return self._items.popleft()

    def empty(self) -> bool:
        """Return whether the queue holds no items."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)