"""A bounded FIFO queue whose producers and consumers wait a limited time."""

from __future__ import annotations

import logging
import threading
from collections import deque
from typing import Any

logger = logging.getLogger(__name__)


class QueueTimeout(RuntimeError):
    """Raised when a push or pop waited too long on a full or empty queue."""


class RequestManager:
    """Queue of at most ``capacity`` items; blocked calls give up after ``timeout`` seconds."""

    def __init__(self, capacity: int, timeout: float = 1.0) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        if timeout < 0:
            raise ValueError("timeout must not be negative")
        self.capacity = capacity
        self.timeout = timeout
        self._items: deque[Any] = deque()
        self._lock = threading.Lock()
        self._not_full = threading.Condition(self._lock)
        self._not_empty = threading.Condition(self._lock)

    def push(self, item: Any) -> None:
        """Append ``item``, waiting for room; raise ``QueueTimeout`` if none appears."""
        with self._lock:
            if len(self._items) >= self.capacity:
                logger.debug("Queue is full, waiting...")
                if not self._not_full.wait_for(
                    lambda: len(self._items) < self.capacity, self.timeout
                ):
                    raise QueueTimeout("Queue is full")
            logger.debug("Pushing into queue %s", item)
            self._items.append(item)
            self._not_empty.notify()

    def pop(self) -> Any:
        """Remove and return the oldest item, waiting for one; raise ``QueueTimeout`` if none arrives."""
        with self._lock:
            if not self._items:
                logger.debug("Queue is empty, waiting...")
                if not self._not_empty.wait_for(lambda: bool(self._items), self.timeout):
                    raise QueueTimeout("Queue is Empty")
            item = self._items.popleft()
            logger.debug("Popped from queue %s", item)
            self._not_full.notify()
            return item

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)