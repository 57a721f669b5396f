"""A fixed-capacity least-recently-used cache."""

from __future__ import annotations

import logging
from collections import OrderedDict
from typing import Any, Hashable

logger = logging.getLogger(__name__)

_MISSING = -1


class LRUCache:
    """Cache holding at most ``capacity`` entries, evicting the least recently used."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        # Most recently used entries are kept at the end.
        self._entries: OrderedDict[Hashable, Any] = OrderedDict()

    def get(self, key: Hashable, default: Any = _MISSING) -> Any:
        """Return the value for ``key`` and mark it most recently used, else ``default``."""
        if key not in self._entries:
            return default
        self._entries.move_to_end(key)
        return self._entries[key]

    def put(self, key: Hashable, value: Any) -> None:
        """Insert or update ``key``, evicting the least recently used entry if full."""
        if key in self._entries:
            logger.debug("Updating node %s->%s with node: %s->%s", key, self._entries[key], key, value)
            self._entries[key] = value
            self._entries.move_to_end(key)
            return
        if len(self._entries) >= self.capacity:
            old_key, old_value = self._entries.popitem(last=False)
            logger.debug("Replacing node %s->%s with node: %s->%s", old_key, old_value, key, value)
        else:
            logger.debug("Adding a new node: %s->%s", key, value)
        self._entries[key] = value

    def items(self) -> list[tuple[Hashable, Any]]:
        """Return ``(key, value)`` pairs from most to least recently used."""
        return list(reversed(self._entries.items()))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __repr__(self) -> str:
        body = " ".join(f"[{k}: {v}]" for k, v in self.items())
        return f"LRUCache(capacity={self.capacity}, {body})"