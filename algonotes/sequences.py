"""Sequence algorithms: longest consecutive run, simple sorts and max-heap draining."""

from __future__ import annotations

import heapq
from typing import Any, Iterable


def longest_consecutive(nums: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive integers in ``nums``.

    The values may appear in any order; duplicates count once.
    """
    values = list(nums)
    if not values:
        return 0

    present = set(values)
    best = 1
    for start in values:
        if start - 1 in present:
            continue
        end = start
        while end + 1 in present:
            end += 1
        if end - start + 1 > best:
            best = end - start + 1
            # No remaining run can be longer than what is left of the input.
            if best > len(values) // 2:
                break
    return best


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list holding ``items`` in ascending order, sorted by bubble sort."""
    result = list(items)
    size = len(result)
    for done in range(size):
        for j in range(size - done - 1):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list holding ``items`` in ascending order, sorted by insertion sort."""
    result = list(items)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


class _MaxItem:
    """Heap entry that orders its value in reverse, turning heapq into a max-heap."""

    __slots__ = ("value",)

    def __init__(self, value: Any) -> None:
        self.value = value

    def __lt__(self, other: _MaxItem) -> bool:
        return other.value < self.value


def drain_max_heap(values: Iterable[Any]) -> list[Any]:
    """Push ``values`` onto a max-heap and pop them all, largest first."""
    heap = [_MaxItem(value) for value in values]
    heapq.heapify(heap)
    drained = []
    while heap:
        drained.append(heapq.heappop(heap).value)
    return drained