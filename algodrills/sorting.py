"""Counting sort and two flavours of quicksort."""

from __future__ import annotations

from collections.abc import Callable, Iterable


def count_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers by tallying how often each one occurs."""
    items = list(values)
    if not items:
        return []
    if min(items) < 0:
        raise ValueError("counting sort needs non-negative integers")
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def _partition_fill(items: list[int], low: int, high: int) -> int:
    """Partition around items[low], moving the hole from end to end."""
    key = items[low]
    while low < high:
        while low < high and items[high] >= key:
            high -= 1
        items[low] = items[high]
        while low < high and items[low] <= key:
            low += 1
        items[high] = items[low]
    items[low] = key
    return low


def _partition_two_way(items: list[int], low: int, high: int) -> int:
    """Partition around items[low] with two pointers swapping misplaced pairs."""
    key = items[low]
    i, j = low + 1, high
    while i <= j:
        while i <= j and items[i] <= key:
            i += 1
        while i <= j and items[j] >= key:
            j -= 1
        if i <= j:
            items[i], items[j] = items[j], items[i]
            i += 1
            j -= 1
    items[low], items[j] = items[j], items[low]
    return j


def _quick_sort(values: Iterable[int], partition: Callable[[list[int], int, int], int]) -> list[int]:
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            mid = partition(items, low, high)
            pending.append((low, mid - 1))
            pending.append((mid + 1, high))
    return items


def quick_sort(values: Iterable[int]) -> list[int]:
    """Sorted copy of ``values`` using quicksort with a first-element pivot."""
    return _quick_sort(values, _partition_fill)


def quick_sort_two_way(values: Iterable[int]) -> list[int]:
    """Sorted copy of ``values`` using quicksort with two-pointer partitioning."""
    return _quick_sort(values, _partition_two_way)