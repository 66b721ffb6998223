"""Classic sorting algorithms. Each returns a new list and leaves its input alone."""

from __future__ import annotations

import heapq
from collections.abc import Iterable


def bubble_sort(items: Iterable[int]) -> list[int]:
    """Sort ascending by repeatedly swapping adjacent out-of-order pairs."""
    result = list(items)
    for end in range(len(result) - 1, 0, -1):
        for j in range(end):
            if result[j + 1] < result[j]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def insertion_sort(items: Iterable[int]) -> list[int]:
    """Sort ascending by inserting each element into the sorted prefix."""
    result = list(items)
    for i in range(1, len(result)):
        current = result[i]
        j = i - 1
        while j >= 0 and current < result[j]:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = current
    return result


def selection_sort(items: Iterable[int]) -> list[int]:
    """Sort ascending by moving the smallest remaining element to the front."""
    result = list(items)
    for i in range(len(result) - 1):
        smallest = min(range(i, len(result)), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def sort_012(items: Iterable[int]) -> list[int]:
    """Arrange 0s, then other values, then 2s in a single pass."""
    result = list(items)
    low, mid, high = 0, 0, len(result) - 1
    while mid <= high:
        if result[mid] == 0:
            result[mid], result[low] = result[low], result[mid]
            low += 1
            mid += 1
        elif result[mid] == 2:
            result[mid], result[high] = result[high], result[mid]
            high -= 1
        else:
            mid += 1
    return result


def sort_binary(items: Iterable[int]) -> list[int]:
    """Return as many 0s as ``items`` holds zeros, followed by 1s for the rest."""
    values = list(items)
    zeros = sum(1 for value in values if value == 0)
    return [0] * zeros + [1] * (len(values) - zeros)


def merge_sorted(a: Iterable[int], b: Iterable[int]) -> list[int]:
    """Merge two ascending sequences; on ties elements of ``a`` come first."""
    return list(heapq.merge(a, b))


def heap_sort(items: Iterable[int]) -> list[int]:
    """Sort with a min-heap, moving each minimum to the back: the result is descending."""
    heap = list(items)
    heapq.heapify(heap)
    ascending = [heapq.heappop(heap) for _ in range(len(heap))]
    ascending.reverse()
    return ascending


def k_sorted_sort(items: Iterable[int], k: int) -> list[int]:
    """Sort descending a list whose elements are fewer than ``k`` places from their spot.

    A max-heap of ``k`` elements slides over the input.
    """
    values = list(items)
    if not values:
        return []
    if not 1 <= k <= len(values):
        raise ValueError(f"k must be between 1 and {len(values)}, got {k}")
    heap = [-value for value in values[:k]]
    heapq.heapify(heap)
    result = [-heapq.heapreplace(heap, -value) for value in values[k:]]
    while heap:
        result.append(-heapq.heappop(heap))
    return result