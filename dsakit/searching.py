"""Searching in lists and in row- and column-sorted matrices."""

from __future__ import annotations

from collections.abc import Sequence


def matrix_contains(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Return True if ``target`` is in a matrix whose rows and columns are sorted.

    The search starts in the top-right corner and walks left or down.
    """
    if not matrix or not matrix[0]:
        return False
    row, col = 0, len(matrix[0]) - 1
    while row < len(matrix) and col >= 0:
        element = matrix[row][col]
        if element == target:
            return True
        if element > target:
            col -= 1
        else:
            row += 1
    return False


def binary_search(items: Sequence[int], key: int) -> int:
    """Return an index of ``key`` in the sorted ``items``, or -1 if it is absent."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        if key < items[mid]:
            high = mid - 1
        elif key > items[mid]:
            low = mid + 1
        else:
            return mid
    return -1


def linear_search(items: Sequence[int], key: int) -> int:
    """Return the first index of ``key`` in ``items``, or -1 if it is absent."""
    return next((index for index, value in enumerate(items) if value == key), -1)