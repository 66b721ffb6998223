"""Array exercises: digit-array addition, rotation, second largest, matrices."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from itertools import zip_longest


def sum_of_digit_arrays(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Add two numbers given as lists of decimal digits, most significant first.

    The result has one more digit than the longer input; its first digit is
    the final carry, 0 or 1.
    """
    digits = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue=0):
        carry, digit = divmod(x + y + carry, 10)
        digits.append(digit)
    digits.append(carry)
    digits.reverse()
    return digits


def rotate_left(items: Sequence[int], d: int) -> list[int]:
    """Return ``items`` rotated left by ``d`` places (0 <= d <= len(items))."""
    if not 0 <= d <= len(items):
        raise ValueError(f"rotation must be between 0 and {len(items)}, got {d}")
    values = list(items)
    return values[d:] + values[:d]


def second_largest(numbers: Iterable[int]) -> int | None:
    """Return the second largest distinct value, or None if there is none."""
    top_two = heapq.nlargest(2, set(numbers))
    return top_two[1] if len(top_two) == 2 else None


def matrix_multiply(
    a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]
) -> list[list[int]]:
    """Return the matrix product ``a`` x ``b``."""
    inner = len(b)
    if any(len(row) != inner for row in a):
        raise ValueError("every row of the left matrix must have len(b) entries")
    width = len(b[0]) if b else 0
    if any(len(row) != width for row in b):
        raise ValueError("rows of the right matrix must all have the same length")
    columns = list(zip(*b))
    return [
        [sum(x * y for x, y in zip(row, column)) for column in columns]
        if columns
        else [0] * width
        for row in a
    ]


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements of ``matrix`` read clockwise from the top-left corner."""
    if not matrix or not matrix[0]:
        return []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    order: list[int] = []
    while top <= bottom and left <= right:
        order.extend(matrix[top][col] for col in range(left, right + 1))
        top += 1
        order.extend(matrix[row][right] for row in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            order.extend(matrix[bottom][col] for col in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            order.extend(matrix[row][left] for row in range(bottom, top - 1, -1))
            left += 1
    return order