"""Text patterns of stars and numbers, one string per line.

Every cell is two characters wide: a symbol followed by a space, or two spaces.
"""

from __future__ import annotations

import math

_STAR = "* "
_BLANK = "  "


def butterfly(n: int) -> list[str]:
    """Return a butterfly of 2n lines: wings that widen then narrow."""
    def line(i: int) -> str:
        return _STAR * i + _BLANK * (2 * n - 2 * i) + _STAR * i

    rows = range(1, n + 1)
    return [line(i) for i in rows] + [line(i) for i in reversed(rows)]


def number_pyramid(n: int) -> list[str]:
    """Return a pyramid whose row i reads i down to 1 and back up to i."""
    lines = []
    for i in range(1, n + 1):
        descending = "".join(f"{k} " for k in range(i, 0, -1))
        ascending = "".join(f"{k} " for k in range(2, i + 1))
        lines.append(_BLANK * (n - i) + descending + ascending)
    return lines


def diamond(n: int) -> list[str]:
    """Return a diamond of stars: n growing rows then n shrinking rows."""
    top = [_BLANK * (n - i) + _STAR * (2 * i - 1) for i in range(1, n + 1)]
    bottom = [_BLANK * (i - 1) + _STAR * (2 * n - 2 * i + 1) for i in range(1, n + 1)]
    return top + bottom


def lattice(n: int) -> list[str]:
    """Return floor(sqrt(n)) rows of n cells forming a diagonal lattice of stars."""
    rows = math.isqrt(max(n, 0))
    return [
        "".join(
            _STAR if (i + j) % 4 == 0 or (i % 2 == 0 and j % 2 == 0) else _BLANK
            for j in range(1, n + 1)
        )
        for i in range(1, rows + 1)
    ]