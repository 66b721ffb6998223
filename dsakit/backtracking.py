"""Backtracking searches: N queens, paths through a maze and sudoku."""

from __future__ import annotations

from collections.abc import Sequence

Board = list[list[int]]

# Order in which the maze search tries its neighbours: right, up, left, down.
_MOVES = ((0, 1), (-1, 0), (0, -1), (1, 0))


def n_queens(n: int) -> list[Board]:
    """Return every placement of n non-attacking queens as 0/1 boards.

    Solutions come in lexicographic order of the queens' columns, row by row.
    """
    if n < 0:
        raise ValueError(f"board size must be non-negative, got {n}")
    solutions: list[Board] = []
    columns: list[int] = []
    used_cols: set[int] = set()
    used_diag: set[int] = set()
    used_anti: set[int] = set()

    def place(row: int) -> None:
        if row == n:
            solutions.append([[int(c == col) for c in range(n)] for col in columns])
            return
        for col in range(n):
            if col in used_cols or row - col in used_diag or row + col in used_anti:
                continue
            columns.append(col)
            used_cols.add(col)
            used_diag.add(row - col)
            used_anti.add(row + col)
            place(row + 1)
            columns.pop()
            used_cols.remove(col)
            used_diag.remove(row - col)
            used_anti.remove(row + col)

    place(0)
    return solutions


def maze_paths(maze: Sequence[Sequence[int]]) -> list[Board]:
    """Return every simple path through a square maze from top-left to bottom-right.

    Open cells are non-zero. Each path is a 0/1 board marking its cells.
    """
    n = len(maze)
    if any(len(row) != n for row in maze):
        raise ValueError("maze must be square")
    if n == 0:
        return []
    visited = [[0] * n for _ in range(n)]
    paths: list[Board] = []

    def walk(row: int, col: int) -> None:
        if not (0 <= row < n and 0 <= col < n):
            return
        if not maze[row][col] or visited[row][col]:
            return
        visited[row][col] = 1
        if (row, col) == (n - 1, n - 1):
            paths.append([line[:] for line in visited])
        else:
            for d_row, d_col in _MOVES:
                walk(row + d_row, col + d_col)
        visited[row][col] = 0

    walk(0, 0)
    return paths


def solve_sudoku(grid: Sequence[Sequence[int]]) -> Board | None:
    """Return a solved copy of a 9x9 sudoku (0 marks an empty cell), or None."""
    if len(grid) != 9 or any(len(row) != 9 for row in grid):
        raise ValueError("sudoku grid must be 9x9")
    if any(not 0 <= value <= 9 for row in grid for value in row):
        raise ValueError("sudoku values must be between 0 and 9")
    board = [list(row) for row in grid]

    def is_safe(row: int, col: int, num: int) -> bool:
        if num in board[row]:
            return False
        if any(board[r][col] == num for r in range(9)):
            return False
        top, left = row - row % 3, col - col % 3
        return all(
            board[r][c] != num for r in range(top, top + 3) for c in range(left, left + 3)
        )

    def solve() -> bool:
        empty = next(
            ((r, c) for r in range(9) for c in range(9) if board[r][c] == 0), None
        )
        if empty is None:
            return True
        row, col = empty
        for num in range(1, 10):
            if is_safe(row, col, num):
                board[row][col] = num
                if solve():
                    return True
                board[row][col] = 0
        return False

    return board if solve() else None