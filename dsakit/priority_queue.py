"""A min-priority queue of integers and a small command interpreter for it."""

from __future__ import annotations

import heapq
import sys
from collections.abc import Iterable, Sequence


class PriorityQueue:
    """Min-heap of integers: the smallest element is always at the front."""

    def __init__(self) -> None:
        self._heap: list[int] = []

    def is_empty(self) -> bool:
        """Return True if the queue holds no elements."""
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)

    def get_min(self) -> int:
        """Return the smallest element; raise IndexError if the queue is empty."""
        if not self._heap:
            raise IndexError("get_min from an empty priority queue")
        return self._heap[0]

    def insert(self, element: int) -> None:
        """Add ``element`` to the queue."""
        heapq.heappush(self._heap, element)

    def remove_min(self) -> int:
        """Remove and return the smallest element; raise IndexError if empty."""
        if not self._heap:
            raise IndexError("remove_min from an empty priority queue")
        return heapq.heappop(self._heap)


def run_commands(tokens: Iterable[str | int]) -> list[str]:
    """Run queue commands and return the lines they print.

    Commands: 1 x inserts x, 2 shows the minimum, 3 removes the minimum,
    4 shows the size, 5 shows whether the queue is empty. -1, any other
    number or the end of input stops. Reading an empty queue shows 0.
    """
    queue = PriorityQueue()
    output: list[str] = []
    stream = iter(tokens)
    for token in stream:
        choice = int(token)
        if choice == 1:
            element = next(stream, None)
            if element is None:
                break
            queue.insert(int(element))
        elif choice in (2, 3):
            if queue.is_empty():
                output.append("0")
            elif choice == 2:
                output.append(str(queue.get_min()))
            else:
                output.append(str(queue.remove_min()))
        elif choice == 4:
            output.append(str(len(queue)))
        elif choice == 5:
            output.append("true" if queue.is_empty() else "false")
        else:
            break
    return output


def main(argv: Sequence[str] | None = None) -> int:
    """Read commands from standard input and print the results."""
    for line in run_commands(sys.stdin.read().split()):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())