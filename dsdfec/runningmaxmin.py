"""Streaming maximum and minimum over a sliding window."""

from __future__ import annotations

from collections import deque


def next_power_of_two(x: int) -> int:
    """Return the smallest power of two that is larger than or equal to ``x``."""
    result = 1
    while result < x:
        result <<= 1
    return result


class RunningMaxMin:
    """Maximum and minimum of the last ``width`` values seen.

    Uses the streaming algorithm with two monotonic queues of
    ``(index, value)`` pairs, one for the maximum and one for the minimum.
    """

    def __init__(self, width: int) -> None:
        self._count = 0
        self.resize(width)

    def resize(self, width: int) -> None:
        """Set a new window width and forget the values seen so far."""
        if width < 1:
            raise ValueError("window width must be at least 1")
        self.width = width
        self._up: deque[tuple[int, float]] = deque()
        self._lo: deque[tuple[int, float]] = deque()

    def update(self, value: float) -> None:
        """Add a value to the window, dropping the oldest one if it is full."""
        up, lo = self._up, self._lo
        if up:
            if value > up[-1][1]:
                up.pop()
                while up and value >= up[-1][1]:
                    up.pop()
            else:
                lo.pop()
                while lo and value <= lo[-1][1]:
                    lo.pop()

        n = self._count
        for queue in (up, lo):
            queue.append((n, value))
            if n == self.width + queue[0][0]:
                queue.popleft()
        self._count += 1

    def maximum(self) -> float:
        """Return the largest value in the window."""
        if not self._up:
            raise IndexError("no values in the window")
        return self._up[0][1]

    def minimum(self) -> float:
        """Return the smallest value in the window."""
        if not self._lo:
            raise IndexError("no values in the window")
        return self._lo[0][1]