"""VertexQueue — fixed-capacity FIFO used as a BFS frontier."""

from __future__ import annotations

from indexgraph.exceptions import InvariantViolationError


class VertexQueue:
    """Ring buffer of vertex ids with capacity equal to the vertex count.

    A breadth-first traversal enqueues each vertex at most once, so the
    queue can never legitimately overflow.  Overflow, out-of-range ids and
    reads from an empty queue raise ``InvariantViolationError``.
    """

    __slots__ = ("_buffer", "_front", "_length")

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            msg = f"Queue capacity must be non-negative, got {capacity}"
            raise ValueError(msg)
        self._buffer = [0] * capacity
        self._front = 0
        self._length = 0

    @property
    def capacity(self) -> int:
        return len(self._buffer)

    @property
    def empty(self) -> bool:
        return self._length == 0

    def __len__(self) -> int:
        return self._length

    def push(self, v: int) -> None:
        """Append *v* at the back."""
        capacity = len(self._buffer)
        if not 0 <= v < capacity:
            msg = f"Vertex ID {v} is outside the queue range [0, {capacity})"
            raise InvariantViolationError(msg)
        if self._length == capacity:
            msg = f"Queue overflow: already holds {capacity} vertices"
            raise InvariantViolationError(msg)
        self._buffer[(self._front + self._length) % capacity] = v
        self._length += 1

    @property
    def front(self) -> int:
        """The vertex that ``pop`` would return next."""
        if self._length == 0:
            msg = "Vertex queue is empty"
            raise InvariantViolationError(msg)
        return self._buffer[self._front]

    def pop(self) -> int:
        """Remove and return the front vertex."""
        v = self.front
        self._front = (self._front + 1) % len(self._buffer)
        self._length -= 1
        return v

    def clear(self) -> None:
        """Drop every queued vertex."""
        self._front = 0
        self._length = 0

    def __repr__(self) -> str:
        return f"VertexQueue(length={self._length}, capacity={len(self._buffer)})"
