"""Graph value types — immutable snapshots and analysis results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

Edge: TypeAlias = tuple[int, int]


@dataclass(frozen=True, slots=True)
class IndexState:
    """Snapshot of the arrays backing an indexed edge list.

    Two stores holding the same edges in the same insertion order have equal
    snapshots, however the edges were added (singly or in bulk).

    Attributes:
        tail: Tail vertex of each edge, by edge id.
        head: Head vertex of each edge, by edge id.
        index_tail: Edge ids ordered by (tail, head, id).
        index_head: Edge ids ordered by (head, tail, id).
        sum_tail: Cumulative out-bucket sizes, ``vertex_count + 1`` entries.
        sum_head: Cumulative in-bucket sizes, ``vertex_count + 1`` entries.
    """

    tail: tuple[int, ...]
    head: tuple[int, ...]
    index_tail: tuple[int, ...]
    index_head: tuple[int, ...]
    sum_tail: tuple[int, ...]
    sum_head: tuple[int, ...]


@dataclass(frozen=True, slots=True)
class ClusterResult:
    """Connected-component labelling of a graph.

    Attributes:
        labels: Component label per vertex, ``-1`` for ignored vertices.
        sizes: Number of vertices carrying each label, indexed by label.
    """

    labels: tuple[int, ...]
    sizes: tuple[int, ...]

    @property
    def count(self) -> int:
        """Number of components found."""
        return len(self.sizes)

    @property
    def largest(self) -> int:
        """Size of the largest component, ``0`` if there are none."""
        return max(self.sizes, default=0)
