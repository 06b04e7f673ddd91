"""Connected-component labelling and largest-cluster sizing."""

from __future__ import annotations

import logging
from itertools import chain
from typing import TYPE_CHECKING

from indexgraph.graph.types import ClusterResult
from indexgraph.metrics._mask import ignore_mask
from indexgraph.metrics._queue import VertexQueue

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from indexgraph.graph.protocols import GraphStore

logger = logging.getLogger(__name__)


def clusters(graph: GraphStore, ignore: Sequence[bool] | None = None) -> ClusterResult:
    """Label the connected components of *graph* by breadth-first search.

    Directed graphs are treated as undirected (weak connectivity).  Labels
    are assigned in order of each component's lowest vertex id; ignored
    vertices get ``-1`` and do not connect anything.
    """
    n = graph.vertex_count
    skip = ignore_mask(ignore, n)
    labels = [-1] * n
    sizes: list[int] = []
    queue = VertexQueue(n)

    for s in range(n):
        if skip[s] or labels[s] >= 0:
            continue
        label = len(sizes)
        labels[s] = label
        size = 1
        queue.push(s)
        while queue:
            v = queue.pop()
            for w in _adjacent(graph, v):
                if skip[w] or labels[w] >= 0:
                    continue
                labels[w] = label
                size += 1
                queue.push(w)
        sizes.append(size)

    logger.debug("Found %d clusters among %d vertices", len(sizes), n)
    return ClusterResult(labels=tuple(labels), sizes=tuple(sizes))


def largest_cluster_size(graph: GraphStore, ignore: Sequence[bool] | None = None) -> int:
    """Number of vertices in the largest connected component.

    Returns ``0`` for an empty graph or when every vertex is ignored.
    """
    return clusters(graph, ignore).largest


def _adjacent(graph: GraphStore, v: int) -> Iterable[int]:
    if graph.directed:
        return chain(graph.neighbours_in(v), graph.neighbours_out(v))
    return graph.neighbours_out(v)
