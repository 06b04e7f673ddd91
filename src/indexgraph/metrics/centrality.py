"""Betweenness centrality via Brandes' algorithm."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from indexgraph.metrics._mask import ignore_mask
from indexgraph.metrics._queue import VertexQueue

if TYPE_CHECKING:
    from collections.abc import Sequence

    from indexgraph.graph.protocols import GraphStore

logger = logging.getLogger(__name__)


def betweenness(graph: GraphStore, ignore: Sequence[bool] | None = None) -> list[float]:
    """Unnormalized betweenness centrality of every vertex.

    Runs one breadth-first search per source, counting shortest paths
    (``sigma``) and recording predecessors, then replays the visited
    vertices in reverse discovery order to accumulate pair dependencies.
    Edges are followed via ``neighbours_out``; parallel edges count as
    distinct shortest paths.

    Parameters
    ----------
    graph:
        Any ``GraphStore``; it is only read.
    ignore:
        Optional per-vertex flags.  Ignored vertices are neither sources
        nor traversed, as if removed from the graph; their score stays 0.

    Returns
    -------
    list[float]
        One score per vertex.  Undirected scores are halved, since each
        shortest path is found once from either endpoint.
    """
    n = graph.vertex_count
    skip = ignore_mask(ignore, n)
    centrality = [0.0] * n
    sigma = [0.0] * n
    delta = [0.0] * n
    dist = [-1] * n
    preds: list[list[int]] = [[] for _ in range(n)]
    stack: list[int] = []
    queue = VertexQueue(n)

    sources = 0
    for s in range(n):
        if skip[s]:
            continue
        sources += 1
        sigma[s] = 1.0
        dist[s] = 0
        queue.push(s)

        while queue:
            v = queue.pop()
            stack.append(v)
            for w in graph.neighbours_out(v):
                if skip[w]:
                    continue
                if dist[w] < 0:
                    queue.push(w)
                    dist[w] = dist[v] + 1
                    sigma[w] = sigma[v]
                    preds[w].append(v)
                elif dist[w] == dist[v] + 1:
                    sigma[w] += sigma[v]
                    preds[w].append(v)

        # dependency accumulation; leaves every array reset for the next source
        while stack:
            w = stack.pop()
            for v in preds[w]:
                delta[v] += (sigma[v] / sigma[w]) * (1.0 + delta[w])
            if w != s:
                centrality[w] += delta[w]
            sigma[w] = 0.0
            delta[w] = 0.0
            dist[w] = -1
            preds[w].clear()

    if not graph.directed:
        centrality = [c / 2.0 for c in centrality]

    logger.debug("Betweenness computed from %d of %d vertices as sources", sources, n)
    return centrality
