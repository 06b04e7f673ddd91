"""Construction helper choosing the concrete edge-list class."""

from __future__ import annotations

from typing import TYPE_CHECKING

from indexgraph.graph._cached import DirectedCachedEdgeList, UndirectedCachedEdgeList
from indexgraph.graph._indexed import DirectedIndexedEdgeList, UndirectedIndexedEdgeList

if TYPE_CHECKING:
    from collections.abc import Iterable

    from indexgraph.graph._cached import CachedEdgeList
    from indexgraph.graph._indexed import IndexedEdgeList
    from indexgraph.graph.types import Edge


def edge_list(
    *,
    directed: bool,
    cached: bool = True,
    vertex_count: int = 0,
    edges: Iterable[Edge] = (),
) -> IndexedEdgeList | CachedEdgeList:
    """Create an edge-list graph, optionally bulk-loading *edges*.

    ``cached=True`` (the default) returns the memoizing variant, which is
    the better choice when the graph is queried repeatedly between
    mutations, as the algorithms in ``indexgraph.metrics`` do.
    """
    graph: IndexedEdgeList | CachedEdgeList
    if cached:
        graph = DirectedCachedEdgeList(vertex_count) if directed else UndirectedCachedEdgeList(vertex_count)
    else:
        graph = DirectedIndexedEdgeList(vertex_count) if directed else UndirectedIndexedEdgeList(vertex_count)
    graph.add_edges(edges)
    return graph
