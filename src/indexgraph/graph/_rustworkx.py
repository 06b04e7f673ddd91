"""Conversion between indexgraph edge lists and rustworkx graphs."""

from __future__ import annotations

from typing import TYPE_CHECKING

import rustworkx

from indexgraph.graph._build import edge_list

if TYPE_CHECKING:
    from indexgraph.graph._cached import CachedEdgeList
    from indexgraph.graph._indexed import IndexedEdgeList
    from indexgraph.graph.protocols import GraphStore


def to_rustworkx(graph: GraphStore) -> rustworkx.PyDiGraph | rustworkx.PyGraph:
    """Copy *graph* into a rustworkx graph.

    Node ``i`` carries vertex id ``i`` as payload; edges are added in edge-id
    order and carry their edge id, so rustworkx edge indices match.
    """
    rx_graph = rustworkx.PyDiGraph() if graph.directed else rustworkx.PyGraph()
    rx_graph.add_nodes_from(list(range(graph.vertex_count)))
    rx_graph.add_edges_from(
        [(tail, head, e) for e, (tail, head) in enumerate(graph.edges())]
    )
    return rx_graph


def from_rustworkx(
    rx_graph: rustworkx.PyDiGraph | rustworkx.PyGraph,
    *,
    cached: bool = True,
) -> IndexedEdgeList | CachedEdgeList:
    """Build an edge list from a rustworkx graph.

    Vertex ids are rustworkx node indices.  Indices freed by node removal
    become isolated vertices.  Payloads are dropped.
    """
    indices = rx_graph.node_indices()
    vertex_count = max(indices) + 1 if len(indices) else 0
    return edge_list(
        directed=isinstance(rx_graph, rustworkx.PyDiGraph),
        cached=cached,
        vertex_count=vertex_count,
        edges=list(rx_graph.edge_list()),
    )
