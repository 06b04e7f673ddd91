"""indexgraph: indexed edge-list graphs and graph metrics.

Build a graph once (or incrementally), then run repeated structural
queries and whole-graph metrics over it.
"""

__version__ = "0.1.0"

from indexgraph.exceptions import (
    GraphError,
    InvariantViolationError,
    NotAnEdgeError,
    UnknownVertexError,
    WouldDiscardEdgesError,
)
from indexgraph.graph import (
    CachedEdgeList,
    ClusterResult,
    DirectedCachedEdgeList,
    DirectedIndexedEdgeList,
    GraphStore,
    IndexedEdgeList,
    IndexState,
    SupportsUndirectedQueries,
    UndirectedCachedEdgeList,
    UndirectedIndexedEdgeList,
    edge_list,
    from_rustworkx,
    is_directed_graph,
    is_undirected_graph,
    to_rustworkx,
)
from indexgraph.metrics import VertexQueue, betweenness, clusters, largest_cluster_size

__all__ = [
    "CachedEdgeList",
    "ClusterResult",
    "DirectedCachedEdgeList",
    "DirectedIndexedEdgeList",
    "GraphError",
    "GraphStore",
    "IndexState",
    "IndexedEdgeList",
    "InvariantViolationError",
    "NotAnEdgeError",
    "SupportsUndirectedQueries",
    "UndirectedCachedEdgeList",
    "UndirectedIndexedEdgeList",
    "UnknownVertexError",
    "VertexQueue",
    "WouldDiscardEdgesError",
    "betweenness",
    "clusters",
    "edge_list",
    "from_rustworkx",
    "is_directed_graph",
    "is_undirected_graph",
    "largest_cluster_size",
    "to_rustworkx",
]
