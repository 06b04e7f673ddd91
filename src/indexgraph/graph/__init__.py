"""Graph storage layer — indexed edge lists behind capability protocols."""

from indexgraph.graph._build import edge_list
from indexgraph.graph._cached import (
    CachedEdgeList,
    DirectedCachedEdgeList,
    UndirectedCachedEdgeList,
)
from indexgraph.graph._indexed import (
    DirectedIndexedEdgeList,
    IndexedEdgeList,
    UndirectedIndexedEdgeList,
)
from indexgraph.graph._rustworkx import from_rustworkx, to_rustworkx
from indexgraph.graph.protocols import (
    GraphStore,
    SupportsUndirectedQueries,
    is_directed_graph,
    is_undirected_graph,
)
from indexgraph.graph.types import ClusterResult, Edge, IndexState

__all__ = [
    "CachedEdgeList",
    "ClusterResult",
    "DirectedCachedEdgeList",
    "DirectedIndexedEdgeList",
    "Edge",
    "GraphStore",
    "IndexState",
    "IndexedEdgeList",
    "SupportsUndirectedQueries",
    "UndirectedCachedEdgeList",
    "UndirectedIndexedEdgeList",
    "edge_list",
    "from_rustworkx",
    "is_directed_graph",
    "is_undirected_graph",
    "to_rustworkx",
]
