"""Graph metrics — centrality and connectivity over any ``GraphStore``."""

from indexgraph.metrics._queue import VertexQueue
from indexgraph.metrics.centrality import betweenness
from indexgraph.metrics.clustering import clusters, largest_cluster_size

__all__ = [
    "VertexQueue",
    "betweenness",
    "clusters",
    "largest_cluster_size",
]
