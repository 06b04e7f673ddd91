"""Graph protocols — runtime-checkable capability sets for graph stores.

Directed and undirected stores share a core protocol; only undirected
stores additionally provide the direction-free ``degree``, ``neighbours``
and ``incident_edges`` queries.  Algorithms in ``indexgraph.metrics``
accept anything satisfying ``GraphStore``, so alternative backends can be
plugged in without inheriting from the bundled edge lists.

Capabilities are detected via ``isinstance()``; a directed store must not
expose the undirected-only members.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from indexgraph.graph.types import Edge


@runtime_checkable
class GraphStore(Protocol):
    """Core graph interface — vertex/edge mutation and structural queries.

    Every graph store must implement this.  ``directed`` is fixed for the
    lifetime of the store.
    """

    directed: bool

    # ------------------------------------------------------------------
    # Size
    # ------------------------------------------------------------------

    @property
    def vertex_count(self) -> int: ...
    @property
    def edge_count(self) -> int: ...
    def add_vertices(self, n: int) -> int: ...
    def is_vertex(self, v: int) -> bool: ...

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def add_edge(self, tail: int, head: int) -> int: ...
    def add_edges(self, edges: Iterable[Edge]) -> range: ...
    def is_edge(self, tail: int, head: int) -> bool: ...
    def edge_id(self, tail: int, head: int) -> int: ...
    def edges(self) -> list[Edge]: ...

    # ------------------------------------------------------------------
    # Per-vertex queries
    # ------------------------------------------------------------------

    def degree_in(self, v: int) -> int: ...
    def degree_out(self, v: int) -> int: ...
    def neighbours_in(self, v: int) -> Sequence[int]: ...
    def neighbours_out(self, v: int) -> Sequence[int]: ...
    def incident_edges_in(self, v: int) -> Sequence[int]: ...
    def incident_edges_out(self, v: int) -> Sequence[int]: ...


@runtime_checkable
class SupportsUndirectedQueries(Protocol):
    """Undirected only: direction-free per-vertex queries."""

    def degree(self, v: int) -> int: ...
    def neighbours(self, v: int) -> Sequence[int]: ...
    def incident_edges(self, v: int) -> Sequence[int]: ...


def is_directed_graph(graph: object) -> bool:
    """Return ``True`` if *graph* is a directed ``GraphStore``."""
    return (
        isinstance(graph, GraphStore)
        and bool(graph.directed)
        and not isinstance(graph, SupportsUndirectedQueries)
    )


def is_undirected_graph(graph: object) -> bool:
    """Return ``True`` if *graph* is an undirected ``GraphStore``."""
    return (
        isinstance(graph, GraphStore)
        and not graph.directed
        and isinstance(graph, SupportsUndirectedQueries)
    )
