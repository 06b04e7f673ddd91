"""CachedEdgeList — memoizing decorator over an indexed edge list.

Neighbour and incident-edge lists are materialized per vertex, on first
access, into two shared arenas of ``2 * edge_count`` slots.  A vertex's
window in the arena starts at ``sum_head[v] + sum_tail[v]``: its in-part
(head-bucket) comes first, followed by its out-part (tail-bucket), so every
vertex owns a disjoint window and no per-vertex allocation is needed.

Cached views are read-only ``memoryview`` slices of the arena.  They stay
valid until the next edge mutation, which drops every window.
"""

from __future__ import annotations

import logging
from array import array
from typing import TYPE_CHECKING, ClassVar

from indexgraph.exceptions import UnknownVertexError
from indexgraph.graph._indexed import (
    DirectedIndexedEdgeList,
    IndexedEdgeList,
    UndirectedIndexedEdgeList,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from indexgraph.graph.types import Edge, IndexState

logger = logging.getLogger(__name__)

_TYPECODE = "q"


class _Arena:
    """Flat buffer carved into per-vertex windows."""

    __slots__ = ("_buffer", "_readonly", "_writable")

    def __init__(self, size: int = 0) -> None:
        # A fresh buffer on every regrow: views handed out earlier keep the
        # old one alive instead of pinning this one.
        self._buffer = array(_TYPECODE, [0]) * size
        self._writable = memoryview(self._buffer)
        self._readonly = self._writable.toreadonly()

    def __len__(self) -> int:
        return len(self._buffer)

    def fill(self, start: int, values: Sequence[int]) -> memoryview:
        """Copy *values* into the window starting at *start* and return it."""
        end = start + len(values)
        self._writable[start:end] = array(_TYPECODE, values)
        return self._readonly[start:end]


class CachedEdgeList:
    """Caching decorator shared by the directed and undirected variants.

    Wraps (and exclusively owns) an ``IndexedEdgeList`` of the matching
    kind.  Every structural query is forwarded to it explicitly; only the
    neighbour/incidence accessors defined by the subclasses are memoized.
    """

    directed: ClassVar[bool]
    _store_type: ClassVar[type[IndexedEdgeList]]
    _window_tables: ClassVar[int]

    def __init__(self, vertex_count: int = 0) -> None:
        if type(self) is CachedEdgeList:
            msg = "Use DirectedCachedEdgeList or UndirectedCachedEdgeList"
            raise TypeError(msg)
        self._graph: IndexedEdgeList = self._store_type(vertex_count)
        self._neighbours_cache = _Arena()
        self._incident_edges_cache = _Arena()
        self._windows: tuple[list[memoryview | None], ...] = tuple(
            [None] * vertex_count for _ in range(self._window_tables)
        )

    # ------------------------------------------------------------------
    # Forwarded vertex operations
    # ------------------------------------------------------------------

    @property
    def vertex_count(self) -> int:
        """Number of vertices.  Assigning grows or shrinks the vertex set."""
        return self._graph.vertex_count

    @vertex_count.setter
    def vertex_count(self, n: int) -> None:
        self._graph.vertex_count = n
        for table in self._windows:
            if n < len(table):
                del table[n:]
            else:
                table.extend([None] * (n - len(table)))

    def add_vertices(self, n: int) -> int:
        """Append *n* isolated vertices and return the new vertex count."""
        if n < 0:
            msg = f"Cannot add a negative number of vertices ({n})"
            raise ValueError(msg)
        self.vertex_count = self.vertex_count + n
        return self.vertex_count

    def is_vertex(self, v: int) -> bool:
        return self._graph.is_vertex(v)

    # ------------------------------------------------------------------
    # Forwarded edge operations
    # ------------------------------------------------------------------

    @property
    def edge_count(self) -> int:
        return self._graph.edge_count

    def edges(self) -> list[Edge]:
        return self._graph.edges()

    def add_edge(self, tail: int, head: int) -> int:
        """Add a single edge and drop every cached window."""
        e = self._graph.add_edge(tail, head)
        self._invalidate()
        return e

    def add_edges(self, edges: Iterable[Edge]) -> range:
        """Add many edges at once and drop every cached window."""
        ids = self._graph.add_edges(edges)
        if ids:
            self._invalidate()
        return ids

    def is_edge(self, tail: int, head: int) -> bool:
        return self._graph.is_edge(tail, head)

    def edge_id(self, tail: int, head: int) -> int:
        return self._graph.edge_id(tail, head)

    def bucket_bounds(self, v: int) -> tuple[int, int, int, int]:
        return self._graph.bucket_bounds(v)

    def state(self) -> IndexState:
        return self._graph.state()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(vertices={self.vertex_count}, edges={self.edge_count})"

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _invalidate(self) -> None:
        size = 2 * self._graph.edge_count
        self._neighbours_cache = _Arena(size)
        self._incident_edges_cache = _Arena(size)
        n = self._graph.vertex_count
        for table in self._windows:
            table[:] = [None] * n
        logger.debug("Invalidated cached views (arena size %d)", size)

    def _require_vertex(self, v: int) -> None:
        if not self._graph.is_vertex(v):
            msg = f"No vertex with ID {v!r} (vertex count is {self._graph.vertex_count})"
            raise UnknownVertexError(msg)


class DirectedCachedEdgeList(CachedEdgeList):
    """Directed graph with memoized in/out neighbour and incidence views."""

    directed: ClassVar[bool] = True
    _store_type: ClassVar[type[IndexedEdgeList]] = DirectedIndexedEdgeList
    _window_tables: ClassVar[int] = 4

    _graph: DirectedIndexedEdgeList

    def degree_in(self, v: int) -> int:
        return self._graph.degree_in(v)

    def degree_out(self, v: int) -> int:
        return self._graph.degree_out(v)

    def neighbours_in(self, v: int) -> memoryview:
        """Tails of the edges entering *v* (cached)."""
        self._require_vertex(v)
        table = self._windows[0]
        view = table[v]
        if view is None:
            in_start, _, out_start, _ = self._graph.bucket_bounds(v)
            view = self._neighbours_cache.fill(in_start + out_start, self._graph.neighbours_in(v))
            table[v] = view
        return view

    def neighbours_out(self, v: int) -> memoryview:
        """Heads of the edges leaving *v* (cached)."""
        self._require_vertex(v)
        table = self._windows[1]
        view = table[v]
        if view is None:
            _, in_end, out_start, _ = self._graph.bucket_bounds(v)
            view = self._neighbours_cache.fill(in_end + out_start, self._graph.neighbours_out(v))
            table[v] = view
        return view

    def incident_edges_in(self, v: int) -> memoryview:
        """Ids of the edges entering *v* (cached)."""
        self._require_vertex(v)
        table = self._windows[2]
        view = table[v]
        if view is None:
            in_start, _, out_start, _ = self._graph.bucket_bounds(v)
            view = self._incident_edges_cache.fill(
                in_start + out_start, self._graph.incident_edges_in(v)
            )
            table[v] = view
        return view

    def incident_edges_out(self, v: int) -> memoryview:
        """Ids of the edges leaving *v* (cached)."""
        self._require_vertex(v)
        table = self._windows[3]
        view = table[v]
        if view is None:
            _, in_end, out_start, _ = self._graph.bucket_bounds(v)
            view = self._incident_edges_cache.fill(
                in_end + out_start, self._graph.incident_edges_out(v)
            )
            table[v] = view
        return view


class UndirectedCachedEdgeList(CachedEdgeList):
    """Undirected graph with memoized neighbour and incidence views."""

    directed: ClassVar[bool] = False
    _store_type: ClassVar[type[IndexedEdgeList]] = UndirectedIndexedEdgeList
    _window_tables: ClassVar[int] = 2

    _graph: UndirectedIndexedEdgeList

    def degree(self, v: int) -> int:
        return self._graph.degree(v)

    def neighbours(self, v: int) -> memoryview:
        """Vertices adjacent to *v*, one entry per incident edge (cached)."""
        self._require_vertex(v)
        table = self._windows[0]
        view = table[v]
        if view is None:
            in_start, _, out_start, _ = self._graph.bucket_bounds(v)
            view = self._neighbours_cache.fill(in_start + out_start, self._graph.neighbours(v))
            table[v] = view
        return view

    def incident_edges(self, v: int) -> memoryview:
        """Ids of the edges touching *v* (cached)."""
        self._require_vertex(v)
        table = self._windows[1]
        view = table[v]
        if view is None:
            in_start, _, out_start, _ = self._graph.bucket_bounds(v)
            view = self._incident_edges_cache.fill(
                in_start + out_start, self._graph.incident_edges(v)
            )
            table[v] = view
        return view

    degree_in = degree
    degree_out = degree
    neighbours_in = neighbours
    neighbours_out = neighbours
    incident_edges_in = incident_edges
    incident_edges_out = incident_edges
