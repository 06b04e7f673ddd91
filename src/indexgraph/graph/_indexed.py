"""IndexedEdgeList — edge-list graph store with sorted bucket indices.

Edges live in two parallel arrays (``tail``, ``head``) in insertion order;
the edge id is the position in those arrays.  Two permutations of the edge
ids keep them sorted by (tail, head) and by (head, tail), and two
cumulative-sum arrays record where each vertex's bucket starts inside the
corresponding permutation, so the out-bucket of ``v`` is::

    index_tail[sum_tail[v] : sum_tail[v + 1]]

and the in-bucket is the same expression over ``index_head``/``sum_head``.
Within a bucket, edges are ordered by partner vertex and then by edge id.
"""

from __future__ import annotations

import logging
from bisect import bisect_right
from typing import TYPE_CHECKING, ClassVar

from indexgraph.exceptions import NotAnEdgeError, UnknownVertexError, WouldDiscardEdgesError
from indexgraph.graph.types import IndexState

if TYPE_CHECKING:
    from collections.abc import Iterable

    from indexgraph.graph.types import Edge

logger = logging.getLogger(__name__)


class IndexedEdgeList:
    """Storage engine shared by the directed and undirected edge lists.

    Not meant to be instantiated directly: use ``DirectedIndexedEdgeList``
    or ``UndirectedIndexedEdgeList``, which add the per-vertex queries of
    their kind.  Undirected edges are stored with ``tail <= head``.

    The store performs no locking; mutations must not overlap with other
    mutations or reads.
    """

    directed: ClassVar[bool]

    def __init__(self, vertex_count: int = 0) -> None:
        if type(self) is IndexedEdgeList:
            msg = "Use DirectedIndexedEdgeList or UndirectedIndexedEdgeList"
            raise TypeError(msg)
        self._tail: list[int] = []
        self._head: list[int] = []
        self._index_tail: list[int] = []
        self._index_head: list[int] = []
        self._sum_tail: list[int] = [0]
        self._sum_head: list[int] = [0]
        if vertex_count:
            self.vertex_count = vertex_count

    # ------------------------------------------------------------------
    # Vertices
    # ------------------------------------------------------------------

    @property
    def vertex_count(self) -> int:
        """Number of vertices.  Assigning grows or shrinks the vertex set.

        Shrinking raises ``WouldDiscardEdgesError`` if any stored edge has
        an endpoint at or above the new count.
        """
        return len(self._sum_tail) - 1

    @vertex_count.setter
    def vertex_count(self, n: int) -> None:
        if n < 0:
            msg = f"Vertex count must be non-negative, got {n}"
            raise ValueError(msg)
        current = len(self._sum_tail) - 1
        if n < current:
            if self._sum_tail[n] != self._sum_tail[-1] or self._sum_head[n] != self._sum_head[-1]:
                msg = f"Cannot reduce vertex count from {current} to {n} without discarding edges"
                raise WouldDiscardEdgesError(msg)
            del self._sum_tail[n + 1 :]
            del self._sum_head[n + 1 :]
        elif n > current:
            self._sum_tail.extend([self._sum_tail[-1]] * (n - current))
            self._sum_head.extend([self._sum_head[-1]] * (n - current))
        logger.debug("Vertex count changed from %d to %d", current, n)

    def add_vertices(self, n: int) -> int:
        """Append *n* isolated vertices and return the new vertex count."""
        if n < 0:
            msg = f"Cannot add a negative number of vertices ({n})"
            raise ValueError(msg)
        self.vertex_count = self.vertex_count + n
        return self.vertex_count

    def is_vertex(self, v: int) -> bool:
        """Return whether *v* is a valid vertex id."""
        return 0 <= v < len(self._sum_tail) - 1

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    @property
    def edge_count(self) -> int:
        """Number of stored edges."""
        return len(self._tail)

    def edges(self) -> list[Edge]:
        """Return all edges as ``(tail, head)`` pairs, ordered by edge id."""
        return list(zip(self._tail, self._head, strict=True))

    def add_edge(self, tail: int, head: int) -> int:
        """Add a single edge and return its id.

        The new id is inserted into both sorted indices by bisecting its
        bucket, placing it after any edges with the same endpoints.
        """
        self._require_vertex(tail)
        self._require_vertex(head)
        tail, head = self._canonical(tail, head)
        e = len(self._tail)
        self._tail.append(tail)
        self._head.append(head)

        lo, hi = self._sum_tail[tail], self._sum_tail[tail + 1]
        i = bisect_right(self._index_tail, head, lo, hi, key=self._head.__getitem__)
        self._index_tail.insert(i, e)
        lo, hi = self._sum_head[head], self._sum_head[head + 1]
        i = bisect_right(self._index_head, tail, lo, hi, key=self._tail.__getitem__)
        self._index_head.insert(i, e)

        for v in range(tail + 1, len(self._sum_tail)):
            self._sum_tail[v] += 1
        for v in range(head + 1, len(self._sum_head)):
            self._sum_head[v] += 1
        return e

    def add_edges(self, edges: Iterable[Edge]) -> range:
        """Add many edges at once and return the range of their ids.

        Every pair is validated before anything is stored, so a bad pair
        leaves the graph unchanged.  The indices are rebuilt with a stable
        sort, giving exactly the state that adding the same pairs one by one
        with ``add_edge`` would produce.
        """
        pairs: list[Edge] = []
        for tail, head in edges:
            self._require_vertex(tail)
            self._require_vertex(head)
            pairs.append(self._canonical(tail, head))

        start = len(self._tail)
        if not pairs:
            return range(start, start)
        for tail, head in pairs:
            self._tail.append(tail)
            self._head.append(head)

        ids = range(len(self._tail))
        self._index_tail = sorted(ids, key=lambda e: (self._tail[e], self._head[e]))
        self._index_head = sorted(ids, key=lambda e: (self._head[e], self._tail[e]))
        self._sum_tail = self._cumulative(self._tail, self._index_tail)
        self._sum_head = self._cumulative(self._head, self._index_head)
        logger.debug("Indexed %d new edges (%d total)", len(pairs), len(self._tail))
        return range(start, len(self._tail))

    def is_edge(self, tail: int, head: int) -> bool:
        """Return whether ``(tail, head)`` is an edge.

        Unknown vertex ids give ``False``.  Only the smaller of the two
        candidate buckets is scanned.
        """
        if not (self.is_vertex(tail) and self.is_vertex(head)):
            return False
        tail, head = self._canonical(tail, head)
        return self._find_edge(tail, head) is not None

    def edge_id(self, tail: int, head: int) -> int:
        """Return the id of edge ``(tail, head)``.

        With duplicate edges the lowest id is returned.  Raises
        ``UnknownVertexError`` for unknown ids and ``NotAnEdgeError`` if no
        such edge is stored.
        """
        self._require_vertex(tail)
        self._require_vertex(head)
        e = self._find_edge(*self._canonical(tail, head))
        if e is None:
            msg = f"({tail}, {head}) is not an edge"
            raise NotAnEdgeError(msg)
        return e

    # ------------------------------------------------------------------
    # Buckets
    # ------------------------------------------------------------------

    def bucket_bounds(self, v: int) -> tuple[int, int, int, int]:
        """Return ``(in_start, in_end, out_start, out_end)`` for vertex *v*.

        ``in_*`` delimit v's bucket in the head index, ``out_*`` its bucket
        in the tail index.
        """
        self._require_vertex(v)
        return self._sum_head[v], self._sum_head[v + 1], self._sum_tail[v], self._sum_tail[v + 1]

    def state(self) -> IndexState:
        """Snapshot the backing arrays."""
        return IndexState(
            tail=tuple(self._tail),
            head=tuple(self._head),
            index_tail=tuple(self._index_tail),
            index_head=tuple(self._index_head),
            sum_tail=tuple(self._sum_tail),
            sum_head=tuple(self._sum_head),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(vertices={self.vertex_count}, edges={self.edge_count})"

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _require_vertex(self, v: int) -> None:
        if not self.is_vertex(v):
            msg = f"No vertex with ID {v!r} (vertex count is {self.vertex_count})"
            raise UnknownVertexError(msg)

    def _canonical(self, tail: int, head: int) -> Edge:
        if not self.directed and head < tail:
            return head, tail
        return tail, head

    def _find_edge(self, tail: int, head: int) -> int | None:
        """Lowest id of edge ``(tail, head)``, or ``None``.  Ids must be canonical."""
        tail_lo, tail_hi = self._sum_tail[tail], self._sum_tail[tail + 1]
        if tail_lo == tail_hi:
            return None
        head_lo, head_hi = self._sum_head[head], self._sum_head[head + 1]
        if head_lo == head_hi:
            return None

        if tail_hi - tail_lo <= head_hi - head_lo:
            # search among the heads of tail
            for i in range(tail_lo, tail_hi):
                e = self._index_tail[i]
                if self._head[e] == head:
                    return e
        else:
            # search among the tails of head
            for i in range(head_lo, head_hi):
                e = self._index_head[i]
                if self._tail[e] == tail:
                    return e
        return None

    def _cumulative(self, vertex: list[int], index: list[int]) -> list[int]:
        """Bucket boundaries for *index*, which must be sorted by *vertex*."""
        n = self.vertex_count
        sums = [0] * (n + 1)
        v = 0
        for i, e in enumerate(index):
            w = vertex[e]
            while v < w:
                v += 1
                sums[v] = i
        while v < n:
            v += 1
            sums[v] = len(index)
        return sums

    def _in_bucket(self, v: int) -> list[int]:
        return self._index_head[self._sum_head[v] : self._sum_head[v + 1]]

    def _out_bucket(self, v: int) -> list[int]:
        return self._index_tail[self._sum_tail[v] : self._sum_tail[v + 1]]


class DirectedIndexedEdgeList(IndexedEdgeList):
    """Directed graph: edges run from ``tail`` (out) to ``head`` (in)."""

    directed: ClassVar[bool] = True

    def degree_in(self, v: int) -> int:
        """Number of edges whose head is *v*."""
        self._require_vertex(v)
        return self._sum_head[v + 1] - self._sum_head[v]

    def degree_out(self, v: int) -> int:
        """Number of edges whose tail is *v*."""
        self._require_vertex(v)
        return self._sum_tail[v + 1] - self._sum_tail[v]

    def incident_edges_in(self, v: int) -> list[int]:
        """Ids of edges entering *v*, ordered by tail."""
        self._require_vertex(v)
        return self._in_bucket(v)

    def incident_edges_out(self, v: int) -> list[int]:
        """Ids of edges leaving *v*, ordered by head."""
        self._require_vertex(v)
        return self._out_bucket(v)

    def neighbours_in(self, v: int) -> list[int]:
        """Tails of the edges entering *v*."""
        self._require_vertex(v)
        return [self._tail[e] for e in self._in_bucket(v)]

    def neighbours_out(self, v: int) -> list[int]:
        """Heads of the edges leaving *v*."""
        self._require_vertex(v)
        return [self._head[e] for e in self._out_bucket(v)]


class UndirectedIndexedEdgeList(IndexedEdgeList):
    """Undirected graph.

    Each edge sits in exactly one head-bucket and one tail-bucket, so the
    full view of a vertex is its head-bucket followed by its tail-bucket.
    The ``_in``/``_out`` queries are aliases of the direction-free ones.
    """

    directed: ClassVar[bool] = False

    def degree(self, v: int) -> int:
        """Number of edge endpoints at *v* (self-loops count twice)."""
        self._require_vertex(v)
        return (self._sum_head[v + 1] - self._sum_head[v]) + (self._sum_tail[v + 1] - self._sum_tail[v])

    def incident_edges(self, v: int) -> list[int]:
        """Ids of the edges touching *v*."""
        self._require_vertex(v)
        return self._in_bucket(v) + self._out_bucket(v)

    def neighbours(self, v: int) -> list[int]:
        """Vertices adjacent to *v*, one entry per incident edge."""
        self._require_vertex(v)
        return [self._tail[e] for e in self._in_bucket(v)] + [
            self._head[e] for e in self._out_bucket(v)
        ]

    degree_in = degree
    degree_out = degree
    incident_edges_in = incident_edges
    incident_edges_out = incident_edges
    neighbours_in = neighbours
    neighbours_out = neighbours
