"""Tests for the caching edge-list decorator."""

from __future__ import annotations

import random

import pytest

from indexgraph.exceptions import UnknownVertexError, WouldDiscardEdgesError
from indexgraph.graph import (
    CachedEdgeList,
    DirectedCachedEdgeList,
    DirectedIndexedEdgeList,
    UndirectedCachedEdgeList,
    UndirectedIndexedEdgeList,
)

# ======================================================================
# Helpers
# ======================================================================


def _pair(directed: bool) -> tuple:
    """A (plain, cached) pair of empty stores of the same kind."""
    if directed:
        return DirectedIndexedEdgeList(), DirectedCachedEdgeList()
    return UndirectedIndexedEdgeList(), UndirectedCachedEdgeList()


def _assert_same_views(plain, cached) -> None:
    assert plain.state() == cached.state()
    for v in range(plain.vertex_count):
        assert list(cached.neighbours_in(v)) == plain.neighbours_in(v)
        assert list(cached.neighbours_out(v)) == plain.neighbours_out(v)
        assert list(cached.incident_edges_in(v)) == plain.incident_edges_in(v)
        assert list(cached.incident_edges_out(v)) == plain.incident_edges_out(v)
        assert cached.degree_in(v) == plain.degree_in(v)
        assert cached.degree_out(v) == plain.degree_out(v)


# ======================================================================
# Memoization
# ======================================================================


class TestMemoization:
    def test_base_class_not_instantiable(self) -> None:
        with pytest.raises(TypeError):
            CachedEdgeList()

    def test_repeated_access_returns_same_view(self, sample_edges: list[tuple[int, int]]) -> None:
        g = UndirectedCachedEdgeList(10)
        g.add_edges(sample_edges)
        first = g.neighbours(4)
        assert g.neighbours(4) is first
        assert g.incident_edges(4) is g.incident_edges(4)

    def test_views_are_read_only(self, sample_edges: list[tuple[int, int]]) -> None:
        g = DirectedCachedEdgeList(10)
        g.add_edges(sample_edges)
        view = g.neighbours_out(5)
        assert view.readonly
        with pytest.raises(TypeError):
            view[0] = 0

    def test_directed_windows(self, sample_edges: list[tuple[int, int]]) -> None:
        g = DirectedCachedEdgeList(10)
        g.add_edges(sample_edges)
        assert list(g.neighbours_out(5)) == [4, 8]
        assert list(g.incident_edges_out(5)) == [1, 0]
        assert list(g.neighbours_in(4)) == [3, 5, 7]
        assert list(g.incident_edges_in(4)) == [3, 1, 2]
        assert list(g.neighbours_in(0)) == []

    def test_arenas_sized_to_twice_edge_count(self, sample_edges: list[tuple[int, int]]) -> None:
        g = UndirectedCachedEdgeList(10)
        assert len(g._neighbours_cache) == 0
        g.add_edges(sample_edges)
        assert len(g._neighbours_cache) == 12
        assert len(g._incident_edges_cache) == 12
        g.add_edge(0, 1)
        assert len(g._neighbours_cache) == 14

    def test_windows_do_not_overlap(self, make_edges) -> None:
        g = UndirectedCachedEdgeList(8)
        edges = make_edges(2, 8, 25)
        g.add_edges(edges)
        plain = UndirectedIndexedEdgeList(8)
        plain.add_edges(edges)
        views = [g.neighbours(v) for v in range(8)]
        # filling later windows must not disturb earlier ones
        for v, view in enumerate(views):
            assert list(view) == plain.neighbours(v)

    def test_unknown_vertex(self) -> None:
        g = UndirectedCachedEdgeList(3)
        with pytest.raises(UnknownVertexError):
            g.neighbours(3)
        with pytest.raises(UnknownVertexError):
            g.incident_edges(-1)


# ======================================================================
# Invalidation
# ======================================================================


class TestInvalidation:
    def test_add_edge_refreshes_views(self) -> None:
        g = UndirectedCachedEdgeList(4)
        g.add_edge(0, 1)
        assert list(g.neighbours(0)) == [1]
        g.add_edge(0, 2)
        assert list(g.neighbours(0)) == [1, 2]
        assert list(g.neighbours(2)) == [0]

    def test_add_edges_refreshes_views(self) -> None:
        g = DirectedCachedEdgeList(4)
        g.add_edge(0, 1)
        assert list(g.neighbours_out(0)) == [1]
        assert list(g.incident_edges_in(3)) == []
        g.add_edges([(0, 3), (2, 3)])
        assert list(g.neighbours_out(0)) == [1, 3]
        assert list(g.incident_edges_in(3)) == [1, 2]

    def test_stale_view_survives_mutation(self) -> None:
        g = UndirectedCachedEdgeList(3)
        g.add_edge(0, 1)
        stale = g.neighbours(0)
        g.add_edge(0, 2)
        assert list(stale) == [1]
        assert g.neighbours(0) is not stale

    def test_failed_mutation_keeps_cache(self) -> None:
        g = UndirectedCachedEdgeList(3)
        g.add_edge(0, 1)
        view = g.neighbours(0)
        with pytest.raises(UnknownVertexError):
            g.add_edge(0, 7)
        assert g.neighbours(0) is view

    def test_grow_vertices_keeps_existing_views(self) -> None:
        g = DirectedCachedEdgeList(2)
        g.add_edge(0, 1)
        view = g.neighbours_out(0)
        g.add_vertices(3)
        assert g.vertex_count == 5
        assert g.neighbours_out(0) is view
        assert list(g.neighbours_out(4)) == []

    def test_shrink_vertices(self) -> None:
        g = UndirectedCachedEdgeList(6)
        g.add_edge(0, 1)
        with pytest.raises(WouldDiscardEdgesError):
            g.vertex_count = 1
        assert g.vertex_count == 6
        g.vertex_count = 2
        assert list(g.neighbours(1)) == [0]
        with pytest.raises(UnknownVertexError):
            g.neighbours(2)


# ======================================================================
# Equivalence with the plain store
# ======================================================================


class TestEquivalence:
    @pytest.mark.parametrize("directed", [True, False])
    @pytest.mark.parametrize("seed", range(5))
    def test_random_mutation_history(self, directed: bool, seed: int) -> None:
        rng = random.Random(seed)
        plain, cached = _pair(directed)
        for _ in range(12):
            step = rng.randrange(4)
            if step == 0:
                n = rng.randrange(1, 4)
                plain.add_vertices(n)
                cached.add_vertices(n)
            elif plain.vertex_count == 0:
                continue
            elif step == 1:
                tail = rng.randrange(plain.vertex_count)
                head = rng.randrange(plain.vertex_count)
                assert plain.add_edge(tail, head) == cached.add_edge(tail, head)
            else:
                batch = [
                    (rng.randrange(plain.vertex_count), rng.randrange(plain.vertex_count))
                    for _ in range(rng.randrange(6))
                ]
                assert plain.add_edges(batch) == cached.add_edges(batch)
            # query straight after every mutation, forcing recomputation
            _assert_same_views(plain, cached)

    def test_forwarded_queries(self, sample_edges: list[tuple[int, int]]) -> None:
        plain = UndirectedIndexedEdgeList(10)
        cached = UndirectedCachedEdgeList(10)
        plain.add_edges(sample_edges)
        cached.add_edges(sample_edges)
        assert cached.edges() == plain.edges()
        assert cached.edge_count == plain.edge_count
        assert cached.edge_id(4, 3) == plain.edge_id(4, 3)
        assert cached.is_edge(8, 5)
        assert cached.is_vertex(9)
        assert not cached.is_vertex(10)
        assert cached.bucket_bounds(4) == plain.bucket_bounds(4)
        assert cached.degree(4) == plain.degree(4)
        assert repr(cached) == "UndirectedCachedEdgeList(vertices=10, edges=6)"
