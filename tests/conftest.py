"""Shared fixtures for indexgraph tests."""

from __future__ import annotations

import random

import pytest

from indexgraph.graph import (
    DirectedCachedEdgeList,
    DirectedIndexedEdgeList,
    UndirectedCachedEdgeList,
    UndirectedIndexedEdgeList,
)

# Six-edge sample graph on ten vertices, as (tail, head) pairs.
SAMPLE_EDGES: list[tuple[int, int]] = [(5, 8), (5, 4), (7, 4), (3, 4), (6, 9), (3, 2)]


def random_edges(
    seed: int,
    vertex_count: int,
    edge_count: int,
    *,
    simple: bool = False,
) -> list[tuple[int, int]]:
    """Reproducible random edge list.

    With ``simple=True`` there are no self-loops and no repeated pairs
    (in either orientation), as required by reference implementations
    that do not model multigraphs.
    """
    rng = random.Random(seed)
    edges: list[tuple[int, int]] = []
    seen: set[tuple[int, int]] = set()
    while len(edges) < edge_count:
        tail = rng.randrange(vertex_count)
        head = rng.randrange(vertex_count)
        if simple:
            key = (min(tail, head), max(tail, head))
            if tail == head or key in seen:
                continue
            seen.add(key)
        edges.append((tail, head))
    return edges


@pytest.fixture(params=[DirectedIndexedEdgeList, DirectedCachedEdgeList])
def directed_type(request: pytest.FixtureRequest) -> type:
    """Each directed store class in turn."""
    return request.param


@pytest.fixture(params=[UndirectedIndexedEdgeList, UndirectedCachedEdgeList])
def undirected_type(request: pytest.FixtureRequest) -> type:
    """Each undirected store class in turn."""
    return request.param


@pytest.fixture(
    params=[
        DirectedIndexedEdgeList,
        DirectedCachedEdgeList,
        UndirectedIndexedEdgeList,
        UndirectedCachedEdgeList,
    ]
)
def store_type(request: pytest.FixtureRequest) -> type:
    """Every store class in turn."""
    return request.param


@pytest.fixture
def sample_edges() -> list[tuple[int, int]]:
    """The six-edge sample graph (vertices 0..9)."""
    return list(SAMPLE_EDGES)


@pytest.fixture
def make_edges():
    """Factory for reproducible random edge lists (see ``random_edges``)."""
    return random_edges
