# tests/conftest.py
"""
Shared test fixtures.
Stub graph: social network with 15 vertices and 25 undirected edges,
connected, contains cycles.
"""
from typing import Dict, Tuple

import pytest

from undigraph.models.graph import Graph
from undigraph.models.vertex import Vertex


# ── Vertex values ────────────────────────────────────────────────
_NAMES = [
    "Alice", "Bob", "Carol", "David", "Eve",
    "Frank", "Grace", "Hank", "Iris", "Jack",
    "Karen", "Leo", "Mia", "Nathan", "Olivia",
]

# ── Edge definitions (by value) ──────────────────────────────────
_EDGES = [
    ("Alice",  "Bob"),
    ("Alice",  "Carol"),
    ("Bob",    "David"),
    ("Carol",  "Eve"),
    ("David",  "Frank"),
    ("Eve",    "Grace"),
    ("Frank",  "Hank"),
    ("Grace",  "Iris"),
    ("Hank",   "Jack"),
    ("Iris",   "Karen"),
    ("Jack",   "Leo"),
    ("Karen",  "Mia"),
    ("Leo",    "Nathan"),
    ("Mia",    "Olivia"),
    ("Nathan", "Alice"),
    ("Bob",    "Grace"),
    ("Carol",  "Hank"),
    ("David",  "Iris"),
    ("Eve",    "Jack"),
    ("Frank",  "Karen"),
    ("Grace",  "Leo"),
    ("Hank",   "Mia"),
    ("Iris",   "Nathan"),
    ("Jack",   "Olivia"),
    # Cycle: Olivia — Alice
    ("Olivia", "Alice"),
]


def _build_social() -> Tuple[Graph, Dict[str, Vertex]]:
    g = Graph()
    vertices = {name: Vertex(name) for name in _NAMES}
    g.add_vertices(vertices.values())

    for v1, v2 in _EDGES:
        g.add_edge(vertices[v1], vertices[v2])

    return g, vertices


def _build_path() -> Tuple[Graph, Dict[str, Vertex]]:
    """A -- B -- C -- D"""
    g = Graph()
    vertices = {name: Vertex(name) for name in "ABCD"}
    g.add_vertices(vertices.values())
    g.add_edge(vertices["A"], vertices["B"])
    g.add_edge(vertices["B"], vertices["C"])
    g.add_edge(vertices["C"], vertices["D"])
    return g, vertices


# ── Pytest fixtures ──────────────────────────────────────────────

@pytest.fixture
def empty_graph() -> Graph:
    """A graph with no vertices."""
    return Graph()


@pytest.fixture
def path_graph() -> Tuple[Graph, Dict[str, Vertex]]:
    """Path graph A -- B -- C -- D, with vertices by value."""
    return _build_path()


@pytest.fixture
def single_graph() -> Tuple[Graph, Vertex]:
    """One registered vertex 'A' without edges."""
    g = Graph()
    a = Vertex("A")
    g.add_vertex(a)
    return g, a


@pytest.fixture
def social_graph() -> Tuple[Graph, Dict[str, Vertex]]:
    """Full stub graph: 15 vertices, 25 undirected edges."""
    return _build_social()
