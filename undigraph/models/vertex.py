"""
    Vertex model - representation of a vertex in the graph.
"""
from typing import Any, Iterable, Optional

from ..exceptions import InvalidVertexError
from .vertex_set import VertexSet


class Vertex:
    """
    A labeled vertex holding an opaque value and its adjacent vertices.

    Vertices are compared and hashed by identity, never by value, so two
    vertices may carry equal values and still be distinct members of a
    graph.  Adjacency stays symmetric only when it is changed through the
    edge operations of ``Graph``.
    """

    def __init__(self, value: Any, adjacent: Optional[Iterable['Vertex']] = None):
        """
        Initialize a vertex.

        Args:
            value:    Caller-defined payload (any type, ``None`` included)
            adjacent: Optional vertices to pre-populate the adjacency with
        """
        self.value = value
        self.adjacent: VertexSet = VertexSet(adjacent)

    @property
    def degree(self) -> int:
        return len(self.adjacent)

    def __repr__(self) -> str:
        return f"Vertex({self.value!r}, degree={self.degree})"


def require_vertex(vertex: Any, role: str) -> None:
    """Raise InvalidVertexError unless ``vertex`` is a Vertex."""
    if not isinstance(vertex, Vertex):
        raise InvalidVertexError(
            f"{role.capitalize()} vertex must be a Vertex, got {type(vertex).__name__}"
        )
