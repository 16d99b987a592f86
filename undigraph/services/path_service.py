# undigraph/services/path_service.py
"""
    PathService — fewest-hop path between two vertices.

    Extends ``GraphQueryService[PathQuery]`` (Template Method + Genericity).
"""
from dataclasses import dataclass
from typing import Any, List

from ..models.graph import Graph
from ..models.vertex import Vertex, require_vertex
from .base_service import GraphQueryService


@dataclass
class PathQuery:
    start: Vertex
    end: Vertex


class PathService(GraphQueryService[PathQuery]):

    def find(self, graph: Graph, start: Vertex, end: Vertex) -> List[Any]:
        """
        Convenience wrapper around the generic ``execute()``.

        :return: Values from start to end, or [] if end is unreachable
        :raises InvalidVertexError: If start or end is not a Vertex
        """
        return self.execute(graph, PathQuery(start, end))

    def _validate_query(self, query: PathQuery) -> None:
        require_vertex(query.start, "start")
        require_vertex(query.end, "end")

    def _run(self, graph: Graph, query: PathQuery) -> List[Any]:
        return graph.shortest_path(query.start, query.end)
