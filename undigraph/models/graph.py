"""
    Graph model - undirected graph of vertices.
    Structure mutation plus depth-first, breadth-first and
    shortest-path (hop count) traversals.
"""
import logging
from collections import deque
from typing import Any, Dict, Iterable, List, Optional

from ..config import GraphConfig
from ..exceptions import TraversalDepthError
from .vertex import Vertex, require_vertex
from .vertex_set import VertexSet

logger = logging.getLogger(__name__)


class Graph:
    """
        Class for undirected graph representation.

        The graph keeps track of registered vertices in ``nodes``; edges live
        in each vertex's ``adjacent`` set.  Traversals follow ``adjacent``
        links only, so they also reach vertices that were never registered.
    """

    def __init__(self, config: Optional[GraphConfig] = None):
        """
        Initialize an empty graph.
        Args:
            config: Traversal limits (defaults to ``GraphConfig()``)
        """
        self._config: GraphConfig = config or GraphConfig()
        self.nodes: VertexSet = VertexSet()

    @property
    def config(self) -> GraphConfig:
        return self._config

    # ── Mutation ─────────────────────────────────────────────────

    def add_vertex(self, vertex: Vertex) -> None:
        """Register a vertex (no-op if already registered)"""
        self.nodes.add(vertex)
        logger.debug("Vertex %r registered (%d nodes)", vertex.value, len(self.nodes))

    def add_vertices(self, vertices: Iterable[Vertex]) -> None:
        """Register every vertex of the iterable, in order"""
        for vertex in vertices:
            self.add_vertex(vertex)

    def add_edge(self, v1: Vertex, v2: Vertex) -> None:
        """
        Connect two vertices with an undirected edge.
        Neither vertex has to be registered in the graph.
        """
        v1.adjacent.add(v2)
        v2.adjacent.add(v1)
        logger.debug("Edge %r -- %r added", v1.value, v2.value)

    def remove_edge(self, v1: Vertex, v2: Vertex) -> None:
        """Disconnect two vertices (no-op if they are not adjacent)"""
        v1.adjacent.discard(v2)
        v2.adjacent.discard(v1)
        logger.debug("Edge %r -- %r removed", v1.value, v2.value)

    def remove_vertex(self, vertex: Vertex) -> None:
        """
        Unregister a vertex and drop every edge pointing at it from
        registered vertices.  Vertices outside ``nodes`` keep their
        references to it.
        """
        for node in self.nodes:
            node.adjacent.discard(vertex)
        self.nodes.discard(vertex)
        logger.debug("Vertex %r removed (%d nodes)", vertex.value, len(self.nodes))

    # ── Introspection ────────────────────────────────────────────

    def has_vertex(self, vertex: Vertex) -> bool:
        return vertex in self.nodes

    def has_edge(self, v1: Vertex, v2: Vertex) -> bool:
        return v2 in v1.adjacent

    def get_neighbors(self, vertex: Vertex) -> List[Vertex]:
        """Get adjacent vertices in adjacency order"""
        return list(vertex.adjacent)

    def get_number_of_nodes(self) -> int:
        return len(self.nodes)

    def get_number_of_edges(self) -> int:
        """
        Count distinct edges touching at least one registered vertex.
        A self-loop counts once.
        """
        edges = set()
        for node in self.nodes:
            for neighbor in node.adjacent:
                edges.add(frozenset((id(node), id(neighbor))))
        return len(edges)

    # ── Traversal ────────────────────────────────────────────────

    def depth_first_search(self, start: Vertex) -> List[Any]:
        """
        Recursive depth-first traversal from ``start``.

        Recursion depth is bounded by ``config.max_recursion_depth`` and by
        the interpreter recursion limit, whichever is hit first; prefer
        ``depth_first_search_iterative`` for deep graphs.

        Raises:
            InvalidVertexError:  If start is not a Vertex.
            TraversalDepthError: If the recursion limit is exceeded.
        """
        require_vertex(start, "start")
        limit = self._config.max_recursion_depth
        visited = set()
        result = []

        def traverse(vertex: Vertex, depth: int) -> None:
            if depth > limit:
                raise TraversalDepthError(
                    f"Recursive depth-first search exceeded depth {limit}; "
                    f"use depth_first_search_iterative instead"
                )

            visited.add(vertex)
            result.append(vertex.value)

            for neighbor in vertex.adjacent:
                if neighbor not in visited:
                    traverse(neighbor, depth + 1)

        try:
            traverse(start, 0)
        except TraversalDepthError:
            logger.warning("Depth-first search from %r exceeded depth %d", start.value, limit)
            raise
        except RecursionError as exc:
            logger.warning("Depth-first search from %r hit the interpreter recursion limit "
                           "after %d vertices", start.value, len(result))
            raise TraversalDepthError(
                f"Recursive depth-first search hit the interpreter recursion limit; "
                f"use depth_first_search_iterative instead"
            ) from exc
        logger.debug("Depth-first search from %r visited %d vertices", start.value, len(result))
        return result

    def depth_first_search_iterative(self, start: Vertex) -> List[Any]:
        """
        Depth-first traversal with an explicit stack.
        Neighbors are pushed in adjacency order, so the last one pushed is
        visited next; the order may differ from the recursive variant.
        """
        require_vertex(start, "start")
        stack = [start]
        visited = {start}
        result = []

        while stack:
            vertex = stack.pop()
            result.append(vertex.value)

            for neighbor in vertex.adjacent:
                if neighbor not in visited:
                    visited.add(neighbor)
                    stack.append(neighbor)

        logger.debug("Iterative depth-first search from %r visited %d vertices",
                     start.value, len(result))
        return result

    def breadth_first_search(self, start: Vertex) -> List[Any]:
        """Level-order traversal from ``start``"""
        require_vertex(start, "start")
        queue = deque([start])
        visited = {start}
        result = []

        while queue:
            vertex = queue.popleft()
            result.append(vertex.value)

            for neighbor in vertex.adjacent:
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)

        logger.debug("Breadth-first search from %r visited %d vertices", start.value, len(result))
        return result

    def shortest_path(self, start: Vertex, end: Vertex) -> List[Any]:
        """
        Find a path with the fewest edges between two vertices.

        Predecessors are tracked per vertex, so vertices sharing a value
        do not interfere with each other.

        Args:
            start: First vertex of the path
            end:   Last vertex of the path

        Returns:
            Values along the path from start to end inclusive, or an empty
            list if end is unreachable.

        Raises:
            InvalidVertexError: If start or end is not a Vertex.
        """
        require_vertex(start, "start")
        require_vertex(end, "end")

        if start is end:
            return [start.value]

        queue = deque([start])
        predecessors: Dict[Vertex, Optional[Vertex]] = {start: None}

        while queue:
            vertex = queue.popleft()

            if vertex is end:
                path = []
                step = end
                while step is not None:
                    path.append(step.value)
                    step = predecessors[step]
                path.reverse()
                logger.debug("Shortest path %r -> %r has %d hops",
                             start.value, end.value, len(path) - 1)
                return path

            for neighbor in vertex.adjacent:
                if neighbor not in predecessors:
                    predecessors[neighbor] = vertex
                    queue.append(neighbor)

        logger.debug("No path from %r to %r", start.value, end.value)
        return []

    # ── Dunder ───────────────────────────────────────────────────

    def __contains__(self, vertex: Vertex) -> bool:
        return self.has_vertex(vertex)

    def __len__(self) -> int:
        return len(self.nodes)

    def __repr__(self) -> str:
        return f"Graph(nodes={self.get_number_of_nodes()}, edges={self.get_number_of_edges()})"
