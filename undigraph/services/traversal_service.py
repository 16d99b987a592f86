# undigraph/services/traversal_service.py
"""
    TraversalService — walks a graph from a start vertex in a chosen order.

    Extends ``GraphQueryService[TraversalQuery]`` (Template Method + Genericity).
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, List

from ..exceptions import TraversalQueryError
from ..models.graph import Graph
from ..models.vertex import Vertex, require_vertex
from .base_service import GraphQueryService

logger = logging.getLogger(__name__)


class TraversalOrder(Enum):
    """Traversal algorithm"""
    DEPTH_FIRST = "depth_first"
    DEPTH_FIRST_ITERATIVE = "depth_first_iterative"
    BREADTH_FIRST = "breadth_first"


@dataclass
class TraversalQuery:
    start: Vertex
    order: TraversalOrder = TraversalOrder.BREADTH_FIRST


class TraversalService(GraphQueryService[TraversalQuery]):
    """
    Three traversal orders:
    - DEPTH_FIRST            → ``Graph.depth_first_search``
    - DEPTH_FIRST_ITERATIVE  → ``Graph.depth_first_search_iterative``
    - BREADTH_FIRST          → ``Graph.breadth_first_search``

    The order may also be given by its string value ("breadth_first").
    """

    # ── Public convenience method ────────────────────────────────

    def traverse(self, graph: Graph, start: Vertex,
                 order: TraversalOrder = TraversalOrder.BREADTH_FIRST) -> List[Any]:
        """
        Convenience wrapper around the generic ``execute()``.

        :param graph: Graph to traverse
        :param start: Start vertex
        :param order: TraversalOrder member or its string value
        :return: Visited values in traversal order
        :raises TraversalQueryError: If order is unknown
        :raises InvalidVertexError: If start is not a Vertex
        """
        return self.execute(graph, TraversalQuery(start, order))

    # ── Template Method hooks (from GraphQueryService) ───────────

    def _validate_query(self, query: TraversalQuery) -> None:
        self._resolve_order(query.order)
        require_vertex(query.start, "start")

    def _run(self, graph: Graph, query: TraversalQuery) -> List[Any]:
        order = self._resolve_order(query.order)
        algorithms = {
            TraversalOrder.DEPTH_FIRST: graph.depth_first_search,
            TraversalOrder.DEPTH_FIRST_ITERATIVE: graph.depth_first_search_iterative,
            TraversalOrder.BREADTH_FIRST: graph.breadth_first_search,
        }
        logger.debug("Running %s traversal from %r", order.value, query.start.value)
        return algorithms[order](query.start)

    @staticmethod
    def _resolve_order(order: Any) -> TraversalOrder:
        """Map a TraversalOrder member or its string value to the member."""
        if isinstance(order, TraversalOrder):
            return order
        try:
            return TraversalOrder(order)
        except ValueError:
            valid = ", ".join(o.value for o in TraversalOrder)
            raise TraversalQueryError(
                f"Unknown traversal order: {order!r}. Use one of: {valid}"
            ) from None
