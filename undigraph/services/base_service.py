"""
    Generic base service for graph query operations.

    Design Pattern: Template Method
    ─────────────────────────────────
    Defines the skeleton of a graph query (validate → run), letting
    concrete subclasses (TraversalService, PathService) override the steps.

    Genericity:
    ─────────────────────────
    Uses Generic[TQuery] so each service explicitly declares its query type.
"""
from abc import ABC, abstractmethod
from typing import Any, Generic, List, TypeVar

from ..models.graph import Graph

# Generic type variable for the query parameter
TQuery = TypeVar('TQuery')


class GraphQueryService(ABC, Generic[TQuery]):
    """
    Abstract generic base for all services that query a graph
    and produce an ordered list of vertex values.

    Concrete subclasses must implement:
        - _validate_query(query)   → raise on invalid input
        - _run(graph, query)       → list of vertex values
    """

    def execute(self, graph: Graph, query: TQuery) -> List[Any]:
        """
        Template Method: validate → run.

        Args:
            graph:  The graph to query.
            query:  Query object (type depends on the concrete service).

        Returns:
            Vertex values in the order produced by the query.
        """
        self._validate_query(query)
        return self._run(graph, query)

    @abstractmethod
    def _validate_query(self, query: TQuery) -> None:
        """
        Validate the query; raise an appropriate exception on failure.
        """
        ...

    @abstractmethod
    def _run(self, graph: Graph, query: TQuery) -> List[Any]:
        """
        Execute the validated query against the graph.
        """
        ...

