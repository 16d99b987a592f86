"""
undigraph — in-memory undirected graph with traversal algorithms.
"""
from .config import GraphConfig
from .exceptions import (
    GraphError,
    InvalidVertexError,
    TraversalDepthError,
    TraversalQueryError,
)
from .models.vertex_set import VertexSet
from .models.vertex import Vertex
from .models.graph import Graph
from .services import (
    GraphQueryService,
    TraversalOrder,
    TraversalQuery,
    TraversalService,
    PathQuery,
    PathService,
)

__version__ = '1.0.0'

__all__ = [
    'GraphConfig',
    'GraphError',
    'InvalidVertexError',
    'TraversalDepthError',
    'TraversalQueryError',
    'VertexSet',
    'Vertex',
    'Graph',
    'GraphQueryService',
    'TraversalOrder',
    'TraversalQuery',
    'TraversalService',
    'PathQuery',
    'PathService',
]
