"""
Query services — traversal, shortest path, and base abstractions.
"""
from .base_service import GraphQueryService
from .traversal_service import TraversalOrder, TraversalQuery, TraversalService
from .path_service import PathQuery, PathService

__all__ = [
    'GraphQueryService',
    'TraversalOrder',
    'TraversalQuery',
    'TraversalService',
    'PathQuery',
    'PathService',
]
