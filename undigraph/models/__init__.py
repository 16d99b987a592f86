"""
Core graph domain model (Vertex, VertexSet, Graph).
"""

from .vertex_set import VertexSet
from .vertex import Vertex
from .graph import Graph

__all__ = ["VertexSet", "Vertex", "Graph"]
