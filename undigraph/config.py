"""
    Graph configuration — tunable limits for traversal algorithms.
"""
from dataclasses import dataclass


@dataclass
class GraphConfig:
    """
    Top-level configuration for a Graph.

    Attributes:
        max_recursion_depth:  Deepest recursion level the recursive
                              depth-first search may reach before raising
                              ``TraversalDepthError``.  Must be >= 0.
                              Values above the interpreter recursion limit
                              are capped by that limit.
    """
    max_recursion_depth: int = 500

    def __post_init__(self):
        if self.max_recursion_depth < 0:
            raise ValueError(
                f"max_recursion_depth must be >= 0, got {self.max_recursion_depth}"
            )
