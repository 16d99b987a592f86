# undigraph/exceptions.py

class GraphError(Exception):
    """Base class for all graph errors."""
    pass

class InvalidVertexError(GraphError, ValueError):
    """Raised when a traversal start or path endpoint is missing or not a Vertex."""
    pass

class TraversalDepthError(GraphError, RecursionError):
    """Raised when recursive depth-first search goes deeper than the configured limit."""
    pass

class TraversalQueryError(GraphError, ValueError):
    """Raised when a traversal query names an unknown traversal order."""
    pass
