"""Custom exception hierarchy for indexgraph."""


class GraphError(Exception):
    """Base exception for all indexgraph errors."""


class UnknownVertexError(GraphError):
    """Raised when a vertex id is negative or not below the vertex count."""


class NotAnEdgeError(GraphError):
    """Raised when an edge id is requested for a pair that is not an edge."""


class WouldDiscardEdgesError(GraphError):
    """Raised when shrinking the vertex count would drop stored edges."""


class InvariantViolationError(GraphError):
    """Raised when an internal invariant is broken.

    This signals a defect in indexgraph or in an algorithm driving it
    (e.g. a traversal pushing the same vertex twice), never bad user input.
    """
