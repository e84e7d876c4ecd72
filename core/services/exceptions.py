# core/services/exceptions.py

class InvalidVertexReference(Exception):
    """Raised when a start/end id is malformed or names no vertex."""
    pass

class EmptyGraph(InvalidVertexReference):
    """Raised when an algorithm is run on a graph with no vertices."""
    pass
