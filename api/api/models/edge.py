"""
    Edge model - undirected connection between two vertices.
"""
from typing import Dict, Any, Optional, Tuple
from .vertex import Vertex


class Edge:
    """
        Unordered pair of vertices.
        No weight and no direction; parallel edges are allowed.
    """

    def __init__(self, start: Vertex, end: Vertex):
        self.start = start
        self.end = end

    def get_endpoints(self) -> Tuple[Vertex, Vertex]:
        return self.start, self.end

    def get_other_vertex(self, vertex: Vertex) -> Optional[Vertex]:
        """
        Return the opposite endpoint, or None if ``vertex`` is not on this edge.
        The start side is checked first, so a self-loop yields its own vertex.
        """
        if self.start is vertex:
            return self.end
        elif self.end is vertex:
            return self.start
        return None

    def touches(self, vertex: Vertex) -> bool:
        return self.start is vertex or self.end is vertex

    def connects(self, u: Vertex, v: Vertex) -> bool:
        """Check if edge joins u and v in either orientation"""
        return (self.start is u and self.end is v) or \
               (self.start is v and self.end is u)

    def __repr__(self) -> str:
        return f"Edge({self.start.vertex_id} -- {self.end.vertex_id})"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'start': self.start.vertex_id,
            'end': self.end.vertex_id,
        }
