"""
    Graph model - vertices placed on a plane and undirected edges.

    Editing operations follow a permissive policy: invalid input
    (a point already covered by a vertex, an unknown id) is a silent
    no-op reported through the return value, never an exception.
"""
import logging
from typing import Dict, Iterator, List, Optional

from ..types import IdMode
from .vertex import Vertex, DEFAULT_RADIUS
from .edge import Edge

logger = logging.getLogger(__name__)


class Graph:
    """
        Ordered vertices and ordered edges.

        In ``IdMode.RENUMBER`` (the default) display ids always form the
        range ``0..n-1`` in storage order and are reassigned after every
        removal.  In ``IdMode.STABLE`` an id, once issued, is never
        reassigned.  Either way each vertex keeps the slot it was given
        at creation.
    """

    def __init__(self, graph_id: str = "graph",
                 id_mode: IdMode = IdMode.RENUMBER,
                 vertex_radius: float = DEFAULT_RADIUS):
        self.graph_id = graph_id
        self.id_mode = id_mode
        self.vertex_radius = vertex_radius
        self.vertices: List[Vertex] = []
        self.edges: List[Edge] = []
        self._next_slot = 0

    # ── Vertices ─────────────────────────────────────────────────

    def add_vertex(self, x: float, y: float) -> Optional[Vertex]:
        """
        Add a vertex at (x, y) unless an existing vertex already covers the point.

        Returns:
            The new vertex, or None if the position was taken.
        """
        if self.find_vertex_at(x, y) is not None:
            logger.debug("Position (%s, %s) is taken; vertex not added", x, y)
            return None

        if self.id_mode == IdMode.RENUMBER:
            vertex_id = len(self.vertices)
        else:
            vertex_id = self._next_slot

        vertex = Vertex(vertex_id, self._next_slot, x, y, self.vertex_radius)
        self._next_slot += 1
        self.vertices.append(vertex)
        return vertex

    def remove_vertex(self, x: float, y: float) -> Optional[Vertex]:
        """
        Remove the first vertex (storage order) whose hit-region contains (x, y),
        together with every incident edge.

        Returns:
            The removed vertex, or None if nothing was hit.
        """
        vertex = self.find_vertex_at(x, y)
        if vertex is None:
            return None
        self._delete(vertex)
        return vertex

    def remove_vertex_by_id(self, vertex_id: int) -> Optional[Vertex]:
        vertex = self.get_vertex(vertex_id)
        if vertex is None:
            return None
        self._delete(vertex)
        return vertex

    def move_vertex(self, vertex_id: int, x: float, y: float) -> bool:
        vertex = self.get_vertex(vertex_id)
        if vertex is None:
            return False
        vertex.move_to(x, y)
        return True

    def find_vertex_at(self, x: float, y: float) -> Optional[Vertex]:
        for vertex in self.vertices:
            if vertex.contains(x, y):
                return vertex
        return None

    def get_vertex(self, vertex_id: int) -> Optional[Vertex]:
        if self.id_mode == IdMode.RENUMBER:
            if 0 <= vertex_id < len(self.vertices):
                return self.vertices[vertex_id]
            return None
        for vertex in self.vertices:
            if vertex.vertex_id == vertex_id:
                return vertex
        return None

    def get_vertex_by_slot(self, slot: int) -> Optional[Vertex]:
        for vertex in self.vertices:
            if vertex.slot == slot:
                return vertex
        return None

    def has_vertex(self, vertex: Vertex) -> bool:
        return any(v is vertex for v in self.vertices)

    def get_all_vertices(self) -> List[Vertex]:
        return list(self.vertices)

    def _delete(self, vertex: Vertex) -> None:
        self.vertices = [v for v in self.vertices if v is not vertex]
        self.edges = [e for e in self.edges if not e.touches(vertex)]
        if self.id_mode == IdMode.RENUMBER:
            self._renumber()

    def _renumber(self) -> None:
        for index, vertex in enumerate(self.vertices):
            vertex.vertex_id = index

    # ── Edges ────────────────────────────────────────────────────

    def add_edge(self, u: Vertex, v: Vertex) -> Optional[Edge]:
        """
        Append an edge between u and v.
        Self-loops and parallel edges are accepted.

        Returns:
            The new edge, or None if an endpoint is not in this graph.
        """
        if not self.has_vertex(u) or not self.has_vertex(v):
            logger.debug("Edge endpoint not in graph; edge not added")
            return None
        edge = Edge(u, v)
        self.edges.append(edge)
        return edge

    def remove_edge(self, u: Vertex, v: Vertex) -> int:
        """Remove every edge joining u and v. Returns how many were removed."""
        before = len(self.edges)
        self.edges = [e for e in self.edges if not e.connects(u, v)]
        return before - len(self.edges)

    def get_all_edges(self) -> List[Edge]:
        return list(self.edges)

    def neighbors(self, vertex: Vertex) -> Iterator[Vertex]:
        """Yield the other endpoint of every incident edge, in edge insertion order."""
        for edge in self.edges:
            other = edge.get_other_vertex(vertex)
            if other is not None:
                yield other

    # ── Misc ─────────────────────────────────────────────────────

    def clear(self) -> None:
        self.vertices = []
        self.edges = []

    def get_number_of_vertices(self) -> int:
        return len(self.vertices)

    def get_number_of_edges(self) -> int:
        return len(self.edges)

    def is_empty(self) -> bool:
        return not self.vertices

    def __repr__(self) -> str:
        return f"Graph({self.graph_id}, vertices={len(self.vertices)}, edges={len(self.edges)})"

    def to_dict(self) -> Dict:
        return {
            'id': self.graph_id,
            'id_mode': self.id_mode.value,
            'vertices': [vertex.to_dict() for vertex in self.vertices],
            'edges': [edge.to_dict() for edge in self.edges]
        }
