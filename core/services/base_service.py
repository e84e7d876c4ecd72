"""
    Generic base service for traversal runs.

    Design Pattern: Template Method
    ─────────────────────────────────
    Defines the skeleton of a run (resolve references → traverse → result),
    letting concrete subclasses (BfsService, DfsService, ShortestPathService)
    supply the walk itself.

    Services are pure over ``(graph, query)``: they never mutate the graph
    and never draw.  Rendering and the step table consume the returned
    ``TraversalResult``.
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from api.api.models.graph import Graph
from api.api.models.result import TraversalResult
from api.api.models.vertex import Vertex
from api.api.types import IdValidator
from .exceptions import EmptyGraph, InvalidVertexReference

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TraversalQuery:
    """
    Raw start/end references as they arrive from an editing surface.
    Either may be an int or text; ``end`` is only used by shortest path.
    """
    start: Any
    end: Any = None


def resolve_vertex(graph: Graph, reference: Any, role: str = "start") -> Vertex:
    """
    Turn a raw id into a vertex of ``graph``.

    Raises:
        EmptyGraph: If the graph has no vertices.
        InvalidVertexReference: If the id is malformed or out of range.
    """
    if graph.is_empty():
        raise EmptyGraph("The graph has no vertices. Add a vertex first.")

    try:
        vertex_id = IdValidator.parse(reference)
    except ValueError as e:
        raise InvalidVertexReference(f"Invalid {role} vertex: {e}")

    vertex = graph.get_vertex(vertex_id)
    if vertex is None:
        raise InvalidVertexReference(
            f"Invalid {role} vertex: no vertex with id {vertex_id} "
            f"({graph.get_number_of_vertices()} vertices in graph)"
        )
    return vertex


class TraversalService(ABC):
    """
    Abstract base for all traversal algorithms.

    Concrete subclasses must implement:
        - _traverse(graph, start, end) → TraversalResult
    and may override:
        - _resolve(graph, query) → (start, end)
    """

    def run(self, graph: Graph, query: TraversalQuery) -> TraversalResult:
        """
        Template Method: resolve references → traverse.

        Validation happens first so an invalid query has no side effects.
        """
        start, end = self._resolve(graph, query)
        return self._traverse(graph, start, end)

    def _resolve(self, graph: Graph, query: TraversalQuery) -> Tuple[Vertex, Optional[Vertex]]:
        return resolve_vertex(graph, query.start, "start"), None

    @abstractmethod
    def _traverse(self, graph: Graph, start: Vertex,
                  end: Optional[Vertex]) -> TraversalResult:
        """
        Walk the graph from ``start`` and return the finished result.
        """
        ...
