# core/services/bfs_service.py
"""
    BfsService — level-synchronous breadth-first search.

    Extends ``TraversalService`` (Template Method).
"""
import logging
from collections import deque
from typing import Deque, Optional, Set

from api.api.models.graph import Graph
from api.api.models.result import TraversalResult
from api.api.models.trace import TraceLog, BFS_COMPLETE, format_frontier
from api.api.models.vertex import Vertex
from api.api.types import TraversalKind
from .base_service import TraversalService, TraversalQuery

logger = logging.getLogger(__name__)


class BfsService(TraversalService):
    """
    Breadth-first search from a start vertex.

    Vertices are processed one level per outer pass: all ``k`` vertices
    in the queue when a pass begins share one iteration number, so the
    iteration of a trace row is the vertex's distance from the start + 1.
    """

    def bfs(self, graph: Graph, start) -> TraversalResult:
        """Convenience wrapper around the generic ``run()``."""
        return self.run(graph, TraversalQuery(start))

    def _traverse(self, graph: Graph, start: Vertex,
                  end: Optional[Vertex]) -> TraversalResult:
        logger.info("Starting BFS from vertex: %d", start.vertex_id)

        result = TraversalResult(TraversalKind.BFS, start)
        trace: TraceLog = result.trace_log
        visited: Set[int] = {start.slot}
        queue: Deque[Vertex] = deque([start])
        result.parent_map[start.slot] = None
        result.vertices[start.slot] = start

        iteration = 1
        while queue:
            level_width = len(queue)
            for _ in range(level_width):
                current = queue.popleft()
                logger.debug("Visiting vertex: %d", current.vertex_id)

                for neighbor in graph.neighbors(current):
                    if neighbor.slot not in visited:
                        logger.debug("Adding vertex to queue: %d", neighbor.vertex_id)
                        visited.add(neighbor.slot)
                        queue.append(neighbor)
                        result.parent_map[neighbor.slot] = current.slot
                        result.vertices[neighbor.slot] = neighbor

                trace.record(iteration, current.vertex_id,
                             format_frontier(v.vertex_id for v in queue))
            iteration += 1

        trace.record(iteration, None, BFS_COMPLETE)
        logger.info("BFS complete: %d vertices reached", len(result.parent_map))
        return result
