# core/services/shortest_path_service.py
"""
    ShortestPathService — unweighted shortest path by early-exit BFS.

    Extends ``TraversalService`` (Template Method).
"""
import logging
from collections import deque
from typing import Deque, List, Optional, Set, Tuple

from api.api.models.graph import Graph
from api.api.models.result import TraversalResult
from api.api.models.trace import (
    TraceLog,
    PATH_FOUND,
    NO_PATH_FOUND,
    PATH_COMPLETE,
    format_frontier,
)
from api.api.models.vertex import Vertex
from api.api.types import TraversalKind
from .base_service import TraversalService, TraversalQuery, resolve_vertex

logger = logging.getLogger(__name__)


class ShortestPathService(TraversalService):
    """
    Fewest-edges path between two vertices.

    The search stops the moment ``end`` is *discovered* as a neighbour,
    not when it is dequeued.  One trace row is written per dequeue and
    the iteration counter advances per dequeue.  Ties between equally
    short paths go to whichever is met first in edge insertion order.
    """

    def shortest_path(self, graph: Graph, start, end) -> TraversalResult:
        """Convenience wrapper around the generic ``run()``."""
        return self.run(graph, TraversalQuery(start, end))

    def _resolve(self, graph: Graph, query: TraversalQuery) -> Tuple[Vertex, Optional[Vertex]]:
        start = resolve_vertex(graph, query.start, "start")
        end = resolve_vertex(graph, query.end, "end")
        return start, end

    def _traverse(self, graph: Graph, start: Vertex,
                  end: Optional[Vertex]) -> TraversalResult:
        logger.info("Finding shortest path from vertex: %d to vertex: %d",
                    start.vertex_id, end.vertex_id)

        result = TraversalResult(TraversalKind.SHORTEST_PATH, start, end=end, found=False)
        trace: TraceLog = result.trace_log
        visited: Set[int] = {start.slot}
        queue: Deque[Vertex] = deque([start])
        result.parent_map[start.slot] = None
        result.vertices[start.slot] = start

        iteration = 1
        found = start is end
        while queue and not found:
            current = queue.popleft()
            logger.debug("Visiting vertex: %d", current.vertex_id)

            for neighbor in graph.neighbors(current):
                if neighbor.slot not in visited:
                    logger.debug("Adding vertex to queue: %d", neighbor.vertex_id)
                    visited.add(neighbor.slot)
                    queue.append(neighbor)
                    result.parent_map[neighbor.slot] = current.slot
                    result.vertices[neighbor.slot] = neighbor
                    if neighbor is end:
                        found = True
                        break

            trace.record(iteration, current.vertex_id,
                         format_frontier(v.vertex_id for v in queue))
            iteration += 1

        result.found = found
        if found:
            result.path = self._reconstruct(result, end)
            trace.record(iteration, None, PATH_FOUND)
        else:
            logger.info("No path found")
            trace.record(iteration, None, NO_PATH_FOUND)

        logger.info("Shortest path complete")
        trace.record(iteration, None, PATH_COMPLETE)
        return result

    @staticmethod
    def _reconstruct(result: TraversalResult, end: Vertex) -> List[int]:
        """Walk the parent chain from end to the root; return it start-first."""
        path: List[int] = []
        current: Optional[int] = end.slot
        while current is not None:
            path.append(current)
            current = result.parent_map[current]
        path.reverse()
        return path
