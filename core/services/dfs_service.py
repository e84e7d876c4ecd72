# core/services/dfs_service.py
"""
    DfsService — iterative, stack-based depth-first search.

    Extends ``TraversalService`` (Template Method).
"""
import logging
from typing import List, Optional, Set

from api.api.models.graph import Graph
from api.api.models.result import TraversalResult
from api.api.models.trace import TraceLog, DFS_COMPLETE, format_frontier
from api.api.models.vertex import Vertex
from api.api.types import TraversalKind
from .base_service import TraversalService, TraversalQuery

logger = logging.getLogger(__name__)


class DfsService(TraversalService):
    """
    Depth-first search with an explicit stack.

    Every pop pushes *all* of the popped vertex's unvisited neighbours
    (marking them visited immediately), so the tree is a valid DFS-style
    tree of the iterative variant, not a recursive pre-order walk.
    The iteration counter advances once per pop.
    """

    def dfs(self, graph: Graph, start) -> TraversalResult:
        """Convenience wrapper around the generic ``run()``."""
        return self.run(graph, TraversalQuery(start))

    def _traverse(self, graph: Graph, start: Vertex,
                  end: Optional[Vertex]) -> TraversalResult:
        logger.info("Starting DFS from vertex: %d", start.vertex_id)

        result = TraversalResult(TraversalKind.DFS, start)
        trace: TraceLog = result.trace_log
        visited: Set[int] = {start.slot}
        stack: List[Vertex] = [start]
        result.parent_map[start.slot] = None
        result.vertices[start.slot] = start

        iteration = 1
        while stack:
            current = stack.pop()
            logger.debug("Visiting vertex: %d", current.vertex_id)

            for neighbor in graph.neighbors(current):
                if neighbor.slot not in visited:
                    logger.debug("Adding vertex to stack: %d", neighbor.vertex_id)
                    visited.add(neighbor.slot)
                    stack.append(neighbor)
                    result.parent_map[neighbor.slot] = current.slot
                    result.vertices[neighbor.slot] = neighbor

            # bottom of the stack first
            trace.record(iteration, current.vertex_id,
                         format_frontier(v.vertex_id for v in stack))
            iteration += 1

        trace.record(iteration, None, DFS_COMPLETE)
        logger.info("DFS complete: %d vertices reached", len(result.parent_map))
        return result
