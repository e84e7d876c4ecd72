# core/services/tree_renderer.py
"""
    TreeRenderer — draws traversal results and the editing view onto a RenderSink.
"""
import logging

from api.api.models.graph import Graph
from api.api.models.result import TraversalResult
from api.api.plugins.base import RenderSink

logger = logging.getLogger(__name__)


class TreeRenderer:
    """
    Stateless drawing helper.  Drawing order carries no meaning;
    every call starts from a cleared canvas.
    """

    def render(self, result: TraversalResult, sink: RenderSink) -> None:
        """
        Draw the tree (BFS/DFS) or the found path (shortest path).

        For every (child, parent) pair a segment parent→child is drawn when
        the child has a parent, and the child is always drawn as a node.
        """
        sink.clear_canvas()
        for child, parent in result.tree_edges():
            if parent is not None:
                logger.debug("Drawing edge from %d to %d",
                             parent.vertex_id, child.vertex_id)
                sink.draw_edge(parent.x, parent.y, child.x, child.y)
            sink.draw_node(child.vertex_id, child.x, child.y)

    def render_graph(self, graph: Graph, sink: RenderSink) -> None:
        """Redraw the whole editing view: every edge, then every vertex."""
        sink.clear_canvas()
        for edge in graph.get_all_edges():
            sink.draw_edge(edge.start.x, edge.start.y, edge.end.x, edge.end.y)
        for vertex in graph.get_all_vertices():
            sink.draw_node(vertex.vertex_id, vertex.x, vertex.y)
