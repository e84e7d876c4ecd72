"""
    GraphTool — the central orchestrator of the application.

    Design Patterns applied
    ───────────────────────
    • Strategy           – pluggable render sinks and traversal services.
    • Facade             – single entry-point for an editing surface;
                           hides validation, traversal, rendering and the
                           step table.
    • Observer (hooks)   – ``_listeners`` dict so display layers can follow
                           graph edits and finished runs.

    The tool owns exactly one Graph and one TraceLog.  Nothing is global:
    create as many tools as you need and pass them around explicitly.

    Every public method holds one re-entrant lock, so "clear trace log →
    run → render → publish rows" is a single atomic unit for any other
    thread reading the tool.
"""
import logging
import threading
from typing import Any, Callable, Dict, List, Optional

from api.api.models.edge import Edge
from api.api.models.graph import Graph
from api.api.models.result import TraversalResult
from api.api.models.trace import TraceLog
from api.api.models.vertex import Vertex
from api.api.plugins.base import RenderSink, StepLogSink, VisualizerPlugin
from api.api.types import IdValidator

from core.services.base_service import TraversalQuery, TraversalService
from core.services.bfs_service import BfsService
from core.services.dfs_service import DfsService
from core.services.shortest_path_service import ShortestPathService
from core.services.tree_renderer import TreeRenderer

from .config import ToolConfig
from .plugin_loader import PluginLoader, create_visualizer_loader

logger = logging.getLogger(__name__)


# ── Observer event types ─────────────────────────────────────────
EVENT_GRAPH_UPDATED = "graph_updated"
EVENT_TRACE_UPDATED = "trace_updated"


class GraphTool:
    """
    Facade for the whole tool.

    Manages:
        • The graph being edited (permissive edits: invalid input is a no-op).
        • BFS / DFS / shortest-path runs and the trace log.
        • Drawing onto the attached RenderSink, rows onto the StepLogSink.
        • Visualizer plugin discovery.
        • Observer hooks for display layers.
    """

    def __init__(self, config: Optional[ToolConfig] = None,
                 render_sink: Optional[RenderSink] = None,
                 step_sink: Optional[StepLogSink] = None):
        """
        Args:
            config:      Tool configuration (radius, id mode, defaults).
            render_sink: Where graphs and trees are drawn (optional).
            step_sink:   Where the step table of each run is published (optional).
        """
        self._config: ToolConfig = config or ToolConfig()
        self._graph = Graph(
            "graph",
            id_mode=self._config.id_mode,
            vertex_radius=self._config.render.vertex_radius,
        )
        self._trace_log = TraceLog()
        self._lock = threading.RLock()

        self._render_sink = render_sink
        self._step_sink = step_sink
        self._renderer = TreeRenderer()
        self._vis_loader: PluginLoader[VisualizerPlugin] = create_visualizer_loader()

        self._bfs_service = BfsService()
        self._dfs_service = DfsService()
        self._path_service = ShortestPathService()

        # Observer listeners: event_name → [callback, ...]
        self._listeners: Dict[str, List[Callable[..., Any]]] = {}

        logger.info("GraphTool initialized (id mode: %s).", self._config.id_mode.value)

    # ── Configuration / collaborators ────────────────────────────

    @property
    def config(self) -> ToolConfig:
        return self._config

    @property
    def graph(self) -> Graph:
        return self._graph

    @property
    def trace_log(self) -> TraceLog:
        """A snapshot copy of the latest run's trace log."""
        with self._lock:
            return TraceLog(self._trace_log.steps)

    @property
    def render_sink(self) -> Optional[RenderSink]:
        return self._render_sink

    @property
    def step_sink(self) -> Optional[StepLogSink]:
        return self._step_sink

    def attach_renderer(self, sink: Optional[RenderSink]) -> None:
        with self._lock:
            self._render_sink = sink

    def attach_step_log(self, sink: Optional[StepLogSink]) -> None:
        with self._lock:
            self._step_sink = sink

    def get_visualizer_names(self) -> List[str]:
        """Sorted list of installed visualizer plugin names."""
        return self._vis_loader.get_names()

    def use_visualizer(self, name: Optional[str] = None) -> VisualizerPlugin:
        """
        Attach an installed visualizer plugin as the render sink.

        Args:
            name: Entry-point name (e.g. 'svg').  If None, uses
                  ``config.default_visualizer`` or the first one installed.

        Raises:
            ValueError: If no matching visualizer is installed.
        """
        name = name or self._config.default_visualizer
        if name is None:
            names = self._vis_loader.get_names()
            if not names:
                raise ValueError("No visualizer plugins installed.")
            name = names[0]

        plugin = self._vis_loader.get(name)
        if plugin is None:
            raise ValueError(
                f"Visualizer plugin '{name}' not found. "
                f"Available: {self._vis_loader.get_names()}"
            )
        plugin.configure(self._config.render)
        self.attach_renderer(plugin)
        self.redraw()
        return plugin

    # ── Editing surface ──────────────────────────────────────────

    def add_vertex(self, x: float, y: float) -> Optional[Vertex]:
        """Add a vertex unless (x, y) already lies inside one."""
        with self._lock:
            vertex = self._graph.add_vertex(x, y)
            if vertex is not None:
                self._graph_changed()
            return vertex

    def remove_vertex(self, x: float, y: float) -> Optional[Vertex]:
        """Remove the vertex under (x, y) and its edges; ids are renumbered."""
        with self._lock:
            vertex = self._graph.remove_vertex(x, y)
            if vertex is not None:
                self._graph_changed()
            return vertex

    def remove_vertex_by_id(self, vertex_id: Any) -> Optional[Vertex]:
        with self._lock:
            vertex = self._lookup(vertex_id)
            if vertex is None:
                return None
            self._graph.remove_vertex_by_id(vertex.vertex_id)
            self._graph_changed()
            return vertex

    def move_vertex(self, vertex_id: Any, x: float, y: float) -> bool:
        with self._lock:
            vertex = self._lookup(vertex_id)
            if vertex is None:
                return False
            vertex.move_to(x, y)
            self._graph_changed()
            return True

    def add_edge(self, u_id: Any, v_id: Any) -> Optional[Edge]:
        """Connect two vertices by id.  Unknown ids are ignored."""
        with self._lock:
            u, v = self._lookup(u_id), self._lookup(v_id)
            if u is None or v is None:
                return None
            edge = self._graph.add_edge(u, v)
            self._graph_changed()
            return edge

    def remove_edge(self, u_id: Any, v_id: Any) -> int:
        with self._lock:
            u, v = self._lookup(u_id), self._lookup(v_id)
            if u is None or v is None:
                return 0
            removed = self._graph.remove_edge(u, v)
            if removed:
                self._graph_changed()
            return removed

    def connect(self, x1: float, y1: float, x2: float, y2: float) -> Optional[Edge]:
        """
        Pointer drag from one vertex to another adds an edge.
        Drags that start off a vertex, or end on the same vertex, do nothing.
        """
        with self._lock:
            source = self._graph.find_vertex_at(x1, y1)
            if source is None:
                return None
            for target in self._graph.get_all_vertices():
                if target.contains(x2, y2) and target is not source:
                    edge = self._graph.add_edge(source, target)
                    self._graph_changed()
                    return edge
            return None

    def drag_vertex(self, x0: float, y0: float, x: float, y: float) -> Optional[Vertex]:
        """Move the vertex under (x0, y0) to (x, y)."""
        with self._lock:
            vertex = self._graph.find_vertex_at(x0, y0)
            if vertex is None:
                return None
            vertex.move_to(x, y)
            self._graph_changed()
            return vertex

    def clear(self) -> None:
        """Remove every vertex and edge and empty the trace log."""
        with self._lock:
            self._graph.clear()
            self._trace_log.clear()
            self._graph_changed()

    def redraw(self) -> None:
        """Draw the editing view (all edges and vertices) onto the render sink."""
        with self._lock:
            if self._render_sink is not None:
                self._renderer.render_graph(self._graph, self._render_sink)

    # ── Algorithms ───────────────────────────────────────────────

    def run_bfs(self, start: Any) -> TraversalResult:
        """
        Breadth-first tree from ``start``.

        Raises:
            InvalidVertexReference: If ``start`` is malformed or unknown.
            EmptyGraph: If the graph has no vertices.
        """
        return self._run(self._bfs_service, TraversalQuery(start))

    def run_dfs(self, start: Any) -> TraversalResult:
        """Depth-first tree from ``start`` (same errors as ``run_bfs``)."""
        return self._run(self._dfs_service, TraversalQuery(start))

    def run_shortest_path(self, start: Any, end: Any) -> TraversalResult:
        """Fewest-edges path from ``start`` to ``end``; check ``result.found``."""
        return self._run(self._path_service, TraversalQuery(start, end))

    def _run(self, service: TraversalService, query: TraversalQuery) -> TraversalResult:
        with self._lock:
            # Raises before anything is touched if the query is invalid.
            result = service.run(self._graph, query)

            self._trace_log.clear()
            self._trace_log.extend(result.trace_log)

            if self._render_sink is not None:
                self._renderer.render(result, self._render_sink)
            if self._step_sink is not None:
                self._step_sink.show_steps(self._trace_log.rows())

            self._notify(EVENT_TRACE_UPDATED, result=result, trace_log=self.trace_log)
            return result

    # ── Observer pattern ─────────────────────────────────────────

    def subscribe(self, event: str, callback: Callable[..., Any]) -> None:
        """
        Register a callback for a tool event.

        Events:
            - graph_updated  (graph=...)
            - trace_updated  (result=..., trace_log=...)
        """
        with self._lock:
            self._listeners.setdefault(event, []).append(callback)

    def unsubscribe(self, event: str, callback: Callable[..., Any]) -> None:
        """Remove a previously registered callback."""
        with self._lock:
            listeners = self._listeners.get(event, [])
            if callback in listeners:
                listeners.remove(callback)

    def _notify(self, event: str, **kwargs: Any) -> None:
        """Fire the callbacks registered for the event when it was raised."""
        with self._lock:
            callbacks = list(self._listeners.get(event, []))
        for cb in callbacks:
            try:
                cb(**kwargs)
            except Exception as exc:
                logger.error("Observer callback failed for '%s': %s", event, exc)

    # ── Internal helpers ─────────────────────────────────────────

    def _lookup(self, vertex_id: Any) -> Optional[Vertex]:
        """Permissive id lookup: malformed or unknown ids give None."""
        try:
            return self._graph.get_vertex(IdValidator.parse(vertex_id))
        except ValueError:
            logger.debug("Ignoring edit with invalid vertex id %r", vertex_id)
            return None

    def _graph_changed(self) -> None:
        self.redraw()
        self._notify(EVENT_GRAPH_UPDATED, graph=self._graph)

    # ── Dunder ───────────────────────────────────────────────────

    def __repr__(self) -> str:
        return (
            f"GraphTool(vertices={self._graph.get_number_of_vertices()}, "
            f"edges={self._graph.get_number_of_edges()}, "
            f"steps={len(self._trace_log)})"
        )
