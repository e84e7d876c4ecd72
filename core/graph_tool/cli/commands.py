"""
    CLI Commands — concrete command implementations.

    Design Pattern: Command
    ───────────────────────
    Each command encapsulates one editing gesture or algorithm run as an
    object with ``execute(tool) → CommandResult``.  This decouples the
    invoker (CommandProcessor) from the receiver (GraphTool).

    Editing commands follow the tool's permissive policy: an edit that
    cannot apply (point already covered, unknown id) reports
    ``success=False`` with a message instead of raising.

    Supported commands:
    ───────────────────
        add vertex <x> <y>
        remove vertex <x> <y>
        remove vertex --id=<id>
        move vertex <id> <x> <y>
        add edge <u> <v>
        remove edge <u> <v>
        connect <x1> <y1> <x2> <y2>
        bfs <start>
        dfs <start>
        path <start> <end>
        steps
        visualizer [<name>]
        render [<file>]
        list [vertices|edges]
        info
        clear
        help
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from api.api.plugins.base import VisualizerPlugin
from core.services.exceptions import InvalidVertexReference
from core.graph_tool.core import GraphTool
from core.graph_tool.sinks import StepTable


# ── Result wrapper ───────────────────────────────────────────────

@dataclass
class CommandResult:
    """
    Value object returned by every command execution.

    Attributes:
        success:  Whether the command completed without error.
        message:  Human-readable output.
        data:     Optional structured data for programmatic consumers.
    """
    success: bool
    message: str
    data: Optional[Dict[str, Any]] = field(default_factory=dict)


# ── Abstract base ────────────────────────────────────────────────

class Command(ABC):
    """
    Abstract base for all CLI commands.

    Design Pattern: Command
    """

    @abstractmethod
    def execute(self, tool: GraphTool) -> CommandResult:
        """Execute the command on the given tool."""
        ...


# ═════════════════════════════════════════════════════════════════
#  VERTEX COMMANDS
# ═════════════════════════════════════════════════════════════════

class AddVertexCommand(Command):
    """
    Place a vertex.

    Syntax:
        add vertex 120 80
    """

    def __init__(self, x: float, y: float):
        self._x = x
        self._y = y

    def execute(self, tool: GraphTool) -> CommandResult:
        vertex = tool.add_vertex(self._x, self._y)
        if vertex is None:
            return CommandResult(
                False,
                f"Position ({self._x:g}, {self._y:g}) is inside an existing vertex.",
            )
        return CommandResult(
            True,
            f"Vertex {vertex.vertex_id} added at ({vertex.x:g}, {vertex.y:g}).",
            {"id": vertex.vertex_id},
        )


class RemoveVertexCommand(Command):
    """
    Remove a vertex (and its edges) by position or by id.
    Remaining ids are renumbered unless the tool runs in stable id mode.

    Syntax:
        remove vertex 120 80
        remove vertex --id=2
    """

    def __init__(self, x: Optional[float] = None, y: Optional[float] = None,
                 vertex_id: Optional[str] = None):
        self._x = x
        self._y = y
        self._vertex_id = vertex_id

    def execute(self, tool: GraphTool) -> CommandResult:
        if self._vertex_id is not None:
            vertex = tool.remove_vertex_by_id(self._vertex_id)
            where = f"with id '{self._vertex_id}'"
        else:
            vertex = tool.remove_vertex(self._x, self._y)
            where = f"at ({self._x:g}, {self._y:g})"

        if vertex is None:
            return CommandResult(False, f"No vertex {where}.")
        return CommandResult(
            True,
            f"Vertex {where} removed; "
            f"{tool.graph.get_number_of_vertices()} vertex(es) remain.",
        )


class MoveVertexCommand(Command):
    """
    Move a vertex.

    Syntax:
        move vertex 2 300 150
    """

    def __init__(self, vertex_id: str, x: float, y: float):
        self._vertex_id = vertex_id
        self._x = x
        self._y = y

    def execute(self, tool: GraphTool) -> CommandResult:
        if not tool.move_vertex(self._vertex_id, self._x, self._y):
            return CommandResult(False, f"Vertex '{self._vertex_id}' not found.")
        return CommandResult(
            True, f"Vertex {self._vertex_id} moved to ({self._x:g}, {self._y:g})."
        )


# ═════════════════════════════════════════════════════════════════
#  EDGE COMMANDS
# ═════════════════════════════════════════════════════════════════

class AddEdgeCommand(Command):
    """
    Connect two vertices by id.

    Syntax:
        add edge 0 1
    """

    def __init__(self, u_id: str, v_id: str):
        self._u_id = u_id
        self._v_id = v_id

    def execute(self, tool: GraphTool) -> CommandResult:
        edge = tool.add_edge(self._u_id, self._v_id)
        if edge is None:
            return CommandResult(
                False, f"Cannot connect '{self._u_id}' and '{self._v_id}': unknown vertex."
            )
        return CommandResult(True, f"Edge {edge.start.vertex_id} -- {edge.end.vertex_id} added.")


class RemoveEdgeCommand(Command):
    """
    Remove every edge between two vertices.

    Syntax:
        remove edge 0 1
    """

    def __init__(self, u_id: str, v_id: str):
        self._u_id = u_id
        self._v_id = v_id

    def execute(self, tool: GraphTool) -> CommandResult:
        removed = tool.remove_edge(self._u_id, self._v_id)
        if not removed:
            return CommandResult(False, f"No edge between '{self._u_id}' and '{self._v_id}'.")
        return CommandResult(True, f"{removed} edge(s) removed.")


class ConnectCommand(Command):
    """
    Pointer drag between two positions; adds an edge when both ends hit
    different vertices.

    Syntax:
        connect 100 100 300 100
    """

    def __init__(self, x1: float, y1: float, x2: float, y2: float):
        self._points = (x1, y1, x2, y2)

    def execute(self, tool: GraphTool) -> CommandResult:
        edge = tool.connect(*self._points)
        if edge is None:
            return CommandResult(False, "Drag did not join two different vertices.")
        return CommandResult(True, f"Edge {edge.start.vertex_id} -- {edge.end.vertex_id} added.")


# ═════════════════════════════════════════════════════════════════
#  ALGORITHM COMMANDS
# ═════════════════════════════════════════════════════════════════

class BfsCommand(Command):
    """
    Run breadth-first search.

    Syntax:
        bfs 0
    """

    def __init__(self, start: str):
        self._start = start

    def execute(self, tool: GraphTool) -> CommandResult:
        try:
            result = tool.run_bfs(self._start)
        except InvalidVertexReference as e:
            return CommandResult(False, f"BFS error: {e}")
        return CommandResult(
            True,
            f"BFS tree from {result.start.vertex_id}: visited {result.visited_ids()}.",
            {"parents": result.parent_ids()},
        )


class DfsCommand(Command):
    """
    Run depth-first search.

    Syntax:
        dfs 0
    """

    def __init__(self, start: str):
        self._start = start

    def execute(self, tool: GraphTool) -> CommandResult:
        try:
            result = tool.run_dfs(self._start)
        except InvalidVertexReference as e:
            return CommandResult(False, f"DFS error: {e}")
        return CommandResult(
            True,
            f"DFS tree from {result.start.vertex_id}: visited {result.visited_ids()}.",
            {"parents": result.parent_ids()},
        )


class ShortestPathCommand(Command):
    """
    Find the path with the fewest edges.

    Syntax:
        path 0 2
    """

    def __init__(self, start: str, end: str):
        self._start = start
        self._end = end

    def execute(self, tool: GraphTool) -> CommandResult:
        try:
            result = tool.run_shortest_path(self._start, self._end)
        except InvalidVertexReference as e:
            return CommandResult(False, f"Shortest path error: {e}")

        if not result.found:
            return CommandResult(
                True,
                f"No path from {result.start.vertex_id} to {result.end.vertex_id}.",
                {"found": False, "path": []},
            )
        path = result.path_ids()
        return CommandResult(
            True,
            f"Shortest path: {' -> '.join(str(v) for v in path)} ({len(path) - 1} edge(s)).",
            {"found": True, "path": path},
        )


# ═════════════════════════════════════════════════════════════════
#  INFORMATIONAL COMMANDS (no graph mutation)
# ═════════════════════════════════════════════════════════════════

class StepsCommand(Command):
    """
    Show the step table of the last run.

    Syntax:
        steps
    """

    def execute(self, tool: GraphTool) -> CommandResult:
        trace = tool.trace_log
        if not len(trace):
            return CommandResult(True, "No steps recorded. Run bfs, dfs or path first.")
        table = StepTable()
        table.show_steps(trace.rows())
        return CommandResult(True, table.to_text(), {"rows": table.rows})


class VisualizerCommand(Command):
    """
    List installed visualizers, or draw onto one from now on.

    Syntax:
        visualizer
        visualizer svg
    """

    def __init__(self, name: Optional[str] = None):
        self._name = name

    def execute(self, tool: GraphTool) -> CommandResult:
        if self._name is None:
            names = tool.get_visualizer_names()
            if not names:
                return CommandResult(True, "No visualizer plugins installed.", {"names": []})
            return CommandResult(True, f"Installed visualizers: {', '.join(names)}",
                                 {"names": names})
        try:
            plugin = tool.use_visualizer(self._name)
        except ValueError as e:
            return CommandResult(False, str(e))
        return CommandResult(True, f"Drawing with {plugin.get_plugin_name()}.")


class RenderCommand(Command):
    """
    Print the current drawing, or write it to a file.

    Syntax:
        render
        render tree.svg
    """

    def __init__(self, path: Optional[str] = None):
        self._path = path

    def execute(self, tool: GraphTool) -> CommandResult:
        sink = tool.render_sink
        if not isinstance(sink, VisualizerPlugin):
            return CommandResult(
                False, "No visualizer attached. Use 'visualizer <name>' first."
            )
        document = sink.render()
        if self._path is None:
            return CommandResult(True, document, {"document": document})
        try:
            Path(self._path).write_text(document, encoding="utf-8")
        except OSError as e:
            return CommandResult(False, f"Cannot write '{self._path}': {e}")
        return CommandResult(True, f"Drawing written to {self._path}.", {"document": document})


class ListCommand(Command):
    """
    List vertices, edges, or both.

    Syntax:
        list vertices
        list edges
        list
    """

    def __init__(self, target: Optional[str] = None):
        self._target = target  # "vertices", "edges", or None

    def execute(self, tool: GraphTool) -> CommandResult:
        graph = tool.graph
        lines: List[str] = []

        if self._target in (None, "vertices"):
            lines.append(f"── Vertices ({graph.get_number_of_vertices()}) ──")
            for vertex in graph.get_all_vertices():
                lines.append(f"  [{vertex.vertex_id}] ({vertex.x:g}, {vertex.y:g})")

        if self._target in (None, "edges"):
            lines.append(f"── Edges ({graph.get_number_of_edges()}) ──")
            for edge in graph.get_all_edges():
                lines.append(f"  {edge.start.vertex_id} -- {edge.end.vertex_id}")

        return CommandResult(True, "\n".join(lines))


class InfoCommand(Command):
    """
    Graph summary.

    Syntax:
        info
    """

    def execute(self, tool: GraphTool) -> CommandResult:
        graph = tool.graph
        msg = (
            f"Graph: {graph.get_number_of_vertices()} vertex(es), "
            f"{graph.get_number_of_edges()} edge(s), "
            f"id mode={graph.id_mode.value}, "
            f"last run steps={len(tool.trace_log)}"
        )
        return CommandResult(True, msg)


class ClearCommand(Command):
    """
    Remove all vertices and edges.

    Syntax:
        clear
    """

    def execute(self, tool: GraphTool) -> CommandResult:
        tool.clear()
        return CommandResult(True, "Graph cleared.")


class HelpCommand(Command):
    """
    Display available CLI commands.

    Syntax:
        help
    """

    def execute(self, tool: GraphTool) -> CommandResult:
        help_text = """
Available commands:
───────────────────────────────────────────────────────
  add vertex <x> <y>
      Place a vertex (ignored if the point is inside another vertex).

  remove vertex <x> <y>   |   remove vertex --id=<id>
      Remove a vertex and its edges. Remaining ids are renumbered.

  move vertex <id> <x> <y>
      Move a vertex.

  add edge <u> <v>
      Connect two vertices by id.

  remove edge <u> <v>
      Remove every edge between two vertices.

  connect <x1> <y1> <x2> <y2>
      Drag from one vertex to another to connect them.

  bfs <start>
      Breadth-first tree from a start vertex.

  dfs <start>
      Depth-first tree from a start vertex.

  path <start> <end>
      Shortest path (fewest edges) between two vertices.

  steps
      Show the step table of the last run.

  visualizer [<name>]
      List installed visualizers, or draw onto the named one.

  render [<file>]
      Print the current drawing, or write it to a file.

  list [vertices|edges]
      List vertices, edges, or both.

  info
      Show a graph summary.

  clear
      Remove all vertices and edges.

  help
      Show this help text.
───────────────────────────────────────────────────────
""".strip()
        return CommandResult(True, help_text)
