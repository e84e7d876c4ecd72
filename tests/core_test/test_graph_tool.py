# tests/core_test/test_graph_tool.py
"""
Tests for the GraphTool facade (core/graph_tool/core.py).

Covers:
    • Permissive editing (no-ops on bad input)
    • Pointer gestures (connect, drag)
    • Algorithm runs: trace log, rendering, step table
    • Failed runs leave state untouched
    • Observer hooks
    • Stable id mode
    • Visualizer selection
"""
import threading

import pytest

from api.api.models.trace import TraceStep, BFS_COMPLETE, DFS_COMPLETE
from api.api.plugins.base import VisualizerPlugin
from api.api.types import IdMode
from core.graph_tool.config import RenderConfig, ToolConfig
from core.graph_tool.core import GraphTool, EVENT_GRAPH_UPDATED, EVENT_TRACE_UPDATED
from core.graph_tool.sinks import DrawnNode, RecordingSink, StepTable
from core.services.exceptions import EmptyGraph, InvalidVertexReference

from tests.conftest import build_tool, SCENARIO_POSITIONS, SCENARIO_EDGES


class _FakeVisualizer(VisualizerPlugin):

    def __init__(self):
        self.config = None
        self.calls = []

    def get_plugin_name(self):
        return "Fake"

    def configure(self, config):
        self.config = config

    def draw_node(self, vertex_id, x, y):
        self.calls.append(("node", vertex_id))

    def draw_edge(self, x1, y1, x2, y2):
        self.calls.append(("edge",))

    def clear_canvas(self):
        self.calls.clear()

    def render(self):
        return str(self.calls)


class _FakeLoader:

    def __init__(self, plugins):
        self._plugins = plugins

    def get(self, name):
        return self._plugins.get(name)

    def get_names(self):
        return sorted(self._plugins)


# ═════════════════════════════════════════════════════════════════
#  EDITING
# ═════════════════════════════════════════════════════════════════

class TestEditing:

    def test_add_vertex_redraws(self):
        sink = RecordingSink()
        tool = GraphTool(render_sink=sink)
        tool.add_vertex(100, 100)
        assert sink.nodes == [DrawnNode(0, 100, 100)]

    def test_add_on_existing_vertex_is_noop(self, scenario_tool):
        clears = scenario_tool.render_sink.clear_count
        assert scenario_tool.add_vertex(305, 100) is None
        assert scenario_tool.graph.get_number_of_vertices() == 4
        assert scenario_tool.render_sink.clear_count == clears

    def test_remove_vertex_by_position(self, scenario_tool):
        assert scenario_tool.remove_vertex(200, 100) is not None
        assert scenario_tool.render_sink.node_ids() == [0, 1, 2]
        assert len(scenario_tool.render_sink.edges) == 1

    def test_remove_vertex_by_text_id(self, scenario_tool):
        removed = scenario_tool.remove_vertex_by_id("3")
        assert (removed.x, removed.y) == (100, 200)
        assert scenario_tool.graph.get_number_of_edges() == 2

    @pytest.mark.parametrize("bad", ["9", "x", -1, None])
    def test_bad_ids_are_ignored(self, scenario_tool, bad):
        assert scenario_tool.remove_vertex_by_id(bad) is None
        assert scenario_tool.add_edge(bad, 0) is None
        assert scenario_tool.remove_edge(0, bad) == 0
        assert scenario_tool.move_vertex(bad, 1, 1) is False
        assert scenario_tool.graph.get_number_of_vertices() == 4
        assert scenario_tool.graph.get_number_of_edges() == 3

    def test_move_vertex(self, scenario_tool):
        assert scenario_tool.move_vertex("1", 250, 50) is True
        assert DrawnNode(1, 250, 50) in scenario_tool.render_sink.nodes

    def test_add_and_remove_edge(self, scenario_tool):
        edge = scenario_tool.add_edge("2", "3")
        assert edge.start.vertex_id == 2
        assert scenario_tool.remove_edge(3, 2) == 1

    def test_clear_empties_graph_and_trace(self, scenario_tool):
        scenario_tool.run_bfs(0)
        scenario_tool.clear()
        assert scenario_tool.graph.is_empty()
        assert len(scenario_tool.trace_log) == 0
        assert scenario_tool.render_sink.nodes == []


class TestGestures:

    def test_connect_two_vertices(self, scenario_tool):
        edge = scenario_tool.connect(300, 100, 100, 200)
        assert edge is not None
        assert (edge.start.vertex_id, edge.end.vertex_id) == (2, 3)

    def test_connect_same_vertex_is_noop(self, scenario_tool):
        assert scenario_tool.connect(100, 100, 105, 105) is None
        assert scenario_tool.graph.get_number_of_edges() == 3

    def test_connect_from_empty_space(self, scenario_tool):
        assert scenario_tool.connect(500, 500, 100, 100) is None

    def test_connect_to_empty_space(self, scenario_tool):
        assert scenario_tool.connect(100, 100, 500, 500) is None

    def test_drag_vertex(self, scenario_tool):
        moved = scenario_tool.drag_vertex(102, 98, 400, 400)
        assert moved.vertex_id == 0
        assert (moved.x, moved.y) == (400, 400)

    def test_drag_from_empty_space(self, scenario_tool):
        assert scenario_tool.drag_vertex(700, 700, 0, 0) is None


# ═════════════════════════════════════════════════════════════════
#  RUNS
# ═════════════════════════════════════════════════════════════════

class TestRuns:

    def test_bfs_publishes_trace_and_drawing(self, scenario_tool):
        result = scenario_tool.run_bfs(0)

        assert scenario_tool.trace_log == result.trace_log
        assert scenario_tool.render_sink.node_ids() == [0, 1, 3, 2]
        assert scenario_tool.step_sink.rows == [
            ("1", "0", "[1, 3]"),
            ("2", "1", "[3, 2]"),
            ("2", "3", "[2]"),
            ("3", "2", "[]"),
            ("4", "", BFS_COMPLETE),
        ]

    def test_second_run_replaces_trace(self, scenario_tool):
        scenario_tool.run_bfs(0)
        scenario_tool.run_dfs(0)
        assert scenario_tool.trace_log.messages() == [DFS_COMPLETE]
        assert len(scenario_tool.step_sink) == 5

    def test_repeated_runs_are_identical(self, scenario_tool):
        first = scenario_tool.run_bfs(1)
        second = scenario_tool.run_bfs(1)
        assert first.trace_log == second.trace_log
        assert first.parent_ids() == second.parent_ids()

    def test_shortest_path_drawing(self, scenario_tool):
        result = scenario_tool.run_shortest_path("0", "2")
        assert result.path_ids() == [0, 1, 2]
        assert scenario_tool.render_sink.node_ids() == [2, 1, 0]

    def test_trace_log_is_a_snapshot(self, scenario_tool):
        scenario_tool.run_bfs(0)
        snapshot = scenario_tool.trace_log
        snapshot.clear()
        assert len(scenario_tool.trace_log) == 5

    def test_runs_without_sinks(self):
        tool = GraphTool()
        tool.add_vertex(10, 10)
        result = tool.run_dfs(0)
        assert result.trace_log.steps[0] == TraceStep(1, 0, "[]")

    def test_run_after_renumbering(self, scenario_tool):
        scenario_tool.remove_vertex_by_id(1)
        result = scenario_tool.run_bfs(0)
        assert result.parent_ids() == {0: None, 2: 0}


class TestFailedRuns:

    def test_invalid_start_keeps_previous_state(self, scenario_tool):
        scenario_tool.run_bfs(0)
        before_trace = scenario_tool.trace_log
        before_rows = list(scenario_tool.step_sink.rows)
        before_nodes = list(scenario_tool.render_sink.nodes)

        with pytest.raises(InvalidVertexReference):
            scenario_tool.run_dfs("nope")

        assert scenario_tool.trace_log == before_trace
        assert scenario_tool.step_sink.rows == before_rows
        assert scenario_tool.render_sink.nodes == before_nodes

    def test_empty_graph(self):
        tool = GraphTool(render_sink=RecordingSink(), step_sink=StepTable())
        with pytest.raises(EmptyGraph):
            tool.run_bfs(0)
        assert len(tool.trace_log) == 0
        assert tool.step_sink.rows == []

    def test_invalid_end(self, scenario_tool):
        with pytest.raises(InvalidVertexReference):
            scenario_tool.run_shortest_path(0, 4)


# ═════════════════════════════════════════════════════════════════
#  OBSERVER
# ═════════════════════════════════════════════════════════════════

class TestObserver:

    def test_graph_updated(self, scenario_tool):
        events = []
        scenario_tool.subscribe(EVENT_GRAPH_UPDATED, lambda graph: events.append(graph))
        scenario_tool.add_vertex(500, 500)
        assert events == [scenario_tool.graph]

    def test_noop_edit_does_not_notify(self, scenario_tool):
        events = []
        scenario_tool.subscribe(EVENT_GRAPH_UPDATED, lambda graph: events.append(graph))
        scenario_tool.remove_vertex(700, 700)
        assert events == []

    def test_trace_updated(self, scenario_tool):
        seen = []
        scenario_tool.subscribe(
            EVENT_TRACE_UPDATED,
            lambda result, trace_log: seen.append((result.kind.value, len(trace_log))),
        )
        scenario_tool.run_shortest_path(0, 2)
        assert seen == [("shortest_path", 4)]

    def test_unsubscribe(self, scenario_tool):
        events = []
        callback = lambda graph: events.append(graph)
        scenario_tool.subscribe(EVENT_GRAPH_UPDATED, callback)
        scenario_tool.unsubscribe(EVENT_GRAPH_UPDATED, callback)
        scenario_tool.add_vertex(500, 500)
        assert events == []

    def test_self_unsubscribing_callback_does_not_skip_others(self, scenario_tool):
        calls = []

        def once(graph):
            calls.append("once")
            scenario_tool.unsubscribe(EVENT_GRAPH_UPDATED, once)

        scenario_tool.subscribe(EVENT_GRAPH_UPDATED, once)
        scenario_tool.subscribe(EVENT_GRAPH_UPDATED, lambda graph: calls.append("always"))

        scenario_tool.add_vertex(500, 500)
        scenario_tool.add_vertex(600, 600)
        assert calls == ["once", "always", "always"]

    def test_failing_callback_is_logged(self, scenario_tool, caplog):
        def boom(**kwargs):
            raise RuntimeError("listener down")

        scenario_tool.subscribe(EVENT_TRACE_UPDATED, boom)
        result = scenario_tool.run_bfs(0)
        assert result.found
        assert "listener down" in caplog.text


# ═════════════════════════════════════════════════════════════════
#  CONFIGURATION
# ═════════════════════════════════════════════════════════════════

class TestConfiguration:

    def test_stable_ids(self):
        tool = build_tool(SCENARIO_POSITIONS, SCENARIO_EDGES,
                          ToolConfig(id_mode=IdMode.STABLE))
        tool.remove_vertex_by_id(1)
        assert [v.vertex_id for v in tool.graph.get_all_vertices()] == [0, 2, 3]
        with pytest.raises(InvalidVertexReference):
            tool.run_bfs("1")
        assert tool.run_bfs("3").parent_ids() == {3: None, 0: 3}

    def test_radius_from_config(self):
        tool = GraphTool(ToolConfig(render=RenderConfig(vertex_radius=5)))
        tool.add_vertex(0, 0)
        assert tool.add_vertex(8, 0) is not None

    def test_use_visualizer(self, scenario_tool):
        fake = _FakeVisualizer()
        scenario_tool._vis_loader = _FakeLoader({"fake": fake})

        plugin = scenario_tool.use_visualizer()

        assert plugin is fake
        assert scenario_tool.render_sink is fake
        assert fake.config is scenario_tool.config.render
        assert ("node", 3) in fake.calls

    def test_unknown_visualizer(self, scenario_tool):
        scenario_tool._vis_loader = _FakeLoader({})
        with pytest.raises(ValueError, match="No visualizer"):
            scenario_tool.use_visualizer()
        with pytest.raises(ValueError, match="not found"):
            scenario_tool.use_visualizer("svg")

    def test_repr(self, scenario_tool):
        assert repr(scenario_tool) == "GraphTool(vertices=4, edges=3, steps=0)"


class TestConcurrency:

    def test_parallel_runs_publish_whole_traces(self, stub_tool):
        errors = []

        def worker(start):
            try:
                for _ in range(20):
                    stub_tool.run_bfs(start)
                    log = stub_tool.trace_log
                    assert log.messages() == [BFS_COMPLETE]
            except AssertionError as exc:
                errors.append(exc)

        threads = [threading.Thread(target=worker, args=(s,)) for s in (0, 3, 8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert errors == []
