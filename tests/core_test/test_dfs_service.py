# tests/core_test/test_dfs_service.py
"""
Tests for DfsService (core/services/dfs_service.py).
"""
import pytest

from api.api.models.trace import TraceStep, DFS_COMPLETE
from api.api.types import TraversalKind
from core.services.dfs_service import DfsService
from core.services.exceptions import EmptyGraph, InvalidVertexReference


@pytest.fixture
def service() -> DfsService:
    return DfsService()


class TestDfsTrace:

    def test_scenario_steps(self, service, scenario_graph):
        result = service.dfs(scenario_graph, 0)
        assert result.trace_log.steps == [
            TraceStep(1, 0, "[1, 3]"),
            TraceStep(2, 3, "[1]"),
            TraceStep(3, 1, "[2]"),
            TraceStep(4, 2, "[]"),
            TraceStep(5, None, DFS_COMPLETE),
        ]

    def test_iteration_advances_per_pop(self, service, stub_graph):
        result = service.dfs(stub_graph, 0)
        iterations = [step.iteration for step in result.trace_log]
        assert iterations == list(range(1, len(iterations) + 1))

    def test_pop_order_is_last_pushed_first(self, service, scenario_graph):
        result = service.dfs(scenario_graph, 0)
        assert result.trace_log.vertex_order() == [0, 3, 1, 2]

    def test_single_vertex(self, service, empty_graph):
        empty_graph.add_vertex(10, 10)
        result = service.dfs(empty_graph, 0)
        assert result.trace_log.rows() == [("1", "0", "[]"), ("2", "", DFS_COMPLETE)]


class TestDfsTree:

    def test_scenario_parents(self, service, scenario_graph):
        result = service.dfs(scenario_graph, 0)
        assert result.kind == TraversalKind.DFS
        assert result.parent_ids() == {0: None, 1: 0, 3: 0, 2: 1}

    def test_all_neighbors_are_claimed_on_pop(self, service, stub_graph):
        """Both neighbours of 0 get 0 as parent even though DFS goes deep first."""
        result = service.dfs(stub_graph, 0)
        parents = result.parent_ids()
        assert parents[1] == 0
        assert parents[2] == 0

    def test_reaches_whole_component(self, service, stub_graph):
        result = service.dfs(stub_graph, 5)
        assert sorted(result.visited_ids()) == list(range(8))

    def test_every_parent_link_is_an_edge(self, service, stub_graph):
        result = service.dfs(stub_graph, 0)
        for slot, parent_slot in result.parent_map.items():
            if parent_slot is None:
                continue
            child, parent = result.vertex(slot), result.vertex(parent_slot)
            assert child in list(stub_graph.neighbors(parent))


class TestDfsValidation:

    def test_negative_id(self, service, scenario_graph):
        with pytest.raises(InvalidVertexReference):
            service.dfs(scenario_graph, -1)

    def test_empty_graph(self, service, empty_graph):
        with pytest.raises(EmptyGraph):
            service.dfs(empty_graph, "0")
