# tests/conftest.py
"""
Shared test fixtures.

Scenario graph (ids 0..3):

    0 (100,100) --- 1 (200,100) --- 2 (300,100)
    |
    3 (100,200)

Edges in insertion order: (0-1), (1-2), (0-3).

Stub graph: 10 vertices on a row, two components:
    {0..7} with a cycle 2-3 / 0-1-3 and a short cut 2-7-6,
    {8, 9} isolated pair.
"""
from typing import List, Sequence, Tuple

import pytest

from api.api.models.graph import Graph
from api.api.types import IdMode
from core.graph_tool.config import ToolConfig
from core.graph_tool.core import GraphTool
from core.graph_tool.sinks import RecordingSink, StepTable


# ── Graph definitions ────────────────────────────────────────────
SCENARIO_POSITIONS = [(100, 100), (200, 100), (300, 100), (100, 200)]
SCENARIO_EDGES = [(0, 1), (1, 2), (0, 3)]

STUB_POSITIONS = [(30 + 60 * i, 30) for i in range(10)]
STUB_EDGES = [
    (0, 1), (0, 2), (1, 3), (2, 3), (3, 4),
    (4, 5), (5, 6), (2, 7), (7, 6), (8, 9),
]


def build_graph(positions: Sequence[Tuple[float, float]],
                edges: Sequence[Tuple[int, int]],
                id_mode: IdMode = IdMode.RENUMBER) -> Graph:
    g = Graph("test", id_mode=id_mode)
    vertices = [g.add_vertex(x, y) for x, y in positions]
    for u, v in edges:
        g.add_edge(vertices[u], vertices[v])
    return g


def build_tool(positions: Sequence[Tuple[float, float]],
               edges: Sequence[Tuple[int, int]],
               config: ToolConfig = None) -> GraphTool:
    tool = GraphTool(config, render_sink=RecordingSink(), step_sink=StepTable())
    for x, y in positions:
        tool.add_vertex(x, y)
    for u, v in edges:
        tool.add_edge(u, v)
    return tool


def path_edges(path: List[int]) -> set:
    """Unordered id pairs along a path, for order-free comparison."""
    return {frozenset(pair) for pair in zip(path, path[1:])}


# ── Pytest fixtures ──────────────────────────────────────────────

@pytest.fixture
def scenario_graph() -> Graph:
    """4 vertices, edges (0-1), (1-2), (0-3)."""
    return build_graph(SCENARIO_POSITIONS, SCENARIO_EDGES)


@pytest.fixture
def stub_graph() -> Graph:
    """10 vertices, 10 edges, two components."""
    return build_graph(STUB_POSITIONS, STUB_EDGES)


@pytest.fixture
def empty_graph() -> Graph:
    return Graph("empty")


@pytest.fixture
def scenario_tool() -> GraphTool:
    """Tool holding the scenario graph with a RecordingSink and a StepTable attached."""
    return build_tool(SCENARIO_POSITIONS, SCENARIO_EDGES)


@pytest.fixture
def stub_tool() -> GraphTool:
    return build_tool(STUB_POSITIONS, STUB_EDGES)
