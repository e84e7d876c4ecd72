"""
    In-memory sinks — record what was drawn and keep the latest step table.

    Used as the default display layer when no visualizer plugin is
    attached, and by tests.
"""
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from api.api.models.trace import TRACE_COLUMNS
from api.api.plugins.base import RenderSink, StepLogSink, StepRow


@dataclass(frozen=True)
class DrawnNode:
    vertex_id: int
    x: float
    y: float


@dataclass(frozen=True)
class DrawnEdge:
    x1: float
    y1: float
    x2: float
    y2: float

    def endpoints(self) -> frozenset:
        """Unordered endpoint pair, for orientation-free comparisons."""
        return frozenset({(self.x1, self.y1), (self.x2, self.y2)})


class RecordingSink(RenderSink):
    """
    Keeps every drawing call since the last ``clear_canvas``.

    Attributes:
        nodes:       Nodes drawn, in call order.
        edges:       Edges drawn, in call order.
        clear_count: How many times the canvas was cleared.
    """

    def __init__(self):
        self.nodes: List[DrawnNode] = []
        self.edges: List[DrawnEdge] = []
        self.clear_count = 0

    def draw_node(self, vertex_id: int, x: float, y: float) -> None:
        self.nodes.append(DrawnNode(vertex_id, x, y))

    def draw_edge(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self.edges.append(DrawnEdge(x1, y1, x2, y2))

    def clear_canvas(self) -> None:
        self.nodes.clear()
        self.edges.clear()
        self.clear_count += 1

    def node_ids(self) -> List[int]:
        return [node.vertex_id for node in self.nodes]

    def __repr__(self) -> str:
        return f"RecordingSink(nodes={len(self.nodes)}, edges={len(self.edges)})"


class StepTable(StepLogSink):
    """
    Holds the rows of the most recent run and renders them as text.
    """

    def __init__(self):
        self.rows: List[StepRow] = []

    def show_steps(self, rows: Sequence[StepRow]) -> None:
        self.rows = list(rows)

    def to_text(self) -> str:
        """Fixed-width table with the ``Iteration | Current Node | Queue/Stack`` columns."""
        table: List[Tuple[str, ...]] = [TRACE_COLUMNS] + [tuple(row) for row in self.rows]
        widths = [max(len(row[i]) for row in table) for i in range(len(TRACE_COLUMNS))]

        lines = []
        for index, row in enumerate(table):
            lines.append("  ".join(cell.ljust(widths[i]) for i, cell in enumerate(row)).rstrip())
            if index == 0:
                lines.append("  ".join("-" * width for width in widths))
        return "\n".join(lines)

    def __len__(self) -> int:
        return len(self.rows)
