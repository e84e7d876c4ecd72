"""
    Trace model - the step table produced by a traversal run.
"""
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

# Column headings of the step table
TRACE_COLUMNS = ("Iteration", "Current Node", "Queue/Stack")

BFS_COMPLETE = "BFS complete"
DFS_COMPLETE = "DFS complete"
PATH_FOUND = "Shortest path found"
NO_PATH_FOUND = "No path found"
PATH_COMPLETE = "Shortest path complete"


def format_frontier(vertex_ids: Iterable[int]) -> str:
    """Render a queue or stack as ``[a, b, c]`` (front / bottom first)."""
    return "[" + ", ".join(str(vertex_id) for vertex_id in vertex_ids) + "]"


@dataclass(frozen=True)
class TraceStep:
    """
    One row of the step table.

    Attributes:
        iteration: Level (BFS) or pop/dequeue counter (DFS, shortest path), from 1.
        vertex_id: Display id of the vertex just processed; None on status rows.
        frontier:  Queue/stack snapshot text, or a terminal status message.
    """
    iteration: int
    vertex_id: Optional[int]
    frontier: str

    @property
    def is_terminal(self) -> bool:
        return self.vertex_id is None

    def as_row(self) -> Tuple[str, str, str]:
        """The three display cells; an empty current node on status rows."""
        current = "" if self.vertex_id is None else str(self.vertex_id)
        return str(self.iteration), current, self.frontier


class TraceLog:
    """
    Ordered, append-only record of one run.  Cleared before each run.
    """

    def __init__(self, steps: Optional[Iterable[TraceStep]] = None):
        self._steps: List[TraceStep] = list(steps or [])

    def append(self, step: TraceStep) -> None:
        self._steps.append(step)

    def record(self, iteration: int, vertex_id: Optional[int], frontier: str) -> TraceStep:
        step = TraceStep(iteration, vertex_id, frontier)
        self._steps.append(step)
        return step

    def extend(self, steps: Iterable[TraceStep]) -> None:
        self._steps.extend(steps)

    def clear(self) -> None:
        self._steps.clear()

    @property
    def steps(self) -> List[TraceStep]:
        return list(self._steps)

    def rows(self) -> List[Tuple[str, str, str]]:
        return [step.as_row() for step in self._steps]

    def vertex_order(self) -> List[int]:
        """Ids of processed vertices, in processing order (status rows skipped)."""
        return [step.vertex_id for step in self._steps if step.vertex_id is not None]

    def iterations(self) -> List[List[int]]:
        """Processed vertex ids grouped by iteration number, in order."""
        groups: List[List[int]] = []
        last = None
        for step in self._steps:
            if step.vertex_id is None:
                continue
            if step.iteration != last:
                groups.append([])
                last = step.iteration
            groups[-1].append(step.vertex_id)
        return groups

    def messages(self) -> List[str]:
        return [step.frontier for step in self._steps if step.is_terminal]

    def last(self) -> Optional[TraceStep]:
        return self._steps[-1] if self._steps else None

    def __iter__(self) -> Iterator[TraceStep]:
        return iter(list(self._steps))

    def __len__(self) -> int:
        return len(self._steps)

    def __getitem__(self, index: int) -> TraceStep:
        return self._steps[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, TraceLog):
            return False
        return self._steps == other._steps

    def __repr__(self) -> str:
        return f"TraceLog(steps={len(self._steps)})"
