"""
    Traversal result - parent map, trace and (for shortest path) the path.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..types import TraversalKind
from .trace import TraceLog
from .vertex import Vertex

# slot -> parent slot; the root maps to None, unvisited slots are absent
ParentMap = Dict[int, Optional[int]]


@dataclass
class TraversalResult:
    """
    Value object returned by every traversal service.

    Attributes:
        kind:       Which algorithm produced the result.
        start:      Root vertex.
        end:        Target vertex (shortest path only).
        parent_map: Discovery tree keyed by vertex slot, in discovery order.
        trace_log:  Step table of the run.
        found:      Whether the target was reached (always True for BFS/DFS).
        path:       Slots from start to end when a path was found.
        vertices:   slot -> Vertex for every visited vertex.
    """
    kind: TraversalKind
    start: Vertex
    parent_map: ParentMap = field(default_factory=dict)
    trace_log: TraceLog = field(default_factory=TraceLog)
    end: Optional[Vertex] = None
    found: bool = True
    path: List[int] = field(default_factory=list)
    vertices: Dict[int, Vertex] = field(default_factory=dict)

    def vertex(self, slot: int) -> Vertex:
        return self.vertices[slot]

    def parent_ids(self) -> Dict[int, Optional[int]]:
        """The parent map translated to display ids."""
        result: Dict[int, Optional[int]] = {}
        for slot, parent_slot in self.parent_map.items():
            parent = None if parent_slot is None else self.vertices[parent_slot].vertex_id
            result[self.vertices[slot].vertex_id] = parent
        return result

    def visited_ids(self) -> List[int]:
        """Display ids of visited vertices in discovery order."""
        return [self.vertices[slot].vertex_id for slot in self.parent_map]

    def path_ids(self) -> List[int]:
        return [self.vertices[slot].vertex_id for slot in self.path]

    def depth_of(self, slot: int) -> int:
        """Number of parent-map edges between ``slot`` and the root."""
        depth = 0
        current = self.parent_map[slot]
        while current is not None:
            depth += 1
            current = self.parent_map[current]
        return depth

    def tree_edges(self) -> List[Tuple[Vertex, Optional[Vertex]]]:
        """
        (child, parent) pairs to draw.  The whole tree for BFS/DFS; only
        the chain from end back to start for a found shortest path; nothing
        when no path was found.
        """
        if self.kind == TraversalKind.SHORTEST_PATH:
            if not self.found:
                return []
            pairs = []
            for slot in reversed(self.path):
                parent_slot = self.parent_map[slot]
                parent = None if parent_slot is None else self.vertices[parent_slot]
                pairs.append((self.vertices[slot], parent))
            return pairs

        return [
            (self.vertices[slot], None if parent_slot is None else self.vertices[parent_slot])
            for slot, parent_slot in self.parent_map.items()
        ]

    def __repr__(self) -> str:
        return (
            f"TraversalResult(kind={self.kind.value}, start={self.start.vertex_id}, "
            f"visited={len(self.parent_map)}, found={self.found})"
        )
