"""
    Vertex model - a circle on the drawing plane.
"""
import math
from typing import Any, Dict

DEFAULT_RADIUS = 20.0


class Vertex:
    """
    A vertex placed by the user.

    ``vertex_id`` is the display id and may be renumbered by the graph.
    ``slot`` is assigned once at creation and never changes, so traversal
    bookkeeping keys on it.  Equality is identity.
    """

    def __init__(self, vertex_id: int, slot: int, x: float, y: float,
                 radius: float = DEFAULT_RADIUS):
        """
        Initialize a vertex.

        Args:
            vertex_id: Display id (dense in the default id mode)
            slot: Stable arena index inside the owning graph
            x: Horizontal position
            y: Vertical position
            radius: Display and hit-test radius
        """
        self.vertex_id = vertex_id
        self.slot = slot
        self.x = float(x)
        self.y = float(y)
        self.radius = float(radius)

    def contains(self, x: float, y: float) -> bool:
        """Hit test: is (x, y) within ``radius`` of the centre?"""
        return math.hypot(self.x - x, self.y - y) <= self.radius

    def move_to(self, x: float, y: float) -> None:
        self.x = float(x)
        self.y = float(y)

    def __repr__(self) -> str:
        return f"Vertex({self.vertex_id}, x={self.x}, y={self.y})"

    def __str__(self) -> str:
        return str(self.vertex_id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.vertex_id,
            'slot': self.slot,
            'x': self.x,
            'y': self.y,
        }
