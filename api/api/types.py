"""
    Shared enums and vertex id parsing.
"""
import math
from enum import Enum
from typing import Any


class IdMode(Enum):
    """How display ids behave when a vertex is removed."""
    RENUMBER = "renumber"
    STABLE = "stable"


class TraversalKind(Enum):
    BFS = "bfs"
    DFS = "dfs"
    SHORTEST_PATH = "shortest_path"


class IdValidator:
    """Validation and conversion of vertex ids coming from an editing surface"""

    @staticmethod
    def parse(value: Any) -> int:
        """
        Convert a raw id (int or text) to a non-negative int.

        Text must be plain ASCII digits with an optional sign.

        Raises:
            ValueError: If the value is empty, non-numeric, boolean or negative.
        """
        if isinstance(value, bool):
            raise ValueError(f"Cannot use boolean {value} as a vertex id")
        if isinstance(value, int):
            result = value
        elif isinstance(value, str):
            text = value.strip()
            if not text:
                raise ValueError("Vertex id cannot be empty")
            digits = text[1:] if text[0] in "+-" else text
            if not (digits.isascii() and digits.isdigit()):
                raise ValueError(f"Vertex id '{value}' is not a number")
            result = int(text)
        else:
            raise ValueError(f"Cannot convert {type(value).__name__} to a vertex id")

        if result < 0:
            raise ValueError(f"Vertex id {result} is negative")
        return result

    @staticmethod
    def parse_coordinate(value: Any) -> float:
        """Convert a raw coordinate (number or text) to a finite float."""
        if isinstance(value, bool):
            raise ValueError(f"Cannot use boolean {value} as a coordinate")
        try:
            result = float(value)
        except (ValueError, TypeError) as e:
            raise ValueError(f"Cannot convert {value} to a coordinate: {str(e)}")
        if not math.isfinite(result):
            raise ValueError(f"Coordinate {value} is not a finite number")
        return result
