"""
    Abstract base classes for rendering and step-log sinks.
    Defines the "Contract" that all display layers must follow.
"""
from abc import ABC, abstractmethod
from typing import Sequence, Tuple

StepRow = Tuple[str, str, str]


class RenderSink(ABC):
    """
        Abstract drawing surface.
        Pattern: Strategy (for rendering).
    """

    @abstractmethod
    def draw_node(self, vertex_id: int, x: float, y: float) -> None:
        """Draw a vertex circle centred at (x, y) labelled with its id."""
        pass

    @abstractmethod
    def draw_edge(self, x1: float, y1: float, x2: float, y2: float) -> None:
        """Draw a straight segment between two vertex centres."""
        pass

    @abstractmethod
    def clear_canvas(self) -> None:
        """Erase everything drawn so far."""
        pass


class StepLogSink(ABC):
    """
        Abstract consumer of the step table.
    """

    @abstractmethod
    def show_steps(self, rows: Sequence[StepRow]) -> None:
        """
        Receive the ordered rows of one run.

        Args:
            rows: ``(iteration, current vertex id or "", queue/stack text)`` tuples.
        """
        pass


class VisualizerPlugin(RenderSink):
    """
        Render sink that can be discovered as a plugin and produces
        a document from what it has drawn.
    """

    @abstractmethod
    def get_plugin_name(self) -> str:
        """
            Returns the unique name of the visualizer.
            Example: "SVG Visualizer"
        """
        pass

    def configure(self, config) -> None:
        """
            Apply drawing settings (a ``RenderConfig``).
            Plugins without settings may ignore it.
        """
        pass

    @abstractmethod
    def render(self) -> str:
        """
        Return the current drawing as a document string.

        Returns:
            str: e.g. an SVG document.
        """
        pass
