"""
    Tool configuration — drawing settings, id policy, default plugins.

    Provides typed configuration objects that control how vertices are
    sized and drawn and how display ids behave after a removal.
"""
from dataclasses import dataclass, field
from typing import Optional, Tuple

from api.api.models.vertex import DEFAULT_RADIUS
from api.api.types import IdMode


@dataclass
class RenderConfig:
    """
    Controls how sinks draw the graph.

    Attributes:
        canvas_width:   Canvas width in pixels.
        canvas_height:  Canvas height in pixels.
        vertex_radius:  Circle radius; also the hit-test radius of vertices.
        label_offset:   (dx, dy) of the id label relative to the vertex centre.
        stroke:         Stroke colour for circles, lines and labels.
        background:     Canvas background colour.
    """
    canvas_width: int = 800
    canvas_height: int = 600
    vertex_radius: float = DEFAULT_RADIUS
    label_offset: Tuple[float, float] = (-5.0, 5.0)
    stroke: str = "#000000"
    background: str = "#ffffff"


@dataclass
class ToolConfig:
    """
    Top-level configuration for the Graph Learning Tool.

    Attributes:
        render:             Drawing settings.
        id_mode:            ``RENUMBER`` keeps ids dense after removals;
                            ``STABLE`` never reassigns an id.
        default_visualizer: Entry-point name of the default visualizer plugin.
        log_level:          Level name used by the CLI entry point.
    """
    render: RenderConfig = field(default_factory=RenderConfig)
    id_mode: IdMode = IdMode.RENUMBER
    default_visualizer: Optional[str] = None
    log_level: str = "WARNING"
