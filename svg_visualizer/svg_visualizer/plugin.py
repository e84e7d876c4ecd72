"""
    SVG visualizer — a RenderSink that builds an SVG canvas with lxml.
"""
from typing import Optional

from lxml import etree

from api.api.plugins.base import VisualizerPlugin
from core.graph_tool.config import RenderConfig

SVG_NS = "http://www.w3.org/2000/svg"


def _fmt(value: float) -> str:
    return f"{value:g}"


class SvgVisualizerPlugin(VisualizerPlugin):
    """
    Draws onto an in-memory SVG document.

    Edges go into an ``edges`` group painted below the ``nodes`` group,
    so a circle is never crossed by a line regardless of call order.
    """

    def __init__(self, config: Optional[RenderConfig] = None):
        self._config = config or RenderConfig()
        self._root: etree._Element
        self._edges: etree._Element
        self._nodes: etree._Element
        self.clear_canvas()

    def get_plugin_name(self) -> str:
        return "SVG Visualizer"

    def configure(self, config: RenderConfig) -> None:
        """Apply new drawing settings; the canvas is cleared."""
        self._config = config
        self.clear_canvas()

    # ── RenderSink ───────────────────────────────────────────────

    def clear_canvas(self) -> None:
        cfg = self._config
        self._root = etree.Element(
            f"{{{SVG_NS}}}svg",
            nsmap={None: SVG_NS},
            width=str(cfg.canvas_width),
            height=str(cfg.canvas_height),
            viewBox=f"0 0 {cfg.canvas_width} {cfg.canvas_height}",
        )
        etree.SubElement(
            self._root, f"{{{SVG_NS}}}rect",
            width="100%", height="100%", fill=cfg.background,
        )
        self._edges = etree.SubElement(self._root, f"{{{SVG_NS}}}g", id="edges", stroke=cfg.stroke)
        self._nodes = etree.SubElement(self._root, f"{{{SVG_NS}}}g", id="nodes", stroke=cfg.stroke)

    def draw_edge(self, x1: float, y1: float, x2: float, y2: float) -> None:
        etree.SubElement(
            self._edges, f"{{{SVG_NS}}}line",
            x1=_fmt(x1), y1=_fmt(y1), x2=_fmt(x2), y2=_fmt(y2),
        )

    def draw_node(self, vertex_id: int, x: float, y: float) -> None:
        cfg = self._config
        group = etree.SubElement(
            self._nodes, f"{{{SVG_NS}}}g",
            {"class": "vertex", "data-id": str(vertex_id)},
        )
        etree.SubElement(
            group, f"{{{SVG_NS}}}circle",
            cx=_fmt(x), cy=_fmt(y), r=_fmt(cfg.vertex_radius), fill=cfg.background,
        )
        dx, dy = cfg.label_offset
        label = etree.SubElement(
            group, f"{{{SVG_NS}}}text",
            x=_fmt(x + dx), y=_fmt(y + dy), stroke="none", fill=cfg.stroke,
        )
        label.text = str(vertex_id)

    # ── Output ───────────────────────────────────────────────────

    def render(self) -> str:
        return etree.tostring(self._root, pretty_print=True, encoding="unicode")

    def node_count(self) -> int:
        return len(self._nodes)

    def edge_count(self) -> int:
        return len(self._edges)

    def __repr__(self) -> str:
        return f"SvgVisualizerPlugin(nodes={self.node_count()}, edges={self.edge_count()})"
