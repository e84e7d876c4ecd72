import pytest
from lxml import etree

from core.graph_tool.config import RenderConfig
from svg_visualizer.svg_visualizer.plugin import SvgVisualizerPlugin, SVG_NS

NS = {"svg": SVG_NS}


@pytest.fixture
def plugin():
    return SvgVisualizerPlugin()


@pytest.fixture
def small_plugin():
    return SvgVisualizerPlugin(RenderConfig(canvas_width=200, canvas_height=100, vertex_radius=8))


def parse_svg(plugin) -> etree._Element:
    return etree.fromstring(plugin.render().encode("utf-8"))
