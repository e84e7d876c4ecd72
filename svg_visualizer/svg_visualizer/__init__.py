"""
SVG visualizer plugin for the Graph Learning Tool.
"""
from .plugin import SvgVisualizerPlugin

__all__ = ['SvgVisualizerPlugin']
