"""
Sink contracts — abstract base classes for renderers and step logs.
"""
from .base import RenderSink, StepLogSink, VisualizerPlugin, StepRow

__all__ = ['RenderSink', 'StepLogSink', 'VisualizerPlugin', 'StepRow']
