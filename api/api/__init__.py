"""
Graph Learning Tool API — models and sink contracts.
"""
from .types import IdMode, TraversalKind, IdValidator
from .models.vertex import Vertex
from .models.edge import Edge
from .models.graph import Graph
from .models.trace import TraceStep, TraceLog, format_frontier
from .models.result import TraversalResult, ParentMap
from .plugins.base import RenderSink, StepLogSink, VisualizerPlugin

__all__ = [
    'IdMode',
    'TraversalKind',
    'IdValidator',
    'Vertex',
    'Edge',
    'Graph',
    'TraceStep',
    'TraceLog',
    'format_frontier',
    'TraversalResult',
    'ParentMap',
    'RenderSink',
    'StepLogSink',
    'VisualizerPlugin',
]
