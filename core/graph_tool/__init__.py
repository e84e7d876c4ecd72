"""
Graph Learning Tool — core package.

Public API:
    GraphTool      – central orchestrator (Facade)
    ToolConfig     – top-level configuration
    RenderConfig   – drawing settings
    PluginLoader   – generic plugin discovery
    RecordingSink  – in-memory render sink
    StepTable      – in-memory step-log sink
"""
from .core import GraphTool, EVENT_GRAPH_UPDATED, EVENT_TRACE_UPDATED
from .config import ToolConfig, RenderConfig
from .plugin_loader import PluginLoader, create_visualizer_loader
from .sinks import RecordingSink, StepTable

__all__ = [
    'GraphTool',
    'EVENT_GRAPH_UPDATED',
    'EVENT_TRACE_UPDATED',
    'ToolConfig',
    'RenderConfig',
    'PluginLoader',
    'create_visualizer_loader',
    'RecordingSink',
    'StepTable',
]
