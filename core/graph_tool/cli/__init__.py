"""
CLI package — text editing surface for building graphs and running algorithms.

Design Patterns
───────────────
• Command       – each CLI operation is a ``Command`` object with
                  ``execute(tool)``.
• Interpreter   – parsing the CLI syntax into structured command objects.
"""
from .command_processor import CommandProcessor
from .commands import (
    Command,
    CommandResult,
    AddVertexCommand,
    RemoveVertexCommand,
    MoveVertexCommand,
    AddEdgeCommand,
    RemoveEdgeCommand,
    ConnectCommand,
    BfsCommand,
    DfsCommand,
    ShortestPathCommand,
    StepsCommand,
    VisualizerCommand,
    RenderCommand,
    ListCommand,
    InfoCommand,
    ClearCommand,
    HelpCommand,
)
from .repl import main, run_loop

__all__ = [
    'CommandProcessor',
    'Command',
    'CommandResult',
    'AddVertexCommand',
    'RemoveVertexCommand',
    'MoveVertexCommand',
    'AddEdgeCommand',
    'RemoveEdgeCommand',
    'ConnectCommand',
    'BfsCommand',
    'DfsCommand',
    'ShortestPathCommand',
    'StepsCommand',
    'VisualizerCommand',
    'RenderCommand',
    'ListCommand',
    'InfoCommand',
    'ClearCommand',
    'HelpCommand',
    'main',
    'run_loop',
]
