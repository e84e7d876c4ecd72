"""
    CommandProcessor — parses raw CLI strings and dispatches commands.

    Design Patterns
    ───────────────
    • Interpreter   – parses the CLI text into structured ``Command`` objects.
    • Facade        – single ``process(text, tool)`` entry-point hides all parsing.

    This is a text rendition of the pointer-driven editing surface:
    every gesture (click to add, right click to remove, drag to connect,
    ctrl-drag to move) and every algorithm button has a command.
"""
from __future__ import annotations

import logging
import shlex
from typing import List, Optional, Tuple

from api.api.types import IdValidator
from core.graph_tool.core import GraphTool

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

logger = logging.getLogger(__name__)


class CommandProcessor:
    """
    Parses raw CLI input, creates ``Command`` objects and executes them
    on a tool.

    Usage:
        processor = CommandProcessor()
        result = processor.process("add vertex 100 100", tool)
    """

    # ── Public API ───────────────────────────────────────────────

    def process(self, text: str, tool: GraphTool) -> CommandResult:
        """
        Parse and execute a single CLI command.

        Args:
            text: Raw command string from the user.
            tool: The tool owning the graph being edited.

        Returns:
            ``CommandResult`` with success status and message.
        """
        text = self._strip_comments(text).strip()
        if not text:
            return CommandResult(False, "Empty command. Type 'help' for usage.")

        try:
            command = self._parse(text)
        except ValueError as e:
            return CommandResult(False, f"Parse error: {e}")

        logger.debug("Executing %s", type(command).__name__)
        return command.execute(tool)

    # ── Comment handling ────────────────────────────────────────

    @staticmethod
    def _strip_comments(text: str) -> str:
        """
        Strip inline comments — everything after an unquoted ``#``.

        Example:
            >>> CommandProcessor._strip_comments("bfs 0   # from the root")
            'bfs 0'
        """
        in_single = False
        in_double = False
        for i, ch in enumerate(text):
            if ch == "'" and not in_double:
                in_single = not in_single
            elif ch == '"' and not in_single:
                in_double = not in_double
            elif ch == '#' and not in_single and not in_double:
                return text[:i].rstrip()
        return text

    # ── Parser ───────────────────────────────────────────────────

    def _parse(self, text: str) -> Command:
        """
        Parse raw CLI text into a ``Command`` object.

        Raises:
            ValueError: If the text cannot be parsed.
        """
        try:
            tokens = shlex.split(text)
        except ValueError:
            tokens = text.split()

        if not tokens:
            raise ValueError("Empty command.")

        verb = tokens[0].lower()
        args = tokens[1:]

        # ── Single-word commands ──
        if verb == "help":
            return HelpCommand()
        if verb == "clear":
            return ClearCommand()
        if verb == "info":
            return InfoCommand()
        if verb == "steps":
            return StepsCommand()

        # ── display ──
        if verb == "visualizer":
            return VisualizerCommand(self._optional(args, "visualizer [<name>]"))
        if verb == "render":
            return RenderCommand(self._optional(args, "render [<file>]"))

        # ── list ──
        if verb == "list":
            target = args[0].lower() if args else None
            if target not in (None, "vertices", "edges"):
                raise ValueError(f"Unknown list target: '{target}'. Use 'vertices' or 'edges'.")
            return ListCommand(target)

        # ── algorithms (ids are validated by the tool) ──
        if verb == "bfs":
            return BfsCommand(self._single(args, "bfs <start>"))
        if verb == "dfs":
            return DfsCommand(self._single(args, "dfs <start>"))
        if verb == "path":
            if len(args) != 2:
                raise ValueError("Usage: path <start> <end>")
            return ShortestPathCommand(args[0], args[1])

        # ── pointer gestures ──
        if verb == "connect":
            x1, y1, x2, y2 = self._coordinates(args, 4, "connect <x1> <y1> <x2> <y2>")
            return ConnectCommand(x1, y1, x2, y2)

        # ── add / remove / move ──
        if verb in ("add", "remove", "move"):
            if not args:
                raise ValueError(f"Usage: {verb} <vertex|edge> ...")
            entity = args[0].lower()
            remaining = args[1:]

            if verb == "add" and entity == "vertex":
                x, y = self._coordinates(remaining, 2, "add vertex <x> <y>")
                return AddVertexCommand(x, y)
            if verb == "add" and entity == "edge":
                u, v = self._pair(remaining, "add edge <u> <v>")
                return AddEdgeCommand(u, v)
            if verb == "remove" and entity == "vertex":
                return self._parse_remove_vertex(remaining)
            if verb == "remove" and entity == "edge":
                u, v = self._pair(remaining, "remove edge <u> <v>")
                return RemoveEdgeCommand(u, v)
            if verb == "move" and entity == "vertex":
                if len(remaining) != 3:
                    raise ValueError("Usage: move vertex <id> <x> <y>")
                x, y = self._coordinates(remaining[1:], 2, "move vertex <id> <x> <y>")
                return MoveVertexCommand(remaining[0], x, y)

            raise ValueError(f"Unknown entity: '{entity}'. Use 'vertex' or 'edge'.")

        raise ValueError(f"Unknown command: '{verb}'. Type 'help' for usage.")

    # ── Token parsers ────────────────────────────────────────────

    @staticmethod
    def _single(tokens: List[str], usage: str) -> str:
        if len(tokens) != 1:
            raise ValueError(f"Usage: {usage}")
        return tokens[0]

    @staticmethod
    def _optional(tokens: List[str], usage: str) -> Optional[str]:
        if len(tokens) > 1:
            raise ValueError(f"Usage: {usage}")
        return tokens[0] if tokens else None

    @staticmethod
    def _pair(tokens: List[str], usage: str) -> Tuple[str, str]:
        if len(tokens) != 2:
            raise ValueError(f"Usage: {usage}")
        return tokens[0], tokens[1]

    @staticmethod
    def _coordinates(tokens: List[str], count: int, usage: str) -> List[float]:
        if len(tokens) != count:
            raise ValueError(f"Usage: {usage}")
        return [IdValidator.parse_coordinate(token) for token in tokens]

    @staticmethod
    def _extract_id(tokens: List[str]) -> Tuple[Optional[str], List[str]]:
        """
        Extract --id=<value> from token list.
        Returns (id_value or None, remaining_tokens).
        """
        remaining = []
        found_id = None
        i = 0
        while i < len(tokens):
            token = tokens[i]
            if token.startswith("--id="):
                found_id = token[5:]
            elif token == "--id" and i + 1 < len(tokens):
                found_id = tokens[i + 1]
                i += 1
            else:
                remaining.append(token)
            i += 1
        return found_id, remaining

    def _parse_remove_vertex(self, tokens: List[str]) -> RemoveVertexCommand:
        vertex_id, remaining = self._extract_id(tokens)
        if vertex_id is not None:
            if remaining:
                raise ValueError("Usage: remove vertex --id=<id>")
            return RemoveVertexCommand(vertex_id=vertex_id)
        x, y = self._coordinates(remaining, 2, "remove vertex <x> <y>")
        return RemoveVertexCommand(x, y)
