"""
    Interactive loop for the text editing surface.

    Reads one command per line from stdin, prints the result, and
    exits on ``quit``/``exit`` or end of input.
"""
import argparse
import logging
import sys
from typing import List, Optional, TextIO

from core.graph_tool.config import ToolConfig
from core.graph_tool.core import GraphTool
from core.graph_tool.sinks import RecordingSink, StepTable

from .command_processor import CommandProcessor

logger = logging.getLogger(__name__)

PROMPT = "graph> "
EXIT_WORDS = ("quit", "exit")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Graph Learning Tool: build a graph and run BFS, DFS and shortest path",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=ToolConfig().log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--visualizer",
        type=str,
        default=None,
        help="Visualizer plugin to draw onto, e.g. svg (default: in-memory only)",
    )
    return parser.parse_args(argv)


def run_loop(tool: GraphTool, stdin: TextIO, stdout: TextIO,
             interactive: bool = False) -> int:
    """Process lines until end of input; returns the number of failed commands."""
    processor = CommandProcessor()
    failures = 0
    while True:
        if interactive:
            stdout.write(PROMPT)
            stdout.flush()
        line = stdin.readline()
        if not line:
            break
        if line.strip().lower() in EXIT_WORDS:
            break
        if not line.strip():
            continue

        result = processor.process(line, tool)
        if not result.success:
            failures += 1
        stdout.write(result.message + "\n")
    return failures


def build_tool(config: ToolConfig) -> GraphTool:
    """
    Tool for an interactive session.  Drawing always happens: onto the
    configured visualizer when one is named, else onto an in-memory sink.

    Raises:
        ValueError: If the configured visualizer is not installed.
    """
    tool = GraphTool(config, render_sink=RecordingSink(), step_sink=StepTable())
    if config.default_visualizer is not None:
        tool.use_visualizer()
    return tool


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    config = ToolConfig(log_level=args.log_level, default_visualizer=args.visualizer)
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        tool = build_tool(config)
    except ValueError as e:
        logger.error("%s", e)
        return 1

    logger.info("Starting interactive session")
    run_loop(tool, sys.stdin, sys.stdout, interactive=sys.stdin.isatty())
    return 0


if __name__ == "__main__":
    sys.exit(main())
