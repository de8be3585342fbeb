"""CLI entry point for the dependency graph.

Usage:
    python -m TaskDock.graph tasks.json
    python -m TaskDock.graph tasks.json --status pending,active
    python -m TaskDock.graph tasks.json --center t3 --depth 2
    python -m TaskDock.graph --help
"""

from __future__ import annotations

import argparse
import logging
import sys

from TaskDock.config import DEFAULT_CONFIG_FILE, load_config
from TaskDock.errors import TaskDockError
from TaskDock.tasks.store import JsonTaskStore
from .builder import TaskGraphBuilder
from .output import save_graph, to_json, to_markdown

logger = logging.getLogger("taskdock.cli")


def _setup_logging(verbose: bool = True) -> None:
    """Configure logging for the CLI.

    Args:
        verbose: If True (default), log at INFO level. If False, only WARNINGS+.
    """
    level = logging.INFO if verbose else logging.WARNING
    fmt = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"
    datefmt = "%H:%M:%S"
    logging.basicConfig(level=level, format=fmt, datefmt=datefmt, stream=sys.stderr)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="taskdock-graph",
        description="Build a task dependency graph from a JSON task file.",
    )
    parser.add_argument("tasks_file", help="JSON file holding the task list")
    parser.add_argument(
        "--status",
        default=None,
        help="Comma-separated statuses to include, e.g. pending,active (default: all)",
    )
    parser.add_argument(
        "--center",
        default=None,
        help="Build the neighbors graph around this task id instead of the full graph",
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=None,
        help="Hop budget for --center (default: from config, 1)",
    )
    parser.add_argument(
        "--no-placeholders",
        action="store_true",
        default=False,
        help="Omit unresolved dependencies from a neighbors graph",
    )
    parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG_FILE,
        help=f"Config file (default: {DEFAULT_CONFIG_FILE}, ignored if missing)",
    )
    parser.add_argument(
        "--format",
        choices=("markdown", "json"),
        default="markdown",
        help="Report format printed to stdout (default: markdown)",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Also save task_graph.json and task_graph.md to this directory",
    )
    parser.add_argument(
        "--no-log",
        action="store_true",
        default=False,
        help="Only log warnings and errors",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    _setup_logging(verbose=not args.no_log)

    try:
        config = load_config(args.config)
        builder = TaskGraphBuilder(JsonTaskStore(args.tasks_file), config=config)
        if args.center:
            result = builder.build_neighbors(
                args.center,
                depth=args.depth,
                include_placeholders=False if args.no_placeholders else None,
            )
        else:
            result = builder.build_graph(args.status)
    except TaskDockError as e:
        logger.error("%s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(to_json(result) if args.format == "json" else to_markdown(result))

    if args.output_dir:
        json_path, md_path = save_graph(result, output_dir=args.output_dir)
        print(f"Graph saved to: {json_path}", file=sys.stderr)
        print(f"Markdown saved to: {md_path}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
