"""Command-line interface for pathfinder."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, Optional

from pathfinder.lib.algorithms.all_pairs import all_pairs_shortest_paths
from pathfinder.lib.algorithms.search import search
from pathfinder.lib.graph import AdjacencyGraph
from pathfinder.lib.io import GraphFormatError, edgelist_to_graph, load_islands
from pathfinder.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    quiet_logging,
)
from pathfinder.report import format_result, result_to_dict

logger = get_logger(__name__)


def _format_table(
    headers: List[str],
    rows: List[List[Any]],
    min_width: int = 8,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string
    """
    if not rows:
        return ""

    all_data = [headers] + [[str(item) for item in row] for row in rows]
    col_widths = [
        max(max(len(row[col_idx]) for row in all_data), min_width)
        for col_idx in range(len(headers))
    ]

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{item:<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(all_data[0])]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in all_data[1:]:
        lines.append(format_row(row))
    return "\n".join(lines)


def _load_graph(path: Path, edgelist: bool, undirected: bool) -> AdjacencyGraph:
    """Load an island file, or a ``src dst weight`` edge list."""
    if not edgelist:
        return load_islands(path)
    if not path.is_file():
        raise GraphFormatError(f"file {path} does not exist")
    with path.open(encoding="utf-8") as fh:
        graph = edgelist_to_graph(fh, directed=not undirected)
    return graph.freeze()


def _run(
    graph: AdjacencyGraph,
    source: Optional[str],
    target: Optional[str],
    as_json: bool,
    ordered: bool,
) -> None:
    """Search the requested pair, or every pair, and print the results."""
    if source is not None or target is not None:
        if source is None or target is None:
            raise ValueError("--from and --to must be given together")
        start, end = graph.index(source), graph.index(target)
        pairs = [(start, end, search(graph, start, end))]
    else:
        pairs = [
            (pair.start, pair.target, pair.result)
            for pair in all_pairs_shortest_paths(graph, ordered=ordered)
        ]

    routes = 0
    blocks = []
    for start, end, result in pairs:
        routes += len(result)
        if not result.found:
            logger.debug("No path from %s to %s", graph.name(start), graph.name(end))
        if as_json:
            blocks.append(result_to_dict(graph, start, end, result))
        elif result.found:
            blocks.append(format_result(graph, start, end, result))

    if as_json:
        print(json.dumps(blocks, indent=2, default=str))
    elif blocks:
        print("\n".join(blocks))

    logger.debug("Printed %d route(s) for %d pair(s)", routes, len(pairs))


def _inspect(graph: AdjacencyGraph) -> None:
    """Print the nodes and edges of ``graph`` as tables."""
    print(f"Nodes: {graph.num_vertices}")
    print(
        _format_table(
            ["Index", "Name", "Out-degree"],
            [[i, graph.name(i), len(graph.neighbors(i))] for i in range(len(graph))],
        )
    )
    print(f"Edges: {graph.num_edges} (total weight {graph.total_weight})")
    print(
        _format_table(
            ["Source", "Target", "Weight"],
            [[graph.name(u), graph.name(v), w] for u, v, w in graph.edges()],
        )
    )


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``pathfinder`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="pathfinder",
        description="Find every shortest route between the islands of a map.",
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{run,inspect}",
        help="Available commands",
    )

    run_parser = subparsers.add_parser(
        "run", help="Print all minimum-weight routes between islands"
    )
    run_parser.add_argument(
        "--from", dest="source", default=None, help="Only search from this node"
    )
    run_parser.add_argument(
        "--to", dest="target", default=None, help="Only search to this node"
    )
    run_parser.add_argument(
        "--json", action="store_true", help="Print results as JSON"
    )
    run_parser.add_argument(
        "--ordered",
        action="store_true",
        help="Search every ordered pair instead of each pair once",
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Validate an input file and print its nodes and edges"
    )

    for p in (run_parser, inspect_parser):
        p.add_argument("file", type=Path, help="Path to the input file")
        p.add_argument(
            "--edgelist",
            action="store_true",
            help="Read 'src dst weight' lines instead of the island format",
        )
        p.add_argument(
            "--undirected",
            action="store_true",
            help="With --edgelist, add each edge in both directions",
        )

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        enable_debug_logging()
        logger.debug("Debug logging enabled")
    elif args.quiet:
        quiet_logging()
    else:
        disable_debug_logging()

    try:
        graph = _load_graph(args.file, args.edgelist, args.undirected)
        logger.debug(
            "Loaded %d node(s) and %d edge(s) from %s",
            graph.num_vertices,
            graph.num_edges,
            args.file,
        )
        if args.command == "run":
            _run(graph, args.source, args.target, args.json, args.ordered)
        elif args.command == "inspect":
            _inspect(graph)
    except GraphFormatError as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from None
    except (KeyError, ValueError) as exc:
        message = exc.args[0] if exc.args else str(exc)
        print(f"error: {message}", file=sys.stderr)
        raise SystemExit(1) from None


if __name__ == "__main__":
    main()
