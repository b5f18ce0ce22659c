"""Text and JSON presentation of minimum-weight path results."""

from __future__ import annotations

from typing import Any, Dict, List

from pathfinder.lib.algorithms.accumulator import PathAccumulator
from pathfinder.lib.graph import AdjacencyGraph
from pathfinder.lib.path import Path

BOUNDARY = "=" * 40


def format_path(graph: AdjacencyGraph, start: int, target: int, path: Path) -> str:
    """Render one path as a boundary-framed block.

    Example:
        ========================================
        Path: A -> B
        Route: A -> C -> B
        Distance: 3 + 4 = 7
        ========================================
    """
    route = " -> ".join(str(name) for name in path.nodes_seq)
    if len(path.weights) > 1:
        distance = " + ".join(str(w) for w in path.weights) + f" = {path.cost}"
    else:
        distance = str(path.cost)
    return "\n".join(
        [
            BOUNDARY,
            f"Path: {graph.name(start)} -> {graph.name(target)}",
            f"Route: {route}",
            f"Distance: {distance}",
            BOUNDARY,
        ]
    )


def format_result(
    graph: AdjacencyGraph,
    start: int,
    target: int,
    result: PathAccumulator,
) -> str:
    """Render every path of ``result``; an empty result renders as ``""``."""
    return "\n".join(
        format_path(graph, start, target, Path.from_vertices(graph, vertices))
        for vertices in result
    )


def result_to_dict(
    graph: AdjacencyGraph,
    start: int,
    target: int,
    result: PathAccumulator,
) -> Dict[str, Any]:
    """Return a JSON-serializable summary of one pair's result.

    ``min_len`` is ``None`` when no path exists.
    """
    paths: List[Dict[str, Any]] = []
    for vertices in result:
        path = Path.from_vertices(graph, vertices)
        paths.append({"route": list(path.nodes_seq), "weights": list(path.weights)})
    return {
        "start": graph.name(start),
        "target": graph.name(target),
        "min_len": result.min_len if result.found else None,
        "paths": paths,
    }
