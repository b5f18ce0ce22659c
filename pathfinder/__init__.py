"""pathfinder: every minimum-weight simple path between graph vertices.

For a pair of vertices in a weighted directed graph, pathfinder returns all
simple paths whose total weight equals the minimum for that pair, using a
depth-first branch-and-bound search.

Primary API:
    search() - All minimum-weight paths for one (start, target) pair
    all_pairs_shortest_paths() - The same, for every pair of vertices
    AdjacencyGraph - Square weight-matrix graph the search runs on
    load_islands() - Read the island/bridge text format

Example:
    from pathfinder import AdjacencyGraph, search

    g = AdjacencyGraph(["A", "B", "C"])
    g.add_edge(0, 1, 1)
    g.add_edge(1, 2, 1)
    g.add_edge(0, 2, 5)

    result = search(g, 0, 2)
    result.paths    # [(0, 1, 2)]
    result.min_len  # 2
"""

from __future__ import annotations

from pathfinder import cli, logging
from pathfinder._version import __version__
from pathfinder.config import SEARCH_CONFIG, SearchConfig
from pathfinder.lib.algorithms.accumulator import PathAccumulator
from pathfinder.lib.algorithms.all_pairs import PairResult, all_pairs_shortest_paths
from pathfinder.lib.algorithms.base import INF, NO_EDGE, SearchMode
from pathfinder.lib.algorithms.search import find_all_shortest_paths, search
from pathfinder.lib.graph import AdjacencyGraph
from pathfinder.lib.io import GraphFormatError, load_islands, parse_islands
from pathfinder.lib.nx import from_networkx, to_networkx
from pathfinder.lib.path import Path

__all__ = [
    # Version
    "__version__",
    # Graph
    "AdjacencyGraph",
    "NO_EDGE",
    "Path",
    # Search (primary API)
    "search",
    "find_all_shortest_paths",
    "all_pairs_shortest_paths",
    "PairResult",
    "PathAccumulator",
    "SearchMode",
    "INF",
    # Configuration
    "SearchConfig",
    "SEARCH_CONFIG",
    # Input
    "GraphFormatError",
    "load_islands",
    "parse_islands",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
