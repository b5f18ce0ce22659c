from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, List, Optional, Set, Union

from pathfinder.lib.algorithms.base import INT_MAX
from pathfinder.lib.graph import AdjacencyGraph
from pathfinder.logging import get_logger

logger = get_logger(__name__)

_HEADER_RE = re.compile(r"^[0-9]+$")
_BRIDGE_RE = re.compile(r"^([A-Za-z]+)-([A-Za-z]+),([0-9]+)$")


class GraphFormatError(ValueError):
    """
    Raised when graph input text is malformed.

    Attributes:
        line: 1-based line number the problem was found on, if any.
    """

    def __init__(self, message: str, line: Optional[int] = None) -> None:
        super().__init__(message)
        self.line = line


def _split_lines(text: str) -> List[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.rstrip("\r") for line in lines]


def parse_islands(lines: Iterable[str]) -> AdjacencyGraph:
    """
    Build a graph from island-file lines.

    The first line holds the positive number of islands. Each following line is a
    bridge ``NAME1-NAME2,LENGTH``: two different alphabetic names and a
    positive length. Bridges are undirected and become an edge in each
    direction. Islands are indexed in order of first appearance.

    Checks run in this order and stop at the first failure: each line's
    syntax, the island count, duplicate bridges, then the total length.

    Args:
        lines: Lines of the file, without trailing newlines.

    Returns:
        A frozen AdjacencyGraph named by island.

    Raises:
        GraphFormatError: With the diagnostic for the first problem found.
    """
    lines = list(lines)
    if not lines or not _HEADER_RE.match(lines[0]) or int(lines[0]) <= 0:
        raise GraphFormatError("line 1 is not valid", line=1)
    expected = int(lines[0])

    order: Dict[str, int] = {}
    bridges = []
    for lineno, line in enumerate(lines[1:], start=2):
        match = _BRIDGE_RE.match(line)
        if not match:
            raise GraphFormatError(f"line {lineno} is not valid", line=lineno)
        src, dst, length = match.group(1), match.group(2), int(match.group(3))
        if src == dst or length <= 0:
            raise GraphFormatError(f"line {lineno} is not valid", line=lineno)
        for name in (src, dst):
            order.setdefault(name, len(order))
        bridges.append((src, dst, length))

    if len(order) != expected:
        raise GraphFormatError("invalid number of islands")

    seen: Set[FrozenSet[str]] = set()
    for src, dst, _ in bridges:
        key = frozenset((src, dst))
        if key in seen:
            raise GraphFormatError("duplicate bridges")
        seen.add(key)

    if sum(length for _, _, length in bridges) > INT_MAX:
        raise GraphFormatError("sum of bridges lengths is too big")

    graph = AdjacencyGraph(list(order))
    for src, dst, length in bridges:
        graph.add_edge(order[src], order[dst], length, bidirectional=True)

    logger.debug("Parsed %d island(s) and %d bridge(s)", len(order), len(bridges))
    return graph.freeze()


def load_islands(path: Union[str, Path]) -> AdjacencyGraph:
    """
    Read and parse an island file.

    Raises:
        GraphFormatError: If the file is missing, empty, or malformed.
    """
    path = Path(path)
    if not path.is_file():
        raise GraphFormatError(f"file {path} does not exist")
    text = path.read_text(encoding="utf-8")
    if not text:
        raise GraphFormatError(f"file {path} is empty")
    return parse_islands(_split_lines(text))


def edgelist_to_graph(
    lines: Iterable[str],
    separator: str = " ",
    directed: bool = True,
    graph: Optional[AdjacencyGraph] = None,
) -> AdjacencyGraph:
    """
    Builds or updates an AdjacencyGraph from ``src dst weight`` lines.

    Nodes are created on first appearance. Blank lines and lines starting
    with ``#`` are skipped. Repeating an edge keeps the smaller weight.

    Args:
        lines: An iterable of strings, each representing one edge.
        separator: Token separator (default is a space).
        directed: If False, each line also adds the reverse edge.
        graph: An existing graph to update; if None, a new graph is created.

    Returns:
        The updated (or newly created) AdjacencyGraph.

    Raises:
        GraphFormatError: If a line does not have three tokens or its weight
            is not a non-negative integer.
    """
    if graph is None:
        graph = AdjacencyGraph()

    for lineno, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        tokens = line.split(separator)
        if len(tokens) != 3 or not tokens[2].isdigit():
            raise GraphFormatError(
                f"line {lineno} is not valid: expected 'src{separator}dst{separator}weight'",
                line=lineno,
            )
        src_name, dst_name, weight = tokens[0], tokens[1], int(tokens[2])

        for name in (src_name, dst_name):
            if name not in graph:
                graph.add_node(name)
        src, dst = graph.index(src_name), graph.index(dst_name)

        pairs = [(src, dst)] if directed else [(src, dst), (dst, src)]
        for u, v in pairs:
            if not graph.has_edge(u, v) or weight < graph.weight(u, v):
                graph.add_edge(u, v, weight, overwrite=True)

    return graph


def graph_to_edgelist(graph: AdjacencyGraph, separator: str = " ") -> List[str]:
    """
    Converts an AdjacencyGraph into ``src dst weight`` lines using node names.

    Edges are listed in row-major index order.
    """
    return [
        separator.join((str(graph.name(src)), str(graph.name(dst)), str(weight)))
        for src, dst, weight in graph.edges()
    ]
