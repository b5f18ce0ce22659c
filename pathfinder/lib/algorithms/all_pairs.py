from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple

from pathfinder.lib.algorithms.accumulator import PathAccumulator
from pathfinder.lib.algorithms.base import SearchMode
from pathfinder.lib.algorithms.search import search_rows
from pathfinder.lib.graph import AdjacencyGraph
from pathfinder.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class PairResult:
    """Minimum-weight paths for one (start, target) pair."""

    start: int
    target: int
    result: PathAccumulator


def iter_pairs(
    vertices: Sequence[int],
    ordered: bool = False,
) -> Iterator[Tuple[int, int]]:
    """
    Yield the (start, target) pairs to search, in list order.

    By default each vertex is paired with every vertex listed after it, so
    each unordered pair appears once. With ``ordered=True`` every ordered pair
    of distinct vertices is produced instead.
    """
    for pos, start in enumerate(vertices):
        targets = vertices if ordered else vertices[pos + 1 :]
        for target in targets:
            if target != start:
                yield start, target


def all_pairs_shortest_paths(
    graph: AdjacencyGraph,
    vertices: Optional[Sequence[int]] = None,
    ordered: bool = False,
    mode: SearchMode = SearchMode.AUTO,
) -> Iterator[PairResult]:
    """
    Search every pair from :func:`iter_pairs` and yield its result.

    Each pair gets its own search state and accumulator. Results are yielded
    as soon as they are computed, so a consumer can present and release one
    pair before the next is searched.

    Args:
        graph: The graph to search.
        vertices: Vertex indices to pair up; defaults to all, in index order.
        ordered: Search every ordered pair rather than each unordered pair once.
        mode: Engine selection passed to :func:`search_rows`.

    Yields:
        A PairResult per pair, including pairs with no path.
    """
    if vertices is None:
        vertices = range(graph.num_vertices)
    vertices = list(vertices)
    rows = graph.rows()

    searched = 0
    for start, target in iter_pairs(vertices, ordered=ordered):
        searched += 1
        yield PairResult(start, target, search_rows(rows, start, target, mode=mode))
    logger.debug("Searched %d vertex pair(s)", searched)
