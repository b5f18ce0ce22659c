from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, List, Optional

from pathfinder.config import SEARCH_CONFIG, SearchConfig
from pathfinder.lib.algorithms.accumulator import PathAccumulator
from pathfinder.lib.algorithms.base import NO_EDGE, Cost, SearchMode
from pathfinder.lib.graph import AdjacencyGraph
from pathfinder.lib.path import Path
from pathfinder.logging import get_logger

logger = get_logger(__name__)


class SearchState:
    """
    Mutable buffers of one search call: the path being built, the vertices on
    it, and its running weight.

    ``visited[v]`` is True iff ``v`` is in ``path``, and ``weight`` is the sum
    of the edges along ``path``. :meth:`push` and :meth:`pop` are exact
    inverses; :meth:`enter` pairs them so every exit restores the state.
    """

    def __init__(self, num_vertices: int) -> None:
        self.visited: List[bool] = [False] * num_vertices
        self.path: List[int] = []
        self.weight: Cost = 0
        self.expansions = 0
        self._edge_weights: List[Cost] = []

    def push(self, vertex: int, edge_weight: Cost = 0) -> None:
        """Step onto ``vertex`` over an edge of ``edge_weight``."""
        self.weight += edge_weight
        self._edge_weights.append(edge_weight)
        self.visited[vertex] = True
        self.path.append(vertex)
        self.expansions += 1

    def pop(self) -> int:
        """Undo the last :meth:`push` and return the vertex left."""
        vertex = self.path.pop()
        self.visited[vertex] = False
        self.weight -= self._edge_weights.pop()
        return vertex

    @contextmanager
    def enter(self, vertex: int, edge_weight: Cost = 0) -> Iterator[None]:
        """Hold ``vertex`` on the path for the duration of the block."""
        self.push(vertex, edge_weight)
        try:
            yield
        finally:
            self.pop()

    @property
    def depth(self) -> int:
        return len(self.path)

    def is_clean(self) -> bool:
        """True when nothing is on the path (depth zero)."""
        return not self.path and self.weight == 0 and not any(self.visited)


def _search_recursive(
    rows: List[List[int]],
    vertex: int,
    target: int,
    state: SearchState,
    paths: PathAccumulator,
    edge_weight: Cost = 0,
) -> None:
    with state.enter(vertex, edge_weight):
        if vertex == target:
            paths.record(state.path, state.weight)
            return

        visited = state.visited
        for nbr, weight in enumerate(rows[vertex]):
            # min_len may shrink during earlier siblings, so re-read it each time
            if (
                weight != NO_EDGE
                and not visited[nbr]
                and state.weight + weight <= paths.min_len
            ):
                _search_recursive(rows, nbr, target, state, paths, weight)


def _search_iterative(
    rows: List[List[int]],
    start: int,
    target: int,
    state: SearchState,
    paths: PathAccumulator,
) -> None:
    """
    Work-stack version of :func:`_search_recursive`.

    Each frame is ``[vertex, next_neighbor]``. Neighbors are scanned in the
    same order and the bound is checked at the same moments as the recursive
    engine, so both discover paths in the same order.
    """
    num_vertices = len(rows)
    state.push(start)
    if start == target:
        paths.record(state.path, state.weight)
        state.pop()
        return

    visited = state.visited
    stack: List[List[int]] = [[start, 0]]
    while stack:
        frame = stack[-1]
        row = rows[frame[0]]
        nbr = frame[1]
        while nbr < num_vertices:
            weight = row[nbr]
            if (
                weight != NO_EDGE
                and not visited[nbr]
                and state.weight + weight <= paths.min_len
            ):
                break
            nbr += 1

        if nbr == num_vertices:
            # neighbors exhausted, backtrack
            stack.pop()
            state.pop()
            continue

        frame[1] = nbr + 1
        state.push(nbr, weight)
        if nbr == target:
            paths.record(state.path, state.weight)
            state.pop()
        else:
            stack.append([nbr, 0])


def search(
    graph: AdjacencyGraph,
    start: int,
    target: int,
    mode: SearchMode = SearchMode.AUTO,
    config: Optional[SearchConfig] = None,
) -> PathAccumulator:
    """
    Find every minimum-weight simple path from ``start`` to ``target``.

    Depth-first branch-and-bound over ``graph``: a neighbor is entered only
    if it is not already on the path and the running weight plus the edge
    weight does not exceed the best complete weight found so far. Equality
    is allowed so ties are enumerated. A cheaper path found later discards
    the ones recorded before it. Branches already entered are not aborted
    when the bound tightens; they fail the check at their next extension.

    Args:
        graph: The graph to search. It is read once and never modified.
        start: Source vertex index.
        target: Destination vertex index.
        mode: Engine selection; AUTO picks by graph size using ``config``.
        config: Search tunables; defaults to the global ``SEARCH_CONFIG``.

    Returns:
        A fresh PathAccumulator holding all minimum-weight paths in discovery
        order. If no path exists its ``paths`` is empty and ``min_len`` is
        ``INF``. ``search(g, v, v)`` yields the single path ``(v,)`` of weight 0.

    Raises:
        IndexError: If ``start`` or ``target`` is not a vertex index.
        MemoryError: If storing a path fails; the search is abandoned.
    """
    return search_rows(graph.rows(), start, target, mode=mode, config=config)


def search_rows(
    rows: List[List[int]],
    start: int,
    target: int,
    mode: SearchMode = SearchMode.AUTO,
    config: Optional[SearchConfig] = None,
) -> PathAccumulator:
    """
    Same as :func:`search`, over a matrix already converted by
    :meth:`AdjacencyGraph.rows`. Lets a sweep over many pairs convert once.
    """
    num_vertices = len(rows)
    for label, idx in (("start", start), ("target", target)):
        if not 0 <= idx < num_vertices:
            raise IndexError(
                f"{label} vertex {idx} out of range for a graph of {num_vertices} vertices."
            )

    config = config or SEARCH_CONFIG
    if mode == SearchMode.AUTO:
        mode = config.choose_mode(num_vertices)

    state = SearchState(num_vertices)
    paths = PathAccumulator()

    logger.debug("Searching %s -> %s (%s)", start, target, mode.name)
    if mode == SearchMode.ITERATIVE:
        _search_iterative(rows, start, target, state, paths)
    else:
        _search_recursive(rows, start, target, state, paths)

    logger.debug(
        "Search %s -> %s done: %d path(s) of weight %s after %d expansions",
        start,
        target,
        len(paths),
        paths.min_len,
        state.expansions,
    )
    return paths


def find_all_shortest_paths(
    graph: AdjacencyGraph,
    start: int,
    target: int,
    mode: SearchMode = SearchMode.AUTO,
) -> List[Path]:
    """
    Run :func:`search` and wrap each result in a :class:`Path`.

    Returns:
        Paths in discovery order; empty if ``target`` is unreachable.
    """
    result = search(graph, start, target, mode=mode)
    return [Path.from_vertices(graph, vertices) for vertices in result]
