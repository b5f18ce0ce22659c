from __future__ import annotations

from typing import Any, Dict, Hashable, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from pathfinder.lib.algorithms.base import NO_EDGE, Cost

NodeName = Hashable
EdgeTuple = Tuple[int, int, Cost]


class AdjacencyGraph:
    """
    A weighted directed graph stored as a square adjacency matrix.

    Entry ``(i, j)`` of the matrix holds the weight of the edge ``i -> j`` or
    ``NO_EDGE`` when there is none. Vertices are addressed by integer index;
    each index also has a name, kept in insertion order.

    This class enforces:
      - No duplicate node names (raising ValueError on duplicates).
      - No negative edge weights.
      - No silent replacement of an existing edge unless ``overwrite=True``.
      - No structural changes after :meth:`freeze`.
    """

    def __init__(self, names: Optional[Sequence[NodeName]] = None) -> None:
        """
        Initialize an AdjacencyGraph.

        Args:
            names: Optional node names to create up front, in index order.

        Attributes:
            matrix (np.ndarray): ``(V, V)`` int64 weights, ``NO_EDGE`` for absent edges.
        """
        self._names: List[NodeName] = []
        self._index: Dict[NodeName, int] = {}
        for name in names or ():
            if name in self._index:
                raise ValueError(f"Node '{name}' already exists in this graph.")
            self._index[name] = len(self._names)
            self._names.append(name)

        size = len(self._names)
        self.matrix: np.ndarray = np.full((size, size), NO_EDGE, dtype=np.int64)

    @classmethod
    def from_matrix(
        cls,
        matrix: Any,
        names: Optional[Sequence[NodeName]] = None,
    ) -> AdjacencyGraph:
        """
        Build a graph from a square weight matrix.

        Args:
            matrix: Nested lists or a 2-D array. ``None`` and ``NO_EDGE``
                entries mean "no edge".
            names: Node names in index order; defaults to ``0..V-1``.

        Returns:
            A new AdjacencyGraph.

        Raises:
            ValueError: If the matrix is not square, the names do not match
                its size, or a weight is negative.
        """
        rows = [list(row) for row in matrix]
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise ValueError("Adjacency matrix must be square.")
        if names is None:
            names = list(range(size))
        if len(names) != size:
            raise ValueError(
                f"Got {len(names)} node names for a {size}x{size} matrix."
            )

        graph = cls(names)
        for i, row in enumerate(rows):
            for j, value in enumerate(row):
                if value is None or value == NO_EDGE:
                    continue
                graph.add_edge(i, j, int(value))
        return graph

    #
    # Node management
    #
    def add_node(self, name: NodeName) -> int:
        """
        Add a node and return its index.

        Raises:
            ValueError: If the node already exists or the graph is frozen.
        """
        self._check_mutable()
        if name in self._index:
            raise ValueError(f"Node '{name}' already exists in this graph.")

        idx = len(self._names)
        grown = np.full((idx + 1, idx + 1), NO_EDGE, dtype=np.int64)
        grown[:idx, :idx] = self.matrix
        self.matrix = grown
        self._names.append(name)
        self._index[name] = idx
        return idx

    def index(self, name: NodeName) -> int:
        """
        Return the index of a node by name.

        Raises:
            KeyError: If no node has this name.
        """
        try:
            return self._index[name]
        except KeyError:
            raise KeyError(f"Node '{name}' is not in the graph.") from None

    def name(self, idx: int) -> NodeName:
        """Return the name of the node at ``idx``."""
        self._check_index(idx)
        return self._names[idx]

    @property
    def names(self) -> Tuple[NodeName, ...]:
        return tuple(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __len__(self) -> int:
        return len(self._names)

    @property
    def num_vertices(self) -> int:
        return len(self._names)

    #
    # Edge management
    #
    def add_edge(
        self,
        src: int,
        dst: int,
        weight: Cost,
        bidirectional: bool = False,
        overwrite: bool = False,
    ) -> None:
        """
        Add the edge ``src -> dst`` (and ``dst -> src`` if bidirectional).

        Args:
            src: Source node index.
            dst: Target node index.
            weight: Non-negative integer weight.
            bidirectional: Also add the reverse edge with the same weight.
            overwrite: Replace an existing edge instead of raising.

        Raises:
            ValueError: On a negative weight, an existing edge without
                ``overwrite``, or a frozen graph.
            IndexError: If either index is out of range.
        """
        self._check_mutable()
        self._check_index(src)
        self._check_index(dst)
        if weight < 0:
            raise ValueError(f"Edge weight must be non-negative, got {weight}.")

        pairs = [(src, dst)]
        if bidirectional and src != dst:
            pairs.append((dst, src))
        if not overwrite:
            for u, v in pairs:
                if self.matrix[u, v] != NO_EDGE:
                    raise ValueError(
                        f"Edge '{self._names[u]}' -> '{self._names[v]}' already exists."
                    )
        for u, v in pairs:
            self.matrix[u, v] = weight

    def has_edge(self, src: int, dst: int) -> bool:
        self._check_index(src)
        self._check_index(dst)
        return bool(self.matrix[src, dst] != NO_EDGE)

    def weight(self, src: int, dst: int) -> Cost:
        """
        Return the weight of ``src -> dst``.

        Raises:
            KeyError: If the edge does not exist.
        """
        self._check_index(src)
        self._check_index(dst)
        value = int(self.matrix[src, dst])
        if value == NO_EDGE:
            raise KeyError(
                f"No edge '{self._names[src]}' -> '{self._names[dst]}'."
            )
        return value

    def neighbors(self, idx: int) -> List[int]:
        """Return the successors of ``idx`` in ascending index order."""
        self._check_index(idx)
        return [int(j) for j in np.flatnonzero(self.matrix[idx] != NO_EDGE)]

    def edges(self) -> Iterator[EdgeTuple]:
        """Yield ``(src, dst, weight)`` for every edge in row-major order."""
        for src, dst in zip(*np.nonzero(self.matrix != NO_EDGE)):
            yield int(src), int(dst), int(self.matrix[src, dst])

    @property
    def num_edges(self) -> int:
        return int(np.count_nonzero(self.matrix != NO_EDGE))

    @property
    def total_weight(self) -> int:
        """Sum of all edge weights."""
        return int(self.matrix[self.matrix != NO_EDGE].sum())

    def rows(self) -> List[List[int]]:
        """Return the matrix as plain Python lists of ints."""
        return self.matrix.tolist()

    #
    # Immutability
    #
    def freeze(self) -> AdjacencyGraph:
        """Make the graph read-only and return it."""
        self.matrix.flags.writeable = False
        return self

    @property
    def frozen(self) -> bool:
        return not self.matrix.flags.writeable

    def _check_mutable(self) -> None:
        if self.frozen:
            raise ValueError("Graph is frozen and cannot be modified.")

    def _check_index(self, idx: int) -> None:
        if not 0 <= idx < len(self._names):
            raise IndexError(
                f"Vertex index {idx} out of range for a graph of {len(self._names)} vertices."
            )

    def __repr__(self) -> str:
        return f"AdjacencyGraph(vertices={self.num_vertices}, edges={self.num_edges})"
