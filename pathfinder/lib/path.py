"""Value object for a single minimum-weight route.

``Path`` keeps the vertex-index sequence together with its total cost and,
when built from a graph, the node names and per-edge weights needed to
present it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, Iterator, Sequence, Tuple

from pathfinder.lib.algorithms.base import Cost, VertexPath
from pathfinder.lib.graph import AdjacencyGraph, NodeName


@dataclass
class Path:
    """Represents a single path through an :class:`AdjacencyGraph`.

    Attributes:
        nodes: Vertex indices from source to destination.
        cost: Total weight of the path.
        names: Node names matching ``nodes`` (empty if unknown).
        weights: Weight of each edge, ``len(nodes) - 1`` entries (empty if unknown).
    """

    nodes: VertexPath
    cost: Cost
    names: Tuple[NodeName, ...] = field(default=(), compare=False)
    weights: Tuple[Cost, ...] = field(default=(), compare=False)

    @classmethod
    def from_vertices(cls, graph: AdjacencyGraph, vertices: Sequence[int]) -> Path:
        """Build a Path, reading names and edge weights from ``graph``.

        Raises:
            KeyError: If two consecutive vertices are not joined by an edge.
        """
        nodes = tuple(vertices)
        weights = tuple(graph.weight(u, v) for u, v in zip(nodes, nodes[1:]))
        return cls(
            nodes=nodes,
            cost=sum(weights),
            names=tuple(graph.name(v) for v in nodes),
            weights=weights,
        )

    def __getitem__(self, idx: int) -> int:
        return self.nodes[idx]

    def __iter__(self) -> Iterator[int]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def src_node(self) -> int:
        """Return the first node in the path (the source node)."""
        return self.nodes[0]

    @property
    def dst_node(self) -> int:
        """Return the last node in the path (the destination node)."""
        return self.nodes[-1]

    @cached_property
    def edges_seq(self) -> Tuple[Tuple[int, int], ...]:
        """Return the ``(src, dst)`` pairs traversed, in order."""
        return tuple(zip(self.nodes, self.nodes[1:]))

    @cached_property
    def nodes_seq(self) -> Tuple[NodeName, ...]:
        """Return node names when known, otherwise the vertex indices."""
        return self.names or self.nodes

    def __lt__(self, other: Any) -> bool:
        """Order paths by cost, then by vertex sequence."""
        if not isinstance(other, Path):
            return NotImplemented
        return (self.cost, self.nodes) < (other.cost, other.nodes)

    def __hash__(self) -> int:
        return hash((self.nodes, self.cost))

    def __repr__(self) -> str:
        return f"Path({self.nodes_seq}, cost={self.cost})"
