from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Sequence

from pathfinder.lib.algorithms.base import INF, Cost, MinCost, VertexPath
from pathfinder.logging import get_logger

logger = get_logger(__name__)


@dataclass
class PathAccumulator:
    """
    The set of minimum-weight paths found so far for one (start, target) pair.

    Every stored path has weight exactly ``min_len``. Recording a strictly
    cheaper path drops all stored paths first, so the collection never mixes
    weights.

    Attributes:
        min_len: Weight shared by all stored paths; ``INF`` until the first
            path is recorded.
        paths: Stored vertex paths in discovery order.

    Note:
        A zero-weight path leaves ``min_len == 0``, which is falsy. Test
        :attr:`found` (or ``paths``) to tell "no path" apart from it.
    """

    min_len: MinCost = INF
    paths: List[VertexPath] = field(default_factory=list)

    def reset(self) -> None:
        """Forget every path and return to the unset minimum."""
        self.min_len = INF
        self.paths = []

    def record(self, path: Sequence[int], weight: Cost) -> bool:
        """
        Offer a completed path.

        A cheaper path replaces everything stored, a tie is appended, and a
        more expensive path is ignored. The path is copied, so the caller may
        keep mutating its buffer.

        Args:
            path: Vertex indices from start to target.
            weight: Total weight of ``path``.

        Returns:
            True if the path was stored.
        """
        if weight < self.min_len:
            if self.paths:
                logger.debug(
                    "Weight %s beats %s; discarding %d path(s)",
                    weight,
                    self.min_len,
                    len(self.paths),
                )
            self.paths = [tuple(path)]
            self.min_len = weight
            return True
        if weight == self.min_len:
            self.paths.append(tuple(path))
            return True
        return False

    @property
    def found(self) -> bool:
        """True once at least one path has been recorded."""
        return bool(self.paths)

    def __len__(self) -> int:
        return len(self.paths)

    def __iter__(self) -> Iterator[VertexPath]:
        return iter(self.paths)
