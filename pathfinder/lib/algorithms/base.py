from __future__ import annotations

from enum import IntEnum
from typing import Tuple, Union

#: Edge weights are non-negative integers.
Cost = int

#: Minimum weight of a pair before any path has been found.
INF = float("inf")

#: Adjacency-matrix entry meaning "no edge". Weights are never negative,
#: so the marker cannot be mistaken for a real weight.
NO_EDGE = -1

#: Largest total weight the island format accepts (a 32-bit signed int).
INT_MAX = 2**31 - 1

#: An immutable sequence of vertex indices, source first.
VertexPath = Tuple[int, ...]

#: A minimum that may still be unset.
MinCost = Union[Cost, float]


class SearchMode(IntEnum):
    """
    Depth-first engines for the minimum-weight path search.
    """

    #: Recursive for small graphs, iterative above the configured size.
    AUTO = 0
    #: One Python frame per path vertex.
    RECURSIVE = 1
    #: Explicit work-stack, same visiting order as RECURSIVE.
    ITERATIVE = 2
