"""Graph storage, path search, and input/output for pathfinder."""

from pathfinder.lib.graph import AdjacencyGraph
from pathfinder.lib.nx import from_networkx, to_networkx

__all__ = [
    "AdjacencyGraph",
    "from_networkx",
    "to_networkx",
]
