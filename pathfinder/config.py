"""Configuration for the path search engines."""

from dataclasses import dataclass

from pathfinder.lib.algorithms.base import SearchMode


@dataclass
class SearchConfig:
    """Tunables for :func:`pathfinder.lib.algorithms.search.search`."""

    # Largest vertex count searched with true recursion when mode is AUTO.
    # Recursion depth is bounded by the vertex count, so this keeps the
    # interpreter well under its default recursion limit.
    max_recursive_vertices: int = 500

    def choose_mode(self, num_vertices: int) -> SearchMode:
        """Pick the engine for a graph of ``num_vertices`` vertices."""
        if num_vertices > self.max_recursive_vertices:
            return SearchMode.ITERATIVE
        return SearchMode.RECURSIVE


# Global configuration instance
SEARCH_CONFIG = SearchConfig()
