"""NetworkX graph conversion utilities.

Convert between NetworkX graphs and :class:`AdjacencyGraph`. Node names are
kept as the AdjacencyGraph's node names, so results can be mapped back by
``graph.name(idx)``.

Example:
    >>> import networkx as nx
    >>> from pathfinder.lib.nx import from_networkx, to_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", weight=10)
    >>> G.add_edge("B", "C", weight=5)
    >>>
    >>> graph = from_networkx(G)
    >>> graph.index("C")
    2
    >>> G_out = to_networkx(graph)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Union

from pathfinder.lib.graph import AdjacencyGraph

if TYPE_CHECKING:
    import networkx as nx

    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any


def from_networkx(
    G: NxGraph,
    *,
    weight_attr: str = "weight",
    default_weight: int = 1,
    sort_nodes: bool = False,
) -> AdjacencyGraph:
    """Convert a NetworkX graph to an AdjacencyGraph.

    Undirected graphs produce an edge in each direction. Parallel edges of a
    multigraph collapse to the smallest weight, since only the cheapest one
    can lie on a minimum-weight path.

    Args:
        G: NetworkX graph (DiGraph, MultiDiGraph, Graph, or MultiGraph)
        weight_attr: Edge attribute name for the weight (default: "weight")
        default_weight: Weight used when the attribute is missing (default: 1)
        sort_nodes: Index nodes in ``str`` order instead of G's node order.

    Returns:
        AdjacencyGraph whose node names are G's nodes.

    Raises:
        TypeError: If G is not a NetworkX graph
        ValueError: If an edge weight is negative or not an integer
    """
    import networkx as nx

    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph)):
        raise TypeError(
            f"Expected NetworkX graph (DiGraph, MultiDiGraph, Graph, MultiGraph), "
            f"got {type(G).__name__}"
        )

    node_names = list(G.nodes())
    if sort_nodes:
        node_names.sort(key=str)
    graph = AdjacencyGraph(node_names)

    for u, v, data in G.edges(data=True):
        raw = data.get(weight_attr, default_weight)
        try:
            weight = int(raw)
        except (TypeError, ValueError):
            raise ValueError(
                f"Edge {u!r} -> {v!r} has non-integer weight {raw!r}."
            ) from None
        if weight != raw:
            raise ValueError(f"Edge {u!r} -> {v!r} has non-integer weight {raw!r}.")

        src, dst = graph.index(u), graph.index(v)
        pairs = [(src, dst)] if G.is_directed() else [(src, dst), (dst, src)]
        for a, b in pairs:
            if not graph.has_edge(a, b) or weight < graph.weight(a, b):
                graph.add_edge(a, b, weight, overwrite=True)

    return graph


def to_networkx(graph: AdjacencyGraph, *, weight_attr: str = "weight") -> "nx.DiGraph":
    """Convert an AdjacencyGraph to a NetworkX DiGraph.

    Nodes keep their names and index order; each edge carries its weight
    under ``weight_attr``.
    """
    import networkx as nx

    G = nx.DiGraph()
    G.add_nodes_from(graph.names)
    for src, dst, weight in graph.edges():
        G.add_edge(graph.name(src), graph.name(dst), **{weight_attr: weight})
    return G
