import numpy as np
import pytest

from pathfinder.lib.algorithms.base import NO_EDGE
from pathfinder.lib.graph import AdjacencyGraph


def test_empty_graph():
    g = AdjacencyGraph()
    assert g.num_vertices == 0
    assert g.num_edges == 0
    assert g.matrix.shape == (0, 0)


def test_add_node_grows_matrix():
    g = AdjacencyGraph(["A"])
    g.add_edge(0, 0, 3)
    idx = g.add_node("B")
    assert idx == 1
    assert g.matrix.shape == (2, 2)
    assert g.weight(0, 0) == 3
    assert not g.has_edge(0, 1)
    assert g.names == ("A", "B")


def test_duplicate_node_raises():
    with pytest.raises(ValueError, match="already exists"):
        AdjacencyGraph(["A", "A"])
    g = AdjacencyGraph(["A"])
    with pytest.raises(ValueError):
        g.add_node("A")


def test_index_and_name():
    g = AdjacencyGraph(["X", "Y"])
    assert g.index("Y") == 1
    assert g.name(0) == "X"
    assert "X" in g and "Z" not in g
    with pytest.raises(KeyError):
        g.index("Z")
    with pytest.raises(IndexError):
        g.name(2)


def test_add_edge_directed_and_bidirectional():
    g = AdjacencyGraph(["A", "B", "C"])
    g.add_edge(0, 1, 4)
    g.add_edge(1, 2, 2, bidirectional=True)
    assert g.weight(0, 1) == 4
    assert not g.has_edge(1, 0)
    assert g.weight(1, 2) == g.weight(2, 1) == 2
    assert g.num_edges == 3
    assert g.total_weight == 8
    assert list(g.edges()) == [(0, 1, 4), (1, 2, 2), (2, 1, 2)]


def test_add_edge_rejects_negative_weight():
    g = AdjacencyGraph(["A", "B"])
    with pytest.raises(ValueError, match="non-negative"):
        g.add_edge(0, 1, -1)


def test_add_edge_existing_needs_overwrite():
    g = AdjacencyGraph(["A", "B"])
    g.add_edge(0, 1, 4)
    with pytest.raises(ValueError, match="already exists"):
        g.add_edge(0, 1, 2)
    g.add_edge(0, 1, 2, overwrite=True)
    assert g.weight(0, 1) == 2


def test_add_edge_unknown_vertex():
    g = AdjacencyGraph(["A"])
    with pytest.raises(IndexError):
        g.add_edge(0, 1, 1)


def test_weight_missing_edge_raises():
    g = AdjacencyGraph(["A", "B"])
    with pytest.raises(KeyError):
        g.weight(0, 1)


def test_neighbors_ascending():
    g = AdjacencyGraph(range(4))
    g.add_edge(0, 3, 1)
    g.add_edge(0, 1, 1)
    g.add_edge(0, 2, 0)
    assert g.neighbors(0) == [1, 2, 3]
    assert g.neighbors(3) == []


def test_freeze():
    g = AdjacencyGraph(["A", "B"])
    assert g.freeze() is g
    assert g.frozen
    with pytest.raises(ValueError, match="frozen"):
        g.add_edge(0, 1, 1)
    with pytest.raises(ValueError, match="frozen"):
        g.add_node("C")


def test_from_matrix_lists():
    g = AdjacencyGraph.from_matrix(
        [[None, 1, NO_EDGE], [0, None, 7], [None, None, None]], names="abc"
    )
    assert g.names == ("a", "b", "c")
    assert list(g.edges()) == [(0, 1, 1), (1, 0, 0), (1, 2, 7)]


def test_from_matrix_numpy():
    m = np.array([[NO_EDGE, 2], [NO_EDGE, NO_EDGE]])
    g = AdjacencyGraph.from_matrix(m)
    assert g.names == (0, 1)
    assert g.weight(0, 1) == 2
    assert g.num_edges == 1


@pytest.mark.parametrize(
    "matrix,names",
    [
        ([[None, 1]], None),
        ([[None]], ["a", "b"]),
        ([[-5]], None),
    ],
)
def test_from_matrix_invalid(matrix, names):
    with pytest.raises(ValueError):
        AdjacencyGraph.from_matrix(matrix, names)


def test_rows_are_python_ints():
    g = AdjacencyGraph.from_matrix([[None, 3], [None, None]])
    rows = g.rows()
    assert rows == [[NO_EDGE, 3], [NO_EDGE, NO_EDGE]]
    assert type(rows[0][1]) is int


def test_repr():
    g = AdjacencyGraph.from_matrix([[None, 3], [None, None]])
    assert repr(g) == "AdjacencyGraph(vertices=2, edges=1)"
