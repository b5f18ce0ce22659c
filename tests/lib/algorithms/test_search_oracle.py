"""Cross-check the branch-and-bound search against NetworkX enumeration."""

import random

import networkx as nx
import pytest

from pathfinder.lib.algorithms.base import SearchMode
from pathfinder.lib.algorithms.search import search
from pathfinder.lib.nx import from_networkx


def _random_digraph(seed: int, num_nodes: int, edge_prob: float) -> nx.DiGraph:
    rng = random.Random(seed)
    G = nx.DiGraph()
    G.add_nodes_from(range(num_nodes))
    for u in range(num_nodes):
        for v in range(num_nodes):
            if u != v and rng.random() < edge_prob:
                G.add_edge(u, v, weight=rng.randint(0, 4))
    return G


def _expected_min_paths(G: nx.DiGraph, src: int, dst: int):
    weighted = [
        (nx.path_weight(G, path, "weight"), tuple(path))
        for path in nx.all_simple_paths(G, src, dst)
    ]
    if not weighted:
        return None, []
    best = min(w for w, _ in weighted)
    return best, sorted(path for w, path in weighted if w == best)


@pytest.mark.parametrize("seed", range(12))
def test_matches_all_simple_paths(seed):
    G = _random_digraph(seed, num_nodes=6, edge_prob=0.45)
    graph = from_networkx(G)

    for src in G.nodes:
        for dst in G.nodes:
            if src == dst:
                continue
            best, expected = _expected_min_paths(G, src, dst)
            for mode in (SearchMode.RECURSIVE, SearchMode.ITERATIVE):
                result = search(graph, src, dst, mode=mode)
                if best is None:
                    assert result.paths == []
                    assert not result.found
                    continue
                assert result.min_len == best
                # ascending neighbor order discovers paths lexicographically
                assert result.paths == expected


@pytest.mark.parametrize("seed", range(4))
def test_engines_agree_on_denser_graphs(seed):
    G = _random_digraph(100 + seed, num_nodes=8, edge_prob=0.6)
    graph = from_networkx(G)
    for src in range(8):
        for dst in range(8):
            rec = search(graph, src, dst, mode=SearchMode.RECURSIVE)
            it = search(graph, src, dst, mode=SearchMode.ITERATIVE)
            assert rec.paths == it.paths
            assert rec.min_len == it.min_len
            for path in rec.paths:
                assert len(set(path)) == len(path)
