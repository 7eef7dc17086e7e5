import random

import networkx as nx

from graphwizard.centrality.influence import influence_maximization


def _star(leaves, center=0, first_leaf=1):
    g = nx.Graph()
    g.add_edges_from((center, first_leaf + i) for i in range(leaves))
    return g


def test_star_picks_center():
    seeds, influence = influence_maximization(
        _star(5), 1, 0.5, 100, random.Random(42)
    )
    assert len(seeds) == 1
    assert seeds[0] == 0
    assert influence >= 2.0


def test_star_example_influence_above_one():
    seeds, influence = influence_maximization(
        _star(4), 1, 0.5, 200, random.Random(42)
    )
    assert seeds[0] == 0
    assert influence > 1.0


def test_multiple_seeds_two_stars():
    g = nx.compose(_star(3), _star(3, center=4, first_leaf=5))
    seeds, influence = influence_maximization(g, 2, 0.5, 100, random.Random(42))
    assert len(seeds) == 2
    assert len(set(seeds)) == 2
    assert influence >= 2.0


def test_empty_graph():
    seeds, influence = influence_maximization(
        nx.Graph(), 1, 0.5, 100, random.Random(42)
    )
    assert seeds == []
    assert influence == 0.0


def test_k_zero():
    g = nx.Graph()
    g.add_edge(0, 1)
    seeds, influence = influence_maximization(g, 0, 0.5, 100, random.Random(42))
    assert seeds == []
    assert influence == 0.0


def test_k_capped_at_node_count():
    g = nx.Graph()
    g.add_edge(0, 1)
    seeds, _ = influence_maximization(g, 5, 0.5, 20, random.Random(1))
    assert sorted(seeds) == [0, 1]


def test_zero_probability_spread_counts_seeds_only():
    seeds, influence = influence_maximization(
        _star(4), 3, 0.0, 10, random.Random(7)
    )
    assert len(seeds) == 3
    assert influence == 3.0