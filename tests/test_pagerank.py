import networkx as nx
import pytest

from graphwizard.centrality.pagerank import (
    page_rank,
    page_rank_sparse,
    personalized_page_rank,
    personalized_page_rank_undirected,
)


def _cycle():
    return nx.DiGraph([(0, 1), (1, 2), (2, 0)])


def test_page_rank_cycle_equal():
    scores = page_rank(_cycle(), 0.85, 1e-6)
    assert len(scores) == 3
    assert scores[0] == pytest.approx(scores[1], abs=1e-6)
    assert scores[1] == pytest.approx(scores[2], abs=1e-6)
    assert round(scores[0], 4) == 0.3333


def test_page_rank_sparse_cycle():
    scores = page_rank_sparse(_cycle(), 0.85, 1e-6)
    assert len(scores) == 3
    assert round(scores[0], 4) == 0.3333


def test_page_rank_dense_and_sparse_agree_with_dangling_node():
    g = nx.DiGraph([(0, 1), (0, 2), (1, 2), (3, 0)])
    dense = page_rank(g, 0.85, 1e-12)
    sparse = page_rank_sparse(g, 0.85, 1e-12)
    assert set(dense) == set(sparse)
    for node, value in dense.items():
        assert sparse[node] == pytest.approx(value, abs=1e-8)
    assert sum(dense.values()) == pytest.approx(1.0)
    assert dense[2] > dense[3]


def test_page_rank_empty():
    assert page_rank(nx.DiGraph(), 0.85, 1e-6) == {}
    assert page_rank_sparse(nx.DiGraph(), 0.85, 1e-6) == {}


def test_ppr_star_seed_highest():
    g = nx.DiGraph([(0, 1), (0, 2), (0, 3), (1, 0), (2, 0), (3, 0)])
    scores = personalized_page_rank(g, 0, 0.85, 1e-6, 100)
    assert scores[0] > scores[1]


def test_ppr_empty():
    assert personalized_page_rank(nx.DiGraph(), 0, 0.85, 1e-6, 100) == {}


def test_ppr_missing_seed():
    g = nx.DiGraph()
    g.add_node(0)
    assert personalized_page_rank(g, 99, 0.85, 1e-6, 100) == {}


def test_ppr_seed_beats_far_node():
    g = nx.DiGraph([(0, 1), (1, 0), (1, 2), (2, 1)])
    scores = personalized_page_rank(g, 0, 0.85, 1e-6, 100)
    assert scores[0] > scores[2]


def test_ppr_mass_is_conserved():
    g = nx.DiGraph([(0, 1), (1, 2), (2, 3)])
    scores = personalized_page_rank(g, 0, 0.85, 1e-9, 500)
    assert sum(scores.values()) == pytest.approx(1.0)


def test_ppr_zero_iterations_keeps_initial_mass():
    g = nx.DiGraph([(0, 1)])
    assert personalized_page_rank(g, 0, 0.85, 1e-6, 0) == {0: 1.0, 1: 0.0}


def test_ppr_undirected_chain():
    g = nx.Graph([(0, 1), (1, 2), (2, 3)])
    scores = personalized_page_rank_undirected(g, 0, 0.85, 1e-6, 100)
    assert scores[3] < scores[0]
    assert scores[3] < scores[1]


def test_ppr_undirected_seed_beats_far_node():
    g = nx.Graph([(0, 1), (1, 2)])
    scores = personalized_page_rank_undirected(g, 0, 0.85, 1e-6, 100)
    assert scores[0] > scores[2]


def test_ppr_undirected_empty():
    assert personalized_page_rank_undirected(nx.Graph(), 0, 0.85, 1e-6, 100) == {}


def test_ppr_undirected_missing_seed():
    g = nx.Graph()
    g.add_node(0)
    assert personalized_page_rank_undirected(g, 99, 0.85, 1e-6, 100) == {}