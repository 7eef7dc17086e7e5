import networkx as nx
import pytest

from graphwizard.centrality.hits import HITSResult, hits


def test_hits_star():
    g = nx.DiGraph([(1, 0), (2, 0), (3, 0)])
    result = hits(g, 1e-6)
    assert result.authority[0] > result.authority[1]
    assert result.hub[1] > result.hub[0]


def test_hits_two_sources():
    g = nx.DiGraph([(1, 0), (2, 0)])
    result = hits(g, 1e-6)
    assert result.authority[0] > result.authority[1]


def test_hits_star_exact_values():
    g = nx.DiGraph([(1, 0), (2, 0), (3, 0)])
    result = hits(g, 1e-9)
    assert result.authority[0] == pytest.approx(1.0)
    assert result.authority[1] == pytest.approx(0.0)
    assert result.hub[1] == pytest.approx(3 ** -0.5)
    assert result.hub[0] == pytest.approx(0.0)


def test_hits_scores_have_unit_length():
    g = nx.DiGraph([(0, 1), (1, 2), (2, 0), (0, 2), (3, 1)])
    result = hits(g, 1e-9)
    assert sum(v * v for v in result.authority.values()) == pytest.approx(1.0)
    assert sum(v * v for v in result.hub.values()) == pytest.approx(1.0)


def test_hits_empty_graph():
    assert hits(nx.DiGraph(), 1e-6) == HITSResult(hub={}, authority={})


def test_hits_no_edges_gives_zero_scores():
    g = nx.DiGraph()
    g.add_nodes_from([0, 1])
    result = hits(g, 1e-6)
    assert result.hub == {0: 0.0, 1: 0.0}
    assert result.authority == {0: 0.0, 1: 0.0}