import random
from unittest.mock import patch

import networkx as nx
import pytest

from graphwizard.community.leiden import leiden
from graphwizard.community.leiden_parallel import leiden_parallel


def _same_partition(a, b):
    if len(a) != len(b):
        return False

    def canon(m):
        rep = {}
        for node, c in m.items():
            if c not in rep or node < rep[c]:
                rep[c] = node
        return {node: rep[c] for node, c in m.items()}

    return canon(a) == canon(b)


def _two_triangles():
    g = nx.Graph()
    g.add_edges_from([(0, 1), (1, 2), (2, 0), (3, 4), (4, 5), (5, 3), (2, 3)])
    return g


@pytest.fixture(scope="module")
def sbm_graph():
    rng = random.Random(1)
    blocks, per_block = 10, 100
    total = blocks * per_block
    g = nx.Graph()
    g.add_nodes_from(range(total))
    for i in range(total):
        for j in range(i + 1, total):
            p = 0.10 if i // per_block == j // per_block else 0.01
            if rng.random() < p:
                g.add_edge(i, j)
    return g


def test_two_cliques():
    g = nx.Graph()
    g.add_edges_from((i, j) for i in range(4) for j in range(i + 1, 4))
    g.add_edges_from((i, j) for i in range(4, 8) for j in range(i + 1, 8))
    g.add_edge(3, 4)
    result = leiden_parallel(g, 1.0, random.Random(42))
    assert len(result) == 8
    assert all(result[i] == result[0] for i in range(1, 4))
    assert all(result[i] == result[4] for i in range(5, 8))


def test_empty():
    assert leiden_parallel(nx.Graph(), 1.0, random.Random(1)) == {}


def test_single_node():
    g = nx.Graph()
    g.add_node(0)
    assert leiden_parallel(g, 1.0, random.Random(1)) == {0: 0}


def test_example_two_triangles():
    comms = leiden_parallel(_two_triangles(), 1.0, random.Random(42))
    assert comms[0] == comms[1]
    assert comms[0] != comms[3]


def test_matches_serial_small():
    g = _two_triangles()
    assert leiden_parallel(g, 1.0, random.Random(42)) == leiden(
        g, 1.0, random.Random(42)
    )


def test_deterministic(sbm_graph):
    first = leiden_parallel(sbm_graph, 1.0, random.Random(42))
    for _ in range(3):
        assert leiden_parallel(sbm_graph, 1.0, random.Random(42)) == first


def test_matches_serial(sbm_graph):
    serial = leiden(sbm_graph, 1.0, random.Random(42))
    parallel = leiden_parallel(sbm_graph, 1.0, random.Random(42))
    assert serial == parallel
    assert _same_partition(serial, parallel)


@pytest.mark.parametrize("cpus", [2, 4, 8])
def test_worker_count_does_not_change_result(sbm_graph, cpus):
    with patch("os.cpu_count", return_value=1):
        reference = leiden_parallel(sbm_graph, 1.0, random.Random(42))
    with patch("os.cpu_count", return_value=cpus):
        got = leiden_parallel(sbm_graph, 1.0, random.Random(42))
    assert got == reference