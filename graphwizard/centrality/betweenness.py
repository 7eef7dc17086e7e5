"""Shortest-path betweenness, closeness and harmonic centrality.

Betweenness sums, over every ordered pair of distinct nodes ``(s, t)``, the
fraction of shortest ``s``-``t`` paths that pass through a node or edge.
Undirected graphs therefore count each unordered pair twice.  Weighted
variants read edge weights from the ``weight`` attribute, defaulting to 1.
"""

from __future__ import annotations

import heapq
import itertools
import math
import os
import random
from collections import deque
from collections.abc import Callable, Hashable
from concurrent.futures import ThreadPoolExecutor

import networkx as nx

__all__ = [
    "betweenness",
    "betweenness_weighted",
    "edge_betweenness",
    "edge_betweenness_weighted",
    "closeness",
    "harmonic",
    "approximate_betweenness",
]

_EQUAL_TOLERANCE = 1e-10

_Dag = tuple[list[Hashable], dict[Hashable, list[Hashable]], dict[Hashable, float]]


def _bfs_dag(graph: nx.Graph, source: Hashable) -> _Dag:
    """Return visit order, shortest-path predecessors and path counts (hops)."""
    order: list[Hashable] = []
    preds: dict[Hashable, list[Hashable]] = {source: []}
    sigma: dict[Hashable, float] = {source: 1.0}
    dist: dict[Hashable, int] = {source: 0}
    queue = deque([source])
    while queue:
        v = queue.popleft()
        order.append(v)
        for w in graph.adj[v]:
            if w not in dist:
                dist[w] = dist[v] + 1
                sigma[w] = 0.0
                preds[w] = []
                queue.append(w)
            if dist[w] == dist[v] + 1:
                sigma[w] += sigma[v]
                preds[w].append(v)
    return order, preds, sigma


def _dijkstra_dag(graph: nx.Graph, source: Hashable) -> _Dag:
    """Return settle order, shortest-path predecessors and path counts (weighted)."""
    dist: dict[Hashable, float] = {source: 0.0}
    sigma: dict[Hashable, float] = {source: 1.0}
    preds: dict[Hashable, list[Hashable]] = {source: []}
    counter = itertools.count(1)
    heap: list[tuple[float, int, Hashable]] = [(0.0, 0, source)]
    settled: set[Hashable] = set()
    order: list[Hashable] = []
    while heap:
        _, _, v = heapq.heappop(heap)
        if v in settled:
            continue
        settled.add(v)
        order.append(v)
        for w, attrs in graph.adj[v].items():
            candidate = dist[v] + float(attrs.get("weight", 1.0))
            known = dist.get(w)
            if known is None or (
                candidate < known and abs(candidate - known) >= _EQUAL_TOLERANCE
            ):
                dist[w] = candidate
                sigma[w] = sigma[v]
                preds[w] = [v]
                heapq.heappush(heap, (candidate, next(counter), w))
            elif abs(candidate - known) < _EQUAL_TOLERANCE:
                sigma[w] += sigma[v]
                preds[w].append(v)
    return order, preds, sigma


def _accumulate(
    dag: _Dag,
    on_edge: Callable[[Hashable, Hashable, float], None] | None = None,
) -> dict[Hashable, float]:
    """Back-propagate dependencies through the shortest-path DAG."""
    order, preds, sigma = dag
    delta = dict.fromkeys(order, 0.0)
    for w in reversed(order):
        for v in preds[w]:
            contribution = sigma[v] / sigma[w] * (1.0 + delta[w])
            delta[v] += contribution
            if on_edge is not None:
                on_edge(v, w, contribution)
    return delta


def _dag_builder(weighted: bool) -> Callable[[nx.Graph, Hashable], _Dag]:
    return _dijkstra_dag if weighted else _bfs_dag


def _node_betweenness(graph: nx.Graph, weighted: bool) -> dict[Hashable, float]:
    build = _dag_builder(weighted)
    scores = dict.fromkeys(graph, 0.0)
    for source in graph:
        delta = _accumulate(build(graph, source))
        for node, value in delta.items():
            if node != source:
                scores[node] += value
    return scores


def _edge_betweenness(
    graph: nx.Graph, weighted: bool
) -> dict[tuple[Hashable, Hashable], float]:
    build = _dag_builder(weighted)
    canonical: dict[tuple[Hashable, Hashable], tuple[Hashable, Hashable]] = {}
    if not graph.is_directed():
        for u, v in graph.edges():
            canonical[(u, v)] = (u, v)
            canonical[(v, u)] = (u, v)

    scores: dict[tuple[Hashable, Hashable], float] = {}

    def record(v: Hashable, w: Hashable, contribution: float) -> None:
        key = canonical.get((v, w), (v, w))
        scores[key] = scores.get(key, 0.0) + contribution

    for source in graph:
        _accumulate(build(graph, source), record)
    return scores


def betweenness(graph: nx.Graph) -> dict[Hashable, float]:
    """Return unweighted betweenness centrality for every node."""
    return _node_betweenness(graph, weighted=False)


def betweenness_weighted(graph: nx.Graph) -> dict[Hashable, float]:
    """Return betweenness centrality along weighted shortest paths."""
    return _node_betweenness(graph, weighted=True)


def edge_betweenness(graph: nx.Graph) -> dict[tuple[Hashable, Hashable], float]:
    """Return unweighted betweenness for every edge on a shortest path.

    Keys are ``(u, v)`` pairs; undirected edges appear once, in the
    orientation the graph reports them.
    """
    return _edge_betweenness(graph, weighted=False)


def edge_betweenness_weighted(
    graph: nx.Graph,
) -> dict[tuple[Hashable, Hashable], float]:
    """Return edge betweenness along weighted shortest paths."""
    return _edge_betweenness(graph, weighted=True)


def _incoming_distances(graph: nx.Graph) -> Callable[[Hashable], dict]:
    view = graph.reverse(copy=False) if graph.is_directed() else graph

    def lengths(node: Hashable) -> dict:
        return nx.single_source_dijkstra_path_length(view, node, weight="weight")

    return lengths


def closeness(graph: nx.Graph) -> dict[Hashable, float]:
    """Return ``1 / sum(d(v, u))`` over nodes ``v`` that can reach ``u``.

    A node that no other node reaches scores +inf.
    """
    lengths = _incoming_distances(graph)
    result: dict[Hashable, float] = {}
    for node in graph:
        total = sum(
            float(d)
            for other, d in lengths(node).items()
            if other != node and not math.isinf(d)
        )
        result[node] = 1.0 / total if total else math.inf
    return result


def harmonic(graph: nx.Graph) -> dict[Hashable, float]:
    """Return ``sum(1 / d(v, u))`` over nodes ``v`` that can reach ``u``."""
    lengths = _incoming_distances(graph)
    return {
        node: sum(
            1.0 / float(d)
            for other, d in lengths(node).items()
            if other != node and not math.isinf(d)
        )
        for node in graph
    }


def _source_dependencies(graph: nx.Graph, source: Hashable) -> dict[Hashable, float]:
    delta = _accumulate(_dijkstra_dag(graph, source))
    return {node: value for node, value in delta.items() if node != source}


def approximate_betweenness(
    graph: nx.Graph, k: int, rng: random.Random
) -> dict[Hashable, float]:
    """Estimate betweenness from ``k`` randomly sampled source nodes.

    Dependencies from each sampled source are summed and scaled by ``n / k``.
    ``k`` is capped at the node count; an empty mapping is returned for an
    empty graph or ``k <= 0``.  Only nodes reached from some sampled source
    appear in the result.
    """
    ids = list(graph)
    n = len(ids)
    if n == 0 or k <= 0:
        return {}
    k = min(k, n)
    sources = rng.sample(ids, k)

    workers = max(1, min(os.cpu_count() or 1, k))
    result: dict[Hashable, float] = {}
    with ThreadPoolExecutor(max_workers=workers) as pool:
        for local in pool.map(lambda s: _source_dependencies(graph, s), sources):
            for node, value in local.items():
                result[node] = result.get(node, 0.0) + value

    scale = n / k
    return {node: value * scale for node, value in result.items()}