"""Katz centrality computed by power iteration.

Every function iterates ``x[i] = alpha * sum(x[j] for j -> i) + beta`` from
a zero vector.  It stops after ``max_iter`` rounds, or earlier once the L1
change between two rounds falls below ``tol``.  Scores are returned keyed by
node.  Undirected graphs count each edge in both directions.
"""

from __future__ import annotations

import os
from collections.abc import Hashable, Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor

import networkx as nx

__all__ = [
    "katz",
    "katz_undirected",
    "katz_parallel",
    "katz_undirected_parallel",
    "katz_sparse",
    "katz_undirected_sparse",
]


def _incoming_lists(
    ids: Sequence[Hashable], incoming: Mapping
) -> list[list[int]]:
    """Return, for every node index, the indices of nodes pointing at it."""
    index = {node: i for i, node in enumerate(ids)}
    return [[index[u] for u in incoming[node] if u in index] for node in ids]


def _incoming_view(graph: nx.Graph) -> Mapping:
    return graph.pred if graph.is_directed() else graph.adj


def _l1(a: Sequence[float], b: Sequence[float]) -> float:
    return sum(abs(p - q) for p, q in zip(a, b))


def _iterate(
    ids: list[Hashable],
    sources: list[list[int]],
    alpha: float,
    beta: float,
    tol: float,
    max_iter: int,
) -> dict[Hashable, float]:
    x = [0.0] * len(ids)
    for _ in range(max_iter):
        following = [alpha * sum(x[j] for j in preds) + beta for preds in sources]
        diff = _l1(following, x)
        x = following
        if diff < tol:
            break
    return dict(zip(ids, x))


def _iterate_parallel(
    ids: list[Hashable],
    sources: list[list[int]],
    alpha: float,
    beta: float,
    tol: float,
    max_iter: int,
) -> dict[Hashable, float]:
    n = len(ids)
    workers = max(1, os.cpu_count() or 1)
    chunk = (n + workers - 1) // workers
    bounds = [(lo, min(lo + chunk, n)) for lo in range(0, n, chunk)]
    x = [0.0] * n

    def compute(span: tuple[int, int]) -> list[float]:
        lo, hi = span
        current = x
        return [alpha * sum(current[j] for j in preds) + beta for preds in sources[lo:hi]]

    with ThreadPoolExecutor(max_workers=len(bounds)) as pool:
        for _ in range(max_iter):
            following = [v for part in pool.map(compute, bounds) for v in part]
            diff = _l1(following, x)
            x = following
            if diff < tol:
                break
    return dict(zip(ids, x))


def _iterate_scatter(
    graph: nx.Graph,
    alpha: float,
    beta: float,
    tol: float,
    max_iter: int,
) -> dict[Hashable, float]:
    ids = list(graph)
    index = {node: i for i, node in enumerate(ids)}
    x = [0.0] * len(ids)
    for _ in range(max_iter):
        following = [beta] * len(ids)
        for j, node in enumerate(ids):
            contribution = alpha * x[j]
            for target in graph.adj[node]:
                i = index.get(target)
                if i is not None:
                    following[i] += contribution
        diff = _l1(following, x)
        x = following
        if diff < tol:
            break
    return dict(zip(ids, x))


def _katz(graph, alpha, beta, tol, max_iter, *, parallel: bool):
    ids = list(graph)
    if not ids:
        return {}
    sources = _incoming_lists(ids, _incoming_view(graph))
    run = _iterate_parallel if parallel else _iterate
    return run(ids, sources, alpha, beta, tol, max_iter)


def katz(
    graph: nx.Graph, alpha: float, beta: float, tol: float, max_iter: int
) -> dict[Hashable, float]:
    """Return Katz centrality for a directed graph.

    ``alpha`` must be below ``1 / lambda_max`` for convergence; ``beta`` is
    the base score every node receives.
    """
    return _katz(graph, alpha, beta, tol, max_iter, parallel=False)


def katz_undirected(
    graph: nx.Graph, alpha: float, beta: float, tol: float, max_iter: int
) -> dict[Hashable, float]:
    """Return Katz centrality for an undirected graph."""
    return _katz(graph, alpha, beta, tol, max_iter, parallel=False)


def katz_parallel(
    graph: nx.Graph, alpha: float, beta: float, tol: float, max_iter: int
) -> dict[Hashable, float]:
    """Compute :func:`katz` with each round's node updates split across workers."""
    return _katz(graph, alpha, beta, tol, max_iter, parallel=True)


def katz_undirected_parallel(
    graph: nx.Graph, alpha: float, beta: float, tol: float, max_iter: int
) -> dict[Hashable, float]:
    """Compute :func:`katz_undirected` with node updates split across workers."""
    return _katz(graph, alpha, beta, tol, max_iter, parallel=True)


def katz_sparse(
    graph: nx.Graph, alpha: float, beta: float, tol: float, max_iter: int
) -> dict[Hashable, float]:
    """Compute :func:`katz` in O(N) extra memory.

    No predecessor lists are built; each round walks the outgoing edges and
    scatters contributions to successors.
    """
    if graph.number_of_nodes() == 0:
        return {}
    return _iterate_scatter(graph, alpha, beta, tol, max_iter)


def katz_undirected_sparse(
    graph: nx.Graph, alpha: float, beta: float, tol: float, max_iter: int
) -> dict[Hashable, float]:
    """Compute :func:`katz_undirected` in O(N) extra memory."""
    if graph.number_of_nodes() == 0:
        return {}
    return _iterate_scatter(graph, alpha, beta, tol, max_iter)