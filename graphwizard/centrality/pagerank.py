"""PageRank and Personalized PageRank."""

from __future__ import annotations

from collections.abc import Callable, Hashable

import networkx as nx
import numpy as np

__all__ = [
    "page_rank",
    "page_rank_sparse",
    "personalized_page_rank",
    "personalized_page_rank_undirected",
]


def _index(graph: nx.Graph) -> tuple[list[Hashable], dict[Hashable, int]]:
    ids = list(graph)
    return ids, {node: i for i, node in enumerate(ids)}


def _power_iterate(
    ids: list[Hashable], step: Callable[[np.ndarray], np.ndarray], tol: float
) -> dict[Hashable, float]:
    current = np.full(len(ids), 1.0 / len(ids))
    while True:
        following = step(current)
        diff = float(np.linalg.norm(following - current))
        current = following
        if diff < tol:
            break
    return {node: float(score) for node, score in zip(ids, current)}


def page_rank(graph: nx.Graph, damping: float, tol: float) -> dict[Hashable, float]:
    """Return PageRank scores using a dense transition matrix.

    Dangling nodes spread their rank uniformly over all nodes.  Iteration
    stops when the Euclidean change between rounds falls below ``tol``.
    """
    ids, index = _index(graph)
    n = len(ids)
    if n == 0:
        return {}
    matrix = np.zeros((n, n))
    for j, node in enumerate(ids):
        targets = [index[v] for v in graph.adj[node]]
        if targets:
            matrix[targets, j] = damping / len(targets)
        else:
            matrix[:, j] = damping / n
    matrix += (1.0 - damping) / n
    return _power_iterate(ids, lambda v: matrix @ v, tol)


def page_rank_sparse(
    graph: nx.Graph, damping: float, tol: float
) -> dict[Hashable, float]:
    """Return the same scores as :func:`page_rank` without a dense matrix."""
    ids, index = _index(graph)
    n = len(ids)
    if n == 0:
        return {}
    pairs = [(index[u], index[v]) for u in ids for v in graph.adj[u]]
    src = np.fromiter((s for s, _ in pairs), dtype=np.intp, count=len(pairs))
    dst = np.fromiter((d for _, d in pairs), dtype=np.intp, count=len(pairs))
    out = np.bincount(src, minlength=n).astype(float)
    dangling = out == 0
    shares = damping / out[src] if len(src) else np.zeros(0)

    def step(v: np.ndarray) -> np.ndarray:
        following = np.zeros(n)
        np.add.at(following, dst, shares * v[src])
        following += damping * v[dangling].sum() / n + (1.0 - damping) * v.sum() / n
        return following

    return _power_iterate(ids, step, tol)


def _personalized(
    graph: nx.Graph, seed: Hashable, damping: float, tol: float, max_iter: int
) -> dict[Hashable, float]:
    ids, index = _index(graph)
    if not ids or seed not in index:
        return {}
    n = len(ids)
    seed_idx = index[seed]
    adjacency = [[index[v] for v in graph.adj[node]] for node in ids]

    score = [0.0] * n
    score[seed_idx] = 1.0
    for _ in range(max_iter):
        following = [0.0] * n
        following[seed_idx] = 1.0 - damping
        dangling_mass = 0.0
        for mass, targets in zip(score, adjacency):
            if mass == 0:
                continue
            if not targets:
                dangling_mass += mass
                continue
            share = damping * mass / len(targets)
            for j in targets:
                following[j] += share
        following[seed_idx] += damping * dangling_mass

        diff = sum(abs(a - b) for a, b in zip(following, score))
        score = following
        if diff < tol:
            break
    return dict(zip(ids, score))


def personalized_page_rank(
    graph: nx.Graph, seed: Hashable, damping: float, tol: float, max_iter: int
) -> dict[Hashable, float]:
    """Return PageRank scores where the walker restarts at ``seed``.

    Mass from nodes without outgoing edges returns to the seed.  An empty
    mapping is returned when the graph is empty or lacks the seed.
    """
    return _personalized(graph, seed, damping, tol, max_iter)


def personalized_page_rank_undirected(
    graph: nx.Graph, seed: Hashable, damping: float, tol: float, max_iter: int
) -> dict[Hashable, float]:
    """Personalized PageRank on an undirected graph, edges used both ways."""
    return _personalized(graph, seed, damping, tol, max_iter)