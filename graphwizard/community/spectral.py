"""Spectral clustering on the normalized graph Laplacian."""

from __future__ import annotations

from collections.abc import Hashable

import networkx as nx
import numpy as np

__all__ = ["spectral_clustering"]

_KMEANS_MAX_ITER = 100


def _kmeans(data: np.ndarray, k: int, max_iter: int) -> np.ndarray:
    """Cluster the rows of ``data`` with farthest-first initialised k-means."""
    n = data.shape[0]
    centroids = [data[0].copy()]
    for _ in range(1, k):
        stacked = np.array(centroids)
        dists = ((data[:, None, :] - stacked[None, :, :]) ** 2).sum(axis=2)
        centroids.append(data[int(np.argmax(dists.min(axis=1)))].copy())
    centres = np.array(centroids)

    labels = np.zeros(n, dtype=int)
    for _ in range(max_iter):
        dists = ((data[:, None, :] - centres[None, :, :]) ** 2).sum(axis=2)
        assigned = np.argmin(dists, axis=1)
        if np.array_equal(assigned, labels):
            break
        labels = assigned

        sums = np.zeros_like(centres)
        np.add.at(sums, labels, data)
        counts = np.bincount(labels, minlength=k).astype(float)
        nonempty = counts > 0
        sums[nonempty] /= counts[nonempty, None]
        centres = sums
    return labels


def spectral_clustering(graph: nx.Graph, k: int) -> dict[Hashable, int]:
    """Partition an undirected graph into ``k`` clusters.

    Builds the normalized Laplacian ``I - D^-1/2 A D^-1/2``, embeds each node
    in the eigenvectors of its ``k`` smallest eigenvalues, normalizes the
    rows and clusters them with k-means.  ``k`` is capped at the node count;
    an empty graph or ``k <= 0`` gives an empty mapping.
    """
    ids = list(graph)
    n = len(ids)
    if n == 0 or k <= 0:
        return {}
    k = min(k, n)
    index = {node: i for i, node in enumerate(ids)}

    adjacency = np.zeros((n, n))
    for node in ids:
        i = index[node]
        for other, attrs in graph.adj[node].items():
            adjacency[i, index[other]] = float(attrs.get("weight", 1.0))
    degree = adjacency.sum(axis=1)

    inv_sqrt = np.zeros(n)
    positive = degree > 0
    inv_sqrt[positive] = 1.0 / np.sqrt(degree[positive])
    laplacian = np.eye(n) - inv_sqrt[:, None] * adjacency * inv_sqrt[None, :]

    try:
        _, vectors = np.linalg.eigh(laplacian)
    except np.linalg.LinAlgError:
        return {node: i % k for i, node in enumerate(ids)}

    embedding = vectors[:, :k].copy()
    norms = np.linalg.norm(embedding, axis=1)
    nonzero = norms > 0
    embedding[nonzero] /= norms[nonzero, None]

    labels = _kmeans(embedding, k, _KMEANS_MAX_ITER)
    return {node: int(label) for node, label in zip(ids, labels)}