"""Kleinberg's HITS hub and authority scores."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field

import networkx as nx
import numpy as np

__all__ = ["HITSResult", "hits"]


@dataclass(frozen=True)
class HITSResult:
    """Hub and authority scores keyed by node."""

    hub: dict[Hashable, float] = field(default_factory=dict)
    authority: dict[Hashable, float] = field(default_factory=dict)


def _unit(vector: np.ndarray) -> np.ndarray:
    norm = np.linalg.norm(vector)
    return vector / norm if norm > 0 else vector


def hits(graph: nx.Graph, tol: float) -> HITSResult:
    """Return hub and authority scores for a directed graph.

    Both score vectors have unit Euclidean length.  Iteration stops once
    both vectors change by less than ``tol`` between rounds.
    """
    ids = list(graph)
    n = len(ids)
    if n == 0:
        return HITSResult()
    index = {node: i for i, node in enumerate(ids)}
    links = np.zeros((n, n))
    for node, neighbours in graph.adj.items():
        for target in neighbours:
            links[index[node], index[target]] = 1.0

    authority = np.ones(n)
    hub = np.ones(n)
    while True:
        new_authority = _unit(links.T @ hub)
        new_hub = _unit(links @ new_authority)
        delta_authority = np.linalg.norm(authority - new_authority)
        delta_hub = np.linalg.norm(hub - new_hub)
        authority, hub = new_authority, new_hub
        if delta_authority < tol and delta_hub < tol:
            break

    return HITSResult(
        hub={node: float(v) for node, v in zip(ids, hub)},
        authority={node: float(v) for node, v in zip(ids, authority)},
    )