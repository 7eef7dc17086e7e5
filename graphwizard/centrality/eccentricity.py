"""Eccentricity, diameter and radius based on weighted shortest paths.

Edge weights are read from the ``weight`` attribute and default to 1.
Unreachable nodes are ignored, so a node with no outgoing paths has
eccentricity 0.
"""

from __future__ import annotations

import math
import os
from collections.abc import Hashable
from concurrent.futures import ThreadPoolExecutor

import networkx as nx

__all__ = [
    "eccentricity",
    "diameter",
    "radius",
    "eccentricity_parallel",
    "diameter_parallel",
]


def _node_eccentricity(graph: nx.Graph, source: Hashable) -> float:
    lengths = nx.single_source_dijkstra_path_length(graph, source, weight="weight")
    farthest = max(
        (
            float(dist)
            for target, dist in lengths.items()
            if target != source and not math.isinf(dist)
        ),
        default=0.0,
    )
    return max(farthest, 0.0)


def eccentricity(graph: nx.Graph) -> dict[Hashable, float]:
    """Return the largest finite shortest-path distance from each node."""
    return {node: _node_eccentricity(graph, node) for node in graph}


def diameter(graph: nx.Graph) -> float:
    """Return the largest eccentricity, or 0 for an empty graph."""
    return max(eccentricity(graph).values(), default=0.0)


def radius(graph: nx.Graph) -> float:
    """Return the smallest eccentricity, or +inf for an empty graph."""
    return min(eccentricity(graph).values(), default=math.inf)


def eccentricity_parallel(graph: nx.Graph) -> dict[Hashable, float]:
    """Compute :func:`eccentricity` with per-node searches run concurrently."""
    ids = list(graph)
    if not ids:
        return {}
    workers = max(1, min(os.cpu_count() or 1, len(ids)))
    with ThreadPoolExecutor(max_workers=workers) as pool:
        values = list(pool.map(lambda node: _node_eccentricity(graph, node), ids))
    return dict(zip(ids, values))


def diameter_parallel(graph: nx.Graph) -> float:
    """Compute :func:`diameter` using :func:`eccentricity_parallel`."""
    return max(eccentricity_parallel(graph).values(), default=0.0)