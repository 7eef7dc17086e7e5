"""Louvain modularity optimization and the modularity score."""

from __future__ import annotations

import random
from collections.abc import Hashable, Iterable

import networkx as nx

__all__ = ["louvain", "louvain_q"]


def louvain(
    graph: nx.Graph, resolution: float, seed: int | random.Random | None
) -> dict[Hashable, int]:
    """Return a community id for every node, found by the Louvain method.

    Higher ``resolution`` gives more, smaller communities; 1.0 is standard
    modularity.  Community ids are numbered from 0.
    """
    communities = nx.community.louvain_communities(
        graph, weight="weight", resolution=resolution, seed=seed
    )
    return {
        node: community_id
        for community_id, members in enumerate(communities)
        for node in members
    }


def louvain_q(
    graph: nx.Graph,
    communities: Iterable[Iterable[Hashable]] | None,
    resolution: float,
) -> float:
    """Return the modularity Q of ``graph`` split into ``communities``.

    With ``communities`` set to ``None`` every node forms its own community.
    """
    if communities is None:
        groups = [{node} for node in graph]
    else:
        groups = [set(members) for members in communities]
    return float(
        nx.community.modularity(graph, groups, weight="weight", resolution=resolution)
    )