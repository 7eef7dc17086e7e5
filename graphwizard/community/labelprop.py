"""Label propagation community detection."""

from __future__ import annotations

import random
from collections import Counter
from collections.abc import Hashable

import networkx as nx

__all__ = ["label_propagation"]


def label_propagation(
    graph: nx.Graph, max_iter: int, rng: random.Random
) -> dict[Hashable, Hashable]:
    """Return a label for every node of an undirected graph.

    Every node starts labelled with itself and, in a random order each
    round, adopts the most frequent label among its neighbours; ties are
    broken at random.  Nodes without neighbours keep their own label.  The
    loop ends when a round changes nothing or after ``max_iter`` rounds.
    """
    ids = list(graph)
    n = len(ids)
    if n == 0:
        return {}
    label: dict[Hashable, Hashable] = {node: node for node in ids}

    for _ in range(max_iter):
        changed = False
        for pos in rng.sample(range(n), n):
            node = ids[pos]
            freq = Counter(label[other] for other in graph.adj[node])
            if not freq:
                continue
            top = max(freq.values())
            candidates = [lab for lab, count in freq.items() if count == top]
            chosen = candidates[rng.randrange(len(candidates))]
            if chosen != label[node]:
                label[node] = chosen
                changed = True
        if not changed:
            break
    return label