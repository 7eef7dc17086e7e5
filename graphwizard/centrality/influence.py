"""Influence maximization with CELF greedy selection.

Spread is estimated by Monte Carlo simulation of the Independent Cascade
model: each newly activated node activates each inactive neighbour with a
fixed probability.
"""

from __future__ import annotations

import random
from collections import deque
from collections.abc import Hashable, Iterable
from dataclasses import dataclass
from operator import attrgetter

import networkx as nx

__all__ = ["influence_maximization"]


@dataclass
class _Candidate:
    node: Hashable
    marginal: float
    round: int


def _simulate_spread(
    adjacency: dict[Hashable, list[Hashable]],
    seeds: Iterable[Hashable],
    probability: float,
    simulations: int,
    rng: random.Random,
) -> float:
    seeds = list(seeds)
    total = 0
    for _ in range(simulations):
        activated = set(seeds)
        queue = deque(seeds)
        while queue:
            node = queue.popleft()
            for neighbour in adjacency[node]:
                if neighbour not in activated and rng.random() < probability:
                    activated.add(neighbour)
                    queue.append(neighbour)
        total += len(activated)
    return total / simulations


def influence_maximization(
    graph: nx.Graph,
    k: int,
    probability: float,
    simulations: int,
    rng: random.Random,
) -> tuple[list[Hashable], float]:
    """Pick ``k`` seed nodes that maximize the expected cascade size.

    Returns the seeds in order of selection and the estimated total spread
    (expected number of activated nodes).  ``k`` is capped at the node
    count; an empty graph or ``k <= 0`` gives ``([], 0.0)``.
    """
    ids = list(graph)
    n = len(ids)
    if n == 0 or k <= 0:
        return [], 0.0
    k = min(k, n)

    adjacency = {node: list(graph.adj[node]) for node in ids}
    candidates = [
        _Candidate(
            node,
            _simulate_spread(adjacency, [node], probability, simulations, rng),
            0,
        )
        for node in ids
    ]

    seed_set: dict[Hashable, None] = {}
    seeds: list[Hashable] = []
    total_spread = 0.0
    by_gain = attrgetter("marginal")

    for current in range(k):
        candidates.sort(key=by_gain, reverse=True)
        while candidates[0].round != current:
            top = candidates[0]
            spread_with = _simulate_spread(
                adjacency, [*seed_set, top.node], probability, simulations, rng
            )
            top.marginal = spread_with - total_spread
            top.round = current
            candidates.sort(key=by_gain, reverse=True)

        selected = candidates.pop(0)
        seed_set[selected.node] = None
        seeds.append(selected.node)
        total_spread += selected.marginal

    return seeds, total_spread