"""Leiden community detection.

The Leiden algorithm improves on Louvain by adding a refinement phase
between local moving and aggregation.  That phase guarantees that the
communities it returns are well connected.  The ``resolution`` parameter
sets the granularity: higher values give more, smaller communities.
Edge weights are read from the ``weight`` attribute and default to 1.
"""

from __future__ import annotations

import random
from collections.abc import Callable, Hashable
from dataclasses import dataclass

import networkx as nx

__all__ = ["leiden"]

MAX_LOCAL_SWEEPS = 3
"""Upper bound on shuffled node sweeps per local-moving phase."""

MAX_LEVELS = 100
"""Upper bound on move/refine/aggregate rounds."""

Adjacency = list[list[tuple[int, float]]]
RefineFn = Callable[[Adjacency, list[int], random.Random], list[int]]


@dataclass
class WeightedAdjacency:
    """Dense-indexed weighted adjacency of an undirected graph."""

    ids: list[Hashable]
    adj: Adjacency
    degree: list[float]
    total_weight: float


def _ordered_nodes(graph: nx.Graph) -> list[Hashable]:
    try:
        return sorted(graph)
    except TypeError:
        return list(graph)


def build_weighted_adjacency(graph: nx.Graph) -> WeightedAdjacency:
    """Index nodes in sorted order and collect sorted weighted neighbour lists."""
    ids = _ordered_nodes(graph)
    index = {node: i for i, node in enumerate(ids)}
    adj: Adjacency = []
    degree: list[float] = []
    total = 0.0
    for node in ids:
        neighbours = sorted(
            (index[other], float(attrs.get("weight", 1.0)))
            for other, attrs in graph.adj[node].items()
            if other in index
        )
        weight_sum = sum(w for _, w in neighbours)
        adj.append(neighbours)
        degree.append(weight_sum)
        total += weight_sum
    return WeightedAdjacency(ids, adj, degree, total / 2)


def local_move(
    adj: Adjacency,
    degree: list[float],
    comm: list[int],
    total_weight: float,
    resolution: float,
    max_sweeps: int,
    rng: random.Random,
) -> bool:
    """Greedily move nodes between communities; report whether any moved.

    ``comm`` is updated in place.
    """
    n = len(comm)
    moved = False
    order = list(range(n))
    sigma_tot = [0.0] * n
    for i, c in enumerate(comm):
        sigma_tot[c] += degree[i]

    m = total_weight
    for _ in range(max_sweeps):
        rng.shuffle(order)
        changed = False
        for i in order:
            weights: dict[int, float] = {}
            for j, w in adj[i]:
                c = comm[j]
                weights[c] = weights.get(c, 0.0) + w

            if m == 0:
                continue
            old = comm[i]
            w_old = weights.get(old, 0.0)
            old_sigma = sigma_tot[old]
            best, best_delta = old, 0.0
            for c, wc in weights.items():
                if c == old:
                    continue
                delta = (wc - w_old) / m - resolution * degree[i] * (
                    sigma_tot[c] - (old_sigma - degree[i])
                ) / (2 * m * m)
                if delta > best_delta:
                    best, best_delta = c, delta

            if best != old:
                sigma_tot[old] -= degree[i]
                sigma_tot[best] += degree[i]
                comm[i] = best
                changed = moved = True
        if not changed:
            break
    return moved


def community_members(comm: list[int]) -> list[list[int]]:
    """Return member lists of each community, ordered by community id."""
    members: dict[int, list[int]] = {}
    for i, c in enumerate(comm):
        members.setdefault(c, []).append(i)
    return [members[c] for c in sorted(members)]


def refine_community(
    adj: Adjacency,
    comm: list[int],
    members: list[int],
    refined: list[int],
    rng: random.Random,
) -> None:
    """Merge nodes of one community into their best-connected sub-community."""
    for pos in rng.sample(range(len(members)), len(members)):
        i = members[pos]
        sub_weights: dict[int, float] = {}
        for j, w in adj[i]:
            if comm[j] == comm[i]:
                r = refined[j]
                sub_weights[r] = sub_weights.get(r, 0.0) + w
        best, best_w = refined[i], 0.0
        for r, w in sub_weights.items():
            if r != refined[i] and w > best_w:
                best, best_w = r, w
        if best_w > 0:
            refined[i] = best


def refine(adj: Adjacency, comm: list[int], rng: random.Random) -> list[int]:
    """Return a refined partition nested within ``comm``.

    Each community with more than one member is refined with its own
    generator, seeded from ``rng`` in community-id order.
    """
    refined = list(range(len(comm)))
    for members in community_members(comm):
        if len(members) <= 1:
            continue
        local = random.Random(rng.getrandbits(63))
        refine_community(adj, comm, members, refined, local)
    return refined


def aggregate(
    refined: list[int], adj: Adjacency, degree: list[float], self_loops: list[float]
) -> tuple[Adjacency, list[float], list[float], list[int]]:
    """Collapse each refined community into a single node.

    Returns the new adjacency, degrees, self-loop weights and the map from
    old node index to new node index.
    """
    remap: dict[int, int] = {}
    for r in refined:
        remap.setdefault(r, len(remap))
    agg_map = [remap[r] for r in refined]
    new_n = len(remap)

    new_degree = [0.0] * new_n
    new_self = [0.0] * new_n
    edge_weights: dict[tuple[int, int], float] = {}
    for i, ci in enumerate(agg_map):
        new_degree[ci] += degree[i]
        new_self[ci] += self_loops[i]
        for j, w in adj[i]:
            cj = agg_map[j]
            if ci == cj:
                new_self[ci] += w
            else:
                edge_weights[(ci, cj)] = edge_weights.get((ci, cj), 0.0) + w
    new_self = [s / 2 for s in new_self]

    new_adj: Adjacency = [[] for _ in range(new_n)]
    for (ci, cj), w in sorted(edge_weights.items()):
        new_adj[ci].append((cj, w))
    return new_adj, new_degree, new_self, agg_map


def run_leiden(
    graph: nx.Graph, resolution: float, rng: random.Random, refine_fn: RefineFn
) -> dict[Hashable, int]:
    """Run the Leiden loop using ``refine_fn`` for the refinement phase."""
    data = build_weighted_adjacency(graph)
    n = len(data.ids)
    if n == 0:
        return {}

    adj, degree = data.adj, data.degree
    comm = list(range(n))
    self_loops = [0.0] * n
    membership = list(range(n))

    for level in range(MAX_LEVELS):
        moved = local_move(
            adj, degree, comm, data.total_weight, resolution, MAX_LOCAL_SWEEPS, rng
        )
        refined = refine_fn(adj, comm, rng)
        if level == 0:
            membership = list(refined)
        else:
            membership = [refined[m] for m in membership]

        if not moved:
            break

        adj, degree, self_loops, agg_map = aggregate(refined, adj, degree, self_loops)
        membership = [agg_map[m] for m in membership]
        comm = list(range(len(degree)))
        if len(degree) <= 1:
            break

    labels: dict[int, int] = {}
    return {
        node: labels.setdefault(c, len(labels)) for node, c in zip(data.ids, membership)
    }


def leiden(
    graph: nx.Graph, resolution: float, rng: random.Random
) -> dict[Hashable, int]:
    """Return a community id for every node of an undirected graph.

    Community ids are numbered from 0 in order of first appearance over the
    nodes in sorted order.  Results are deterministic for a seeded ``rng``.
    """
    return run_leiden(graph, resolution, rng, refine)