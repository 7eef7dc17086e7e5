"""Leiden community detection with the refinement phase run concurrently.

Refinement of each community only reads and writes the entries of that
community's own members, so communities are refined independently.  The
per-community generators are seeded from the caller's generator in
community-id order, exactly as the sequential :func:`leiden` does.  For a
given seed the two functions therefore return the same partition, whatever
the number of workers.
"""

from __future__ import annotations

import os
import random
from collections.abc import Hashable
from concurrent.futures import ThreadPoolExecutor

import networkx as nx

from graphwizard.community.leiden import (
    Adjacency,
    community_members,
    refine_community,
    run_leiden,
)

__all__ = ["leiden_parallel"]


def _refine_parallel(
    adj: Adjacency, comm: list[int], rng: random.Random
) -> list[int]:
    refined = list(range(len(comm)))
    work = [
        (members, rng.getrandbits(63))
        for members in community_members(comm)
        if len(members) > 1
    ]
    if not work:
        return refined

    def run(item: tuple[list[int], int]) -> None:
        members, seed = item
        refine_community(adj, comm, members, refined, random.Random(seed))

    workers = max(1, min(os.cpu_count() or 1, len(work)))
    with ThreadPoolExecutor(max_workers=workers) as pool:
        list(pool.map(run, work))
    return refined


def leiden_parallel(
    graph: nx.Graph, resolution: float, rng: random.Random
) -> dict[Hashable, int]:
    """Return a community id for every node, refining communities concurrently.

    The result is identical to :func:`graphwizard.community.leiden.leiden`
    for a generator in the same state.
    """
    return run_leiden(graph, resolution, rng, _refine_parallel)