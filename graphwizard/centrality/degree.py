"""Normalized degree centrality measures.

Each function returns a mapping from node to score, where a node's score is
the number of neighbours it has divided by ``n - 1``.  Graphs with fewer than
two nodes give every node a score of zero.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping

import networkx as nx

__all__ = ["degree", "in_degree", "out_degree"]


def _normalized(graph: nx.Graph, neighbours: Mapping) -> dict[Hashable, float]:
    n = graph.number_of_nodes()
    if n < 2:
        return {node: 0.0 for node in graph}
    denom = n - 1
    return {node: len(neighbours[node]) / denom for node in graph}


def degree(graph: nx.Graph) -> dict[Hashable, float]:
    """Return ``deg(v) / (n - 1)`` for every node of an undirected graph."""
    return _normalized(graph, graph.adj)


def in_degree(graph: nx.Graph) -> dict[Hashable, float]:
    """Return ``in_deg(v) / (n - 1)`` for every node of a directed graph."""
    neighbours = graph.pred if graph.is_directed() else graph.adj
    return _normalized(graph, neighbours)


def out_degree(graph: nx.Graph) -> dict[Hashable, float]:
    """Return ``out_deg(v) / (n - 1)`` for every node of a directed graph."""
    return _normalized(graph, graph.adj)