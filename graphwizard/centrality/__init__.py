"""Node and edge centrality measures for networkx graphs, keyed by node."""

__all__ = [
    "betweenness",
    "degree",
    "eccentricity",
    "hits",
    "influence",
    "katz",
    "pagerank",
]