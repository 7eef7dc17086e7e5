"""Centrality measures and community detection for networkx graphs."""

__version__ = "0.1.0"