"""Community detection algorithms returning node-to-community maps."""

__all__ = [
    "labelprop",
    "leiden",
    "leiden_parallel",
    "louvain",
    "spectral",
]