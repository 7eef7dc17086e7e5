[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphwizard"
version = "0.1.0"
description = "Centrality measures and community detection algorithms for networkx graphs."
requires-python = ">=3.10"
keywords = [
    "graph",
    "network",
    "centrality",
    "community detection",
    "leiden",
    "louvain",
    "pagerank",
    "katz",
    "betweenness",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Scientific/Engineering :: Information Analysis",
]
dependencies = [
    "networkx>=3.0",
    "numpy>=1.23",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[tool.hatch.build.targets.wheel]
packages = ["graphwizard"]

[tool.pytest.ini_options]
addopts = "-ra"
