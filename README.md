# graphwizard

Centrality measures and community detection for `networkx` graphs. Every
function takes a `networkx` graph and returns plain Python values, mostly
dictionaries keyed by node. Where edge weights matter they are read from the
`weight` edge attribute and default to 1.

## Installation

```
pip install graphwizard
```

To run the test suite:

```
pip install "graphwizard[test]"
pytest
```

## Centrality

The `graphwizard.centrality` package holds node and edge centrality measures.

| Module | Functions |
| --- | --- |
| `graphwizard.centrality.degree` | `degree`, `in_degree`, `out_degree` |
| `graphwizard.centrality.eccentricity` | `eccentricity`, `diameter`, `radius`, `eccentricity_parallel`, `diameter_parallel` |
| `graphwizard.centrality.pagerank` | `page_rank`, `page_rank_sparse`, `personalized_page_rank`, `personalized_page_rank_undirected` |
| `graphwizard.centrality.hits` | `hits`, `HITSResult` |
| `graphwizard.centrality.katz` | `katz`, `katz_undirected`, `katz_parallel`, `katz_undirected_parallel`, `katz_sparse`, `katz_undirected_sparse` |
| `graphwizard.centrality.betweenness` | `betweenness`, `betweenness_weighted`, `edge_betweenness`, `edge_betweenness_weighted`, `closeness`, `harmonic`, `approximate_betweenness` |
| `graphwizard.centrality.influence` | `influence_maximization` |

Notes on behaviour:

- `degree`, `in_degree` and `out_degree` divide each node's neighbour count
  by `n - 1`; graphs with fewer than two nodes give every node 0.
- `eccentricity` ignores unreachable nodes. `diameter` returns 0 for an
  empty graph, `radius` returns `inf`.
- `page_rank` and `page_rank_sparse` iterate until the change between
  rounds falls below `tol`. The personalized variants take a `seed` node and
  a `max_iter` cap, and return `{}` when the seed is not in the graph.
- `hits` returns a `HITSResult` with `hub` and `authority` dictionaries,
  each of unit Euclidean length.
- The Katz functions start from zero and stop after `max_iter` rounds or
  once the L1 change falls below `tol`.
- `betweenness` counts every ordered pair of nodes, so undirected pairs are
  counted twice. `closeness` gives `inf` to a node that no other node
  reaches.
- `approximate_betweenness` samples `k` source nodes and scales by `n / k`.

```python
import random
import networkx as nx

from graphwizard.centrality.degree import degree
from graphwizard.centrality.katz import katz
from graphwizard.centrality.eccentricity import diameter, radius
from graphwizard.centrality.hits import hits
from graphwizard.centrality.influence import influence_maximization

path = nx.path_graph(3)
print(degree(path))                  # {0: 0.5, 1: 1.0, 2: 0.5}
print(diameter(path), radius(path))  # 2.0 1.0

chain = nx.DiGraph([(0, 1), (1, 2)])
scores = katz(chain, 0.1, 1.0, 1e-8, 100)
assert scores[2] > scores[0]

result = hits(nx.DiGraph([(1, 0), (2, 0)]), 1e-6)
assert result.authority[0] > result.authority[1]

seeds, spread = influence_maximization(nx.star_graph(4), 1, 0.5, 200, random.Random(42))
```

The randomised functions (`approximate_betweenness`,
`influence_maximization`) take a `random.Random` instance, so results are
reproducible for a fixed seed.

## Community detection

The `graphwizard.community` package holds community detection algorithms.

| Module | Functions |
| --- | --- |
| `graphwizard.community.leiden` | `leiden` |
| `graphwizard.community.leiden_parallel` | `leiden_parallel` |
| `graphwizard.community.labelprop` | `label_propagation` |
| `graphwizard.community.louvain` | `louvain`, `louvain_q` |
| `graphwizard.community.spectral` | `spectral_clustering` |

- `leiden` and `leiden_parallel` return community ids numbered from 0 and
  give the same partition for a `random.Random` in the same state. Higher
  `resolution` gives more, smaller communities; `1.0` is standard modularity.
- `label_propagation` returns, for each node, the label it settled on; a
  label is the identifier of some node.
- `louvain` uses networkx's Louvain method; `seed` may be an `int`, a
  `random.Random` or `None`. `louvain_q` returns the modularity of a given
  partition, or of the all-singletons partition when `communities` is `None`.
- `spectral_clustering` embeds nodes in the eigenvectors of the normalized
  Laplacian and clusters them with k-means into `k` clusters.

```python
import random
import networkx as nx

from graphwizard.community.leiden import leiden
from graphwizard.community.louvain import louvain_q
from graphwizard.community.spectral import spectral_clustering

g = nx.Graph([(0, 1), (1, 2), (2, 0), (3, 4), (4, 5), (5, 3), (2, 3)])
communities = leiden(g, 1.0, random.Random(42))
assert communities[0] == communities[1] != communities[3]

print(louvain_q(g, [{0, 1, 2}, {3, 4, 5}], 1.0))

two_triangles = nx.Graph([(0, 1), (1, 2), (2, 0), (3, 4), (4, 5), (5, 3)])
print(spectral_clustering(two_triangles, 2))
```

## What this package does not do

graphwizard is a library only. It has no command-line program and does not
load, store or persist graphs: build them in memory with `networkx` and pass
them in. It does not report progress while an algorithm runs.