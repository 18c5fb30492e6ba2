"""Example and synthetic weighted graph generation utilities."""

from typing import Dict, List, Tuple

import networkx as nx
import numpy as np


def wiki_example_graph() -> List[Tuple[int, int, int]]:
    """Six-node undirected example graph, given as directed edges both ways."""

    v1 = [1, 1, 1, 2, 2, 2, 3, 3, 3, 3, 4, 4, 4, 5, 5, 6, 6, 6]
    v2 = [2, 3, 6, 1, 3, 4, 1, 2, 4, 6, 2, 3, 5, 4, 6, 1, 3, 5]
    w = [7, 9, 14, 7, 10, 15, 9, 10, 11, 2, 15, 11, 6, 6, 9, 14, 2, 9]
    return list(zip(v1, v2, w))


def generate_random_weighted_graph(
    n_nodes: int = 30,
    edge_probability: float = 0.15,
    weight_low: float = 1.0,
    weight_high: float = 10.0,
    seed: int = 42,
) -> Dict[str, object]:
    """Generate a random directed graph with uniform non-negative edge weights."""

    rng = np.random.default_rng(seed)

    # =============== 1. Random directed topology ===============
    G = nx.gnp_random_graph(n_nodes, edge_probability, seed=seed, directed=True)

    # Node 0 needs an incident edge to be usable as a source
    if n_nodes > 1 and G.degree(0) == 0:
        G.add_edge(0, 1)

    # =============== 2. Edge weights ===============
    edges = []
    for u, v in G.edges():
        weight = float(rng.uniform(weight_low, weight_high))
        G[u][v]["weight"] = weight
        edges.append((u, v, weight))

    return dict(
        graph=G,
        edges=edges,
        n_nodes=G.number_of_nodes(),
        n_edges=G.number_of_edges(),
    )
