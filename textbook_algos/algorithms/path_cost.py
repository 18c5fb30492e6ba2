"""Utilities for computing the travel cost of an explicit node path."""

from typing import Dict, Sequence, Tuple

import numpy as np

from .edge_utils import build_edge_list


def _cheapest_edge_weights(graph) -> Dict[Tuple, float]:
    cheapest: Dict[Tuple, float] = {}
    for edge in build_edge_list(graph):
        key = (edge.source, edge.target)
        weight = float(edge.weight)
        if weight < cheapest.get(key, np.inf):
            cheapest[key] = weight
    return cheapest


def compute_path_travel_cost(path: Sequence, graph) -> float:
    """Sum edge weights along ``path``, taking the cheapest parallel edge per hop.

    Returns ``inf`` when two consecutive nodes are not joined by an edge.
    """

    cheapest = _cheapest_edge_weights(graph)

    total = 0.0
    for u, v in zip(path[:-1], path[1:]):
        weight = cheapest.get((u, v), np.inf)
        if weight == np.inf:
            return np.inf
        total += weight

    return total
