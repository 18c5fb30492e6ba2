"""Dijkstra single-source shortest paths over a directed weighted edge list."""

import heapq
from typing import Dict, List, Tuple

import numpy as np
from numba import njit

from ..errors import InvalidArgument
from .edge_utils import build_csr_adjacency, build_edge_list, build_node_index, resolve_node

METHODS = ("heap", "linear")


@njit
def dijkstra_linear_scan(
    indptr: np.ndarray,
    indices: np.ndarray,
    weights: np.ndarray,
    source: int,
) -> tuple:
    """Compute single-source distances using O(n^2) Dijkstra on CSR adjacency."""

    n_nodes = indptr.shape[0] - 1
    dist = np.full(n_nodes, np.inf)
    prev = np.full(n_nodes, -1, dtype=np.int64)
    order = np.full(n_nodes, -1, dtype=np.int64)
    visited = np.zeros(n_nodes, dtype=np.bool_)

    dist[source] = 0.0

    for step in range(n_nodes):
        u = -1
        min_val = np.inf
        for i in range(n_nodes):
            if (not visited[i]) and (dist[i] < min_val):
                min_val = dist[i]
                u = i

        if u == -1:
            break

        visited[u] = True
        order[step] = u
        for e in range(indptr[u], indptr[u + 1]):
            v = indices[e]
            alt = dist[u] + weights[e]
            if alt < dist[v]:
                dist[v] = alt
                prev[v] = u

    return dist, prev, order


def dijkstra_heap(
    indptr: np.ndarray,
    indices: np.ndarray,
    weights: np.ndarray,
    source: int,
) -> tuple:
    """Compute single-source distances using a binary heap with lazy insertion.

    A node may sit in the heap several times; only its first pop counts and
    later (stale) entries are skipped. Entries are ``(distance, index)`` so
    ties pop the lowest index first, matching ``dijkstra_linear_scan``.
    """

    n_nodes = indptr.shape[0] - 1
    dist = np.full(n_nodes, np.inf)
    prev = np.full(n_nodes, -1, dtype=np.int64)
    order = np.full(n_nodes, -1, dtype=np.int64)
    visited = np.zeros(n_nodes, dtype=np.bool_)

    dist[source] = 0.0
    heap = [(0.0, source)]
    n_finalized = 0

    while heap:
        d, u = heapq.heappop(heap)
        if visited[u]:
            continue

        visited[u] = True
        order[n_finalized] = u
        n_finalized += 1
        for e in range(indptr[u], indptr[u + 1]):
            v = int(indices[e])
            alt = d + float(weights[e])
            if alt < dist[v]:
                dist[v] = alt
                prev[v] = u
                heapq.heappush(heap, (alt, v))

    return dist, prev, order


def _prepare(graph, init_node, method: str) -> tuple:
    if method not in METHODS:
        raise InvalidArgument(f"method must be one of {METHODS}, got {method!r}.")

    edges = build_edge_list(graph)
    nodes, index = build_node_index(edges)
    source = resolve_node(index, init_node, "init_node")
    return edges, nodes, index, source


def _solve(edges, index: Dict, source: int, method: str) -> tuple:
    indptr, indices, weights = build_csr_adjacency(edges, index)
    kernel = dijkstra_heap if method == "heap" else dijkstra_linear_scan
    return kernel(indptr, indices, weights, source)


def _print_trace(init_node, method: str, nodes: list, dist: np.ndarray, order: np.ndarray) -> None:
    print(f"\n===== DIJKSTRA from {init_node!r} ({method}) =====")
    print("step |     node     |  distance")
    for step, u in enumerate(order):
        if u < 0:
            break
        print(f"{step:4d} | {nodes[u]!s:>12} | {dist[u]:9.2f}")
    n_unreachable = int(np.sum(order < 0))
    if n_unreachable:
        print(f"{n_unreachable} node(s) unreachable.")


def dijkstra(graph, init_node, method: str = "heap", debug: bool = False) -> Dict:
    """Shortest distance from ``init_node`` to every node of ``graph``.

    Args:
        graph: ``(v1, v2, w)`` edge records, an ``(m, 3)`` array, or a
            mapping of ``v1``/``v2``/``w`` columns. Weights must be
            non-negative.
        init_node: Source node; must be an endpoint of some edge.
        method: ``"heap"`` for the binary-heap frontier, ``"linear"`` for the
            numba-compiled linear-scan frontier.
        debug: Print the order in which nodes are finalized.

    Returns:
        Dict of node -> distance in ascending node order. Unreachable nodes
        map to ``inf``.
    """

    edges, nodes, index, source = _prepare(graph, init_node, method)
    dist, _, order = _solve(edges, index, source, method)

    if debug:
        _print_trace(init_node, method, nodes, dist, order)

    return {node: float(dist[idx]) for idx, node in enumerate(nodes)}


def dijkstra_shortest_path(graph, source, target, method: str = "heap") -> Tuple[float, List]:
    """Return ``(cost, path)`` of the shortest ``source -> target`` path.

    ``path`` lists node ids from source to target. An unreachable target
    gives ``(inf, [])``.
    """

    edges, nodes, index, source_idx = _prepare(graph, source, method)
    target_idx = resolve_node(index, target, "target")
    dist, prev, _ = _solve(edges, index, source_idx, method)

    if dist[target_idx] == np.inf:
        return np.inf, []

    path = []
    cur = target_idx
    while cur != -1:
        path.append(nodes[cur])
        cur = int(prev[cur])
    path.reverse()

    return float(dist[target_idx]), path
