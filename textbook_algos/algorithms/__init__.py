"""Textbook algorithms: Euclidean GCD and Dijkstra shortest paths."""

from .euclidean import euclidean
from .dijkstra import dijkstra, dijkstra_shortest_path, dijkstra_heap, dijkstra_linear_scan
from .edge_utils import Edge, build_csr_adjacency, build_edge_list, build_node_index
from .path_cost import compute_path_travel_cost

__all__ = [
    "euclidean",
    "dijkstra",
    "dijkstra_shortest_path",
    "dijkstra_heap",
    "dijkstra_linear_scan",
    "Edge",
    "build_edge_list",
    "build_node_index",
    "build_csr_adjacency",
    "compute_path_travel_cost",
]
