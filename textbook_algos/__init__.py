"""Euclidean GCD and Dijkstra shortest paths, with plotting helpers."""

from .errors import InvalidArgument
from .algorithms import (
    euclidean,
    dijkstra,
    dijkstra_shortest_path,
    compute_path_travel_cost,
    Edge,
    build_edge_list,
)
from .fake_data import generate_random_weighted_graph, wiki_example_graph
from .visualize import visualize_shortest_path_distances
from .visualize_html import combine_figures, export_figures_to_html

__all__ = [
    "InvalidArgument",
    "euclidean",
    "dijkstra",
    "dijkstra_shortest_path",
    "compute_path_travel_cost",
    "Edge",
    "build_edge_list",
    "generate_random_weighted_graph",
    "wiki_example_graph",
    "visualize_shortest_path_distances",
    "combine_figures",
    "export_figures_to_html",
]
