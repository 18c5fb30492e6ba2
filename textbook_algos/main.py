"""Demo entry point: GCD examples and Dijkstra on example and random graphs."""

import os

import networkx as nx
import numpy as np

from .fake_data import generate_random_weighted_graph, wiki_example_graph
from .visualize import visualize_shortest_path_distances
from .visualize_html import export_figures_to_html
from .algorithms import dijkstra, dijkstra_shortest_path, euclidean


def main() -> None:
    # Parameters
    gcd_pairs = [(100, 1000), (123612, 13892347912), (-48, 18), (0, 7)]
    wiki_source = 1
    wiki_target = 5
    random_n_nodes = 30
    random_edge_probability = 0.12
    seed = 42

    # ============================================================
    # 1. Euclidean GCD
    # ============================================================
    print("=== Euclidean GCD ===")
    for a, b in gcd_pairs:
        print(f"  gcd({a}, {b}) = {euclidean(a, b)}")

    # ============================================================
    # 2. Dijkstra on the example graph, both frontiers
    # ============================================================
    print("\n=== Dijkstra: Example Graph ===")
    wiki_graph = wiki_example_graph()
    wiki_dist = dijkstra(wiki_graph, wiki_source, debug=True)
    wiki_dist_linear = dijkstra(wiki_graph, wiki_source, method="linear")
    print(f"  Distances from {wiki_source}: {list(wiki_dist.values())}")
    print(f"  Heap and linear frontiers agree: {wiki_dist == wiki_dist_linear}")

    wiki_cost, wiki_path = dijkstra_shortest_path(wiki_graph, wiki_source, wiki_target)
    print(f"  Shortest path {wiki_source} -> {wiki_target}: {wiki_path} (cost {wiki_cost:.2f})")

    # ============================================================
    # 3. Dijkstra on a random graph, cross-checked with networkx
    # ============================================================
    print("\n=== Dijkstra: Random Graph ===")
    data = generate_random_weighted_graph(
        n_nodes=random_n_nodes,
        edge_probability=random_edge_probability,
        seed=seed,
    )
    print(f"  {data['n_nodes']} nodes, {data['n_edges']} edges")

    random_dist = dijkstra(data["edges"], 0)
    reference = nx.single_source_dijkstra_path_length(data["graph"], 0, weight="weight")
    n_reachable = sum(1 for d in random_dist.values() if d != np.inf)
    max_error = max(abs(random_dist[node] - d) for node, d in reference.items())
    print(f"  Reachable from 0: {n_reachable}/{len(random_dist)}")
    print(f"  Max deviation from networkx: {max_error:.3e}")

    # ============================================================
    # 4. Visualizations
    # ============================================================
    print("\n=== Building Visualizations ===")
    figures = [
        ("Example Graph", visualize_shortest_path_distances(
            wiki_graph, wiki_dist, wiki_source,
            path=wiki_path,
            title=f"Example graph: distances from {wiki_source}",
            return_fig=True,
        )),
        ("Random Graph", visualize_shortest_path_distances(
            data["edges"], random_dist, 0,
            title="Random graph: distances from 0",
            return_fig=True,
            seed=seed,
        )),
    ]

    output_path = os.path.join(os.getcwd(), "results.html")
    export_figures_to_html(
        figures,
        output_path,
        title="Euclidean GCD and Dijkstra Shortest Paths",
    )


if __name__ == "__main__":
    main()
