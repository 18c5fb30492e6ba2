"""
Dijkstra Shortest Path Tests
============================

Covers the example graph, unreachable nodes, tie-breaking, both frontier
implementations, path reconstruction and eager argument validation.
"""

import importlib

import networkx as nx
import numpy as np
import pytest

from textbook_algos.algorithms import compute_path_travel_cost, dijkstra, dijkstra_shortest_path
from textbook_algos.errors import InvalidArgument
from textbook_algos.fake_data import generate_random_weighted_graph, wiki_example_graph

# the package re-exports a function of the same name
dijkstra_module = importlib.import_module("textbook_algos.algorithms.dijkstra")

METHODS = ["heap", "linear"]


@pytest.fixture
def wiki_graph():
    return wiki_example_graph()


@pytest.mark.parametrize("method", METHODS)
class TestDijkstraDistances:

    def test_example_graph(self, wiki_graph, method):
        dist = dijkstra(wiki_graph, 1, method=method)
        assert list(dist.keys()) == [1, 2, 3, 4, 5, 6]
        assert list(dist.values()) == [0, 7, 9, 20, 20, 11]

    def test_source_distance_is_zero(self, wiki_graph, method):
        for source in range(1, 7):
            assert dijkstra(wiki_graph, source, method=method)[source] == 0

    def test_unreachable_nodes_are_infinite(self, method):
        graph = [(1, 2, 1.0), (3, 4, 1.0)]
        dist = dijkstra(graph, 1, method=method)
        assert dist == {1: 0.0, 2: 1.0, 3: np.inf, 4: np.inf}

    def test_source_with_only_incoming_edges(self, method):
        dist = dijkstra([(2, 1, 5)], 1, method=method)
        assert dist == {1: 0.0, 2: np.inf}

    def test_directed_edges_only_followed_forward(self, method):
        dist = dijkstra([(1, 2, 3), (3, 2, 1)], 1, method=method)
        assert dist[3] == np.inf

    def test_parallel_edges_use_cheapest(self, method):
        dist = dijkstra([(1, 2, 5), (1, 2, 2), (1, 2, 9)], 1, method=method)
        assert dist[2] == 2

    def test_zero_weight_edges_and_self_loops(self, method):
        dist = dijkstra([(1, 1, 3), (1, 2, 0), (2, 3, 0)], 1, method=method)
        assert dist == {1: 0.0, 2: 0.0, 3: 0.0}

    def test_infinite_weight_edge_does_not_connect(self, method):
        dist = dijkstra([(1, 2, np.inf), (1, 3, 1)], 1, method=method)
        assert dist[2] == np.inf
        assert dist[3] == 1

    def test_column_mapping_input(self, wiki_graph, method):
        v1, v2, w = (list(col) for col in zip(*wiki_graph))
        dist = dijkstra({"v1": v1, "v2": v2, "w": w}, 1, method=method)
        assert list(dist.values()) == [0, 7, 9, 20, 20, 11]

    def test_numpy_array_input(self, wiki_graph, method):
        dist = dijkstra(np.array(wiki_graph, dtype=np.float64), 1.0, method=method)
        assert list(dist.values()) == [0, 7, 9, 20, 20, 11]

    def test_float_node_ids(self, method):
        dist = dijkstra([(0.5, 1.5, 2.0), (1.5, 2.5, 0.25)], 0.5, method=method)
        assert dist == {0.5: 0.0, 1.5: 2.0, 2.5: 2.25}


class TestFrontierAgreement:

    @pytest.mark.parametrize("seed", [0, 1, 2, 3])
    def test_heap_and_linear_agree(self, seed):
        edges = generate_random_weighted_graph(n_nodes=25, edge_probability=0.15, seed=seed)["edges"]
        assert dijkstra(edges, 0, method="heap") == dijkstra(edges, 0, method="linear")

    @pytest.mark.parametrize("seed", [0, 1, 2, 3])
    def test_matches_networkx(self, seed):
        data = generate_random_weighted_graph(n_nodes=25, edge_probability=0.15, seed=seed)
        dist = dijkstra(data["edges"], 0)
        reference = nx.single_source_dijkstra_path_length(data["graph"], 0, weight="weight")
        for node, d in dist.items():
            assert d == pytest.approx(reference.get(node, np.inf))


class TestShortestPath:

    @pytest.mark.parametrize("method", METHODS)
    def test_example_path(self, wiki_graph, method):
        cost, path = dijkstra_shortest_path(wiki_graph, 1, 5, method=method)
        assert cost == 20
        assert path == [1, 3, 6, 5]

    def test_source_equals_target(self, wiki_graph):
        assert dijkstra_shortest_path(wiki_graph, 4, 4) == (0.0, [4])

    def test_unreachable_target(self):
        cost, path = dijkstra_shortest_path([(1, 2, 1), (3, 4, 1)], 1, 4)
        assert cost == np.inf
        assert path == []

    @pytest.mark.parametrize("method", METHODS)
    def test_ties_prefer_lowest_node_id(self, method):
        graph = [(1, 3, 1), (1, 2, 1), (3, 4, 1), (2, 4, 1)]
        assert dijkstra_shortest_path(graph, 1, 4, method=method) == (2.0, [1, 2, 4])

    @pytest.mark.parametrize("seed", [5, 6, 7])
    def test_path_cost_matches_distance(self, seed):
        edges = generate_random_weighted_graph(n_nodes=20, edge_probability=0.2, seed=seed)["edges"]
        dist = dijkstra(edges, 0)
        for target, d in dist.items():
            cost, path = dijkstra_shortest_path(edges, 0, target)
            assert cost == d
            if d == np.inf:
                assert path == []
            else:
                assert path[0] == 0 and path[-1] == target
                assert compute_path_travel_cost(path, edges) == pytest.approx(d)

    def test_target_absent_rejected(self, wiki_graph):
        with pytest.raises(InvalidArgument):
            dijkstra_shortest_path(wiki_graph, 1, 42)


class TestDebugTrace:

    def test_trace_lists_finalized_nodes(self, wiki_graph, capsys):
        dijkstra(wiki_graph, 1, debug=True)
        out = capsys.readouterr().out
        assert "DIJKSTRA from 1 (heap)" in out
        assert len([line for line in out.splitlines() if line.strip()[:1].isdigit()]) == 6

    def test_trace_reports_unreachable(self, capsys):
        dijkstra([(1, 2, 1), (3, 4, 1)], 1, method="linear", debug=True)
        assert "2 node(s) unreachable." in capsys.readouterr().out

    def test_silent_by_default(self, wiki_graph, capsys):
        dijkstra(wiki_graph, 1)
        assert capsys.readouterr().out == ""


class TestDijkstraValidation:

    @pytest.mark.parametrize("init_node", [42, 0, 1.5, "1", None, True])
    def test_bad_source_rejected(self, wiki_graph, init_node):
        with pytest.raises(InvalidArgument):
            dijkstra(wiki_graph, init_node)

    @pytest.mark.parametrize("graph", [
        [],
        None,
        "1 2 3",
        42,
        [(1, 2)],
        [(1, 2, 3, 4)],
        [(1, "2", 3)],
        [(1, 2, "w")],
        [(1, 2, float("nan"))],
        [(1, 2, -1)],
        [(1, 2, 3), (2, 1, -0.5)],
        {"v1": [1], "v2": [2]},
        {"v1": [1, 2], "v2": [2], "w": [1, 1]},
        np.zeros((3, 2)),
        [np.array(5)],
        [np.array([[1, 2, 3]])],
        [(1, 2, 10 ** 400)],
    ])
    def test_malformed_graph_rejected(self, graph):
        with pytest.raises(InvalidArgument):
            dijkstra(graph, 1)

    def test_unknown_method_rejected(self, wiki_graph):
        with pytest.raises(InvalidArgument):
            dijkstra(wiki_graph, 1, method="fibonacci")

    def test_validation_happens_before_traversal(self, wiki_graph, monkeypatch):
        def fail(*args, **kwargs):
            raise AssertionError("traversal started")

        monkeypatch.setattr(dijkstra_module, "build_csr_adjacency", fail)
        with pytest.raises(InvalidArgument):
            dijkstra(wiki_graph, 99)
        with pytest.raises(InvalidArgument):
            dijkstra_shortest_path(wiki_graph, 1, 99)

    def test_oversized_integer_weight_rejected_before_traversal(self, monkeypatch):
        def fail(*args, **kwargs):
            raise AssertionError("traversal started")

        monkeypatch.setattr(dijkstra_module, "build_csr_adjacency", fail)
        with pytest.raises(InvalidArgument, match="float"):
            dijkstra([(1, 2, 10 ** 400)], 1)
