"""Tests for explicit path cost computation."""

import numpy as np
import pytest

from textbook_algos.algorithms import compute_path_travel_cost
from textbook_algos.errors import InvalidArgument
from textbook_algos.fake_data import wiki_example_graph


def test_sums_edge_weights():
    assert compute_path_travel_cost([1, 3, 6, 5], wiki_example_graph()) == 20.0


def test_missing_hop_is_infinite():
    assert compute_path_travel_cost([1, 4], wiki_example_graph()) == np.inf


def test_trivial_paths_cost_nothing():
    graph = wiki_example_graph()
    assert compute_path_travel_cost([1], graph) == 0.0
    assert compute_path_travel_cost([], graph) == 0.0


def test_cheapest_parallel_edge_used():
    graph = [(1, 2, 5.0), (1, 2, 1.5), (2, 3, 1.0)]
    assert compute_path_travel_cost([1, 2, 3], graph) == 2.5


def test_oversized_weight_rejected():
    with pytest.raises(InvalidArgument):
        compute_path_travel_cost([1, 2], [(1, 2, 10 ** 400)])
