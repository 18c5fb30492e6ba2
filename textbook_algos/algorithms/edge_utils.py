"""Utilities for validating edge records and building adjacency arrays."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Dict, List, Tuple

import numpy as np

from ..errors import InvalidArgument
from .common.validation import is_nan, is_numeric

COLUMN_NAMES = ("v1", "v2", "w")


@dataclass(frozen=True)
class Edge:
    """Directed edge ``source -> target`` with a non-negative weight."""

    source: float
    target: float
    weight: float

    def __post_init__(self) -> None:
        for name in ("source", "target"):
            value = getattr(self, name)
            if not is_numeric(value) or is_nan(value):
                raise InvalidArgument(f"Edge {name} must be a numeric node id, got {value!r}.")
        if not is_numeric(self.weight) or is_nan(self.weight):
            raise InvalidArgument(f"Edge weight must be numeric, got {self.weight!r}.")
        try:
            float(self.weight)
        except OverflowError:
            raise InvalidArgument(f"Edge weight does not fit in a float: {self.weight!r}.") from None
        # relaxation is only exact for non-negative weights
        if self.weight < 0:
            raise InvalidArgument(
                f"Edge weight must be non-negative, got {self.weight!r} "
                f"on {self.source!r} -> {self.target!r}."
            )


def _to_python_scalar(value):
    if isinstance(value, np.generic):
        return value.item()
    return value


def _coerce_edge(record) -> Edge:
    if isinstance(record, Edge):
        return record
    if isinstance(record, (str, bytes)) or not isinstance(record, (Sequence, np.ndarray)):
        raise InvalidArgument(f"Edge records must be (v1, v2, w) triples, got {record!r}.")
    if isinstance(record, np.ndarray) and record.ndim != 1:
        raise InvalidArgument(f"Edge records must be 1-D, got an array of shape {record.shape}.")
    if len(record) != 3:
        raise InvalidArgument(f"Edge records must have exactly 3 items, got {len(record)}: {record!r}.")
    return Edge(*(_to_python_scalar(item) for item in record))


def _records_from_columns(graph: Mapping) -> list:
    missing = [name for name in COLUMN_NAMES if name not in graph]
    if missing:
        raise InvalidArgument(f"Graph must have columns v1, v2 and w; missing {missing}.")

    try:
        columns = [list(graph[name]) for name in COLUMN_NAMES]
    except TypeError as exc:
        raise InvalidArgument("Graph columns v1, v2 and w must be sequences.") from exc

    lengths = {len(column) for column in columns}
    if len(lengths) != 1:
        raise InvalidArgument(f"Graph columns must have equal lengths, got {[len(c) for c in columns]}.")

    return list(zip(*columns))


def build_edge_list(graph) -> List[Edge]:
    """Validate a graph and return its edges as ``Edge`` records.

    Accepts a sequence of ``(v1, v2, w)`` records, an ``(m, 3)`` array, or a
    column mapping with keys ``v1``, ``v2`` and ``w``.
    """

    if isinstance(graph, Mapping):
        records = _records_from_columns(graph)
    elif isinstance(graph, np.ndarray):
        if graph.ndim != 2 or graph.shape[1] != 3:
            raise InvalidArgument(f"Graph array must have shape (m, 3), got {graph.shape}.")
        records = graph.tolist()
    elif isinstance(graph, (str, bytes)) or not isinstance(graph, Sequence):
        raise InvalidArgument(
            f"Graph must be a sequence of (v1, v2, w) records, got {type(graph).__name__}."
        )
    else:
        records = graph

    if len(records) == 0:
        raise InvalidArgument("Graph must contain at least one edge.")

    return [_coerce_edge(record) for record in records]


def build_node_index(edges: List[Edge]) -> Tuple[list, Dict]:
    """Return the ascending node list and a node -> dense index mapping."""

    nodes = sorted({edge.source for edge in edges} | {edge.target for edge in edges})
    index = {node: idx for idx, node in enumerate(nodes)}
    return nodes, index


def resolve_node(index: Dict, node, name: str) -> int:
    """Dense index of ``node``; raises ``InvalidArgument`` if it is not in the graph."""

    if not is_numeric(node):
        raise InvalidArgument(f"{name} must be a numeric value present in graph, got {node!r}.")
    try:
        return index[_to_python_scalar(node)]
    except KeyError:
        raise InvalidArgument(f"{name} must be a numeric value present in graph, got {node!r}.") from None


def build_csr_adjacency(edges: List[Edge], index: Dict) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Group edges by source into CSR arrays ``(indptr, indices, weights)``.

    Outgoing edges of node ``u`` are ``indices[indptr[u]:indptr[u + 1]]``,
    kept in input order.
    """

    n_nodes = len(index)
    m = len(edges)

    edge_src = np.empty(m, dtype=np.int64)
    edge_dst = np.empty(m, dtype=np.int64)
    edge_weight = np.empty(m, dtype=np.float64)

    for idx, edge in enumerate(edges):
        edge_src[idx] = index[edge.source]
        edge_dst[idx] = index[edge.target]
        edge_weight[idx] = edge.weight

    order = np.argsort(edge_src, kind="stable")
    indices = edge_dst[order]
    weights = edge_weight[order]

    indptr = np.zeros(n_nodes + 1, dtype=np.int64)
    indptr[1:] = np.cumsum(np.bincount(edge_src, minlength=n_nodes))

    return indptr, indices, weights
