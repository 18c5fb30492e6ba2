"""Plotly-based visualization helpers for shortest-path results."""

from typing import Dict, Optional, Sequence

import networkx as nx
import numpy as np
import plotly.graph_objects as go

from .algorithms.edge_utils import build_edge_list


def _layout_positions(G: nx.DiGraph, seed: int) -> Dict[object, np.ndarray]:
    if G.number_of_nodes() <= 12:
        return nx.circular_layout(G)
    return nx.spring_layout(G, seed=seed)


def _edge_line_trace(pos: Dict, edges: Sequence, color: str, width: float, name: str) -> go.Scatter:
    x_lines: list = []
    y_lines: list = []
    for u, v in edges:
        x_lines += [pos[u][0], pos[v][0], None]
        y_lines += [pos[u][1], pos[v][1], None]

    return go.Scatter(
        x=x_lines,
        y=y_lines,
        mode="lines",
        line=dict(width=width, color=color),
        name=name,
        hoverinfo="skip",
    )


def visualize_shortest_path_distances(
    graph,
    distances: Dict,
    source,
    path: Optional[Sequence] = None,
    node_size: int = 22,
    title: str = "Shortest-path distances",
    return_fig: bool = False,
    seed: int = 42,
):
    """
    Draw the graph with every node colored by its distance from ``source``.

    Args:
        graph: Edge records accepted by ``build_edge_list``
        distances: Node -> distance mapping as returned by ``dijkstra``
        source: Source node, drawn with a larger marker
        path: Optional node sequence to highlight
        return_fig: Return the figure instead of showing it
    """

    G = nx.DiGraph()
    for edge in build_edge_list(graph):
        G.add_edge(edge.source, edge.target, weight=edge.weight)
    assert set(distances) <= set(G.nodes), "distances must only refer to nodes of graph"
    pos = _layout_positions(G, seed)

    traces = [_edge_line_trace(pos, list(G.edges()), "#c8c8c8", 1.5, "edges")]

    if path is not None and len(path) >= 2:
        path_edges = list(zip(path[:-1], path[1:]))
        traces.append(_edge_line_trace(pos, path_edges, "#d62728", 4.0, "path"))

    nodes = list(distances.keys())
    reachable = [node for node in nodes if distances[node] != np.inf]
    unreachable = [node for node in nodes if distances[node] == np.inf]

    traces.append(
        go.Scatter(
            x=[pos[node][0] for node in reachable],
            y=[pos[node][1] for node in reachable],
            mode="markers+text",
            text=[str(node) for node in reachable],
            textposition="middle center",
            marker=dict(
                size=[node_size * 1.5 if node == source else node_size for node in reachable],
                color=[distances[node] for node in reachable],
                colorscale="Viridis",
                showscale=True,
                colorbar=dict(title="distance"),
                line=dict(width=1, color="#333333"),
            ),
            name="reachable",
            hoverinfo="text",
            hovertext=[f"node {node}: {distances[node]:.2f}" for node in reachable],
        )
    )

    if unreachable:
        traces.append(
            go.Scatter(
                x=[pos[node][0] for node in unreachable],
                y=[pos[node][1] for node in unreachable],
                mode="markers+text",
                text=[str(node) for node in unreachable],
                textposition="middle center",
                marker=dict(size=node_size, color="#eeeeee", line=dict(width=1, color="#999999")),
                name="unreachable",
                hoverinfo="text",
                hovertext=[f"node {node}: unreachable" for node in unreachable],
            )
        )

    fig = go.Figure(data=traces)
    fig.update_layout(
        title=title,
        showlegend=True,
        xaxis=dict(visible=False),
        yaxis=dict(visible=False, scaleanchor="x"),
        plot_bgcolor="white",
    )

    if return_fig:
        return fig
    fig.show()
