"""Stack several Plotly figures into one standalone HTML page."""

import os
from typing import List, Tuple

import plotly.graph_objects as go
from plotly.subplots import make_subplots


def combine_figures(
    figures: List[Tuple[str, go.Figure]],
    title: str = "Shortest Path Results",
    row_height: int = 520,
) -> go.Figure:
    """Copy the traces of each figure into its own row of a single figure."""

    assert len(figures) > 0, "figures must not be empty"

    n_rows = len(figures)
    combined = make_subplots(
        rows=n_rows,
        cols=1,
        subplot_titles=[name for name, _ in figures],
        vertical_spacing=0.08 if n_rows > 1 else 0.0,
    )

    for row, (_, fig) in enumerate(figures, start=1):
        for trace in fig.data:
            trace = go.Scatter(trace)
            # colorbars of stacked rows overlap
            trace.marker.showscale = False
            combined.add_trace(trace, row=row, col=1)
        combined.update_xaxes(visible=False, row=row, col=1)
        combined.update_yaxes(visible=False, row=row, col=1)

    combined.update_layout(
        title=title,
        height=row_height * n_rows,
        showlegend=False,
        plot_bgcolor="white",
    )
    return combined


def export_figures_to_html(
    figures: List[Tuple[str, go.Figure]],
    output_path: str,
    title: str = "Shortest Path Results",
) -> str:
    """Write ``figures`` to ``output_path`` as one page; returns the absolute path."""

    output_path = os.path.abspath(output_path)
    combine_figures(figures, title=title).write_html(output_path, include_plotlyjs="cdn")
    print(f"Saved visualization to: {output_path}")
    return output_path
