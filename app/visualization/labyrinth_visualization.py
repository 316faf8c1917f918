import plotly.graph_objects as go
from typing import List, Sequence

from app.models import Point


def generate_labyrinth_visualization(matrix: Sequence[Sequence[int]], path: List[Point]):
    """Generate a Plotly figure of the matrix with a path drawn on top."""
    size = len(matrix)

    fig = go.Figure()
    fig.add_trace(go.Heatmap(
        z=[list(row) for row in matrix],
        zmin=-1, zmax=2,
        colorscale=[[0.0, "black"], [0.33, "white"], [0.66, "green"], [1.0, "red"]],
        showscale=False,
        name="Cells"
    ))

    # plotted as (column, row) so the heatmap and the path line up
    fig.add_trace(go.Scatter(
        x=[p.column for p in path],
        y=[p.row for p in path],
        mode="lines+markers",
        line=dict(width=4, color="orange"),
        marker=dict(size=10, color="orange"),
        name="Path"
    ))

    fig.update_layout(
        title=f"Labyrinth {size}x{size}, path length {max(len(path) - 1, 0)}",
        showlegend=True,
        plot_bgcolor="white",
        xaxis=dict(visible=False),
        yaxis=dict(visible=False, autorange="reversed"),
        height=600
    )

    return fig
