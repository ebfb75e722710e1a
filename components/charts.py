"""Plotly chart builders for the Parking Allocation Platform."""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd
from typing import List


def availability_bar(
    floor_occupancy: List[dict],
    title: str = "Spots by Floor",
) -> go.Figure:
    """Stacked bar of occupied vs available spots per floor."""
    df = pd.DataFrame(floor_occupancy)
    df["floor"] = "Floor " + df["floor_index"].astype(str)
    fig = px.bar(
        df, x="floor", y=["occupied_spots", "available_spots"],
        labels={"value": "Spots", "floor": "Floor", "variable": ""},
        title=title,
        color_discrete_map={"occupied_spots": "#E8734A", "available_spots": "#4A90D9"},
    )
    fig.update_layout(legend_title_text="", height=400, barmode="stack")
    return fig


def occupancy_donut(occupied: int, total: int, title: str = "Overall Occupancy") -> go.Figure:
    """Donut chart showing overall spot occupancy."""
    available = total - occupied
    fig = go.Figure(data=[go.Pie(
        labels=["Occupied", "Available"],
        values=[occupied, available],
        hole=0.6,
        marker_colors=["#E8734A", "#4A90D9"],
        textinfo="percent+label",
    )])
    fig.update_layout(
        title=title,
        height=350,
        showlegend=True,
        annotations=[dict(text=f"{occupied}/{total}", x=0.5, y=0.5, font_size=16, showarrow=False)],
    )
    return fig


def spot_grid_heatmap(
    grid: List[List[int]],
    labels: List[List[str]],
    floor_indexes: List[int],
) -> go.Figure:
    """Heatmap of every spot: floors on the y axis, spot index on the x axis."""
    floors = [f"Floor {i}" for i in floor_indexes]
    width = len(grid[0]) if grid else 0

    fig = go.Figure(data=go.Heatmap(
        z=grid,
        x=list(range(width)),
        y=floors,
        text=labels,
        texttemplate="%{text}",
        colorscale=[[0.0, "#EEEEEE"], [0.5, "#4A90D9"], [1.0, "#E8734A"]],
        zmin=-1, zmax=1,
        showscale=False,
        xgap=2, ygap=2,
        hovertemplate="%{y}<br>Spot %{x}<br>%{text}<extra></extra>",
    ))
    fig.update_layout(
        title="Spot Map",
        xaxis_title="Spot",
        yaxis_title="",
        yaxis_autorange="reversed",
        height=max(250, len(grid) * 60),
    )
    return fig
