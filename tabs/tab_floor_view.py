"""Tab 2: Floor View — per-floor availability and the spot map."""

import streamlit as st

from data.session_store import get_lot
from engine.occupancy import (
    get_floor_occupancy, occupancy_dataframe, spot_grid, get_capacity_alerts,
)
from components.charts import availability_bar, occupancy_donut, spot_grid_heatmap
from components.metrics_cards import render_alert
from components.tables import render_styled_table


def _spot_labels(snapshot):
    width = max((f["capacity"] for f in snapshot), default=0)
    labels = []
    for floor in snapshot:
        row = []
        for oid in floor["spots"]:
            if oid is None:
                row.append("")
            else:
                category = floor["categories"].get(oid) or ""
                row.append(f"{oid} {category[:1]}".strip())
        row.extend(["—"] * (width - len(row)))
        labels.append(row)
    return labels


def render(sidebar_state):
    """Render the Floor View tab."""
    st.header("Floor View")

    snapshot = get_lot().snapshot()
    if not sidebar_state.show_empty_floors:
        snapshot = [f for f in snapshot if f["capacity"] > 0]
    if not snapshot:
        st.info("No floors with spots to display.")
        return

    floor_occ = get_floor_occupancy(snapshot)

    for alert in get_capacity_alerts(floor_occ):
        render_alert(alert["message"], alert["severity"])

    col1, col2 = st.columns([3, 2])
    with col1:
        st.plotly_chart(availability_bar(floor_occ), use_container_width=True)
    with col2:
        total = sum(f["total_spots"] for f in floor_occ)
        occupied = sum(f["occupied_spots"] for f in floor_occ)
        st.plotly_chart(occupancy_donut(occupied, total), use_container_width=True)

    st.divider()

    st.subheader("Spot Map")
    grid = spot_grid(snapshot)
    if grid and grid[0]:
        floor_indexes = [f["floor_index"] for f in snapshot]
        fig = spot_grid_heatmap(grid, _spot_labels(snapshot), floor_indexes)
        st.plotly_chart(fig, use_container_width=True)

    st.divider()

    df = occupancy_dataframe(floor_occ)
    df["Occupancy"] = df["Occupancy"].map(lambda v: f"{v:.0%}")
    render_styled_table(df, title="Floor Detail", height=400)
