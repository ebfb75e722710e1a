"""Global sidebar: lot summary and quick status."""

import streamlit as st
from dataclasses import dataclass
from data.session_store import get_lot, get_layout


@dataclass
class SidebarState:
    num_floors: int
    total_spots: int
    show_empty_floors: bool


def render_sidebar() -> SidebarState:
    """Render the global sidebar controls and return current state."""
    lot = get_lot()
    layout = get_layout()

    with st.sidebar:
        st.title("Parking Lot")
        st.divider()

        st.caption(f"Floors: {lot.num_floors}")
        st.caption(f"Spots: {lot.total_capacity}")
        st.caption(f"Vehicles parked: {lot.parked_count()}")

        if lot.is_full():
            st.error("Lot is full")
        else:
            st.success(f"{sum(lot.available_per_floor())} spots available")

        st.divider()
        show_empty = st.checkbox(
            "Show floors without spots",
            value=False,
            key="sidebar_show_empty",
            disabled=0 not in layout,
        )

    return SidebarState(
        num_floors=lot.num_floors,
        total_spots=lot.total_capacity,
        show_empty_floors=show_empty,
    )
