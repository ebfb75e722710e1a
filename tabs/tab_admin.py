"""Tab 4: Admin — lot dimensions, layout upload and demo traffic."""

import streamlit as st

from data.loader import load_file, parse_layout
from data.validator import validate_layout
from data.sample_data import generate_layout_df, generate_arrivals
from data.session_store import get_lot, get_layout, reset_lot, set_last_message
from models.vehicle import Vehicle
from config.defaults import DEFAULT_FLOOR_COUNT, DEFAULT_SPOTS_PER_FLOOR


def render(sidebar_state):
    """Render the Admin tab."""
    st.header("Admin")

    # --- Uniform dimensions ---
    st.subheader("Lot Dimensions")
    st.caption("Rebuilding the lot removes every parked vehicle.")
    col1, col2 = st.columns(2)
    with col1:
        num_floors = st.number_input("Floors", min_value=1, value=DEFAULT_FLOOR_COUNT, step=1)
    with col2:
        spots = st.number_input("Spots per floor", min_value=0, value=DEFAULT_SPOTS_PER_FLOOR, step=1)
    st.dataframe(generate_layout_df(int(num_floors), int(spots)), use_container_width=True, height=200)
    if st.button("Rebuild Lot", type="primary"):
        reset_lot([int(spots)] * int(num_floors))
        st.success(f"Lot rebuilt: {int(num_floors)} floors x {int(spots)} spots")

    st.divider()

    # --- Layout upload ---
    st.subheader("Upload Layout")
    uploaded = st.file_uploader("Layout file (CSV or XLSX)", type=["csv", "xlsx"])
    if uploaded is not None:
        try:
            df = load_file(uploaded)
        except ValueError as e:
            st.error(str(e))
        else:
            result = validate_layout(df)
            for e in result.errors:
                st.error(e)
            for w in result.warnings:
                st.warning(w)
            if result.is_valid and st.button("Apply Layout"):
                layout = parse_layout(df)
                reset_lot(layout)
                st.success(f"Layout applied: {len(layout)} floors, {sum(layout)} spots")

    st.caption(f"Current layout: {get_layout()}")

    st.divider()

    # --- Demo traffic ---
    st.subheader("Demo Traffic")
    count = st.slider("Arrivals", min_value=1, max_value=100, value=10)
    if st.button("Simulate Arrivals"):
        lot = get_lot()
        parked = 0
        for plate, category in generate_arrivals(count, seed=len(lot.audit_log())):
            if lot.park(Vehicle(plate, category)).ok:
                parked += 1
        set_last_message("success", f"Simulated {count} arrivals, {parked} parked.")
        st.success(f"{parked} of {count} vehicles parked.")
