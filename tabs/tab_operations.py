"""Tab 1: Operations — park, remove and find vehicles."""

import streamlit as st

from data.session_store import get_lot, get_last_message, set_last_message
from models.vehicle import Vehicle, InvalidRequest
from models.allocation import AllocationStatus
from components.metrics_cards import render_lot_kpis, render_alert
from config.defaults import VEHICLE_CATEGORIES


def _show_last_message():
    msg = get_last_message()
    if not msg:
        return
    level, text = msg
    if level == "success":
        st.success(text)
    elif level == "error":
        st.error(text)
    else:
        st.warning(text)


def render(sidebar_state):
    """Render the Operations tab."""
    st.header("Operations")
    lot = get_lot()

    render_lot_kpis(lot)
    st.divider()

    _show_last_message()

    col1, col2, col3 = st.columns(3)

    with col1:
        st.subheader("Park Vehicle")
        with st.form("park_form", clear_on_submit=True):
            plate = st.text_input("License plate")
            category = st.selectbox(
                "Vehicle type",
                list(VEHICLE_CATEGORIES),
                format_func=lambda c: f"{c} ({VEHICLE_CATEGORIES[c]} spot{'s' if VEHICLE_CATEGORIES[c] > 1 else ''})",
            )
            submitted = st.form_submit_button("Park")
        if submitted:
            try:
                result = lot.park(Vehicle(plate.strip(), category))
            except InvalidRequest as e:
                set_last_message("error", str(e))
            else:
                if result.status is AllocationStatus.PARKED:
                    set_last_message("success", f"Parked {result.occupant_id} on {result.location.describe()}")
                elif result.status is AllocationStatus.ALREADY_PARKED:
                    set_last_message("warning", f"Vehicle {result.occupant_id} is already parked.")
                else:
                    set_last_message("error", f"No suitable spot available for {result.occupant_id}.")
            st.rerun()

    with col2:
        st.subheader("Remove Vehicle")
        with st.form("remove_form", clear_on_submit=True):
            plate = st.text_input("License plate", key="remove_plate")
            submitted = st.form_submit_button("Remove")
        if submitted and plate.strip():
            result = lot.release(plate.strip())
            if result.ok:
                set_last_message("success", f"Vehicle {result.occupant_id} removed from floor {result.floor_index}.")
            else:
                set_last_message("warning", f"Vehicle {result.occupant_id} not found.")
            st.rerun()

    with col3:
        st.subheader("Find Vehicle")
        plate = st.text_input("License plate", key="find_plate")
        if plate.strip():
            result = lot.locate(plate.strip())
            if result.ok:
                st.info(f"{result.occupant_id} is parked on {result.location.describe()}")
            else:
                render_alert(f"Vehicle {result.occupant_id} not found.", "warning")
