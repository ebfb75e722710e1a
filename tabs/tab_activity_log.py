"""Tab 3: Activity Log — every park and release attempt."""

import streamlit as st

from data.session_store import get_lot
from engine.occupancy import audit_dataframe
from components.tables import render_outcome_table
from config.defaults import AUDIT_ACTIONS


def render(sidebar_state):
    """Render the Activity Log tab."""
    st.header("Activity Log")

    entries = get_lot().audit_log()
    if not entries:
        st.info("No activity yet. Park a vehicle from the Operations tab.")
        return

    df = audit_dataframe(entries)

    col1, col2 = st.columns(2)
    with col1:
        actions = st.multiselect("Action", AUDIT_ACTIONS, default=AUDIT_ACTIONS, key="log_actions")
    with col2:
        plate = st.text_input("Vehicle filter", key="log_vehicle").strip()

    df = df[df["Action"].isin(actions)]
    if plate:
        df = df[df["Vehicle"].str.contains(plate, case=False, regex=False)]

    render_outcome_table(df.iloc[::-1].reset_index(drop=True))

    st.download_button(
        "Download CSV",
        data=df.to_csv(index=False).encode("utf-8"),
        file_name="parking_activity.csv",
        mime="text/csv",
    )
