"""Parking Allocation Platform — Streamlit entry point."""

import streamlit as st
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from components.sidebar import render_sidebar
from data.session_store import initialize_session_state
from tabs import (
    tab_operations,
    tab_floor_view,
    tab_activity_log,
    tab_admin,
)


def main():
    st.set_page_config(
        page_title="Parking Lot",
        page_icon="🅿️",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    initialize_session_state()
    sidebar_state = render_sidebar()

    tab1, tab2, tab3, tab4 = st.tabs([
        "🚗 Operations",
        "🏗️ Floor View",
        "📜 Activity Log",
        "⚙️ Admin",
    ])

    with tab1:
        tab_operations.render(sidebar_state)
    with tab2:
        tab_floor_view.render(sidebar_state)
    with tab3:
        tab_activity_log.render(sidebar_state)
    with tab4:
        tab_admin.render(sidebar_state)


if __name__ == "__main__":
    main()
