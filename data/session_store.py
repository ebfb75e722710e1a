"""Typed wrapper around st.session_state for the live parking lot."""

import streamlit as st
from typing import List, Optional

from engine.parking_lot import ParkingLot
from config.defaults import DEFAULT_FLOOR_COUNT, DEFAULT_SPOTS_PER_FLOOR


def initialize_session_state():
    """Initialize all session state keys with defaults."""
    defaults = {
        "lot": None,
        "layout": [DEFAULT_SPOTS_PER_FLOOR] * DEFAULT_FLOOR_COUNT,
        "last_message": None,
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default
    if st.session_state["lot"] is None:
        st.session_state["lot"] = ParkingLot(st.session_state["layout"])


# --- Getters ---

def get_lot() -> ParkingLot:
    return st.session_state["lot"]


def get_layout() -> List[int]:
    return st.session_state.get("layout", [])


def get_last_message() -> Optional[tuple]:
    return st.session_state.get("last_message")


# --- Setters ---

def reset_lot(layout: List[int]):
    """Replace the live lot with an empty one of the given layout."""
    st.session_state["lot"] = ParkingLot(layout)
    st.session_state["layout"] = list(layout)
    st.session_state["last_message"] = None


def set_last_message(level: str, text: str):
    st.session_state["last_message"] = (level, text)
