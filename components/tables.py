"""Styled dataframe display helpers."""

import streamlit as st
import pandas as pd
from typing import Optional


def render_styled_table(
    df: pd.DataFrame,
    title: Optional[str] = None,
    height: Optional[int] = None,
    use_container_width: bool = True,
):
    """Render a styled, non-editable dataframe."""
    if title:
        st.subheader(title)
    st.dataframe(df, height=height, use_container_width=use_container_width)


def render_outcome_table(df: pd.DataFrame, outcome_column: str = "Outcome"):
    """Render an audit table with color-coded outcomes."""
    def color_outcome(val):
        if val in ("parked", "released"):
            return "color: #155724; font-weight: bold"
        elif val == "no_space_available":
            return "background-color: #ffcccc; color: #cc0000; font-weight: bold"
        elif val in ("already_parked", "not_found"):
            return "background-color: #fff3cd; color: #856404"
        return ""

    if outcome_column in df.columns:
        styled = df.style.map(color_outcome, subset=[outcome_column])
        st.dataframe(styled, use_container_width=True)
    else:
        st.dataframe(df, use_container_width=True)
