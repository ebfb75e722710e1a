"""KPI cards and alert banners for the lot dashboard."""

import streamlit as st

ALERT_ICONS = {"error": "🔴", "warning": "🟡", "info": "🔵"}


def render_lot_kpis(lot):
    """One metric card per headline number of the live lot."""
    available = sum(lot.available_per_floor())
    full = lot.is_full()
    cards = [
        ("Total Spots", f"{lot.total_capacity:,}", None),
        ("Available", f"{available:,}", None),
        ("Vehicles Parked", f"{lot.parked_count():,}", None),
        ("Status", "FULL" if full else "Open", "no spots left" if full else None),
    ]
    for col, (label, value, help_text) in zip(st.columns(len(cards)), cards):
        col.metric(label=label, value=value, help=help_text)


def render_alert(message: str, severity: str = "warning"):
    """Show a capacity or lookup message in the banner style for its severity."""
    show = {"error": st.error, "warning": st.warning}.get(severity, st.info)
    show(message, icon=ALERT_ICONS.get(severity, ALERT_ICONS["info"]))
