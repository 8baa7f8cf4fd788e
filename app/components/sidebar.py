"""
Sidebar Components
==================
Reusable widgets for the sidebar.
"""
from typing import Any, Optional

import streamlit as st

from oncall.errors import InputUnreadableError
from oncall.io.csv_loader import load_availability
from oncall.models.shift import WEEKDAY_NAMES


def render_logo():
    """Render the app header."""
    st.sidebar.markdown("### 📟 On-Call Scheduler")


def render_file_upload() -> Optional[Any]:
    """Render file uploader."""
    return st.sidebar.file_uploader("Availability CSV", type=["csv"], key="availability_uploader")


def load_uploaded_availability(uploaded_file: Any) -> bool:
    """
    Parse a newly uploaded file into session state.

    The same upload is parsed once; reruns reuse the stored people and grid.

    Returns:
        True when the session now holds a different roster
    """
    file_key = getattr(uploaded_file, "file_id", None) or getattr(uploaded_file, "name", "upload")
    if st.session_state.get("loaded_file_key") == file_key:
        return False

    st.session_state.loaded_file_key = file_key
    try:
        people, grid = load_availability(uploaded_file)
    except InputUnreadableError as e:
        st.session_state.load_error = str(e)
        st.session_state.people = []
        st.session_state.grid = None
        return True

    st.session_state.load_error = None
    st.session_state.people = people
    st.session_state.grid = grid
    return True


def render_load_status():
    error = st.session_state.get("load_error")
    people = st.session_state.get("people")
    grid = st.session_state.get("grid")
    if error:
        st.sidebar.error(f"Error: {error}")
    elif people and grid is not None:
        st.sidebar.success(f"✅ {len(people)} people, {grid.days} days declared")
    else:
        st.sidebar.info("ℹ️ Upload the availability CSV to begin")


def render_requirements():
    """Headcount and month inputs, stored under ``cfg_*`` session keys."""
    with st.sidebar.expander("On-call headcount", expanded=True):
        st.number_input("Sunday–Wednesday", min_value=0, max_value=50, step=1, key="cfg_sun_wed")
        st.number_input("Thursday", min_value=0, max_value=50, step=1, key="cfg_thurs")
        st.number_input("Friday–Saturday", min_value=0, max_value=50, step=1, key="cfg_fri_sat")

    with st.sidebar.expander("Month", expanded=True):
        st.number_input("Days in month", min_value=1, max_value=31, step=1, key="cfg_days")
        st.selectbox(
            "First day of month",
            options=list(range(7)),
            format_func=lambda i: WEEKDAY_NAMES[i],
            key="cfg_first_day",
        )
