"""
Input View (Sidebar)
====================
Handles file loading and requirement inputs.
"""
import streamlit as st

from app.components.sidebar import (
    load_uploaded_availability,
    render_file_upload,
    render_load_status,
    render_logo,
    render_requirements,
)
from app.state.session import SessionStateManager


def render_inputs(state: SessionStateManager):
    """Render the sidebar inputs and update state."""
    with st.sidebar:
        render_logo()

        st.header("1. Availability")
        uploaded_file = render_file_upload()
        if uploaded_file is not None and load_uploaded_availability(uploaded_file):
            state.clear_results()
        render_load_status()

        st.divider()

        st.header("2. Requirements")
        render_requirements()

        if st.button("🚀 Generate schedule", type="primary", disabled=not state.people):
            state.trigger_generate = True
