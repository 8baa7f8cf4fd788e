"""
Export View
===========
Handles file downloads (CSV, Excel).
"""
import streamlit as st

from app.state.session import SessionStateManager
from oncall.io.csv_export import DEFAULT_FILENAME, csv_bytes
from oncall.io.excel_export import excel_bytes
from oncall.models.rules import RULES


def render_downloads(state: SessionStateManager):
    """Render the download section."""
    result = state.result
    if result is None:
        st.warning("Generate a schedule before exporting.")
        return

    st.subheader("📥 Downloads")
    col1, col2 = st.columns(2)

    with col1:
        st.download_button(
            "📥 Download CSV",
            csv_bytes(result.schedule, result.people),
            DEFAULT_FILENAME,
            "text/csv",
        )

    with col2:
        st.download_button(
            "📥 Download Excel",
            excel_bytes(result),
            RULES.excel_filename,
            "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        )
