"""
On-Call Scheduler: Streamlit Web UI
====================================
Upload availability, set headcounts, generate and download the rota.
"""
import os
import sys

import streamlit as st

# Add src and project root to python path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../src"))

from app.components.styling import apply_styling
from app.components.utils import get_requirements
from app.state.session import SessionStateManager
from app.views.dashboard import render_dashboard
from app.views.export import render_downloads
from app.views.inputs import render_inputs
from oncall.errors import SchedulingError
from oncall.io.csv_loader import availability_to_dataframe
from oncall.models.person import Person
from oncall.solver.engine import solve
from oncall.utils.logging_setup import init_logging


@st.cache_resource
def _init_logging():
    return init_logging(level="INFO", log_file=None)


def main():
    _init_logging()
    SessionStateManager.init_state()
    state = SessionStateManager()
    apply_styling()

    st.title("📟 On-Call Scheduler")

    render_inputs(state)
    _handle_generate(state)

    if state.result is None:
        st.info("👋 Upload availability and generate a schedule to see results.")
        if state.people and state.grid is not None:
            st.subheader("Declared availability")
            st.dataframe(availability_to_dataframe(state.people, state.grid), width="stretch")
        return

    t1, t2 = st.tabs(["📈 Schedule", "📥 Downloads"])
    with t1:
        render_dashboard(state)
    with t2:
        render_downloads(state)


def _handle_generate(state: SessionStateManager):
    """Run the scheduler if triggered."""
    if not state.trigger_generate:
        return
    state.trigger_generate = False

    try:
        reqs = get_requirements()
        # Passes mutate people; schedule a fresh copy each time
        people = [Person(name=p.name, id=p.id) for p in state.people]
        with st.spinner("Assigning shifts..."):
            state.result = solve(people, state.grid, reqs)
    except SchedulingError as e:
        st.error(f"❌ {e}")
        return

    st.success("✅ Schedule generated")


if __name__ == "__main__":
    main()
